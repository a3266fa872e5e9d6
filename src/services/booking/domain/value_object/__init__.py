from .booking_id import BookingId
from .passenger import Passenger
from .seat_count import SeatCount

__all__ = ["BookingId", "Passenger", "SeatCount"]
