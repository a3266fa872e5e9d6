from .entity import Booking as Booking
from .factory import BookingFactory as BookingFactory
from .repository import BookingRepository as BookingRepository
from .value_object import BookingId as BookingId
from .value_object import Passenger as Passenger
from .value_object import SeatCount as SeatCount
