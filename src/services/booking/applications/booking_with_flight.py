from dataclasses import dataclass

from services.booking.domain.entity import Booking
from services.flight.domain.entity import Flight


@dataclass(frozen=True)
class BookingWithFlight:
    """予約と参照先フライトを結合した読み取りモデル

    flight は結合時点で保存されているフライト。参照先が消えていれば None。
    """

    booking: Booking
    flight: Flight | None
