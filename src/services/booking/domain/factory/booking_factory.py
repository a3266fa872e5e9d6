from typing import Callable

from services.booking.domain.entity import Booking
from services.booking.domain.value_object import BookingId, Passenger, SeatCount
from services.flight.domain.value_object import FlightId
from services.shared.domain import IsoDateTime


class BookingFactory:
    """フライト予約エンティティのファクトリ

    - ID の採番
    - 作成日時の設定（以後不変）
    """

    def __init__(self, clock: Callable[[], IsoDateTime] = IsoDateTime.now) -> None:
        self._clock = clock

    def create(
        self, flight_id: FlightId, passenger: Passenger, seats_booked: SeatCount
    ) -> Booking:
        """新規予約エンティティを生成する

        Args:
            flight_id: 予約対象のフライトID
            passenger: 搭乗者情報
            seats_booked: 予約座席数

        Returns:
            Booking: 生成された予約エンティティ
        """
        return Booking(
            id=BookingId.generate(),
            flight_id=flight_id,
            passenger=passenger,
            seats_booked=seats_booked,
            created_at=self._clock(),
        )
