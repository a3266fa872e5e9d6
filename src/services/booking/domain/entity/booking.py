from services.booking.domain.value_object import BookingId, Passenger, SeatCount
from services.flight.domain.value_object import FlightId
from services.shared.domain import AggregateRoot, IsoDateTime


class Booking(AggregateRoot[BookingId]):
    """フライト予約

    作成後は変更しない（追記のみ）。フライトはIDで参照するだけで、
    フライトの内容は読み出し時に結合する。
    """

    def __init__(
        self,
        id: BookingId,
        flight_id: FlightId,
        passenger: Passenger,
        seats_booked: SeatCount,
        created_at: IsoDateTime,
    ) -> None:
        super().__init__(id)

        self._flight_id = flight_id
        self._passenger = passenger
        self._seats_booked = seats_booked
        self._created_at = created_at

    @property
    def flight_id(self) -> FlightId:
        return self._flight_id

    @property
    def passenger(self) -> Passenger:
        return self._passenger

    @property
    def seats_booked(self) -> SeatCount:
        return self._seats_booked

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at
