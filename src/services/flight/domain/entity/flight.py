from services.flight.domain.value_object import City, FlightId
from services.shared.domain import AggregateRoot, IsoDateTime, Money
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    InsufficientSeatsException,
)


class Flight(AggregateRoot[FlightId]):
    """フライト（空席在庫を持つ集約）"""

    def __init__(
        self,
        id: FlightId,
        airline: str,
        origin: City,
        destination: City,
        departure_time: IsoDateTime,
        arrival_time: IsoDateTime,
        price: Money,
        seats: int,
    ) -> None:
        super().__init__(id)

        self._airline = airline
        self._origin = origin
        self._destination = destination
        self._departure_time = departure_time
        self._arrival_time = arrival_time
        self._price = price
        self._seats = seats

        self._validate_schedule()
        self._validate_seats()

    def _validate_schedule(self) -> None:
        """出発時刻 < 到着時刻"""
        if not self._departure_time.is_before(self._arrival_time):
            raise BusinessRuleViolationException(
                "Departure time must be before arrival time"
            )

    def _validate_seats(self) -> None:
        """空席数は0以上"""
        if self._seats < 0:
            raise BusinessRuleViolationException("Seats cannot be negative")

    @property
    def airline(self) -> str:
        return self._airline

    @property
    def origin(self) -> City:
        return self._origin

    @property
    def destination(self) -> City:
        return self._destination

    @property
    def departure_time(self) -> IsoDateTime:
        return self._departure_time

    @property
    def arrival_time(self) -> IsoDateTime:
        return self._arrival_time

    @property
    def price(self) -> Money:
        return self._price

    @property
    def seats(self) -> int:
        return self._seats

    def matches(self, origin: City | None, destination: City | None) -> bool:
        """検索条件に一致するか（None はワイルドカード）"""
        if origin is not None and not self._origin.matches(origin):
            return False
        if destination is not None and not self._destination.matches(destination):
            return False
        return True

    def ensure_seats_available(self, seats: int) -> None:
        """要求座席数を確保できなければ InsufficientSeatsException"""
        if self._seats < seats:
            raise InsufficientSeatsException(self.id, seats, self._seats)

    def reserve_seats(self, seats: int) -> None:
        """空席を減らす（メモリ上の集約に対する操作）

        永続化層ではこれと同じ判定を条件付き更新で原子的に行う。
        """
        self.ensure_seats_available(seats)
        self._seats -= seats

    def release_seats(self, seats: int) -> None:
        """確保済みの座席を戻す（補償処理用）"""
        self._seats += seats
