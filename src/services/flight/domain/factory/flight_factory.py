from decimal import Decimal
from typing import TypedDict

from services.flight.domain.entity import Flight
from services.flight.domain.value_object import City, FlightId
from services.shared.domain import Currency, IsoDateTime, Money
from services.shared.utils import to_decimal


class FlightDetails(TypedDict):
    """フライト詳細の入力データ構造"""

    airline: str
    origin: str
    destination: str
    departure_time: str
    arrival_time: str
    price_amount: Decimal
    price_currency: str
    seats: int


class FlightFactory:
    """フライトエンティティのファクトリ

    - ID の採番
    - プリミティブ型から Value Object への変換
    """

    def create(self, details: FlightDetails) -> Flight:
        """新規フライトエンティティを生成する

        Args:
            details: フライト詳細情報

        Returns:
            Flight: 新しい FlightId を持つフライト
        """
        return Flight(
            id=FlightId.generate(),
            airline=details["airline"],
            origin=City(details["origin"]),
            destination=City(details["destination"]),
            departure_time=IsoDateTime.from_string(details["departure_time"]),
            arrival_time=IsoDateTime.from_string(details["arrival_time"]),
            price=Money(
                amount=to_decimal(details["price_amount"]),
                currency=Currency(details["price_currency"]),
            ),
            seats=details["seats"],
        )
