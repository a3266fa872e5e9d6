from datetime import timedelta
from decimal import Decimal
from typing import Callable, NamedTuple

from services.flight.domain.entity import Flight
from services.flight.domain.factory import FlightDetails, FlightFactory
from services.flight.domain.repository import FlightRepository
from services.shared.domain import IsoDateTime


class DemoFlight(NamedTuple):
    """デモ用フライトの定義（時刻は投入時点からの相対値）"""

    airline: str
    origin: str
    destination: str
    depart_in: timedelta
    arrive_in: timedelta
    price: Decimal
    seats: int


DEMO_FLIGHTS: tuple[DemoFlight, ...] = (
    DemoFlight(
        "Aurora Air", "Bengaluru", "Chennai",
        timedelta(hours=24), timedelta(hours=25), Decimal("3200"), 12,
    ),
    DemoFlight(
        "BlueSkies", "Bengaluru", "Mumbai",
        timedelta(hours=48), timedelta(hours=49), Decimal("4200"), 8,
    ),
    DemoFlight(
        "JetNova", "Chennai", "Delhi",
        timedelta(hours=72), timedelta(hours=73, minutes=20), Decimal("5200"), 24,
    ),
    DemoFlight(
        "AirVista", "Ahmedabad", "Mumbai",
        timedelta(hours=100), timedelta(hours=101, minutes=40), Decimal("2800"), 15,
    ),
)  # fmt: skip


class SeedFlightsService:
    """デモ用フライトの投入サービス

    テーブルが空の場合のみ投入するため、何度実行しても結果は変わらない。
    """

    def __init__(
        self,
        repository: FlightRepository,
        factory: FlightFactory,
        clock: Callable[[], IsoDateTime] = IsoDateTime.now,
    ) -> None:
        self._repository = repository
        self._factory = factory
        self._clock = clock

    def seed(self) -> list[Flight]:
        """デモ用フライトを投入し、投入したフライトを返す（投入済みなら空リスト）"""
        if self._repository.count() > 0:
            return []

        now = self._clock()
        flights = [self._factory.create(self._to_details(demo, now)) for demo in DEMO_FLIGHTS]
        for flight in flights:
            self._repository.save(flight)
        return flights

    @staticmethod
    def _to_details(demo: DemoFlight, now: IsoDateTime) -> FlightDetails:
        return {
            "airline": demo.airline,
            "origin": demo.origin,
            "destination": demo.destination,
            "departure_time": str(now.shifted(demo.depart_in)),
            "arrival_time": str(now.shifted(demo.arrive_in)),
            "price_amount": demo.price,
            "price_currency": "INR",
            "seats": demo.seats,
        }
