import copy
import os
from dataclasses import dataclass
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

# ハンドラモジュールは import 時に boto3 リソースを生成するため、先にリージョンを設定する
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-south-1")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "skyswift-test")

from services.booking.domain.entity import Booking  # noqa: E402
from services.booking.domain.repository import BookingRepository  # noqa: E402
from services.booking.domain.value_object import BookingId  # noqa: E402
from services.flight.domain.entity import Flight  # noqa: E402
from services.flight.domain.repository import FlightRepository  # noqa: E402
from services.flight.domain.value_object import City, FlightId  # noqa: E402
from services.shared.domain import Currency, IsoDateTime, Money  # noqa: E402
from services.shared.domain.exception import (  # noqa: E402
    DuplicateResourceException,
    ResourceNotFoundException,
)


class InMemoryFlightRepository(FlightRepository):
    """テスト用のインメモリ FlightRepository

    取り出すたびにコピーを返し、ストアのスナップショットと同じ振る舞いにする。
    """

    def __init__(self) -> None:
        self.flights: dict[FlightId, Flight] = {}

    def save(self, flight: Flight) -> None:
        if flight.id in self.flights:
            raise DuplicateResourceException(f"Flight already exists: {flight.id}")
        self.flights[flight.id] = copy.deepcopy(flight)

    def find_by_id(self, flight_id: FlightId) -> Flight | None:
        flight = self.flights.get(flight_id)
        return copy.deepcopy(flight) if flight is not None else None

    def search(
        self, origin: City | None = None, destination: City | None = None
    ) -> list[Flight]:
        return [
            copy.deepcopy(flight)
            for flight in self.flights.values()
            if flight.matches(origin, destination)
        ]

    def count(self) -> int:
        return len(self.flights)

    def reserve_seats(self, flight_id: FlightId, seats: int) -> Flight:
        flight = self.flights.get(flight_id)
        if flight is None:
            raise ResourceNotFoundException(f"Flight not found: {flight_id}")
        flight.reserve_seats(seats)
        return copy.deepcopy(flight)

    def release_seats(self, flight_id: FlightId, seats: int) -> None:
        self.flights[flight_id].release_seats(seats)


class InMemoryBookingRepository(BookingRepository):
    """テスト用のインメモリ BookingRepository（挿入順を保持）"""

    def __init__(self) -> None:
        self.bookings: dict[BookingId, Booking] = {}

    def save(self, booking: Booking) -> None:
        if booking.id in self.bookings:
            raise DuplicateResourceException(f"Booking already exists: {booking.id}")
        self.bookings[booking.id] = booking

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        return self.bookings.get(booking_id)

    def find_all(self) -> list[Booking]:
        return list(self.bookings.values())


@pytest.fixture
def create_flight():
    """Flight を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        flight_id: str = "flight-1",
        airline: str = "Aurora Air",
        origin: str = "Bengaluru",
        destination: str = "Chennai",
        departure_time: str = "2025-01-01T10:00:00+00:00",
        arrival_time: str = "2025-01-01T11:00:00+00:00",
        price_amount: Decimal = Decimal("3200"),
        seats: int = 12,
    ) -> Flight:
        return Flight(
            id=FlightId(value=flight_id),
            airline=airline,
            origin=City(origin),
            destination=City(destination),
            departure_time=IsoDateTime.from_string(departure_time),
            arrival_time=IsoDateTime.from_string(arrival_time),
            price=Money(amount=price_amount, currency=Currency("INR")),
            seats=seats,
        )

    return _factory


@pytest.fixture
def flight_repository():
    """インメモリ FlightRepository フィクスチャ"""
    return InMemoryFlightRepository()


@pytest.fixture
def booking_repository():
    """インメモリ BookingRepository フィクスチャ"""
    return InMemoryBookingRepository()


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def lambda_context():
    """Powertools Logger が参照する最小限の LambdaContext"""

    @dataclass
    class LambdaContext:
        function_name: str = "test-function"
        memory_limit_in_mb: int = 128
        invoked_function_arn: str = (
            "arn:aws:lambda:ap-south-1:123456789012:function:test-function"
        )
        aws_request_id: str = "52fdfc07-2182-454f-963f-5f0f9a621d72"

    return LambdaContext()
