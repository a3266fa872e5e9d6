from datetime import timedelta

from services.flight.applications.seed_flights import DEMO_FLIGHTS, SeedFlightsService
from services.flight.domain.factory import FlightFactory
from services.shared.domain import IsoDateTime

NOW = IsoDateTime.from_string("2025-01-01T00:00:00+00:00")


class TestSeedFlightsService:
    """SeedFlightsService のテスト"""

    def test_seeds_demo_flights_into_empty_store(self, flight_repository):
        """空のストアにはデモ用フライト4件を投入する"""
        service = SeedFlightsService(
            repository=flight_repository, factory=FlightFactory(), clock=lambda: NOW
        )

        flights = service.seed()

        assert len(flights) == len(DEMO_FLIGHTS) == 4
        assert flight_repository.count() == 4
        routes = {(str(f.origin), str(f.destination), f.seats) for f in flights}
        assert routes == {
            ("Bengaluru", "Chennai", 12),
            ("Bengaluru", "Mumbai", 8),
            ("Chennai", "Delhi", 24),
            ("Ahmedabad", "Mumbai", 15),
        }

    def test_schedule_is_relative_to_now(self, flight_repository):
        service = SeedFlightsService(
            repository=flight_repository, factory=FlightFactory(), clock=lambda: NOW
        )

        flights = service.seed()

        aurora = next(f for f in flights if f.airline == "Aurora Air")
        assert aurora.departure_time == NOW.shifted(timedelta(hours=24))
        assert aurora.arrival_time == NOW.shifted(timedelta(hours=25))
        assert str(aurora.price) == "3200 INR"

    def test_seed_is_idempotent(self, flight_repository):
        """2回目の実行では何も投入しない"""
        service = SeedFlightsService(
            repository=flight_repository, factory=FlightFactory(), clock=lambda: NOW
        )

        service.seed()
        second = service.seed()

        assert second == []
        assert flight_repository.count() == 4

    def test_non_empty_store_is_left_untouched(self, mock_repository):
        mock_repository.count.return_value = 1
        service = SeedFlightsService(repository=mock_repository, factory=FlightFactory())

        assert service.seed() == []
        mock_repository.save.assert_not_called()
