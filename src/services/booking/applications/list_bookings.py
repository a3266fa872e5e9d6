from services.booking.applications.booking_with_flight import BookingWithFlight
from services.booking.domain.repository import BookingRepository
from services.flight.domain.entity import Flight
from services.flight.domain.repository import FlightRepository
from services.flight.domain.value_object import FlightId


class ListBookingsService:
    """予約一覧ユースケース

    予約はフライトIDしか持たないため、参照先フライトをここで明示的に結合する。
    結合するのは現在保存されているフライト（予約時点の空席数ではない）。
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        flight_repository: FlightRepository,
    ) -> None:
        self._booking_repository = booking_repository
        self._flight_repository = flight_repository

    def list_all(self) -> list[BookingWithFlight]:
        """全予約をフライト付きで返す"""
        bookings = self._booking_repository.find_all()

        flights: dict[FlightId, Flight | None] = {}
        for booking in bookings:
            if booking.flight_id not in flights:
                flights[booking.flight_id] = self._flight_repository.find_by_id(
                    booking.flight_id
                )

        return [
            BookingWithFlight(booking=booking, flight=flights[booking.flight_id])
            for booking in bookings
        ]
