from aws_lambda_powertools import Logger

from services.booking.applications.booking_with_flight import BookingWithFlight
from services.booking.domain.factory import BookingFactory
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import Passenger, SeatCount
from services.flight.domain.repository import FlightRepository
from services.flight.domain.value_object import FlightId
from services.shared.domain.exception import ResourceNotFoundException

logger = Logger(child=True)


class CreateBookingService:
    """フライト予約ユースケース

    1. フライトを取得（なければ ResourceNotFoundException）
    2. 空席を確認（足りなければ InsufficientSeatsException、何も書き込まない）
    3. 条件付き更新で空席を減らす
    4. 予約を保存（失敗したら確保した座席を戻す）
    5. 予約と更新後のフライトを結合して返す
    """

    def __init__(
        self,
        flight_repository: FlightRepository,
        booking_repository: BookingRepository,
        factory: BookingFactory,
    ) -> None:
        self._flight_repository = flight_repository
        self._booking_repository = booking_repository
        self._factory = factory

    def book(
        self, flight_id: FlightId, passenger: Passenger, seats_booked: SeatCount
    ) -> BookingWithFlight:
        """座席を確保して予約を作成する"""
        flight = self._flight_repository.find_by_id(flight_id)
        if flight is None:
            raise ResourceNotFoundException(f"Flight not found: {flight_id}")

        flight.ensure_seats_available(seats_booked.value)

        updated_flight = self._flight_repository.reserve_seats(
            flight_id, seats_booked.value
        )

        booking = self._factory.create(flight_id, passenger, seats_booked)
        try:
            self._booking_repository.save(booking)
        except Exception:
            # 補償トランザクション: 確保した座席を戻す
            try:
                self._flight_repository.release_seats(flight_id, seats_booked.value)
            except Exception:
                logger.exception(
                    "Failed to release reserved seats",
                    extra={"flight_id": str(flight_id), "seats": seats_booked.value},
                )
            raise

        return BookingWithFlight(booking=booking, flight=updated_flight)
