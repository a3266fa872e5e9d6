from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.applications.create_booking import CreateBookingService
from services.booking.domain.factory import BookingFactory
from services.booking.domain.value_object import Passenger, SeatCount
from services.booking.handlers.request_models import CreateBookingRequest
from services.booking.handlers.response_models import to_response
from services.booking.infrastructure import DynamoDBBookingRepository
from services.flight.domain.value_object import FlightId
from services.flight.infrastructure import DynamoDBFlightRepository
from services.shared.domain.exception import (
    InsufficientSeatsException,
    ResourceNotFoundException,
)
from services.shared.infrastructure import Settings, create_dynamodb_resource
from services.shared.utils import api_response, error_response, validation_details

logger = Logger()


# =============================================================================
# 依存関係の組み立て（Composition Root）
# =============================================================================
settings = Settings.from_env()
dynamodb = create_dynamodb_resource(settings)
flight_repository = DynamoDBFlightRepository(dynamodb.Table(settings.flights_table_name))
booking_repository = DynamoDBBookingRepository(
    dynamodb.Table(settings.bookings_table_name)
)
service = CreateBookingService(
    flight_repository=flight_repository,
    booking_repository=booking_repository,
    factory=BookingFactory(),
)


# =============================================================================
# Lambda エントリーポイント
# =============================================================================
@logger.inject_lambda_context(clear_state=True)
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """フライト予約 Lambda Handler（POST /api/bookings）

    404: フライトが存在しない / 400: 空席不足・リクエスト不正 / 500: それ以外
    """
    logger.info("Received create booking request")

    try:
        request = CreateBookingRequest.model_validate_json(event.body or "{}")
    except ValidationError as e:
        logger.info("Invalid booking request", extra={"errors": e.error_count()})
        return error_response(400, "Invalid request", validation_details(e))

    logger.append_keys(flight_id=request.flight_id)

    try:
        flight_id = FlightId(value=request.flight_id)
        passenger = Passenger(name=request.name, email=request.email)
        seats_booked = SeatCount(request.seats_booked)
    except ValueError as e:
        logger.info("Invalid booking request", extra={"reason": str(e)})
        return error_response(400, "Invalid request")

    try:
        result = service.book(
            flight_id=flight_id, passenger=passenger, seats_booked=seats_booked
        )
    except ResourceNotFoundException:
        logger.info("Flight not found")
        return error_response(404, "Flight not found")
    except InsufficientSeatsException as e:
        logger.info(
            "Not enough seats",
            extra={"requested": e.requested, "available": e.available},
        )
        return error_response(400, "Not enough seats")
    except Exception:
        logger.exception("Failed to create booking")
        return error_response(500, "Server error")

    logger.info("Booking created", extra={"booking_id": str(result.booking.id)})
    return api_response(200, to_response(result))
