from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.list_bookings import ListBookingsService
from services.booking.handlers.response_models import to_list_response
from services.booking.infrastructure import DynamoDBBookingRepository
from services.flight.infrastructure import DynamoDBFlightRepository
from services.shared.infrastructure import Settings, create_dynamodb_resource
from services.shared.utils import api_response, error_response

logger = Logger()


settings = Settings.from_env()
dynamodb = create_dynamodb_resource(settings)
service = ListBookingsService(
    booking_repository=DynamoDBBookingRepository(
        dynamodb.Table(settings.bookings_table_name)
    ),
    flight_repository=DynamoDBFlightRepository(
        dynamodb.Table(settings.flights_table_name)
    ),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約一覧取得 Lambda Handler（GET /api/bookings）"""

    logger.info("Listing all bookings")

    try:
        results = service.list_all()
    except Exception:
        logger.exception("Failed to list bookings")
        return error_response(500, "Server error")

    return api_response(200, to_list_response(results))
