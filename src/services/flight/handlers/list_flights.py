from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.flight.applications.search_flights import SearchFlightsService
from services.flight.handlers.request_models import SearchFlightsQuery
from services.flight.handlers.response_models import to_response
from services.flight.infrastructure import DynamoDBFlightRepository
from services.shared.infrastructure import Settings, create_dynamodb_resource
from services.shared.utils import api_response, error_response, validation_details

logger = Logger()


settings = Settings.from_env()
dynamodb = create_dynamodb_resource(settings)
repository = DynamoDBFlightRepository(dynamodb.Table(settings.flights_table_name))
service = SearchFlightsService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """フライト検索 Lambda Handler（GET /api/flights）"""

    try:
        query = SearchFlightsQuery.model_validate(event.query_string_parameters or {})
    except ValidationError as e:
        return error_response(400, "Invalid query", validation_details(e))

    logger.info(
        "Searching flights",
        extra={"from": query.origin, "to": query.destination},
    )

    try:
        flights = service.search(query.origin, query.destination)
    except Exception:
        logger.exception("Failed to search flights")
        return error_response(500, "Server error")

    logger.info("Found flights", extra={"count": len(flights)})
    return api_response(200, to_response(flights))
