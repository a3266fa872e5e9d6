from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.flight.applications.seed_flights import SeedFlightsService
from services.flight.domain.factory import FlightFactory
from services.flight.infrastructure import DynamoDBFlightRepository
from services.shared.infrastructure import Settings, create_dynamodb_resource

logger = Logger()


settings = Settings.from_env()
dynamodb = create_dynamodb_resource(settings)
repository = DynamoDBFlightRepository(dynamodb.Table(settings.flights_table_name))
service = SeedFlightsService(repository=repository, factory=FlightFactory())


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """デモ用フライト投入 Lambda Handler

    デプロイ時のトリガーから呼び出される。テーブルが空でなければ何もしない。
    """
    logger.info("Received seed flights request")

    flights = service.seed()
    if flights:
        logger.info("Seeded sample flights", extra={"count": len(flights)})
    else:
        logger.info("Flights table is not empty, skipping seed")

    return {"inserted": len(flights)}
