from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.shared.utils import text_response

logger = Logger()

STATUS_MESSAGE = "SkySwift API is running. Use /api/flights or /api/bookings"


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """稼働確認 Lambda Handler（GET /）"""
    return text_response(200, STATUS_MESSAGE)
