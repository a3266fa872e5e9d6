from aws_cdk import RemovalPolicy
from aws_cdk import aws_dynamodb as dynamodb
from constructs import Construct


class Database(Construct):
    """DynamoDB Construct（flights / bookings の2テーブル）"""

    def __init__(self, scope: Construct, id: str) -> None:
        super().__init__(scope, id)

        self.flights_table = self._create_table("FlightsTable", "flight_id")
        self.bookings_table = self._create_table("BookingsTable", "booking_id")

    def _create_table(self, id: str, partition_key: str) -> dynamodb.Table:
        return dynamodb.Table(
            self,
            id,
            partition_key=dynamodb.Attribute(
                name=partition_key, type=dynamodb.AttributeType.STRING
            ),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            removal_policy=RemovalPolicy.DESTROY,
        )
