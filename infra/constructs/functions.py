import datetime

from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from aws_cdk import triggers
from constructs import Construct


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        flights_table: dynamodb.Table,
        bookings_table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
    ) -> None:
        super().__init__(scope, id)

        self._flights_table = flights_table
        self._bookings_table = bookings_table
        self._common_layer = common_layer

        self.list_flights = self._create_function(
            "ListFlightsLambda",
            "services.flight.handlers.list_flights.lambda_handler",
            "flight-service",
        )

        self.seed_flights = self._create_function(
            "SeedFlightsLambda",
            "services.flight.handlers.seed.lambda_handler",
            "flight-service",
        )

        self.create_booking = self._create_function(
            "CreateBookingLambda",
            "services.booking.handlers.create_booking.lambda_handler",
            "booking-service",
        )

        self.list_bookings = self._create_function(
            "ListBookingsLambda",
            "services.booking.handlers.list_bookings.lambda_handler",
            "booking-service",
        )

        self.status = self._create_function(
            "StatusLambda",
            "services.status.handlers.root.lambda_handler",
            "status-service",
        )

        flights_table.grant_read_data(self.list_flights)
        flights_table.grant_read_write_data(self.seed_flights)
        flights_table.grant_read_write_data(self.create_booking)
        bookings_table.grant_read_write_data(self.create_booking)
        flights_table.grant_read_data(self.list_bookings)
        bookings_table.grant_read_data(self.list_bookings)

        # デプロイ時にデモ用フライトを投入（テーブルが空の場合のみ）
        triggers.Trigger(
            self,
            "SeedFlightsTrigger",
            handler=self.seed_flights,
            execute_after=[flights_table],
        )

    def _create_function(
        self,
        id: str,
        handler: str,
        service_name: str,
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=_lambda.Runtime.PYTHON_3_14,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[self._common_layer],
            environment={
                "FLIGHTS_TABLE_NAME": self._flights_table.table_name,
                "BOOKINGS_TABLE_NAME": self._bookings_table.table_name,
                "POWERTOOLS_SERVICE_NAME": service_name,
                "DEPLOY_TIME": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            },
        )
