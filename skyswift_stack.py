from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs import Api, Database, Deployment, Functions, Layers


class SkySwiftStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")
        layers = Layers(self, "Layers")

        fns = Functions(
            self,
            "Functions",
            flights_table=database.flights_table,
            bookings_table=database.bookings_table,
            common_layer=layers.common_layer,
        )

        deployment = Deployment(
            self,
            "Deployment",
            create_booking=fns.create_booking,
        )

        api = Api(
            self,
            "Api",
            status=fns.status,
            list_flights=fns.list_flights,
            create_booking=deployment.create_booking_alias,
            list_bookings=fns.list_bookings,
        )

        CfnOutput(self, "ApiUrl", value=api.rest_api.url)
