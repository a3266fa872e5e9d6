from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Api(Construct):
    """API Gateway Construct

    GET  /              -> status
    GET  /api/flights   -> list_flights
    POST /api/bookings  -> create_booking
    GET  /api/bookings  -> list_bookings
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        status: _lambda.IFunction,
        list_flights: _lambda.IFunction,
        create_booking: _lambda.IFunction,
        list_bookings: _lambda.IFunction,
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "SkySwiftRestApi",
            rest_api_name="SkySwift Flight Booking API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=10,
                throttling_rate_limit=5,
            ),
            default_cors_preflight_options=apigw.CorsOptions(
                allow_origins=apigw.Cors.ALL_ORIGINS,
                allow_methods=["GET", "POST", "OPTIONS"],
                allow_headers=["Content-Type"],
            ),
        )

        self.rest_api.root.add_method("GET", apigw.LambdaIntegration(status))

        api_resource = self.rest_api.root.add_resource("api")

        flights_resource = api_resource.add_resource("flights")
        flights_resource.add_method("GET", apigw.LambdaIntegration(list_flights))

        bookings_resource = api_resource.add_resource("bookings")
        bookings_resource.add_method("POST", apigw.LambdaIntegration(create_booking))
        bookings_resource.add_method("GET", apigw.LambdaIntegration(list_bookings))
