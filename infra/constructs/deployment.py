from aws_cdk import Duration
from aws_cdk import aws_cloudwatch as cloudwatch
from aws_cdk import aws_codedeploy as codedeploy
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Deployment(Construct):
    """予約 Lambda のカナリアデプロイを管理する Construct

    座席在庫を書き換える関数だけをエイリアス経由で段階的に切り替える。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        create_booking: _lambda.Function,
        error_rate_threshold: float = 5,
    ) -> None:
        super().__init__(scope, id)

        self.create_booking_alias = _lambda.Alias(
            self,
            "CreateBookingAlias",
            alias_name="Prod",
            version=create_booking.current_version,
        )

        self.error_rate_alarm = cloudwatch.Alarm(
            self,
            "CreateBookingErrorRateAlarm",
            metric=cloudwatch.MathExpression(
                expression="(errors / invocations) * 100",
                using_metrics={
                    "errors": create_booking.metric_errors(statistic="Sum"),
                    "invocations": create_booking.metric_invocations(statistic="Sum"),
                },
                label="CreateBooking Error Rate %",
                period=Duration.minutes(1),
            ),
            threshold=error_rate_threshold,
            evaluation_periods=2,
            comparison_operator=cloudwatch.ComparisonOperator.GREATER_THAN_OR_EQUAL_TO_THRESHOLD,
            treat_missing_data=cloudwatch.TreatMissingData.NOT_BREACHING,
        )

        codedeploy.LambdaDeploymentGroup(
            self,
            "CreateBookingDeploymentGroup",
            alias=self.create_booking_alias,
            deployment_config=codedeploy.LambdaDeploymentConfig.CANARY_10_PERCENT_5_MINUTES,
            alarms=[self.error_rate_alarm],
        )
