import boto3

from .settings import Settings


def create_dynamodb_resource(settings: Settings):
    """DynamoDB リソースを生成する

    実行環境（コールドスタート）ごとに1度だけ呼び出し、
    生成したリソースを各 Repository に渡す。
    """
    if settings.dynamodb_endpoint_url:
        return boto3.resource("dynamodb", endpoint_url=settings.dynamodb_endpoint_url)
    return boto3.resource("dynamodb")
