import json

from pydantic import BaseModel

_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
}


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    error: str
    details: list | None = None


def api_response(status_code: int, body: dict | list) -> dict:
    """API Gateway Lambda Proxy Integration の JSON レスポンスを生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json", **_CORS_HEADERS},
        "body": json.dumps(body, default=str),
    }


def error_response(status_code: int, message: str, details: list | None = None) -> dict:
    """エラーレスポンスを生成"""
    body = ErrorResponse(error=message, details=details).model_dump(exclude_none=True)
    return api_response(status_code, body)


def text_response(status_code: int, body: str) -> dict:
    """プレーンテキストのレスポンスを生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "text/plain; charset=utf-8", **_CORS_HEADERS},
        "body": body,
    }
