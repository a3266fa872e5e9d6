from decimal import Decimal

from pydantic import ValidationError


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    DynamoDB は float を受け付けないため、数値は書き込み前に Decimal へ揃える。
    すでに Decimal の場合はそのまま返し、それ以外は str 経由で変換する（float の誤差回避）。
    """
    if isinstance(v, Decimal):
        return v
    return Decimal(str(v))


def validation_details(error: ValidationError) -> list[dict]:
    """pydantic の ValidationError をレスポンス用の一覧に変換する"""
    return [
        {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
        for err in error.errors()
    ]
