from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_FLIGHTS_TABLE_NAME = "skyswift-flights"
DEFAULT_BOOKINGS_TABLE_NAME = "skyswift-bookings"


@dataclass(frozen=True)
class Settings:
    """実行環境ごとの設定（環境変数から読み込む）"""

    flights_table_name: str = DEFAULT_FLIGHTS_TABLE_NAME
    bookings_table_name: str = DEFAULT_BOOKINGS_TABLE_NAME
    dynamodb_endpoint_url: str | None = None

    @classmethod
    def from_env(cls) -> Settings:
        """環境変数から生成する

        DYNAMODB_ENDPOINT_URL は DynamoDB Local 向け。未設定なら AWS の既定エンドポイント。
        """
        return cls(
            flights_table_name=os.getenv("FLIGHTS_TABLE_NAME", DEFAULT_FLIGHTS_TABLE_NAME),
            bookings_table_name=os.getenv(
                "BOOKINGS_TABLE_NAME", DEFAULT_BOOKINGS_TABLE_NAME
            ),
            dynamodb_endpoint_url=os.getenv("DYNAMODB_ENDPOINT_URL") or None,
        )
