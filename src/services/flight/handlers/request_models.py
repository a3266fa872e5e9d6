from pydantic import BaseModel, Field, field_validator


class SearchFlightsQuery(BaseModel):
    """フライト検索のクエリパラメータ（GET /api/flights?from=...&to=...）"""

    origin: str | None = Field(
        default=None,
        alias="from",
        description="出発地（大文字小文字を無視した全体一致）",
        examples=["Bengaluru"],
    )

    destination: str | None = Field(
        default=None,
        alias="to",
        description="到着地（大文字小文字を無視した全体一致）",
        examples=["Chennai"],
    )

    model_config = {"populate_by_name": True}

    @field_validator("origin", "destination", mode="before")
    @classmethod
    def empty_to_none(cls, v):
        """空文字は未指定として扱う"""
        if v == "":
            return None
        return v
