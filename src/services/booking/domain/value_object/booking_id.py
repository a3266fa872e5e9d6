from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class BookingId:
    """予約ID（作成時に採番する UUID）"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("BookingId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> BookingId:
        """新しい BookingId を採番する"""
        return cls(value=uuid.uuid4().hex)
