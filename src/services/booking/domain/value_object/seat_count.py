from dataclasses import dataclass


@dataclass(frozen=True)
class SeatCount:
    """予約座席数（1以上の整数）"""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Seat count must be an integer: {self.value!r}")
        if self.value < 1:
            raise ValueError(f"Seat count must be positive: {self.value}")

    def __int__(self) -> int:
        return self.value
