from dataclasses import dataclass


@dataclass(frozen=True)
class City:
    """都市名（出発地・到着地）

    表示用の値はそのまま保持し、比較は大文字小文字を無視した全体一致で行う。
    例: "Bengaluru" と "BENGALURU" は一致、"Bengal" とは一致しない
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("City cannot be empty")

    def __str__(self) -> str:
        return self.value

    @property
    def key(self) -> str:
        """検索用の正規化キー"""
        return self.value.casefold()

    def matches(self, other: "City") -> bool:
        return self.key == other.key
