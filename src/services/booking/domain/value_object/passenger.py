from dataclasses import dataclass


@dataclass(frozen=True)
class Passenger:
    """搭乗者情報

    名前・メールアドレスは呼び出し元から受け取った値をそのまま保持する（形式チェックなし）。
    """

    name: str
    email: str
