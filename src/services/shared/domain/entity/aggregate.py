from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 配下の値へのアクセスは必ず集約ルートを経由
    - 永続化の単位 = 集約 = DynamoDB の1アイテム
    """

    def __init__(self, id: ID) -> None:
        super().__init__(id)
