class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class InsufficientSeatsException(BusinessRuleViolationException):
    """空席数が要求座席数に満たない場合（条件付き更新の失敗を含む）"""

    def __init__(self, flight_id: object, requested: int, available: int | None = None):
        self.flight_id = flight_id
        self.requested = requested
        self.available = available
        super().__init__(
            f"Not enough seats on flight {flight_id}: "
            f"requested={requested}, available={available}"
        )


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass
