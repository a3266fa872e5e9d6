from services.flight.domain.entity import Flight
from services.flight.domain.repository import FlightRepository
from services.flight.domain.value_object import City


class SearchFlightsService:
    """フライト検索サービス

    出発地・到着地は大文字小文字を無視した全体一致。未指定（None / 空文字）は条件なし。
    """

    def __init__(self, repository: FlightRepository) -> None:
        self._repository = repository

    def search(
        self, origin: str | None = None, destination: str | None = None
    ) -> list[Flight]:
        """条件に一致するフライトをすべて返す"""
        return self._repository.search(
            origin=City(origin) if origin else None,
            destination=City(destination) if destination else None,
        )
