from abc import abstractmethod

from services.flight.domain.entity import Flight
from services.flight.domain.value_object import City, FlightId
from services.shared.domain import Repository


class FlightRepository(Repository[Flight, FlightId]):
    """フライトレポジトリ"""

    @abstractmethod
    def save(self, flight: Flight) -> None:
        """新規フライトを永続化する（既存IDの上書きは不可）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, flight_id: FlightId) -> Flight | None:
        """フライトIDで検索"""
        raise NotImplementedError

    @abstractmethod
    def search(
        self, origin: City | None = None, destination: City | None = None
    ) -> list[Flight]:
        """出発地・到着地で検索（None はワイルドカード、件数制限なし）"""
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        """登録済みフライト数"""
        raise NotImplementedError

    @abstractmethod
    def reserve_seats(self, flight_id: FlightId, seats: int) -> Flight:
        """空席が seats 以上ある場合に限り、原子的に seats だけ減らす

        Returns:
            Flight: 更新後のフライト

        Raises:
            ResourceNotFoundException: フライトが存在しない
            InsufficientSeatsException: 空席が足りない
        """
        raise NotImplementedError

    @abstractmethod
    def release_seats(self, flight_id: FlightId, seats: int) -> None:
        """確保した座席を戻す（補償トランザクション用）"""
        raise NotImplementedError
