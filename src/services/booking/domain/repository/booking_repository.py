from abc import abstractmethod
from typing import Optional

from services.booking.domain.entity import Booking
from services.booking.domain.value_object import BookingId
from services.shared.domain import Repository


class BookingRepository(Repository[Booking, BookingId]):
    """フライト予約レポジトリ"""

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """永続化する（既存IDの上書きは不可）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Optional[Booking]:
        """予約IDで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Booking]:
        """全予約を返す（件数制限なし）"""
        raise NotImplementedError
