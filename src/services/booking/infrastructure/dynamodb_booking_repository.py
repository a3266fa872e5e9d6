from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId, Passenger, SeatCount
from services.flight.domain.value_object import FlightId
from services.shared.domain import IsoDateTime
from services.shared.domain.exception import DuplicateResourceException


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装

    テーブル: パーティションキー booking_id。フライトは flight_id で参照する。
    """

    def __init__(self, table) -> None:
        self.table = table

    def save(self, booking: Booking) -> None:
        """予約をDBに保存する"""

        item = {
            "booking_id": str(booking.id),
            "flight_id": str(booking.flight_id),
            "name": booking.passenger.name,
            "email": booking.passenger.email,
            "seats_booked": booking.seats_booked.value,
            "created_at": str(booking.created_at),
        }
        try:
            self.table.put_item(
                Item=item, ConditionExpression=Attr("booking_id").not_exists()
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Booking already exists: {booking.id}"
                )
            raise

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        response = self.table.get_item(
            Key={"booking_id": str(booking_id)},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_all(self) -> list[Booking]:
        """全件スキャン（LastEvaluatedKey がなくなるまで）"""
        bookings: list[Booking] = []
        kwargs: dict = {}
        while True:
            response = self.table.scan(**kwargs)
            bookings.extend(self._to_entity(item) for item in response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return bookings
            kwargs["ExclusiveStartKey"] = last_key

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Booking(
            id=BookingId(value=item["booking_id"]),
            flight_id=FlightId(value=item["flight_id"]),
            passenger=Passenger(name=item["name"], email=item["email"]),
            seats_booked=SeatCount(int(item["seats_booked"])),
            created_at=IsoDateTime.from_string(item["created_at"]),
        )
