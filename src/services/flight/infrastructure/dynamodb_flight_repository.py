from decimal import Decimal

from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from services.flight.domain.entity import Flight
from services.flight.domain.repository import FlightRepository
from services.flight.domain.value_object import City, FlightId
from services.shared.domain import Currency, IsoDateTime, Money
from services.shared.domain.exception import (
    DuplicateResourceException,
    InsufficientSeatsException,
    ResourceNotFoundException,
)


class DynamoDBFlightRepository(FlightRepository):
    """DynamoDBを使用したFlightRepository の具象実装

    テーブル: パーティションキー flight_id（単一アイテム = 1フライト）
    """

    def __init__(self, table) -> None:
        self.table = table

    def save(self, flight: Flight) -> None:
        """フライトをDBに保存する"""
        try:
            self.table.put_item(
                Item=self._to_item(flight),
                ConditionExpression=Attr("flight_id").not_exists(),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(f"Flight already exists: {flight.id}")
            raise

    def find_by_id(self, flight_id: FlightId) -> Flight | None:
        """フライトIDで検索"""
        response = self.table.get_item(
            Key={"flight_id": str(flight_id)},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def search(
        self, origin: City | None = None, destination: City | None = None
    ) -> list[Flight]:
        """出発地・到着地の正規化キーで全件スキャンする"""
        condition = None
        if origin is not None:
            condition = Attr("origin_key").eq(origin.key)
        if destination is not None:
            destination_condition = Attr("destination_key").eq(destination.key)
            condition = (
                destination_condition
                if condition is None
                else condition & destination_condition
            )

        kwargs: dict = {}
        if condition is not None:
            kwargs["FilterExpression"] = condition

        return [self._to_entity(item) for item in self._scan(**kwargs)]

    def count(self) -> int:
        total = 0
        kwargs: dict = {"Select": "COUNT"}
        while True:
            response = self.table.scan(**kwargs)
            total += response.get("Count", 0)
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return total
            kwargs["ExclusiveStartKey"] = last_key

    def reserve_seats(self, flight_id: FlightId, seats: int) -> Flight:
        """条件付き更新で空席を減らす

        判定と減算を1回の UpdateItem で行うため、同時予約でも seats は負にならない。
        """
        try:
            response = self.table.update_item(
                Key={"flight_id": str(flight_id)},
                UpdateExpression="SET #seats = #seats - :seats",
                ConditionExpression="attribute_exists(flight_id) AND #seats >= :seats",
                ExpressionAttributeNames={"#seats": "seats"},
                ExpressionAttributeValues={":seats": seats},
                ReturnValues="ALL_NEW",
            )
        except ClientError as e:
            if e.response["Error"]["Code"] != "ConditionalCheckFailedException":
                raise
            current = self.find_by_id(flight_id)
            if current is None:
                raise ResourceNotFoundException(f"Flight not found: {flight_id}")
            raise InsufficientSeatsException(flight_id, seats, current.seats)

        return self._to_entity(response["Attributes"])

    def release_seats(self, flight_id: FlightId, seats: int) -> None:
        self.table.update_item(
            Key={"flight_id": str(flight_id)},
            UpdateExpression="SET #seats = #seats + :seats",
            ConditionExpression="attribute_exists(flight_id)",
            ExpressionAttributeNames={"#seats": "seats"},
            ExpressionAttributeValues={":seats": seats},
        )

    def _scan(self, **kwargs) -> list[dict]:
        """LastEvaluatedKey がなくなるまでスキャンを続ける"""
        items: list[dict] = []
        while True:
            response = self.table.scan(**kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return items
            kwargs["ExclusiveStartKey"] = last_key

    def _to_item(self, flight: Flight) -> dict:
        return {
            "flight_id": str(flight.id),
            "airline": flight.airline,
            "origin": str(flight.origin),
            "origin_key": flight.origin.key,
            "destination": str(flight.destination),
            "destination_key": flight.destination.key,
            "departure_time": str(flight.departure_time),
            "arrival_time": str(flight.arrival_time),
            "price_amount": flight.price.amount,
            "price_currency": str(flight.price.currency),
            "seats": flight.seats,
        }

    def _to_entity(self, item: dict) -> Flight:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Flight(
            id=FlightId(value=item["flight_id"]),
            airline=item["airline"],
            origin=City(item["origin"]),
            destination=City(item["destination"]),
            departure_time=IsoDateTime.from_string(item["departure_time"]),
            arrival_time=IsoDateTime.from_string(item["arrival_time"]),
            price=Money(
                amount=Decimal(str(item["price_amount"])),
                currency=Currency(item["price_currency"]),
            ),
            seats=int(item["seats"]),
        )
