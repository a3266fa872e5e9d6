from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from services.flight.domain.value_object import City, FlightId
from services.flight.infrastructure import DynamoDBFlightRepository
from services.shared.domain.exception import (
    DuplicateResourceException,
    InsufficientSeatsException,
    ResourceNotFoundException,
)


def _item(flight_id: str = "flight-1", seats: int = 12, **overrides) -> dict:
    """DynamoDB から返るアイテム（数値は Decimal）"""
    item = {
        "flight_id": flight_id,
        "airline": "Aurora Air",
        "origin": "Bengaluru",
        "origin_key": "bengaluru",
        "destination": "Chennai",
        "destination_key": "chennai",
        "departure_time": "2025-01-01T10:00:00+00:00",
        "arrival_time": "2025-01-01T11:00:00+00:00",
        "price_amount": Decimal("3200"),
        "price_currency": "INR",
        "seats": Decimal(seats),
    }
    item.update(overrides)
    return item


def _client_error(code: str, operation: str = "UpdateItem") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


@pytest.fixture
def table():
    return MagicMock()


@pytest.fixture
def repository(table):
    return DynamoDBFlightRepository(table)


class TestDynamoDBFlightRepository:
    """DynamoDBFlightRepository のテスト"""

    def test_save_puts_item_with_normalized_city_keys(
        self, repository, table, create_flight
    ):
        """検索用に小文字化した都市名も保存する"""
        repository.save(create_flight(origin="Bengaluru", destination="Chennai"))

        kwargs = table.put_item.call_args.kwargs
        assert kwargs["Item"]["origin"] == "Bengaluru"
        assert kwargs["Item"]["origin_key"] == "bengaluru"
        assert kwargs["Item"]["destination_key"] == "chennai"
        assert kwargs["Item"]["price_amount"] == Decimal("3200")
        assert kwargs["ConditionExpression"] == Attr("flight_id").not_exists()

    def test_save_duplicate_raises_error(self, repository, table, create_flight):
        table.put_item.side_effect = _client_error(
            "ConditionalCheckFailedException", "PutItem"
        )

        with pytest.raises(DuplicateResourceException):
            repository.save(create_flight())

    def test_find_by_id_converts_item_to_entity(self, repository, table):
        table.get_item.return_value = {"Item": _item(seats=7)}

        flight = repository.find_by_id(FlightId("flight-1"))

        assert flight is not None
        assert flight.seats == 7
        assert isinstance(flight.seats, int)
        assert str(flight.destination) == "Chennai"
        table.get_item.assert_called_once_with(
            Key={"flight_id": "flight-1"}, ConsistentRead=True
        )

    def test_find_by_id_returns_none_when_missing(self, repository, table):
        table.get_item.return_value = {}
        assert repository.find_by_id(FlightId("missing")) is None

    def test_search_without_filters_scans_everything(self, repository, table):
        table.scan.return_value = {"Items": [_item("f-1"), _item("f-2")]}

        flights = repository.search()

        assert [str(f.id) for f in flights] == ["f-1", "f-2"]
        assert "FilterExpression" not in table.scan.call_args.kwargs

    def test_search_filters_on_normalized_keys(self, repository, table):
        table.scan.return_value = {"Items": []}

        repository.search(City("BENGALURU"), City("Chennai"))

        assert table.scan.call_args.kwargs["FilterExpression"] == (
            Attr("origin_key").eq("bengaluru") & Attr("destination_key").eq("chennai")
        )

    def test_search_follows_pagination(self, repository, table):
        """LastEvaluatedKey がある限りスキャンを続ける"""
        table.scan.side_effect = [
            {"Items": [_item("f-1")], "LastEvaluatedKey": {"flight_id": "f-1"}},
            {"Items": [_item("f-2")]},
        ]

        flights = repository.search(destination=City("chennai"))

        assert [str(f.id) for f in flights] == ["f-1", "f-2"]
        first_call, second_call = table.scan.call_args_list
        assert "ExclusiveStartKey" not in first_call.kwargs
        assert second_call.kwargs["ExclusiveStartKey"] == {"flight_id": "f-1"}

    def test_count_sums_all_pages(self, repository, table):
        table.scan.side_effect = [
            {"Count": 3, "LastEvaluatedKey": {"flight_id": "f-3"}},
            {"Count": 1},
        ]

        assert repository.count() == 4
        assert table.scan.call_args_list[0].kwargs == {"Select": "COUNT"}

    def test_reserve_seats_is_a_conditional_decrement(self, repository, table):
        """空席判定と減算を1回の条件付き更新で行う"""
        table.update_item.return_value = {"Attributes": _item(seats=9)}

        flight = repository.reserve_seats(FlightId("flight-1"), 3)

        assert flight.seats == 9
        kwargs = table.update_item.call_args.kwargs
        assert kwargs["Key"] == {"flight_id": "flight-1"}
        assert kwargs["UpdateExpression"] == "SET #seats = #seats - :seats"
        assert kwargs["ConditionExpression"] == (
            "attribute_exists(flight_id) AND #seats >= :seats"
        )
        assert kwargs["ExpressionAttributeValues"] == {":seats": 3}
        assert kwargs["ReturnValues"] == "ALL_NEW"

    def test_reserve_seats_condition_failure_means_insufficient_seats(
        self, repository, table
    ):
        table.update_item.side_effect = _client_error("ConditionalCheckFailedException")
        table.get_item.return_value = {"Item": _item(seats=1)}

        with pytest.raises(InsufficientSeatsException) as exc_info:
            repository.reserve_seats(FlightId("flight-1"), 2)

        assert exc_info.value.available == 1

    def test_reserve_seats_condition_failure_on_missing_flight(self, repository, table):
        table.update_item.side_effect = _client_error("ConditionalCheckFailedException")
        table.get_item.return_value = {}

        with pytest.raises(ResourceNotFoundException):
            repository.reserve_seats(FlightId("missing"), 1)

    def test_reserve_seats_reraises_other_errors(self, repository, table):
        table.update_item.side_effect = _client_error("ProvisionedThroughputExceededException")

        with pytest.raises(ClientError):
            repository.reserve_seats(FlightId("flight-1"), 1)

    def test_release_seats_increments(self, repository, table):
        repository.release_seats(FlightId("flight-1"), 2)

        kwargs = table.update_item.call_args.kwargs
        assert kwargs["UpdateExpression"] == "SET #seats = #seats + :seats"
        assert kwargs["ExpressionAttributeValues"] == {":seats": 2}
