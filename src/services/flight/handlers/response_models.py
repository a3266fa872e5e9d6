from __future__ import annotations

from pydantic import BaseModel, Field

from services.flight.domain.entity import Flight


class FlightData(BaseModel):
    """フライトデータのレスポンスモデル

    クライアントは `_id` でフライトを識別するため、`id` と同じ値を両方に出力する。
    """

    object_id: str = Field(serialization_alias="_id")
    id: str
    airline: str
    origin: str = Field(serialization_alias="from")
    destination: str = Field(serialization_alias="to")
    departure_time: str = Field(serialization_alias="depart")
    arrival_time: str = Field(serialization_alias="arrive")
    price: float
    currency: str
    seats: int


def to_flight_data(flight: Flight) -> FlightData:
    """Flight エンティティをレスポンスモデルに変換する"""
    return FlightData(
        object_id=str(flight.id),
        id=str(flight.id),
        airline=flight.airline,
        origin=str(flight.origin),
        destination=str(flight.destination),
        departure_time=str(flight.departure_time),
        arrival_time=str(flight.arrival_time),
        price=float(flight.price.amount),
        currency=str(flight.price.currency),
        seats=flight.seats,
    )


def to_response(flights: list[Flight]) -> list[dict]:
    """Flight エンティティの一覧をレスポンス配列に変換する"""
    return [to_flight_data(flight).model_dump(by_alias=True) for flight in flights]
