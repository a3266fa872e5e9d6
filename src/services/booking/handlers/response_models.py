from __future__ import annotations

from pydantic import BaseModel, Field

from services.booking.applications.booking_with_flight import BookingWithFlight
from services.flight.handlers.response_models import FlightData, to_flight_data


class BookingData(BaseModel):
    """予約データのレスポンスモデル

    `flightId` には参照先フライトのスナップショットを埋め込む（存在しなければ null）。
    """

    object_id: str = Field(serialization_alias="_id")
    id: str
    flight: FlightData | None = Field(serialization_alias="flightId")
    name: str
    email: str
    seats_booked: int = Field(serialization_alias="seatsBooked")
    created_at: str = Field(serialization_alias="createdAt")


class SuccessResponse(BaseModel):
    """予約成功レスポンスモデル"""

    success: bool = True
    booking: BookingData


def to_booking_data(result: BookingWithFlight) -> BookingData:
    """読み取りモデルをレスポンスモデルに変換する"""
    booking = result.booking
    return BookingData(
        object_id=str(booking.id),
        id=str(booking.id),
        flight=to_flight_data(result.flight) if result.flight is not None else None,
        name=booking.passenger.name,
        email=booking.passenger.email,
        seats_booked=booking.seats_booked.value,
        created_at=str(booking.created_at),
    )


def to_response(result: BookingWithFlight) -> dict:
    """予約作成結果をレスポンス辞書に変換する"""
    return SuccessResponse(booking=to_booking_data(result)).model_dump(by_alias=True)


def to_list_response(results: list[BookingWithFlight]) -> list[dict]:
    """予約一覧をレスポンス配列に変換する"""
    return [to_booking_data(result).model_dump(by_alias=True) for result in results]
