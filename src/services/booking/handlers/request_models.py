from pydantic import BaseModel, Field


class CreateBookingRequest(BaseModel):
    """フライト予約リクエストスキーマ（POST /api/bookings）"""

    flight_id: str = Field(
        ...,
        alias="flightId",
        min_length=1,
        description="フライトID",
        examples=["3f2b9c0e6d4a4b8f9a1c2d3e4f5a6b7c"],
    )

    name: str = Field(..., description="搭乗者名", examples=["Asha Rao"])

    email: str = Field(..., description="搭乗者メールアドレス", examples=["asha@example.com"])

    seats_booked: int = Field(
        ...,
        alias="seatsBooked",
        gt=0,
        description="予約座席数",
        examples=[1],
    )

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "flightId": "3f2b9c0e6d4a4b8f9a1c2d3e4f5a6b7c",
                    "name": "Asha Rao",
                    "email": "asha@example.com",
                    "seatsBooked": 1,
                }
            ]
        },
    }
