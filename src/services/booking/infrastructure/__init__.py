from .dynamodb_booking_repository import (
    DynamoDBBookingRepository as DynamoDBBookingRepository,
)
