from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.service.booking.driving_adapter.http_controller.schema.catalog_schema import MovieResponse


class BookingUserSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str = ''
    user_id: str


class BookingCreateRequest(BaseModel):
    user: BookingUserSchema
    show_id: int = Field(gt=0, le=2**31 - 1)  # INTEGER primary key range
    seats: List[str]
    total_price: float = Field(ge=0, allow_inf_nan=False)
    booking_date: Optional[datetime] = None  # defaults to now

    class Config:
        json_schema_extra = {
            'example': {
                'user': {'name': 'Alice', 'user_id': 'user_2abc'},
                'show_id': 1,
                'seats': ['A1', 'A2'],
                'total_price': 20.0,
            }
        }


class BookingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user: BookingUserSchema
    show_id: int = Field(gt=0, le=2**31 - 1)  # INTEGER primary key range
    seats: List[str]
    total_price: float
    booking_date: datetime


class BookingCreateResponse(BaseModel):
    message: str = 'Booking successful'
    booking: BookingResponse


class BookingShowResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    movie_id: int
    show_date_time: datetime
    show_price: float
    occupied_seats: dict[str, str] = {}
    movie: Optional[MovieResponse] = None


class BookingWithDetailsResponse(BookingResponse):
    show: Optional[BookingShowResponse] = None


class DeleteBookingResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {'id': '01234567-89ab-7def-0123-456789abcdef', 'message': 'Record deleted'}
        }
    )

    id: UUID
    message: str = 'Record deleted'
