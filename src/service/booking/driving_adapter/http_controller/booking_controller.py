from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.booking.app.command.delete_booking_use_case import DeleteBookingUseCase
from src.service.booking.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.booking.domain.value_object.booking_user import BookingUser
from src.service.booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingCreateResponse,
    BookingResponse,
    BookingWithDetailsResponse,
    DeleteBookingResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.get('', response_model=List[BookingWithDetailsResponse])
@Logger.io
async def list_user_bookings(
    user_id: str = Query(..., min_length=1),
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[BookingWithDetailsResponse]:
    bookings = await use_case.find_bookings_for_user(user_id=user_id)
    return [BookingWithDetailsResponse.model_validate(booking) for booking in bookings]


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingCreateResponse:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('show_id', request.show_id)
        span.set_attribute('user_id', request.user.user_id)

        booking = await use_case.create_booking(
            user=BookingUser(name=request.user.name, user_id=request.user.user_id),
            show_id=request.show_id,
            seats=request.seats,
            total_price=request.total_price,
            booking_date=request.booking_date,
        )
        return BookingCreateResponse(booking=BookingResponse.model_validate(booking))


@router.delete('', status_code=status.HTTP_200_OK)
@Logger.io
async def delete_oldest_booking(
    user_id: str = Query(..., min_length=1),
    use_case: DeleteBookingUseCase = Depends(DeleteBookingUseCase.depends),
) -> DeleteBookingResponse:
    booking = await use_case.delete_booking_for_user(user_id=user_id)
    return DeleteBookingResponse(id=booking.id)


@router.delete('/{booking_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def delete_booking(
    booking_id: UUID,
    user_id: str = Query(..., min_length=1),
    use_case: DeleteBookingUseCase = Depends(DeleteBookingUseCase.depends),
) -> DeleteBookingResponse:
    booking = await use_case.delete_booking_for_user(user_id=user_id, booking_id=booking_id)
    return DeleteBookingResponse(id=booking.id)
