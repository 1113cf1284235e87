"""Booking domain errors."""

from enum import Enum
from typing import Iterable

from src.platform.exception.exceptions import ConflictError, NotFoundError, PersistenceError


class BookingErrorMessage(Enum):
    SHOW_NOT_FOUND = 'Show not found'
    BOOKING_NOT_FOUND = 'No record exists'
    SEATS_REQUIRED = 'At least one seat is required'
    SEAT_LABEL_REQUIRED = 'Seat labels must not be blank'
    DUPLICATE_SEATS = 'Seats must not repeat within a booking'
    PRICE_MUST_NOT_BE_NEGATIVE = 'Total price must not be negative'
    PRICE_MUST_BE_POSITIVE = 'Total price must be positive'
    PRICE_MUST_BE_FINITE = 'Total price must be a finite number'
    PRICE_TOO_LARGE = 'Total price exceeds the supported maximum'
    USER_ID_REQUIRED = 'User id is required'
    SEATS_OCCUPIED = 'Seats already occupied'
    SHOW_MODIFIED = 'Show was modified by another request, please retry'
    BOOKING_FAILED = 'Booking failed'
    CHECKOUT_FAILED = 'Checkout failed'


class ShowNotFoundError(NotFoundError):
    def __init__(self, show_id: int) -> None:
        self.show_id = show_id
        super().__init__(BookingErrorMessage.SHOW_NOT_FOUND.value)


class BookingNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__(BookingErrorMessage.BOOKING_NOT_FOUND.value)


class SeatConflictError(ConflictError):
    """Requested seats overlap seats already occupied on the show."""

    def __init__(self, seats: Iterable[str] = ()) -> None:
        self.seats = list(seats)
        message = BookingErrorMessage.SEATS_OCCUPIED.value
        if self.seats:
            message = f'{message}: {", ".join(self.seats)}'
        super().__init__(message)


class ShowModifiedError(ConflictError):
    def __init__(self) -> None:
        super().__init__(BookingErrorMessage.SHOW_MODIFIED.value)


class BookingPersistenceError(PersistenceError):
    def __init__(self) -> None:
        super().__init__(BookingErrorMessage.BOOKING_FAILED.value)
