from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
import math
from typing import List, Optional
from uuid import UUID

import attrs
from uuid_utils.compat import uuid7

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.booking.domain.booking_errors import BookingErrorMessage
from src.service.booking.domain.entity.show_entity import Show
from src.service.booking.domain.value_object.booking_user import BookingUser


# Largest amount the NUMERIC(10, 2) total_price column can hold.
MAX_TOTAL_PRICE = 99_999_999.99


def round_to_cents(amount: float) -> float:
    return float(Decimal(str(amount)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP))


@attrs.define
class Booking:
    id: UUID
    user: BookingUser
    show_id: int
    seats: List[str]
    total_price: float
    booking_date: datetime
    show: Optional[Show] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        user: BookingUser,
        show_id: int,
        seats: List[str],
        total_price: float,
        booking_date: Optional[datetime] = None,
        id: Optional[UUID] = None,
    ) -> 'Booking':
        if not user.user_id or not user.user_id.strip():
            raise DomainError(BookingErrorMessage.USER_ID_REQUIRED.value)
        if not seats:
            raise DomainError(BookingErrorMessage.SEATS_REQUIRED.value)
        if any(not seat or not seat.strip() for seat in seats):
            raise DomainError(BookingErrorMessage.SEAT_LABEL_REQUIRED.value)
        if len(set(seats)) != len(seats):
            raise DomainError(BookingErrorMessage.DUPLICATE_SEATS.value)
        if not math.isfinite(total_price):
            raise DomainError(BookingErrorMessage.PRICE_MUST_BE_FINITE.value)
        if total_price < 0:
            raise DomainError(BookingErrorMessage.PRICE_MUST_NOT_BE_NEGATIVE.value)

        # Stored with two decimals; round here so the returned booking matches later reads.
        total_price = round_to_cents(total_price)
        if total_price > MAX_TOTAL_PRICE:
            raise DomainError(BookingErrorMessage.PRICE_TOO_LARGE.value)

        if booking_date is None:
            booking_date = datetime.now(timezone.utc)
        elif booking_date.tzinfo is None:
            booking_date = booking_date.replace(tzinfo=timezone.utc)

        return cls(
            id=id or uuid7(),  # time-ordered, doubles as a tie-breaker on booking_date
            user=user,
            show_id=show_id,
            seats=list(seats),
            total_price=total_price,
            booking_date=booking_date,
        )
