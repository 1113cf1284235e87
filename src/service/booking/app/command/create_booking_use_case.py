from datetime import datetime
import time
from typing import List, Optional, Self

from fastapi import Depends
from opentelemetry import trace
from sqlalchemy.exc import SQLAlchemyError

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.booking.domain.booking_errors import (
    BookingPersistenceError,
    SeatConflictError,
    ShowModifiedError,
    ShowNotFoundError,
)
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.entity.show_entity import OCCUPANCY_WRITE_ATTEMPTS, Show
from src.service.booking.domain.value_object.booking_user import BookingUser


class CreateBookingUseCase:
    """
    Reserve seats on a show and record the booking in one transaction.

    Flow:
    1. Validate the request (Booking.create)
    2. Load the show, fail with ShowNotFoundError before touching anything
    3. Mark the seats occupied, fail with SeatConflictError if any is taken
    4. Write occupancy with a version check; on a miss re-read the show and
       repeat from 3, up to OCCUPANCY_WRITE_ATTEMPTS times
    5. Insert the booking and commit both writes together
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def create_booking(
        self,
        *,
        user: BookingUser,
        show_id: int,
        seats: List[str],
        total_price: float,
        booking_date: Optional[datetime] = None,
    ) -> Booking:
        """
        Raises:
            DomainError: Invalid seats, price or user
            ShowNotFoundError: No show with `show_id`
            SeatConflictError: A requested seat is already occupied
            ShowModifiedError: Concurrent writers kept winning the version check
            BookingPersistenceError: The store failed, nothing was written
        """
        start = time.perf_counter()
        result = 'failed'

        with self.tracer.start_as_current_span(
            'use_case.create_booking',
            attributes={'show.id': show_id, 'booking.seat_count': len(seats)},
        ) as span:
            try:
                booking = Booking.create(
                    user=user,
                    show_id=show_id,
                    seats=seats,
                    total_price=total_price,
                    booking_date=booking_date,
                )
                span.set_attribute('booking.id', str(booking.id))

                async with self.uow:
                    await self._occupy_seats(show_id=show_id, seats=booking.seats)
                    created = await self.uow.booking_command_repo.create(booking=booking)
                    await self.uow.commit()
                result = 'success'

            except SQLAlchemyError as e:
                raise BookingPersistenceError() from e
            except CustomBaseError as e:
                conflict = isinstance(e, (SeatConflictError, ShowModifiedError))
                result = 'conflict' if conflict else 'rejected'
                raise
            finally:
                metrics.record_booking(
                    operation='create', result=result, duration=time.perf_counter() - start
                )

        metrics.record_seats_booked(len(created.seats))
        Logger.base.info(
            f'🎟️ [CREATE-BOOKING] {created.id} user={user.user_id} show={show_id} '
            f'seats={",".join(created.seats)}'
        )
        return created

    async def _occupy_seats(self, *, show_id: int, seats: List[str]) -> Show:
        for attempt in range(1, OCCUPANCY_WRITE_ATTEMPTS + 1):
            show = await self.uow.show_command_repo.get_by_id(show_id=show_id)
            if show is None:
                raise ShowNotFoundError(show_id)

            stored_show = await self.uow.show_command_repo.update_occupancy(
                show=show.occupy_seats(seats), expected_version=show.version
            )
            if stored_show is not None:
                return stored_show

            Logger.base.warning(
                f'🔁 [CREATE-BOOKING] show={show_id} moved past version {show.version}, '
                f'attempt {attempt}/{OCCUPANCY_WRITE_ATTEMPTS}'
            )

        raise ShowModifiedError()
