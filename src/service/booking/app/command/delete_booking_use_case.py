import time
from typing import Optional, Self
from uuid import UUID

from fastapi import Depends
from opentelemetry import trace
from sqlalchemy.exc import SQLAlchemyError

from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.booking.domain.booking_errors import (
    BookingNotFoundError,
    BookingPersistenceError,
    ShowModifiedError,
)
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.entity.show_entity import OCCUPANCY_WRITE_ATTEMPTS


class DeleteBookingUseCase:
    """
    Delete one booking of a user and release its seats in the same transaction.

    Without `booking_id` the user's oldest booking is removed. A show whose
    version moves under the release is re-read, up to OCCUPANCY_WRITE_ATTEMPTS
    times, before ShowModifiedError is raised.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    def depends(cls, uow: AbstractUnitOfWork = Depends(get_unit_of_work)) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def delete_booking_for_user(
        self, *, user_id: str, booking_id: Optional[UUID] = None
    ) -> Booking:
        start = time.perf_counter()
        result = 'failed'

        with self.tracer.start_as_current_span(
            'use_case.delete_booking',
            attributes={'user.id': user_id, 'booking.id': str(booking_id or '')},
        ):
            try:
                async with self.uow:
                    booking = await self.uow.booking_command_repo.get_for_user(
                        user_id=user_id, booking_id=booking_id
                    )
                    if booking is None:
                        raise BookingNotFoundError()

                    await self._release_seats(booking)
                    await self.uow.booking_command_repo.delete(booking_id=booking.id)
                    await self.uow.commit()
                result = 'success'

            except SQLAlchemyError as e:
                raise BookingPersistenceError() from e
            except CustomBaseError as e:
                result = 'not_found' if isinstance(e, BookingNotFoundError) else 'conflict'
                raise
            finally:
                metrics.record_booking(
                    operation='delete', result=result, duration=time.perf_counter() - start
                )

        metrics.record_seats_released(len(booking.seats))
        Logger.base.info(
            f'🗑️ [DELETE-BOOKING] {booking.id} user={user_id} show={booking.show_id}'
        )
        return booking

    async def _release_seats(self, booking: Booking) -> None:
        for attempt in range(1, OCCUPANCY_WRITE_ATTEMPTS + 1):
            show = await self.uow.show_command_repo.get_by_id(show_id=booking.show_id)
            if show is None:
                return

            released = show.release_seats(booking.seats)
            if released.occupied_seats == show.occupied_seats:
                return

            stored = await self.uow.show_command_repo.update_occupancy(
                show=released, expected_version=show.version
            )
            if stored is not None:
                return

            Logger.base.warning(
                f'🔁 [DELETE-BOOKING] show={booking.show_id} moved past version {show.version}, '
                f'attempt {attempt}/{OCCUPANCY_WRITE_ATTEMPTS}'
            )

        raise ShowModifiedError()
