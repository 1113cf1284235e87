from typing import Optional
from uuid import UUID

from sqlalchemy import delete as sql_delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.driven_adapter.model import BookingModel
from src.service.booking.driven_adapter.repo.entity_mapper import to_booking, to_booking_model


class BookingCommandRepoImpl(IBookingCommandRepo):
    """Booking writes; always runs on the unit of work session."""

    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def create(self, *, booking: Booking) -> Booking:
        db_booking = to_booking_model(booking)
        self.session.add(db_booking)
        await self.session.flush()
        return to_booking(db_booking)

    @Logger.io
    async def get_for_user(
        self, *, user_id: str, booking_id: Optional[UUID] = None
    ) -> Optional[Booking]:
        stmt = select(BookingModel).where(BookingModel.user_id == user_id)
        if booking_id is not None:
            stmt = stmt.where(BookingModel.id == booking_id)
        stmt = (
            stmt.order_by(BookingModel.booking_date, BookingModel.id)
            .limit(1)
            .with_for_update(of=BookingModel)
        )

        result = await self.session.execute(stmt)
        db_booking = result.scalar_one_or_none()
        return to_booking(db_booking) if db_booking else None

    @Logger.io
    async def delete(self, *, booking_id: UUID) -> None:
        await self.session.execute(sql_delete(BookingModel).where(BookingModel.id == booking_id))
