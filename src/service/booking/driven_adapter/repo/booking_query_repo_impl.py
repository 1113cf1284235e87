from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.driven_adapter.model import BookingModel, ShowModel
from src.service.booking.driven_adapter.repo.entity_mapper import to_booking


class BookingQueryRepoImpl(IBookingQueryRepo):
    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ) -> None:
        self.session_factory = session_factory

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session_factory is None:
            raise RuntimeError('No session_factory available')
        async with self.session_factory() as session:
            yield session

    @Logger.io
    async def list_by_user_id(self, *, user_id: str) -> List[Booking]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel)
                .options(selectinload(BookingModel.show).selectinload(ShowModel.movie))
                .where(BookingModel.user_id == user_id)
                .order_by(BookingModel.booking_date, BookingModel.id)
            )
            return [to_booking(db_booking, with_show=True) for db_booking in result.scalars()]
