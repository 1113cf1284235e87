from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_catalog_query_repo import ICatalogQueryRepo
from src.service.booking.domain.entity.cast_entity import Cast
from src.service.booking.domain.entity.date_time_slot_entity import DateTimeSlot
from src.service.booking.domain.entity.movie_entity import Movie
from src.service.booking.domain.entity.show_entity import Show
from src.service.booking.driven_adapter.model import (
    CastModel,
    DateTimeSlotModel,
    MovieModel,
    ShowModel,
)
from src.service.booking.driven_adapter.repo.entity_mapper import (
    to_cast,
    to_movie,
    to_show,
    to_time_slot,
)


class CatalogQueryRepoImpl(ICatalogQueryRepo):
    """Read-only listings of the catalog collections, ordered by id"""

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

    @Logger.io(truncate_content=True)
    async def list_movies(self) -> List[Movie]:
        async with self._get_session() as session:
            result = await session.execute(select(MovieModel).order_by(MovieModel.id))
            return [to_movie(db_movie) for db_movie in result.scalars().all()]

    @Logger.io(truncate_content=True)
    async def list_casts(self) -> List[Cast]:
        async with self._get_session() as session:
            result = await session.execute(select(CastModel).order_by(CastModel.id))
            return [to_cast(db_cast) for db_cast in result.scalars().all()]

    @Logger.io(truncate_content=True)
    async def list_shows(self) -> List[Show]:
        async with self._get_session() as session:
            result = await session.execute(select(ShowModel).order_by(ShowModel.id))
            return [to_show(db_show) for db_show in result.scalars().all()]

    @Logger.io(truncate_content=True)
    async def list_time_slots(self) -> List[DateTimeSlot]:
        async with self._get_session() as session:
            result = await session.execute(select(DateTimeSlotModel).order_by(DateTimeSlotModel.id))
            return [to_time_slot(db_slot) for db_slot in result.scalars().all()]
