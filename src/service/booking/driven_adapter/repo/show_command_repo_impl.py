from typing import Optional

from sqlalchemy import select, update as sql_update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_show_command_repo import IShowCommandRepo
from src.service.booking.domain.entity.show_entity import Show
from src.service.booking.driven_adapter.model import ShowModel
from src.service.booking.driven_adapter.repo.entity_mapper import to_show


class ShowCommandRepoImpl(IShowCommandRepo):
    """Show writes; always runs on the unit of work session."""

    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def get_by_id(self, *, show_id: int) -> Optional[Show]:
        # populate_existing so a re-read after a version miss sees the committed row
        stmt = select(ShowModel).where(ShowModel.id == show_id).execution_options(
            populate_existing=True
        )
        result = await self.session.execute(stmt)
        db_show = result.scalar_one_or_none()
        return to_show(db_show) if db_show else None

    @Logger.io
    async def update_occupancy(self, *, show: Show, expected_version: int) -> Optional[Show]:
        # Compare-and-set on version: a concurrent writer makes this match no row
        stmt = (
            sql_update(ShowModel)
            .where(ShowModel.id == show.id)
            .where(ShowModel.version == expected_version)
            .values(occupied_seats=dict(show.occupied_seats), version=expected_version + 1)
            .returning(ShowModel)
            .execution_options(synchronize_session='fetch', populate_existing=True)
        )
        result = await self.session.execute(stmt)
        db_show = result.scalar_one_or_none()
        if db_show is None:
            Logger.base.warning(
                f'⚠️ [SHOW] Version mismatch on show {show.id}, expected v{expected_version}'
            )
            return None
        return to_show(db_show)
