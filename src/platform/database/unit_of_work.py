"""
Unit of Work - one database transaction per booking command

Architecture:
- UoW owns the session lifecycle and commit/rollback
- Repositories obtained from the UoW share its session
- Leaving the `async with` block without commit rolls everything back,
  so seat occupancy and the booking row are written together or not at all
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import get_async_session


if TYPE_CHECKING:
    from src.service.booking.app.interface.i_booking_command_repo import IBookingCommandRepo
    from src.service.booking.app.interface.i_show_command_repo import IShowCommandRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Usage:
        async with uow:
            show = await uow.show_command_repo.get_by_id(show_id=...)
            booking = await uow.booking_command_repo.create(booking=...)
            await uow.commit()
    """

    show_command_repo: IShowCommandRepo
    booking_command_repo: IBookingCommandRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args) -> None:
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def __aenter__(self) -> AbstractUnitOfWork:
        from src.service.booking.driven_adapter.repo.booking_command_repo_impl import (
            BookingCommandRepoImpl,
        )
        from src.service.booking.driven_adapter.repo.show_command_repo_impl import (
            ShowCommandRepoImpl,
        )

        self.show_command_repo = ShowCommandRepoImpl(session=self.session)
        self.booking_command_repo = BookingCommandRepoImpl(session=self.session)
        return await super().__aenter__()

    async def _commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        # No-op after a successful commit; session cleanup is owned by get_async_session
        await self.session.rollback()


def get_unit_of_work(
    session: AsyncSession = Depends(get_async_session),
) -> AbstractUnitOfWork:
    return SqlAlchemyUnitOfWork(session)
