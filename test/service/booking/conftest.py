"""
Booking service test doubles.

InMemoryUnitOfWork mirrors SqlAlchemyUnitOfWork semantics without a database:
- writes land in a shared InMemoryBookingStore immediately (like a flushed session)
- leaving the `async with` block without commit replays the undo log
- show updates compare the stored version, like the UPDATE ... WHERE version = :v
"""

import asyncio
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Dict, List, Optional
from unittest.mock import AsyncMock
from uuid import UUID

import attrs
import pytest
from sqlalchemy.exc import OperationalError

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.service.booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.booking.app.interface.i_show_command_repo import IShowCommandRepo
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.entity.movie_entity import Movie
from src.service.booking.domain.entity.show_entity import Show
from src.service.booking.domain.value_object.genre import Genre


@attrs.define
class InMemoryBookingStore:
    shows: Dict[int, Show] = attrs.field(factory=dict)
    bookings: Dict[UUID, Booking] = attrs.field(factory=dict)
    movies: Dict[int, Movie] = attrs.field(factory=dict)
    fail_booking_insert: bool = False


class InMemoryShowCommandRepo(IShowCommandRepo):
    def __init__(self, store: InMemoryBookingStore, undo_log: List[Callable[[], None]]) -> None:
        self.store = store
        self.undo_log = undo_log

    async def get_by_id(self, *, show_id: int) -> Optional[Show]:
        show = self.store.shows.get(show_id)
        # Yield so concurrent transactions interleave between read and write
        await asyncio.sleep(0)
        if show is None:
            return None
        return attrs.evolve(show, occupied_seats=dict(show.occupied_seats))

    async def update_occupancy(self, *, show: Show, expected_version: int) -> Optional[Show]:
        await asyncio.sleep(0)
        current = self.store.shows.get(show.id)
        if current is None or current.version != expected_version:
            return None
        stored = attrs.evolve(
            show, occupied_seats=dict(show.occupied_seats), version=expected_version + 1
        )
        self.store.shows[show.id] = stored
        self.undo_log.append(lambda: self.store.shows.__setitem__(show.id, current))
        return stored


class InMemoryBookingCommandRepo(IBookingCommandRepo):
    def __init__(self, store: InMemoryBookingStore, undo_log: List[Callable[[], None]]) -> None:
        self.store = store
        self.undo_log = undo_log

    async def create(self, *, booking: Booking) -> Booking:
        if self.store.fail_booking_insert:
            raise OperationalError('INSERT INTO booking', {}, Exception('connection lost'))
        self.store.bookings[booking.id] = booking
        self.undo_log.append(lambda: self.store.bookings.pop(booking.id, None))
        return booking

    async def get_for_user(
        self, *, user_id: str, booking_id: Optional[UUID] = None
    ) -> Optional[Booking]:
        candidates = [
            b
            for b in self.store.bookings.values()
            if b.user.user_id == user_id and (booking_id is None or b.id == booking_id)
        ]
        candidates.sort(key=lambda b: (b.booking_date, b.id))
        return candidates[0] if candidates else None

    async def delete(self, *, booking_id: UUID) -> None:
        removed = self.store.bookings.pop(booking_id)
        self.undo_log.append(lambda: self.store.bookings.__setitem__(booking_id, removed))


class InMemoryBookingQueryRepo(IBookingQueryRepo):
    def __init__(self, store: InMemoryBookingStore) -> None:
        self.store = store

    async def list_by_user_id(self, *, user_id: str) -> List[Booking]:
        bookings = sorted(
            (b for b in self.store.bookings.values() if b.user.user_id == user_id),
            key=lambda b: (b.booking_date, b.id),
        )
        return [self._with_show(b) for b in bookings]

    def _with_show(self, booking: Booking) -> Booking:
        show = self.store.shows[booking.show_id]
        movie = self.store.movies.get(show.movie_id)
        return attrs.evolve(booking, show=attrs.evolve(show, movie=movie))


class InMemoryUnitOfWork(AbstractUnitOfWork):
    def __init__(self, store: InMemoryBookingStore) -> None:
        self.store = store
        self.undo_log: List[Callable[[], None]] = []
        self.committed = False
        self.rolled_back = False

    async def __aenter__(self) -> AbstractUnitOfWork:
        self.undo_log = []
        self.show_command_repo = InMemoryShowCommandRepo(self.store, self.undo_log)
        self.booking_command_repo = InMemoryBookingCommandRepo(self.store, self.undo_log)
        return await super().__aenter__()

    async def _commit(self) -> None:
        self.undo_log.clear()
        self.committed = True

    async def rollback(self) -> None:
        if self.undo_log:
            self.rolled_back = True
        while self.undo_log:
            self.undo_log.pop()()


SHOW_ID = 1
MOVIE_ID = 10


@pytest.fixture
def booking_store() -> InMemoryBookingStore:
    """One movie with one empty show priced at 10.00"""
    store = InMemoryBookingStore()
    store.movies[MOVIE_ID] = Movie(
        id=MOVIE_ID,
        movie_id=1232546,
        title='Until Dawn',
        genres=[Genre(id=27, name='Horror')],
        runtime=103,
    )
    store.shows[SHOW_ID] = Show(
        id=SHOW_ID,
        movie_id=MOVIE_ID,
        show_date_time=datetime(2025, 7, 1, 19, 30, tzinfo=timezone.utc),
        show_price=10.0,
    )
    return store


@pytest.fixture
def uow_factory(booking_store: InMemoryBookingStore) -> Callable[[], InMemoryUnitOfWork]:
    return lambda: InMemoryUnitOfWork(booking_store)


@pytest.fixture
def booking_query_repo(booking_store: InMemoryBookingStore) -> InMemoryBookingQueryRepo:
    return InMemoryBookingQueryRepo(booking_store)


@pytest.fixture
def mock_uow() -> AsyncMock:
    """Unit of work whose repositories are AsyncMocks"""
    uow = AsyncMock()
    uow.__aenter__.return_value = uow
    uow.__aexit__.return_value = None
    uow.show_command_repo = AsyncMock()
    uow.booking_command_repo = AsyncMock()
    return uow
