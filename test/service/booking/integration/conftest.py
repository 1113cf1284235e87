"""
PostgreSQL-backed fixtures. Every test starts from truncated tables
(clean_database) with one movie and one empty show.
"""

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any, Coroutine, List, Optional

import pytest

from src.platform.database.orm_db_setting import get_session_maker
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.booking.app.command.delete_booking_use_case import DeleteBookingUseCase
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.value_object.booking_user import BookingUser
from src.service.booking.driven_adapter.model import MovieModel, ShowModel


SHOW_TIME = datetime(2025, 7, 1, 19, 30, tzinfo=timezone.utc)


@pytest.fixture
async def seeded_show_id(clean_database: None) -> int:
    async with get_session_maker()() as session:
        movie = MovieModel(
            movie_id=1232546,
            title='Until Dawn',
            genres=[{'id': 27, 'name': 'Horror'}],
            casts=[{'name': 'Ella Rubin', 'profile_path': '/ella.jpg'}],
            runtime=103,
        )
        session.add(movie)
        await session.flush()
        show = ShowModel(
            movie_id=movie.id,
            show_date_time=SHOW_TIME,
            show_price=10.0,
            occupied_seats={},
            version=0,
        )
        session.add(show)
        await session.commit()
        return show.id


@pytest.fixture
def book(seeded_show_id: int) -> Callable[..., Coroutine[Any, Any, Booking]]:
    """Create a booking on its own session and transaction, like one HTTP request."""

    async def _book(
        user: BookingUser,
        seats: List[str],
        *,
        total_price: float = 10.0,
        booking_date: Optional[datetime] = None,
        show_id: Optional[int] = None,
    ) -> Booking:
        async with get_session_maker()() as session:
            use_case = CreateBookingUseCase(uow=SqlAlchemyUnitOfWork(session))
            return await use_case.create_booking(
                user=user,
                show_id=show_id or seeded_show_id,
                seats=seats,
                total_price=total_price,
                booking_date=booking_date,
            )

    return _book


@pytest.fixture
def unbook() -> Callable[..., Coroutine[Any, Any, Booking]]:
    async def _unbook(user_id: str, **kwargs: Any) -> Booking:
        async with get_session_maker()() as session:
            use_case = DeleteBookingUseCase(uow=SqlAlchemyUnitOfWork(session))
            return await use_case.delete_booking_for_user(user_id=user_id, **kwargs)

    return _unbook
