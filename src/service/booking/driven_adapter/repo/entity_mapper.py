"""ORM model <-> domain entity conversion shared by the booking repositories"""

from datetime import datetime
from typing import Any

from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.entity.cast_entity import Cast
from src.service.booking.domain.entity.date_time_slot_entity import DateTimeSlot
from src.service.booking.domain.entity.movie_entity import Movie
from src.service.booking.domain.entity.show_entity import Show
from src.service.booking.domain.value_object import BookingUser, Genre, TimeSlot
from src.service.booking.driven_adapter.model import (
    BookingModel,
    CastModel,
    DateTimeSlotModel,
    MovieModel,
    ShowModel,
)


def to_cast(db_cast: CastModel) -> Cast:
    return Cast(id=db_cast.id, name=db_cast.name, profile_path=db_cast.profile_path)


def to_movie(db_movie: MovieModel) -> Movie:
    return Movie(
        id=db_movie.id,
        movie_id=db_movie.movie_id,
        title=db_movie.title,
        overview=db_movie.overview,
        poster_path=db_movie.poster_path,
        backdrop_path=db_movie.backdrop_path,
        genres=[Genre(id=g['id'], name=g['name']) for g in db_movie.genres or []],
        casts=[
            Cast(name=c['name'], profile_path=c.get('profile_path', ''))
            for c in db_movie.casts or []
        ],
        release_date=db_movie.release_date,
        original_language=db_movie.original_language,
        tagline=db_movie.tagline,
        vote_average=db_movie.vote_average,
        vote_count=db_movie.vote_count,
        runtime=db_movie.runtime,
    )


def to_show(db_show: ShowModel, *, with_movie: bool = False) -> Show:
    movie = None
    # Only touch the relationship when it was eagerly loaded
    if with_movie and 'movie' in db_show.__dict__ and db_show.movie is not None:
        movie = to_movie(db_show.movie)
    return Show(
        id=db_show.id,
        movie_id=db_show.movie_id,
        show_date_time=db_show.show_date_time,
        show_price=db_show.show_price,
        occupied_seats=dict(db_show.occupied_seats or {}),
        version=db_show.version,
        movie=movie,
    )


def to_booking(db_booking: BookingModel, *, with_show: bool = False) -> Booking:
    show = None
    if with_show and 'show' in db_booking.__dict__ and db_booking.show is not None:
        show = to_show(db_booking.show, with_movie=True)
    return Booking(
        id=db_booking.id,
        user=BookingUser(name=db_booking.user_name, user_id=db_booking.user_id),
        show_id=db_booking.show_id,
        seats=list(db_booking.seats or []),
        total_price=float(db_booking.total_price),
        booking_date=db_booking.booking_date,
        show=show,
    )


def to_booking_model(booking: Booking) -> BookingModel:
    return BookingModel(
        id=booking.id,
        user_name=booking.user.name,
        user_id=booking.user.user_id,
        show_id=booking.show_id,
        seats=list(booking.seats),
        total_price=booking.total_price,
        booking_date=booking.booking_date,
    )


def to_time_slot(db_slot: DateTimeSlotModel) -> DateTimeSlot:
    return DateTimeSlot(
        id=db_slot.id,
        date=db_slot.date,
        slots=[
            TimeSlot(time=_parse_time(slot['time']), show_id=str(slot['show_id']))
            for slot in db_slot.slots or []
        ],
    )


def _parse_time(value: Any) -> datetime:
    return value if isinstance(value, datetime) else datetime.fromisoformat(str(value))
