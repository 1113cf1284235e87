from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class GenreResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class CastResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = None
    name: str
    profile_path: str


class MovieResponse(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            'example': {
                'id': 1,
                'movie_id': 1232546,
                'title': 'Until Dawn',
                'overview': 'One year after her sister Melanie mysteriously disappeared...',
                'poster_path': '/juA4IWO52Fecx8lhAsxmDgy3M3.jpg',
                'backdrop_path': '/icFWIk1KfkWLZnugZAJEDauNZ94.jpg',
                'genres': [{'id': 27, 'name': 'Horror'}],
                'casts': [{'name': 'Ella Rubin', 'profile_path': '/qYiaSl0Eb7G3VaxOg8PxExCFwon.jpg'}],
                'release_date': '2025-04-23',
                'original_language': 'en',
                'tagline': 'Every night a different nightmare.',
                'vote_average': 6.4,
                'vote_count': 18,
                'runtime': 103,
            }
        },
    )

    id: int
    movie_id: int
    title: str
    overview: Optional[str] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    genres: List[GenreResponse] = []
    casts: List[CastResponse] = []
    release_date: Optional[str] = None
    original_language: Optional[str] = None
    tagline: Optional[str] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    runtime: Optional[int] = None


class ShowResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    movie_id: int
    show_date_time: datetime
    show_price: float
    occupied_seats: dict[str, str] = {}


class TimeSlotResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    time: datetime
    show_id: str


class DateTimeSlotResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    date: str
    slots: List[TimeSlotResponse] = []
