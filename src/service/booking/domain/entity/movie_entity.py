from typing import List, Optional

import attrs

from src.service.booking.domain.entity.cast_entity import Cast
from src.service.booking.domain.value_object.genre import Genre


@attrs.define
class Movie:
    id: int
    movie_id: int  # external catalog id (TMDB)
    title: str
    overview: Optional[str] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    genres: List[Genre] = attrs.field(factory=list)
    casts: List[Cast] = attrs.field(factory=list)
    release_date: Optional[str] = None
    original_language: Optional[str] = None
    tagline: Optional[str] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    runtime: Optional[int] = None
