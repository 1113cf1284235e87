from typing import Optional

from sqlalchemy import JSON, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class MovieModel(Base):
    __tablename__ = 'movie'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    movie_id: Mapped[int] = mapped_column(Integer, nullable=False, unique=True)  # TMDB id
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    overview: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    poster_path: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    backdrop_path: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    genres: Mapped[list] = mapped_column(JSON, nullable=False, default=list)  # [{id, name}]
    casts: Mapped[list] = mapped_column(JSON, nullable=False, default=list)  # [{name, profile_path}]
    release_date: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    original_language: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    tagline: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    vote_average: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    vote_count: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    runtime: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
