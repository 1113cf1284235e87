from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import JSON, DateTime, Float, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base


if TYPE_CHECKING:
    from src.service.booking.driven_adapter.model.movie_model import MovieModel


class ShowModel(Base):
    __tablename__ = 'show'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    movie_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('movie.id'), nullable=False, index=True
    )
    show_date_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    show_price: Mapped[float] = mapped_column(Float, nullable=False)
    occupied_seats: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default='0')

    movie: Mapped['MovieModel'] = relationship('MovieModel', lazy='selectin')
