from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import ARRAY, DateTime, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from src.platform.database.orm_db_setting import Base


if TYPE_CHECKING:
    from src.service.booking.driven_adapter.model.show_model import ShowModel


class BookingModel(Base):
    __tablename__ = 'booking'
    __table_args__ = (Index('ix_booking_user_id_booking_date', 'user_id', 'booking_date'),)

    id: Mapped[UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True)  # UUID7
    user_name: Mapped[str] = mapped_column(String(255), nullable=False, default='')
    user_id: Mapped[str] = mapped_column(String(255), nullable=False)
    show_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('show.id'), nullable=False, index=True
    )
    seats: Mapped[list] = mapped_column(ARRAY(String), nullable=False)
    total_price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    booking_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    show: Mapped['ShowModel'] = relationship('ShowModel', lazy='selectin')
