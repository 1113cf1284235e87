from sqlalchemy import JSON, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class DateTimeSlotModel(Base):
    __tablename__ = 'date_time_slot'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    slots: Mapped[list] = mapped_column(JSON, nullable=False, default=list)  # [{time, show_id}]
