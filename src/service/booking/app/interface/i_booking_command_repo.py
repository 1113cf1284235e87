from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.service.booking.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, booking: Booking) -> Booking:
        pass

    @abstractmethod
    async def get_for_user(
        self, *, user_id: str, booking_id: Optional[UUID] = None
    ) -> Optional[Booking]:
        """
        Find a booking owned by `user_id`.

        With `booking_id` only that booking matches; without it the user's
        oldest booking (by booking_date, then id) is returned.
        """
        pass

    @abstractmethod
    async def delete(self, *, booking_id: UUID) -> None:
        pass
