from abc import ABC, abstractmethod
from typing import List

from src.service.booking.domain.entity.booking_entity import Booking


class IBookingQueryRepo(ABC):
    @abstractmethod
    async def list_by_user_id(self, *, user_id: str) -> List[Booking]:
        """Bookings of one user with show and movie attached, oldest first"""
        pass
