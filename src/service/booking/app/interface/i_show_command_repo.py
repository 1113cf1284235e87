from abc import ABC, abstractmethod
from typing import Optional

from src.service.booking.domain.entity.show_entity import Show


class IShowCommandRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, show_id: int) -> Optional[Show]:
        """Load a show for update, None when it does not exist"""
        pass

    @abstractmethod
    async def update_occupancy(self, *, show: Show, expected_version: int) -> Optional[Show]:
        """
        Persist `show.occupied_seats` if the stored version still equals `expected_version`.

        Returns:
            The stored show with its bumped version, or None when another
            writer changed the show first (nothing is written in that case)
        """
        pass
