from abc import ABC, abstractmethod
from typing import List

from src.service.booking.domain.entity.cast_entity import Cast
from src.service.booking.domain.entity.date_time_slot_entity import DateTimeSlot
from src.service.booking.domain.entity.movie_entity import Movie
from src.service.booking.domain.entity.show_entity import Show


class ICatalogQueryRepo(ABC):
    @abstractmethod
    async def list_movies(self) -> List[Movie]:
        pass

    @abstractmethod
    async def list_casts(self) -> List[Cast]:
        pass

    @abstractmethod
    async def list_shows(self) -> List[Show]:
        pass

    @abstractmethod
    async def list_time_slots(self) -> List[DateTimeSlot]:
        pass
