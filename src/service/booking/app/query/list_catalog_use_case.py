from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.service.booking.app.interface.i_catalog_query_repo import ICatalogQueryRepo
from src.service.booking.domain.entity.cast_entity import Cast
from src.service.booking.domain.entity.date_time_slot_entity import DateTimeSlot
from src.service.booking.domain.entity.movie_entity import Movie
from src.service.booking.domain.entity.show_entity import Show


class ListCatalogUseCase:
    """Pass-through listings for the catalog pages; no business rules apply."""

    def __init__(self, *, catalog_query_repo: ICatalogQueryRepo) -> None:
        self.catalog_query_repo = catalog_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        catalog_query_repo: ICatalogQueryRepo = Depends(Provide[Container.catalog_query_repo]),
    ) -> Self:
        return cls(catalog_query_repo=catalog_query_repo)

    async def list_movies(self) -> List[Movie]:
        return await self.catalog_query_repo.list_movies()

    async def list_casts(self) -> List[Cast]:
        return await self.catalog_query_repo.list_casts()

    async def list_shows(self) -> List[Show]:
        return await self.catalog_query_repo.list_shows()

    async def list_time_slots(self) -> List[DateTimeSlot]:
        return await self.catalog_query_repo.list_time_slots()
