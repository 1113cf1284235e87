from typing import List

from fastapi import APIRouter, Depends

from src.platform.constant.route_constant import (
    CAST_BASE,
    MOVIE_BASE,
    SHOW_BASE,
    TIME_SLOT_BASE,
)
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.query.list_catalog_use_case import ListCatalogUseCase
from src.service.booking.driving_adapter.http_controller.schema.catalog_schema import (
    CastResponse,
    DateTimeSlotResponse,
    MovieResponse,
    ShowResponse,
)


router = APIRouter()


@router.get(MOVIE_BASE)
@Logger.io(truncate_content=True)
async def list_movies(
    use_case: ListCatalogUseCase = Depends(ListCatalogUseCase.depends),
) -> List[MovieResponse]:
    return [MovieResponse.model_validate(movie) for movie in await use_case.list_movies()]


@router.get(CAST_BASE)
@Logger.io(truncate_content=True)
async def list_casts(
    use_case: ListCatalogUseCase = Depends(ListCatalogUseCase.depends),
) -> List[CastResponse]:
    return [CastResponse.model_validate(cast) for cast in await use_case.list_casts()]


@router.get(SHOW_BASE)
@Logger.io(truncate_content=True)
async def list_shows(
    use_case: ListCatalogUseCase = Depends(ListCatalogUseCase.depends),
) -> List[ShowResponse]:
    return [ShowResponse.model_validate(show) for show in await use_case.list_shows()]


@router.get(TIME_SLOT_BASE)
@Logger.io(truncate_content=True)
async def list_time_slots(
    use_case: ListCatalogUseCase = Depends(ListCatalogUseCase.depends),
) -> List[DateTimeSlotResponse]:
    return [
        DateTimeSlotResponse.model_validate(slot) for slot in await use_case.list_time_slots()
    ]
