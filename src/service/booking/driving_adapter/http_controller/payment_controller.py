from fastapi import APIRouter, Depends, status

from src.platform.constant.route_constant import CHECKOUT_SESSION
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.command.create_checkout_session_use_case import (
    CreateCheckoutSessionUseCase,
)
from src.service.booking.driving_adapter.http_controller.schema.payment_schema import (
    CheckoutSessionRequest,
    CheckoutSessionResponse,
)


router = APIRouter()


@router.post(CHECKOUT_SESSION, status_code=status.HTTP_200_OK)
@Logger.io
async def create_checkout_session(
    request: CheckoutSessionRequest,
    use_case: CreateCheckoutSessionUseCase = Depends(CreateCheckoutSessionUseCase.depends),
) -> CheckoutSessionResponse:
    url = await use_case.create_checkout_session(
        seats=request.seats, total_price=request.total_price
    )
    return CheckoutSessionResponse(url=url)
