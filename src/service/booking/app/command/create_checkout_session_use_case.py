from decimal import ROUND_HALF_UP, Decimal
import math
import time
from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError, UpstreamError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.booking.app.interface.i_payment_gateway import IPaymentGateway
from src.service.booking.domain.booking_errors import BookingErrorMessage


def to_minor_units(amount: float | Decimal) -> int:
    """19.99 -> 1999, half-up on the third decimal"""
    return int((Decimal(str(amount)) * 100).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def build_product_name(seats: List[str]) -> str:
    return f'Movie Tickets: {", ".join(seats)}'


class CreateCheckoutSessionUseCase:
    """
    Ask the payment processor for a hosted checkout page.

    Independent of booking state: no booking id travels with the session.
    """

    def __init__(self, *, payment_gateway: IPaymentGateway) -> None:
        self.payment_gateway = payment_gateway
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        payment_gateway: IPaymentGateway = Depends(Provide[Container.payment_gateway]),
    ) -> Self:
        return cls(payment_gateway=payment_gateway)

    @Logger.io
    async def create_checkout_session(self, *, seats: List[str], total_price: float) -> str:
        if not seats:
            raise DomainError(BookingErrorMessage.SEATS_REQUIRED.value)
        if not math.isfinite(total_price):
            raise DomainError(BookingErrorMessage.PRICE_MUST_BE_FINITE.value)

        amount_minor = to_minor_units(total_price)
        # Sub-cent totals round to nothing chargeable
        if amount_minor <= 0:
            raise DomainError(BookingErrorMessage.PRICE_MUST_BE_POSITIVE.value)

        start = time.perf_counter()
        result = 'failed'

        with self.tracer.start_as_current_span(
            'use_case.create_checkout_session',
            attributes={'checkout.amount_minor': amount_minor, 'checkout.seat_count': len(seats)},
        ):
            try:
                url = await self.payment_gateway.create_checkout_session(
                    product_name=build_product_name(seats), amount_minor=amount_minor
                )
                result = 'success'
            except UpstreamError:
                result = 'upstream_error'
                raise
            finally:
                metrics.record_checkout(result=result, duration=time.perf_counter() - start)

        return url
