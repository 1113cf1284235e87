"""
Stripe Checkout gateway

https://docs.stripe.com/api/checkout/sessions/create
"""

from functools import partial

import anyio.to_thread
from pydantic import SecretStr
import stripe

from src.platform.exception.exceptions import UpstreamError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_payment_gateway import IPaymentGateway
from src.service.booking.domain.booking_errors import BookingErrorMessage


class StripePaymentGatewayImpl(IPaymentGateway):
    def __init__(
        self,
        *,
        api_key: SecretStr,
        currency: str,
        success_url: str,
        cancel_url: str,
    ) -> None:
        self._api_key = api_key
        self.currency = currency
        self.success_url = success_url
        self.cancel_url = cancel_url

    @Logger.io
    async def create_checkout_session(self, *, product_name: str, amount_minor: int) -> str:
        # The SDK is blocking; keep it off the event loop
        create_session = partial(
            stripe.checkout.Session.create,
            api_key=self._api_key.get_secret_value(),
            payment_method_types=['card'],
            mode='payment',
            line_items=[
                {
                    'price_data': {
                        'currency': self.currency,
                        'product_data': {'name': product_name},
                        'unit_amount': amount_minor,
                    },
                    'quantity': 1,
                }
            ],
            success_url=self.success_url,
            cancel_url=self.cancel_url,
        )

        try:
            session = await anyio.to_thread.run_sync(create_session)
        except stripe.StripeError as e:
            Logger.base.error(
                f'💳 [STRIPE] Checkout session failed: {type(e).__name__} '
                f'(http_status={e.http_status}, code={e.code})'
            )
            raise UpstreamError(BookingErrorMessage.CHECKOUT_FAILED.value) from e

        if not session.url:
            raise UpstreamError(BookingErrorMessage.CHECKOUT_FAILED.value)

        Logger.base.info(f'💳 [STRIPE] Checkout session {session.id} created')
        return session.url
