from abc import ABC, abstractmethod


class IPaymentGateway(ABC):
    @abstractmethod
    async def create_checkout_session(self, *, product_name: str, amount_minor: int) -> str:
        """
        Open a hosted checkout for a single line item.

        Args:
            product_name: Line item label shown on the checkout page
            amount_minor: Amount in the currency's minor unit (cents)

        Returns:
            Redirect URL of the checkout session

        Raises:
            UpstreamError: The processor rejected the request or was unreachable
        """
        pass
