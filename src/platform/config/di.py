"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.service.booking.driven_adapter.payment.stripe_payment_gateway_impl import (
    StripePaymentGatewayImpl,
)
from src.service.booking.driven_adapter.repo.booking_query_repo_impl import BookingQueryRepoImpl
from src.service.booking.driven_adapter.repo.catalog_query_repo_impl import CatalogQueryRepoImpl


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database session factory for read paths
    database = providers.Singleton(Database)

    # Query repositories (stateless - open a session per call)
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=database.provided.session
    )
    catalog_query_repo = providers.Singleton(
        CatalogQueryRepoImpl, session_factory=database.provided.session
    )

    # Payment processor
    payment_gateway = providers.Singleton(
        StripePaymentGatewayImpl,
        api_key=config_service.provided.STRIPE_SECRET_KEY,
        currency=config_service.provided.STRIPE_CURRENCY,
        success_url=config_service.provided.CHECKOUT_SUCCESS_URL,
        cancel_url=config_service.provided.CHECKOUT_CANCEL_URL,
    )


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
