"""
Wire Modules Configuration

Modules that resolve dependencies through Provide[Container.xxx].
Shared between production and test environments.
"""

from types import ModuleType

from src.service.booking.app.command import create_checkout_session_use_case
from src.service.booking.app.query import list_bookings_use_case, list_catalog_use_case


WIRE_MODULES: list[ModuleType] = [
    create_checkout_session_use_case,
    list_bookings_use_case,
    list_catalog_use_case,
]
