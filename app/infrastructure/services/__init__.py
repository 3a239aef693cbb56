"""Process-wide service providers.

Usage:
    from infrastructure.services import get_relay_service

    result = get_relay_service().send_unified(kind, auth, instance, content)
"""

from infrastructure.services.providers import (
    get_channel_registry,
    get_credential_cache,
    get_instance_validator,
    get_relay_service,
    get_settings,
    get_transport_selector,
)

__all__ = [
    "get_channel_registry",
    "get_credential_cache",
    "get_instance_validator",
    "get_relay_service",
    "get_settings",
    "get_transport_selector",
]
