"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core relay services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the relay. The
    @lru_cache decorator ensures only ONE instance is created per process,
    even if called from multiple packages.

    Usage:
        from infrastructure.services.providers import get_settings
        api_base = get_settings().wechat_corp.API_BASE

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_credential_cache():
    """
    Get the process-wide access-token cache.

    Every client built without an explicit cache shares this one, so two
    sends for the same credentials reuse a single token.

    Returns:
        CredentialCache: Configured from ``settings.credentials``.
    """
    from infrastructure.credentials import CredentialCache

    credentials = get_settings().credentials
    return CredentialCache(
        expiry_skew_seconds=credentials.expiry_skew_seconds,
        single_flight=credentials.single_flight,
    )


@lru_cache
def get_transport_selector():
    """
    Get the process-wide transport selector.

    Returns:
        TransportSelector: Configured from ``settings.transport``.
    """
    from infrastructure.transport import TransportSelector

    transport = get_settings().transport
    return TransportSelector(
        request_timeout_seconds=transport.request_timeout_seconds,
        socks_connect_timeout_seconds=transport.socks_connect_timeout_seconds,
        socks_keepalive_seconds=transport.socks_keepalive_seconds,
    )


@lru_cache
def get_instance_validator():
    """Get the default schema-based task instance validator."""
    from infrastructure.channels.validation import SchemaInstanceValidator

    return SchemaInstanceValidator()


@lru_cache
def get_channel_registry():
    """
    Get the registry of built-in channels.

    All channels share the process-wide validator, credential cache and
    transport selector.
    """
    from infrastructure.channels.service import build_default_registry

    return build_default_registry(
        validator=get_instance_validator(),
        credential_cache=get_credential_cache(),
        transport_selector=get_transport_selector(),
    )


@lru_cache
def get_relay_service():
    """Get the message relay service over the built-in channel registry."""
    from infrastructure.channels.service import MessageRelayService

    return MessageRelayService(get_channel_registry())
