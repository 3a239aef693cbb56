"""Outbound transport infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class TransportSettings(InfrastructureSettings):
    """Timeouts for outbound provider calls.

    Environment Variables:
        TRANSPORT_REQUEST_TIMEOUT_SECONDS: Per-request timeout (default: 15s)
        TRANSPORT_SOCKS_CONNECT_TIMEOUT_SECONDS: SOCKS5 connection establishment
            timeout (default: 30s)
        TRANSPORT_SOCKS_KEEPALIVE_SECONDS: TCP keep-alive idle time for SOCKS5
            connections (default: 30s)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        timeout = settings.transport.request_timeout_seconds
        ```
    """

    request_timeout_seconds: float = Field(
        default=15.0,
        alias="TRANSPORT_REQUEST_TIMEOUT_SECONDS",
        description="Timeout applied to every outbound provider request",
    )
    socks_connect_timeout_seconds: float = Field(
        default=30.0,
        alias="TRANSPORT_SOCKS_CONNECT_TIMEOUT_SECONDS",
        description="Connect timeout when dialing through a SOCKS5 proxy",
    )
    socks_keepalive_seconds: int = Field(
        default=30,
        alias="TRANSPORT_SOCKS_KEEPALIVE_SECONDS",
        description="TCP keep-alive idle seconds for SOCKS5 connections",
    )
