"""Proxy-aware outbound HTTP transport."""

from infrastructure.transport.selector import (
    HttpTransport,
    TransportRoute,
    TransportSelector,
)

__all__ = ["HttpTransport", "TransportRoute", "TransportSelector"]
