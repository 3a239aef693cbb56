"""Infrastructure modules for the message relay.

Centralized infrastructure components:
- configuration: Settings management (settings, TransportSettings)
- logging: Structured logging (get_module_logger, bind_request_context)
- credentials: Access-token cache (CredentialCache)
- transport: Proxy-aware HTTP transport selection (TransportSelector)
- channels: Unified content, channel dispatchers and relay service
- services: Process-wide providers (get_settings, get_relay_service)
- exceptions: Relay error taxonomy
"""
