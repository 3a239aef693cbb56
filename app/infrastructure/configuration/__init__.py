"""Infrastructure configuration module - public API.

Centralized configuration for the message relay using Pydantic BaseSettings
with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    TransportSettings: Outbound transport settings class (for testing)
    CredentialSettings: Credential cache settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    timeout = settings.transport.request_timeout_seconds

    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.infrastructure import (
    CredentialSettings,
    TransportSettings,
)

__all__ = ["Settings", "settings", "TransportSettings", "CredentialSettings"]
