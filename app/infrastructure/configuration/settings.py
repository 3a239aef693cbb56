"""Message relay configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Integration settings
from infrastructure.configuration.integrations import (
    WeChatCorpSettings,
    WeComBotSettings,
)

# Infrastructure settings
from infrastructure.configuration.infrastructure import (
    CredentialSettings,
    TransportSettings,
)


class Settings(BaseSettings):
    """Message relay configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object.
    Settings are organized by concern:

    - **Integrations**: Provider endpoints (WeChat corp application, WeCom bot)
    - **Infrastructure**: Core relay behavior (transport timeouts, credential cache)

    Environment Variables:
        PREFIX: Environment prefix for non-production deployments
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA for deployment tracking

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        timeout = settings.transport.request_timeout_seconds
        skew = settings.credentials.expiry_skew_seconds
        api_base = settings.wechat_corp.API_BASE
        ```
    """

    # Application-level settings
    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    # Integration settings
    wechat_corp: WeChatCorpSettings
    wecom_bot: WeComBotSettings

    # Infrastructure settings
    transport: TransportSettings
    credentials: CredentialSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            # Integrations
            "wechat_corp": WeChatCorpSettings,
            "wecom_bot": WeComBotSettings,
            # Infrastructure
            "transport": TransportSettings,
            "credentials": CredentialSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the singleton settings instance
settings = Settings()
