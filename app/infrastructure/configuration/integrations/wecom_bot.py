"""WeCom group bot (webhook robot) settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class WeComBotSettings(IntegrationSettings):
    """WeCom group bot webhook configuration.

    Environment Variables:
        WECOM_BOT_API_BASE: Base URL used when a bot is configured by key only
    """

    API_BASE: str = Field(
        default="https://qyapi.weixin.qq.com", alias="WECOM_BOT_API_BASE"
    )
