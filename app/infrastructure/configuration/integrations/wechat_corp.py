"""WeChat corp application (enterprise WeChat agent) settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class WeChatCorpSettings(IntegrationSettings):
    """WeChat corp application API configuration.

    Environment Variables:
        WECHAT_CORP_API_BASE: Base URL of the corp API (token and message endpoints)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        api_base = settings.wechat_corp.API_BASE
        ```
    """

    API_BASE: str = Field(
        default="https://qyapi.weixin.qq.com", alias="WECHAT_CORP_API_BASE"
    )
