"""Integration settings __init__ - exports all provider settings."""

from infrastructure.configuration.integrations.wechat_corp import WeChatCorpSettings
from infrastructure.configuration.integrations.wecom_bot import WeComBotSettings

__all__ = [
    "WeChatCorpSettings",
    "WeComBotSettings",
]
