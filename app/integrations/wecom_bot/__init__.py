"""WeCom group bot integration."""

from .client import WeComBotClient

__all__ = ["WeComBotClient"]
