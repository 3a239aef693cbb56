"""WeChat corp application integration."""

from .client import WeChatCorpAccountClient

__all__ = ["WeChatCorpAccountClient"]
