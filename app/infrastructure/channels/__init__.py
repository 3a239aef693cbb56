"""Channel core: unified content, dispatchers and the channel lookup table.

Usage:
    from infrastructure.channels import (
        ChannelKind,
        MessageRelayService,
        UnifiedMessageContent,
        build_default_registry,
    )

    service = MessageRelayService(build_default_registry())
    result = service.send_unified(ChannelKind.WECOM_BOT, auth, instance, content)
"""

from infrastructure.channels.base import Channel
from infrastructure.channels.models import (
    ChannelCapability,
    ChannelKind,
    DeliveryResult,
    FormatKind,
    TaskInstance,
    UnifiedMessageContent,
    WeChatCorpAccountAuth,
    WeChatCorpAccountConfig,
    WeComBotAuth,
    WeComBotConfig,
)
from infrastructure.channels.registry import ChannelRegistry
from infrastructure.channels.service import MessageRelayService, build_default_registry
from infrastructure.channels.targets import resolve_recipients, resolve_target
from infrastructure.channels.validation import (
    InstanceValidator,
    SchemaInstanceValidator,
)
from infrastructure.channels.wechat_corp_account import WeChatCorpAccountChannel
from infrastructure.channels.wecom_bot import WeComBotChannel

__all__ = [
    "Channel",
    "ChannelCapability",
    "ChannelKind",
    "ChannelRegistry",
    "DeliveryResult",
    "FormatKind",
    "InstanceValidator",
    "MessageRelayService",
    "SchemaInstanceValidator",
    "TaskInstance",
    "UnifiedMessageContent",
    "WeChatCorpAccountAuth",
    "WeChatCorpAccountChannel",
    "WeChatCorpAccountConfig",
    "WeComBotAuth",
    "WeComBotChannel",
    "WeComBotConfig",
    "build_default_registry",
    "resolve_recipients",
    "resolve_target",
]
