"""Message relay service.

Entry point for callers that only know the channel kind of a stored
send way: looks the channel up and hands the send over to it.
"""

from typing import Any, Optional, Union

from infrastructure.channels.models import (
    ChannelKind,
    DeliveryResult,
    TaskInstance,
    UnifiedMessageContent,
)
from infrastructure.channels.registry import ChannelRegistry
from infrastructure.channels.validation import (
    InstanceValidator,
    SchemaInstanceValidator,
)
from infrastructure.channels.wechat_corp_account import WeChatCorpAccountChannel
from infrastructure.channels.wecom_bot import WeComBotChannel
from infrastructure.credentials import CredentialCache
from infrastructure.logging import get_module_logger
from infrastructure.transport import TransportSelector

logger = get_module_logger()


class MessageRelayService:
    """Routes unified sends to the channel registered for their kind.

    Example:
        service = MessageRelayService(build_default_registry())
        result = service.send_unified(
            ChannelKind.WECHAT_CORP_ACCOUNT, auth, instance, content
        )
        if not result.is_success:
            logger.error("send_failed", error=result.error_message)
    """

    def __init__(self, registry: ChannelRegistry):
        self.registry = registry

    def send_unified(
        self,
        kind: Union[ChannelKind, str],
        auth: Any,
        instance: TaskInstance,
        content: UnifiedMessageContent,
    ) -> DeliveryResult:
        channel = self.registry.find(kind)
        if channel is None:
            kind_value = kind.value if isinstance(kind, ChannelKind) else str(kind)
            logger.warning(
                "unsupported_channel", channel=kind_value, instance_id=instance.id
            )
            return DeliveryResult.failed(f"unsupported channel: {kind_value}")
        return channel.send_unified(auth, instance, content)


def build_default_registry(
    validator: Optional[InstanceValidator] = None,
    credential_cache: Optional[CredentialCache] = None,
    transport_selector: Optional[TransportSelector] = None,
) -> ChannelRegistry:
    """Build a registry holding every built-in channel.

    All channels share one validator, credential cache and transport
    selector. Missing collaborators are taken from the process-wide
    providers.
    """
    if validator is None:
        validator = SchemaInstanceValidator()
    if credential_cache is None or transport_selector is None:
        from infrastructure.services import providers

        if credential_cache is None:
            credential_cache = providers.get_credential_cache()
        if transport_selector is None:
            transport_selector = providers.get_transport_selector()

    registry = ChannelRegistry()
    for channel_class in (WeChatCorpAccountChannel, WeComBotChannel):
        registry.register(
            channel_class(
                validator=validator,
                credential_cache=credential_cache,
                transport_selector=transport_selector,
            )
        )
    return registry
