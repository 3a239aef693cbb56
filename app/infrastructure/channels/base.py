"""Channel abstract base class.

Every channel implementation turns one unified message into a provider
call through the same steps, and collapses every failure into a
DeliveryResult instead of raising.
"""

from abc import ABC, abstractmethod
from typing import Any, Type

from pydantic import BaseModel

from infrastructure.channels.models import (
    ChannelCapability,
    ChannelKind,
    DeliveryResult,
    FormatKind,
    TaskInstance,
    UnifiedMessageContent,
)
from infrastructure.channels.validation import InstanceValidator
from infrastructure.credentials import CredentialCache
from infrastructure.exceptions import RelayError, UnsupportedFormatError
from infrastructure.logging import bind_request_context, get_module_logger
from infrastructure.transport import TransportSelector

logger = get_module_logger()


class Channel(ABC):
    """Abstract base class for delivery channels.

    Subclasses declare their capability and auth/config models, and
    implement the three provider-specific steps: building a client,
    resolving the target and calling the client for a rendered format.

    Example Implementation:
        class PagerChannel(Channel):
            capability = ChannelCapability(
                kind=ChannelKind.PAGER, formats=(FormatKind.TEXT,)
            )
            auth_model = PagerAuth
            config_model = PagerConfig

            def build_client(self, auth):
                return PagerClient(
                    auth.api_key, transport_selector=self.transport_selector
                )

            def resolve_target(self, config, content):
                return resolve_target(content, config.default_pager)

            def deliver(self, client, target, fmt, text, content):
                return client.page(target, text)
    """

    capability: ChannelCapability
    auth_model: Type[BaseModel]
    config_model: Type[BaseModel]

    def __init__(
        self,
        validator: InstanceValidator,
        credential_cache: CredentialCache,
        transport_selector: TransportSelector,
    ):
        self.validator = validator
        self.credential_cache = credential_cache
        self.transport_selector = transport_selector

    @property
    def kind(self) -> ChannelKind:
        return self.capability.kind

    def send_unified(
        self,
        auth: Any,
        instance: TaskInstance,
        content: UnifiedMessageContent,
    ) -> DeliveryResult:
        """Deliver ``content`` for one task instance.

        Never raises for expected failures: auth of the wrong shape, invalid
        instance config, no common format and provider/transport errors all
        come back as a failed DeliveryResult.

        Args:
            auth: Channel credentials; must be an instance of ``auth_model``.
            instance: Task instance holding the per-channel config.
            content: Provider-agnostic message.

        Returns:
            DeliveryResult with the raw provider response on success, or an
            error message (and any response received) on failure.
        """
        with bind_request_context(
            channel=self.kind.value,
            instance_id=instance.id,
            task_id=instance.task_id,
        ):
            result = self._dispatch(auth, instance, content)
            if result.is_success:
                logger.info("unified_message_delivered")
            else:
                logger.warning(
                    "unified_message_failed",
                    error=result.error_message,
                    has_response_body=bool(result.response_body),
                )
            return result

    def _dispatch(
        self,
        auth: Any,
        instance: TaskInstance,
        content: UnifiedMessageContent,
    ) -> DeliveryResult:
        if not isinstance(auth, self.auth_model):
            return DeliveryResult.failed("type conversion failed")

        error, config = self.validator.validate(instance)
        if error:
            return DeliveryResult.failed(error)
        if not isinstance(config, self.config_model):
            return DeliveryResult.failed(f"{self.kind.value} config validation failed")

        try:
            fmt, text = content.render(self.capability)
        except UnsupportedFormatError as e:
            return DeliveryResult.failed(str(e))

        target = self.resolve_target(config, content)

        try:
            client = self.build_client(auth)
            body = self.deliver(client, target, fmt, text, content)
        except UnsupportedFormatError as e:
            return DeliveryResult.failed(str(e))
        except RelayError as e:
            return DeliveryResult.failed(f"send failed: {e}", e.response_body or "")

        return DeliveryResult.delivered(body)

    @abstractmethod
    def build_client(self, auth: Any) -> Any:
        """Build the provider client for ``auth``."""
        pass

    @abstractmethod
    def resolve_target(self, config: Any, content: UnifiedMessageContent) -> Any:
        """Resolve the delivery target from mentions and the instance config."""
        pass

    @abstractmethod
    def deliver(
        self,
        client: Any,
        target: Any,
        fmt: FormatKind,
        text: str,
        content: UnifiedMessageContent,
    ) -> str:
        """Send ``text`` rendered as ``fmt`` and return the raw response body.

        Raises:
            UnsupportedFormatError: ``fmt`` has no send path on this channel.
            RelayError: Any client failure.
        """
        pass
