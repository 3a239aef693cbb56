"""Task instance validation.

The relay does not own task storage. It asks an InstanceValidator to turn
a stored TaskInstance into the channel-specific config model; an empty
error string means the config is usable.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple, Type

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from infrastructure.channels.models import (
    ChannelKind,
    TaskInstance,
    WeChatCorpAccountConfig,
    WeComBotConfig,
)

ValidationOutcome = Tuple[str, Optional[BaseModel]]


class InstanceValidator(ABC):
    """Materializes a channel config from a task instance."""

    @abstractmethod
    def validate(self, instance: TaskInstance) -> ValidationOutcome:
        """Validate ``instance`` and build its channel config.

        Returns:
            ("", config) when usable, (error_message, None) otherwise.
        """
        pass


DEFAULT_CONFIG_MODELS: Dict[ChannelKind, Type[BaseModel]] = {
    ChannelKind.WECHAT_CORP_ACCOUNT: WeChatCorpAccountConfig,
    ChannelKind.WECOM_BOT: WeComBotConfig,
}


class SchemaInstanceValidator(InstanceValidator):
    """Validates instance config against a pydantic model per channel kind."""

    def __init__(self, models: Optional[Dict[ChannelKind, Type[BaseModel]]] = None):
        self._models = dict(models or DEFAULT_CONFIG_MODELS)

    def validate(self, instance: TaskInstance) -> ValidationOutcome:
        model = self._models.get(instance.channel_kind)
        if model is None:
            return f"no config schema for channel {instance.channel_kind.value}", None
        try:
            return "", model.model_validate(instance.config)
        except PydanticValidationError as e:
            first = e.errors()[0]
            location = ".".join(str(part) for part in first["loc"]) or "config"
            kind = instance.channel_kind.value
            return f"{kind} config invalid: {location}: {first['msg']}", None
