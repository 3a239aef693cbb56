"""Channel core models.

Provider-agnostic message content, channel capability declarations, the
per-channel auth/config shapes handed in by collaborators, and the
two-string delivery result returned to callers.

Uses Pydantic BaseModel for runtime validation of caller-supplied data and
frozen dataclasses for fixed declarations.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from infrastructure.exceptions import UnsupportedFormatError


class FormatKind(str, Enum):
    """Content formats a message can be rendered in."""

    TEXT = "text"
    MARKDOWN = "markdown"
    HTML = "html"


class ChannelKind(str, Enum):
    """Unique identifier of each channel implementation."""

    WECHAT_CORP_ACCOUNT = "wechat_corp_account"
    WECOM_BOT = "wecom_bot"


@dataclass(frozen=True)
class ChannelCapability:
    """Declares which content formats a channel accepts.

    Attributes:
        kind: Channel identifier.
        formats: Accepted formats, most preferred first.

    Example:
        capability = ChannelCapability(
            kind=ChannelKind.WECHAT_CORP_ACCOUNT,
            formats=(FormatKind.MARKDOWN, FormatKind.TEXT),
        )
    """

    kind: ChannelKind
    formats: Tuple[FormatKind, ...]

    def supports(self, fmt: FormatKind) -> bool:
        return fmt in self.formats


def _unique_non_blank(values: List[str]) -> List[str]:
    seen = set()
    result = []
    for value in values:
        value = value.strip()
        if value and value not in seen:
            seen.add(value)
            result.append(value)
    return result


class UnifiedMessageContent(BaseModel):
    """Provider-agnostic message built once per send request.

    Attributes:
        title: Optional title; with ``url`` it turns text into a card.
        body: Primary rendering of the message.
        body_format: Format ``body`` is written in.
        alternates: Extra renderings of the same message keyed by format.
        url: Optional link-out target.
        mention_all: Mention everyone; overrides explicit mentions.
        mention_user_ids: Users to mention, order kept, duplicates dropped.
        mention_mobiles: Phone numbers to mention (group bots).

    Example:
        content = UnifiedMessageContent(
            title="Alert",
            body="**disk** almost full",
            body_format=FormatKind.MARKDOWN,
            alternates={FormatKind.TEXT: "disk almost full"},
            mention_user_ids=["u1", "u2"],
        )
    """

    model_config = ConfigDict(frozen=True)

    title: str = ""
    body: str
    body_format: FormatKind = FormatKind.TEXT
    alternates: Dict[FormatKind, str] = Field(default_factory=dict)
    url: str = ""
    mention_all: bool = False
    mention_user_ids: List[str] = Field(default_factory=list)
    mention_mobiles: List[str] = Field(default_factory=list)

    @field_validator("mention_user_ids", "mention_mobiles")
    @classmethod
    def normalize_mentions(cls, v: List[str]) -> List[str]:
        return _unique_non_blank(v)

    def renderings(self) -> Dict[FormatKind, str]:
        """All non-empty renderings, the body's own format first."""
        rendered: Dict[FormatKind, str] = {}
        if self.body:
            rendered[self.body_format] = self.body
        for fmt, text in self.alternates.items():
            if text and fmt not in rendered:
                rendered[fmt] = text
        return rendered

    def render(self, capability: ChannelCapability) -> Tuple[FormatKind, str]:
        """Pick the channel's most preferred format this content can produce.

        A rendering is never relabelled: markdown content without a text
        alternate cannot be sent to a text-only channel.

        Raises:
            UnsupportedFormatError: No format in common.
        """
        rendered = self.renderings()
        for fmt in capability.formats:
            if fmt in rendered:
                return fmt, rendered[fmt]
        accepted = ", ".join(f.value for f in capability.formats) or "nothing"
        available = ", ".join(f.value for f in rendered) or "nothing"
        raise UnsupportedFormatError(
            f"no supported content format (channel accepts: {accepted}; "
            f"content provides: {available})"
        )

    def is_mention_all(self) -> bool:
        return self.mention_all

    def has_card_link(self) -> bool:
        return bool(self.title and self.url)


class TaskInstance(BaseModel):
    """One delivery instance of a scheduled task, as stored by the task layer.

    Attributes:
        id: Instance identifier.
        task_id: Owning task.
        channel_kind: Channel this instance delivers through.
        config: Raw per-instance channel config, validated by an
            InstanceValidator.
    """

    id: str
    task_id: str = ""
    channel_kind: ChannelKind
    config: Dict[str, Any] = Field(default_factory=dict)


class WeChatCorpAccountAuth(BaseModel):
    """Credentials of a WeChat corp application (send way)."""

    corp_id: str
    agent_id: int
    agent_secret: str
    proxy_url: str = ""


class WeChatCorpAccountConfig(BaseModel):
    """Per-instance config of a WeChat corp application send.

    Attributes:
        to_account: Default recipient(s), ``|``-separated user ids or ``@all``.
    """

    to_account: str = ""


class WeComBotAuth(BaseModel):
    """Webhook of a WeCom group bot.

    Attributes:
        webhook: Bot key or the full webhook URL.
        proxy_url: Optional proxy for outbound calls.
    """

    webhook: str
    proxy_url: str = ""


class WeComBotConfig(BaseModel):
    """Per-instance config of a WeCom group bot send.

    Attributes:
        mentioned_list: Default user ids to mention.
        mentioned_mobile_list: Default phone numbers to mention.
    """

    mentioned_list: List[str] = Field(default_factory=list)
    mentioned_mobile_list: List[str] = Field(default_factory=list)


class DeliveryResult(BaseModel):
    """Normalized outcome of a unified send.

    A non-empty ``error_message`` means failure; ``response_body`` may still
    hold the provider's raw response for diagnostics. An empty
    ``error_message`` means success.

    Example:
        result = channel.send_unified(auth, instance, content)
        response_body, error_message = result.as_tuple()
    """

    response_body: str = ""
    error_message: str = ""

    @property
    def is_success(self) -> bool:
        return not self.error_message

    @classmethod
    def delivered(cls, response_body: str) -> "DeliveryResult":
        return cls(response_body=response_body)

    @classmethod
    def failed(cls, error_message: str, response_body: str = "") -> "DeliveryResult":
        return cls(response_body=response_body or "", error_message=error_message)

    def as_tuple(self) -> Tuple[str, str]:
        return self.response_body, self.error_message
