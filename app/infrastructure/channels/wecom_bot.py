"""WeCom group bot channel."""

from dataclasses import dataclass, field
from typing import List

from infrastructure.channels.base import Channel
from infrastructure.channels.models import (
    ChannelCapability,
    ChannelKind,
    FormatKind,
    UnifiedMessageContent,
    WeComBotAuth,
    WeComBotConfig,
)
from infrastructure.channels.targets import resolve_recipients
from infrastructure.exceptions import UnsupportedFormatError
from integrations.wecom_bot import WeComBotClient


@dataclass(frozen=True)
class BotMentions:
    """Resolved mention arrays of a group bot text message."""

    users: List[str] = field(default_factory=list)
    mobiles: List[str] = field(default_factory=list)


class WeComBotChannel(Channel):
    """Delivers to a WeCom group chat through its webhook bot.

    Mentions only apply to text messages; markdown is sent without them.
    Text content with both a title and a URL is sent as a news article.
    Phone-number mentions come from the content, falling back to the
    instance config, and are dropped when everyone is mentioned.
    """

    capability = ChannelCapability(
        kind=ChannelKind.WECOM_BOT,
        formats=(FormatKind.MARKDOWN, FormatKind.TEXT),
    )
    auth_model = WeComBotAuth
    config_model = WeComBotConfig

    def build_client(self, auth: WeComBotAuth) -> WeComBotClient:
        return WeComBotClient(
            webhook=auth.webhook,
            proxy_url=auth.proxy_url,
            transport_selector=self.transport_selector,
        )

    def resolve_target(
        self, config: WeComBotConfig, content: UnifiedMessageContent
    ) -> BotMentions:
        users = resolve_recipients(content, config.mentioned_list)
        if content.is_mention_all():
            return BotMentions(users=users)
        mobiles = list(content.mention_mobiles) or list(config.mentioned_mobile_list)
        return BotMentions(users=users, mobiles=mobiles)

    def deliver(
        self,
        client: WeComBotClient,
        target: BotMentions,
        fmt: FormatKind,
        text: str,
        content: UnifiedMessageContent,
    ) -> str:
        if fmt == FormatKind.MARKDOWN:
            return client.send_markdown(text)
        if fmt == FormatKind.TEXT:
            if content.has_card_link():
                return client.send_news(content.title, text, content.url)
            return client.send_text(
                text,
                mentioned_list=target.users,
                mentioned_mobile_list=target.mobiles,
            )
        raise UnsupportedFormatError(f"unknown content type: {fmt.value}")
