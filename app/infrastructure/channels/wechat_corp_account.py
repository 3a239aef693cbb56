"""WeChat corp application channel."""

from infrastructure.channels.base import Channel
from infrastructure.channels.models import (
    ChannelCapability,
    ChannelKind,
    FormatKind,
    UnifiedMessageContent,
    WeChatCorpAccountAuth,
    WeChatCorpAccountConfig,
)
from infrastructure.channels.targets import resolve_target
from infrastructure.exceptions import UnsupportedFormatError
from integrations.wechat_corp import WeChatCorpAccountClient


class WeChatCorpAccountChannel(Channel):
    """Delivers to users of a WeChat corp application.

    Markdown is preferred. Text content with both a title and a URL is sent
    as a text card, otherwise as plain text.
    """

    capability = ChannelCapability(
        kind=ChannelKind.WECHAT_CORP_ACCOUNT,
        formats=(FormatKind.MARKDOWN, FormatKind.TEXT),
    )
    auth_model = WeChatCorpAccountAuth
    config_model = WeChatCorpAccountConfig

    def build_client(self, auth: WeChatCorpAccountAuth) -> WeChatCorpAccountClient:
        return WeChatCorpAccountClient(
            corp_id=auth.corp_id,
            agent_id=auth.agent_id,
            agent_secret=auth.agent_secret,
            proxy_url=auth.proxy_url,
            credential_cache=self.credential_cache,
            transport_selector=self.transport_selector,
        )

    def resolve_target(
        self, config: WeChatCorpAccountConfig, content: UnifiedMessageContent
    ) -> str:
        return resolve_target(content, config.to_account)

    def deliver(
        self,
        client: WeChatCorpAccountClient,
        target: str,
        fmt: FormatKind,
        text: str,
        content: UnifiedMessageContent,
    ) -> str:
        if fmt == FormatKind.MARKDOWN:
            return client.send_markdown(target, text)
        if fmt == FormatKind.TEXT:
            if content.has_card_link():
                return client.send_text_card(target, content.title, text, content.url)
            return client.send_text(target, text)
        raise UnsupportedFormatError(f"unknown content type: {fmt.value}")
