"""WeCom group bot (webhook robot) API client.

Group bots authenticate with the key embedded in their webhook URL, so no
access token is involved. Mentions are passed as arrays on text messages.
"""

from typing import Any, Dict, Optional, Sequence

from infrastructure.exceptions import DeliveryError, ValidationError
from infrastructure.logging import get_module_logger
from infrastructure.transport import TransportSelector
from integrations.utils.api import decode_json_body, raise_for_errcode

logger = get_module_logger()

DEFAULT_API_BASE = "https://qyapi.weixin.qq.com"


class WeComBotClient:
    """Client for one WeCom group bot.

    Attributes:
        webhook: Bot key, or the complete webhook URL.
        proxy_url: Optional proxy for outbound calls.

    Example:
        client = WeComBotClient("693a91f6-7xxx-4bc4-97a0-0ec2sifa5aaa")
        client.send_text("build failed", mentioned_list=["@all"])
    """

    def __init__(
        self,
        webhook: str,
        proxy_url: str = "",
        transport_selector: Optional[TransportSelector] = None,
        api_base: Optional[str] = None,
    ):
        self.webhook = (webhook or "").strip()
        self.proxy_url = proxy_url

        if transport_selector is None or api_base is None:
            from infrastructure.services import providers

            if transport_selector is None:
                transport_selector = providers.get_transport_selector()
            if api_base is None:
                api_base = providers.get_settings().wecom_bot.API_BASE

        self._transport_selector = transport_selector
        self._api_base = (api_base or DEFAULT_API_BASE).rstrip("/")

    def send_text(
        self,
        content: str,
        mentioned_list: Sequence[str] = (),
        mentioned_mobile_list: Sequence[str] = (),
    ) -> str:
        text: Dict[str, Any] = {"content": content}
        if mentioned_list:
            text["mentioned_list"] = list(mentioned_list)
        if mentioned_mobile_list:
            text["mentioned_mobile_list"] = list(mentioned_mobile_list)
        return self._send("text", text)

    def send_markdown(self, content: str) -> str:
        return self._send("markdown", {"content": content})

    def send_news(self, title: str, description: str, url: str) -> str:
        return self._send(
            "news",
            {"articles": [{"title": title, "description": description, "url": url}]},
        )

    def _send(self, msgtype: str, message: Dict[str, Any]) -> str:
        if not self.webhook:
            raise ValidationError("bot webhook must not be empty")

        if self.webhook.lower().startswith(("http://", "https://")):
            url, params = self.webhook, None
        else:
            url = f"{self._api_base}/cgi-bin/webhook/send"
            params = {"key": self.webhook}

        with self._transport_selector.select(self.proxy_url) as transport:
            response = transport.request(
                "POST", url, params=params, json={"msgtype": msgtype, msgtype: message}
            )
            body = response.text
            data = decode_json_body(response)

        try:
            raise_for_errcode(data, body)
        except DeliveryError as e:
            logger.warning(
                "wecom_bot_send_rejected",
                msgtype=msgtype,
                errcode=data.get("errcode"),
                error=str(e),
            )
            raise

        logger.info("wecom_bot_message_sent", msgtype=msgtype)
        return body
