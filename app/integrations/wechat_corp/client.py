"""WeChat corp application (enterprise WeChat agent) API client.

Sends text, markdown and text-card messages as an application agent.
Access tokens come from the shared CredentialCache; every call goes
through a transport chosen for the application's proxy URL.
"""

from typing import Any, Dict, Optional

from infrastructure.credentials import (
    CredentialCache,
    CredentialIdentity,
    IssuedToken,
)
from infrastructure.exceptions import AuthError, DeliveryError, ValidationError
from infrastructure.logging import get_module_logger
from infrastructure.transport import TransportSelector
from integrations.utils.api import decode_json_body, raise_for_errcode

logger = get_module_logger()

PROVIDER = "wechat_corp"
DEFAULT_API_BASE = "https://qyapi.weixin.qq.com"

# Recipient subsets the send endpoint reports back as rejected.
SEND_DIAGNOSTIC_FIELDS = (
    "invaliduser",
    "invalidparty",
    "invalidtag",
    "unlicenseduser",
)


class WeChatCorpAccountClient:
    """Client for one WeChat corp application.

    Attributes:
        corp_id: Corp identifier.
        agent_id: Application agent id; must be positive to send.
        agent_secret: Application secret.
        proxy_url: Optional proxy for token and send calls.

    Example:
        client = WeChatCorpAccountClient("ww1", 1000002, "secret")
        body = client.send_markdown("u1|u2", "**deploy** finished")
    """

    def __init__(
        self,
        corp_id: str,
        agent_id: int,
        agent_secret: str,
        proxy_url: str = "",
        credential_cache: Optional[CredentialCache] = None,
        transport_selector: Optional[TransportSelector] = None,
        api_base: Optional[str] = None,
    ):
        self.corp_id = corp_id
        self.agent_id = agent_id
        self.agent_secret = agent_secret
        self.proxy_url = proxy_url

        if credential_cache is None or transport_selector is None or api_base is None:
            from infrastructure.services import providers

            if credential_cache is None:
                credential_cache = providers.get_credential_cache()
            if transport_selector is None:
                transport_selector = providers.get_transport_selector()
            if api_base is None:
                api_base = providers.get_settings().wechat_corp.API_BASE

        self._credential_cache = credential_cache
        self._transport_selector = transport_selector
        self._api_base = (api_base or DEFAULT_API_BASE).rstrip("/")

    @property
    def identity(self) -> CredentialIdentity:
        return CredentialIdentity.of(
            PROVIDER,
            corp_id=self.corp_id,
            agent_id=self.agent_id,
            agent_secret=self.agent_secret,
        )

    def get_access_token(self) -> str:
        """Return a cached or freshly issued access token.

        Raises:
            AuthError: Missing corp id/secret or the provider refused.
            TransportError: The token request failed.
        """
        return self._credential_cache.get_token(self.identity, self.issue_token)

    def issue_token(self) -> IssuedToken:
        """Call the token endpoint once.

        Raises:
            AuthError: Non-zero errcode in the token response.
            TransportError: Network failure, non-2xx or malformed body.
        """
        with self._transport_selector.select(self.proxy_url) as transport:
            response = transport.request(
                "GET",
                f"{self._api_base}/cgi-bin/gettoken",
                params={"corpid": self.corp_id, "corpsecret": self.agent_secret},
            )
            data = decode_json_body(response)

        errcode = data.get("errcode", 0)
        if errcode not in (0, None):
            logger.warning(
                "wechat_corp_token_refused",
                corp_id=self.corp_id,
                agent_id=self.agent_id,
                errcode=errcode,
            )
            raise AuthError(str(data.get("errmsg") or f"errcode {errcode}"))

        try:
            expires_in = int(data.get("expires_in") or 0)
        except (TypeError, ValueError):
            expires_in = 0
        return IssuedToken(
            token=str(data.get("access_token") or ""), expires_in=expires_in
        )

    def send_text(self, to_user: str, content: str) -> str:
        return self._send(to_user, "text", {"content": content})

    def send_markdown(self, to_user: str, content: str) -> str:
        return self._send(to_user, "markdown", {"content": content})

    def send_text_card(
        self, to_user: str, title: str, description: str, url: str
    ) -> str:
        return self._send(
            to_user,
            "textcard",
            {"title": title, "description": description, "url": url},
        )

    def _send(self, to_user: str, msgtype: str, message: Dict[str, Any]) -> str:
        """Send one message envelope and return the raw response body.

        Raises:
            ValidationError: Empty recipient or non-positive agent id.
            AuthError: Token could not be obtained.
            TransportError: Network failure, non-2xx or malformed body.
            DeliveryError: Provider returned a non-zero errcode.
        """
        if not to_user:
            raise ValidationError("recipient must not be empty")
        if self.agent_id <= 0:
            raise ValidationError(f"invalid agent id: {self.agent_id}")

        token = self.get_access_token()
        payload = {
            "touser": to_user,
            "msgtype": msgtype,
            "agentid": self.agent_id,
            msgtype: message,
        }

        with self._transport_selector.select(self.proxy_url) as transport:
            response = transport.request(
                "POST",
                f"{self._api_base}/cgi-bin/message/send",
                params={"access_token": token},
                json=payload,
            )
            body = response.text
            data = decode_json_body(response)

        try:
            raise_for_errcode(data, body, SEND_DIAGNOSTIC_FIELDS)
        except DeliveryError as e:
            logger.warning(
                "wechat_corp_send_rejected",
                agent_id=self.agent_id,
                msgtype=msgtype,
                errcode=data.get("errcode"),
                error=str(e),
            )
            raise

        logger.info(
            "wechat_corp_message_sent", agent_id=self.agent_id, msgtype=msgtype
        )
        return body
