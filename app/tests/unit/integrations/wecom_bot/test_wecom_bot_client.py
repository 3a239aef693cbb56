"""Unit tests for the WeCom group bot client."""

import pytest

from infrastructure.exceptions import DeliveryError, TransportError, ValidationError
from integrations.wecom_bot import WeComBotClient
from tests.factories import make_ok_response, make_response

pytestmark = pytest.mark.unit

API_BASE = "https://bot.example"


def make_client(mock_selector, webhook="bot-key-123", proxy_url=""):
    return WeComBotClient(
        webhook,
        proxy_url=proxy_url,
        transport_selector=mock_selector,
        api_base=API_BASE,
    )


class TestWebhookAddressing:
    """Tests for key and full-URL webhooks."""

    def test_key_is_sent_as_query_parameter(self, mock_selector, mock_transport):
        mock_transport.request.return_value = make_ok_response()

        make_client(mock_selector).send_markdown("**hi**")

        mock_transport.request.assert_called_once_with(
            "POST",
            f"{API_BASE}/cgi-bin/webhook/send",
            params={"key": "bot-key-123"},
            json={"msgtype": "markdown", "markdown": {"content": "**hi**"}},
        )

    def test_full_url_used_as_is(self, mock_selector, mock_transport):
        mock_transport.request.return_value = make_ok_response()
        webhook = "https://qyapi.weixin.qq.com/cgi-bin/webhook/send?key=abc"

        make_client(mock_selector, webhook=webhook).send_markdown("x")

        args = mock_transport.request.call_args
        assert args.args[1] == webhook
        assert args.kwargs["params"] is None

    def test_proxy_passed_to_selector(self, mock_selector, mock_transport):
        mock_transport.request.return_value = make_ok_response()

        make_client(mock_selector, proxy_url="socks5://p:1080").send_markdown("x")

        mock_selector.select.assert_called_once_with("socks5://p:1080")

    def test_blank_webhook_rejected_before_io(self, mock_selector, mock_transport):
        with pytest.raises(ValidationError):
            make_client(mock_selector, webhook="  ").send_markdown("x")

        mock_transport.request.assert_not_called()


class TestMessages:
    """Tests for message payloads."""

    def test_text_with_mentions(self, mock_selector, mock_transport):
        mock_transport.request.return_value = make_ok_response()

        make_client(mock_selector).send_text(
            "hi", mentioned_list=["u1", "@all"], mentioned_mobile_list=["138"]
        )

        assert mock_transport.request.call_args.kwargs["json"] == {
            "msgtype": "text",
            "text": {
                "content": "hi",
                "mentioned_list": ["u1", "@all"],
                "mentioned_mobile_list": ["138"],
            },
        }

    def test_text_without_mentions_omits_arrays(self, mock_selector, mock_transport):
        mock_transport.request.return_value = make_ok_response()

        make_client(mock_selector).send_text("hi")

        assert mock_transport.request.call_args.kwargs["json"]["text"] == {
            "content": "hi"
        }

    def test_news_article(self, mock_selector, mock_transport):
        mock_transport.request.return_value = make_ok_response()

        make_client(mock_selector).send_news("T", "D", "https://x")

        payload = mock_transport.request.call_args.kwargs["json"]
        assert payload["msgtype"] == "news"
        assert payload["news"]["articles"] == [
            {"title": "T", "description": "D", "url": "https://x"}
        ]

    def test_returns_raw_body(self, mock_selector, mock_transport):
        ok = make_ok_response()
        mock_transport.request.return_value = ok

        assert make_client(mock_selector).send_text("hi") == ok.text


class TestErrors:
    """Tests for provider error handling."""

    def test_errcode_raises_delivery_error(self, mock_selector, mock_transport):
        rejected = make_response({"errcode": 93000, "errmsg": "invalid webhook url"})
        mock_transport.request.return_value = rejected

        with pytest.raises(DeliveryError, match="invalid webhook url") as exc_info:
            make_client(mock_selector).send_text("hi")

        assert exc_info.value.response_body == rejected.text

    def test_http_error(self, mock_selector, mock_transport):
        mock_transport.request.return_value = make_response(
            status_code=404, text="not found"
        )

        with pytest.raises(TransportError, match="HTTP 404"):
            make_client(mock_selector).send_text("hi")
