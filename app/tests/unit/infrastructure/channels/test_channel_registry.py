"""Unit tests for the channel registry."""

import threading

import pytest

from infrastructure.channels import ChannelKind, ChannelRegistry, FormatKind
from infrastructure.exceptions import ChannelNotFoundError

pytestmark = pytest.mark.unit


@pytest.fixture
def registry(wechat_channel, bot_channel):
    registry = ChannelRegistry()
    registry.register(wechat_channel)
    registry.register(bot_channel)
    return registry


class TestChannelRegistry:
    """Tests for ChannelRegistry."""

    def test_get_by_kind(self, registry, wechat_channel):
        assert registry.get(ChannelKind.WECHAT_CORP_ACCOUNT) is wechat_channel

    def test_get_by_string_value(self, registry, bot_channel):
        assert registry.get("wecom_bot") is bot_channel

    def test_get_unknown_kind_raises(self, registry):
        with pytest.raises(ChannelNotFoundError, match="Channel 'fax' not found"):
            registry.get("fax")

    def test_get_unregistered_kind_raises(self):
        with pytest.raises(ChannelNotFoundError):
            ChannelRegistry().get(ChannelKind.WECOM_BOT)

    def test_find_returns_none_for_unknown(self, registry):
        assert registry.find("fax") is None

    def test_duplicate_registration_rejected(self, registry, wechat_channel):
        with pytest.raises(ValueError, match="already registered"):
            registry.register(wechat_channel)

    def test_unregister(self, registry):
        registry.unregister(ChannelKind.WECOM_BOT)

        assert ChannelKind.WECOM_BOT not in registry
        assert len(registry) == 1

    def test_unregister_missing_raises(self):
        with pytest.raises(ChannelNotFoundError):
            ChannelRegistry().unregister(ChannelKind.WECOM_BOT)

    def test_list_and_filter_by_format(self, registry):
        assert len(registry.list_channels()) == 2
        assert len(registry.get_channels_by_format(FormatKind.MARKDOWN)) == 2
        assert registry.get_channels_by_format(FormatKind.HTML) == []

    def test_concurrent_lookups(self, registry):
        errors = []

        def worker():
            try:
                for _ in range(100):
                    registry.get(ChannelKind.WECHAT_CORP_ACCOUNT)
            except Exception as e:  # pragma: no cover
                errors.append(e)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
