"""Fixtures for channel dispatcher tests."""

import pytest

from infrastructure.channels import (
    SchemaInstanceValidator,
    WeChatCorpAccountChannel,
    WeComBotChannel,
)


@pytest.fixture
def validator():
    return SchemaInstanceValidator()


@pytest.fixture
def wechat_channel(validator, credential_cache, mock_selector):
    """WeChat corp application channel over mocked transport."""
    return WeChatCorpAccountChannel(
        validator=validator,
        credential_cache=credential_cache,
        transport_selector=mock_selector,
    )


@pytest.fixture
def bot_channel(validator, credential_cache, mock_selector):
    """WeCom bot channel over mocked transport."""
    return WeComBotChannel(
        validator=validator,
        credential_cache=credential_cache,
        transport_selector=mock_selector,
    )
