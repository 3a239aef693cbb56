"""Test data factories for deterministic test data generation."""

from tests.factories.relay import (
    FakeClock,
    make_bot_auth,
    make_content,
    make_instance,
    make_ok_response,
    make_response,
    make_token_response,
    make_wechat_auth,
)

__all__ = [
    "FakeClock",
    "make_bot_auth",
    "make_content",
    "make_instance",
    "make_ok_response",
    "make_response",
    "make_token_response",
    "make_wechat_auth",
]
