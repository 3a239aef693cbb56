"""Unit tests for infrastructure.logging.context module.

Tests cover:
- bind_request_context() context manager
- get_correlation_id()
- clear_request_context()
- Context isolation and cleanup
"""

import uuid

import pytest
import structlog

from infrastructure.logging.context import (
    bind_request_context,
    clear_request_context,
    get_correlation_id,
)


@pytest.fixture(autouse=True)
def clean_context():
    clear_request_context()
    yield
    clear_request_context()


@pytest.mark.unit
class TestBindRequestContext:
    """Test suite for bind_request_context context manager."""

    def test_auto_generates_correlation_id(self):
        """Correlation ID is auto-generated if not provided."""
        with bind_request_context(channel="wecom_bot"):
            uuid.UUID(get_correlation_id())

    def test_uses_provided_correlation_id(self):
        """Provided correlation ID is used instead of generating one."""
        with bind_request_context(correlation_id="send-123"):
            assert get_correlation_id() == "send-123"

    def test_binds_send_fields(self):
        """Channel, instance and task are bound to context."""
        with bind_request_context(
            channel="wechat_corp_account", instance_id="ins-1", task_id="task-1"
        ):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx["channel"] == "wechat_corp_account"
            assert ctx["instance_id"] == "ins-1"
            assert ctx["task_id"] == "task-1"

    def test_skips_empty_values(self):
        """None values and an empty task id are not bound."""
        with bind_request_context(channel=None, task_id=""):
            ctx = structlog.contextvars.get_contextvars()
            assert "channel" not in ctx
            assert "task_id" not in ctx

    def test_binds_extra_context(self):
        """Extra keyword arguments are bound to context."""
        with bind_request_context(route="socks5"):
            assert structlog.contextvars.get_contextvars()["route"] == "socks5"

    def test_clears_after_exit(self):
        """Context is cleared after exiting the context manager."""
        with bind_request_context(correlation_id="send-123", instance_id="ins-1"):
            pass

        assert get_correlation_id() is None
        assert "instance_id" not in structlog.contextvars.get_contextvars()

    def test_restores_enclosing_context(self):
        """Nested contexts restore the enclosing values on exit."""
        with bind_request_context(correlation_id="outer", channel="wecom_bot"):
            with bind_request_context(correlation_id="inner", channel="other"):
                assert get_correlation_id() == "inner"

            assert get_correlation_id() == "outer"
            ctx = structlog.contextvars.get_contextvars()
            assert ctx["channel"] == "wecom_bot"

    def test_clears_on_exception(self):
        """Context is cleared even if the block raises."""
        with pytest.raises(RuntimeError):
            with bind_request_context(correlation_id="send-123"):
                raise RuntimeError("boom")

        assert get_correlation_id() is None


@pytest.mark.unit
class TestClearRequestContext:
    """Test suite for clear_request_context function."""

    def test_removes_all_context(self):
        """All context variables are cleared."""
        structlog.contextvars.bind_contextvars(correlation_id="x", channel="y")

        clear_request_context()

        assert structlog.contextvars.get_contextvars() == {}
