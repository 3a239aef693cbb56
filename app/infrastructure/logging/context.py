"""Send-scoped context binding for structured logging.

Every unified send runs inside ``bind_request_context`` so that the token
refresh, transport selection and provider call logs all carry the same
correlation id, channel and task instance.

Usage:
    from infrastructure.logging import bind_request_context

    with bind_request_context(channel="wechat_corp_account", instance_id="ins-1"):
        logger.info("sending_unified_message")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator
import structlog


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    channel: Optional[str] = None,
    instance_id: Optional[str] = None,
    task_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind send-scoped context to all logs within the context manager.

    Args:
        correlation_id: Unique send identifier. Auto-generated if not provided.
        channel: Channel kind handling the send.
        instance_id: Task instance being delivered.
        task_id: Owning task, when known.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars for the block.
    """
    context: dict[str, Any] = {"correlation_id": correlation_id or str(uuid.uuid4())}

    if channel is not None:
        context["channel"] = channel

    if instance_id is not None:
        context["instance_id"] = instance_id

    if task_id:
        context["task_id"] = task_id

    context.update(extra_context)

    # Reset tokens restore an enclosing context on exit.
    tokens = structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.reset_contextvars(**tokens)


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context.

    Returns:
        The correlation ID if set, None otherwise.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")


def clear_request_context() -> None:
    """Clear all send-scoped context from the logging context.

    Worker threads that are reused between sends call this to avoid
    leaking context from one send into the next.
    """
    structlog.contextvars.clear_contextvars()
