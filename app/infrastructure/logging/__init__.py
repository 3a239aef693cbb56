"""Structured logging infrastructure.

Centralized logging configuration for the message relay using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_request_context(): Context manager for send-scoped logging
    - get_correlation_id(): Get current correlation ID from context
    - clear_request_context(): Clear all send context

Processors:
    - add_app_info(): Adds app name/version
    - mask_sensitive_data(): Redacts secrets, tokens and webhook keys
    - truncate_large_values(): Limits string lengths

Example:
    from infrastructure.logging import get_module_logger, bind_request_context

    logger = get_module_logger()

    with bind_request_context(channel="wecom_bot", instance_id="ins-9"):
        logger.info("sending_unified_message")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

from infrastructure.logging.context import (
    bind_request_context,
    get_correlation_id,
    clear_request_context,
)

from infrastructure.logging.formatters import (
    add_app_info,
    mask_sensitive_data,
    truncate_large_values,
    SENSITIVE_PATTERNS,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_request_context",
    "get_correlation_id",
    "clear_request_context",
    "add_app_info",
    "mask_sensitive_data",
    "truncate_large_values",
    "SENSITIVE_PATTERNS",
]
