"""Custom exceptions for the message relay core.

Every component below the channel dispatchers raises one of these. The
dispatchers are the only place where they are collapsed into a
DeliveryResult, so callers of ``send_unified`` never see them.
"""

from typing import Optional


class RelayError(Exception):
    """Base exception for all relay errors.

    Attributes:
        response_body: Raw provider response, when one was received. Kept for
            diagnostics even though the call failed.

    Example:
        try:
            client.send_text("u1", "hello")
        except RelayError as e:
            logger.error("relay_error", error=str(e))
    """

    def __init__(self, message: str, response_body: Optional[str] = None):
        super().__init__(message)
        self.response_body = response_body


class ValidationError(RelayError):
    """Raised when config or target is missing/invalid before any I/O.

    Example:
        >>> client.send_text("", "hello")
        Traceback (most recent call last):
        ...
        ValidationError: recipient must not be empty
    """

    pass


class AuthError(RelayError):
    """Raised when token issuance fails or credentials are invalid.

    Example:
        >>> cache.get_token(identity_with_empty_secret, issuer)
        Traceback (most recent call last):
        ...
        AuthError: missing credential fields: agent_secret
    """

    pass


class UnsupportedFormatError(RelayError):
    """Raised when content and channel share no format.

    Example:
        >>> markdown_only.render(text_only_capability)
        Traceback (most recent call last):
        ...
        UnsupportedFormatError: no supported content format (channel accepts: text)
    """

    pass


class TransportError(RelayError):
    """Raised on network failure, non-2xx status or an unparsable body."""

    pass


class DeliveryError(RelayError):
    """Raised when the provider accepted the request but reported a failure code.

    Example:
        >>> client.send_text("nobody", "hello")
        Traceback (most recent call last):
        ...
        DeliveryError: invalid user (invaliduser=nobody)
    """

    pass


class ChannelNotFoundError(RelayError):
    """Raised when a channel kind has no registered implementation.

    Example:
        >>> registry.get("fax")
        Traceback (most recent call last):
        ...
        ChannelNotFoundError: Channel 'fax' not found
    """

    pass
