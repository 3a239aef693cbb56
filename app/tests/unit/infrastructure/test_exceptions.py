"""Unit tests for the relay error taxonomy."""

import pytest

from infrastructure.exceptions import (
    AuthError,
    ChannelNotFoundError,
    DeliveryError,
    RelayError,
    TransportError,
    UnsupportedFormatError,
    ValidationError,
)

pytestmark = pytest.mark.unit


class TestRelayError:
    """Tests for RelayError and its subclasses."""

    @pytest.mark.parametrize(
        "error_class",
        [
            ValidationError,
            AuthError,
            UnsupportedFormatError,
            TransportError,
            DeliveryError,
            ChannelNotFoundError,
        ],
    )
    def test_subclasses_share_base(self, error_class):
        assert issubclass(error_class, RelayError)

    def test_response_body_defaults_to_none(self):
        error = ValidationError("recipient must not be empty")

        assert str(error) == "recipient must not be empty"
        assert error.response_body is None

    def test_response_body_kept(self):
        error = DeliveryError("invalid user", response_body='{"errcode":81013}')

        assert error.response_body == '{"errcode":81013}'
