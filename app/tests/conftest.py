"""Shared fixtures for relay tests.

Provider HTTP calls are never made: clients receive a mocked transport
selector whose transport returns canned ``requests.Response`` doubles.
"""

from unittest.mock import MagicMock

import pytest

from infrastructure.credentials import CredentialCache
from infrastructure.services import providers
from infrastructure.transport import TransportSelector
from tests.factories.relay import FakeClock, make_response


@pytest.fixture(autouse=True)
def reset_provider_singletons():
    """Reset process-wide providers so tests never share cached state."""
    for provider in (
        providers.get_settings,
        providers.get_credential_cache,
        providers.get_transport_selector,
        providers.get_instance_validator,
        providers.get_channel_registry,
        providers.get_relay_service,
    ):
        provider.cache_clear()
    yield


@pytest.fixture
def fake_clock():
    """Controllable clock starting at a fixed epoch."""
    return FakeClock()


@pytest.fixture
def credential_cache(fake_clock):
    """Empty credential cache driven by the fake clock."""
    return CredentialCache(clock=fake_clock)


@pytest.fixture
def response_factory():
    """Factory for canned provider responses."""
    return make_response


@pytest.fixture
def mock_transport():
    """HttpTransport double usable as a context manager.

    Tests queue responses with ``mock_transport.request.side_effect``.
    """
    transport = MagicMock()
    transport.__enter__.return_value = transport
    transport.__exit__.return_value = None
    return transport


@pytest.fixture
def mock_selector(mock_transport):
    """TransportSelector double that always returns ``mock_transport``."""
    selector = MagicMock(spec=TransportSelector)
    selector.select.return_value = mock_transport
    return selector
