"""Channel registry for looking up channel implementations by kind.

Provides thread-safe registration and retrieval of channels.
"""

import threading
from typing import Dict, List, Optional, Union

from infrastructure.channels.base import Channel
from infrastructure.channels.models import ChannelKind, FormatKind
from infrastructure.exceptions import ChannelNotFoundError
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class ChannelRegistry:
    """Thread-safe lookup table of channel implementations.

    Attributes:
        _channels: Dict mapping ChannelKind to Channel instances.
        _lock: Threading lock for thread-safe operations.
    """

    def __init__(self):
        self._channels: Dict[ChannelKind, Channel] = {}
        self._lock = threading.Lock()

    def register(self, channel: Channel) -> None:
        """Register a channel under its kind.

        Raises:
            ValueError: If a channel of the same kind is already registered.
        """
        kind = channel.kind

        with self._lock:
            if kind in self._channels:
                raise ValueError(f"Channel '{kind.value}' is already registered")

            self._channels[kind] = channel
            logger.info(
                "channel_registered",
                channel=kind.value,
                formats=[fmt.value for fmt in channel.capability.formats],
            )

    def unregister(self, kind: ChannelKind) -> None:
        """Remove a channel.

        Raises:
            ChannelNotFoundError: If no channel of that kind is registered.
        """
        with self._lock:
            if kind not in self._channels:
                raise ChannelNotFoundError(f"Channel '{_kind_value(kind)}' not found")
            self._channels.pop(kind)
            logger.info("channel_unregistered", channel=kind.value)

    def get(self, kind: Union[ChannelKind, str]) -> Channel:
        """Get the channel registered for ``kind``.

        Raises:
            ChannelNotFoundError: If the kind is unknown or not registered.
        """
        channel = self.find(kind)
        if channel is None:
            raise ChannelNotFoundError(f"Channel '{_kind_value(kind)}' not found")
        return channel

    def find(self, kind: Union[ChannelKind, str]) -> Optional[Channel]:
        """Get the channel registered for ``kind``, or None."""
        try:
            kind = ChannelKind(kind)
        except ValueError:
            return None
        with self._lock:
            return self._channels.get(kind)

    def list_channels(self) -> List[Channel]:
        with self._lock:
            return list(self._channels.values())

    def get_channels_by_format(self, fmt: FormatKind) -> List[Channel]:
        """Get all channels that accept ``fmt``."""
        with self._lock:
            return [c for c in self._channels.values() if c.capability.supports(fmt)]

    def __contains__(self, kind: Union[ChannelKind, str]) -> bool:
        return self.find(kind) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._channels)


def _kind_value(kind: Union[ChannelKind, str]) -> str:
    return kind.value if isinstance(kind, ChannelKind) else str(kind)
