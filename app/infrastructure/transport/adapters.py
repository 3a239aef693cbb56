"""requests adapters used by the transport selector."""

import socket
from typing import List, Tuple

from requests.adapters import HTTPAdapter
from urllib3.connection import HTTPConnection

SocketOption = Tuple[int, int, int]


def keepalive_socket_options(idle_seconds: int) -> List[SocketOption]:
    """Socket options enabling TCP keep-alive after ``idle_seconds``.

    Platforms without TCP_KEEPIDLE/TCP_KEEPINTVL only get SO_KEEPALIVE.
    """
    options: List[SocketOption] = list(HTTPConnection.default_socket_options)
    options.append((socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1))
    if hasattr(socket, "TCP_KEEPIDLE"):
        options.append((socket.IPPROTO_TCP, socket.TCP_KEEPIDLE, idle_seconds))
    if hasattr(socket, "TCP_KEEPINTVL"):
        options.append((socket.IPPROTO_TCP, socket.TCP_KEEPINTVL, idle_seconds))
    return options


class KeepAliveAdapter(HTTPAdapter):
    """HTTPAdapter whose pools, including SOCKS proxy pools, use keep-alive sockets."""

    def __init__(self, keepalive_seconds: int, **kwargs):
        # init_poolmanager runs inside HTTPAdapter.__init__
        self._socket_options = keepalive_socket_options(keepalive_seconds)
        super().__init__(**kwargs)

    def init_poolmanager(self, *args, **pool_kwargs):
        pool_kwargs.setdefault("socket_options", self._socket_options)
        super().init_poolmanager(*args, **pool_kwargs)

    def proxy_manager_for(self, proxy, **proxy_kwargs):
        proxy_kwargs.setdefault("socket_options", self._socket_options)
        return super().proxy_manager_for(proxy, **proxy_kwargs)
