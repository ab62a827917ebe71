"""Host and port extraction from socket endpoints.

Endpoints are either socket address tuples as used by :mod:`socket`
(``(host, port)`` for IPv4, ``(host, port, flowinfo, scope_id)`` for IPv6) or
:class:`DnsEndPoint` values naming a host to resolve later. Other address
forms, such as Unix socket paths, have neither host nor port.
"""

from __future__ import annotations

import ipaddress
from typing import Any, NamedTuple

from xtend.errors import require_not_none


class DnsEndPoint(NamedTuple):
    """A network endpoint given by host name and port."""

    host: str
    port: int


def _socket_address(endpoint: Any) -> tuple[str, int] | None:
    if isinstance(endpoint, DnsEndPoint):
        return endpoint.host, endpoint.port
    if (
        isinstance(endpoint, tuple)
        and len(endpoint) in (2, 4)
        and isinstance(endpoint[1], int)
    ):
        host = endpoint[0]
        if isinstance(host, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
            return str(host), endpoint[1]
        if isinstance(host, str):
            return host, endpoint[1]
    return None


def get_host(endpoint: Any) -> str:
    """Return the host of *endpoint*, or ``""`` if it has none.

    Raises:
        ArgumentNoneError: If *endpoint* is None.
    """
    require_not_none(endpoint, "endpoint")
    address = _socket_address(endpoint)
    return address[0] if address else ""


def get_port(endpoint: Any) -> int:
    """Return the port of *endpoint*, or ``0`` if it has none.

    Raises:
        ArgumentNoneError: If *endpoint* is None.
    """
    require_not_none(endpoint, "endpoint")
    address = _socket_address(endpoint)
    return address[1] if address else 0
