"""Socket endpoint helpers."""

from xtend.net.endpoints import DnsEndPoint, get_host, get_port

__all__ = ["DnsEndPoint", "get_host", "get_port"]
