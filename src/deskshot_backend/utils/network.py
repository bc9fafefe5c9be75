"""Local network address discovery for the startup banner."""

from __future__ import annotations

import socket
from typing import List

import psutil


def list_ipv4_addresses(include_loopback: bool = False) -> List[str]:
    """
    Return the IPv4 addresses bound to local network interfaces.

    Loopback addresses are skipped unless asked for, so the result is the
    set of addresses another machine on the LAN could reach us on.
    """
    addresses = []
    for _iface, snics in psutil.net_if_addrs().items():
        for snic in snics:
            if snic.family != socket.AF_INET:
                continue
            if not include_loopback and snic.address.startswith("127."):
                continue
            if snic.address not in addresses:
                addresses.append(snic.address)
    return addresses


def access_urls(host: str, port: int) -> List[str]:
    """URLs an operator can use to reach a server bound to host:port."""
    if host not in ("0.0.0.0", ""):
        return [f"http://{host}:{port}"]

    urls = [f"http://localhost:{port}"]
    urls.extend(f"http://{addr}:{port}" for addr in list_ipv4_addresses())
    return urls
