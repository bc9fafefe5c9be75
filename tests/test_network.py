"""Tests for the startup banner's address discovery."""

import socket
from collections import namedtuple

from deskshot_backend.utils import network

snic = namedtuple("snic", ["family", "address", "netmask", "broadcast", "ptp"])


def fake_interfaces():
    return {
        "lo": [snic(socket.AF_INET, "127.0.0.1", "255.0.0.0", None, None)],
        "en0": [
            snic(socket.AF_INET, "192.168.1.20", "255.255.255.0", None, None),
            snic(socket.AF_INET6, "fe80::1", None, None, None),
        ],
        "en1": [snic(socket.AF_INET, "10.0.0.7", "255.0.0.0", None, None)],
    }


def test_lists_non_loopback_ipv4(monkeypatch):
    monkeypatch.setattr(network.psutil, "net_if_addrs", fake_interfaces)
    assert network.list_ipv4_addresses() == ["192.168.1.20", "10.0.0.7"]


def test_access_urls_for_wildcard_host(monkeypatch):
    monkeypatch.setattr(network.psutil, "net_if_addrs", fake_interfaces)
    assert network.access_urls("0.0.0.0", 8000) == [
        "http://localhost:8000",
        "http://192.168.1.20:8000",
        "http://10.0.0.7:8000",
    ]


def test_access_urls_for_specific_host():
    assert network.access_urls("127.0.0.1", 9000) == ["http://127.0.0.1:9000"]
