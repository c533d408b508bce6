"""Shared fixtures for ipnetwork tests."""

import pytest

from ipnetwork.network import Ipv4Network, Ipv6Network


@pytest.fixture
def net24():
    """1.1.1.0/24"""
    return Ipv4Network.new(1, 1, 1, 0, 24)


@pytest.fixture
def supernet():
    return Ipv4Network.parse("1.0.0.0/22")


@pytest.fixture
def subnet():
    return Ipv4Network.parse("1.0.1.0/24")


@pytest.fixture
def doc_net6():
    """2001:db8::/32"""
    return Ipv6Network.parse("2001:db8::/32")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("IPNETWORK_MAX_ITEMS", raising=False)
