"""Tests for ipnetwork.union module."""

from ipaddress import IPv4Address, IPv6Address

import pytest

from ipnetwork.errors import CidrMismatch, InvalidNetwork, NetworkParseError
from ipnetwork.network import Ipv4Network, Ipv6Network
from ipnetwork.union import IpNetwork


class TestConstruction:
    def test_v4(self, net24):
        wrapped = IpNetwork.V4(net24)
        assert wrapped.network is net24
        assert wrapped.version == 4
        assert wrapped.is_v4 is True
        assert wrapped.is_v6 is False

    def test_v6(self, doc_net6):
        wrapped = IpNetwork.V6(doc_net6)
        assert wrapped.version == 6
        assert wrapped.is_v6 is True

    def test_v4_rejects_v6_member(self, doc_net6):
        with pytest.raises(TypeError):
            IpNetwork.V4(doc_net6)

    def test_v6_rejects_v4_member(self, net24):
        with pytest.raises(TypeError):
            IpNetwork.V6(net24)

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            IpNetwork("1.1.1.0/24")


class TestParse:
    def test_ipv4(self, net24):
        assert IpNetwork.parse("1.1.1.0/24") == IpNetwork.V4(net24)

    def test_ipv6(self, doc_net6):
        assert IpNetwork.parse("2001:db8::/32") == IpNetwork.V6(doc_net6)

    def test_missing_prefix(self):
        with pytest.raises(NetworkParseError):
            IpNetwork.parse("1.1.1.1")

    def test_garbage(self):
        with pytest.raises(NetworkParseError):
            IpNetwork.parse("not-an-ip/8")

    def test_keeps_ipv4_cause(self):
        with pytest.raises(NetworkParseError) as exc_info:
            IpNetwork.parse("1.1.1.0/x")
        assert "invalid prefix length" in str(exc_info.value.__cause__)
        assert "invalid prefix length" in str(exc_info.value)

    def test_zone_index_rejected(self):
        with pytest.raises(NetworkParseError):
            IpNetwork.parse("fe80::%eth0/64")

    def test_ipv4_host_bits(self):
        with pytest.raises(InvalidNetwork):
            IpNetwork.parse("1.1.1.1/24")

    def test_ipv6_host_bits(self):
        with pytest.raises(InvalidNetwork):
            IpNetwork.parse("2001:db8::1/32")

    @pytest.mark.parametrize("text", ["10.0.0.0/8", "::/0", "fe80::/10", "2001:db8::1/128"])
    def test_round_trip(self, text):
        assert str(IpNetwork.parse(text)) == text


class TestDelegation:
    def test_queries(self):
        wrapped = IpNetwork.parse("1.1.1.0/24")
        assert wrapped.cidr == 24
        assert wrapped.first() == IPv4Address("1.1.1.0")
        assert wrapped.last() == IPv4Address("1.1.1.255")
        assert wrapped.netmask() == IPv4Address("255.255.255.0")
        assert wrapped.hostcount() == 256

    def test_ipv6_queries(self):
        wrapped = IpNetwork.parse("2001:db8::/64")
        assert wrapped.first() == IPv6Address("2001:db8::")
        assert wrapped.hostcount() == 2**64

    def test_contains(self):
        wrapped = IpNetwork.parse("1.1.1.0/24")
        assert wrapped.contains("1.1.1.1") is True
        assert wrapped.contains("1.1.1.0") is False

    def test_contains_other_family(self):
        with pytest.raises(CidrMismatch):
            IpNetwork.parse("1.1.1.0/24").contains("::1")

    def test_relationships(self):
        supernet = IpNetwork.parse("1.0.0.0/22")
        subnet = IpNetwork.parse("1.0.1.0/24")
        assert supernet.is_subnet(subnet) is True
        assert subnet.is_supernet(supernet) is True

    def test_relationship_with_bare_member(self, subnet):
        assert IpNetwork.parse("1.0.0.0/22").is_subnet(subnet) is True

    def test_mixed_family_relationships(self):
        v4 = IpNetwork.parse("0.0.0.0/0")
        v6 = IpNetwork.parse("::/0")
        with pytest.raises(CidrMismatch):
            v4.is_subnet(v6)
        with pytest.raises(CidrMismatch):
            v6.is_supernet(v4)

    def test_iterators(self):
        wrapped = IpNetwork.parse("1.1.1.0/24")
        assert [str(n) for n in wrapped.into_subnets(25)] == ["1.1.1.0/25", "1.1.1.128/25"]
        assert len(list(wrapped.into_hosts())) == 254


class TestOrdering:
    def test_within_family(self):
        assert IpNetwork.parse("1.0.1.0/24") > IpNetwork.parse("1.0.0.0/22")

    def test_ipv4_before_ipv6(self):
        nets = [
            IpNetwork.parse("::/0"),
            IpNetwork.parse("10.0.0.0/16"),
            IpNetwork.parse("10.0.0.0/8"),
            IpNetwork.parse("2001:db8::/32"),
        ]
        assert [str(n) for n in sorted(nets)] == [
            "10.0.0.0/8",
            "10.0.0.0/16",
            "::/0",
            "2001:db8::/32",
        ]

    def test_mixed_families_not_equal(self):
        assert IpNetwork.parse("0.0.0.0/0") != IpNetwork.parse("::/0")

    def test_hashable(self):
        assert len({IpNetwork.parse("10.0.0.0/8"), IpNetwork.parse("10.0.0.0/8")}) == 1

    def test_not_comparable_with_other_types(self):
        with pytest.raises(TypeError):
            IpNetwork.parse("10.0.0.0/8") < "10.0.0.0/8"
