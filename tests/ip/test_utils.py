"""Tests for ipnetwork.ip.utils module."""

import pytest

from ipnetwork.errors import NetworkParseError
from ipnetwork.ip.utils import parse_prefix, split_cidr


class TestSplitCidr:
    def test_ipv4(self):
        assert split_cidr("10.0.0.0/24") == ("10.0.0.0", "24")

    def test_ipv6(self):
        assert split_cidr("2001:db8::/32") == ("2001:db8::", "32")

    def test_missing_prefix(self):
        with pytest.raises(NetworkParseError):
            split_cidr("10.0.0.1")

    def test_too_many_separators(self):
        with pytest.raises(NetworkParseError):
            split_cidr("10.0.0.0/24/8")

    def test_empty_parts_are_kept(self):
        assert split_cidr("/") == ("", "")

    def test_non_string(self):
        with pytest.raises(NetworkParseError):
            split_cidr(None)


class TestParsePrefix:
    def test_decimal(self):
        assert parse_prefix("24") == 24

    def test_zero(self):
        assert parse_prefix("0") == 0

    def test_leading_zero(self):
        assert parse_prefix("08") == 8

    @pytest.mark.parametrize("text", ["", "x", "-1", "+24", " 24", "24 ", "2.5", "٣"])
    def test_rejects_non_digits(self, text):
        with pytest.raises(NetworkParseError):
            parse_prefix(text)
