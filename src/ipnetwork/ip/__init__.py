"""Address-width arithmetic and CIDR text helpers."""

from ipnetwork.ip.arith import (
    IPV4LENGTH,
    IPV6LENGTH,
    MAX_IPV4,
    MAX_IPV6,
    cidr_to_hostcount,
    is_valid,
)
from ipnetwork.ip.utils import parse_prefix, split_cidr

__all__ = [
    "IPV4LENGTH",
    "IPV6LENGTH",
    "MAX_IPV4",
    "MAX_IPV6",
    "cidr_to_hostcount",
    "is_valid",
    "parse_prefix",
    "split_cidr",
]
