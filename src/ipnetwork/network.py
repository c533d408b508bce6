"""IPv4 and IPv6 network value types.

A network is a base address plus a prefix length. The base must be aligned
to the size of the block, so ``1.1.1.0/24`` is a network but ``1.1.1.0/23``
is not. Values are immutable, hashable and totally ordered by base address,
then by prefix length.
"""

import ipaddress
from dataclasses import dataclass
from typing import ClassVar, Union

from ipnetwork.errors import CidrMismatch, InvalidNetwork, NetworkParseError
from ipnetwork.ip.arith import (
    IPV4LENGTH,
    IPV6LENGTH,
    MAX_IPV4,
    MAX_IPV6,
    cidr_to_hostcount,
    is_valid,
)
from ipnetwork.ip.utils import parse_prefix, split_cidr
from ipnetwork.iterators import HostIterator, NetworkV4Iterator, NetworkV6Iterator

Address = Union[int, str, bytes, tuple, list, ipaddress.IPv4Address, ipaddress.IPv6Address]


def _reject_zone(address, text: str) -> None:
    # IPv6Address keeps an RFC 4007 zone in scope_id; it is not CIDR notation
    if getattr(address, "scope_id", None) is not None:
        raise NetworkParseError(f"zone index not allowed in {text!r}")


class _BaseNetwork:
    """Behaviour shared by both address families.

    Subclasses are frozen dataclasses with ``base`` and ``cidr`` fields and
    set the class-level width, address class and subnet iterator.
    """

    version: ClassVar[int]
    width: ClassVar[int]
    MAX_NETMASK: ClassVar[int]
    address_class: ClassVar[type]
    subnet_iterator: ClassVar[type]

    base: int
    cidr: int

    def __post_init__(self):
        if not is_valid(self.base, self.cidr, self.width):
            raise InvalidNetwork(
                f"{self.base!r}/{self.cidr!r} is not a valid IPv{self.version} network"
            )

    @classmethod
    def new(cls, address: Address, cidr: int):
        """Build a network from an address in any supported form and a prefix length.

        Args:
            address: Integer, address object, address text, or a sequence of
                width/8 octets in network order
            cidr: Prefix length

        Raises:
            InvalidNetwork: If the address is not aligned to the prefix
            CidrMismatch: If the address belongs to the other family
            NetworkParseError: If address text cannot be parsed
        """
        return cls(cls._address_to_int(address), cidr)

    @classmethod
    def parse(cls, text: str):
        """Parse ``address/prefix`` notation.

        Malformed text raises NetworkParseError; well-formed text whose
        address has bits set below the prefix raises InvalidNetwork.
        """
        address_text, prefix_text = split_cidr(text)
        try:
            address = cls.address_class(address_text)
        except ValueError as exc:
            raise NetworkParseError(
                f"invalid IPv{cls.version} address {address_text!r}"
            ) from exc
        _reject_zone(address, address_text)
        return cls(int(address), parse_prefix(prefix_text))

    @classmethod
    def _address_to_int(cls, address: Address) -> int:
        if isinstance(address, bool):
            raise TypeError("address must not be a bool")
        if isinstance(address, int):
            return address
        if isinstance(address, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
            if address.version != cls.version:
                raise CidrMismatch(
                    f"{address} is an IPv{address.version} address, expected IPv{cls.version}"
                )
            return int(address)
        if isinstance(address, str):
            try:
                parsed = ipaddress.ip_address(address)
            except ValueError as exc:
                raise NetworkParseError(f"invalid address {address!r}") from exc
            _reject_zone(parsed, address)
            return cls._address_to_int(parsed)
        if isinstance(address, (bytes, bytearray, tuple, list)):
            if len(address) != cls.width // 8:
                raise InvalidNetwork(
                    f"expected {cls.width // 8} octets, got {len(address)}"
                )
            try:
                return int.from_bytes(bytes(address), "big")
            except (TypeError, ValueError) as exc:
                raise InvalidNetwork(f"invalid octets {address!r}") from exc
        raise TypeError(f"unsupported address type {type(address).__name__}")

    def hostcount(self) -> int:
        """Number of addresses in the block, endpoints included."""
        return cidr_to_hostcount(self.cidr, self.width)

    def first(self):
        return self.address_class(self.base)

    def last(self):
        return self.address_class(self.base + self.hostcount() - 1)

    def netmask(self):
        return self.address_class(self.MAX_NETMASK ^ (self.hostcount() - 1))

    def contains(self, address: Address) -> bool:
        """Check whether an address lies strictly inside the block.

        The block's own first and last addresses are not contained.
        """
        value = self._address_to_int(address)
        return self.base < value < self.base + self.hostcount() - 1

    def _check_family(self, other) -> None:
        if type(other) is not type(self):
            raise CidrMismatch(
                f"cannot relate {type(self).__name__} to {type(other).__name__}"
            )

    def is_subnet(self, other) -> bool:
        """True if this block's range encloses ``other``'s range."""
        self._check_family(other)
        return self.first() <= other.first() and other.last() <= self.last()

    def is_supernet(self, other) -> bool:
        """True if this block's range is enclosed by ``other``'s range."""
        self._check_family(other)
        return self.first() >= other.first() and other.last() >= self.last()

    def into_subnets(self, new_cidr: int):
        """Iterate the ``/new_cidr`` blocks tiling this one, in address order.

        Raises:
            CidrMismatch: If new_cidr is shorter than this prefix or longer
                than the address width
        """
        return self.subnet_iterator(self, new_cidr)

    subnets = into_subnets

    def into_hosts(self) -> HostIterator:
        """Iterate the addresses strictly inside the block."""
        return HostIterator(self)

    hosts = into_hosts

    def __str__(self) -> str:
        return f"{self.first()}/{self.cidr}"


@dataclass(frozen=True, order=True)
class Ipv4Network(_BaseNetwork):
    """An IPv4 network.

    >>> Ipv4Network.parse("1.1.1.0/24")
    Ipv4Network(base=16843008, cidr=24)
    """

    base: int
    cidr: int

    version: ClassVar[int] = 4
    width: ClassVar[int] = IPV4LENGTH
    MAX_NETMASK: ClassVar[int] = MAX_IPV4
    address_class: ClassVar[type] = ipaddress.IPv4Address
    subnet_iterator: ClassVar[type] = NetworkV4Iterator

    @classmethod
    def new(cls, *args) -> "Ipv4Network":
        """Build a network from ``(a, b, c, d, cidr)`` or ``(address, cidr)``."""
        if len(args) == 5:
            return cls(cls._address_to_int(tuple(args[:4])), args[4])
        if len(args) == 2:
            return super().new(*args)
        raise TypeError(
            f"new() takes (a, b, c, d, cidr) or (address, cidr), got {len(args)} arguments"
        )


@dataclass(frozen=True, order=True)
class Ipv6Network(_BaseNetwork):
    """An IPv6 network."""

    base: int
    cidr: int

    version: ClassVar[int] = 6
    width: ClassVar[int] = IPV6LENGTH
    MAX_NETMASK: ClassVar[int] = MAX_IPV6
    address_class: ClassVar[type] = ipaddress.IPv6Address
    subnet_iterator: ClassVar[type] = NetworkV6Iterator
