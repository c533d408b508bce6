"""A single value type covering both address families."""

import functools
from dataclasses import dataclass
from typing import Union

from ipnetwork.errors import NetworkParseError
from ipnetwork.network import Ipv4Network, Ipv6Network

Network = Union[Ipv4Network, Ipv6Network]


@functools.total_ordering
@dataclass(frozen=True, eq=True)
class IpNetwork:
    """Either an :class:`Ipv4Network` or an :class:`Ipv6Network`.

    Every query is forwarded to the wrapped network. Relationship tests
    between the two families raise CidrMismatch. Ordering puts all IPv4
    networks before all IPv6 networks.
    """

    network: Network

    def __post_init__(self):
        if not isinstance(self.network, (Ipv4Network, Ipv6Network)):
            raise TypeError(
                f"IpNetwork wraps Ipv4Network or Ipv6Network, got {type(self.network).__name__}"
            )

    @classmethod
    def V4(cls, network: Ipv4Network) -> "IpNetwork":
        if not isinstance(network, Ipv4Network):
            raise TypeError(f"expected Ipv4Network, got {type(network).__name__}")
        return cls(network)

    @classmethod
    def V6(cls, network: Ipv6Network) -> "IpNetwork":
        if not isinstance(network, Ipv6Network):
            raise TypeError(f"expected Ipv6Network, got {type(network).__name__}")
        return cls(network)

    @classmethod
    def parse(cls, text: str) -> "IpNetwork":
        """Parse CIDR text of either family.

        IPv4 is tried first. An InvalidNetwork from the family the text
        belongs to is raised as is.
        When neither family accepts the text, the IPv4 failure is chained
        as the cause.

        Raises:
            NetworkParseError: If the text is neither IPv4 nor IPv6 notation
            InvalidNetwork: If the address is not aligned to its prefix
        """
        try:
            return cls(Ipv4Network.parse(text))
        except NetworkParseError as exc:
            ipv4_error = exc
        try:
            return cls(Ipv6Network.parse(text))
        except NetworkParseError:
            pass
        raise NetworkParseError(
            f"{text!r} is not an IPv4 or IPv6 network ({ipv4_error})"
        ) from ipv4_error

    @property
    def version(self) -> int:
        return self.network.version

    @property
    def is_v4(self) -> bool:
        return isinstance(self.network, Ipv4Network)

    @property
    def is_v6(self) -> bool:
        return isinstance(self.network, Ipv6Network)

    @property
    def cidr(self) -> int:
        return self.network.cidr

    def first(self):
        return self.network.first()

    def last(self):
        return self.network.last()

    def hostcount(self) -> int:
        return self.network.hostcount()

    def netmask(self):
        return self.network.netmask()

    def contains(self, address) -> bool:
        return self.network.contains(address)

    def is_subnet(self, other) -> bool:
        return self.network.is_subnet(_unwrap(other))

    def is_supernet(self, other) -> bool:
        return self.network.is_supernet(_unwrap(other))

    def into_subnets(self, new_cidr: int):
        return self.network.into_subnets(new_cidr)

    def into_hosts(self):
        return self.network.into_hosts()

    def _sort_key(self):
        return (self.network.version, self.network.base, self.network.cidr)

    def __lt__(self, other):
        if not isinstance(other, IpNetwork):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        return str(self.network)


def _unwrap(other) -> Network:
    if isinstance(other, IpNetwork):
        return other.network
    return other
