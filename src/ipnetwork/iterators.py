"""Lazy cursors over the child blocks and host addresses of a network."""

import logging

from ipnetwork.errors import CidrMismatch, InvalidNetwork
from ipnetwork.ip.arith import IPV4LENGTH, IPV6LENGTH, cidr_to_hostcount

logger = logging.getLogger(__name__)


class _SubnetIterator:
    """Walks the ``/cidr`` children that tile a parent block, lowest first.

    The child based at the parent's own base address is the first one
    emitted, so the children cover the parent exactly.

    Attributes:
        current: Base address of the next child to emit
        max: Last address of the parent block
        stepping: Number of addresses in each child
        cidr: Prefix length of the children
    """

    width = 0

    def __init__(self, parent, new_cidr: int):
        if parent.width != self.width:
            raise CidrMismatch(
                f"{type(self).__name__} cannot iterate an IPv{parent.version} network"
            )
        if isinstance(new_cidr, bool) or not isinstance(new_cidr, int):
            raise CidrMismatch(f"prefix length must be an integer, got {new_cidr!r}")
        if not parent.cidr <= new_cidr <= self.width:
            raise CidrMismatch(
                f"cannot split {parent} into /{new_cidr} subnets "
                f"(prefix must be between {parent.cidr} and {self.width})"
            )
        self._network_class = type(parent)
        self.current = parent.base
        self.max = parent.base + parent.hostcount() - 1
        self.stepping = cidr_to_hostcount(new_cidr, self.width)
        self.cidr = new_cidr

    def __iter__(self):
        return self

    def __next__(self):
        if self.current > self.max:
            raise StopIteration
        try:
            network = self._network_class(self.current, self.cidr)
        except InvalidNetwork:
            logger.debug(
                "Stopping subnet iteration at %d/%d: not a valid network",
                self.current, self.cidr,
            )
            self.current = self.max + 1
            raise StopIteration from None
        self.current += self.stepping
        return network

    def __length_hint__(self) -> int:
        if self.current > self.max:
            return 0
        return (self.max - self.current) // self.stepping + 1

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(current={self.current}, max={self.max}, "
            f"stepping={self.stepping}, cidr={self.cidr})"
        )


class NetworkV4Iterator(_SubnetIterator):
    """Subnets of an :class:`~ipnetwork.network.Ipv4Network`."""

    width = IPV4LENGTH


class NetworkV6Iterator(_SubnetIterator):
    """Subnets of an :class:`~ipnetwork.network.Ipv6Network`."""

    width = IPV6LENGTH


class HostIterator:
    """Walks the interior addresses of a block.

    The network's first and last addresses are skipped, so the sequence is
    exactly the addresses for which ``network.contains()`` is true. ``max``
    is inclusive.
    """

    def __init__(self, network):
        self._address_class = network.address_class
        self.current = network.base + 1
        self.max = network.base + network.hostcount() - 2

    def __iter__(self):
        return self

    def __next__(self):
        if self.current > self.max:
            raise StopIteration
        address = self._address_class(self.current)
        self.current += 1
        return address

    def __length_hint__(self) -> int:
        return max(self.max - self.current + 1, 0)

    def __repr__(self) -> str:
        return f"HostIterator(current={self.current}, max={self.max})"
