"""IPv4/IPv6 CIDR block arithmetic: parsing, relationships and lazy enumeration."""

__version__ = "1.0.0"

from ipnetwork.errors import CidrMismatch, InvalidNetwork, NetworkError, NetworkParseError
from ipnetwork.iterators import HostIterator, NetworkV4Iterator, NetworkV6Iterator
from ipnetwork.network import Ipv4Network, Ipv6Network
from ipnetwork.union import IpNetwork

__all__ = [
    "__version__",
    "NetworkError",
    "InvalidNetwork",
    "CidrMismatch",
    "NetworkParseError",
    "Ipv4Network",
    "Ipv6Network",
    "IpNetwork",
    "NetworkV4Iterator",
    "NetworkV6Iterator",
    "HostIterator",
]
