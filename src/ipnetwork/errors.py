"""Exceptions raised by network construction, parsing and relationship tests."""


class NetworkError(ValueError):
    """Base class for every failure raised by this package."""


class InvalidNetwork(NetworkError):
    """The base address is not aligned to the block size of its prefix length."""


class CidrMismatch(NetworkError):
    """Address families or prefix lengths are inconsistent for the operation."""


class NetworkParseError(NetworkError):
    """Malformed textual CIDR notation."""
