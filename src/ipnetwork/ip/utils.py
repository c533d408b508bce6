"""CIDR text helpers."""

from typing import Tuple

from ipnetwork.errors import NetworkParseError


def split_cidr(text: str) -> Tuple[str, str]:
    """
    Split ``address/prefix`` notation into its two parts.

    Args:
        text: CIDR string such as "10.0.0.0/8"

    Returns:
        (address, prefix) strings

    Raises:
        NetworkParseError: If the text does not contain exactly one "/"
    """
    if not isinstance(text, str):
        raise NetworkParseError(f"expected CIDR text, got {type(text).__name__}")
    parts = text.split('/')
    if len(parts) != 2:
        raise NetworkParseError(f"{text!r} is not in address/prefix notation")
    return parts[0], parts[1]


def parse_prefix(text: str) -> int:
    """
    Parse the prefix length part of CIDR notation.

    Only plain ASCII decimal digits are accepted: no sign, no whitespace.

    Raises:
        NetworkParseError: If text is not a decimal integer
    """
    if not text or not (text.isascii() and text.isdigit()):
        raise NetworkParseError(f"invalid prefix length {text!r}")
    return int(text)
