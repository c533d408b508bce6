"""Prefix length to block size arithmetic for 32- and 128-bit addresses."""

# Address widths, in bits
IPV4LENGTH = 32
IPV6LENGTH = 128

# Max address integer
MAX_IPV4 = 2**IPV4LENGTH - 1
MAX_IPV6 = 2**IPV6LENGTH - 1


def cidr_to_hostcount(cidr: int, width: int) -> int:
    """
    Number of addresses spanned by a block with the given prefix length.

    A ``/0`` block covers the whole address space, so the result for
    ``cidr == 0`` is ``2**width``, one more than the largest address.

    Args:
        cidr: Prefix length, 0 to width inclusive
        width: Address width in bits (32 or 128)

    Returns:
        2 ** (width - cidr)

    Raises:
        ValueError: If cidr is outside [0, width]
    """
    if not 0 <= cidr <= width:
        raise ValueError(f"prefix length {cidr} out of range for a {width}-bit address")
    return 1 << (width - cidr)


def is_valid(first: int, cidr: int, width: int) -> bool:
    """
    Check that ``first`` sits exactly on a block boundary for ``/cidr``.

    Args:
        first: Base address as an integer
        cidr: Prefix length
        width: Address width in bits

    Returns:
        True if first is in range and a multiple of the block size
    """
    if isinstance(first, bool) or isinstance(cidr, bool):
        return False
    if not isinstance(first, int) or not isinstance(cidr, int):
        return False
    if not 0 <= cidr <= width or not 0 <= first < 1 << width:
        return False
    return first % cidr_to_hostcount(cidr, width) == 0
