"""Utility functions."""


def scalar_to_bits(scalar: int) -> list[bool]:
    """Convert a non-negative integer into the list of its bits, least significant first.

    Example:
        >>> scalar_to_bits(0)
        []
        >>> scalar_to_bits(1)
        [True]
        >>> scalar_to_bits(6)
        [False, True, True]
    """
    if scalar < 0:
        msg = f"The scalar must be a non-negative integer: {scalar}"
        raise ValueError(msg)
    bits = []
    while scalar > 0:
        bits.append(scalar & 1 == 1)
        scalar >>= 1
    return bits
