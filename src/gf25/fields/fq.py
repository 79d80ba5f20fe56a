"""Arithmetic helpers for the prime field F_q, q = 5."""

MODULUS = 5


def mod_inverse(value: int, modulus: int = MODULUS) -> int:
    """Compute the inverse of `value` modulo `modulus`.

    The inverse is found by exhaustive search over `1, .., modulus - 1`, which is all the base field needs.

    Args:
        value (int): The element to invert.
        modulus (int): The characteristic of the field. Defaults to `MODULUS`.

    Returns:
        The integer `v` in `[1, modulus)` such that `value * v = 1 mod modulus`.

    Raises:
        ZeroDivisionError: If `value` is not invertible modulo `modulus`.

    Example:
        >>> mod_inverse(2)
        3
        >>> mod_inverse(4)
        4
    """
    for candidate in range(1, modulus):
        if (value * candidate) % modulus == 1:
            return candidate
    msg = f"{value} has no inverse modulo {modulus}"
    raise ZeroDivisionError(msg)
