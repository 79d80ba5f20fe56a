"""Arithmetic in the quadratic extension F_q^2 = F_q[t] / (t^2 - 3) of F_q, q = 5."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Self

from gf25.fields.fq import MODULUS, mod_inverse

NON_RESIDUE = 3


@dataclass(frozen=True, init=False)
class Fq2Element:
    """Element of F_q^2 = F_q[t] / (t^2 - NON_RESIDUE).

    Elements in F_q^2 are of the form `x0 + x1 * t`, where `x0` and `x1` are elements of F_q and `t^2` is equal to
    `NON_RESIDUE`. Since `3` is not a square modulo `5`, F_q^2 is a field with 25 elements.

    Both components are always stored reduced modulo `MODULUS`, so two elements are equal if and only if their
    components are equal.

    Attributes:
        x0 (int): The coefficient of `1`, in `[0, MODULUS)`.
        x1 (int): The coefficient of `t`, in `[0, MODULUS)`.
    """

    x0: int
    x1: int

    def __init__(self, x0: int, x1: int):
        """Initialise the element `x0 + x1 * t`.

        Args:
            x0 (int): The coefficient of `1`. Reduced modulo `MODULUS`.
            x1 (int): The coefficient of `t`. Reduced modulo `MODULUS`.

        Raises:
            TypeError: If a component is not an integer.
        """
        for name, value in (("x0", x0), ("x1", x1)):
            if isinstance(value, bool) or not isinstance(value, int):
                msg = f"The component {name} is not an integer: {value!r}"
                raise TypeError(msg)
        object.__setattr__(self, "x0", x0 % MODULUS)
        object.__setattr__(self, "x1", x1 % MODULUS)

    @classmethod
    def from_list(cls, values: list[int]) -> Self:
        """Construct an element from the list `[x0, x1]`."""
        if len(values) != 2:
            msg = f"An element of F_q^2 has two components: {values}"
            raise ValueError(msg)
        return cls(values[0], values[1])

    def to_list(self) -> list[int]:
        """Return the components of self as the list `[x0, x1]`."""
        return [self.x0, self.x1]

    def is_zero(self) -> bool:
        return self.x0 == 0 and self.x1 == 0

    def add(self, other: Self) -> Self:
        """Addition in F_q^2.

        Returns:
            `(x0 + y0) + (x1 + y1) * t`.
        """
        return Fq2Element((self.x0 + other.x0) % MODULUS, (self.x1 + other.x1) % MODULUS)

    def sub(self, other: Self) -> Self:
        """Subtraction in F_q^2.

        The modulus is added before subtracting so that intermediate values stay non-negative.

        Returns:
            `(x0 - y0) + (x1 - y1) * t`.
        """
        return Fq2Element((self.x0 + MODULUS - other.x0) % MODULUS, (self.x1 + MODULUS - other.x1) % MODULUS)

    def negate(self) -> Self:
        return Fq2Element(-self.x0, -self.x1)

    def mul(self, other: Self) -> Self:
        """Multiplication in F_q^2.

        Returns:
            `(x0 * y0 + x1 * y1 * NON_RESIDUE) + (x0 * y1 + x1 * y0) * t`.
        """
        x0_y0 = (self.x0 * other.x0) % MODULUS
        x1_y1 = (self.x1 * other.x1) % MODULUS
        cross_terms = (self.x0 * other.x1 + self.x1 * other.x0) % MODULUS
        return Fq2Element(x0_y0 + NON_RESIDUE * x1_y1, cross_terms)

    def square(self) -> Self:
        return self.mul(self)

    def scalar_mul(self, scalar: int) -> Self:
        """Multiplication by the element `scalar` of F_q."""
        return Fq2Element(scalar * self.x0, scalar * self.x1)

    def conjugate(self) -> Self:
        """Conjugation in F_q^2: `x0 + x1 * t --> x0 - x1 * t`."""
        return Fq2Element(self.x0, -self.x1)

    def norm(self) -> int:
        """Norm of self over F_q.

        Returns:
            `x0^2 - NON_RESIDUE * x1^2`, reduced modulo `MODULUS`. The norm is zero only for the zero element.
        """
        return (self.x0 * self.x0 - NON_RESIDUE * self.x1 * self.x1) % MODULUS

    def inverse(self) -> Self:
        """Inversion in F_q^2.

        Since `(x0 + x1 * t) * (x0 - x1 * t) = N`, the norm of self, the inverse is `(x0 - x1 * t) / N`.

        Returns:
            `(x0 * N^-1) + (-x1 * N^-1) * t`.

        Raises:
            ZeroDivisionError: If self is the zero element.
        """
        if self.is_zero():
            msg = "Division by zero element of F_q^2"
            raise ZeroDivisionError(msg)
        inverse_norm = mod_inverse(self.norm(), MODULUS)
        return Fq2Element(self.x0 * inverse_norm, MODULUS - (self.x1 * inverse_norm) % MODULUS)

    def div(self, other: Self) -> Self:
        """Division in F_q^2, computed as `self * other^-1`.

        Raises:
            ZeroDivisionError: If `other` is the zero element.
        """
        return self.mul(other.inverse())

    def __add__(self, other: Self) -> Self:
        return self.add(other)

    def __sub__(self, other: Self) -> Self:
        return self.sub(other)

    def __mul__(self, other: Self) -> Self:
        return self.mul(other)

    def __truediv__(self, other: Self) -> Self:
        return self.div(other)

    def __neg__(self) -> Self:
        return self.negate()

    def __str__(self) -> str:
        match (self.x0, self.x1):
            case (0, 0):
                return "0"
            case (x0, 0):
                return f"{x0}"
            case (0, x1):
                return f"{x1}t"
            case (x0, x1):
                return f"{x0} + {x1}t"


ZERO = Fq2Element(0, 0)
ONE = Fq2Element(1, 0)
T = Fq2Element(0, 1)


def fq2_elements() -> Iterator[Fq2Element]:
    """Iterate over the elements of F_q^2, ordered by `(x1, x0)`.

    Example:
        >>> [str(element) for element in fq2_elements()][:7]
        ['0', '1', '2', '3', '4', '1t', '1 + 1t']
    """
    for x1 in range(MODULUS):
        for x0 in range(MODULUS):
            yield Fq2Element(x0, x1)
