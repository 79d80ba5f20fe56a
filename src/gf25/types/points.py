"""Classes defining points of an elliptic curve E(F_q^2) in affine coordinates."""

from dataclasses import dataclass
from typing import Self, Union

from gf25.fields.fq2 import Fq2Element


@dataclass(frozen=True)
class PointAtInfinity:
    """The point at infinity, identity element of the group E(F_q^2)."""

    def to_list(self) -> list[int]:
        return []

    def __str__(self) -> str:
        return "Point at Infinity"


@dataclass(frozen=True)
class AffinePoint:
    """Finite point of E(F_q^2) in affine coordinates.

    Points are not checked to lie on any curve: the group law only ever uses the coefficient `a`.

    Attributes:
        x (Fq2Element): the x-coordinate of the point.
        y (Fq2Element): the y-coordinate of the point.
    """

    x: Fq2Element
    y: Fq2Element

    def __post_init__(self):
        for name in ("x", "y"):
            if not isinstance(getattr(self, name), Fq2Element):
                msg = f"The coordinate {name} is not an element of F_q^2: {getattr(self, name)!r}"
                raise TypeError(msg)

    @classmethod
    def from_list(cls, values: list[int]) -> Self:
        """Construct a point from the list `[x0, x1, y0, y1]`."""
        if len(values) != 4:
            msg = f"A point of E(F_q^2) has four components: {values}"
            raise ValueError(msg)
        return cls(Fq2Element(values[0], values[1]), Fq2Element(values[2], values[3]))

    def to_list(self) -> list[int]:
        """Return the coordinates of self as the list `[x0, x1, y0, y1]`."""
        return [*self.x.to_list(), *self.y.to_list()]

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


Point = Union[AffinePoint, PointAtInfinity]

POINT_AT_INFINITY = PointAtInfinity()
