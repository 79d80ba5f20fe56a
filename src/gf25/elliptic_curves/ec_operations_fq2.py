"""Arithmetic operations over the elliptic curve E(F_q^2): y^2 = x^3 + a * x + b.

Arithmetic is performed in affine coordinates. The constant term `b` of the curve never enters the formulas, so
every operation takes only the coefficient `curve_a` alongside the points.
"""

from gf25.fields.fq2 import Fq2Element
from gf25.types.points import POINT_AT_INFINITY, AffinePoint, Point, PointAtInfinity
from gf25.util.utility_functions import scalar_to_bits


def is_infinity(P: Point) -> bool:  # noqa: N803
    """Check whether `P` is the point at infinity."""
    return isinstance(P, PointAtInfinity)


def gradient(P: AffinePoint, Q: AffinePoint, curve_a: Fq2Element) -> Fq2Element:  # noqa: N803
    """Compute the gradient of the line through `P` and `Q`.

    If `P == Q` this is the gradient of the tangent line to the curve at `P`.

    Args:
        P (AffinePoint): A finite point.
        Q (AffinePoint): A finite point with `Q.x != P.x` or `Q == P`.
        curve_a (Fq2Element): The `a` coefficient in the Short-Weierstrass equation of the curve.

    Returns:
        `(3 * x_P^2 + a) / (2 * y_P)` if `P == Q`, else `(y_Q - y_P) / (x_Q - x_P)`.

    Raises:
        ZeroDivisionError: If `P == Q` and `y_P == 0`, or if `P != Q` and `x_P == x_Q`.
    """
    if P == Q:
        return P.x.square().scalar_mul(3).add(curve_a).div(P.y.scalar_mul(2))
    return Q.y.sub(P.y).div(Q.x.sub(P.x))


def point_addition(P: Point, Q: Point, curve_a: Fq2Element) -> Point:  # noqa: N803
    """Add two points of E(F_q^2).

    Args:
        P (Point): The first summand.
        Q (Point): The second summand.
        curve_a (Fq2Element): The `a` coefficient in the Short-Weierstrass equation of the curve.

    Returns:
        The point `P + Q`.

    Notes:
        The formula for EC point addition `P + Q` where `Q != -P` and `P` and `Q` are not the point at infinity,
        where the curve is in short Weierstrass form, is:
            `x_(P+Q) = lambda^2 - x_P - x_Q`
            `y_(P+Q) = lambda * (x_P - x_(P+Q)) - y_P`
        where lambda is the gradient of the line through P and Q. Doubling a point with `y_P == 0` gives the point
        at infinity, as the tangent line at such a point is vertical.
    """
    if is_infinity(P):
        return Q
    if is_infinity(Q):
        return P

    if P.x == Q.x and P.y != Q.y:
        return POINT_AT_INFINITY
    if P == Q and P.y.is_zero():
        return POINT_AT_INFINITY

    lam = gradient(P, Q, curve_a)
    x = lam.square().sub(P.x).sub(Q.x)
    y = lam.mul(P.x.sub(x)).sub(P.y)
    return AffinePoint(x, y)


def point_doubling(P: Point, curve_a: Fq2Element) -> Point:  # noqa: N803
    """Compute `2P`."""
    return point_addition(P, P, curve_a)


def point_negation(P: Point) -> Point:  # noqa: N803
    """Compute `-P`: `(x, y) --> (x, -y)`, the point at infinity being its own negation."""
    if is_infinity(P):
        return P
    return AffinePoint(P.x, P.y.negate())


def scalar_multiplication(n: int, P: Point, curve_a: Fq2Element) -> Point:  # noqa: N803
    """Double-and-add scalar multiplication in E(F_q^2).

    The bits of `n` are processed from the least significant one: at every step the running base `2^i * P` is
    added to the result if the i-th bit is set, and then doubled.

    Args:
        n (int): The non-negative scalar.
        P (Point): The point to multiply.
        curve_a (Fq2Element): The `a` coefficient in the Short-Weierstrass equation of the curve.

    Returns:
        The point `nP`. If `n == 0`, the point at infinity.

    Raises:
        TypeError: If `n` is not an integer.
        ValueError: If `n` is negative.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        msg = f"The scalar must be an integer: {n!r}"
        raise TypeError(msg)

    result: Point = POINT_AT_INFINITY
    base = P
    for bit in scalar_to_bits(n):
        if bit:
            result = point_addition(result, base, curve_a)
        base = point_doubling(base, curve_a)
    return result
