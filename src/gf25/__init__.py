"""gf25: A Python package for elliptic curve arithmetic over the finite field F_5^2.

The `gf25` package implements the field F_5^2 = F_5[t] / (t^2 - 3), a field with 25 elements, and the group law of
elliptic curves in short Weierstrass form `y^2 = x^3 + a * x + b` over it, in affine coordinates. Scalar
multiplication is computed with the double-and-add algorithm.

Usage example:
    Compute `[3]P` for `P = (1 + 2t, 4 + 4t)` on a curve with `a = 1`:

    >>> from gf25.elliptic_curves.ec_operations_fq2 import scalar_multiplication
    >>> from gf25.fields.fq2 import Fq2Element
    >>> from gf25.types.points import AffinePoint
    >>>
    >>> P = AffinePoint(Fq2Element(1, 2), Fq2Element(4, 4))
    >>> print(scalar_multiplication(2, P, Fq2Element(1, 0)))
    (1 + 2t, 1 + 1t)
"""
