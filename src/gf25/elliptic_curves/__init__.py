"""elliptic_curves package.

This package provides modules for elliptic curve operations.

Modules:
    - ec_operations_fq2: Contains point addition, doubling, negation and scalar multiplication on elliptic curves
    over F_q^2.

Usage example:
    >>> from gf25.elliptic_curves.ec_operations_fq2 import point_addition
    >>> from gf25.fields.fq2 import Fq2Element
    >>> from gf25.types.points import AffinePoint
    >>>
    >>> P = AffinePoint(Fq2Element(0, 0), Fq2Element(1, 0))
    >>> Q = AffinePoint(Fq2Element(3, 1), Fq2Element(1, 3))
    >>> print(point_addition(P, Q, curve_a=Fq2Element(1, 0)))
    (1 + 2t, 4 + 4t)
"""
