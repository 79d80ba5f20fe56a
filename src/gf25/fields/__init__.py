"""fields package.

This package provides modules for arithmetic operations in the finite fields F_q and F_q^2, q = 5.

Modules:
    - fq: Contains the modulus `q` and inversion in the prime field F_q.
    - fq2: Contains the Fq2Element class for arithmetic operations over the finite field F_q^2 built as a quadratic
    extension of F_q.

Usage example:
    >>> from gf25.fields.fq2 import Fq2Element
    >>> x = Fq2Element(1, 2)
    >>> print(x * x.inverse())
    1
"""
