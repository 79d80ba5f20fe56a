"""types package.

This package provides the classes representing points of elliptic curves over F_q^2.
"""
