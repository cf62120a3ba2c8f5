"""Shamir Secret Reconstruction (SSR).

Recovers the constant term of an integer polynomial from threshold shares
whose values are written in arbitrary bases, using exact Lagrange
interpolation at x = 0.
"""

__version__ = "0.1.0"
