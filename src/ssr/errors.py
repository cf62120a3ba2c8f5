"""Error taxonomy for decoding and reconstruction."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ssr.models import Point


class ReconstructionError(ValueError):
    """Base class for every error raised by ssr."""


class InvalidBase(ReconstructionError):
    pass


class InvalidDigit(ReconstructionError):
    pass


class InsufficientPoints(ReconstructionError):
    pass


class DuplicateAbscissa(ReconstructionError):
    pass


class NonIntegerResult(ReconstructionError):
    """The interpolated value at x = 0 is not an integer.

    Means the points do not come from one integer polynomial of degree < k.
    """

    def __init__(self, numerator: int, denominator: int) -> None:
        super().__init__(
            f"Interpolated secret {numerator}/{denominator} is not an integer"
        )
        self.numerator = numerator
        self.denominator = denominator


class InconsistentShares(ReconstructionError):
    """Points beyond the selected threshold disagree with the polynomial."""

    def __init__(self, outliers: list[Point]) -> None:
        xs = ", ".join(str(p.x) for p in outliers)
        super().__init__(f"Shares at x = {xs} do not lie on the interpolated polynomial")
        self.outliers = outliers


class InvalidShareData(ReconstructionError):
    pass
