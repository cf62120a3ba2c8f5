"""Data models for shares, points, and threshold descriptors."""

from __future__ import annotations

from dataclasses import dataclass, field

from ssr.radix import decode

# Running (numerator, denominator) pair; never reduced.
RationalPair = tuple[int, int]


@dataclass(frozen=True)
class Point:
    """A decoded share (x, y) where y = f(x)."""

    x: int
    y: int


@dataclass(frozen=True)
class RawShare:
    """An undecoded share: abscissa plus its y-value written in ``base``."""

    x: int
    base: int
    value: str

    def to_point(self) -> Point:
        return Point(x=self.x, y=decode(self.value, self.base))


@dataclass(frozen=True)
class ThresholdKeys:
    """Share count ``n`` and reconstruction threshold ``k``."""

    n: int
    k: int

    def __post_init__(self) -> None:
        if self.n < 1:
            raise ValueError(f"n must be >= 1, got {self.n}")
        if self.k < 1:
            raise ValueError(f"k must be >= 1, got {self.k}")


@dataclass
class ShareBundle:
    """A threshold descriptor together with the shares supplied for it.

    Attributes:
        keys: Declared share count and threshold.
        shares: Raw shares in input order; decoded lazily by ``points``.
    """

    keys: ThresholdKeys
    shares: list[RawShare] = field(default_factory=list)

    @property
    def num_shares(self) -> int:
        return len(self.shares)

    def points(self) -> list[Point]:
        return [s.to_point() for s in self.shares]
