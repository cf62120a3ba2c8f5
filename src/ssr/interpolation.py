"""Exact Lagrange interpolation over the rationals.

The secret is f(0) for the unique polynomial of degree < k through k shares.
Terms are summed as unreduced integer fractions and divided once at the end,
so no precision is lost at any size.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from ssr.errors import (
    DuplicateAbscissa,
    InconsistentShares,
    InsufficientPoints,
    NonIntegerResult,
)
from ssr.models import Point, RationalPair, RawShare, ShareBundle

logger = logging.getLogger(__name__)

ShareLike = Point | RawShare | tuple[int, int, str]


def as_points(shares: Iterable[ShareLike]) -> list[Point]:
    """Decode raw shares and (x, base, value) triples into points.

    Decoder errors propagate unchanged.
    """
    points = []
    for s in shares:
        if isinstance(s, Point):
            points.append(s)
        elif isinstance(s, RawShare):
            points.append(s.to_point())
        elif isinstance(s, tuple) and len(s) == 3:
            points.append(RawShare(*s).to_point())
        else:
            raise TypeError(
                f"Expected Point, RawShare or (x, base, value) triple, got {s!r}"
            )
    return points


def select_points(points: Iterable[Point], k: int) -> list[Point]:
    """Pick the k points used for interpolation.

    Repeated identical points count once, and fewer than k distinct
    abscissas is ``InsufficientPoints``. The rest are sorted ascending by x
    and the first k are taken. Any k consistent points give the same f(0);
    the sort only makes the choice reproducible.
    """
    if k < 1:
        raise ValueError(f"Threshold k must be >= 1, got {k}")

    unique = sorted(set(points), key=lambda p: (p.x, p.y))
    distinct_x = len({p.x for p in unique})
    if distinct_x < k:
        raise InsufficientPoints(f"Need {k} distinct x values, got {distinct_x}")

    selected = unique[:k]
    for prev, cur in zip(selected, selected[1:]):
        if prev.x == cur.x:
            raise DuplicateAbscissa(
                f"Points ({prev.x}, {prev.y}) and ({cur.x}, {cur.y}) share x = {cur.x}"
            )
    return selected


def lagrange_term(points: Sequence[Point], i: int, at: int = 0) -> RationalPair:
    """Term i of the Lagrange sum at x = ``at`` as (numerator, denominator).

        num_i = y_i * prod_{j != i} (at - x_j)
        den_i =       prod_{j != i} (x_i - x_j)
    """
    xi = points[i].x
    numerator = points[i].y
    denominator = 1
    for j, pj in enumerate(points):
        if j == i:
            continue
        numerator *= at - pj.x
        denominator *= xi - pj.x
    return numerator, denominator


def interpolate_at(points: Sequence[Point], at: int = 0) -> RationalPair:
    """Value of the interpolating polynomial at ``at`` as an unreduced fraction.

    Points must have distinct x. Terms are combined with
    a/b + c/d = (a*d + c*b) / (b*d).
    """
    total_num, total_den = 0, 1
    for i in range(len(points)):
        num, den = lagrange_term(points, i, at)
        total_num = total_num * den + num * total_den
        total_den *= den
    return total_num, total_den


def exact_quotient(numerator: int, denominator: int) -> int:
    """numerator / denominator, which must divide with zero remainder."""
    quotient, remainder = divmod(numerator, denominator)
    if remainder:
        raise NonIntegerResult(numerator, denominator)
    return quotient


def find_inconsistent_points(
    points: Iterable[Point],
    k: int,
    selected: Sequence[Point] | None = None,
) -> list[Point]:
    """Points that miss the polynomial interpolated through the selected k.

    Only points outside the selection are checked, in ascending x order.
    Pass ``selected`` when ``select_points`` has already been run on
    ``points``.
    """
    pool = list(points)
    if selected is None:
        selected = select_points(pool, k)
    chosen = set(selected)

    outliers = []
    for p in sorted(set(pool) - chosen, key=lambda q: (q.x, q.y)):
        num, den = interpolate_at(selected, p.x)
        if num != p.y * den:
            outliers.append(p)
    return outliers


class SecretReconstructor:
    """Recovers f(0) from k-of-n shares.

    Args:
        threshold: Number of shares k that determine the polynomial.
        verify: Also check every share beyond the first k against the
            interpolated polynomial and raise ``InconsistentShares`` on
            disagreement.
    """

    def __init__(self, threshold: int, verify: bool = False) -> None:
        if threshold < 1:
            raise ValueError(f"Threshold must be >= 1, got {threshold}")
        self.k = threshold
        self.verify = verify

    def reconstruct(self, shares: Iterable[ShareLike]) -> int:
        """Reconstruct the secret from decoded points and/or raw shares."""
        points = as_points(shares)
        selected = select_points(points, self.k)
        logger.debug("Interpolating at x=0 through x=%s", [p.x for p in selected])

        if self.verify:
            outliers = find_inconsistent_points(points, self.k, selected)
            if outliers:
                raise InconsistentShares(outliers)

        secret = exact_quotient(*interpolate_at(selected, 0))
        logger.debug("Reconstructed secret from %d of %d shares", self.k, len(points))
        return secret

    def reconstruct_bundle(self, bundle: ShareBundle) -> int:
        return self.reconstruct(bundle.shares)


def reconstruct_secret(
    shares: Iterable[ShareLike],
    k: int,
    verify: bool = False,
) -> int:
    """Convenience: reconstruct the secret with threshold k."""
    return SecretReconstructor(k, verify=verify).reconstruct(shares)
