"""Shared test fixtures for the SSR test suite."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import numpy as np
import pytest

from ssr.models import Point, RawShare
from ssr.radix import DIGITS


@pytest.fixture
def sample_shares() -> list[RawShare]:
    """The 4-share sample: y = x^2 + 3 sampled at x = 1, 2, 3, 6."""
    return [
        RawShare(x=1, base=10, value="4"),
        RawShare(x=2, base=2, value="111"),
        RawShare(x=3, base=10, value="12"),
        RawShare(x=6, base=4, value="213"),
    ]


@pytest.fixture
def sample_bundle_data() -> dict[str, Any]:
    return {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": "10", "value": "12"},
        "6": {"base": "4", "value": "213"},
    }


@pytest.fixture
def submission_bundle_data() -> dict[str, Any]:
    """10 shares with k = 7; the shares at x = 8, 9, 10 are off the curve."""
    return {
        "keys": {"n": 10, "k": 7},
        "1": {"base": "6", "value": "13444211440455345511"},
        "2": {"base": "15", "value": "aed7015a346d635"},
        "3": {"base": "15", "value": "6aeeb69631c227c"},
        "4": {"base": "16", "value": "e1b5e05623d881f"},
        "5": {"base": "8", "value": "316034514573652620673"},
        "6": {"base": "3", "value": "2122212201122002221120200210011020220200"},
        "7": {"base": "3", "value": "20120221122211000100210021102001201112121"},
        "8": {"base": "6", "value": "20220554335330240002224253"},
        "9": {"base": "12", "value": "45153788322a1255483"},
        "10": {"base": "7", "value": "1101613130313526312514143"},
    }


@pytest.fixture
def to_base_string() -> Callable[[int, int], str]:
    """Reference encoder: non-negative int -> numeral string in base b."""

    def encode(value: int, base: int) -> str:
        if value == 0:
            return "0"
        out = []
        while value:
            value, d = divmod(value, base)
            out.append(DIGITS[d])
        return "".join(reversed(out))

    return encode


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(seed=42)


@pytest.fixture
def make_points() -> Callable[[list[int], list[int]], list[Point]]:
    """Evaluate an integer polynomial (coeffs[0] = constant) at each x."""

    def build(coeffs: list[int], xs: list[int]) -> list[Point]:
        points = []
        for x in xs:
            y = 0
            for c in reversed(coeffs):
                y = y * x + c
            points.append(Point(x=x, y=y))
        return points

    return build
