"""Arbitrary-radix numeral decoding (bases 2..36) into exact integers."""

from __future__ import annotations

from ssr.errors import InvalidBase, InvalidDigit

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
MIN_BASE = 2
MAX_BASE = len(DIGITS)


def decode(numeral: str, base: int) -> int:
    """Decode a case-insensitive numeral string written in ``base``.

    Surrounding whitespace is ignored. Digits are read most-significant first
    and accumulated as ``acc * base + digit``, so the result is exact at any
    magnitude.

    Args:
        numeral: Digits from ``0-9a-z`` (upper case accepted).
        base: Radix in [2, 36].

    Returns:
        The non-negative integer value of ``numeral``.

    Raises:
        InvalidBase: ``base`` is not an integer in [2, 36].
        InvalidDigit: ``numeral`` is empty or holds a character that is not
            a digit of ``base``.
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(f"Base must be an integer, got {base!r}")
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(f"Base must be in [{MIN_BASE}, {MAX_BASE}], got {base}")

    digits = numeral.strip().lower()
    if not digits:
        raise InvalidDigit(f"Empty numeral for base {base}")

    value = 0
    for pos, ch in enumerate(digits):
        d = DIGITS.find(ch)
        if d < 0 or d >= base:
            raise InvalidDigit(
                f"Invalid digit {ch!r} at position {pos} for base {base}"
            )
        value = value * base + d

    return value
