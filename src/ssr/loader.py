"""Share-bundle parsing for the JSON input shape.

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

Every top-level key except ``keys`` is the x-coordinate of one share.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ssr.errors import InvalidShareData
from ssr.interpolation import SecretReconstructor
from ssr.models import RawShare, ShareBundle, ThresholdKeys

logger = logging.getLogger(__name__)

KEYS_FIELD = "keys"


def _as_int(value: Any, what: str) -> int:
    if isinstance(value, bool):
        raise InvalidShareData(f"{what} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as exc:
            raise InvalidShareData(f"{what} must be an integer, got {value!r}") from exc
    raise InvalidShareData(f"{what} must be an integer, got {value!r}")


def _parse_keys(raw: Any) -> ThresholdKeys:
    if not isinstance(raw, Mapping):
        raise InvalidShareData(f"'{KEYS_FIELD}' must be an object, got {raw!r}")
    for name in ("n", "k"):
        if name not in raw:
            raise InvalidShareData(f"'{KEYS_FIELD}' is missing '{name}'")
    n = _as_int(raw["n"], f"{KEYS_FIELD}.n")
    k = _as_int(raw["k"], f"{KEYS_FIELD}.k")
    try:
        return ThresholdKeys(n=n, k=k)
    except ValueError as exc:
        raise InvalidShareData(str(exc)) from exc


def _parse_share(key: str, raw: Any) -> RawShare:
    x = _as_int(key, "Share key")
    if not isinstance(raw, Mapping):
        raise InvalidShareData(f"Share {key!r} must be an object, got {raw!r}")
    if "base" not in raw or "value" not in raw:
        raise InvalidShareData(f"Share {key!r} needs both 'base' and 'value'")
    value = raw["value"]
    if not isinstance(value, str):
        raise InvalidShareData(f"Share {key!r} value must be a string, got {value!r}")
    return RawShare(x=x, base=_as_int(raw["base"], f"Share {key!r} base"), value=value)


def parse_bundle(data: Mapping[str, Any]) -> ShareBundle:
    """Build a ShareBundle from an already-decoded JSON object.

    Share values are not decoded here; digit and base errors surface when
    the bundle is reconstructed.

    Raises:
        InvalidShareData: The object does not have the expected shape.
    """
    if not isinstance(data, Mapping):
        raise InvalidShareData(f"Share bundle must be an object, got {type(data).__name__}")
    if KEYS_FIELD not in data:
        raise InvalidShareData(f"Share bundle is missing '{KEYS_FIELD}'")

    keys = _parse_keys(data[KEYS_FIELD])
    shares = [
        _parse_share(key, raw) for key, raw in data.items() if key != KEYS_FIELD
    ]

    if len(shares) != keys.n:
        logger.warning(
            "Bundle declares n=%d but contains %d shares", keys.n, len(shares)
        )

    return ShareBundle(keys=keys, shares=shares)


def load_bundle(path: str | Path) -> ShareBundle:
    """Read and parse a UTF-8 JSON share bundle from ``path``."""
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidShareData(f"{path}: invalid JSON ({exc.msg})") from exc
    return parse_bundle(data)


def solve_bundle(bundle: ShareBundle, verify: bool = False) -> int:
    """Reconstruct the bundle's secret with its declared threshold k."""
    return SecretReconstructor(bundle.keys.k, verify=verify).reconstruct_bundle(bundle)
