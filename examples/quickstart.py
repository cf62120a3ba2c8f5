#!/usr/bin/env python3
"""Quick start example: recover secrets from the bundled share files.

Demonstrates the core workflow:
  1. Load a share bundle (keys n/k plus base-encoded shares)
  2. Reconstruct f(0) from the first k shares
  3. Cross-check the remaining shares against the same polynomial
"""

import logging
from pathlib import Path

from ssr.errors import InconsistentShares
from ssr.loader import load_bundle, solve_bundle

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

DATA_DIR = Path(__file__).parent / "data"

for path in sorted(DATA_DIR.glob("*.json")):
    # --- 1. Load the bundle ---
    bundle = load_bundle(path)
    print(f"{path.name}: n={bundle.keys.n}, k={bundle.keys.k}")

    # --- 2. Reconstruct the secret ---
    secret = solve_bundle(bundle)
    print(f"  Secret: {secret}")

    # --- 3. Check the shares that were not used ---
    try:
        solve_bundle(bundle, verify=True)
        print("  All shares consistent")
    except InconsistentShares as exc:
        print(f"  Shares off the polynomial: x = {[p.x for p in exc.outliers]}")
