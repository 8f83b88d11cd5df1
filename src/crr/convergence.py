# src/crr/convergence.py
from __future__ import annotations
from typing import Iterable

import pandas as pd

from crr.pricing.black_scholes import black_scholes_call
from crr.pricing.tree import price_rolling, validate_inputs

DEFAULT_STEPS = (10, 25, 50, 100, 250, 500, 1000)


def steps_grid(extra: int | None = None) -> list[int]:
    """DEFAULT_STEPS, plus `extra` (the configured depth) if given."""
    grid = set(DEFAULT_STEPS)
    if extra is not None:
        grid.add(extra)
    return sorted(grid)


def convergence_table(S: float, K: float, r: float, T: float, sigma: float,
                      steps: Iterable[int] = DEFAULT_STEPS) -> pd.DataFrame:
    """
    Tree price for each step count next to the Black-Scholes value.

    Columns: steps, price, black_scholes, error (price - black_scholes).
    """
    validate_inputs(S, K, T, 1, sigma)
    bs = black_scholes_call(S, K, r, T, sigma)
    rows = [dict(steps=n, price=price_rolling(S, K, r, T, n, sigma)) for n in steps]
    df = pd.DataFrame(rows, columns=["steps", "price"])
    df["black_scholes"] = bs
    df["error"] = df["price"] - bs
    return df
