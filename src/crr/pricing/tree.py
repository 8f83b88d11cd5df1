"""
CRR binomial tree for American calls (no dividends).

`price` materialises both triangular lattices (O(N^2) memory);
`price_rolling` reuses a single row (O(N) memory) and performs the exact
same arithmetic, so the two agree to the last bit.
"""
from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass

import numpy as np

from crr.errors import InvalidArgument
from crr.lattice import (
    build_price_lattice,
    build_value_lattice,
    crr_params,
    price_row,
    step_back,
)

logger = logging.getLogger(__name__)


def validate_inputs(S: float, K: float, T: float, N: int, sigma: float) -> None:
    if isinstance(N, bool) or not isinstance(N, numbers.Integral):
        raise InvalidArgument(f"N must be an integer, got {N!r}")
    if N < 1:
        raise InvalidArgument(f"N must be >= 1, got {N}")
    # written as `not x > 0` so NaN is rejected too
    if not S > 0:
        raise InvalidArgument(f"S must be > 0, got {S}")
    if not K > 0:
        raise InvalidArgument(f"K must be > 0, got {K}")
    if not T > 0:
        raise InvalidArgument(f"T must be > 0 (days), got {T}")
    if not sigma >= 0:
        raise InvalidArgument(f"sigma must be >= 0, got {sigma}")


def price(S: float, K: float, r: float, T: float, N: int, sigma: float) -> float:
    """
    Fair value of an American call via the full CRR lattice.

    Parameters
    ----------
    S     : spot price
    K     : strike
    r     : annual risk-free rate
    T     : time to maturity in days (365-day year)
    N     : number of tree steps
    sigma : annual volatility

    Raises
    ------
    InvalidArgument   : inputs outside the domain above
    NumericDegeneracy : u == d (e.g. sigma == 0)
    """
    validate_inputs(S, K, T, N, sigma)
    params = crr_params(T, int(N), sigma, r)
    prices = build_price_lattice(S, params)
    values = build_value_lattice(prices, K, params)
    value = float(values[0][0])
    logger.debug("price S=%s K=%s r=%s T=%s N=%s sigma=%s -> %.6f",
                 S, K, r, T, N, sigma, value)
    return value


def price_rolling(S: float, K: float, r: float, T: float, N: int, sigma: float) -> float:
    """Same result as `price`, keeping only one lattice row alive."""
    validate_inputs(S, K, T, N, sigma)
    n = int(N)
    params = crr_params(T, n, sigma, r)

    values = np.maximum(price_row(S, params, n) - K, 0.0)
    for i in range(n - 1, -1, -1):
        values = step_back(values, price_row(S, params, i), K, params)
    return float(values[0])


@dataclass(frozen=True)
class BinomialPricer:
    """American-call pricer with a fixed tree depth."""

    steps: int = 100
    rolling: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.steps, bool) or not isinstance(self.steps, numbers.Integral) \
                or self.steps < 1:
            raise InvalidArgument(f"steps must be an integer >= 1, got {self.steps!r}")

    def price(self, S: float, K: float, r: float, T: float, sigma: float) -> float:
        fn = price_rolling if self.rolling else price
        return fn(S, K, r, T, self.steps, sigma)
