"""
crr.lattice
-----------
Cox-Ross-Rubinstein lattice construction.

Both lattices are ragged: row i holds i + 1 nodes, node j being the state
reached after j up-moves and (i - j) down-moves.

    price[i][j] = S * u**j * d**(i - j)
    value[N][j] = max(0, price[N][j] - K)
    value[i][j] = max(price[i][j] - K,
                      disc * (p * value[i+1][j+1] + (1 - p) * value[i+1][j]))
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List

import numpy as np

from crr.errors import NumericDegeneracy

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365

Lattice = List[np.ndarray]


@dataclass(frozen=True)
class CRRParams:
    dt: float     # years per step
    u: float      # up factor
    d: float      # down factor
    p: float      # risk-neutral up probability
    disc: float   # one-step discount factor
    steps: int


def crr_params(T: float, N: int, sigma: float, r: float) -> CRRParams:
    """
    Derive the per-step CRR scalars.

    Parameters
    ----------
    T     : time to maturity in days
    N     : number of steps
    sigma : annual volatility
    r     : annual risk-free rate (continuous)
    """
    dt = T / DAYS_PER_YEAR / N
    u = math.exp(sigma * math.sqrt(dt))
    d = 1 / u
    if u == d:
        raise NumericDegeneracy(
            f"up and down factors coincide (sigma={sigma}, dt={dt}); "
            "risk-neutral probability is undefined"
        )
    p = (math.exp(r * dt) - d) / (u - d)
    if not 0.0 <= p <= 1.0:
        # tree admits arbitrage for these inputs; value is still returned
        logger.warning("risk-neutral probability p=%.6f outside [0, 1] "
                       "(r=%s, sigma=%s, dt=%.3g)", p, r, sigma, dt)
    logger.debug("CRR params dt=%.6g u=%.8f d=%.8f p=%.8f", dt, u, d, p)
    return CRRParams(dt=dt, u=u, d=d, p=p, disc=math.exp(-r * dt), steps=N)


def price_row(S: float, params: CRRParams, i: int) -> np.ndarray:
    """Asset prices at step i, ordered by number of up-moves."""
    j = np.arange(i + 1)
    return S * params.u ** j * params.d ** (i - j)


def build_price_lattice(S: float, params: CRRParams) -> Lattice:
    rows = []
    for i in range(params.steps + 1):
        row = price_row(S, params, i)
        row.flags.writeable = False
        rows.append(row)
    return rows


def step_back(values: np.ndarray, prices: np.ndarray, K: float,
              params: CRRParams) -> np.ndarray:
    """
    One backward-induction step: values at step i+1 -> values at step i.

    `prices` are the asset prices at step i (len(values) - 1 nodes).
    """
    cont = params.disc * (params.p * values[1:] + (1 - params.p) * values[:-1])
    return np.maximum(prices - K, cont)


def build_value_lattice(prices: Lattice, K: float, params: CRRParams) -> Lattice:
    n = params.steps
    rows: Lattice = [None] * (n + 1)  # type: ignore[list-item]
    rows[n] = np.maximum(prices[n] - K, 0.0)
    for i in range(n - 1, -1, -1):
        rows[i] = step_back(rows[i + 1], prices[i], K, params)
    for row in rows:
        row.flags.writeable = False
    return rows
