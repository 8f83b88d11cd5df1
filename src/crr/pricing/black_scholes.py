# src/crr/pricing/black_scholes.py
import math

from scipy.stats import norm

from crr.lattice import DAYS_PER_YEAR


def black_scholes_call(S, K, r, T, sigma):
    """
    European call, closed form. `T` in days, same convention as the tree.

    Without dividends (and r >= 0) an American call is never exercised early,
    so this is the limit the CRR price converges to as N grows.
    """
    t = T / DAYS_PER_YEAR
    if sigma <= 0 or t <= 0:
        return max(0.0, S - math.exp(-r * t) * K)
    sig = sigma * math.sqrt(t)
    d1 = (math.log(S / K) + (r + 0.5 * sigma * sigma) * t) / sig
    d2 = d1 - sig
    return float(S * norm.cdf(d1) - math.exp(-r * t) * K * norm.cdf(d2))
