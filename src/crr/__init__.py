"""
crr
---
American call pricing on a Cox-Ross-Rubinstein binomial lattice.
"""

from .errors import InvalidArgument, NumericDegeneracy
from .pricing.tree import BinomialPricer, price, price_rolling

__all__ = ["BinomialPricer", "price", "price_rolling",
           "InvalidArgument", "NumericDegeneracy"]
