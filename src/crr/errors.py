# src/crr/errors.py
"""
Exceptions raised by the lattice pricer.

Both derive from a builtin so callers that already trap ValueError /
ArithmeticError keep working.
"""


class InvalidArgument(ValueError):
    """Input outside the pricer's domain (N < 1, S <= 0, K <= 0, T <= 0, sigma < 0)."""


class NumericDegeneracy(ArithmeticError):
    """Up and down factors coincide, so the risk-neutral probability is undefined."""
