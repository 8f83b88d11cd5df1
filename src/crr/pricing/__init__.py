from .tree import BinomialPricer, price, price_rolling
from .black_scholes import black_scholes_call

__all__ = ["BinomialPricer", "price", "price_rolling", "black_scholes_call"]
