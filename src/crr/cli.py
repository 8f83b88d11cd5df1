#!/usr/bin/env python3
"""
Demo invocation of the American call pricer.

    crr-price                          # demo parameters, 2-decimal output
    crr-price --days 365 --steps 500
    crr-price --config config/pricer.yaml --convergence
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from crr.config import PricerConfig, add_common_args
from crr.convergence import convergence_table, steps_grid
from crr.errors import InvalidArgument, NumericDegeneracy
from crr.pricing.tree import price

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="crr-price",
                                description="Price an American call on a CRR binomial tree.")
    add_common_args(p)
    p.add_argument("--convergence", action="store_true",
                   help="print tree price vs. Black-Scholes for increasing step counts "
                        "(the configured --steps is included)")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = PricerConfig.load(args.config, vars(args))
    except InvalidArgument as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    logging.basicConfig(level=cfg.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    px = cfg.pricing
    logger.info("pricing with %s", px)

    try:
        if args.convergence:
            df = convergence_table(px["spot"], px["strike"], px["rate"],
                                   px["days"], px["sigma"],
                                   steps=steps_grid(px["steps"]))
            print(df.to_string(index=False, float_format=lambda x: f"{x:.4f}"))
            return 0
        value = price(px["spot"], px["strike"], px["rate"],
                      px["days"], px["steps"], px["sigma"])
    except (InvalidArgument, NumericDegeneracy) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(f"The American call option price is: {value:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
