"""
Application Entry Point
=======================
Parses the command line, configures logging and runs the curve demo.
"""
import argparse
import logging
import sys
from typing import List, Optional

import numpy as np

from cadcurves.config import DEMO_POPULATION_SIZE
from cadcurves.controller.example import start_example
from cadcurves.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cadcurves",
        description="Generate random circles, ellipses and helixes and summarise them.",
    )
    parser.add_argument("--count", type=int, default=DEMO_POPULATION_SIZE,
                        help=f"Number of curves to generate (default: {DEMO_POPULATION_SIZE})")
    parser.add_argument("--workers", type=int, default=None,
                        help="Worker threads for the radii sum (default: CPU count)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the random generator")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: WARNING)")
    parser.add_argument("--log-file", default=None,
                        help="Also write logs to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    # 2. Seeded generator for reproducible runs
    rng = np.random.default_rng(args.seed)

    # 3. Run the demo
    try:
        start_example(n=args.count, workers=args.workers, rng=rng)
    except ValueError as e:
        logger.error(f"Demo failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
