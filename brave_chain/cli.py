#!/usr/bin/env python3
"""
Command-line front end for the Brave Chain calculator.
Prints every play order of a hand ranked by damage and by NP gain.
"""

import argparse
import json
import sys

from .calculator import ChainCalculator
from .engine.scoring import FormulaConfig
from .errors import ParseError


def build_parser() -> argparse.ArgumentParser:
    defaults = FormulaConfig()
    parser = argparse.ArgumentParser(
        prog="brave-chain",
        description="Rank the play orders of a three-card hand",
    )
    parser.add_argument("cards", help="Three card codes from a/b/q, e.g. bbq")
    parser.add_argument("--attack", type=float, default=defaults.servant_attack,
                        help="Servant attack")
    parser.add_argument("--np-rate", type=float, default=defaults.np_rate,
                        help="NP gain per hit")
    parser.add_argument("--star-rate", type=float, default=defaults.star_generation,
                        help="Star generation per hit")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Show each order's breakdown")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    config = FormulaConfig(
        servant_attack=args.attack,
        np_rate=args.np_rate,
        star_generation=args.star_rate,
    )
    calc = ChainCalculator(config)

    try:
        report = calc.evaluate_codes(args.cards, verbose=args.verbose)
    except ParseError as err:
        print(err)
        return 1

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
