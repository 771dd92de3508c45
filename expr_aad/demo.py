"""
Worked example: value and partial derivatives of ((A + B) * C) * D.
"""

import argparse
import logging
import sys

from .config import HarnessConfig
from .core.engine import annotate, derivative_over
from .core.errors import UnknownVariable
from .core.graph_utils import print_graph_summary
from .core.node import Leaf, Sum, Product


def build_example(config: HarnessConfig):
    """Build Fend = ((A + B) * C) * D; returns (Fend, {name: leaf})."""
    a = Leaf(config.a, "A")
    b = Leaf(config.b, "B")
    c = Leaf(config.c, "C")
    d = Leaf(config.d, "D")

    f1 = Sum(a, b, name="A+B")
    f2 = Product(f1, c, name="(A+B)C")
    f_end = Product(f2, d, name="(A+B)CD")
    return f_end, {leaf.name: leaf for leaf in (a, b, c, d)}


def parse_args(argv=None):
    """Parse command line arguments."""
    defaults = HarnessConfig()
    parser = argparse.ArgumentParser(
        description='Evaluate ((A + B) * C) * D and its partial derivatives',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('-a', type=float, default=defaults.a, help='value of leaf A')
    parser.add_argument('-b', type=float, default=defaults.b, help='value of leaf B')
    parser.add_argument('-c', type=float, default=defaults.c, help='value of leaf C')
    parser.add_argument('-d', type=float, default=defaults.d, help='value of leaf D')
    parser.add_argument('--wrt', action='append', metavar='NAME',
                        help='leaf to differentiate over (repeatable, default: A)')
    parser.add_argument('--summary', action='store_true',
                        help='print expression graph summary')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='enable debug logging')
    return parser.parse_args(argv)


def run(config: HarnessConfig) -> int:
    f_end, _ = build_example(config)
    evaluation = annotate(f_end)

    if config.summary:
        print_graph_summary(f_end)

    print(f"Val: {float(evaluation.value)!r}")
    for name in config.wrt:
        try:
            deriv = derivative_over(f_end, name, evaluation)
        except UnknownVariable as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        print(f"Derive {name}: {float(deriv)!r}")
    return 0


def main(argv=None) -> int:
    config = HarnessConfig.from_args(parse_args(argv))
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run(config)


if __name__ == '__main__':
    sys.exit(main())
