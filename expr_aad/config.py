"""
Demo harness configuration.

Leaf values and queries for the worked example ((A + B) * C) * D.
"""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass
class HarnessConfig:
    """Configuration for the demo harness"""

    a: float = 10.0
    b: float = 5.0
    c: float = 20.0
    d: float = 25.0
    wrt: Tuple[str, ...] = field(default_factory=lambda: ("A",))
    summary: bool = False
    verbose: bool = False

    @classmethod
    def from_args(cls, args) -> "HarnessConfig":
        """Build from an argparse namespace produced by demo.parse_args."""
        return cls(
            a=args.a,
            b=args.b,
            c=args.c,
            d=args.d,
            wrt=tuple(args.wrt) if args.wrt else ("A",),
            summary=args.summary,
            verbose=args.verbose,
        )
