#!/usr/bin/env python3
"""
TimeBucks Calculator: parse and convert temporal currency values.

Usage:
  python scripts/timebucks_calc.py parse '$8,000@2024[CPI:1970]'
  python scripts/timebucks_calc.py convert '$1,000@1970' --to 2024 --method WAGE
  python scripts/timebucks_calc.py convert '$100@1970-06-15' --to 2024-12-25
  python scripts/timebucks_calc.py compare '$80,000@1930' --to 2024
  python scripts/timebucks_calc.py methods
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from timebucks.computation.engine import ConversionEngine  # noqa: E402
from timebucks.config import get_settings  # noqa: E402
from timebucks.exceptions import TimeBucksError  # noqa: E402
from timebucks.notation.parser import NotationParser  # noqa: E402

logger = logging.getLogger("timebucks_calc")


def _parse_target(text: str) -> tuple[int, int | None, int | None]:
    """YYYY, YYYY-MM or YYYY-MM-DD -> (year, month, day)."""
    parts = text.split("-")
    if not 1 <= len(parts) <= 3 or not all(p.isdigit() for p in parts):
        raise argparse.ArgumentTypeError(f"invalid target date: {text!r}")
    year = int(parts[0])
    month = int(parts[1]) if len(parts) > 1 else None
    day = int(parts[2]) if len(parts) > 2 else None
    if month is not None and not 1 <= month <= 12:
        raise argparse.ArgumentTypeError(f"month out of range in target date: {text!r}")
    if day is not None and not 1 <= day <= 31:
        raise argparse.ArgumentTypeError(f"day out of range in target date: {text!r}")
    return year, month, day


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="TimeBucks Calculator: temporal currency conversion",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: TIMEBUCKS_LOG_LEVEL or INFO)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_parse = sub.add_parser("parse", help="Parse notation and show its fields")
    p_parse.add_argument("notation")

    p_convert = sub.add_parser("convert", help="Convert a value to another date")
    p_convert.add_argument("notation")
    p_convert.add_argument("--to", dest="target", type=_parse_target, required=True,
                           help="Target date (YYYY, YYYY-MM or YYYY-MM-DD)")
    p_convert.add_argument("--method", type=str, default=None,
                           help="Transformation method (default: TIMEBUCKS_DEFAULT_METHOD)")

    p_compare = sub.add_parser("compare", help="Convert with every registered method")
    p_compare.add_argument("notation")
    p_compare.add_argument("--to", dest="target", type=_parse_target, required=True,
                           help="Target date (YYYY, YYYY-MM or YYYY-MM-DD)")

    sub.add_parser("methods", help="List registered transformation methods")
    return parser.parse_args(argv)


def run(args: argparse.Namespace, engine: ConversionEngine) -> None:
    if args.command == "parse":
        value = NotationParser().parse(args.notation)
        kind = "calculated" if value.is_calculated() else "natural"
        print(f"{value.format()}  ({kind})")
        for field, field_value in value.model_dump(mode="json", exclude={"provenance"}).items():
            print(f"  {field:<13} {field_value}")
        if value.provenance is not None:
            for field, field_value in value.provenance.model_dump().items():
                print(f"  {field:<13} {field_value}")

    elif args.command == "convert":
        method = args.method or get_settings().default_method
        print(engine.convert(args.notation, method, *args.target))

    elif args.command == "compare":
        source = NotationParser().parse(args.notation)
        for name, result in engine.compare_methods(source, *args.target).items():
            print(f"{name:<8} {result.format()}")

    elif args.command == "methods":
        for info in engine.registry.describe():
            print(f"{info.name:<8} {info.description}")


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=(args.log_level or get_settings().log_level).upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    try:
        run(args, ConversionEngine())
    except TimeBucksError as e:
        logger.error(e.message)
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
