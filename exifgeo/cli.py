"""Command line entry point for exifgeo.

Converts angles between decimal degrees and degrees-minutes-seconds:

    $ exifgeo to-dms -1.3846 54.5339
    -1° 23' 4.56", 54° 32' 2.04"
    $ exifgeo to-decimal 10 30 0 --ref S
    -10.5
    $ exifgeo to-decimal 10 30 1/0
    coordinate unavailable

Degree, minute and second components accept decimal text or ``n/d``
rationals as they appear in GPS metadata dumps.
"""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from rich.console import Console

from .geo import GeoCoordinate, decimal_to_dms_string, dms_to_decimal
from .log import configure_logging
from .rational import parse_component

CONSOLE = Console()

NEGATIVE_REFS = ("S", "W")


def _rational(text: str):
    try:
        return parse_component(text)
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"not a number or n/d rational: {text!r}") from err


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exifgeo", description="Convert between decimal degrees and DMS notation"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="logging level (default: $EXIFGEO_LOG_LEVEL or WARNING)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    to_dms = commands.add_parser("to-dms", help="decimal degrees to D° M' S\"")
    to_dms.add_argument("latitude", type=float)
    to_dms.add_argument("longitude", type=float, nargs="?")

    to_decimal = commands.add_parser("to-decimal", help="DMS components to decimal degrees")
    to_decimal.add_argument("degrees", type=_rational)
    to_decimal.add_argument("minutes", type=_rational)
    to_decimal.add_argument("seconds", type=_rational)
    sign = to_decimal.add_mutually_exclusive_group()
    sign.add_argument("--negative", action="store_true", help="south latitude or west longitude")
    sign.add_argument("--ref", type=str.upper, choices=["N", "S", "E", "W"], help="hemisphere reference")
    return parser


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or CONSOLE
    configure_logging(args.log_level)

    if args.command == "to-dms":
        if args.longitude is None:
            text = decimal_to_dms_string(args.latitude)
        else:
            text = GeoCoordinate(args.latitude, args.longitude).to_dms_string()
        console.print(text, markup=False, highlight=False)
        return 0

    is_negative = args.negative or args.ref in NEGATIVE_REFS
    value = dms_to_decimal(args.degrees, args.minutes, args.seconds, is_negative)
    if value is None:
        console.print("[red]coordinate unavailable[/red]", highlight=False)
        return 1
    console.print(repr(value), markup=False, highlight=False)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
