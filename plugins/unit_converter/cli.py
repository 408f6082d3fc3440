"""Command line interface for the unit converter and detector."""

from __future__ import annotations

import argparse
import json
from typing import Any

from plugins.unit_detector.core import detect

from .core import (
    ConversionError,
    convert_and_format,
    expand_ranked,
    list_categories,
    list_units,
)


def _print(payload: Any) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True))


def _split_units(raw: str | None) -> list[str] | None:
    if not raw:
        return None
    return [item.strip() for item in raw.split(",") if item.strip()]


def command_categories(args: argparse.Namespace) -> None:
    _print({"categories": list_categories()})


def command_units(args: argparse.Namespace) -> None:
    _print({"category": args.category, "units": list_units(args.category)})


def command_convert(args: argparse.Namespace) -> None:
    _print(
        convert_and_format(
            args.value,
            args.from_unit,
            args.to_unit,
            args.category,
            decimal_places=args.decimals,
        )
    )


def command_expand(args: argparse.Namespace) -> None:
    _print(
        expand_ranked(
            args.value,
            args.unit,
            args.category,
            _split_units(args.prefer),
            decimal_places=args.decimals,
            ranked=args.ranked,
        )
    )


def command_detect(args: argparse.Namespace) -> None:
    detections = [item.to_dict() for item in detect(args.text)]
    _print({"detections": detections, "count": len(detections)})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="unit-lens", description="Unit conversion CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    categories_parser = subparsers.add_parser("categories", help="List categories")
    categories_parser.set_defaults(func=command_categories)

    units_parser = subparsers.add_parser("units", help="List the units of a category")
    units_parser.add_argument("--category", required=True, help="Category code (e.g. length)")
    units_parser.set_defaults(func=command_units)

    convert_parser = subparsers.add_parser("convert", help="Convert a value between two units")
    convert_parser.add_argument("value", help="Numeric value")
    convert_parser.add_argument("from_unit", help="Source unit code")
    convert_parser.add_argument("to_unit", help="Target unit code")
    convert_parser.add_argument("--category", required=True, help="Category code")
    convert_parser.add_argument("--decimals", type=int, default=2, help="Decimal places")
    convert_parser.set_defaults(func=command_convert)

    expand_parser = subparsers.add_parser("expand", help="Convert a value into every unit of its category")
    expand_parser.add_argument("value", help="Numeric value")
    expand_parser.add_argument("unit", help="Source unit code")
    expand_parser.add_argument("--category", required=True, help="Category code")
    expand_parser.add_argument("--prefer", help="Comma separated unit codes to keep")
    expand_parser.add_argument("--decimals", type=int, default=2, help="Decimal places")
    expand_parser.add_argument(
        "--ranked",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Order results by everyday relevance",
    )
    expand_parser.set_defaults(func=command_expand)

    detect_parser = subparsers.add_parser("detect", help="Find quantities with units in text")
    detect_parser.add_argument("text", help="Text to scan")
    detect_parser.set_defaults(func=command_detect)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except ConversionError as exc:
        raise SystemExit(f"error: {exc}") from exc


if __name__ == "__main__":
    main()
