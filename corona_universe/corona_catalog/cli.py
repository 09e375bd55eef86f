#!/usr/bin/env python3
"""
Command-line driver for corona enumeration and catalogs.

Usage:
    corona-catalog enumerate --center 2 --samples 5 --allowed 1 2 3 4
    corona-catalog validate "2|3^0|3^0|3^0|3^0" "1|1^0|2^0|2^0|2^0"
    corona-catalog generate --centers 1 2 3 4 --output valid-coronas.json
    corona-catalog load valid-coronas.json --center 2
"""

import argparse
import logging
import sys
from pathlib import Path

from corona_core.codec import CompactParseError, from_compact, to_compact
from corona_core.enumeration import enumerate_unique_coronas
from corona_core.types import DEFAULT_ALLOWED_SIZES
from corona_core.validator import validate

from .catalog import (
    DEFAULT_CATALOG_FILE,
    DEFAULT_CENTER_SIZES,
    build_catalog,
    coronas_from_catalog,
    load_catalog,
    save_catalog,
    summarize_coronas,
)
from .utils import setup_logger

DEFAULT_SAMPLE_COUNT = 5

logger = logging.getLogger("corona_catalog")


def positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def cmd_enumerate(args) -> int:
    coronas = enumerate_unique_coronas(args.center, args.allowed)
    print(f"Unique coronas with center = {args.center}: {len(coronas)}")

    if args.samples > 0 and coronas:
        print(f"\nSample {args.center}-coronas:")
        for corona in coronas[: args.samples]:
            print(to_compact(corona))
    return 0


def cmd_validate(args) -> int:
    failures = 0
    for text in args.compact:
        try:
            corona = from_compact(text)
        except CompactParseError as e:
            print(f"{text}: PARSE ERROR ({e})")
            failures += 1
            continue

        result = validate(corona, args.allowed)
        if result.ok:
            print(f"{text}: OK")
        else:
            print(f"{text}: INVALID - {result.reason} (where: {result.where})")
            failures += 1

    return 1 if failures else 0


def cmd_generate(args) -> int:
    catalog = build_catalog(args.centers, args.allowed)

    for center, count in catalog["metadata"]["counts"].items():
        print(f"center = {center}: {count} unique coronas")
    print(f"\nTotal coronas: {catalog['metadata']['totalCoronas']}")

    try:
        save_catalog(catalog, args.output)
    except OSError as e:
        logger.error(f"Could not write {args.output}: {e}")
        return 1
    return 0


def cmd_load(args) -> int:
    data = load_catalog(args.path)
    if data is None:
        return 1

    coronas = coronas_from_catalog(data, args.center, source=args.path)
    if coronas is None:
        return 1

    summary = summarize_coronas(coronas)

    print(f"Loaded {summary['count']} coronas from {args.path}")
    print(f"Segment sizes: {summary['size_histogram']}")
    print(f"Mean segments per edge: {summary['mean_segments_per_edge']:.3f}")
    print(f"Max overhang: {summary['max_overhang']}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="corona-catalog",
        description="Enumerate, validate and catalog coronas",
    )
    parser.add_argument(
        "--log-file", type=Path, default=None, help="Also write logs to this file"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log at DEBUG level"
    )
    # Shared by subcommands that take an allowed-size set
    sizes_parent = argparse.ArgumentParser(add_help=False)
    sizes_parent.add_argument(
        "--allowed",
        type=positive_int,
        nargs="+",
        default=list(DEFAULT_ALLOWED_SIZES),
        help="Allowed segment sizes (default: 1 2 3 4)",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    p_enum = sub.add_parser(
        "enumerate",
        parents=[sizes_parent],
        help="Enumerate unique coronas for one center",
    )
    p_enum.add_argument("--center", type=positive_int, required=True)
    p_enum.add_argument(
        "--samples",
        type=int,
        default=DEFAULT_SAMPLE_COUNT,
        help=f"Number of compact samples to print (default: {DEFAULT_SAMPLE_COUNT})",
    )
    p_enum.set_defaults(func=cmd_enumerate)

    p_val = sub.add_parser(
        "validate",
        parents=[sizes_parent],
        help="Validate coronas in compact notation",
    )
    p_val.add_argument("compact", nargs="+")
    p_val.set_defaults(func=cmd_validate)

    p_gen = sub.add_parser(
        "generate", parents=[sizes_parent], help="Build and save a catalog"
    )
    p_gen.add_argument(
        "--centers",
        type=positive_int,
        nargs="+",
        default=list(DEFAULT_CENTER_SIZES),
        help="Center sizes to enumerate (default: 1 2 3 4)",
    )
    p_gen.add_argument(
        "--output",
        type=Path,
        default=Path(DEFAULT_CATALOG_FILE),
        help=f"Catalog file (default: {DEFAULT_CATALOG_FILE})",
    )
    p_gen.set_defaults(func=cmd_generate)

    p_load = sub.add_parser("load", help="Load a catalog and print a summary")
    p_load.add_argument("path", type=Path)
    p_load.add_argument("--center", type=positive_int, default=None)
    p_load.set_defaults(func=cmd_load)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    setup_logger("corona_catalog", args.log_file, level)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
