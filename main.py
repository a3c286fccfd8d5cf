# main.py
"""
Animated Armoury rebalancer - batch command line.

Usage:
    python main.py weapons.json
    python main.py weapons.json --waccf
    python main.py weapons.json --plugin NewArmoury.esp --plugin Other.esp
    python main.py weapons.json --json > report.json
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from armoury.app_context import create_app_context
from armoury.constants import MAX_WORKERS, MIN_WORKERS
from armoury.loader import load_asset_dump
from armoury.logging_setup import setup_logging


def worker_count(value: str) -> int:
    """argparse type for --workers: an integer from 1 to 32."""
    try:
        workers = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid worker count: {value!r}")
    if not MIN_WORKERS <= workers <= MAX_WORKERS:
        raise argparse.ArgumentTypeError(
            f"worker count must be between {MIN_WORKERS} and {MAX_WORKERS}, got {workers}"
        )
    return workers


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rebalance animated weapons from an exported asset dump"
    )
    parser.add_argument("dump", type=Path, help="JSON export of weapons and keywords")
    waccf = parser.add_mutually_exclusive_group()
    waccf.add_argument(
        "--waccf",
        dest="include_waccf",
        action="store_true",
        default=None,
        help="Use the WACCF damage table (default: from config)",
    )
    waccf.add_argument(
        "--no-waccf",
        dest="include_waccf",
        action="store_false",
        help="Use the standard damage table",
    )
    parser.add_argument(
        "--plugin",
        dest="plugins",
        action="append",
        default=None,
        help="Only patch weapons from this plugin (repeatable, default: from config)",
    )
    parser.add_argument(
        "--all-plugins",
        action="store_true",
        help="Patch weapons from every plugin",
    )
    parser.add_argument(
        "--workers",
        type=worker_count,
        default=None,
        help="Worker threads, 1-32 (default: from config)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Config file (default: ~/.animated_armoury/config.json)",
    )
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    ctx = create_app_context(args.config)
    setup_logging(debug=args.debug or ctx.config.debug_logging)
    logger = logging.getLogger(__name__)

    loaded = load_asset_dump(args.dump)
    if loaded.is_err():
        logger.error(loaded.error)
        return 1
    dump = loaded.unwrap()

    plugins = [] if args.all_plugins else args.plugins
    rebalancer = ctx.create_rebalancer(
        dump.keywords,
        include_waccf=args.include_waccf,
        included_plugins=plugins,
        max_workers=args.workers,
    )
    report = rebalancer.run(dump.weapons)

    if args.json:
        json.dump(report.to_dict(), sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        for line in report.to_summary_lines():
            print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
