"""CLI wrapper for modality name/bit conversion.

Usage:
    python scripts/modality.py parse audio text
    python scripts/modality.py render 5
    python scripts/modality.py --config configs/display.json render 5

parse prints the bitmask and display string for a list of names.
render prints the names for a bitmask.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from modalities import DisplayConfig, InvalidNameError, ModalitySet, display, from_names


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Convert between modality names and bitmasks."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional DisplayConfig JSON file (default: ' | ' separator, 'none')",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    parse_cmd = sub.add_parser("parse", help="Names to bitmask")
    parse_cmd.add_argument("names", nargs="*", help="Modality names (e.g., audio text)")

    render_cmd = sub.add_parser("render", help="Bitmask to names")
    render_cmd.add_argument("bits", type=int, help="Modality bitmask (e.g., 5)")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = None
    if args.config:
        try:
            config = DisplayConfig.load(args.config)
        except (FileNotFoundError, TypeError, ValueError) as e:
            print(f"[modality] ERROR: bad config {args.config}: {e}")
            return 1

    if args.command == "parse":
        try:
            modalities = from_names(args.names)
        except InvalidNameError as e:
            print(f"[modality] ERROR: {e}")
            return 1
        print(f"[modality] bits={modalities.bits} display={display(modalities, config)}")
        return 0

    try:
        modalities = ModalitySet(args.bits)
    except ValueError as e:
        print(f"[modality] ERROR: {e}")
        return 1
    print(f"[modality] {display(modalities, config)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
