"""
Command-line interface for structural-shapes.

Usage:
  structural-shapes info <input_file>
  structural-shapes run <input_file> [-o <output_file>] [--quiet] [--verbose]
  structural-shapes --version

Examples:
  # Print the properties of a built-up section
  structural-shapes info plated_beam.json

  # Write them to a JSON results file
  structural-shapes run plated_beam.json -o results.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict

from structural_shapes import __version__
from structural_shapes.errors import StructuralShapesError
from structural_shapes.io.json_io import load_json_input, save_json_output


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="structural-shapes",
        description="Closed-form cross-section properties for structural shapes",
    )
    parser.add_argument("--version", action="version", version=f"structural-shapes {__version__}")
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command")

    # --- info ---
    info_parser = subparsers.add_parser("info", parents=[common], help="Print section properties")
    info_parser.add_argument("input_file", help="JSON section description")

    # --- run ---
    run_parser = subparsers.add_parser("run", parents=[common], help="Compute properties and write a JSON result")
    run_parser.add_argument("input_file", help="JSON section description")
    run_parser.add_argument("-o", "--output", help="Output JSON file", default=None)
    run_parser.add_argument("--quiet", "-q", action="store_true", help="Suppress progress output")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    try:
        if args.command == "info":
            return _cmd_info(args)
        if args.command == "run":
            return _cmd_run(args)
    except (StructuralShapesError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return 0


def _load_input(filepath: str) -> Dict[str, Any]:
    p = Path(filepath)
    if not p.exists():
        raise ValueError(f"file not found: {filepath}")
    try:
        return load_json_input(p)
    except json.JSONDecodeError as exc:
        raise ValueError(f"{filepath} is not valid JSON: {exc}") from exc


def _cmd_info(args) -> int:
    """Print section properties."""
    config = _load_input(args.input_file)
    section = config["section"]
    units = config["units"]
    props = section.properties()

    print(f"Input file: {args.input_file}")
    print(f"Units: {units}")
    print()
    print("Section Properties:")
    print(f"  Members:          {len(section)}")
    print(f"  Area:             {props.area:.4g} {units}^2")
    print(f"  Centroid x:       {props.centroid_x:.4g} {units}")
    print(f"  Centroid y:       {props.centroid_y:.4g} {units}")
    print(f"  Ix:               {props.moi_x:.4e} {units}^4")
    print(f"  Iy:               {props.moi_y:.4e} {units}^4")
    print(f"  J (polar):        {props.polar_moi:.4e} {units}^4")
    return 0


def _cmd_run(args) -> int:
    """Compute properties and write them to a JSON file."""
    config = _load_input(args.input_file)
    section = config["section"]

    output_file = args.output
    if output_file is None:
        # Default: input stem + _results.json
        output_file = Path(args.input_file).stem + "_results.json"

    if not args.quiet:
        print(f"Computing properties of {len(section)} member(s)...", file=sys.stderr)

    save_json_output(section, output_file, input_file=args.input_file, units=config["units"])

    if not args.quiet:
        print(f"  Results written to: {output_file}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
