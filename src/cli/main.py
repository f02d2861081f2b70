"""lvd CLI entry point.
This module converts LVD files to YAML and back.
It maps argparse arguments onto the store helpers.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from cli.convert_command import plan_conversion, run_conversion
from core.config import LvdConfig, parse_endian
from core.constants import SUPPORTED_ENDIANS
from core.errors import LvdError


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="lvd",
        description="Convert LVD files to YAML and YAML back to LVD",
    )
    parser.add_argument("input", help="Input .lvd file, or .yaml/.yml file to convert back")
    parser.add_argument("output", nargs="?", help="Output path; defaults next to the input")
    parser.add_argument(
        "-e",
        "--endian",
        choices=SUPPORTED_ENDIANS,
        help="Byte order of the binary file; overrides LVD_ENDIAN",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the lvd CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    args = build_parser().parse_args(argv)
    try:
        config = LvdConfig.from_env()
        endian = parse_endian(args.endian, "--endian") if args.endian else config.endian
        plan = plan_conversion(args.input, args.output)
        output_path = run_conversion(plan, endian, config.max_element_count)
    except (LvdError, OSError) as error:
        print(f"lvd_error={error}", file=sys.stderr)
        return 1
    print(f"output_path={output_path}")
    return 0
