"""
Quick formatter for calculation_output.json to make it easier to skim.

Usage:
    python pretty_example_output.py
    python pretty_example_output.py --input path/to/result.json
"""

from __future__ import annotations

import argparse
from pathlib import Path

from tireload.cli.readable_output import print_readable_output


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Print a readable summary of calculation_output.json"
    )
    parser.add_argument(
        "--input",
        "-i",
        type=Path,
        default=Path("calculation_output.json"),
        help="Path to a calculation JSON file (default: calculation_output.json)",
    )
    args = parser.parse_args()

    print_readable_output(json_path=args.input)


if __name__ == "__main__":
    main()
