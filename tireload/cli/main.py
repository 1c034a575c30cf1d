"""
Command-line interface for tire load & I/P calculations.

Usage:
    python -m tireload make-example [--output example_input.json]
    python -m tireload calculate --input example.json [--output results.json] [--readable]
    python -m tireload tires [--data tire_data.json]
    python -m tireload speed-table [--data tire_data.json] [--speed 50]
    python -m tireload export --input example.json --format xlsx|pdf [--output FILE]
    python -m tireload serve [--port 8000]
"""

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from tireload import __version__
from tireload.calculator.positions import LoadCalculator
from tireload.export.formatting import default_filename, fmt_percent
from tireload.models.inputs import CalculationInputs, ReferenceData
from tireload.physics.speed import resolve_speed_row
from tireload.reference.loader import load_reference_data


def _add_data_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--data", "-d",
        type=Path,
        default=None,
        help="Path to reference data JSON (default: data/tire_data.json or bundled data)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="tireload",
        description="Tire Load & I/P Calculator - checks tire load and inflation pressure "
                    "per axle position against ETRTO-style reference tables.",
    )
    parser.add_argument("--version", action="version", version=f"tireload {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # make-example command
    example_parser = subparsers.add_parser(
        "make-example",
        help="Generate an example input JSON file",
    )
    example_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=Path("example_input.json"),
        help="Output path for example file (default: example_input.json)",
    )

    # calculate command
    calculate_parser = subparsers.add_parser(
        "calculate",
        help="Calculate load and inflation pressure per axle position",
    )
    calculate_parser.add_argument(
        "--input", "-i",
        type=Path,
        required=True,
        help="Path to JSON input file with the vehicle configuration",
    )
    calculate_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Path to save JSON output (prints to stdout if not specified)",
    )
    calculate_parser.add_argument(
        "--readable",
        action="store_true",
        help="Print a human-readable summary instead of JSON",
    )
    _add_data_argument(calculate_parser)

    # tires command
    tires_parser = subparsers.add_parser(
        "tires",
        help="List tires in the reference data",
    )
    _add_data_argument(tires_parser)

    # speed-table command
    speed_parser = subparsers.add_parser(
        "speed-table",
        help="Print the speed / load-factor table",
    )
    speed_parser.add_argument(
        "--speed", "-s",
        type=float,
        default=None,
        help="Mark the row that applies to this speed (km/h)",
    )
    _add_data_argument(speed_parser)

    # export command
    export_parser = subparsers.add_parser(
        "export",
        help="Export a calculation as XLSX or PDF",
    )
    export_parser.add_argument(
        "--input", "-i",
        type=Path,
        required=True,
        help="Path to JSON input file with the vehicle configuration",
    )
    export_parser.add_argument(
        "--format", "-f",
        choices=["xlsx", "pdf"],
        default="xlsx",
        help="Export format (default: xlsx)",
    )
    export_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Output file (default: Load_IP_Calc_<tire>_<date>.<format>)",
    )
    _add_data_argument(export_parser)

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start the FastAPI web server",
    )
    serve_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    serve_parser.add_argument(
        "--port", "-p",
        type=int,
        default=8000,
        help="Port to listen on (default: 8000)",
    )
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )

    return parser


def _load_reference(args: argparse.Namespace) -> ReferenceData:
    data_path = getattr(args, "data", None)
    reference = load_reference_data(str(data_path) if data_path else None)
    if not reference.tires:
        raise ValueError("Data not found: reference data contains no tires")
    return reference


def _load_inputs(path: Path) -> CalculationInputs:
    with open(path) as f:
        input_data = json.load(f)
    return CalculationInputs(**input_data)


def cmd_make_example(args: argparse.Namespace) -> int:
    """Generate an example input JSON file."""
    output_json = CalculationInputs.example().model_dump_json(indent=2)

    with open(args.output, "w") as f:
        f.write(output_json)

    print(f"Created example input file: {args.output}")
    print("\nRun the calculation with:")
    print(f"  python -m tireload calculate --input {args.output}")

    return 0


def cmd_calculate(args: argparse.Namespace) -> int:
    """Calculate load and pressure compliance per position."""
    try:
        inputs = _load_inputs(args.input)
        reference = _load_reference(args)

        print(f"\nTire Load & I/P Calculation", file=sys.stderr)
        print(f"Tire: {inputs.tire_size}", file=sys.stderr)
        print(f"Total load: {inputs.total_load_t:g} t | Speed: {inputs.speed_kmh:g} km/h", file=sys.stderr)
        print(f"Positions: {len(inputs.positions)} ({inputs.total_tires} tires)", file=sys.stderr)

        result = LoadCalculator(reference, inputs).generate_result()

        if args.readable:
            from tireload.cli.readable_output import print_result
            print_result(result.model_dump(mode="json"))
        else:
            output_json = result.model_dump_json(indent=2)
            if args.output:
                with open(args.output, "w") as f:
                    f.write(output_json)
                print(f"\nResults saved to {args.output}", file=sys.stderr)
            else:
                print(output_json)

        # Print summary to stderr
        print(f"\nSummary: {len(result.positions)} positions", file=sys.stderr)
        print(f"  Result load: {result.overall_result_load.value}", file=sys.stderr)
        print(f"  Result I/P: {result.overall_result_ip.value}", file=sys.stderr)

        if result.warnings:
            print("\nWarnings:", file=sys.stderr)
            for w in result.warnings:
                print(f"  - {w}", file=sys.stderr)

        return 0

    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input}: {e}", file=sys.stderr)
        return 1
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_tires(args: argparse.Namespace) -> int:
    """List tires from the reference data."""
    try:
        reference = _load_reference(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"{'Tire size / Pattern':<28} {'Load Index':>11} {'STD I/P':>9} {'Symbol':>7}")
    for tire in reference.sorted_tires():
        print(
            f"{tire.size:<28} {tire.load_index:>8.0f} Kg {tire.std_pressure_psi:>5.0f} Psi "
            f"{tire.speed_symbol.value:>7}"
        )
    print(f"\n{len(reference.tires)} tires", file=sys.stderr)
    return 0


def cmd_speed_table(args: argparse.Namespace) -> int:
    """Print the speed / load-factor table."""
    try:
        reference = _load_reference(args)
        active = (
            resolve_speed_row(reference.speed_table, args.speed)
            if args.speed is not None
            else None
        )
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    header = ["Speed"] + list("FGJKLM") + ["Psi"]
    print("  " + "".join(f"{h:>7}" for h in header))
    for row in sorted(reference.speed_table, key=lambda r: r.speed):
        marker = "> " if active is not None and row.speed == active.speed else "  "
        cells = [f"{row.speed:g}"] + [fmt_percent(v) for v in row.factors.values()] + [f"{row.psi:g}"]
        print(marker + "".join(f"{c:>7}" for c in cells))
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    """Export a calculation to XLSX or PDF."""
    try:
        inputs = _load_inputs(args.input)
        reference = _load_reference(args)
        result = LoadCalculator(reference, inputs).generate_result()

        output = args.output or Path(default_filename(result.tire.size, args.format))

        if args.format == "pdf":
            from tireload.export.pdf import export_to_pdf
            export_to_pdf(result, reference.speed_table, output)
        else:
            from tireload.export.excel import export_to_excel
            export_to_excel(result, reference.speed_table, output)

        print(f"Exported {args.format.upper()}: {output}", file=sys.stderr)
        return 0

    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input}: {e}", file=sys.stderr)
        return 1
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the FastAPI web server."""
    try:
        import uvicorn

        print(f"\nStarting Tire Load & I/P Calculator API", file=sys.stderr)
        print(f"API: http://{args.host}:{args.port}/", file=sys.stderr)
        print(f"Docs: http://{args.host}:{args.port}/docs", file=sys.stderr)
        print("\nPress Ctrl+C to stop\n", file=sys.stderr)

        uvicorn.run(
            "tireload.api.server:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
        )
        return 0

    except ImportError as e:
        print(f"Error: Missing dependency: {e}", file=sys.stderr)
        print("Install with: pip install uvicorn fastapi", file=sys.stderr)
        return 1


def cli(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "make-example": cmd_make_example,
        "calculate": cmd_calculate,
        "tires": cmd_tires,
        "speed-table": cmd_speed_table,
        "export": cmd_export,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


def main():
    """Console script entrypoint wrapper."""
    return cli()


if __name__ == "__main__":
    sys.exit(cli())
