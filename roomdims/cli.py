"""
Command Line Interface Module

Parses command-line arguments for the room dimensions pipeline.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the pipeline."""
    parser = argparse.ArgumentParser(
        prog="roomdims",
        description="Reconstruct room polygons and compute length/width pairs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m roomdims.cli -i data/simple.json
  python -m roomdims.cli -i data/simple.json data/t_shape.json -o report.json
  python -m roomdims.cli -i data/*.json --verbose
        """
    )

    # Required arguments
    parser.add_argument(
        "-i", "--input",
        required=True,
        nargs="+",
        help="Room JSON file path(s)"
    )

    # Optional arguments
    parser.add_argument(
        "-o", "--output",
        help="Output JSON report path (default: stdout)"
    )

    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    return parser


def validate_args(args: argparse.Namespace) -> Tuple[bool, str]:
    """
    Validate parsed arguments.

    Args:
        args: Parsed arguments

    Returns:
        Tuple of (is_valid, error_message)
    """
    for input_file in args.input:
        input_path = Path(input_file)
        if not input_path.exists():
            return False, f"Input file not found: {input_file}"

        if input_path.suffix.lower() != ".json":
            return False, f"Input file must be JSON: {input_file}"

    if args.output is not None and Path(args.output).is_dir():
        return False, f"Output path is a directory: {args.output}"

    if args.indent < 0:
        return False, f"Indent must be non-negative: {args.indent}"

    return True, ""


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse and validate command-line arguments.

    Args:
        args: Optional list of arguments (uses sys.argv if None)

    Returns:
        Parsed and validated arguments
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    is_valid, error_msg = validate_args(parsed)
    if not is_valid:
        parser.error(error_msg)

    return parsed


def main(argv: Optional[List[str]] = None):
    """Main entry point for CLI."""
    args = parse_args(argv)

    from .pipeline import run_pipeline

    try:
        run_pipeline(args)
    except KeyboardInterrupt:
        print("\nProcessing cancelled by user", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"\nError: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
