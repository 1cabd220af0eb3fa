"""
Command-line interface for CPA-005 conversion.

Usage:
    python -m cpa005.cli.convert_cli convert --type PDS --input <file> [<file> ...] --output-dir <dir>
"""

import argparse
import sys
from pathlib import Path

from cpa005.batch.pipeline import ConversionPipeline
from cpa005.batch.readers import FileReader
from cpa005.batch.writers import OutputWriter
from cpa005.core.config import ConfigError, load_config
from cpa005.core.models import RecordType
from cpa005.observability.logger import get_logger, setup_logger

logger = get_logger(__name__)

# PDS: Payment Distribution Service (deposits); PAD: Pre-Authorized Debit
CONVERSION_TYPES = {
    "PDS": RecordType.CREDIT,
    "PAD": RecordType.DEBIT,
}


def convert_command(args) -> int:
    """
    Convert every input file and write the successful ones.

    Args:
        args: Parsed command-line arguments

    Returns:
        Process exit code: 0 when every file converted, 1 otherwise
    """
    try:
        config = load_config(args.config)
    except (ConfigError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    setup_logger(level=config.log_level, format_type=config.log_format)

    try:
        writer = OutputWriter(args.output_dir, config.output_extension)
    except NotADirectoryError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    record_type = CONVERSION_TYPES[args.type]
    pipeline = ConversionPipeline(config)
    reader = FileReader()
    failures = 0

    for input_path in args.input:
        try:
            text = reader.read(input_path)
        except (OSError, UnicodeDecodeError) as e:
            print(f"{input_path}: error: cannot read input file: {e}", file=sys.stderr)
            failures += 1
            continue

        result = pipeline.convert(text, record_type)
        if not result.ok:
            for message in result.errors:
                print(f"{input_path}: {message}", file=sys.stderr)
            failures += 1
            continue

        try:
            target = writer.write(input_path, result.output)
        except OSError as e:
            print(f"{input_path}: error: cannot write output file: {e}", file=sys.stderr)
            failures += 1
            continue

        print(f"{input_path} -> {target} ({result.payment_count} payments)")

    logger.info(
        "Conversion run finished",
        extra={"files": len(args.input), "failures": failures, "conversion_type": args.type},
    )
    return 1 if failures else 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Convert payment lists to CPA-005 files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Direct deposit (credit) file
  python -m cpa005.cli.convert_cli convert --type PDS --input payroll.csv --output-dir out/

  # Pre-authorized debit file with custom settings
  python -m cpa005.cli.convert_cli convert --type PAD --input dues.csv --output-dir out/ \\
      --config config/converter.yaml
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    convert_parser = subparsers.add_parser("convert", help="Convert payment lists")
    convert_parser.add_argument(
        "--type",
        required=True,
        choices=sorted(CONVERSION_TYPES),
        type=str.upper,
        help="PDS for direct deposits (credits), PAD for pre-authorized debits",
    )
    convert_parser.add_argument(
        "--input",
        required=True,
        nargs="+",
        type=Path,
        help="Payment list file(s) to convert",
    )
    convert_parser.add_argument(
        "--output-dir",
        required=True,
        type=Path,
        help="Directory that receives the converted files",
    )
    convert_parser.add_argument(
        "--config",
        default=None,
        help="Path to converter YAML configuration",
    )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "convert":
        return convert_command(args)

    return 1


if __name__ == "__main__":
    sys.exit(main())
