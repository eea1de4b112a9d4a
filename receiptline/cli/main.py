#!/usr/bin/env python3

import argparse
from collections.abc import Callable, Sequence

from receiptline.runtime.receipt_pipeline import get_ocr_url


def _coerce_exit_code(code: object) -> int:
    if code is None:
        return 0
    if isinstance(code, int):
        return code
    return 1


def _run_legacy_command(command: Callable[[argparse.Namespace], None], args: argparse.Namespace) -> int:
    """
    Normalize command handlers that call sys.exit().

    This keeps process termination centralized in this module's entrypoint.
    """
    try:
        command(args)
    except SystemExit as exc:
        return _coerce_exit_code(exc.code)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Receipt OCR line interpreter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  interpret [lines_file]     Interpret OCR lines from a text file (or stdin)
  scan <image>               OCR a receipt image, then interpret it
  raw-text <image>           OCR a receipt image and print the detected lines

Notes:
  Fields missing from the receipt fall back to the built-in defaults,
  or to the [defaults] table of the TOML file given with --defaults.
""",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    default_ocr_url = get_ocr_url()

    # interpret command
    interpret_parser = subparsers.add_parser("interpret", help="Interpret OCR lines from a text file")
    interpret_parser.add_argument(
        "lines_file", nargs="?", default=None, help="File with one OCR line per line ('-' or omitted for stdin)"
    )
    interpret_parser.add_argument("--defaults", default=None, help="TOML file overriding fallback values")
    interpret_parser.add_argument("--summary", action="store_true", help="Print a readable summary instead of JSON")

    # scan command
    scan_parser = subparsers.add_parser("scan", help="Scan a receipt image")
    scan_parser.add_argument("image", help="Path to receipt image")
    scan_parser.add_argument(
        "--ocr-url", default=default_ocr_url, help=f"OCR service URL (default: {default_ocr_url})"
    )
    scan_parser.add_argument("--defaults", default=None, help="TOML file overriding fallback values")
    scan_parser.add_argument("--summary", action="store_true", help="Print a readable summary instead of JSON")

    # raw-text command
    raw_parser = subparsers.add_parser("raw-text", help="Print OCR lines of a receipt image")
    raw_parser.add_argument("image", help="Path to receipt image")
    raw_parser.add_argument(
        "--ocr-url", default=default_ocr_url, help=f"OCR service URL (default: {default_ocr_url})"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "interpret":
        from receiptline.cli.receipt import cmd_interpret

        return _run_legacy_command(cmd_interpret, args)
    elif args.command == "scan":
        from receiptline.cli.receipt import cmd_scan

        return _run_legacy_command(cmd_scan, args)
    elif args.command == "raw-text":
        from receiptline.cli.receipt import cmd_raw_text

        return _run_legacy_command(cmd_raw_text, args)

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
