"""Receipt command handlers used by the unified CLI."""

import argparse
import json
import sys
from pathlib import Path

from receiptline.domain.receipt import Receipt
from receiptline.receipt.defaults import ReceiptDefaults
from receiptline.receipt.formatter import format_receipt_payload, format_receipt_summary
from receiptline.runtime import get_logger, load_receipt_defaults

logger = get_logger(__name__)


def _load_defaults(args: argparse.Namespace) -> ReceiptDefaults:
    try:
        return load_receipt_defaults(getattr(args, "defaults", None))
    except (OSError, ValueError) as e:
        # ValueError also covers tomllib.TOMLDecodeError
        logger.error("Invalid defaults file: %s", e)
        print(f"Error: invalid defaults file: {e}")
        sys.exit(1)


def _print_receipt(receipt: Receipt, summary: bool) -> None:
    if summary:
        print(format_receipt_summary(receipt))
    else:
        print(json.dumps(format_receipt_payload(receipt), indent=2))


def _read_lines(source: str | None) -> list[str]:
    if source is None or source == "-":
        return sys.stdin.read().splitlines()
    return Path(source).read_text(encoding="utf-8").splitlines()


def cmd_interpret(args: argparse.Namespace) -> None:
    """Interpret OCR lines from a text file (one line per OCR line) or stdin."""
    from receiptline.receipt.interpreter import interpret

    defaults = _load_defaults(args)
    try:
        lines = _read_lines(args.lines_file)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("[FILE_UNREADABLE] %s", e)
        print(f"Error [FILE_UNREADABLE]: failed to read {args.lines_file}: {e}")
        sys.exit(1)

    receipt = interpret(lines, defaults=defaults)
    _print_receipt(receipt, args.summary)


def cmd_scan(args: argparse.Namespace) -> None:
    """Send a receipt image to the OCR service and interpret the detected lines."""
    from receiptline.application.receipts.scan import ReceiptScanRequest, run_receipt_scan

    defaults = _load_defaults(args)
    result = run_receipt_scan(
        ReceiptScanRequest(
            image_path=Path(args.image),
            ocr_url=args.ocr_url,
            defaults=defaults,
        )
    )

    if result.status == "file_not_found":
        print(f"Error: {result.error}")
        sys.exit(1)

    if result.status == "file_unreadable":
        print(f"Error [{result.error_code}]: {result.error}")
        sys.exit(1)

    if result.status == "ocr_unavailable":
        print(f"Error [{result.error_code}]: {result.error}")
        print("Make sure the OCR service is running before scanning receipts.")
        sys.exit(1)

    if result.receipt is None:
        print("Scan failed: missing receipt output.")
        sys.exit(1)

    _print_receipt(result.receipt, args.summary)


def cmd_raw_text(args: argparse.Namespace) -> None:
    """Print the OCR lines of a receipt image without interpreting them."""
    from receiptline.application.receipts.scan import ReceiptScanRequest, run_receipt_scan

    result = run_receipt_scan(
        ReceiptScanRequest(
            image_path=Path(args.image),
            ocr_url=args.ocr_url,
            interpret_lines=False,
        )
    )

    if result.failed:
        prefix = f"Error [{result.error_code}]" if result.error_code else "Error"
        print(f"{prefix}: {result.error}")
        sys.exit(1)

    print(json.dumps({"rawText": list(result.lines)}, indent=2))
