"""Runtime infrastructure for receiptline.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Receipt fallback loading via load_receipt_defaults()
- The OCR boundary via call_ocr_service() and its tagged errors

Usage:
    from receiptline.runtime import get_logger, load_receipt_defaults

    logger = get_logger(__name__)
    defaults = load_receipt_defaults("receiptline.toml")
"""

from receiptline.runtime.defaults_config import load_receipt_defaults, receipt_defaults_from_mapping
from receiptline.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    set_log_level,
)
from receiptline.runtime.receipt_pipeline import (
    OCRServiceUnavailable,
    ReceiptBoundaryError,
    ReceiptFileUnreadable,
    call_ocr_service,
    get_ocr_url,
)

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Defaults
    "load_receipt_defaults",
    "receipt_defaults_from_mapping",
    # OCR boundary
    "call_ocr_service",
    "get_ocr_url",
    "ReceiptBoundaryError",
    "ReceiptFileUnreadable",
    "OCRServiceUnavailable",
]
