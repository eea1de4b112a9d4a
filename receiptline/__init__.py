"""receiptline: recover structured receipts from OCR text lines."""

__version__ = "0.1.0"
