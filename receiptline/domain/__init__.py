"""Core domain models for receiptline.

This module provides the data models returned by the interpreter:
- Receipt: the structured record recovered from OCR lines
- LineItem: one purchased product owned by a receipt

Usage:
    from receiptline.domain import LineItem, Receipt
"""

from receiptline.domain.receipt import LineItem, Receipt

__all__ = [
    "LineItem",
    "Receipt",
]
