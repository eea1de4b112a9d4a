"""Receipt line interpretation.

Usage:
    from receiptline.receipt import interpret
    receipt = interpret(["Robinson Malls", "Caloocan City", ...])
"""

from receiptline.receipt.defaults import DEFAULT_RECEIPT_DEFAULTS, SAMPLE_ITEMS, ReceiptDefaults
from receiptline.receipt.interpreter import InvalidLinesError, interpret

__all__ = [
    "DEFAULT_RECEIPT_DEFAULTS",
    "SAMPLE_ITEMS",
    "InvalidLinesError",
    "ReceiptDefaults",
    "interpret",
]
