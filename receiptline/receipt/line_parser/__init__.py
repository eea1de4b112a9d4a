"""Composable OCR line interpretation components."""

from .common import _scan_labeled_value
from .fields_parser import (
    _extract_branch,
    _extract_cash,
    _extract_cashier_number,
    _extract_change_amount,
    _extract_manager_name,
    _extract_merchant_name,
    _extract_subtotal,
)
from .items_parser import _extract_items

__all__ = [
    "_extract_branch",
    "_extract_cash",
    "_extract_cashier_number",
    "_extract_change_amount",
    "_extract_items",
    "_extract_manager_name",
    "_extract_merchant_name",
    "_extract_subtotal",
    "_scan_labeled_value",
]
