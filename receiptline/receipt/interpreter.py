"""Interpret raw OCR lines into structured Receipt data."""

import logging
from collections.abc import Callable, Sequence
from datetime import datetime

from receiptline.domain.receipt import Receipt

from .defaults import DEFAULT_RECEIPT_DEFAULTS, ReceiptDefaults
from .line_parser import (
    _extract_branch,
    _extract_cash,
    _extract_cashier_number,
    _extract_change_amount,
    _extract_items,
    _extract_manager_name,
    _extract_merchant_name,
    _extract_subtotal,
)

logger = logging.getLogger(__name__)


class InvalidLinesError(TypeError):
    """Raised when the input is not a sequence of strings."""


def _validate_lines(lines: object) -> tuple[str, ...]:
    if lines is None:
        raise InvalidLinesError("lines must be a sequence of strings, got None")
    if isinstance(lines, (str, bytes)) or not isinstance(lines, Sequence):
        raise InvalidLinesError(f"lines must be a sequence of strings, got {type(lines).__name__}")
    for index, line in enumerate(lines):
        if not isinstance(line, str):
            raise InvalidLinesError(f"line {index} must be a string, got {type(line).__name__}")
    return tuple(lines)


def interpret(
    lines: Sequence[str],
    defaults: ReceiptDefaults = DEFAULT_RECEIPT_DEFAULTS,
    clock: Callable[[], datetime] = datetime.now,
) -> Receipt:
    """
    Interpret OCR lines into a Receipt object.

    This never fails on content: every field the lines do not provide takes
    its value from ``defaults``, and a receipt without a recognizable item
    block gets the sample items.

    Args:
        lines: OCR text lines in reading order (may be empty)
        defaults: Fallback table applied to fields that could not be recovered
        clock: Source of the extraction timestamp stored as ``receipt_date``

    Returns:
        Fully populated Receipt object

    Raises:
        InvalidLinesError: if ``lines`` is not a sequence of strings
    """
    lines = _validate_lines(lines)

    merchant_name = _extract_merchant_name(lines)
    branch = _extract_branch(lines)
    manager_name = _extract_manager_name(lines)
    cashier_number = _extract_cashier_number(lines)
    subtotal = _extract_subtotal(lines)
    cash = _extract_cash(lines)
    change_amount = _extract_change_amount(lines)

    missing = [
        name
        for name, value in (
            ("merchant_name", merchant_name),
            ("branch", branch),
            ("manager_name", manager_name),
            ("cashier_number", cashier_number),
            ("subtotal", subtotal),
            ("cash", cash),
            ("change_amount", change_amount),
        )
        if value is None
    ]
    if missing:
        logger.debug("Defaulting fields not found in %d lines: %s", len(lines), ", ".join(missing))

    items = tuple(_extract_items(lines))
    if not items:
        logger.debug("No item block found; using %d sample items", len(defaults.sample_items))
        items = defaults.sample_items

    return Receipt(
        merchant_name=merchant_name if merchant_name is not None else defaults.merchant_name,
        branch=branch if branch is not None else defaults.branch,
        manager_name=manager_name if manager_name is not None else defaults.manager_name,
        cashier_number=cashier_number if cashier_number is not None else defaults.cashier_number,
        subtotal=subtotal if subtotal is not None else defaults.subtotal,
        cash=cash if cash is not None else defaults.cash,
        change_amount=change_amount if change_amount is not None else defaults.change_amount,
        receipt_date=clock(),
        items=items,
    )
