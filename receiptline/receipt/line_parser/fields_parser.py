"""Merchant/staff/summary amount extraction helpers.

Each extractor reads the lines once and returns None when its field could not
be localized or parsed; the interpreter decides what to fall back to.
"""

from collections.abc import Sequence
from decimal import Decimal

from .common import (
    DATE_PATTERN,
    MERCHANT_FALLBACK_WINDOW,
    MERCHANT_KEYWORDS,
    SUBTOTAL_LABELS,
    TIME_PATTERN,
    _contains_any,
    _equals_token,
    _parse_amount,
    _parse_text,
    _scan_labeled_value,
)


def _extract_merchant_name(lines: Sequence[str]) -> str | None:
    """
    Extract merchant name using multiple strategies.

    Strategy order:
    1. First line mentioning a business designation (MART, PLAZA, LTD, ...)
    2. First meaningful line among the top few lines
    3. The very first line, untouched
    """
    # Strategy 1: keyword match anywhere on the receipt
    for line in lines:
        upper_line = line.upper()
        if any(keyword in upper_line for keyword in MERCHANT_KEYWORDS):
            return line.strip()

    # Strategy 2: skip dates, times, document titles and very short noise
    for line in lines[:MERCHANT_FALLBACK_WINDOW]:
        candidate = line.strip()
        if len(candidate) <= 2:
            continue
        if DATE_PATTERN.search(candidate) or TIME_PATTERN.search(candidate):
            continue
        lowered = candidate.lower()
        if "receipt" in lowered or "invoice" in lowered:
            continue
        return candidate

    # Strategy 3: whatever came first
    if lines:
        return lines[0]
    return None


def _extract_branch(lines: Sequence[str]) -> str | None:
    """Extract the branch/location line."""
    matches = _contains_any("city", "branch", "location", exclude=("index",))
    for line in lines:
        if matches(line):
            return line.strip()
    return None


def _extract_manager_name(lines: Sequence[str]) -> str | None:
    """Extract the manager name printed below a "Manager" label."""
    return _scan_labeled_value(lines, _contains_any("manager"), _parse_text, retry=False)


def _is_cashier_tag(text: str) -> bool:
    return text.startswith("#")


def _parse_cashier_number(text: str) -> str | None:
    return _parse_text(text.replace("#", ""))


def _extract_cashier_number(lines: Sequence[str]) -> str | None:
    """Extract the cashier number printed as ``#<n>`` below a "Cashier" label."""
    return _scan_labeled_value(
        lines, _contains_any("cashier"), _parse_cashier_number, accepts=_is_cashier_tag, retry=False
    )


def _extract_subtotal(lines: Sequence[str]) -> Decimal | None:
    """Extract subtotal amount from the line following a (sub)total label."""
    return _scan_labeled_value(lines, _contains_any(*SUBTOTAL_LABELS), _parse_amount)


def _extract_cash(lines: Sequence[str]) -> Decimal | None:
    """Extract cash tendered.

    The label must be exactly "cash"; lines like "Cashless" or "Cash Card"
    are not payment labels.
    """
    return _scan_labeled_value(lines, _equals_token("cash"), _parse_amount)


def _extract_change_amount(lines: Sequence[str]) -> Decimal | None:
    """Extract change given back, labelled by an exact "change" line."""
    return _scan_labeled_value(lines, _equals_token("change"), _parse_amount)
