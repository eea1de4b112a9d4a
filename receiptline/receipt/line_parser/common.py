"""Shared constants and helpers for OCR line interpretation."""

import re
from collections.abc import Callable, Sequence
from decimal import Decimal, InvalidOperation
from typing import TypeVar

T = TypeVar("T")

# Business designations that mark a line as the merchant name
MERCHANT_KEYWORDS = (
    "HYPERMARKET",
    "STORE",
    "MART",
    "SUPERMARKET",
    "MARKET",
    "SHOP",
    "OUTLET",
    "CENTER",
    "CENTRE",
    "PLAZA",
    "MALL",
    "GROCERY",
    "FOOD",
    "RETAIL",
    "CHAIN",
    "CO",
    "LTD",
    "INC",
    "CORP",
    "COMPANY",
    "ENTERPRISE",
    "TRADING",
    "SDN BHD",
)

# Only the first few lines are considered for a positional merchant name
MERCHANT_FALLBACK_WINDOW = 5

DATE_PATTERN = re.compile(r"\d{2}/\d{2}/\d{4}")
TIME_PATTERN = re.compile(r"\d{2}:\d{2}")
INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")

# Largest exponent accepted in an amount; "1e999999999" is rejected
AMOUNT_EXPONENT_LIMIT = 18

SUBTOTAL_LABELS = ("sub total", "subtotal", "total")
ITEM_BLOCK_END_LABELS = ("sub total", "total")
ITEM_HEADER_TOKEN = "name"
ITEM_COLUMN_TOKENS = frozenset({"qty", "price"})


def _contains_any(*needles: str, exclude: Sequence[str] = ()) -> Callable[[str], bool]:
    """Build a case-insensitive substring predicate for label lines."""

    def matches(line: str) -> bool:
        lowered = line.lower()
        if any(word in lowered for word in exclude):
            return False
        return any(needle in lowered for needle in needles)

    return matches


def _equals_token(token: str) -> Callable[[str], bool]:
    """Build a predicate matching a line that is exactly ``token`` (ignoring case and padding)."""

    def matches(line: str) -> bool:
        return line.strip().lower() == token

    return matches


def _parse_amount(text: str) -> Decimal | None:
    """Parse a currency amount, dropping any dollar signs. Returns None if unparseable."""
    cleaned = text.replace("$", "").strip()
    if not cleaned:
        return None
    try:
        amount = Decimal(cleaned)
    except (InvalidOperation, ValueError):
        return None
    if not amount.is_finite():
        return None
    if abs(amount.as_tuple().exponent) > AMOUNT_EXPONENT_LIMIT:
        return None
    return amount


def _parse_quantity(text: str) -> int | None:
    """Parse a whole, non-negative item count."""
    cleaned = text.strip()
    if not INTEGER_PATTERN.match(cleaned):
        return None
    try:
        quantity = int(cleaned)
    except ValueError:
        # Digit strings beyond the interpreter's int conversion limit
        return None
    if quantity < 0:
        return None
    return quantity


def _parse_text(text: str) -> str | None:
    return text.strip() or None


def _scan_labeled_value(
    lines: Sequence[str],
    matches: Callable[[str], bool],
    parse: Callable[[str], T | None],
    offset: int = 1,
    *,
    accepts: Callable[[str], bool] | None = None,
    retry: bool = True,
) -> T | None:
    """
    Find the first label line whose neighbouring value line parses.

    Every line satisfying ``matches`` is a candidate; the line ``offset``
    positions after it is the value line. Candidates whose value line is out
    of range, or rejected by ``accepts``, are skipped.

    Args:
        lines: OCR lines in order
        matches: Label line predicate
        parse: Value parser returning None on failure
        offset: Distance from label line to value line
        accepts: Optional value line predicate that selects the anchor
        retry: Keep scanning after a value fails to parse. When False the
            first anchor decides the result.

    Returns:
        The parsed value, or None if no candidate qualified
    """
    for i, line in enumerate(lines):
        if not matches(line):
            continue
        value_index = i + offset
        if value_index >= len(lines):
            continue
        value_line = lines[value_index]
        if accepts is not None and not accepts(value_line):
            continue
        value = parse(value_line)
        if value is not None or not retry:
            return value
    return None
