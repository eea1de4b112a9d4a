"""Header-driven receipt item extraction.

Items are expected in a block introduced by a "Name" column header, one
field per line::

    Name
    Qty
    Price
    Ginger Tea     <- product
    1              <- quantity
    9.20           <- price
    Sub Total      <- end of block
"""

from collections.abc import Sequence
from typing import Literal

from receiptline.domain.receipt import LineItem

from .common import (
    ITEM_BLOCK_END_LABELS,
    ITEM_COLUMN_TOKENS,
    ITEM_HEADER_TOKEN,
    _contains_any,
    _parse_amount,
    _parse_quantity,
)

ScanState = Literal["seeking_header", "in_items"]

ITEM_WINDOW_SIZE = 3

_is_block_end = _contains_any(*ITEM_BLOCK_END_LABELS)


def _read_item_window(lines: Sequence[str], start: int) -> LineItem | None:
    """Read a product/quantity/price window starting at ``start``, or None if it is not one."""
    if start + ITEM_WINDOW_SIZE > len(lines):
        return None
    quantity = _parse_quantity(lines[start + 1])
    if quantity is None:
        return None
    price = _parse_amount(lines[start + 2])
    if price is None or price < 0:
        return None
    return LineItem(product=lines[start], quantity=quantity, price=price)


def _extract_items(lines: Sequence[str]) -> list[LineItem]:
    """
    Extract line items from the block following the "Name" header.

    Before the header every line is ignored, including totals. Inside the
    block a totals line ends the scan without being consumed, stray "Name"/
    "Qty"/"Price" header tokens are skipped, and each successfully parsed window
    consumes three lines. A line that does not start a valid window is
    treated as noise and skipped on its own.

    Returns:
        Items in receipt order; empty if no header was found
    """
    items: list[LineItem] = []
    state: ScanState = "seeking_header"
    i = 0

    while i < len(lines):
        line = lines[i]
        token = line.strip().lower()

        if state == "seeking_header":
            if token == ITEM_HEADER_TOKEN:
                state = "in_items"
            i += 1
            continue

        if _is_block_end(line):
            break

        if token == ITEM_HEADER_TOKEN or token in ITEM_COLUMN_TOKENS:
            i += 1
            continue

        item = _read_item_window(lines, i)
        if item is None:
            i += 1
            continue

        items.append(item)
        i += ITEM_WINDOW_SIZE

    return items
