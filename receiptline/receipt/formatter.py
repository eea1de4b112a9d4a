"""Format Receipt data for output."""

from decimal import Decimal
from typing import Any

from receiptline.domain.receipt import LineItem, Receipt

# Amounts with a larger exponent render in scientific notation
PLAIN_AMOUNT_EXPONENT_LIMIT = 18


def _format_amount(amount: Decimal) -> str:
    """Render an amount exactly as recovered, keeping its scale (e.g. "9.20")."""
    exponent = amount.as_tuple().exponent
    if not isinstance(exponent, int) or abs(exponent) > PLAIN_AMOUNT_EXPONENT_LIMIT:
        return str(amount)
    return format(amount, "f")


def _cashier_number_as_int(cashier_number: str) -> int:
    """Cashier numbers are reported as integers; anything non-numeric reports as 0."""
    if cashier_number.isascii() and cashier_number.isdigit():
        return int(cashier_number)
    return 0


def format_receipt_payload(receipt: Receipt) -> dict[str, Any]:
    """
    Build the store/items/transaction payload for a receipt.

    Amounts are strings so no precision is lost when the payload is dumped
    as JSON.
    """
    return {
        "store": {
            "name": receipt.merchant_name,
            "branch": receipt.branch,
            "manager": receipt.manager_name,
            "cashier_number": _cashier_number_as_int(receipt.cashier_number),
        },
        "items": [
            {
                "product": item.product,
                "quantity": item.quantity,
                "price": _format_amount(item.price),
            }
            for item in receipt.items
        ],
        "transaction": {
            "subtotal": _format_amount(receipt.subtotal),
            "cash": _format_amount(receipt.cash),
            "change": _format_amount(receipt.change_amount),
        },
    }


def _format_items_aligned(items: tuple[LineItem, ...], indent: str = "  ") -> list[str]:
    """
    Format item lines with aligned quantities and prices.

    Args:
        items: Receipt items in order
        indent: Indentation prefix for each line

    Returns:
        List of formatted item lines
    """
    if not items:
        return []

    rows = [
        (f"{i}. {item.product}", f"x{item.quantity}", f"${_format_amount(item.price)}")
        for i, item in enumerate(items, 1)
    ]
    max_product_len = max(len(product) for product, _, _ in rows)
    max_qty_len = max(len(qty) for _, qty, _ in rows)
    max_price_len = max(len(price) for _, _, price in rows)

    return [
        f"{indent}{product.ljust(max_product_len)}  {qty.rjust(max_qty_len)}  {price.rjust(max_price_len)}"
        for product, qty, price in rows
    ]


def format_receipt_summary(receipt: Receipt) -> str:
    """Format a receipt as a human-readable block for terminal review."""
    lines = ["=" * 60, "INTERPRETED RECEIPT", "=" * 60]
    lines.append(f"Merchant: {receipt.merchant_name}")
    lines.append(f"Branch: {receipt.branch}")
    lines.append(f"Manager: {receipt.manager_name}")
    lines.append(f"Cashier: #{receipt.cashier_number}")
    lines.append(f"Extracted: {receipt.receipt_date.isoformat(timespec='seconds')}")
    lines.append("")
    lines.append(f"Items ({len(receipt.items)}):")
    lines.extend(_format_items_aligned(receipt.items))
    lines.append("")
    lines.append(f"Subtotal: ${_format_amount(receipt.subtotal)}")
    lines.append(f"Cash: ${_format_amount(receipt.cash)}")
    lines.append(f"Change: ${_format_amount(receipt.change_amount)}")
    lines.append("=" * 60)
    return "\n".join(lines)
