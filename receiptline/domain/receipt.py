"""Data models for interpreted receipts."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class LineItem:
    """A single purchased product on a receipt."""

    product: str
    quantity: int
    price: Decimal


@dataclass(frozen=True)
class Receipt:
    """Structured receipt recovered from OCR lines.

    Every field is always populated; values the lines did not provide carry
    the fallback from the defaults table used at interpretation time.
    """

    merchant_name: str
    branch: str
    manager_name: str
    cashier_number: str
    subtotal: Decimal
    cash: Decimal
    change_amount: Decimal
    receipt_date: datetime
    items: tuple[LineItem, ...] = field(default_factory=tuple)
