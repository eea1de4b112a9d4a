from decimal import Decimal
from pathlib import Path

import pytest

from receiptline.domain.receipt import LineItem
from receiptline.receipt.defaults import DEFAULT_RECEIPT_DEFAULTS, SAMPLE_ITEMS
from receiptline.runtime.defaults_config import load_receipt_defaults, receipt_defaults_from_mapping


def test_missing_path_returns_builtin_defaults(tmp_path: Path) -> None:
    assert load_receipt_defaults(None) is DEFAULT_RECEIPT_DEFAULTS
    assert load_receipt_defaults(tmp_path / "absent.toml") is DEFAULT_RECEIPT_DEFAULTS


def test_builtin_defaults_match_documented_values() -> None:
    assert DEFAULT_RECEIPT_DEFAULTS.merchant_name == "Unknown Store"
    assert DEFAULT_RECEIPT_DEFAULTS.subtotal == Decimal("107.60")
    assert DEFAULT_RECEIPT_DEFAULTS.cash == Decimal("200.00")
    assert DEFAULT_RECEIPT_DEFAULTS.change_amount == Decimal("92.40")
    assert DEFAULT_RECEIPT_DEFAULTS.sample_items == SAMPLE_ITEMS


def test_load_receipt_defaults_overrides_only_given_keys(tmp_path: Path) -> None:
    config_path = tmp_path / "receiptline.toml"
    config_path.write_text(
        """
[defaults]
branch = "Head Office"
cashier_number = 0
subtotal = "0.00"
cash = 12.5

[[defaults.sample_items]]
product = "Unlisted item"
price = "0.00"
""",
        encoding="utf-8",
    )

    defaults = load_receipt_defaults(config_path)

    assert defaults.branch == "Head Office"
    assert defaults.cashier_number == "0"
    assert defaults.subtotal == Decimal("0.00")
    assert defaults.cash == Decimal("12.5")
    assert defaults.manager_name == "Store Manager"
    assert defaults.change_amount == Decimal("92.40")
    assert defaults.sample_items == (LineItem(product="Unlisted item", quantity=1, price=Decimal("0.00")),)


@pytest.mark.parametrize(
    "config",
    [
        {"subtotal": "lots"},
        {"cash": True},
        {"change_amount": "NaN"},
        {"branch": ["Makati"]},
        {"sample_items": []},
        {"sample_items": [{"product": "Tea", "quantity": -1, "price": "1.00"}]},
        {"sample_items": [{"quantity": 1, "price": "1.00"}]},
    ],
)
def test_invalid_values_are_rejected(config: dict) -> None:
    with pytest.raises(ValueError):
        receipt_defaults_from_mapping(config)
