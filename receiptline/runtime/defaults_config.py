"""Runtime loader for receipt fallback values."""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from receiptline.domain.receipt import LineItem
from receiptline.receipt.defaults import DEFAULT_RECEIPT_DEFAULTS, ReceiptDefaults

_TEXT_FIELDS = ("merchant_name", "branch", "manager_name", "cashier_number")
_AMOUNT_FIELDS = ("subtotal", "cash", "change_amount")


def _to_decimal(key: str, value: Any) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ValueError(f"defaults.{key} must be an amount, got {value!r}")
    try:
        # str() first so TOML floats keep the digits written in the file
        amount = Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"defaults.{key} is not a valid amount: {value!r}") from e
    if not amount.is_finite():
        raise ValueError(f"defaults.{key} is not a valid amount: {value!r}")
    return amount


def _to_sample_item(index: int, raw: Any) -> LineItem:
    key = f"sample_items[{index}]"
    if not isinstance(raw, dict):
        raise ValueError(f"defaults.{key} must be a table")
    product = raw.get("product")
    quantity = raw.get("quantity", 1)
    if not isinstance(product, str) or not product:
        raise ValueError(f"defaults.{key}.product must be a non-empty string")
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 0:
        raise ValueError(f"defaults.{key}.quantity must be a non-negative integer")
    return LineItem(product=product, quantity=quantity, price=_to_decimal(f"{key}.price", raw.get("price")))


def receipt_defaults_from_mapping(config: dict[str, Any]) -> ReceiptDefaults:
    """
    Build a ReceiptDefaults from a parsed ``[defaults]`` table.

    Keys that are absent keep their built-in value.

    Raises:
        ValueError: if a key holds a value of the wrong kind
    """
    overrides: dict[str, Any] = {}
    for key in _TEXT_FIELDS:
        if key in config:
            value = config[key]
            if isinstance(value, int) and not isinstance(value, bool):
                value = str(value)
            if not isinstance(value, str):
                raise ValueError(f"defaults.{key} must be a string, got {value!r}")
            overrides[key] = value
    for key in _AMOUNT_FIELDS:
        if key in config:
            overrides[key] = _to_decimal(key, config[key])
    if "sample_items" in config:
        raw_items = config["sample_items"]
        if not isinstance(raw_items, list) or not raw_items:
            raise ValueError("defaults.sample_items must be a non-empty array of tables")
        overrides["sample_items"] = tuple(_to_sample_item(i, raw) for i, raw in enumerate(raw_items))

    return replace(DEFAULT_RECEIPT_DEFAULTS, **overrides)


def load_receipt_defaults(config_path: str | Path | None = None) -> ReceiptDefaults:
    """
    Load receipt fallbacks from a TOML file.

    Args:
        config_path: TOML path. If None or missing, the built-in table is returned.

    Returns:
        ReceiptDefaults built from the file's ``[defaults]`` table
    """
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore[no-redef]

    if config_path is None:
        return DEFAULT_RECEIPT_DEFAULTS
    path = Path(config_path)
    if not path.exists():
        return DEFAULT_RECEIPT_DEFAULTS

    with open(path, "rb") as f:
        config = tomllib.load(f)

    table = config.get("defaults", {})
    if not isinstance(table, dict):
        raise ValueError(f"{path}: [defaults] must be a table")
    return receipt_defaults_from_mapping(table)
