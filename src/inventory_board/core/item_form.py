"""Validation of add/edit item form input."""

from __future__ import annotations

import math
from collections.abc import Collection
from typing import Any

from inventory_board.config import DEFAULT_LOW_STOCK_THRESHOLD
from inventory_board.core.models import Item, ItemType, coerce_number


class ItemFormError(ValueError):
    """Raised when form input cannot become an item record."""

    pass


def _form_number(value: Any) -> int | float | None:
    """Read a form number, rejecting digit grouping and non-finite values."""
    if isinstance(value, str) and "_" in value:
        return None
    number = coerce_number(value)
    if isinstance(number, float) and not math.isfinite(number):
        return None
    return number


def parse_item_form(
    name: str,
    amount: Any,
    item_type: str | ItemType = ItemType.SUPPLIES,
    location: str = "office",
    low_stock_threshold: Any = DEFAULT_LOW_STOCK_THRESHOLD,
    item_id: str | None = None,
    locations: Collection[str] | None = None,
) -> Item:
    """Turn raw form values into an item ready to be saved.

    Args:
        name: Item name, must not be blank
        amount: Quantity, number or numeric string
        item_type: "refill" (Supplies) or "stable" (Equipment)
        location: Location id the item is stored at
        low_stock_threshold: Threshold, number or numeric string
        item_id: Existing id when editing a saved item
        locations: Recognized location ids. If None, any location is accepted.

    Returns:
        The validated Item

    Raises:
        ItemFormError: If any field is missing or invalid

    Examples:
        >>> parse_item_form("Gloves", "12").amount
        12
    """
    if name is None or not str(name).strip():
        raise ItemFormError("Name is required")

    parsed_amount = _form_number(amount)
    if parsed_amount is None:
        raise ItemFormError(f"Amount must be a number, got: {amount!r}")

    parsed_threshold = _form_number(low_stock_threshold)
    if parsed_threshold is None:
        raise ItemFormError(
            f"Low stock threshold must be a number, got: {low_stock_threshold!r}"
        )

    try:
        parsed_type = ItemType(item_type)
    except ValueError:
        raise ItemFormError(
            f"Invalid item type: {item_type!r}. "
            f"Expected one of: {', '.join(t.value for t in ItemType)}"
        ) from None

    if locations is not None and location not in locations:
        raise ItemFormError(f"Unknown location: {location!r}")

    return Item(
        id=item_id,
        name=name,
        amount=parsed_amount,
        type=parsed_type,
        location=location,
        low_stock_threshold=parsed_threshold,
    )
