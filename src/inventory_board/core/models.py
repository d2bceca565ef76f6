"""Domain models for Inventory Board."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class ItemType(str, Enum):
    """Type of inventory item, using the values stored in item documents."""

    SUPPLIES = "refill"
    EQUIPMENT = "stable"

    @property
    def label(self) -> str:
        """Human readable type name."""
        return "Supplies" if self is ItemType.SUPPLIES else "Equipment"


def coerce_number(value: Any) -> int | float | None:
    """Read a stored numeric field leniently.

    Numbers and numeric strings are returned as numbers. Anything else
    (empty or non-numeric strings, NaN, booleans, None) returns None.

    Examples:
        >>> coerce_number("12")
        12
        >>> coerce_number("abc") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return None if math.isnan(value) else value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
        if math.isnan(number):
            return None
        if number.is_integer():
            return int(number)
        return number
    return None


class Item(BaseModel):
    """A single inventory item as read from the document store."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str | None = None
    name: str = ""
    amount: int | float | None = None
    type: ItemType = ItemType.EQUIPMENT
    location: str = Field(default="", validation_alias=AliasChoices("location", "site"))
    low_stock_threshold: int | float | None = Field(
        default=None,
        validation_alias=AliasChoices("low_stock_threshold", "lowStockThreshold"),
    )

    @field_validator("amount", "low_stock_threshold", mode="before")
    @classmethod
    def _lenient_number(cls, value: Any) -> int | float | None:
        return coerce_number(value)

    @field_validator("type", mode="before")
    @classmethod
    def _lenient_type(cls, value: Any) -> ItemType:
        # Anything that is not the Supplies value is shown as Equipment
        if isinstance(value, ItemType):
            return value
        if value == ItemType.SUPPLIES.value:
            return ItemType.SUPPLIES
        return ItemType.EQUIPMENT

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, value: Any) -> str | None:
        if value is None or value == "":
            return None
        return str(value)

    @field_validator("name", "location", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    def to_document(self) -> dict[str, Any]:
        """Serialize to the field names used by the document store."""
        document: dict[str, Any] = {
            "name": self.name,
            "amount": self.amount,
            "type": self.type.value,
            "site": self.location,
        }
        if self.low_stock_threshold is not None:
            document["lowStockThreshold"] = self.low_stock_threshold
        if self.id is not None:
            document["id"] = self.id
        return document


class ItemView(BaseModel):
    """Read-only display projection of an item."""

    model_config = ConfigDict(frozen=True)

    item: Item
    low_stock: bool
    effective_threshold: int | float
    type_label: str


class Location(BaseModel):
    """A recognized location bucket."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str


class LocationSummary(BaseModel):
    """Item counts for one location."""

    model_config = ConfigDict(frozen=True)

    location: str
    total: int
    low_stock: int

    @property
    def is_empty(self) -> bool:
        """Check if the location has no items."""
        return self.total == 0
