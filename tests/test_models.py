import pytest
from pydantic import ValidationError

from inventory_board.core.models import Item, ItemType, coerce_number


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (7, 7),
        (2.5, 2.5),
        ("12", 12),
        (" 3.5 ", 3.5),
        ("", None),
        ("abc", None),
        (None, None),
        (True, None),
        ([1], None),
    ],
)
def test_coerce_number(value, expected):
    assert coerce_number(value) == expected


def test_coerce_number_nan_is_none():
    assert coerce_number(float("nan")) is None
    assert coerce_number("nan") is None


def test_item_from_stored_document():
    item = Item.model_validate({
        "id": "abc123",
        "name": "Gloves",
        "amount": 4,
        "type": "refill",
        "site": "ci",
        "lowStockThreshold": 6,
    })
    assert item.id == "abc123"
    assert item.type is ItemType.SUPPLIES
    assert item.location == "ci"
    assert item.low_stock_threshold == 6


def test_item_unknown_type_reads_as_equipment():
    assert Item.model_validate({"name": "x", "type": "gadget"}).type is ItemType.EQUIPMENT
    assert Item.model_validate({"name": "x"}).type is ItemType.EQUIPMENT


def test_item_without_id_is_unsaved():
    assert Item.model_validate({"name": "x", "id": ""}).id is None


def test_item_is_frozen():
    item = Item(name="x", amount=1)
    with pytest.raises(ValidationError):
        item.amount = 2


def test_item_to_document_uses_store_field_names():
    item = Item(id="k1", name="Tape", amount=3, type=ItemType.SUPPLIES, location="gate", low_stock_threshold=5)
    assert item.to_document() == {
        "id": "k1",
        "name": "Tape",
        "amount": 3,
        "type": "refill",
        "site": "gate",
        "lowStockThreshold": 5,
    }


def test_item_type_labels():
    assert ItemType.SUPPLIES.label == "Supplies"
    assert ItemType.EQUIPMENT.label == "Equipment"
