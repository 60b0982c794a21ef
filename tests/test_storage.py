"""Tests for the JSON shopping list store."""
import json
import logging

from models import GroceryItem
from storage import ShoppingListStore


def test_save_and_load_round_trip(store):
    """Saved items come back equal and in the same order."""
    items = [
        GroceryItem(name="Chicken", quantity="2 kg", category="proteins"),
        GroceryItem(name="Apples", quantity="6", category="fruits", checked=True),
        GroceryItem(name="Köttbullar", quantity="1 bag", category="ikea"),
    ]

    assert store.save(items) is True
    assert store.load() == items


def test_save_and_load_empty_list(store):
    assert store.save([]) is True
    assert store.load() == []


def test_file_layout(store, list_file):
    """The file is a human-readable record with an items array."""
    store.save([GroceryItem(name="Rice", quantity="1", category="healthy_carbs")])

    data = json.loads(list_file.read_text(encoding="utf-8"))
    assert data == {
        "items": [
            {"name": "Rice", "quantity": "1", "category": "healthy_carbs", "checked": False}
        ]
    }
    assert "\n  " in list_file.read_text(encoding="utf-8")


def test_missing_file_gives_empty_list(store, caplog):
    with caplog.at_level(logging.ERROR, logger="storage"):
        assert store.load() == []
    assert "Error loading shopping list" in caplog.text


def test_corrupt_file_gives_empty_list(store, list_file, caplog):
    list_file.write_text("{not json", encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger="storage"):
        assert store.load() == []
    assert "Error parsing shopping list" in caplog.text


def test_wrong_shape_gives_empty_list(store, list_file):
    list_file.write_text(json.dumps({"things": []}), encoding="utf-8")
    assert store.load() == []

    list_file.write_text(json.dumps({"items": [{"name": "Milk"}]}), encoding="utf-8")
    assert store.load() == []

    list_file.write_text(json.dumps(["Milk"]), encoding="utf-8")
    assert store.load() == []


def test_missing_checked_defaults_to_false(store, list_file):
    list_file.write_text(
        json.dumps({"items": [{"name": "Milk", "quantity": "1", "category": "other"}]}),
        encoding="utf-8",
    )
    assert store.load() == [GroceryItem(name="Milk", quantity="1", category="other")]


def test_save_failure_is_swallowed(tmp_path, caplog):
    """Writing over a directory fails, is logged, and does not raise."""
    target = tmp_path / "occupied"
    target.mkdir()
    store = ShoppingListStore(str(target))

    with caplog.at_level(logging.ERROR, logger="storage"):
        assert store.save([GroceryItem(name="Eggs", quantity="12", category="proteins")]) is False
    assert "Error saving shopping list" in caplog.text


def test_save_creates_parent_directory(tmp_path):
    store = ShoppingListStore(str(tmp_path / "data" / "list.json"))
    assert store.save([]) is True
    assert (tmp_path / "data" / "list.json").exists()
