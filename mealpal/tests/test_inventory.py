import json
import unittest

import pytest

from mealpal.domain.Inventory import Inventory
from mealpal.events.Event_Bus import EventBus, INVENTORY_LOW_STOCK, INVENTORY_DEPLETED
from mealpal.infra.Inventory_Repository import InventoryRepository
from mealpal.logic.inventory.service import InventoryService, validate_item, validate_quantity
from mealpal.utilities.errors import InsufficientQuantityError, InvalidInputError, NotFoundError


class TestInventory(unittest.TestCase):

    def setUp(self):
        self.events = []
        bus = EventBus()
        bus.subscribe(INVENTORY_LOW_STOCK, lambda name, payload: self.events.append((name, payload)))
        bus.subscribe(INVENTORY_DEPLETED, lambda name, payload: self.events.append((name, payload)))
        self.inventory = Inventory().set_event_bus(bus)

    def test_add_merges_and_keeps_first_unit(self):
        self.inventory.add_item("Flour", 2)
        self.inventory.add_item("flour ", 3, "cups")
        self.inventory.add_item("FLOUR", 1, "g")
        flour = self.inventory.get("flour")
        self.assertEqual(flour.quantity, 6)
        self.assertEqual(flour.unit, "cups")

    def test_remove_missing_item(self):
        with self.assertRaises(NotFoundError):
            self.inventory.remove_item("saffron", 1)

    def test_remove_more_than_available(self):
        self.inventory.add_item("eggs", 2)
        with self.assertRaises(InsufficientQuantityError) as ctx:
            self.inventory.remove_item("eggs", 3)
        self.assertEqual(str(ctx.exception), "Insufficient quantity. Only 2 available")
        self.assertEqual(self.inventory.quantity_of("eggs"), 2)

    def test_remove_to_zero_deletes_item(self):
        self.inventory.add_item("eggs", 2)
        self.assertIsNone(self.inventory.remove_item("eggs", 2))
        self.assertIsNone(self.inventory.get("eggs"))
        self.assertEqual(self.events[-1], (INVENTORY_DEPLETED, {"item": "eggs"}))

    def test_low_stock_event(self):
        self.inventory.add_item("milk", 700, "ml")
        self.inventory.remove_item("milk", 100)
        self.assertEqual(self.events, [])
        self.inventory.remove_item("milk", 200)
        name, payload = self.events[-1]
        self.assertEqual(name, INVENTORY_LOW_STOCK)
        self.assertEqual(payload["remaining"], 400)
        self.assertEqual(payload["threshold"], 500)

    def test_adding_low_quantity_reports_low_stock(self):
        self.inventory.add_item("saffron", 1)
        self.assertEqual(len(self.events), 1)
        name, payload = self.events[0]
        self.assertEqual(name, INVENTORY_LOW_STOCK)
        self.assertEqual(payload["ingredient"].item, "saffron")
        self.assertEqual((payload["remaining"], payload["threshold"]), (1, 1))

    def test_round_trip_accepts_bare_counts(self):
        inv = Inventory.from_dict({"eggs": 3, "flour": {"quantity": 2, "unit": "cups"}})
        self.assertEqual(inv.to_dict(), {
            "eggs": {"quantity": 3, "unit": None},
            "flour": {"quantity": 2, "unit": "cups"},
        })


@pytest.mark.parametrize("name", ["", "   ", "x" * 101, "eggs!", 42])
def test_validate_item_rejects(name):
    with pytest.raises(InvalidInputError):
        validate_item(name)


@pytest.mark.parametrize("quantity", [0, -1, 1_000_000, 1.5, "abc", True, None])
def test_validate_quantity_rejects(quantity):
    with pytest.raises(InvalidInputError):
        validate_quantity(quantity)


def test_validate_quantity_accepts_integral_values():
    assert validate_quantity(3) == 3
    assert validate_quantity("4") == 4
    assert validate_quantity(5.0) == 5


def test_service_persists_changes(data_dir):
    service = InventoryService()
    service.add_item("Eggs", 12)
    service.add_item("flour", 2, "Cups")
    service.remove_item("eggs", 2)

    stored = json.loads((data_dir / "inventory.json").read_text(encoding="utf-8"))
    assert stored == {"eggs": {"quantity": 10, "unit": None}, "flour": {"quantity": 2, "unit": "cups"}}
    assert service.check_item("EGGS") == 10
    assert service.check_item("saffron") == 0


def test_get_item_missing():
    with pytest.raises(NotFoundError):
        InventoryService().get_item("saffron")


def test_list_items_filters_sorts_and_pages():
    service = InventoryService()
    for name, qty in [("apples", 5), ("bananas", 1), ("apricots", 9), ("cherries", 3)]:
        service.add_item(name, qty)

    result = service.list_items(name_contains="ap", sort_by="quantity", sort_order="desc")
    assert [e["item"] for e in result["items"]] == ["apricots", "apples"]

    page = service.list_items(min_quantity=2, sort_by="name", page=2, limit=2)
    assert [e["item"] for e in page["items"]] == ["cherries"]
    assert page["pagination"] == {
        "page": 2, "limit": 2, "totalItems": 3, "totalPages": 2,
        "hasNextPage": False, "hasPrevPage": True,
    }


def test_list_items_rejects_bad_page():
    with pytest.raises(InvalidInputError):
        InventoryService().list_items(page=0)


def test_bulk_add_reports_each_entry():
    results = InventoryService().bulk_add([
        {"item": "eggs", "quantity": 2},
        {"item": "bad!", "quantity": 1},
        {"item": "milk", "quantity": 0},
    ])
    assert [r["success"] for r in results] == [True, False, False]
    assert results[1]["error"] == "Item name can only contain letters, numbers, spaces, and hyphens"
    assert InventoryService().check_item("eggs") == 2


def test_clear_category_removes_matching_items():
    service = InventoryService()
    for name in ("whole milk", "cheddar cheese", "flour", "chicken breast"):
        service.add_item(name, 1)

    removed = service.clear_category("Dairy")
    assert sorted(e["item"] for e in removed) == ["cheddar cheese", "whole milk"]
    remaining = InventoryRepository().load().to_dict()
    assert sorted(remaining) == ["chicken breast", "flour"]


def test_clear_unknown_category_clears_nothing():
    service = InventoryService()
    service.add_item("flour", 1)
    assert service.clear_category("spaceships") == []
    assert service.check_item("flour") == 1


def test_clear_category_matches_whole_words_only():
    service = InventoryService()
    service.add_item("licorice", 2)
    service.add_item("brown rice", 2)
    removed = service.clear_category("pantry")
    assert [e["item"] for e in removed] == ["brown rice"]
    assert service.check_item("licorice") == 2


def test_undecodable_inventory_file_loads_empty(data_dir):
    path = data_dir / "inventory.json"
    path.write_bytes(b'{"\xff\xfe": 1}')
    inventory = InventoryRepository(path).load()
    assert len(inventory) == 0
