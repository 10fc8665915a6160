"""Inventory aggregate: stock of Ingredient items keyed by normalised name."""
from typing import Dict, List, Optional

from mealpal.domain.Ingredient import Ingredient, normalize_name
from mealpal.events.Event_Bus import (
    GLOBAL_EVENT_BUS, INVENTORY_LOW_STOCK, INVENTORY_DEPLETED
)
from mealpal.utilities.config import (
    LOW_STOCK_THRESHOLD, LOW_STOCK_UNIT_ALIASES, DEFAULT_LOW_STOCK_THRESHOLD
)
from mealpal.utilities.errors import NotFoundError, InsufficientQuantityError


def low_stock_threshold(unit: Optional[str]) -> int:
    if not unit:
        return DEFAULT_LOW_STOCK_THRESHOLD
    unit = unit.lower()
    return LOW_STOCK_THRESHOLD.get(LOW_STOCK_UNIT_ALIASES.get(unit, unit), DEFAULT_LOW_STOCK_THRESHOLD)


class Inventory:
    def __init__(self):
        self.items: Dict[str, Ingredient] = {}
        self._event_bus = GLOBAL_EVENT_BUS

    # --- Observer helpers -------------------------------------------------
    def set_event_bus(self, bus):
        self._event_bus = bus
        return self

    def _notify_low_stock(self, ingredient: Ingredient):
        self._event_bus.publish(INVENTORY_LOW_STOCK, {
            "ingredient": ingredient,
            "remaining": ingredient.quantity,
            "threshold": low_stock_threshold(ingredient.unit),
        })

    def _evaluate_item(self, item: Ingredient):
        if item.quantity <= low_stock_threshold(item.unit):
            self._notify_low_stock(item)

    # --- Mutations --------------------------------------------------------
    def add_item(self, name: str, quantity: int, unit: Optional[str] = None) -> Ingredient:
        '''
        Adds quantity of an item, creating it when missing. The first known unit sticks.
        '''
        key = normalize_name(name)
        existing = self.items.get(key)
        if existing is None:
            existing = Ingredient(key, 0, unit)
            self.items[key] = existing
        elif existing.unit is None and unit:
            existing.unit = unit
        existing.set_quantity(quantity)
        self._evaluate_item(existing)
        return existing

    def remove_item(self, name: str, quantity: int) -> Optional[Ingredient]:
        '''
        Removes quantity of an item. Returns the remaining Ingredient, or None when depleted.
        '''
        key = normalize_name(name)
        existing = self.items.get(key)
        if existing is None or existing.quantity <= 0:
            raise NotFoundError('Item not found in inventory')
        if existing.quantity < quantity:
            raise InsufficientQuantityError(key, existing.quantity)
        existing.set_quantity(-quantity)
        if existing.quantity == 0:
            del self.items[key]
            self._event_bus.publish(INVENTORY_DEPLETED, {"item": key})
            return None
        self._evaluate_item(existing)
        return existing

    def discard(self, name: str) -> Optional[Ingredient]:
        '''Drops an item entirely, returning what was removed.'''
        return self.items.pop(normalize_name(name), None)

    # --- Queries ----------------------------------------------------------
    def quantity_of(self, name: str) -> int:
        item = self.items.get(normalize_name(name))
        return item.quantity if item else 0

    def get(self, name: str) -> Optional[Ingredient]:
        return self.items.get(normalize_name(name))

    def get_items(self) -> List[Ingredient]:
        return list(self.items.values())

    def __len__(self):
        return len(self.items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items.values())
        return f"Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    # --- Persistence shape ------------------------------------------------
    @staticmethod
    def from_dict(data):
        '''
        Builds an Inventory from {name: {"quantity": int, "unit": str|None}}.
        Plain {name: int} entries are accepted as well.
        '''
        inventory = Inventory()
        for name, entry in (data or {}).items():
            if isinstance(entry, dict):
                ing = Ingredient.from_dict({"item": name, **entry})
            else:
                ing = Ingredient.from_dict({"item": name, "quantity": entry})
            if ing.item and ing.quantity > 0:
                inventory.items[ing.item] = ing
        return inventory

    def to_dict(self):
        return {
            name: {"quantity": ing.quantity, "unit": ing.unit}
            for name, ing in sorted(self.items.items())
        }
