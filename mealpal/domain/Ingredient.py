"""Ingredient domain entity: item name, quantity and optional unit."""
from typing import Optional


def normalize_name(name: str) -> str:
    return (name or "").strip().lower()


class Ingredient:
    def __init__(self, item: str = "", quantity: int = 0, unit: Optional[str] = None):
        self.item = normalize_name(item)
        self.quantity = quantity
        self.unit = unit or None

    def set_quantity(self, quantity: int):
        '''Adjusts the quantity by the specified delta (can be negative).'''
        self.quantity += quantity

    def __str__(self) -> str:
        unit = f" {self.unit}" if self.unit else ""
        return f"{self.item} - {self.quantity}{unit}"

    __repr__ = __str__

    def __eq__(self, other):
        if not isinstance(other, Ingredient):
            return NotImplemented
        return (self.item, self.quantity, self.unit) == (other.item, other.quantity, other.unit)

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        try:
            quantity = int(d.get("quantity") or 0)
        except (TypeError, ValueError):
            quantity = 0
        return Ingredient(d.get("item", ""), quantity, d.get("unit"))

    def to_dict(self):
        return {
            "item": self.item,
            "quantity": self.quantity,
            "unit": self.unit,
        }
