"""ShoppingList aggregate: entries to purchase, merged by (ingredient, unit)."""
from typing import Dict, List, Optional, Tuple


def _key(ingredient: str, unit: Optional[str]) -> Tuple[str, Optional[str]]:
    return (ingredient or "").strip().lower(), unit or None


class ShoppingList:
    def __init__(self, entries: Optional[List[Dict]] = None):
        self.entries: List[Dict] = []
        for entry in entries or []:
            self.add_item(entry.get("ingredient", ""), entry.get("quantity", 1), entry.get("unit"))

    def add_item(self, ingredient: str, quantity: int, unit: Optional[str] = None):
        '''
        Adds an entry, merging quantities with an existing entry of the same ingredient and unit.
        '''
        key = _key(ingredient, unit)
        for entry in self.entries:
            if _key(entry["ingredient"], entry["unit"]) == key:
                entry["quantity"] += quantity
                return entry
        entry = {"ingredient": ingredient.strip(), "quantity": quantity, "unit": unit or None}
        self.entries.append(entry)
        return entry

    def remove_item(self, ingredient: str, unit: Optional[str] = None) -> bool:
        '''
        Removes the entry matching ingredient and unit. Returns True when something was removed.
        '''
        key = _key(ingredient, unit)
        before = len(self.entries)
        self.entries = [e for e in self.entries if _key(e["ingredient"], e["unit"]) != key]
        return len(self.entries) != before

    def clear(self):
        self.entries = []

    def get_items(self):
        return self.entries

    def __len__(self):
        return len(self.entries)

    def __str__(self) -> str:
        lines = ",\n\t".join(f"{e['ingredient']} - {e['quantity']} {e['unit'] or ''}".rstrip()
                             for e in self.entries)
        return f"Shopping List Items:\n\t{lines}"

    def __repr__(self) -> str:
        return self.__str__()

    def to_dict(self):
        return [dict(e) for e in self.entries]
