"""Inventory service: validated stock changes, filtered listings, category clearing."""
import logging
import re
from typing import Any, Dict, List, Optional

from mealpal.events.Event_Bus import publish, INVENTORY_CATEGORY_CLEARED
from mealpal.infra.Inventory_Repository import InventoryRepository
from mealpal.logic.commands.vocabulary import Vocabulary, default_vocabulary
from mealpal.logic.pagination import paginate
from mealpal.utilities.config import DEFAULT_PAGE_LIMIT
from mealpal.utilities.constants import MAX_NAME_LENGTH, MAX_QUANTITY, NAME_PATTERN
from mealpal.utilities.errors import InvalidInputError, NotFoundError

logger = logging.getLogger(__name__)

_NAME_RE = re.compile(NAME_PATTERN)

SORT_FIELDS = ('name', 'quantity')
SORT_ORDERS = ('asc', 'desc')


def validate_item(item: Any) -> str:
    """Return the normalised item name or raise InvalidInputError."""
    if not isinstance(item, str) or not item.strip():
        raise InvalidInputError('Item name must be a non-empty string')
    if len(item) > MAX_NAME_LENGTH:
        raise InvalidInputError(f'Item name must be less than {MAX_NAME_LENGTH} characters')
    if not _NAME_RE.match(item):
        raise InvalidInputError('Item name can only contain letters, numbers, spaces, and hyphens')
    return item.strip().lower()


def validate_quantity(quantity: Any) -> int:
    """Return the quantity as a positive int below MAX_QUANTITY or raise InvalidInputError."""
    if isinstance(quantity, bool):
        raise InvalidInputError('Quantity must be an integer')
    try:
        num = float(quantity)
    except (TypeError, ValueError):
        raise InvalidInputError('Quantity must be an integer')
    if not num.is_integer():
        raise InvalidInputError('Quantity must be an integer')
    num = int(num)
    if num <= 0:
        raise InvalidInputError('Quantity must be greater than 0')
    if num >= MAX_QUANTITY:
        raise InvalidInputError('Quantity must be less than 1,000,000')
    return num


def _entry(ing) -> Dict[str, Any]:
    return {"item": ing.item, "quantity": ing.quantity, "unit": ing.unit}


class InventoryService:
    def __init__(self, repository: Optional[InventoryRepository] = None,
                 vocabulary: Optional[Vocabulary] = None):
        self.repository = repository or InventoryRepository()
        self.vocabulary = vocabulary or default_vocabulary()

    def add_item(self, item: str, quantity: Any, unit: Optional[str] = None) -> Dict[str, Any]:
        name = validate_item(item)
        qty = validate_quantity(quantity)
        inventory = self.repository.load()
        inventory.add_item(name, qty, unit.strip().lower() if unit else None)
        self.repository.save(inventory)
        logger.info("Inventory add %s x%s", name, qty)
        return inventory.to_dict()

    def remove_item(self, item: str, quantity: Any) -> Dict[str, Any]:
        name = validate_item(item)
        qty = validate_quantity(quantity)
        inventory = self.repository.load()
        inventory.remove_item(name, qty)
        self.repository.save(inventory)
        logger.info("Inventory remove %s x%s", name, qty)
        return inventory.to_dict()

    def check_item(self, item: str) -> int:
        return self.repository.load().quantity_of(item)

    def get_item(self, item: str) -> Dict[str, Any]:
        name = validate_item(item)
        ing = self.repository.load().get(name)
        if ing is None:
            raise NotFoundError('Item not found')
        return _entry(ing)

    def list_items(self, name_contains: Optional[str] = None, min_quantity: Optional[int] = None,
                   max_quantity: Optional[int] = None, sort_by: Optional[str] = None,
                   sort_order: str = 'asc', page: int = 1,
                   limit: int = DEFAULT_PAGE_LIMIT) -> Dict[str, Any]:
        """Filtered, sorted and paginated listing of the inventory."""
        items = [_entry(ing) for ing in self.repository.load().get_items()]
        if name_contains:
            needle = name_contains.lower()
            items = [e for e in items if needle in e["item"]]
        if min_quantity is not None:
            items = [e for e in items if e["quantity"] >= min_quantity]
        if max_quantity is not None:
            items = [e for e in items if e["quantity"] <= max_quantity]
        if sort_by in SORT_FIELDS:
            key = "item" if sort_by == 'name' else "quantity"
            items.sort(key=lambda e: e[key], reverse=(sort_order == 'desc'))
        return paginate(items, page, limit)

    def bulk_add(self, entries: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Add several items; each result records success or the error message."""
        results = []
        for entry in entries:
            name = entry.get("item")
            try:
                inventory = self.add_item(name, entry.get("quantity"), entry.get("unit"))
                results.append({"item": name, "success": True, "result": inventory})
            except InvalidInputError as e:
                results.append({"item": name, "success": False, "error": str(e)})
        return results

    def clear_category(self, category: str) -> List[Dict[str, Any]]:
        """Remove every item whose name matches the category keywords.

        Unknown categories match nothing.
        """
        pattern = self.vocabulary.category_pattern(category)
        if pattern is None:
            logger.info("Unknown inventory category %r; nothing cleared", category)
            return []
        inventory = self.repository.load()
        removed = []
        for ing in inventory.get_items():
            if pattern.search(ing.item):
                inventory.discard(ing.item)
                removed.append(_entry(ing))
        if removed:
            self.repository.save(inventory)
        publish(INVENTORY_CATEGORY_CLEARED, {"category": category, "removed": removed})
        return removed

    def snapshot(self):
        """The full stock as Ingredient objects."""
        return self.repository.load().get_items()


__all__ = ['InventoryService', 'validate_item', 'validate_quantity']
