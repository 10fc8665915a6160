"""Shopping list service: persisted list mutations and recipe-driven generation."""
import logging
from typing import Any, Dict, Iterable, List, Optional

from mealpal.infra.Inventory_Repository import InventoryRepository
from mealpal.infra.ShoppingList_Repository import ShoppingListRepository
from mealpal.logic.recipes.service import RecipeService
from mealpal.logic.shopping.list_builder import build_shopping_list
from mealpal.utilities.errors import InvalidInputError

logger = logging.getLogger(__name__)


class ShoppingListService:
    def __init__(self, repository: Optional[ShoppingListRepository] = None,
                 inventory_repository: Optional[InventoryRepository] = None,
                 recipes: Optional[RecipeService] = None):
        self.repository = repository or ShoppingListRepository()
        self.inventory_repository = inventory_repository or InventoryRepository()
        self.recipes = recipes or RecipeService()

    def get_list(self) -> List[Dict[str, Any]]:
        return self.repository.load().to_dict()

    def add_to_list(self, items: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
        shopping_list = self.repository.load()
        for item in items:
            shopping_list.add_item(item["ingredient"], int(item.get("quantity") or 1), item.get("unit"))
        self.repository.save(shopping_list)
        return shopping_list.to_dict()

    def remove_from_list(self, items: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
        shopping_list = self.repository.load()
        for item in items:
            if not shopping_list.remove_item(item["ingredient"], item.get("unit")):
                logger.debug("Shopping list has no %r to remove", item["ingredient"])
        self.repository.save(shopping_list)
        return shopping_list.to_dict()

    def clear_list(self) -> List[Dict[str, Any]]:
        shopping_list = self.repository.load()
        shopping_list.clear()
        self.repository.save(shopping_list)
        return []

    def generate_from_recipes(self, recipe_ids: Iterable[str] = (), recipe_names: Iterable[str] = (),
                              save: bool = False) -> List[Dict[str, Any]]:
        """Shortfall for the chosen recipes against current stock.

        With save=True the shortfall is merged into the stored list.
        """
        chosen = [self.recipes.get_recipe(rid) for rid in recipe_ids]
        chosen += [self.recipes.find_by_name(name) for name in recipe_names]
        if not chosen:
            raise InvalidInputError('At least one recipe is required')
        needed = build_shopping_list(chosen, self.inventory_repository.load().get_items())
        if save and needed:
            self.add_to_list(needed)
        return needed


__all__ = ['ShoppingListService']
