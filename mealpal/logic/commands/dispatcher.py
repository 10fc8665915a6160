"""Executes interpreted Intents against the inventory, recipe and plan stores."""
import logging
from typing import Any, Callable, Dict, Optional

from mealpal.api import api_ai
from mealpal.domain.Intent import Action, Intent
from mealpal.infra.Plan_Repository import PlanRepository
from mealpal.logic.inventory.service import InventoryService
from mealpal.logic.recipes.service import RecipeService

logger = logging.getLogger(__name__)


class CommandDispatcher:
    """One handler per Action; every handler returns a JSON-ready dict."""

    def __init__(self, inventory: Optional[InventoryService] = None,
                 recipes: Optional[RecipeService] = None,
                 plans: Optional[PlanRepository] = None, ai=None):
        self.inventory = inventory or InventoryService()
        self.recipes = recipes or RecipeService()
        self.plans = plans or PlanRepository()
        self.ai = ai or api_ai
        self._handlers: Dict[Action, Callable[[Any], Dict[str, Any]]] = {
            Action.FIND_RECIPES_BY_INGREDIENTS: self._find_recipes_by_ingredients,
            Action.CLEAR_CATEGORY: self._clear_category,
            Action.SEARCH: self._search,
            Action.CHECK_INVENTORY: self._check_inventory,
            Action.CHECK_ITEM: self._check_item,
            Action.ADD_TO_INVENTORY: self._add_to_inventory,
            Action.REMOVE_FROM_INVENTORY: self._remove_from_inventory,
            Action.CREATE: self._create_recipe,
            Action.DELETE: self._delete_recipe,
            Action.BULK_ADD_TO_INVENTORY: self._bulk_add,
            Action.CHECK_RECIPE_AVAILABILITY: self._check_availability,
            Action.PLAN_RECIPE: self._plan_recipe,
            Action.FIND_SUBSTITUTES: self._find_substitutes,
        }
        missing = set(Action) - set(self._handlers)
        if missing:
            raise RuntimeError(f"No handler for actions: {sorted(a.value for a in missing)}")

    def execute(self, intent: Intent) -> Dict[str, Any]:
        try:
            handler = self._handlers[intent.action]
        except KeyError as e:
            raise RuntimeError(f"No handler for action {intent.action!r}") from e
        logger.info("Executing %s", intent.action.value)
        return handler(intent.params)

    # --- Handlers ------------------------------------------------------------

    def _find_recipes_by_ingredients(self, params):
        names = [i.item for i in params.ingredients]
        found = self.recipes.search_recipes(ingredients=names)
        return {"ingredients": names, "recipes": [r.to_dict() for r in found]}

    def _clear_category(self, params):
        removed = self.inventory.clear_category(params.category)
        return {"category": params.category, "removed": removed}

    def _search(self, params):
        found = self.recipes.search_recipes(query=params.search)
        return {"search": params.search, "recipes": [r.to_dict() for r in found]}

    def _check_inventory(self, params):
        return self.inventory.list_items()

    def _check_item(self, params):
        return {"item": params.item, "quantity": self.inventory.check_item(params.item)}

    def _add_to_inventory(self, params):
        return {"inventory": self.inventory.add_item(params.item, params.quantity, params.unit)}

    def _remove_from_inventory(self, params):
        return {"inventory": self.inventory.remove_item(params.item, params.quantity)}

    def _create_recipe(self, params):
        recipe = self.recipes.add_recipe({
            "name": params.name,
            "ingredients": [i.model_dump() for i in params.ingredients],
            "instructions": list(params.instructions),
        })
        return {"recipe": recipe.to_dict()}

    def _delete_recipe(self, params):
        return {"deleted": self.recipes.delete_recipe_by_name(params.name).to_dict()}

    def _bulk_add(self, params):
        return {"results": self.inventory.bulk_add([e.model_dump() for e in params.items])}

    def _check_availability(self, params):
        return self.recipes.check_availability(params.name, self.inventory.snapshot())

    def _plan_recipe(self, params):
        recipe = self.recipes.find_by_name(params.name)
        meals = self.plans.plan_recipe(recipe.name, params.date)
        return {"date": params.date.isoformat(), "recipes": meals}

    def _find_substitutes(self, params):
        subs = self.ai.get_ingredient_substitutions(params.ingredient)
        return {"ingredient": params.ingredient, "substitutions": subs}


__all__ = ['CommandDispatcher']
