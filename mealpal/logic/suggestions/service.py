"""Meal suggestions: a stored recipe match plus an AI idea when available."""
import logging
from datetime import date, timedelta
from typing import Any, Callable, Dict, List, Optional

from mealpal.api import api_ai
from mealpal.infra.Inventory_Repository import InventoryRepository
from mealpal.infra.Plan_Repository import PlanRepository
from mealpal.logic.recipes.service import RecipeService
from mealpal.utilities.errors import AIServiceError, AIUnavailableError, InvalidInputError

logger = logging.getLogger(__name__)


def generate_suggestions(ingredients: List[str], recipes: Optional[RecipeService] = None,
                         ai: Optional[Callable[[List[str]], List[dict]]] = None) -> List[Dict[str, Any]]:
    recipes = recipes or RecipeService()
    ai = ai or api_ai.get_meal_suggestions
    suggestions: List[Dict[str, Any]] = []

    matches = recipes.search_recipes(ingredients=ingredients) if ingredients else []
    if matches:
        suggestions.append({**matches[0].to_dict(), "source": "database"})

    try:
        ideas = ai(ingredients)
    except AIUnavailableError:
        logger.info("AI not configured; returning stored recipes only")
        ideas = []
    except AIServiceError:
        logger.exception("AI suggestions failed; returning stored recipes only")
        ideas = []
    if ideas:
        suggestions.append({**ideas[0], "source": "ai"})
    return suggestions


def generate_meal_plan(start: Optional[date] = None, days: int = 7,
                       inventory: Optional[InventoryRepository] = None,
                       plans: Optional[PlanRepository] = None,
                       recipes: Optional[RecipeService] = None,
                       ai: Optional[Callable[[List[str]], List[dict]]] = None) -> Dict[str, Any]:
    """Fill the days from ``start`` with suggestions built from what is in stock.

    Suggestion i goes on day ``start + i``; days left over stay as they were.
    An empty inventory raises InvalidInputError. A failing AI only shortens the plan.
    """
    start = start or date.today()
    stock = (inventory or InventoryRepository()).load().get_items()
    if not stock:
        raise InvalidInputError('No ingredients available')
    plans = plans or PlanRepository()

    suggestions = generate_suggestions([i.item for i in stock], recipes=recipes, ai=ai)
    names = [s["name"].strip() for s in suggestions if isinstance(s.get("name"), str) and s["name"].strip()]
    schedule = []
    for offset in range(days):
        day = start + timedelta(days=offset)
        if offset < len(names):
            meals = plans.plan_recipe(names[offset], day)
        else:
            meals = plans.get_day(day)
        schedule.append({"date": day.isoformat(), "recipes": meals})
    logger.info("Meal plan generated from %s: %d of %d days filled",
                start.isoformat(), min(days, len(names)), days)
    return {"start": start.isoformat(), "days": schedule, "suggestions": suggestions}


__all__ = ['generate_suggestions', 'generate_meal_plan']
