"""Shopping list builder.

Provides build_shopping_list(recipes, stock): the shortfall between what a
set of recipes needs and what the inventory holds.
"""
from collections import defaultdict
from typing import Dict, List, Any, Optional, Tuple

from mealpal.domain.Ingredient import Ingredient
from mealpal.domain.Recipe import Recipe


def _normalize(name: str) -> str:
    return (name or '').strip().lower()


def _key(name: str, unit: Optional[str]) -> Tuple[str, Optional[str]]:
    return _normalize(name), (unit or None)


def build_shopping_list(recipes: List[Recipe], stock: List[Ingredient]) -> List[Dict[str, Any]]:
    """Compute missing ingredients for a set of recipes.

    Needs are totalled per (ingredient, unit) across all recipes and the
    stock of that ingredient is subtracted once per key.

    Returns:
        List of { ingredient, quantity, unit } with quantity > 0, sorted by ingredient.
    """
    if not recipes:
        return []

    required: Dict[Tuple[str, Optional[str]], int] = defaultdict(int)
    for recipe in recipes:
        for ing in recipe.ingredients:
            if not ing.item:
                continue
            required[_key(ing.item, ing.unit)] += int(ing.quantity or 0)

    have_totals: Dict[str, int] = defaultdict(int)
    for s in stock:
        have_totals[_normalize(s.item)] += int(s.quantity or 0)

    shopping_list: List[Dict[str, Any]] = []
    for (name, unit), needed in required.items():
        missing = needed - have_totals.get(name, 0)
        if missing > 0:
            shopping_list.append({'ingredient': name, 'quantity': missing, 'unit': unit})

    shopping_list.sort(key=lambda x: (x['ingredient'], x['unit'] or ''))
    return shopping_list


__all__ = ['build_shopping_list']
