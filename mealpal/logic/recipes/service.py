"""Recipe service: validated CRUD plus search over the recipe store."""
import logging
import re
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from mealpal.domain.Ingredient import Ingredient
from mealpal.domain.Recipe import Recipe
from mealpal.infra.Recipe_Repository import RecipeRepository
from mealpal.utilities.constants import SEARCH_STOPWORDS
from mealpal.utilities.errors import DuplicateError, InvalidInputError, NotFoundError
from mealpal.utilities.validators import RecipeInput

logger = logging.getLogger(__name__)


def validate_recipe(data: Dict[str, Any]) -> RecipeInput:
    """Validate a raw recipe dict, raising InvalidInputError with the first problem."""
    try:
        return RecipeInput(**data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(p) for p in first.get("loc", ()))
        msg = first.get("msg", "Invalid recipe").removeprefix("Value error, ")
        raise InvalidInputError(f"{field}: {msg}" if field else msg) from e


def _keywords(text: str) -> List[str]:
    return [w for w in re.findall(r"[a-z0-9-]+", text.lower()) if w not in SEARCH_STOPWORDS]


class RecipeService:
    def __init__(self, repository: Optional[RecipeRepository] = None):
        self.repository = repository or RecipeRepository()

    # --- CRUD ---------------------------------------------------------------

    def add_recipe(self, data: Dict[str, Any]) -> Recipe:
        valid = validate_recipe(data)
        recipes = self.repository.load_all()
        if any(r.name.lower() == valid.name.lower() for r in recipes):
            raise DuplicateError('Recipe with this name already exists')
        recipe = Recipe(
            name=valid.name,
            ingredients=[Ingredient(i.item, i.quantity, i.unit) for i in valid.ingredients],
            instructions=valid.instructions,
        )
        recipes.append(recipe)
        self.repository.save_all(recipes)
        logger.info("Recipe added: %s (%s)", recipe.name, recipe.id)
        return recipe

    def update_recipe(self, recipe_id: str, data: Dict[str, Any]) -> Recipe:
        recipes = self.repository.load_all()
        target = next((r for r in recipes if r.id == recipe_id), None)
        if target is None:
            raise NotFoundError('Recipe not found')
        valid = validate_recipe(data)
        if any(r.id != recipe_id and r.name.lower() == valid.name.lower() for r in recipes):
            raise DuplicateError('Recipe with this name already exists')
        target.name = valid.name
        target.ingredients = [Ingredient(i.item, i.quantity, i.unit) for i in valid.ingredients]
        target.instructions = valid.instructions
        target.touch()
        self.repository.save_all(recipes)
        return target

    def delete_recipe(self, recipe_id: str) -> Recipe:
        recipes = self.repository.load_all()
        target = next((r for r in recipes if r.id == recipe_id), None)
        if target is None:
            raise NotFoundError('Recipe not found')
        recipes.remove(target)
        self.repository.save_all(recipes)
        logger.info("Recipe deleted: %s (%s)", target.name, target.id)
        return target

    def delete_recipe_by_name(self, name: str) -> Recipe:
        return self.delete_recipe(self.find_by_name(name).id)

    def get_recipe(self, recipe_id: str) -> Recipe:
        for r in self.repository.load_all():
            if r.id == recipe_id:
                return r
        raise NotFoundError('Recipe not found')

    def find_by_name(self, name: str) -> Recipe:
        wanted = (name or "").strip().lower()
        for r in self.repository.load_all():
            if r.name.lower() == wanted:
                return r
        raise NotFoundError(f"Recipe '{name}' not found")

    # --- Search -------------------------------------------------------------

    def search_recipes(self, name: Optional[str] = None, ingredient: Optional[str] = None,
                       ingredients: Optional[Iterable[str]] = None, query: Optional[str] = None,
                       sort_by: Optional[str] = None, sort_order: str = 'asc') -> List[Recipe]:
        """Filter recipes.

        Args:
            name: substring of the recipe name.
            ingredient: substring of any ingredient name.
            ingredients: every listed ingredient must be in the recipe (exact, case-insensitive).
            query: free text; every keyword must occur in the name or an ingredient.
            sort_by: 'name' or 'date' (last update).
            sort_order: 'asc' or 'desc'.
        """
        recipes = self.repository.load_all()
        if name:
            term = name.lower()
            recipes = [r for r in recipes if term in r.name.lower()]
        if ingredient:
            term = ingredient.lower()
            recipes = [r for r in recipes if any(term in i for i in r.ingredient_names())]
        if ingredients:
            required = [i.strip().lower() for i in ingredients]
            recipes = [r for r in recipes if all(req in r.ingredient_names() for req in required)]
        if query:
            words = _keywords(query)
            recipes = [
                r for r in recipes
                if all(w in r.name.lower() or any(w in i for i in r.ingredient_names()) for w in words)
            ]
        reverse = sort_order == 'desc'
        if sort_by == 'name':
            recipes.sort(key=lambda r: r.name.lower(), reverse=reverse)
        elif sort_by == 'date':
            recipes.sort(key=lambda r: r.updated_at, reverse=reverse)
        return recipes

    def check_availability(self, name: str, stock: List[Ingredient]) -> Dict[str, Any]:
        recipe = self.find_by_name(name)
        available, missing = recipe.check_ingredients(stock)
        return {"name": recipe.name, "available": available, "missing": missing}


__all__ = ['RecipeService', 'validate_recipe']
