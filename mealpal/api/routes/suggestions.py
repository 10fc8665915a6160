from fastapi import APIRouter

from mealpal.api import api_ai
from mealpal.api.http_errors import to_http
from mealpal.logic.suggestions.service import generate_suggestions
from mealpal.utilities.errors import MealPalError
from mealpal.utilities.validators import RecipeInstructionsRequest, SuggestionRequest

router = APIRouter(prefix="/api/suggestions", tags=["suggestions"])


@router.post("")
def suggest_meals(body: SuggestionRequest):
    return {"suggestions": generate_suggestions(body.ingredients)}


@router.get("/substitutions/{ingredient}")
def substitutions(ingredient: str):
    try:
        subs = api_ai.get_ingredient_substitutions(ingredient.strip().lower())
    except MealPalError as e:
        raise to_http(e)
    return {"ingredient": ingredient, "substitutions": subs}


@router.post("/instructions")
def recipe_instructions(body: RecipeInstructionsRequest):
    try:
        steps = api_ai.get_recipe_instructions(body.name, body.ingredients)
    except MealPalError as e:
        raise to_http(e)
    return {"name": body.name, "instructions": steps}
