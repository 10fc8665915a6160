from typing import Optional

from fastapi import APIRouter, Body, Query

from mealpal.api.http_errors import to_http
from mealpal.logic.pagination import paginate
from mealpal.logic.recipes.service import RecipeService
from mealpal.utilities.config import DEFAULT_PAGE_LIMIT
from mealpal.utilities.errors import MealPalError

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.get("")
def list_recipes(
    name: Optional[str] = Query(default=None),
    ingredient: Optional[str] = Query(default=None),
    ingredients: Optional[str] = Query(default=None, description="Comma separated; all must be present"),
    q: Optional[str] = Query(default=None, description="Free-text keyword search"),
    sort_by: Optional[str] = Query(default=None, alias="sortBy", pattern="^(name|date)$"),
    sort_order: str = Query(default="asc", alias="sortOrder", pattern="^(asc|desc)$"),
    page: int = Query(default=1),
    limit: int = Query(default=DEFAULT_PAGE_LIMIT),
):
    wanted = [i for i in (ingredients or "").split(",") if i.strip()]
    try:
        found = RecipeService().search_recipes(name, ingredient, wanted, q, sort_by, sort_order)
        return paginate([r.to_dict() for r in found], page, limit)
    except MealPalError as e:
        raise to_http(e)


@router.post("", status_code=201)
def add_recipe(data: dict = Body(...)):
    try:
        return RecipeService().add_recipe(data).to_dict()
    except MealPalError as e:
        raise to_http(e)


@router.get("/{recipe_id}")
def get_recipe(recipe_id: str):
    try:
        return RecipeService().get_recipe(recipe_id).to_dict()
    except MealPalError as e:
        raise to_http(e)


@router.put("/{recipe_id}")
def update_recipe(recipe_id: str, data: dict = Body(...)):
    try:
        return RecipeService().update_recipe(recipe_id, data).to_dict()
    except MealPalError as e:
        raise to_http(e)


@router.delete("/{recipe_id}")
def delete_recipe(recipe_id: str):
    try:
        deleted = RecipeService().delete_recipe(recipe_id)
    except MealPalError as e:
        raise to_http(e)
    return {"status": "ok", "deleted": deleted.to_dict()}
