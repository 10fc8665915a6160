from fastapi import APIRouter

from mealpal.api.http_errors import to_http
from mealpal.logic.shopping.service import ShoppingListService
from mealpal.utilities.errors import MealPalError
from mealpal.utilities.validators import GenerateShoppingListInput, ShoppingListItemsInput

router = APIRouter(prefix="/api/shopping-list", tags=["shopping-list"])


@router.get("")
def get_shopping_list():
    items = ShoppingListService().get_list()
    return {"items": items, "count": len(items)}


@router.post("")
def add_to_shopping_list(body: ShoppingListItemsInput):
    items = ShoppingListService().add_to_list(i.model_dump() for i in body.items)
    return {"items": items, "count": len(items)}


@router.post("/remove")
def remove_from_shopping_list(body: ShoppingListItemsInput):
    items = ShoppingListService().remove_from_list(i.model_dump() for i in body.items)
    return {"items": items, "count": len(items)}


@router.delete("")
def clear_shopping_list():
    ShoppingListService().clear_list()
    return {"items": [], "count": 0}


@router.post("/generate")
def generate_shopping_list(body: GenerateShoppingListInput):
    """Missing ingredients for the given recipes, optionally merged into the stored list."""
    try:
        items = ShoppingListService().generate_from_recipes(body.recipe_ids, body.recipe_names, body.save)
    except MealPalError as e:
        raise to_http(e)
    return {"items": items, "count": len(items), "saved": body.save}
