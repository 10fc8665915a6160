"""Intent domain types: the structured result of interpreting a free-text command.

Each action label owns exactly one params model, so an Intent is a tagged
union discriminated on ``action``. Consumers dispatch on ``intent.action``;
the label set is closed.
"""
import datetime as dt
from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Action(str, Enum):
    FIND_RECIPES_BY_INGREDIENTS = "findRecipesByIngredients"
    CLEAR_CATEGORY = "clearCategory"
    SEARCH = "search"
    CHECK_INVENTORY = "checkInventory"
    CHECK_ITEM = "checkItem"
    ADD_TO_INVENTORY = "addToInventory"
    REMOVE_FROM_INVENTORY = "removeFromInventory"
    CREATE = "create"
    DELETE = "delete"
    BULK_ADD_TO_INVENTORY = "bulkAddToInventory"
    CHECK_RECIPE_AVAILABILITY = "checkRecipeAvailability"
    PLAN_RECIPE = "planRecipe"
    FIND_SUBSTITUTES = "findSubstitutes"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# --- Params payloads -----------------------------------------------------

class ParsedIngredient(_Frozen):
    item: str
    quantity: int = 1
    unit: Optional[str] = None


class StockEntry(_Frozen):
    item: str
    quantity: int
    unit: Optional[str] = None


class IngredientsParams(_Frozen):
    ingredients: List[ParsedIngredient]


class CategoryParams(_Frozen):
    category: str


class SearchParams(_Frozen):
    search: str


class NoParams(_Frozen):
    pass


class ItemParams(_Frozen):
    item: str


class RemoveParams(_Frozen):
    item: str
    quantity: int


class CreateRecipeParams(_Frozen):
    name: str
    ingredients: List[ParsedIngredient]
    instructions: List[str]


class NameParams(_Frozen):
    name: str


class BulkAddParams(_Frozen):
    items: List[StockEntry]


class PlanParams(_Frozen):
    name: str
    date: dt.date


class SubstituteParams(_Frozen):
    ingredient: str


# --- Intent variants -----------------------------------------------------

class FindRecipesByIngredientsIntent(_Frozen):
    action: Literal[Action.FIND_RECIPES_BY_INGREDIENTS] = Action.FIND_RECIPES_BY_INGREDIENTS
    params: IngredientsParams


class ClearCategoryIntent(_Frozen):
    action: Literal[Action.CLEAR_CATEGORY] = Action.CLEAR_CATEGORY
    params: CategoryParams


class SearchIntent(_Frozen):
    action: Literal[Action.SEARCH] = Action.SEARCH
    params: SearchParams


class CheckInventoryIntent(_Frozen):
    action: Literal[Action.CHECK_INVENTORY] = Action.CHECK_INVENTORY
    params: NoParams = Field(default_factory=NoParams)


class CheckItemIntent(_Frozen):
    action: Literal[Action.CHECK_ITEM] = Action.CHECK_ITEM
    params: ItemParams


class AddToInventoryIntent(_Frozen):
    action: Literal[Action.ADD_TO_INVENTORY] = Action.ADD_TO_INVENTORY
    params: StockEntry


class RemoveFromInventoryIntent(_Frozen):
    action: Literal[Action.REMOVE_FROM_INVENTORY] = Action.REMOVE_FROM_INVENTORY
    params: RemoveParams


class CreateRecipeIntent(_Frozen):
    action: Literal[Action.CREATE] = Action.CREATE
    params: CreateRecipeParams


class DeleteRecipeIntent(_Frozen):
    action: Literal[Action.DELETE] = Action.DELETE
    params: NameParams


class BulkAddToInventoryIntent(_Frozen):
    action: Literal[Action.BULK_ADD_TO_INVENTORY] = Action.BULK_ADD_TO_INVENTORY
    params: BulkAddParams


class CheckRecipeAvailabilityIntent(_Frozen):
    action: Literal[Action.CHECK_RECIPE_AVAILABILITY] = Action.CHECK_RECIPE_AVAILABILITY
    params: NameParams


class PlanRecipeIntent(_Frozen):
    action: Literal[Action.PLAN_RECIPE] = Action.PLAN_RECIPE
    params: PlanParams


class FindSubstitutesIntent(_Frozen):
    action: Literal[Action.FIND_SUBSTITUTES] = Action.FIND_SUBSTITUTES
    params: SubstituteParams


Intent = Annotated[
    Union[
        FindRecipesByIngredientsIntent,
        ClearCategoryIntent,
        SearchIntent,
        CheckInventoryIntent,
        CheckItemIntent,
        AddToInventoryIntent,
        RemoveFromInventoryIntent,
        CreateRecipeIntent,
        DeleteRecipeIntent,
        BulkAddToInventoryIntent,
        CheckRecipeAvailabilityIntent,
        PlanRecipeIntent,
        FindSubstitutesIntent,
    ],
    Field(discriminator="action"),
]
