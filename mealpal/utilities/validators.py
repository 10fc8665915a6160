"""
Input validation schemas using Pydantic for better data integrity.
"""
import datetime as dt

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Literal

from mealpal.utilities.constants import (
    MAX_NAME_LENGTH, MAX_QUANTITY, MAX_INSTRUCTION_LENGTH, NAME_PATTERN
)


class IngredientInput(BaseModel):
    """Schema for a recipe ingredient."""
    item: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    quantity: int = Field(..., gt=0, lt=MAX_QUANTITY)
    unit: Optional[str] = None

    @field_validator('item')
    @classmethod
    def normalize_item(cls, v):
        """Trim and lower-case the ingredient name."""
        v = v.strip().lower()
        if not v:
            raise ValueError('Each ingredient must have an item name and quantity')
        return v

    @field_validator('unit')
    @classmethod
    def normalize_unit(cls, v):
        if v is None:
            return None
        v = v.strip().lower()
        return v or None


class RecipeInput(BaseModel):
    """Schema for recipe create/update validation."""
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH, pattern=NAME_PATTERN)
    ingredients: List[IngredientInput]
    instructions: List[str]

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Validate recipe name."""
        if not v.strip():
            raise ValueError('Recipe name must be a non-empty string')
        return v.strip()

    @field_validator('ingredients')
    @classmethod
    def validate_ingredients(cls, v):
        """Ensure recipe has at least one ingredient."""
        if not v:
            raise ValueError('Recipe must have at least one ingredient')
        return v

    @field_validator('instructions')
    @classmethod
    def validate_instructions(cls, v):
        if not v:
            raise ValueError('Recipe must have at least one instruction')
        cleaned = []
        for step in v:
            if not step or not step.strip():
                raise ValueError('Instructions must be non-empty strings')
            if len(step) > MAX_INSTRUCTION_LENGTH:
                raise ValueError(f'Instruction must be less than {MAX_INSTRUCTION_LENGTH} characters')
            cleaned.append(step.strip())
        return cleaned


class InventoryItemInput(BaseModel):
    """Schema for adding/removing a single inventory item.

    Name and quantity rules are enforced by the inventory service so that
    command-driven and JSON-driven changes report identical errors.
    """
    item: str
    quantity: int
    unit: Optional[str] = None


class InventoryUpdateInput(InventoryItemInput):
    operation: Literal['add', 'remove']


class BulkInventoryInput(BaseModel):
    items: List[InventoryItemInput]


class CommandInput(BaseModel):
    command: str = Field(..., min_length=1)

    @field_validator('command')
    @classmethod
    def not_blank(cls, v):
        if not v.strip():
            raise ValueError('Command is required')
        return v


class ShoppingListItemInput(BaseModel):
    """Schema for shopping list item validation."""
    ingredient: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    quantity: int = Field(1, ge=1)
    unit: Optional[str] = None

    @field_validator('ingredient')
    @classmethod
    def strip_whitespace(cls, v):
        return v.strip()


class ShoppingListItemsInput(BaseModel):
    items: List[ShoppingListItemInput]


class GenerateShoppingListInput(BaseModel):
    """Recipes to shop for, by id or by name."""
    recipe_ids: List[str] = Field(default_factory=list)
    recipe_names: List[str] = Field(default_factory=list)
    save: bool = False


class PlanEntryInput(BaseModel):
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)


class SuggestionRequest(BaseModel):
    ingredients: List[str] = Field(default_factory=list)

    @field_validator('ingredients')
    @classmethod
    def drop_blank(cls, v):
        return [i.strip().lower() for i in v if i and i.strip()]


class GeneratePlanInput(BaseModel):
    """Days to fill from stock; the plan starts today unless told otherwise."""
    start_date: Optional[dt.date] = None
    days: int = Field(7, ge=1, le=14)


class RecipeInstructionsRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    ingredients: List[str] = Field(default_factory=list)

    @field_validator('name')
    @classmethod
    def strip_name(cls, v):
        if not v.strip():
            raise ValueError('Recipe name is required')
        return v.strip()

    @field_validator('ingredients')
    @classmethod
    def drop_blank(cls, v):
        return [i.strip() for i in v if i and i.strip()]
