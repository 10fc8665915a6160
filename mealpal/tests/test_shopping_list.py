import unittest

import pytest

from mealpal.domain.Ingredient import Ingredient
from mealpal.domain.Recipe import Recipe
from mealpal.domain.ShoppingList import ShoppingList
from mealpal.logic.inventory.service import InventoryService
from mealpal.logic.recipes.service import RecipeService
from mealpal.logic.shopping.list_builder import build_shopping_list
from mealpal.logic.shopping.service import ShoppingListService
from mealpal.utilities.errors import InvalidInputError, NotFoundError


class TestShoppingList(unittest.TestCase):

    def test_merges_by_ingredient_and_unit(self):
        sl = ShoppingList()
        sl.add_item("Milk", 1, "l")
        sl.add_item("milk", 2, "l")
        sl.add_item("milk", 1, None)
        self.assertEqual(sl.to_dict(), [
            {"ingredient": "Milk", "quantity": 3, "unit": "l"},
            {"ingredient": "milk", "quantity": 1, "unit": None},
        ])

    def test_remove_only_matching_unit(self):
        sl = ShoppingList([{"ingredient": "milk", "quantity": 1, "unit": "l"}])
        self.assertFalse(sl.remove_item("milk"))
        self.assertTrue(sl.remove_item("MILK", "l"))
        self.assertEqual(len(sl), 0)


def test_build_subtracts_stock_once_per_key():
    recipes = [
        Recipe("A", [Ingredient("eggs", 2), Ingredient("flour", 1, "cup")]),
        Recipe("B", [Ingredient("eggs", 3), Ingredient("butter", 1)]),
    ]
    stock = [Ingredient("eggs", 4), Ingredient("butter", 5)]
    assert build_shopping_list(recipes, stock) == [
        {"ingredient": "eggs", "quantity": 1, "unit": None},
        {"ingredient": "flour", "quantity": 1, "unit": "cup"},
    ]


def test_build_with_no_recipes():
    assert build_shopping_list([], [Ingredient("eggs", 1)]) == []


def test_service_add_remove_clear(data_dir):
    service = ShoppingListService()
    service.add_to_list([{"ingredient": "eggs", "quantity": 6}, {"ingredient": "milk", "quantity": 1, "unit": "l"}])
    service.add_to_list([{"ingredient": "Eggs", "quantity": 6}])
    assert service.get_list()[0] == {"ingredient": "eggs", "quantity": 12, "unit": None}

    assert service.remove_from_list([{"ingredient": "eggs"}]) == [
        {"ingredient": "milk", "quantity": 1, "unit": "l"},
    ]
    assert service.clear_list() == []
    assert (data_dir / "shopping_list.json").read_text(encoding="utf-8").strip() == "[]"


def test_generate_from_recipes(pancakes):
    recipes = RecipeService()
    recipe = recipes.add_recipe(pancakes)
    InventoryService().add_item("eggs", 1)
    service = ShoppingListService()

    needed = service.generate_from_recipes(recipe_ids=[recipe.id])
    assert needed == [
        {"ingredient": "eggs", "quantity": 1, "unit": None},
        {"ingredient": "flour", "quantity": 2, "unit": "cup"},
        {"ingredient": "milk", "quantity": 1, "unit": "cup"},
    ]
    assert service.get_list() == []

    service.generate_from_recipes(recipe_names=["pancakes"], save=True)
    assert len(service.get_list()) == 3


def test_generate_requires_known_recipes():
    service = ShoppingListService()
    with pytest.raises(InvalidInputError):
        service.generate_from_recipes()
    with pytest.raises(NotFoundError):
        service.generate_from_recipes(recipe_names=["ghost soup"])
