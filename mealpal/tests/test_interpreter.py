import json
import unittest
from datetime import date

import pytest

from mealpal.domain.Intent import Action, ParsedIngredient, StockEntry
from mealpal.logic.commands.interpreter import CommandInterpreter, interpret, get_suggestions
from mealpal.logic.commands.vocabulary import Vocabulary, load_vocabulary
from mealpal.utilities.errors import CommandNotRecognized, InvalidInputError

MONDAY = date(2024, 1, 1)


class TestInterpreterRules(unittest.TestCase):

    def test_what_can_i_make_with(self):
        intent = interpret("what can I make with 2 eggs and a tomato")
        self.assertEqual(intent.action, Action.FIND_RECIPES_BY_INGREDIENTS)
        self.assertEqual(intent.params.ingredients, [
            ParsedIngredient(item="eggs", quantity=2, unit=None),
            ParsedIngredient(item="a tomato", quantity=1, unit=None),
        ])

    def test_ingredient_units_are_singularised(self):
        intent = interpret("what can I cook with 2 cups flour, 3 tbsps sugar")
        self.assertEqual(intent.params.ingredients, [
            ParsedIngredient(item="flour", quantity=2, unit="cup"),
            ParsedIngredient(item="sugar", quantity=3, unit="tbsp"),
        ])

    def test_clear_category(self):
        intent = interpret("clear all dairy from inventory")
        self.assertEqual(intent.action, Action.CLEAR_CATEGORY)
        self.assertEqual(intent.params.category, "dairy")
        self.assertEqual(interpret("clear all meat in the inventory").params.category, "meat")

    def test_search(self):
        intent = interpret("find recipes with chicken")
        self.assertEqual(intent.action, Action.SEARCH)
        self.assertEqual(intent.params.search, "recipes with chicken")
        self.assertEqual(interpret("search for pasta").params.search, "pasta")

    def test_check_inventory(self):
        for cmd in ("check inventory", "show stock", "how much inventory"):
            self.assertEqual(interpret(cmd).action, Action.CHECK_INVENTORY, cmd)

    def test_check_item(self):
        intent = interpret("check flour stock")
        self.assertEqual(intent.action, Action.CHECK_ITEM)
        self.assertEqual(intent.params.item, "flour")
        self.assertEqual(interpret("how much olive oil left").params.item, "olive oil")

    def test_add_to_inventory_with_leading_unit(self):
        intent = interpret("add 2 cups flour")
        self.assertEqual(intent.action, Action.ADD_TO_INVENTORY)
        self.assertEqual(intent.params, StockEntry(item="flour", quantity=2, unit="cups"))

    def test_add_to_inventory_with_trailing_unit_and_suffix(self):
        intent = interpret("put 500 flour grams into the inventory")
        self.assertEqual(intent.params, StockEntry(item="flour", quantity=500, unit="grams"))

    def test_add_without_unit(self):
        intent = interpret("stock up with 6 eggs")
        self.assertEqual(intent.params, StockEntry(item="eggs", quantity=6, unit=None))

    def test_remove_from_inventory(self):
        intent = interpret("remove 1 egg")
        self.assertEqual(intent.action, Action.REMOVE_FROM_INVENTORY)
        self.assertEqual(intent.params.item, "egg")
        self.assertEqual(intent.params.quantity, 1)
        self.assertEqual(interpret("use 2 tomatoes from the stock").params.item, "tomatoes")

    def test_create_recipe(self):
        intent = interpret(
            "Create a recipe for pancakes with 2 cups flour, 2 eggs instructions: mix well. fry then serve"
        )
        self.assertEqual(intent.action, Action.CREATE)
        self.assertEqual(intent.params.name, "pancakes")
        self.assertEqual(intent.params.ingredients, [
            ParsedIngredient(item="flour", quantity=2, unit="cup"),
            ParsedIngredient(item="eggs", quantity=2, unit=None),
        ])
        self.assertEqual(intent.params.instructions, ["mix well", "fry", "serve"])

    def test_create_recipe_without_instructions(self):
        intent = interpret("add recipe for toast with 2 bread")
        self.assertEqual(intent.action, Action.CREATE)
        self.assertEqual(intent.params.instructions, [])

    def test_delete_recipe(self):
        self.assertEqual(interpret("delete recipe pancakes").params.name, "pancakes")
        intent = interpret("remove recipe pancakes")
        self.assertEqual(intent.action, Action.DELETE)
        self.assertEqual(intent.params.name, "pancakes")

    def test_bulk_add(self):
        intent = interpret("add multiple items: 2 eggs and 3 cups milk, butter")
        self.assertEqual(intent.action, Action.BULK_ADD_TO_INVENTORY)
        self.assertEqual(intent.params.items, [
            StockEntry(item="eggs", quantity=2, unit=None),
            StockEntry(item="milk", quantity=3, unit="cups"),
        ])

    def test_bulk_add_without_quantities_is_not_recognized(self):
        with self.assertRaises(CommandNotRecognized):
            interpret("add multiple eggs and milk")

    def test_check_recipe_availability(self):
        intent = interpret("can I make pancakes")
        self.assertEqual(intent.action, Action.CHECK_RECIPE_AVAILABILITY)
        self.assertEqual(intent.params.name, "pancakes")

    def test_plan_recipe(self):
        intent = interpret("plan pancakes for next friday", today=MONDAY)
        self.assertEqual(intent.action, Action.PLAN_RECIPE)
        self.assertEqual(intent.params.name, "pancakes")
        self.assertEqual(intent.params.date, date(2024, 1, 5))

    def test_make_for_date_plans_instead_of_creating(self):
        intent = interpret("make pancakes for tomorrow", today=MONDAY)
        self.assertEqual(intent.action, Action.PLAN_RECIPE)
        self.assertEqual(intent.params.date, date(2024, 1, 2))

    def test_plan_with_unknown_date_is_not_recognized(self):
        with self.assertRaises(CommandNotRecognized):
            interpret("plan pancakes for next month", today=MONDAY)

    def test_find_substitutes(self):
        intent = interpret("what can I use for butter")
        self.assertEqual(intent.action, Action.FIND_SUBSTITUTES)
        self.assertEqual(intent.params.ingredient, "butter")

    def test_gibberish_is_not_recognized(self):
        with self.assertRaises(CommandNotRecognized) as ctx:
            interpret("asdkfjasdf")
        self.assertEqual(ctx.exception.command, "asdkfjasdf")


class TestRuleOrder(unittest.TestCase):

    def test_what_can_i_make_beats_search_and_create(self):
        self.assertEqual(interpret("what can i make with find me").action, Action.FIND_RECIPES_BY_INGREDIENTS)

    def test_search_beats_add(self):
        # "find" anywhere wins over the add rule further down
        self.assertEqual(interpret("add 2 eggs and find").action, Action.SEARCH)

    def test_add_declines_then_create_matches(self):
        self.assertEqual(interpret("add a recipe for soup with 1 onion").action, Action.CREATE)

    def test_remove_number_beats_delete(self):
        self.assertEqual(interpret("remove 2 recipe cards").action, Action.REMOVE_FROM_INVENTORY)

    def test_rules_follow_declared_priority(self):
        order = [rule.action for rule in CommandInterpreter().rules]
        self.assertEqual(order, [
            Action.FIND_RECIPES_BY_INGREDIENTS, Action.CLEAR_CATEGORY, Action.SEARCH,
            Action.CHECK_INVENTORY, Action.CHECK_ITEM, Action.ADD_TO_INVENTORY,
            Action.REMOVE_FROM_INVENTORY, Action.CREATE, Action.DELETE,
            Action.BULK_ADD_TO_INVENTORY, Action.CHECK_RECIPE_AVAILABILITY,
            Action.PLAN_RECIPE, Action.FIND_SUBSTITUTES,
        ])


@pytest.mark.parametrize("command", [
    "what can I make with 2 eggs and a tomato",
    "add 2 cups flour",
    "plan pancakes for this weekend",
])
def test_interpret_is_deterministic(command):
    assert interpret(command, today=MONDAY) == interpret(command, today=MONDAY)


def test_interpret_ignores_case_and_padding():
    assert interpret("  ADD 2 Cups FLOUR ") == interpret("add 2 cups flour")


def test_intent_serialises_with_action_label():
    dumped = interpret("plan soup for today", today=MONDAY).model_dump(mode="json")
    assert dumped == {"action": "planRecipe", "params": {"name": "soup", "date": "2024-01-01"}}


def test_suggestions_follow_keywords():
    vocab = Vocabulary()
    assert get_suggestions("RECIPE thing") == vocab.recipe_hints
    assert get_suggestions("my stock") == vocab.inventory_hints
    assert get_suggestions("recipe inventory") == vocab.recipe_hints + vocab.inventory_hints
    assert get_suggestions("hello") == []
    assert get_suggestions("recipe") == get_suggestions("recipe")


def test_vocabulary_file_extends_units_and_categories(tmp_path):
    path = tmp_path / "vocab.json"
    path.write_text(json.dumps({
        "quantity_units": ["cans", "can"],
        "categories": {"drinks": ["juice", "soda"]},
    }), encoding="utf-8")
    vocab = load_vocabulary(path)
    assert "dairy" in vocab.categories
    assert vocab.category_pattern("drinks").search("orange juice")

    interpreter = CommandInterpreter(vocab)
    intent = interpreter.interpret("add 3 cans beans")
    assert intent.params == StockEntry(item="beans", quantity=3, unit="cans")


def test_invalid_vocabulary_file_is_rejected(tmp_path):
    path = tmp_path / "vocab.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(InvalidInputError):
        load_vocabulary(path)
