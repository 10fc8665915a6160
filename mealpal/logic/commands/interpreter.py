"""Command interpreter: free-text kitchen commands -> structured Intents.

Handles, in priority order:
    "what can I make with 2 eggs and a tomato"
    "clear all dairy from the inventory"
    "find recipes with chicken"
    "check inventory"
    "how much flour left"
    "add 2 cups flour to the inventory"
    "remove 1 egg"
    "create a recipe for pancakes with 2 cups flour, 2 eggs instructions: mix. fry"
    "delete recipe pancakes"
    "add multiple 2 eggs and 3 cups milk"
    "can I make pancakes"
    "plan pancakes for next friday"
    "what can I use for butter"

The first rule whose guard matches and whose extractor produces an Intent
wins. Rules overlap on purpose-neutral keywords ("find", "make", "add"), so
the table order is part of the behaviour.
"""
import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Optional

from mealpal.domain.Intent import (
    Action, Intent, ParsedIngredient, StockEntry,
    IngredientsParams, CategoryParams, SearchParams, ItemParams, RemoveParams,
    CreateRecipeParams, NameParams, BulkAddParams, PlanParams, SubstituteParams,
    FindRecipesByIngredientsIntent, ClearCategoryIntent, SearchIntent,
    CheckInventoryIntent, CheckItemIntent, AddToInventoryIntent,
    RemoveFromInventoryIntent, CreateRecipeIntent, DeleteRecipeIntent,
    BulkAddToInventoryIntent, CheckRecipeAvailabilityIntent, PlanRecipeIntent,
    FindSubstitutesIntent,
)
from mealpal.logic.commands.dates import resolve_date_expression
from mealpal.logic.commands.vocabulary import Vocabulary, default_vocabulary
from mealpal.utilities.errors import CommandNotRecognized

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rule:
    action: Action
    guard: Callable[[str], bool]
    extract: Callable[[str, date], Optional[Intent]]


# --- Patterns --------------------------------------------------------------

_MAKE_WITH_RE = re.compile(r"what can i (?:make|cook) with\s*")
_CLEAR_RE = re.compile(r"^clear\s+all\s+(.+?)\s+(?:from|in)\s+(?:the\s+)?inventory")
_SEARCH_VERB_RE = re.compile(r"(?:find|search)(?:\s+for)?")
_CHECK_INVENTORY_RE = re.compile(r"^(?:check|show|get|view|how much)\s+(?:inventory|stock)")
_CHECK_ITEM_RE = re.compile(r"^(?:check|show|get|view|how much)\s+(.+?)\s+(?:stock|inventory|quantity|left)")
_ADD_VERB_RE = re.compile(r"^(?:add|put|place|stock)\s+")
_ADD_RE = re.compile(
    r"^(?:add|put|place|stock)\s+(?:up\s+)?(?:with\s+)?(\d+)\s+(.+?)"
    r"(?:\s+(?:to|in|into)\s+(?:the\s+)?(?:inventory|stock))?$"
)
_REMOVE_VERB_RE = re.compile(r"^(?:remove|take|use|subtract)\s+")
_REMOVE_RE = re.compile(
    r"^(?:remove|take|use|subtract)\s+(\d+)\s+(.+?)"
    r"(?:\s+(?:from|out of)\s+(?:the\s+)?(?:inventory|stock))?$"
)
_CREATE_RE = re.compile(
    r"(?:create|add|make)\s+(?:a\s+)?recipe\s+for\s+(.+?)\s+with\s+(.+?)"
    r"(?:\s+instructions?:?\s+(.+))?$"
)
_DELETE_VERB_RE = re.compile(r"(?:delete|remove)(?:\s+recipe)?\s*")
_BULK_RE = re.compile(r"^(?:add|put|place|stock)\s+multiple(?:\s+items)?\s*:?\s*")
_CAN_I_MAKE_RE = re.compile(r"^can i (?:make|cook|prepare)\s+")
_PLAN_RE = re.compile(
    r"^(?:plan|schedule|make)\s+(.+?)\s+for\s+((?:today|tomorrow|next|this)\b.*)$"
)
_SUBSTITUTE_RE = re.compile(r"^what can i (?:use|substitute)\s+for\s+")

_LIST_SPLIT_RE = re.compile(r"\s+and\s+|\s*,\s*")
_INSTRUCTION_SPLIT_RE = re.compile(r"\.\s*|\s*,\s*|\s+then\s+")
_QUANTITY_BLOB_RE = re.compile(r"^(\d+)\s+(.+)$")


class CommandInterpreter:
    """Ordered rule table over a Vocabulary of unit words and hints."""

    def __init__(self, vocabulary: Optional[Vocabulary] = None):
        self.vocabulary = vocabulary or default_vocabulary()
        self._ingredient_re = re.compile(
            r"(\d+)?\s*(?:(" + self.vocabulary.unit_alternation() + r")\s+)?(.+)"
        )
        self._quantity_units = {u.lower() for u in self.vocabulary.quantity_units}
        self.rules: List[Rule] = [
            Rule(Action.FIND_RECIPES_BY_INGREDIENTS, lambda t: bool(_MAKE_WITH_RE.search(t)), self._find_by_ingredients),
            Rule(Action.CLEAR_CATEGORY, lambda t: bool(_CLEAR_RE.match(t)), self._clear_category),
            Rule(Action.SEARCH, lambda t: 'find' in t or 'search' in t, self._search),
            Rule(Action.CHECK_INVENTORY, lambda t: bool(_CHECK_INVENTORY_RE.match(t)), self._check_inventory),
            Rule(Action.CHECK_ITEM, lambda t: bool(_CHECK_ITEM_RE.match(t)), self._check_item),
            Rule(Action.ADD_TO_INVENTORY, lambda t: bool(_ADD_VERB_RE.match(t)), self._add_to_inventory),
            Rule(Action.REMOVE_FROM_INVENTORY, lambda t: bool(_REMOVE_VERB_RE.match(t)), self._remove_from_inventory),
            Rule(Action.CREATE, lambda t: 'create' in t or 'add' in t or 'make' in t, self._create_recipe),
            Rule(Action.DELETE, lambda t: 'delete' in t or 'remove recipe' in t, self._delete_recipe),
            Rule(Action.BULK_ADD_TO_INVENTORY, lambda t: bool(_BULK_RE.match(t)), self._bulk_add),
            Rule(Action.CHECK_RECIPE_AVAILABILITY, lambda t: bool(_CAN_I_MAKE_RE.match(t)), self._check_availability),
            Rule(Action.PLAN_RECIPE, lambda t: bool(_PLAN_RE.match(t)), self._plan_recipe),
            Rule(Action.FIND_SUBSTITUTES, lambda t: bool(_SUBSTITUTE_RE.match(t)), self._find_substitutes),
        ]

    # --- Public API --------------------------------------------------------

    def interpret(self, command: str, today: Optional[date] = None) -> Intent:
        """Return the Intent of the first matching rule.

        Raises:
            CommandNotRecognized: no rule matched.
        """
        text = command.lower().strip()
        today = today or date.today()
        for rule in self.rules:
            if not rule.guard(text):
                continue
            intent = rule.extract(text, today)
            if intent is not None:
                logger.debug("Command %r -> %s", command, intent.action.value)
                return intent
        logger.debug("Command %r not recognized", command)
        raise CommandNotRecognized(command)

    def get_suggestions(self, command: str) -> List[str]:
        """Usage hints for a command that could not be interpreted."""
        text = command.lower()
        suggestions: List[str] = []
        if 'recipe' in text:
            suggestions.extend(self.vocabulary.recipe_hints)
        if 'inventory' in text or 'stock' in text:
            suggestions.extend(self.vocabulary.inventory_hints)
        return suggestions

    # --- Sub-parsers -------------------------------------------------------

    def extract_ingredients(self, text: str) -> List[ParsedIngredient]:
        """Split "2 cups flour, 1 egg and milk" into ParsedIngredients."""
        ingredients = []
        for part in _LIST_SPLIT_RE.split(text):
            m = self._ingredient_re.match(part)
            if not m:
                continue
            quantity, unit, item = m.groups()
            item = item.strip()
            if not item:
                continue
            ingredients.append(ParsedIngredient(
                item=item,
                quantity=int(quantity) if quantity else 1,
                unit=re.sub(r"s$", "", unit) if unit else None,
            ))
        return ingredients

    def split_quantity_unit(self, quantity: str, blob: str) -> StockEntry:
        """Pull a unit word off the front or back of ``blob``."""
        words = blob.split()
        unit = None
        if len(words) > 1 and words[0] in self._quantity_units:
            unit, words = words[0], words[1:]
        elif len(words) > 1 and words[-1] in self._quantity_units:
            unit, words = words[-1], words[:-1]
        return StockEntry(item=" ".join(words), quantity=int(quantity), unit=unit)

    # --- Rule extractors ---------------------------------------------------

    def _find_by_ingredients(self, text, today):
        remainder = _MAKE_WITH_RE.sub("", text, count=1).strip()
        return FindRecipesByIngredientsIntent(
            params=IngredientsParams(ingredients=self.extract_ingredients(remainder))
        )

    def _clear_category(self, text, today):
        category = _CLEAR_RE.match(text).group(1)
        return ClearCategoryIntent(params=CategoryParams(category=category.strip()))

    def _search(self, text, today):
        term = _SEARCH_VERB_RE.sub("", text, count=1).strip()
        return SearchIntent(params=SearchParams(search=term))

    def _check_inventory(self, text, today):
        return CheckInventoryIntent()

    def _check_item(self, text, today):
        item = _CHECK_ITEM_RE.match(text).group(1)
        return CheckItemIntent(params=ItemParams(item=item.strip()))

    def _add_to_inventory(self, text, today):
        m = _ADD_RE.match(text)
        if not m:
            return None
        entry = self.split_quantity_unit(m.group(1), m.group(2))
        return AddToInventoryIntent(params=entry)

    def _remove_from_inventory(self, text, today):
        m = _REMOVE_RE.match(text)
        if not m:
            return None
        return RemoveFromInventoryIntent(
            params=RemoveParams(item=m.group(2).strip(), quantity=int(m.group(1)))
        )

    def _create_recipe(self, text, today):
        m = _CREATE_RE.search(text)
        if not m:
            return None
        name, ingredients_text, instructions_text = m.groups()
        instructions = []
        if instructions_text:
            instructions = [s.strip() for s in _INSTRUCTION_SPLIT_RE.split(instructions_text) if s.strip()]
        return CreateRecipeIntent(params=CreateRecipeParams(
            name=name.strip(),
            ingredients=self.extract_ingredients(ingredients_text),
            instructions=instructions,
        ))

    def _delete_recipe(self, text, today):
        name = _DELETE_VERB_RE.sub("", text, count=1).strip()
        return DeleteRecipeIntent(params=NameParams(name=name))

    def _bulk_add(self, text, today):
        remainder = _BULK_RE.sub("", text, count=1)
        items = []
        for part in _LIST_SPLIT_RE.split(remainder):
            m = _QUANTITY_BLOB_RE.match(part.strip())
            if m:
                items.append(self.split_quantity_unit(m.group(1), m.group(2)))
        if not items:
            return None
        return BulkAddToInventoryIntent(params=BulkAddParams(items=items))

    def _check_availability(self, text, today):
        name = _CAN_I_MAKE_RE.sub("", text, count=1).strip()
        return CheckRecipeAvailabilityIntent(params=NameParams(name=name))

    def _plan_recipe(self, text, today):
        name, when = _PLAN_RE.match(text).groups()
        day = resolve_date_expression(when, today)
        if day is None:
            return None
        return PlanRecipeIntent(params=PlanParams(name=name.strip(), date=day))

    def _find_substitutes(self, text, today):
        ingredient = _SUBSTITUTE_RE.sub("", text, count=1).strip()
        return FindSubstitutesIntent(params=SubstituteParams(ingredient=ingredient))


_default_interpreter: Optional[CommandInterpreter] = None


def get_interpreter() -> CommandInterpreter:
    global _default_interpreter
    if _default_interpreter is None:
        _default_interpreter = CommandInterpreter()
    return _default_interpreter


def interpret(command: str, today: Optional[date] = None) -> Intent:
    """Interpret ``command`` with the default vocabulary."""
    return get_interpreter().interpret(command, today)


def get_suggestions(command: str) -> List[str]:
    return get_interpreter().get_suggestions(command)


__all__ = ['Rule', 'CommandInterpreter', 'get_interpreter', 'interpret', 'get_suggestions']
