"""Lookup tables consulted by the command interpreter and its dispatcher.

Defaults live in ``mealpal.utilities.constants``. A JSON file named by
``MEALPAL_VOCABULARY_FILE`` may override any subset of the keys, e.g.::

    {"categories": {"dairy": ["milk", "kefir"]}, "quantity_units": ["cans", "can"]}
"""
import json
import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from mealpal.utilities import config
from mealpal.utilities.constants import (
    CATEGORY_KEYWORDS, INGREDIENT_UNITS, QUANTITY_UNITS,
    RECIPE_HINTS, INVENTORY_HINTS, GENERAL_HINTS,
)
from mealpal.utilities.errors import InvalidInputError

logger = logging.getLogger(__name__)


class Vocabulary(BaseModel):
    ingredient_units: List[str] = Field(default_factory=lambda: list(INGREDIENT_UNITS))
    quantity_units: List[str] = Field(default_factory=lambda: list(QUANTITY_UNITS))
    categories: Dict[str, List[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in CATEGORY_KEYWORDS.items()}
    )
    recipe_hints: List[str] = Field(default_factory=lambda: list(RECIPE_HINTS))
    inventory_hints: List[str] = Field(default_factory=lambda: list(INVENTORY_HINTS))
    general_hints: List[str] = Field(default_factory=lambda: list(GENERAL_HINTS))

    def unit_alternation(self) -> str:
        """Regex alternation of ingredient units, longest first."""
        units = sorted({u.lower() for u in self.ingredient_units}, key=len, reverse=True)
        return "|".join(re.escape(u) for u in units)

    def category_pattern(self, category: str) -> Optional[re.Pattern]:
        """Compiled keyword matcher for a category, or None when unknown."""
        keywords = self.categories.get(category.strip().lower())
        if not keywords:
            return None
        # Keywords must start a word so "rice" does not match "licorice"
        return re.compile(r"\b(?:" + "|".join(re.escape(k) for k in keywords) + ")", re.IGNORECASE)


def load_vocabulary(path: Optional[Path] = None) -> Vocabulary:
    """Build a Vocabulary from defaults plus an optional JSON override file."""
    if path is None:
        return Vocabulary()
    try:
        with open(path, 'r', encoding='utf-8') as f:
            overrides = json.load(f) or {}
    except FileNotFoundError:
        logger.warning("Vocabulary file not found: %s. Using defaults.", path)
        return Vocabulary()
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"Invalid JSON in vocabulary file {path}: {e}") from e
    # Category overrides extend the default table rather than replacing it
    if isinstance(overrides.get('categories'), dict):
        categories = Vocabulary().categories
        categories.update({k.lower(): v for k, v in overrides['categories'].items()})
        overrides['categories'] = categories
    try:
        vocab = Vocabulary(**overrides)
    except ValidationError as e:
        raise InvalidInputError(f"Invalid vocabulary file {path}: {e}") from e
    logger.info("Loaded vocabulary overrides from %s", path)
    return vocab


@lru_cache(maxsize=1)
def default_vocabulary() -> Vocabulary:
    return load_vocabulary(config.VOCABULARY_FILE)


__all__ = ['Vocabulary', 'load_vocabulary', 'default_vocabulary']
