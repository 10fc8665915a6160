"""Recipe domain entity: id, name, ingredients, instructions, timestamps."""
from datetime import datetime, timezone
from typing import List, Dict, Optional, Tuple
from uuid import uuid4

from mealpal.domain.Ingredient import Ingredient


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class Recipe:
    def __init__(self, name: str = "", ingredients: Optional[List[Ingredient]] = None,
                 instructions: Optional[List[str]] = None, id: Optional[str] = None,
                 created_at: Optional[str] = None, updated_at: Optional[str] = None):
        self.id = id or uuid4().hex
        self.name = name
        self.ingredients = ingredients[:] if ingredients else []
        self.instructions = instructions[:] if instructions else []
        self.created_at = created_at or _now_iso()
        self.updated_at = updated_at or self.created_at

    def __str__(self) -> str:
        items = ", ".join(i.item for i in self.ingredients)
        return f"{self.name} - Ingredients: {items} - Steps: {len(self.instructions)}"

    __repr__ = __str__

    def touch(self):
        self.updated_at = _now_iso()

    @staticmethod
    def from_dict(data):
        d = dict(data)
        return Recipe(
            name=d.get("name", ""),
            ingredients=[Ingredient.from_dict(ing) for ing in d.get("ingredients", [])],
            instructions=list(d.get("instructions", [])),
            id=d.get("id"),
            created_at=d.get("created_at"),
            updated_at=d.get("updated_at"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "instructions": self.instructions,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @staticmethod
    def _normalize_name(name: str) -> str:
        """Normalize an ingredient name for matching (case + basic plural handling)."""
        if not isinstance(name, str):
            return ""
        n = name.strip().lower()
        # basic plural -> singular heuristics
        if n.endswith('ies') and len(n) > 3:
            n = n[:-3] + 'y'
        elif n.endswith('oes') and len(n) > 3:  # tomatoes -> tomato
            n = n[:-3] + 'o'
        elif n.endswith('ses') and len(n) > 3:
            n = n[:-2]
        elif n.endswith('es') and len(n) > 2 and n[-3] not in 'aeiou':
            n = n[:-2]
        elif n.endswith('s') and not n.endswith('ss') and len(n) > 1:
            n = n[:-1]
        return n

    def ingredient_names(self) -> List[str]:
        return [ing.item for ing in self.ingredients]

    def missing_ingredients(self, available: List[Ingredient]) -> List[Dict[str, int]]:
        """Ingredients the stock cannot cover (case & simple plural-insensitive)."""
        stock: Dict[str, int] = {}
        for ing in available:
            key = self._normalize_name(ing.item)
            stock[key] = stock.get(key, 0) + int(ing.quantity)
        missing = []
        for ingredient in self.ingredients:
            have = stock.get(self._normalize_name(ingredient.item), 0)
            if have < ingredient.quantity:
                missing.append({
                    "item": ingredient.item,
                    "required": ingredient.quantity,
                    "have": have,
                })
        return missing

    def check_ingredients(self, available: List[Ingredient]) -> Tuple[bool, List[Dict[str, int]]]:
        """Return (available, missing) for the given stock."""
        missing = self.missing_ingredients(available)
        return not missing, missing
