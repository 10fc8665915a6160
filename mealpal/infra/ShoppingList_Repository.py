"""Shopping list repository (file persistence)."""
from pathlib import Path
from typing import Optional

from mealpal.domain.ShoppingList import ShoppingList
from mealpal.infra import paths
from mealpal.infra.json_store import load_json, atomic_write


class ShoppingListRepository:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else paths.SHOPPING_LIST_FILE

    def load(self) -> ShoppingList:
        data = load_json(self.path, list)
        return ShoppingList(data if isinstance(data, list) else [])

    def save(self, shopping_list: ShoppingList) -> None:
        atomic_write(self.path, shopping_list.to_dict())
