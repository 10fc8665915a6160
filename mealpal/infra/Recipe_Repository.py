"""Recipe repository (file persistence)."""
import logging
from pathlib import Path
from typing import List, Optional

from mealpal.domain.Recipe import Recipe
from mealpal.infra import paths
from mealpal.infra.json_store import load_json, atomic_write

logger = logging.getLogger(__name__)


class RecipeRepository:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else paths.RECIPES_FILE

    def load_all(self) -> List[Recipe]:
        data = load_json(self.path, list)
        if not isinstance(data, list):
            logger.error("Recipes file %s does not hold a list; ignoring it", self.path)
            return []
        return [Recipe.from_dict(entry) for entry in data if isinstance(entry, dict)]

    def save_all(self, recipes: List[Recipe]) -> None:
        atomic_write(self.path, [r.to_dict() for r in recipes])
