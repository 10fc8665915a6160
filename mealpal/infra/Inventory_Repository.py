"""Inventory repository (file persistence)."""
import logging
from pathlib import Path
from typing import Optional

from mealpal.domain.Inventory import Inventory
from mealpal.infra import paths
from mealpal.infra.json_store import load_json, atomic_write

logger = logging.getLogger(__name__)


class InventoryRepository:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else paths.INVENTORY_FILE

    def load(self) -> Inventory:
        data = load_json(self.path, dict)
        if not isinstance(data, dict):
            logger.error("Inventory file %s does not hold an object; ignoring it", self.path)
            data = {}
        return Inventory.from_dict(data)

    def save(self, inventory: Inventory) -> None:
        atomic_write(self.path, inventory.to_dict())
