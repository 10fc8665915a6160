import logging
from datetime import date, timedelta
from pathlib import Path
from typing import Dict, List, Optional

from mealpal.domain.Plan import Plan, DAYS
from mealpal.infra import paths
from mealpal.infra.json_store import load_json, atomic_write

logger = logging.getLogger(__name__)


class PlanRepository:
    """Meal plan store: ISO date string -> ordered list of recipe names."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else paths.PLAN_FILE

    def _load(self) -> Dict[str, List[str]]:
        store = load_json(self.path, dict)
        if not isinstance(store, dict):
            logger.error("Plan file %s does not hold an object; ignoring it", self.path)
            return {}
        return store

    def _save(self, store: Dict[str, List[str]]) -> None:
        # Drop empty days so the file only holds scheduled meals
        atomic_write(self.path, {k: v for k, v in sorted(store.items()) if v})

    def get_day(self, day: date) -> List[str]:
        return list(self._load().get(day.isoformat(), []))

    def plan_recipe(self, name: str, day: date) -> List[str]:
        """Schedule a recipe on a day; a recipe appears at most once per day."""
        store = self._load()
        meals = store.setdefault(day.isoformat(), [])
        if name.lower() not in (m.lower() for m in meals):
            meals.append(name)
            self._save(store)
        return list(meals)

    def remove_recipe(self, name: str, day: date) -> bool:
        store = self._load()
        meals = store.get(day.isoformat(), [])
        kept = [m for m in meals if m.lower() != name.lower()]
        if len(kept) == len(meals):
            return False
        store[day.isoformat()] = kept
        self._save(store)
        return True

    def get_week_plan(self, week_number: int, year: Optional[int] = None) -> Plan:
        if year is None:
            year = date.today().isocalendar().year
        store = self._load()
        monday = date.fromisocalendar(year, week_number, 1)
        meals = {
            name: list(store.get((monday + timedelta(days=i)).isoformat(), []))
            for i, name in enumerate(DAYS)
        }
        return Plan(week_number, year, meals)

    def reset_week(self, week_number: int, year: Optional[int] = None, today: Optional[date] = None) -> int:
        """Clear today and future days of the week; past days are left untouched.

        Returns the number of days cleared.
        """
        if year is None:
            year = date.today().isocalendar().year
        today = today or date.today()
        store = self._load()
        monday = date.fromisocalendar(year, week_number, 1)
        cleared = 0
        for i in range(7):
            d = monday + timedelta(days=i)
            if d < today:
                continue
            if store.pop(d.isoformat(), None):
                cleared += 1
        self._save(store)
        return cleared
