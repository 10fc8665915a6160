import pytest

from mealpal.infra import paths


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    """Point every repository at a throwaway data directory."""
    monkeypatch.setattr(paths, "INVENTORY_FILE", tmp_path / "inventory.json")
    monkeypatch.setattr(paths, "RECIPES_FILE", tmp_path / "recipes.json")
    monkeypatch.setattr(paths, "SHOPPING_LIST_FILE", tmp_path / "shopping_list.json")
    monkeypatch.setattr(paths, "PLAN_FILE", tmp_path / "meal_plan.json")
    return tmp_path


@pytest.fixture
def pancakes():
    return {
        "name": "Pancakes",
        "ingredients": [
            {"item": "flour", "quantity": 2, "unit": "cup"},
            {"item": "eggs", "quantity": 2},
            {"item": "milk", "quantity": 1, "unit": "cup"},
        ],
        "instructions": ["Mix everything", "Fry in a pan"],
    }
