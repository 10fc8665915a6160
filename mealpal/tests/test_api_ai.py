from datetime import date
from types import SimpleNamespace

import pytest

from mealpal.api import api_ai
from mealpal.infra.Plan_Repository import PlanRepository
from mealpal.logic.inventory.service import InventoryService
from mealpal.logic.recipes.service import RecipeService
from mealpal.logic.suggestions.service import generate_meal_plan, generate_suggestions
from mealpal.utilities import config
from mealpal.utilities.errors import AIServiceError, AIUnavailableError, InvalidInputError


def test_parse_plain_json():
    assert api_ai.parse_ai_json('[{"name": "margarine"}]') == [{"name": "margarine"}]


def test_parse_fenced_json_with_trailing_commas():
    raw = 'Here you go:\n```json\n[{"name": "oil", "ratio": "3:4",},]\n```\nEnjoy!'
    assert api_ai.parse_ai_json(raw) == [{"name": "oil", "ratio": "3:4"}]


@pytest.mark.parametrize("raw", ["", "no json here", "{broken"])
def test_parse_garbage_raises(raw):
    with pytest.raises(AIServiceError):
        api_ai.parse_ai_json(raw)


class _FakeResponses:
    def __init__(self, text):
        self.text = text
        self.prompts = []

    def create(self, model, input):
        self.prompts.append((model, input))
        return SimpleNamespace(output_text=self.text)


def _fake_client(monkeypatch, text):
    responses = _FakeResponses(text)
    monkeypatch.setattr(api_ai, "_get_openai_client", lambda: SimpleNamespace(responses=responses))
    return responses


def test_substitutions_unwrap_object(monkeypatch):
    responses = _fake_client(monkeypatch, '{"substitutions": [{"name": "margarine", "ratio": "1:1", "notes": ""}]}')
    subs = api_ai.get_ingredient_substitutions("butter")
    assert subs == [{"name": "margarine", "ratio": "1:1", "notes": ""}]
    model, prompt = responses.prompts[0]
    assert model == config.OPENAI_MODEL
    assert "butter" in prompt


def test_missing_key_is_unavailable(monkeypatch):
    monkeypatch.setattr(config, "OPENAI_API_KEY", None)
    assert not api_ai.is_available()
    with pytest.raises(AIUnavailableError):
        api_ai.get_meal_suggestions(["eggs"])


def test_suggestions_combine_database_and_ai(pancakes):
    RecipeService().add_recipe(pancakes)
    idea = {"name": "Frittata", "ingredients": ["eggs"], "instructions": ["Bake"]}
    result = generate_suggestions(["eggs"], ai=lambda ingredients: [idea])
    assert [s["source"] for s in result] == ["database", "ai"]
    assert result[0]["name"] == "Pancakes"
    assert result[1]["name"] == "Frittata"


def test_suggestions_survive_ai_failure():
    def broken(ingredients):
        raise AIServiceError("bad output")

    assert generate_suggestions(["eggs"], ai=broken) == []


def test_recipe_instructions_prompt_and_steps(monkeypatch):
    responses = _fake_client(monkeypatch, '```json\n["Whisk the eggs", {"step": 2, "instruction": "Fry gently"}]\n```')
    steps = api_ai.get_recipe_instructions("Omelette", ["eggs", "butter"])
    assert steps == ["Whisk the eggs", "Fry gently"]
    _, prompt = responses.prompts[0]
    assert "Omelette" in prompt
    assert "eggs, butter" in prompt


def test_recipe_instructions_empty_answer_is_an_error(monkeypatch):
    _fake_client(monkeypatch, '{"instructions": []}')
    with pytest.raises(AIServiceError):
        api_ai.get_recipe_instructions("Omelette", ["eggs"])


def test_meal_plan_needs_ingredients():
    with pytest.raises(InvalidInputError, match="No ingredients available"):
        generate_meal_plan(ai=lambda ingredients: [])


def test_meal_plan_fills_days_from_suggestions(pancakes):
    RecipeService().add_recipe(pancakes)
    for item in ("flour", "eggs", "milk"):
        InventoryService().add_item(item, 3)
    idea = {"name": "Frittata", "ingredients": ["eggs"], "instructions": ["Bake"]}
    start = date(2024, 3, 4)

    plan = generate_meal_plan(start=start, days=3, ai=lambda ingredients: [idea])
    assert [d["date"] for d in plan["days"]] == ["2024-03-04", "2024-03-05", "2024-03-06"]
    assert [d["recipes"] for d in plan["days"]] == [["Pancakes"], ["Frittata"], []]
    assert PlanRepository().get_day(date(2024, 3, 5)) == ["Frittata"]


def test_meal_plan_is_empty_when_ai_fails():
    InventoryService().add_item("eggs", 3)

    def broken(ingredients):
        raise AIServiceError("bad output")

    plan = generate_meal_plan(start=date(2024, 3, 4), days=2, ai=broken)
    assert plan["suggestions"] == []
    assert [d["recipes"] for d in plan["days"]] == [[], []]
