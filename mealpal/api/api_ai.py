import re
import json
import logging
from json import JSONDecodeError
from typing import Any, List, Optional

from openai import OpenAI, OpenAIError

from mealpal.utilities import config
from mealpal.utilities.constants import MEAL_SUGGESTIONS_PROMPT, RECIPE_INSTRUCTIONS_PROMPT, SUBSTITUTIONS_PROMPT
from mealpal.utilities.errors import AIServiceError, AIUnavailableError

logger = logging.getLogger(__name__)


# === Helper: Get OpenAI Client ===
def _get_openai_client():
    """Return an OpenAI client if OPENAI_API_KEY is set, otherwise None."""
    api_key = config.OPENAI_API_KEY
    if not api_key:
        return None
    return OpenAI(api_key=api_key)


def is_available() -> bool:
    return bool(config.OPENAI_API_KEY)


# === Text Cleaning Helpers ===
def _strip_code_fences(text: str) -> str:
    """Remove common markdown code fences and leading/trailing whitespace."""
    text = re.sub(r"```(?:json)?\n(.*?)```", r"\1", text, flags=re.S)
    text = re.sub(r"^```|```$", "", text)
    return text.strip()


def _remove_trailing_commas(text: str) -> str:
    """Remove common trailing commas in JSON-like text to help json.loads succeed."""
    return re.sub(r",\s*(\}|\])", r"\1", text)


def _extract_json_by_balancing(text: str) -> Optional[str]:
    """Extract the first JSON object/array by balancing braces/brackets."""
    start = None
    stack = []
    in_string = False
    escape = False

    for i, ch in enumerate(text):
        if ch == '"' and not escape:
            in_string = not in_string
        if in_string and ch == "\\" and not escape:
            escape = True
            continue
        else:
            escape = False

        if not in_string:
            if ch in "{[":
                if start is None:
                    start = i
                stack.append(ch)
            elif ch in "}]":
                if not stack:
                    continue
                opening = stack.pop()
                if (opening == "{" and ch != "}") or (opening == "[" and ch != "]"):
                    return None
                if not stack and start is not None:
                    return text[start:i + 1]
    return None


def parse_ai_json(raw: str) -> Any:
    """Decode model output that should be JSON, tolerating fences and trailing commas."""
    text = (raw or "").strip()
    if not text:
        raise AIServiceError("AI returned an empty response", raw=raw)
    try:
        return json.loads(text)
    except JSONDecodeError:
        cleaned = _remove_trailing_commas(_strip_code_fences(text))
        candidate = _extract_json_by_balancing(cleaned)
        if candidate:
            try:
                return json.loads(_remove_trailing_commas(candidate))
            except JSONDecodeError:
                logger.exception("Failed to decode extracted JSON from AI output")
    raise AIServiceError("AI output is not valid JSON", raw=raw)


def _ask(prompt: str) -> str:
    client = _get_openai_client()
    if client is None:
        raise AIUnavailableError("AI service is not configured (OPENAI_API_KEY missing)")
    try:
        response = client.responses.create(model=config.OPENAI_MODEL, input=prompt)
    except OpenAIError as e:
        logger.exception("OpenAI request failed")
        raise AIServiceError(f"AI request failed: {e}") from e
    return response.output_text or ""


def _as_list(parsed: Any, *keys: str) -> List[Any]:
    # Models sometimes wrap the array in an object
    if isinstance(parsed, dict):
        for key in keys:
            if isinstance(parsed.get(key), list):
                return parsed[key]
        return [parsed]
    if isinstance(parsed, list):
        return parsed
    raise AIServiceError("AI output has an unexpected shape", raw=json.dumps(parsed))


# === Public API ===
def get_meal_suggestions(ingredients: List[str]) -> List[dict]:
    """Recipe ideas from the model: [{name, ingredients, instructions}]."""
    raw = _ask(MEAL_SUGGESTIONS_PROMPT.format(ingredients=", ".join(ingredients)))
    return [r for r in _as_list(parse_ai_json(raw), "recipes", "suggestions") if isinstance(r, dict)]


def get_ingredient_substitutions(ingredient: str) -> List[dict]:
    """Substitutes from the model: [{name, ratio, notes}]."""
    raw = _ask(SUBSTITUTIONS_PROMPT.format(ingredient=ingredient))
    return [s for s in _as_list(parse_ai_json(raw), "substitutions") if isinstance(s, dict)]


def get_recipe_instructions(name: str, ingredients: List[str]) -> List[str]:
    """Cooking steps from the model for a named dish."""
    raw = _ask(RECIPE_INSTRUCTIONS_PROMPT.format(name=name, ingredients=", ".join(ingredients)))
    steps = []
    for step in _as_list(parse_ai_json(raw), "instructions", "steps"):
        if isinstance(step, dict):
            # {"step": 1, "instruction": "..."} style entries
            step = step.get("instruction") or step.get("text") or step.get("description")
        if isinstance(step, str) and step.strip():
            steps.append(step.strip())
    if not steps:
        raise AIServiceError("AI returned no instructions", raw=raw)
    return steps


__all__ = ['get_meal_suggestions', 'get_ingredient_substitutions', 'get_recipe_instructions', 'is_available',
           'parse_ai_json']
