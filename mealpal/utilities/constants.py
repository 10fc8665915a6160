from typing import Final

# Inventory / recipe limits
MAX_NAME_LENGTH: Final[int] = 100
MAX_QUANTITY: Final[int] = 1_000_000  # exclusive
MAX_INSTRUCTION_LENGTH: Final[int] = 500
NAME_PATTERN: Final[str] = r'^[a-zA-Z0-9\s-]+$'

# Unit words recognised inside ingredient lists ("2 cups flour, 1 egg")
INGREDIENT_UNITS: Final[tuple[str, ...]] = (
    "cups", "cup", "tbsps", "tbsp", "tsps", "tsp", "g", "oz", "ml", "pieces", "piece", "whole",
)

# Unit words recognised around an inventory quantity ("add 2 cups flour")
QUANTITY_UNITS: Final[tuple[str, ...]] = (
    "cups", "cup", "grams", "gram", "g", "kg", "oz", "pounds", "pound", "lb", "lbs", "pieces", "piece",
)

# Category -> keywords matched against inventory item names
CATEGORY_KEYWORDS: Final[dict[str, tuple[str, ...]]] = {
    "dairy": ("milk", "cheese", "yogurt", "cream", "butter"),
    "meat": ("chicken", "beef", "pork", "fish", "meat"),
    "produce": ("fruit", "vegetable", "tomato", "lettuce", "carrot", "onion"),
    "pantry": ("flour", "sugar", "rice", "pasta", "oil"),
}

RECIPE_HINTS: Final[tuple[str, ...]] = (
    "create recipe for [name] with [ingredients] instructions: [steps]",
    "find recipes with [ingredient]",
    "delete recipe [name]",
    "what can I make with [ingredients]",
)

INVENTORY_HINTS: Final[tuple[str, ...]] = (
    "add [quantity] [item] to inventory",
    "check inventory",
    "remove [quantity] [item]",
    "clear all [category] from inventory",
)

# Shown when a command mentions neither recipes nor inventory
GENERAL_HINTS: Final[tuple[str, ...]] = (
    "Try: 'what can I make with 2 eggs and 1 tomato'",
    "Try: 'clear all dairy from inventory'",
    "Try: 'add 2 cups flour'",
    "Try: 'check flour stock'",
    "Try: 'remove 1 egg'",
)

# Words ignored by free-text recipe search
SEARCH_STOPWORDS: Final[frozenset[str]] = frozenset({
    "recipe", "recipes", "with", "for", "a", "an", "the", "and", "some", "me",
})

SUBSTITUTIONS_PROMPT: Final[str] = (
    "Suggest substitutions for {ingredient} in cooking. Return the response as a JSON array "
    "of substitutions, where each substitution has: name, ratio, and notes."
)

MEAL_SUGGESTIONS_PROMPT: Final[str] = (
    "Generate recipe suggestions using these ingredients: {ingredients}. Return the response as a "
    "JSON array of recipes, where each recipe has: name, ingredients (array of strings), and "
    "instructions (array of steps)."
)

RECIPE_INSTRUCTIONS_PROMPT: Final[str] = (
    "Generate detailed cooking instructions for {name} using these ingredients: {ingredients}. "
    "Return the response as a JSON array of instruction steps."
)
