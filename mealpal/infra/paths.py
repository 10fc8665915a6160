from mealpal.utilities.config import DATA_DIR

# Centralized paths for data files (single source of truth)
INVENTORY_FILE = DATA_DIR / 'inventory.json'
RECIPES_FILE = DATA_DIR / 'recipes.json'
SHOPPING_LIST_FILE = DATA_DIR / 'shopping_list.json'
PLAN_FILE = DATA_DIR / 'meal_plan.json'

__all__ = ['DATA_DIR', 'INVENTORY_FILE', 'RECIPES_FILE', 'SHOPPING_LIST_FILE', 'PLAN_FILE']
