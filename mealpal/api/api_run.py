from fastapi import FastAPI, Query
from typing import Optional
import logging

from mealpal.events.web_observers import start as start_event_observers, get_events as get_web_events
from mealpal.utilities.config import LOG_LEVEL

# Routers
from mealpal.api.routes import commands, inventory, recipes, shopping_list, meal_plan, suggestions

# Logging
logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("mealpal_app")

# Initialize FastAPI app
app = FastAPI(title="MealPal Kitchen Assistant API")


@app.on_event("startup")
def _startup_web_observers():
    """Register event bus subscribers for inventory alerts when the app starts."""
    start_event_observers()
    logger.info("Web observers for inventory events started")


# -------------------- API: Inventory Alerts (polled by frontend) --------------------
# Registered before the inventory router so '/alerts' is not taken as an item name.
@app.get('/api/inventory/alerts')
def api_inventory_alerts(
    since: Optional[int] = Query(default=None, description="Return events with id greater than this value")
):
    """
    Return recent inventory events (low stock, depleted, category cleared).

    Client polling strategy:
        1. First call without 'since' to load the current backlog.
        2. Store 'next_cursor' from response.
        3. Subsequent polls: /api/inventory/alerts?since=<next_cursor>
    """
    return get_web_events(since)


@app.get('/api/health')
def health():
    return {"status": "ok"}


# Include routers
app.include_router(commands.router)
app.include_router(inventory.router)
app.include_router(recipes.router)
app.include_router(shopping_list.router)
app.include_router(meal_plan.router)
app.include_router(suggestions.router)
