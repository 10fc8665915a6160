import logging

import uvicorn
from mealpal.api.api_run import app
from mealpal.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL

logger = logging.getLogger("mealpal_app")


if __name__ == "__main__":
    local_url = f"http://localhost:{APP_PORT}"
    logger.info("MealPal API starting on %s (Press CTRL+C to quit)", local_url)
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())
