"""Configuration management for the MealPal backend."""
import os
from typing import Final, Optional
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# AI Configuration (key is optional; AI-backed endpoints answer 503 without it)
OPENAI_API_KEY: Final[Optional[str]] = os.getenv('OPENAI_API_KEY') or None
OPENAI_MODEL: Final[str] = os.getenv('OPENAI_MODEL', 'gpt-4o-mini')

# Inventory alerts
DEFAULT_LOW_STOCK_THRESHOLD: Final[int] = int(os.getenv('LOW_STOCK_THRESHOLD_DEFAULT', '1'))
LOW_STOCK_THRESHOLD: Final[dict[str, int]] = {
    "g": int(os.getenv('LOW_STOCK_THRESHOLD_G', '200')),
    "kg": int(os.getenv('LOW_STOCK_THRESHOLD_KG', '1')),
    "ml": int(os.getenv('LOW_STOCK_THRESHOLD_ML', '500')),
    "oz": int(os.getenv('LOW_STOCK_THRESHOLD_OZ', '4')),
    "cup": int(os.getenv('LOW_STOCK_THRESHOLD_CUPS', '1')),
    "piece": int(os.getenv('LOW_STOCK_THRESHOLD_PCS', '2')),
}
# Plural / long spellings share the threshold of their short form
LOW_STOCK_UNIT_ALIASES: Final[dict[str, str]] = {
    "gram": "g", "grams": "g", "cups": "cup", "pieces": "piece",
    "lb": "oz", "lbs": "oz", "pound": "oz", "pounds": "oz",
}

# Pagination
DEFAULT_PAGE_LIMIT: Final[int] = int(os.getenv('DEFAULT_PAGE_LIMIT', '10'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('MEALPAL_DATA_DIR', str(BASE_DIR / 'data'))).resolve()
VOCABULARY_FILE: Final[Optional[Path]] = (
    Path(os.environ['MEALPAL_VOCABULARY_FILE']) if os.getenv('MEALPAL_VOCABULARY_FILE') else None
)
