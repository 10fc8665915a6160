"""Page slicing shared by list endpoints."""
import math
from typing import Any, Dict, List

from mealpal.utilities.config import DEFAULT_PAGE_LIMIT
from mealpal.utilities.errors import InvalidInputError


def paginate(items: List[Any], page: int = 1, limit: int = DEFAULT_PAGE_LIMIT) -> Dict[str, Any]:
    """Return ``{"items": [...], "pagination": {...}}`` for a 1-based page."""
    if page < 1:
        raise InvalidInputError('Page must be greater than 0')
    if limit < 1:
        raise InvalidInputError('Limit must be greater than 0')
    total_items = len(items)
    total_pages = math.ceil(total_items / limit)
    start = (page - 1) * limit
    return {
        "items": items[start:start + limit],
        "pagination": {
            "page": page,
            "limit": limit,
            "totalItems": total_items,
            "totalPages": total_pages,
            "hasNextPage": page < total_pages,
            "hasPrevPage": page > 1,
        },
    }


__all__ = ['paginate']
