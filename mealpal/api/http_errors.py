"""Translate application errors into HTTPException."""
from fastapi import HTTPException

from mealpal.utilities.errors import (
    AIServiceError, AIUnavailableError, InsufficientQuantityError, InvalidInputError,
    MealPalError, NotFoundError,
)

_STATUS = (
    (NotFoundError, 404),
    (InvalidInputError, 400),
    (InsufficientQuantityError, 400),
    (AIUnavailableError, 503),
    (AIServiceError, 502),
)


def status_for(error: MealPalError) -> int:
    for cls, status in _STATUS:
        if isinstance(error, cls):
            return status
    return 500


def to_http(error: MealPalError) -> HTTPException:
    return HTTPException(status_code=status_for(error), detail=str(error))
