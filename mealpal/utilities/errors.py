"""Exception hierarchy shared by services and routes.

Services raise these; the API layer translates them into HTTP responses.
"""
from typing import List, Optional


class MealPalError(Exception):
    """Base class for all application errors."""


class CommandNotRecognized(MealPalError):
    """Raised when a free-text command matches none of the interpreter rules."""

    def __init__(self, command: str):
        super().__init__("Command not recognized")
        self.command = command


class InvalidInputError(MealPalError, ValueError):
    pass


class DuplicateError(InvalidInputError):
    pass


class NotFoundError(MealPalError, LookupError):
    pass


class InsufficientQuantityError(MealPalError, ValueError):
    def __init__(self, item: str, available: int):
        super().__init__(f"Insufficient quantity. Only {available} available")
        self.item = item
        self.available = available


class AIUnavailableError(MealPalError):
    """No AI client is configured (OPENAI_API_KEY missing)."""


class AIServiceError(MealPalError):
    def __init__(self, message: str, raw: Optional[str] = None):
        super().__init__(message)
        self.raw = raw


__all__: List[str] = [
    'MealPalError', 'CommandNotRecognized', 'InvalidInputError', 'DuplicateError',
    'NotFoundError', 'InsufficientQuantityError', 'AIUnavailableError', 'AIServiceError',
]
