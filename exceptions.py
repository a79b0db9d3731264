"""
Recipebook Exceptions.

All recipebook errors are wrapped in RecipeError for consistent handling.
The service never lets one escape: each operation turns it into a failed
result carrying the code and a human-readable message.
"""

from typing import Any


class RecipeError(Exception):
    """
    Base exception for all Recipebook errors.

    Usage:
        raise RecipeError('NOT_FOUND', 'Recipe has not been found!', recipe_id=rid)

    Attributes:
        code: Error code (INVALID_ID, NOT_FOUND, UNAUTHORIZED, etc.)
        message: Human-readable message shown to the caller
        details: Additional context as keyword arguments
    """

    def __init__(self, code: str, message: str | None = None, **details: Any):
        self.code = code
        self.message = message or code
        self.details = details
        super().__init__(self.message)

    def as_dict(self) -> dict:
        """Return error as dictionary for host responses."""
        return {"code": self.code, "message": self.message, **self.details}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"RecipeError({self.code}: {details_str})"
        return f"RecipeError({self.code})"


# Error codes
INVALID_ID = "INVALID_ID"  # Identifier is not in UUID format
NOT_FOUND = "NOT_FOUND"  # No recipe stored under the id
EMPTY_RESULT = "EMPTY_RESULT"  # Query matched nothing
INCOMPLETE_INPUT = "INCOMPLETE_INPUT"  # Required payload field missing/empty
UNAUTHORIZED = "UNAUTHORIZED"  # Caller is not the recipe owner
INTERNAL_FAILURE = "INTERNAL_FAILURE"  # Unexpected fault, mapped to a generic message
