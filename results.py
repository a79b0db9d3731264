"""
Recipebook Result Types.

Every Cookbook operation returns one of these instead of raising.

On success: recipe / recipes holds the data
On failure: code and message describe what went wrong
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from recipebook.exceptions import RecipeError
    from recipebook.protocols.store import RecipeData


@dataclass
class RecipeResult:
    """Outcome of an operation producing a single recipe."""

    success: bool
    recipe: RecipeData | None = None
    code: str | None = None
    message: str | None = None

    @classmethod
    def ok(cls, recipe: RecipeData) -> RecipeResult:
        return cls(success=True, recipe=recipe)

    @classmethod
    def fail(cls, error: RecipeError) -> RecipeResult:
        return cls(success=False, code=error.code, message=error.message)

    def as_dict(self) -> dict:
        """
        Tagged form for hosts: {"Ok": {...}} or {"Err": "message"}.
        """
        if not self.success:
            return {"Err": self.message}

        from recipebook.serializers import RecipeSerializer

        return {"Ok": RecipeSerializer(self.recipe).data}


@dataclass
class RecipeListResult:
    """Outcome of a query producing a list of recipes."""

    success: bool
    recipes: list[RecipeData] = field(default_factory=list)
    code: str | None = None
    message: str | None = None

    @classmethod
    def ok(cls, recipes: list[RecipeData]) -> RecipeListResult:
        return cls(success=True, recipes=list(recipes))

    @classmethod
    def fail(cls, error: RecipeError) -> RecipeListResult:
        return cls(success=False, code=error.code, message=error.message)

    @property
    def is_empty(self) -> bool:
        return len(self.recipes) == 0

    def as_dict(self) -> dict:
        if not self.success:
            return {"Err": self.message}

        from recipebook.serializers import RecipeSerializer

        return {"Ok": RecipeSerializer(self.recipes, many=True).data}
