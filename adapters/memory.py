"""
Memory Recipe Store -- keeps recipes in a process-local dict.

Use this adapter for development or testing when no database is wanted.
Records live as long as the store instance does.

Configuration:
    RECIPEBOOK = {
        "STORE_BACKEND": "recipebook.adapters.memory.MemoryRecipeStore",
    }
"""

from __future__ import annotations

from recipebook.protocols.store import RecipeData


class MemoryRecipeStore:
    """
    In-memory implementation of the RecipeStore protocol.

    values() is returned in key order, matching the ORM store, so the
    two are interchangeable in tests.
    """

    def __init__(self, recipes: list[RecipeData] | None = None):
        self._recipes: dict[str, RecipeData] = {}
        for recipe in recipes or []:
            self.insert(recipe)

    def __len__(self) -> int:
        return len(self._recipes)

    def get(self, recipe_id: str) -> RecipeData | None:
        return self._recipes.get(recipe_id)

    def values(self) -> list[RecipeData]:
        return [self._recipes[key] for key in sorted(self._recipes)]

    def insert(self, recipe: RecipeData) -> None:
        self._recipes[recipe.id] = recipe

    def remove(self, recipe_id: str) -> RecipeData | None:
        return self._recipes.pop(recipe_id, None)
