"""
Recipe Store Protocol.

Defines the interface the Cookbook uses to read and write recipes.
The store is a single ordered key-value table keyed by recipe id; it keeps
no secondary indexes, so every lookup other than by id is a full scan
over values().

Implementations:
    - OrmRecipeStore: durable table via the Django ORM
    - MemoryRecipeStore: process-local dict, for tests and standalone use
"""

from dataclasses import dataclass, fields
from typing import Protocol, runtime_checkable


# ══════════════════════════════════════════════════════════════
# DATA TYPES
# ══════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class RecipeData:
    """A stored recipe."""

    id: str
    recipe_name: str
    recipe_type: str
    description: str
    owner_name: str
    owner_id: str
    video_demonstration: str


@dataclass(frozen=True)
class RecipePayload:
    """
    Caller-supplied recipe fields.

    Used as-is on create (every field required) and as a patch on update
    (empty fields keep the stored value).
    """

    recipe_name: str = ""
    recipe_type: str = ""
    description: str = ""
    owner_name: str = ""
    video_demonstration: str = ""

    def missing_fields(self) -> list[str]:
        return [f.name for f in fields(self) if not getattr(self, f.name)]


# ══════════════════════════════════════════════════════════════
# PROTOCOL
# ══════════════════════════════════════════════════════════════


@runtime_checkable
class RecipeStore(Protocol):
    """
    Key-value storage for recipes.

    Every method is a single atomic map operation; the host serializes
    calls, so no locking is expected from implementations beyond that.
    """

    def get(self, recipe_id: str) -> RecipeData | None:
        """
        Return the recipe stored under recipe_id, or None.
        """
        ...

    def values(self) -> list[RecipeData]:
        """
        Return every stored recipe, in ascending key order.
        """
        ...

    def insert(self, recipe: RecipeData) -> None:
        """
        Insert recipe under recipe.id, replacing any existing record.
        """
        ...

    def remove(self, recipe_id: str) -> RecipeData | None:
        """
        Remove and return the recipe stored under recipe_id.

        Returns:
            The removed recipe, or None if nothing was stored there
        """
        ...
