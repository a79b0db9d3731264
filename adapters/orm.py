"""
ORM Recipe Store.

Implements RecipeStore on top of the recipebook.Recipe model, so records
survive process restarts.

Configuration (default):
    RECIPEBOOK = {
        "STORE_BACKEND": "recipebook.adapters.orm.OrmRecipeStore",
    }
"""

import logging

from recipebook.models import Recipe
from recipebook.protocols.store import RecipeData

logger = logging.getLogger(__name__)


class OrmRecipeStore:
    """
    Durable implementation of the RecipeStore protocol.

    Usage:
        store = OrmRecipeStore()
        store.insert(recipe)
        store.get(recipe.id)
    """

    def get(self, recipe_id: str) -> RecipeData | None:
        row = Recipe.objects.filter(pk=recipe_id).first()
        return row.to_data() if row else None

    def values(self) -> list[RecipeData]:
        return [row.to_data() for row in Recipe.objects.order_by("id")]

    def insert(self, recipe: RecipeData) -> None:
        """Insert or replace the row at recipe.id."""
        Recipe.objects.update_or_create(
            id=recipe.id,
            defaults={
                "recipe_name": recipe.recipe_name,
                "recipe_type": recipe.recipe_type,
                "description": recipe.description,
                "owner_name": recipe.owner_name,
                "owner_id": recipe.owner_id,
                "video_demonstration": recipe.video_demonstration,
            },
        )

    def remove(self, recipe_id: str) -> RecipeData | None:
        row = Recipe.objects.filter(pk=recipe_id).first()
        if row is None:
            return None
        data = row.to_data()
        row.delete()

        logger.debug("Removed recipe row %s", recipe_id)
        return data
