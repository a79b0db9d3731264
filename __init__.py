"""
Django Recipebook - Headless recipe store.

A flat, ownership-gated store of recipe records.

Usage:
    from recipebook import cookbook, Cookbook

    result = cookbook.create_recipe(payload, requester_id=chef_id)
    if result.success:
        recipe = result.recipe

    cookbook.get_recipe_by_name("banitsa")              # case-insensitive
    cookbook.update_recipe(recipe.id, chef_id, {"description": "…"})
    cookbook.delete_recipe(recipe.id, chef_id)

    # Any RecipeStore can be injected
    from recipebook.adapters.memory import MemoryRecipeStore
    book = Cookbook(store=MemoryRecipeStore())
"""

from recipebook.exceptions import RecipeError
from recipebook.validators import is_valid_uuid


def __getattr__(name):
    """Lazy import to avoid AppRegistryNotReady errors."""
    if name in ("cookbook", "Cookbook"):
        from recipebook import service

        return getattr(service, name)
    if name in ("RecipeResult", "RecipeListResult"):
        from recipebook import results

        return getattr(results, name)
    if name in ("RecipeData", "RecipePayload", "RecipeStore"):
        from recipebook import protocols

        return getattr(protocols, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "cookbook",
    "Cookbook",
    "RecipeError",
    "RecipeResult",
    "RecipeListResult",
    "RecipeData",
    "RecipePayload",
    "RecipeStore",
    "is_valid_uuid",
]
__version__ = "0.1.0"
