"""
Recipebook Models.

- Recipe: the durable recipe table (one row per recipe, keyed by UUID)
"""

from recipebook.models.recipe import Recipe

__all__ = [
    "Recipe",
]
