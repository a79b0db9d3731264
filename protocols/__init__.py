"""
Recipebook Protocols.

Defines the storage interface and the data types that cross it.
"""

from recipebook.protocols.store import RecipeData, RecipePayload, RecipeStore

__all__ = [
    # Store Protocol
    "RecipeStore",
    # Data types
    "RecipeData",
    "RecipePayload",
]
