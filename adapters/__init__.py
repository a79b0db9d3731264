"""
Recipebook Adapters.

Implementations of the RecipeStore protocol.
Adapters are imported lazily — the ORM store needs the app registry,
the memory store does not.
"""


def __getattr__(name):
    if name == "OrmRecipeStore":
        from recipebook.adapters.orm import OrmRecipeStore

        return OrmRecipeStore
    if name == "MemoryRecipeStore":
        from recipebook.adapters.memory import MemoryRecipeStore

        return MemoryRecipeStore
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "OrmRecipeStore",
    "MemoryRecipeStore",
]
