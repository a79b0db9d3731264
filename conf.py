"""
Recipebook Settings.

Supports two formats (dict takes priority):

    # Option 1: Dict
    RECIPEBOOK = {
        "STORE_BACKEND": "recipebook.adapters.memory.MemoryRecipeStore",
        "EMPTY_RESULT_IS_ERROR": False,
    }

    # Option 2: Flat
    RECIPEBOOK_STORE_BACKEND = "recipebook.adapters.memory.MemoryRecipeStore"
    RECIPEBOOK_EMPTY_RESULT_IS_ERROR = False

All settings have sensible defaults — zero configuration required.
"""

import threading

from django.conf import settings


# ── Defaults ──

DEFAULTS = {
    "STORE_BACKEND": "recipebook.adapters.orm.OrmRecipeStore",
    # Queries with zero matches fail with EMPTY_RESULT instead of
    # succeeding with an empty list.
    "EMPTY_RESULT_IS_ERROR": True,
}


# ── Accessors ──

_sentinel = object()


def get_setting(name, default=_sentinel):
    """
    Get a recipebook setting.

    Looks up in order:
    1. RECIPEBOOK dict (e.g. RECIPEBOOK = {"STORE_BACKEND": "..."})
    2. Flat setting (e.g. RECIPEBOOK_STORE_BACKEND = "...")
    3. DEFAULTS
    """
    recipebook_dict = getattr(settings, "RECIPEBOOK", {})
    if name in recipebook_dict:
        return recipebook_dict[name]

    flat_value = getattr(settings, f"RECIPEBOOK_{name}", _sentinel)
    if flat_value is not _sentinel:
        return flat_value

    if default is not _sentinel:
        return default

    return DEFAULTS.get(name)


def empty_result_is_error() -> bool:
    return bool(get_setting("EMPTY_RESULT_IS_ERROR"))


_store_backend_lock = threading.Lock()
_store_backend_instance = None


def get_store_backend():
    """
    Return the configured store backend instance.

    Built once from the STORE_BACKEND dotted path and shared afterwards,
    so a MemoryRecipeStore keeps its records for the life of the process.
    """
    global _store_backend_instance

    if _store_backend_instance is None:
        with _store_backend_lock:
            if _store_backend_instance is None:  # double-checked
                from django.utils.module_loading import import_string

                path = get_setting("STORE_BACKEND") or DEFAULTS["STORE_BACKEND"]
                _store_backend_instance = import_string(path)()

    return _store_backend_instance


def reset_store_backend() -> None:
    """Reset singleton (for tests)."""
    global _store_backend_instance
    _store_backend_instance = None
