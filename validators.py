"""
Identifier validation.
"""

import re

UUID_PATTERN = re.compile(r"^[\da-f]{8}-([\da-f]{4}-){3}[\da-f]{12}$", re.IGNORECASE)


def is_valid_uuid(value) -> bool:
    """
    Check that a value looks like a UUID (8-4-4-4-12 hex digits).

    Purely syntactic: says nothing about whether the id exists in the store.
    The version nibble is not checked.
    """
    if not isinstance(value, str):
        return False
    return UUID_PATTERN.fullmatch(value) is not None
