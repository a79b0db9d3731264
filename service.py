"""
Recipebook Service - the Cookbook operations.

Reads are open to everyone; writes are gated on ownership. The caller's
identity (requester_id) becomes the recipe's owner_id on create and must
be presented again to update or delete it.

Usage:
    from recipebook import cookbook

    result = cookbook.create_recipe(
        {
            "recipeName": "Banitsa",
            "recipeType": "Bulgarian",
            "description": "Filo pastry with eggs and sirene",
            "ownerName": "Maria",
            "videoDemonstration": "https://example.com/banitsa",
        },
        requester_id=maria_id,
    )

    if result.success:
        print(result.recipe.id)
    else:
        print(f"{result.code}: {result.message}")

No operation raises: failures come back as results with a code and message.
Only a call with the wrong arguments raises, with the usual TypeError.
"""

import functools
import inspect
import logging
import uuid
from collections.abc import Callable
from dataclasses import replace

from recipebook.conf import empty_result_is_error, get_store_backend
from recipebook.exceptions import (
    EMPTY_RESULT,
    INCOMPLETE_INPUT,
    INTERNAL_FAILURE,
    INVALID_ID,
    NOT_FOUND,
    UNAUTHORIZED,
    RecipeError,
)
from recipebook.protocols.store import RecipeData, RecipePayload, RecipeStore
from recipebook.results import RecipeListResult, RecipeResult
from recipebook.serializers import parse_payload
from recipebook.validators import is_valid_uuid

logger = logging.getLogger(__name__)


def returns(result_cls, failure_message: str | Callable[..., str]):
    """
    Turn an operation's return value or RecipeError into a result.

    Anything else raised inside the operation is logged and reported as
    INTERNAL_FAILURE. failure_message is a format string, or a callable,
    fed with the operation's arguments.

    Arguments are bound before the call: a call with the wrong arguments
    raises TypeError to the caller like any other Python call.
    """

    def decorator(func):
        signature = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            bound = signature.bind(self, *args, **kwargs)
            bound.apply_defaults()
            try:
                value = func(*bound.args, **bound.kwargs)
            except RecipeError as e:
                return result_cls.fail(e)
            except Exception:
                logger.exception(f"{func.__name__} failed")
                if callable(failure_message):
                    message = failure_message(**bound.arguments)
                else:
                    message = failure_message.format(**bound.arguments)
                return result_cls.fail(RecipeError(INTERNAL_FAILURE, message))
            return result_cls.ok(value)

        return wrapper

    return decorator


class Cookbook:
    """
    Main API for Recipebook.

    Args:
        store: RecipeStore to read and write. Defaults to the configured
               STORE_BACKEND, resolved on first use.
    """

    is_valid_uuid = staticmethod(is_valid_uuid)

    def __init__(self, store: RecipeStore | None = None):
        self._store = store

    @property
    def store(self) -> RecipeStore:
        return self._store if self._store is not None else get_store_backend()

    # ══════════════════════════════════════════════════════════════
    # READS
    # ══════════════════════════════════════════════════════════════

    @returns(RecipeListResult, "Failed to get recipes")
    def get_all_recipes(self) -> list[RecipeData]:
        """Return every stored recipe."""
        return self._matches(
            self.store.values(), "There are no recipes at this moment."
        )

    @returns(RecipeResult, "Failed to get recipe with id: {recipe_id}!")
    def get_recipe_by_id(self, recipe_id: str) -> RecipeData:
        if not is_valid_uuid(recipe_id):
            raise RecipeError(INVALID_ID, "Invalid recipe ID", recipe_id=recipe_id)

        recipe = self.store.get(recipe_id)
        if recipe is None:
            raise RecipeError(
                NOT_FOUND,
                f"Recipe with the provided id: {recipe_id} has not been found!",
                recipe_id=recipe_id,
            )
        return recipe

    @returns(
        RecipeListResult,
        lambda name, **_: (
            f"Failed to retrieve recipes with the name of {str(name).lower()}!"
        ),
    )
    def get_recipe_by_name(self, name: str) -> list[RecipeData]:
        """Recipes whose name equals `name`, ignoring case."""
        wanted = name.lower()
        return self._matches(
            [r for r in self.store.values() if r.recipe_name.lower() == wanted],
            "There are no recipes with such a name at this moment.",
        )

    @returns(RecipeListResult, "Failed to retrieve recipes for owner with ID {owner_id}!")
    def get_owners_recipes_by_id(self, owner_id: str) -> list[RecipeData]:
        if not is_valid_uuid(owner_id):
            raise RecipeError(INVALID_ID, "Invalid owner ID", owner_id=owner_id)

        return self._matches(
            [r for r in self.store.values() if r.owner_id == owner_id],
            "There are no recipes available by this owner/chef.",
        )

    @returns(
        RecipeListResult, "Failed to retrieve recipes for owner with name {owner_name}!"
    )
    def get_recipes_by_owners_name(self, owner_name: str) -> list[RecipeData]:
        """
        Recipes whose owner name equals `owner_name` exactly.

        Owner names are display names, not identities: the result may span
        several owners.
        """
        return self._matches(
            [r for r in self.store.values() if r.owner_name == owner_name],
            "There are no recipes available by this owner/chef.",
        )

    @returns(
        RecipeListResult,
        lambda recipe_type, **_: (
            f"Failed to retrieve recipes who are from type of {str(recipe_type).lower()}!"
        ),
    )
    def get_recipes_by_type(self, recipe_type: str) -> list[RecipeData]:
        wanted = recipe_type.lower()
        return self._matches(
            [r for r in self.store.values() if r.recipe_type.lower() == wanted],
            "There are no recipes available from this type.",
        )

    # ══════════════════════════════════════════════════════════════
    # WRITES
    # ══════════════════════════════════════════════════════════════

    @returns(RecipeResult, "Failed to create recipe!")
    def create_recipe(
        self, payload: RecipePayload | dict, requester_id: str
    ) -> RecipeData:
        """
        Create a recipe owned by requester_id.

        Args:
            payload: Every field is required
            requester_id: Caller identity; stored as owner_id

        Returns:
            The stored recipe, with a freshly generated id
        """
        if not is_valid_uuid(requester_id):
            raise RecipeError(INVALID_ID, "Invalid owner ID", owner_id=requester_id)

        payload = parse_payload(payload)
        missing = payload.missing_fields()
        if missing:
            raise RecipeError(INCOMPLETE_INPUT, "Incomplete input data!", missing=missing)

        recipe = RecipeData(
            id=str(uuid.uuid4()),
            recipe_name=payload.recipe_name,
            recipe_type=payload.recipe_type,
            description=payload.description,
            owner_name=payload.owner_name,
            owner_id=requester_id,
            video_demonstration=payload.video_demonstration,
        )
        self.store.insert(recipe)

        logger.info(
            f"Created recipe {recipe.id} ({recipe.recipe_name})",
            extra={"recipe_id": recipe.id, "owner_id": requester_id},
        )
        return recipe

    @returns(RecipeResult, "Failed to update recipe with id: {recipe_id}!")
    def update_recipe(
        self, recipe_id: str, requester_id: str, payload: RecipePayload | dict
    ) -> RecipeData:
        """
        Overwrite the non-empty payload fields of an owned recipe.

        Empty fields keep their stored value; id and owner_id never change.
        """
        if not is_valid_uuid(recipe_id) or not is_valid_uuid(requester_id):
            raise RecipeError(
                INVALID_ID,
                "Invalid recipe or owner ID for updating the recipe.",
                recipe_id=recipe_id,
                owner_id=requester_id,
            )

        recipe = self.store.get(recipe_id)
        if recipe is None:
            raise RecipeError(
                NOT_FOUND,
                f"Failed to update recipe with id: {recipe_id}!",
                recipe_id=recipe_id,
            )

        self._check_owner(
            recipe, requester_id, "Only the owner of the recipe can update this recipe!"
        )

        payload = parse_payload(payload)

        updated = replace(
            recipe,
            recipe_name=payload.recipe_name or recipe.recipe_name,
            recipe_type=payload.recipe_type or recipe.recipe_type,
            description=payload.description or recipe.description,
            owner_name=payload.owner_name or recipe.owner_name,
            video_demonstration=payload.video_demonstration
            or recipe.video_demonstration,
        )
        self.store.insert(updated)

        logger.info(
            f"Updated recipe {recipe_id}",
            extra={"recipe_id": recipe_id, "owner_id": requester_id},
        )
        return updated

    @returns(RecipeResult, "Failed to delete recipe with id: {recipe_id}")
    def delete_recipe(self, recipe_id: str, requester_id: str) -> RecipeData:
        """
        Delete an owned recipe and return it.

        Ownership is checked before anything is removed; a refused delete
        leaves the record in place.
        """
        if not is_valid_uuid(recipe_id) or not is_valid_uuid(requester_id):
            raise RecipeError(
                INVALID_ID,
                "Invalid recipe or owner ID for deleting the recipe.",
                recipe_id=recipe_id,
                owner_id=requester_id,
            )

        recipe = self.store.get(recipe_id)
        if recipe is None:
            raise RecipeError(
                NOT_FOUND,
                f"Failed to delete recipe with id: {recipe_id}",
                recipe_id=recipe_id,
            )

        self._check_owner(recipe, requester_id, "Only the owner can delete the recipe!")

        removed = self.store.remove(recipe_id)
        if removed is None:
            raise RecipeError(
                NOT_FOUND,
                f"Failed to delete recipe with id: {recipe_id}",
                recipe_id=recipe_id,
            )

        logger.info(
            f"Deleted recipe {recipe_id}",
            extra={"recipe_id": recipe_id, "owner_id": requester_id},
        )
        return removed

    # ══════════════════════════════════════════════════════════════
    # HELPERS
    # ══════════════════════════════════════════════════════════════

    @staticmethod
    def _matches(recipes: list[RecipeData], empty_message: str) -> list[RecipeData]:
        if not recipes and empty_result_is_error():
            raise RecipeError(EMPTY_RESULT, empty_message)
        return recipes

    @staticmethod
    def _check_owner(recipe: RecipeData, requester_id: str, message: str) -> None:
        if recipe.owner_id != requester_id:
            logger.warning(
                f"Refused write on recipe {recipe.id}: requester is not the owner",
                extra={"recipe_id": recipe.id, "requester_id": requester_id},
            )
            raise RecipeError(
                UNAUTHORIZED, message, recipe_id=recipe.id, requester_id=requester_id
            )


cookbook = Cookbook()
