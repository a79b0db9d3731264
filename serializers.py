"""
Recipebook Serializers.

Marshal recipes to and from the camelCase shape callers exchange:

    {
        "id": "…",
        "recipeName": "Banitsa",
        "recipeType": "Bulgarian",
        "description": "…",
        "ownerName": "Maria",
        "ownerId": "…",
        "videoDemonstration": "https://…",
    }
"""

from collections.abc import Mapping

from rest_framework import serializers

from recipebook.exceptions import INCOMPLETE_INPUT, RecipeError
from recipebook.protocols.store import RecipePayload


class StrictCharField(serializers.CharField):
    """
    CharField that only accepts str input.

    DRF's CharField stringifies ints and floats; recipe fields are text,
    so 5 or 1.5 is rejected rather than stored as "5".
    """

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail("invalid")
        return super().to_internal_value(data)


class RecipeSerializer(serializers.Serializer):
    """Read-only serializer for RecipeData or Recipe model instances."""

    id = serializers.CharField(read_only=True)
    recipeName = serializers.CharField(source="recipe_name", read_only=True)
    recipeType = serializers.CharField(source="recipe_type", read_only=True)
    description = serializers.CharField(read_only=True)
    ownerName = serializers.CharField(source="owner_name", read_only=True)
    ownerId = serializers.CharField(source="owner_id", read_only=True)
    videoDemonstration = serializers.CharField(
        source="video_demonstration", read_only=True
    )


class RecipePayloadSerializer(serializers.Serializer):
    """
    Input serializer for create/update payloads.

    Every field is optional and may be blank; whether a field is required
    is decided by the operation, not here. Text is kept verbatim.
    """

    recipeName = StrictCharField(
        source="recipe_name",
        default="",
        allow_blank=True,
        allow_null=True,
        trim_whitespace=False,
    )
    recipeType = StrictCharField(
        source="recipe_type",
        default="",
        allow_blank=True,
        allow_null=True,
        trim_whitespace=False,
    )
    description = StrictCharField(
        default="",
        allow_blank=True,
        allow_null=True,
        trim_whitespace=False,
    )
    ownerName = StrictCharField(
        source="owner_name",
        default="",
        allow_blank=True,
        allow_null=True,
        trim_whitespace=False,
    )
    videoDemonstration = StrictCharField(
        source="video_demonstration",
        default="",
        allow_blank=True,
        allow_null=True,
        trim_whitespace=False,
    )

    def to_payload(self) -> RecipePayload:
        return RecipePayload(
            **{key: value or "" for key, value in self.validated_data.items()}
        )


def parse_payload(data) -> RecipePayload:
    """
    Coerce a RecipePayload or a camelCase mapping into a RecipePayload.

    Fields that are not text (numbers, lists, dicts) or that contain a
    null character are rejected and named in the message.

    Raises:
        RecipeError: INCOMPLETE_INPUT if the data cannot be read as a payload
    """
    if isinstance(data, RecipePayload):
        return data
    if data is None:
        return RecipePayload()
    if not isinstance(data, Mapping):
        raise RecipeError(INCOMPLETE_INPUT, "Invalid input data!")

    serializer = RecipePayloadSerializer(data=dict(data))
    if not serializer.is_valid():
        raise RecipeError(
            INCOMPLETE_INPUT,
            f"Invalid input data: {', '.join(sorted(serializer.errors))}!",
            errors=dict(serializer.errors),
        )
    return serializer.to_payload()
