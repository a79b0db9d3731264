"""
Tests for result types, serializers and RecipeError.
"""

import uuid

import pytest

from recipebook import RecipeError, RecipePayload
from recipebook.protocols import RecipeData
from recipebook.results import RecipeListResult, RecipeResult
from recipebook.serializers import RecipeSerializer, parse_payload


@pytest.fixture
def recipe():
    return RecipeData(
        id=str(uuid.uuid4()),
        recipe_name="Kavarma",
        recipe_type="Bulgarian",
        description="Pork and vegetables stewed in a clay pot.",
        owner_name="Maria",
        owner_id=str(uuid.uuid4()),
        video_demonstration="https://example.com/videos/kavarma",
    )


class TestRecipeSerializer:
    def test_camel_case_shape(self, recipe):
        data = RecipeSerializer(recipe).data

        assert data == {
            "id": recipe.id,
            "recipeName": "Kavarma",
            "recipeType": "Bulgarian",
            "description": "Pork and vegetables stewed in a clay pot.",
            "ownerName": "Maria",
            "ownerId": recipe.owner_id,
            "videoDemonstration": "https://example.com/videos/kavarma",
        }


class TestParsePayload:
    def test_camel_case_mapping(self):
        payload = parse_payload(
            {
                "recipeName": "Kavarma",
                "recipeType": "Bulgarian",
                "description": "Stew",
                "ownerName": "Maria",
                "videoDemonstration": "https://example.com",
            }
        )

        assert payload == RecipePayload(
            recipe_name="Kavarma",
            recipe_type="Bulgarian",
            description="Stew",
            owner_name="Maria",
            video_demonstration="https://example.com",
        )
        assert payload.missing_fields() == []

    def test_absent_and_null_fields_become_empty(self):
        payload = parse_payload({"recipeName": "Kavarma", "ownerName": None})

        assert payload.owner_name == ""
        assert payload.missing_fields() == [
            "recipe_type",
            "description",
            "owner_name",
            "video_demonstration",
        ]

    def test_whitespace_is_kept(self):
        assert parse_payload({"description": "  slow  "}).description == "  slow  "

    def test_payload_passes_through(self):
        payload = RecipePayload(recipe_name="Kavarma")

        assert parse_payload(payload) is payload

    def test_none_is_empty_payload(self):
        assert parse_payload(None) == RecipePayload()

    @pytest.mark.parametrize(
        "data",
        [
            ["recipeName"],
            "Kavarma",
            {"recipeName": [1]},
            {"recipeName": 5},
            {"recipeName": 1.5},
        ],
    )
    def test_unreadable_data(self, data):
        with pytest.raises(RecipeError) as exc_info:
            parse_payload(data)

        assert exc_info.value.code == "INCOMPLETE_INPUT"

    def test_numbers_are_not_stringified(self):
        with pytest.raises(RecipeError) as exc_info:
            parse_payload({"recipeName": 5, "recipeType": 1.5, "ownerName": "Ivan"})

        assert exc_info.value.message == "Invalid input data: recipeName, recipeType!"
        assert set(exc_info.value.details["errors"]) == {"recipeName", "recipeType"}

    def test_null_character_is_named(self):
        with pytest.raises(RecipeError) as exc_info:
            parse_payload({"description": "slow\x00cooked"})

        assert exc_info.value.code == "INCOMPLETE_INPUT"
        assert exc_info.value.message == "Invalid input data: description!"


class TestResults:
    def test_ok_as_dict(self, recipe):
        result = RecipeResult.ok(recipe)

        assert result.as_dict() == {"Ok": RecipeSerializer(recipe).data}

    def test_fail_as_dict(self):
        result = RecipeResult.fail(RecipeError("NOT_FOUND", "Recipe has not been found!"))

        assert not result.success
        assert result.recipe is None
        assert result.as_dict() == {"Err": "Recipe has not been found!"}

    def test_list_as_dict(self, recipe):
        result = RecipeListResult.ok([recipe])

        assert result.as_dict()["Ok"][0]["recipeName"] == "Kavarma"
        assert not result.is_empty

    def test_list_fail(self):
        result = RecipeListResult.fail(RecipeError("EMPTY_RESULT", "Nothing here."))

        assert result.is_empty
        assert result.code == "EMPTY_RESULT"
        assert result.as_dict() == {"Err": "Nothing here."}


class TestRecipeError:
    def test_attributes(self):
        error = RecipeError("UNAUTHORIZED", "Only the owner!", recipe_id="r1")

        assert error.code == "UNAUTHORIZED"
        assert error.message == "Only the owner!"
        assert error.as_dict() == {
            "code": "UNAUTHORIZED",
            "message": "Only the owner!",
            "recipe_id": "r1",
        }
        assert str(error) == "RecipeError(UNAUTHORIZED: recipe_id=r1)"

    def test_message_defaults_to_code(self):
        error = RecipeError("NOT_FOUND")

        assert error.message == "NOT_FOUND"
        assert str(error) == "RecipeError(NOT_FOUND)"
