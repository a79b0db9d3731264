"""
Tests for the RecipeStore adapters (recipebook.adapters).
"""

import uuid

import pytest

from recipebook.adapters.memory import MemoryRecipeStore
from recipebook.adapters.orm import OrmRecipeStore
from recipebook.models import Recipe
from recipebook.protocols import RecipeData, RecipeStore


def make_recipe(**overrides) -> RecipeData:
    fields = {
        "id": str(uuid.uuid4()),
        "recipe_name": "Tarator",
        "recipe_type": "Soup",
        "description": "Cold yoghurt and cucumber soup.",
        "owner_name": "Ivan",
        "owner_id": str(uuid.uuid4()),
        "video_demonstration": "https://example.com/videos/tarator",
    }
    fields.update(overrides)
    return RecipeData(**fields)


# ═══════════════════════════════════════════════════════════════════
# Contract (both adapters)
# ═══════════════════════════════════════════════════════════════════


@pytest.fixture(params=["memory", "orm"])
def store(request):
    if request.param == "memory":
        return MemoryRecipeStore()
    request.getfixturevalue("db")
    return OrmRecipeStore()


class TestStoreContract:
    def test_implements_protocol(self, store):
        assert isinstance(store, RecipeStore)

    def test_get_missing(self, store):
        assert store.get(str(uuid.uuid4())) is None

    def test_insert_and_get(self, store):
        recipe = make_recipe()

        store.insert(recipe)

        assert store.get(recipe.id) == recipe

    def test_insert_replaces_at_same_key(self, store):
        recipe = make_recipe()
        store.insert(recipe)

        changed = make_recipe(id=recipe.id, recipe_name="Tarator (thick)")
        store.insert(changed)

        assert store.get(recipe.id) == changed
        assert len(store.values()) == 1

    def test_values_in_key_order(self, store):
        ids = [
            "ffffffff-0000-4000-8000-000000000000",
            "00000000-0000-4000-8000-000000000000",
            "88888888-0000-4000-8000-000000000000",
        ]
        for rid in ids:
            store.insert(make_recipe(id=rid))

        assert [r.id for r in store.values()] == sorted(ids)

    def test_remove_returns_record(self, store):
        recipe = make_recipe()
        store.insert(recipe)

        assert store.remove(recipe.id) == recipe
        assert store.get(recipe.id) is None
        assert store.values() == []

    def test_remove_missing(self, store):
        assert store.remove(str(uuid.uuid4())) is None


# ═══════════════════════════════════════════════════════════════════
# ORM specifics
# ═══════════════════════════════════════════════════════════════════


@pytest.mark.django_db
class TestOrmRecipeStore:
    def test_insert_writes_row(self):
        recipe = make_recipe()

        OrmRecipeStore().insert(recipe)

        row = Recipe.objects.get(pk=recipe.id)
        assert row.recipe_name == "Tarator"
        assert row.owner_id == recipe.owner_id
        assert str(row) == "Tarator"

    def test_rows_survive_new_store_instance(self):
        recipe = make_recipe()
        OrmRecipeStore().insert(recipe)

        assert OrmRecipeStore().get(recipe.id) == recipe

    @pytest.mark.django_db(transaction=True)
    def test_remove_in_autocommit_deletes_only_that_row(self):
        store = OrmRecipeStore()
        kept, removed = make_recipe(), make_recipe()
        store.insert(kept)
        store.insert(removed)

        assert store.remove(removed.id) == removed
        assert list(Recipe.objects.values_list("id", flat=True)) == [kept.id]

    def test_model_round_trip(self):
        recipe = make_recipe()

        Recipe.from_data(recipe).save()

        assert Recipe.objects.get(pk=recipe.id).to_data() == recipe


class TestMemoryRecipeStore:
    def test_seeded_records(self):
        a, b = make_recipe(), make_recipe()

        store = MemoryRecipeStore([a, b])

        assert len(store) == 2
        assert store.get(a.id) == a

    def test_instances_do_not_share_state(self):
        first = MemoryRecipeStore()
        first.insert(make_recipe())

        assert MemoryRecipeStore().values() == []
