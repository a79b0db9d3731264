"""
Recipe model.

The durable recipe table: one row per recipe, keyed by its UUID string.
No secondary indexes — name, type and owner lookups scan the table.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from recipebook.protocols.store import RecipeData


class Recipe(models.Model):
    """
    Stored recipe.

    `id` and `owner_id` are set once on creation and never changed;
    the remaining fields are free text.
    """

    id = models.CharField(
        primary_key=True,
        max_length=36,
        editable=False,
        verbose_name=_("ID"),
    )

    recipe_name = models.CharField(
        max_length=255,
        verbose_name=_("Recipe name"),
    )
    recipe_type = models.CharField(
        max_length=255,
        verbose_name=_("Recipe type"),
        help_text=_("Free-text category, e.g. 'Bulgarian'"),
    )
    description = models.TextField(
        verbose_name=_("Description"),
    )

    # Owner
    owner_name = models.CharField(
        max_length=255,
        verbose_name=_("Owner name"),
        help_text=_("Display name only; several owners may share it"),
    )
    owner_id = models.CharField(
        max_length=36,
        editable=False,
        verbose_name=_("Owner ID"),
        help_text=_("Identity of the creator; gates update and delete"),
    )

    video_demonstration = models.TextField(
        verbose_name=_("Video demonstration"),
        help_text=_("Usually a URL"),
    )

    class Meta:
        db_table = "recipebook_recipe"
        verbose_name = _("Recipe")
        verbose_name_plural = _("Recipes")
        ordering = ["id"]

    def __str__(self) -> str:
        return self.recipe_name

    def to_data(self) -> RecipeData:
        return RecipeData(
            id=self.id,
            recipe_name=self.recipe_name,
            recipe_type=self.recipe_type,
            description=self.description,
            owner_name=self.owner_name,
            owner_id=self.owner_id,
            video_demonstration=self.video_demonstration,
        )

    @classmethod
    def from_data(cls, data: RecipeData) -> "Recipe":
        return cls(
            id=data.id,
            recipe_name=data.recipe_name,
            recipe_type=data.recipe_type,
            description=data.description,
            owner_name=data.owner_name,
            owner_id=data.owner_id,
            video_demonstration=data.video_demonstration,
        )
