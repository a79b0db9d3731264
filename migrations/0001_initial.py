from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Recipe",
            fields=[
                (
                    "id",
                    models.CharField(
                        editable=False,
                        max_length=36,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "recipe_name",
                    models.CharField(
                        max_length=255,
                        verbose_name="Recipe name",
                    ),
                ),
                (
                    "recipe_type",
                    models.CharField(
                        help_text="Free-text category, e.g. 'Bulgarian'",
                        max_length=255,
                        verbose_name="Recipe type",
                    ),
                ),
                (
                    "description",
                    models.TextField(verbose_name="Description"),
                ),
                (
                    "owner_name",
                    models.CharField(
                        help_text="Display name only; several owners may share it",
                        max_length=255,
                        verbose_name="Owner name",
                    ),
                ),
                (
                    "owner_id",
                    models.CharField(
                        editable=False,
                        help_text="Identity of the creator; gates update and delete",
                        max_length=36,
                        verbose_name="Owner ID",
                    ),
                ),
                (
                    "video_demonstration",
                    models.TextField(
                        help_text="Usually a URL",
                        verbose_name="Video demonstration",
                    ),
                ),
            ],
            options={
                "verbose_name": "Recipe",
                "verbose_name_plural": "Recipes",
                "db_table": "recipebook_recipe",
                "ordering": ["id"],
            },
        ),
    ]
