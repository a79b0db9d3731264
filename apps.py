"""
Django Recipebook app configuration.
"""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class RecipebookConfig(AppConfig):
    """Recipebook application configuration."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "recipebook"
    verbose_name = _("Recipes")
