"""App config for the commercial goals module."""
from django.apps import AppConfig


class GoalsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "goals"
    verbose_name = "Metas Comerciais"

    def ready(self):
        import goals.signals  # noqa: F401
