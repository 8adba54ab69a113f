"""Key/value store for system-wide settings edited from the dashboard."""
from django.db import models

from core.models import TimeStampedModel


class SystemConfiguration(TimeStampedModel):
    """A JSON blob identified by its ``config_type`` (ex: ``monthly_goals_2025``)."""

    config_type = models.CharField("tipo", max_length=80, unique=True)
    config_data = models.JSONField("dados", default=list, blank=True)

    class Meta:
        verbose_name = "configuração do sistema"
        verbose_name_plural = "configurações do sistema"
        ordering = ["config_type"]

    def __str__(self) -> str:
        return self.config_type
