"""Models for the commercial pipeline (proposals and closed contracts)."""
from __future__ import annotations

from decimal import Decimal

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from core.models import TimeStampedModel


class Proposal(TimeStampedModel):
    """A commercial proposal; once WON it is a signed contract."""

    class Status(models.TextChoices):
        PROPOSAL = "PROPOSAL", "Proposta"
        NEGOTIATION = "NEGOTIATION", "Negociação"
        WON = "WON", "Fechado"
        LOST = "LOST", "Perdido"

    OPEN_STATUSES = (Status.PROPOSAL, Status.NEGOTIATION)

    client = models.CharField("cliente", max_length=255)
    monthly_value = models.DecimalField(
        "valor mensal",
        max_digits=14,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )
    months = models.PositiveIntegerField(
        "meses",
        default=12,
        validators=[MinValueValidator(1)],
    )
    total_value = models.DecimalField(
        "valor total",
        max_digits=16,
        decimal_places=2,
        blank=True,
        help_text="Calculado como valor mensal x meses quando não informado.",
    )
    status = models.CharField(
        "status",
        max_length=20,
        choices=Status.choices,
        default=Status.PROPOSAL,
        db_index=True,
    )
    closing_date = models.DateField("data de fechamento", null=True, blank=True, db_index=True)
    lost_date = models.DateField("data da perda", null=True, blank=True)
    lost_reason = models.CharField("motivo da perda", max_length=255, blank=True, default="")
    closer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="proposals_as_closer",
        verbose_name="closer",
    )
    sdr = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="proposals_as_sdr",
        verbose_name="SDR",
    )

    class Meta:
        verbose_name = "proposta"
        verbose_name_plural = "propostas"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status", "closing_date"], name="proposal_status_closing_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.client} ({self.get_status_display()})"

    def clean(self):
        errors = {}
        if self.months is not None and self.months < 1:
            errors["months"] = "O contrato deve ter ao menos 1 mês."
        if self.status == self.Status.WON and not self.closing_date:
            errors["closing_date"] = "Informe a data de fechamento para contratos fechados."
        if errors:
            raise ValidationError(errors)

    def save(self, *args, **kwargs):
        if self.total_value is None and self.monthly_value is not None:
            self.total_value = Decimal(self.monthly_value) * self.months
        super().save(*args, **kwargs)

    @property
    def is_won(self) -> bool:
        return self.status == self.Status.WON
