"""Models for team challenges (targets with a prize and a date window)."""
from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from challenges.exceptions import ChallengeStateError
from core.models import TimeStampedModel


class Challenge(TimeStampedModel):
    """A team or individual challenge scored on one metric.

    Status only ever moves ``active -> completed`` or ``active -> expired``.
    An empty ``participant_ids`` list means every non-admin employee takes part.
    """

    class TargetType(models.TextChoices):
        POINTS = "points", "Pontos"
        SALES = "sales", "Vendas"
        MQL = "mql", "MQL"
        VISITS = "visitas_agendadas", "Visitas agendadas"
        CONTRACTS = "contratos_assinados", "Contratos assinados"
        EDUCATION = "pontos_educacao", "Pontos de educação"

    class Status(models.TextChoices):
        ACTIVE = "active", "Ativo"
        COMPLETED = "completed", "Concluído"
        EXPIRED = "expired", "Expirado"

    title = models.CharField("título", max_length=200)
    description = models.TextField("descrição", blank=True, default="")
    start_date = models.DateField("início")
    end_date = models.DateField("fim")
    prize = models.CharField("prêmio", max_length=255, blank=True, default="")
    target_type = models.CharField(
        "tipo de meta",
        max_length=30,
        choices=TargetType.choices,
        default=TargetType.POINTS,
    )
    target_value = models.DecimalField(
        "meta",
        max_digits=14,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    status = models.CharField(
        "status",
        max_length=20,
        choices=Status.choices,
        default=Status.ACTIVE,
        db_index=True,
    )
    participant_ids = models.JSONField("participantes", default=list, blank=True)
    winner_ids = models.JSONField("vencedores", default=list, blank=True)
    completion_date = models.DateTimeField("concluído em", null=True, blank=True)

    class Meta:
        verbose_name = "desafio"
        verbose_name_plural = "desafios"
        ordering = ["-start_date", "-created_at"]

    def __str__(self) -> str:
        return f"{self.title} ({self.get_status_display()})"

    def clean(self) -> None:
        errors = {}
        if self.start_date and self.end_date and self.end_date <= self.start_date:
            errors["end_date"] = "A data de fim deve ser posterior à data de início."
        if self.target_value is not None and self.target_value <= 0:
            errors["target_value"] = "A meta deve ser maior que zero."
        if errors:
            raise ValidationError(errors)

    @property
    def is_active(self) -> bool:
        return self.status == self.Status.ACTIVE

    # ------------------------------------------------------------------
    # Status transitions
    # ------------------------------------------------------------------

    def _ensure_active(self, target_status: str) -> None:
        if not self.is_active:
            raise ChallengeStateError(
                f"Não é possível passar o desafio de '{self.status}' para '{target_status}'."
            )

    def mark_completed(self, completed_at, save: bool = True) -> None:
        self._ensure_active(self.Status.COMPLETED)
        self.status = self.Status.COMPLETED
        self.completion_date = completed_at
        if save:
            self.save(update_fields=["status", "completion_date", "updated_at"])

    def mark_expired(self, save: bool = True) -> None:
        self._ensure_active(self.Status.EXPIRED)
        self.status = self.Status.EXPIRED
        if save:
            self.save(update_fields=["status", "updated_at"])

    def assign_winners(self, winner_ids, save: bool = True) -> None:
        if self.status != self.Status.COMPLETED:
            raise ChallengeStateError("Vencedores só podem ser definidos em desafios concluídos.")
        seen = []
        for winner_id in winner_ids:
            if str(winner_id) not in seen:
                seen.append(str(winner_id))
        self.winner_ids = seen
        if save:
            self.save(update_fields=["winner_ids", "updated_at"])
