"""Weekly performance records (one row per employee per week-ending date)."""
from django.conf import settings
from django.db import models

from core.models import TimeStampedModel


class WeeklyPerformance(TimeStampedModel):
    """Counters reported by an employee for the week ending on ``week_ending_date``."""

    employee = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="weekly_performances",
        verbose_name="funcionário",
    )
    week_ending_date = models.DateField("fim da semana", db_index=True)
    education_points = models.PositiveIntegerField("pontos de educação", default=0)
    proposals_presented = models.PositiveIntegerField("propostas apresentadas", default=0)
    contracts_signed = models.PositiveIntegerField("contratos assinados", default=0)
    mql = models.PositiveIntegerField("MQL", default=0)
    visits_scheduled = models.PositiveIntegerField("visitas agendadas", default=0)
    total_points = models.IntegerField("total de pontos", default=0)

    class Meta:
        verbose_name = "desempenho semanal"
        verbose_name_plural = "desempenhos semanais"
        ordering = ["-week_ending_date"]
        constraints = [
            models.UniqueConstraint(
                fields=["employee", "week_ending_date"],
                name="uniq_weekly_performance_employee_week",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.employee} - {self.week_ending_date} ({self.total_points} pts)"
