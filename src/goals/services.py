"""Monthly goals persistence and the commercial goal report."""
from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal, InvalidOperation

from django.conf import settings
from django.core.cache import cache
from django.core.exceptions import ValidationError

from configuration.services import get_config, monthly_goals_key, set_config
from core.dates import month_name
from goals.engine import allocate_contracts, reconcile_year
from goals.signals import monthly_goals_updated

logger = logging.getLogger(__name__)


def monthly_goals_cache_key(year: int) -> str:
    return f"goals:monthly:{year}"


def default_monthly_goals() -> list[dict]:
    return [
        {
            "month": month,
            "month_name": month_name(month),
            "target_value": settings.DEFAULT_MONTHLY_GOAL,
        }
        for month in range(1, 13)
    ]


def get_monthly_goals(year: int) -> list[dict]:
    """The 12 goals of ``year``; stores the defaults on first access."""
    key = monthly_goals_cache_key(year)
    goals = cache.get(key)
    if goals is not None:
        return goals

    goals = get_config(monthly_goals_key(year))
    if not goals:
        goals = default_monthly_goals()
        set_config(monthly_goals_key(year), goals)
        logger.info("Default monthly goals created for %s", year)

    cache.set(key, goals, settings.MONTHLY_GOALS_CACHE_TIMEOUT)
    return goals


def _json_number(value: Decimal):
    return int(value) if value == value.to_integral_value() else float(value)


def clean_monthly_goals(goals) -> list[dict]:
    """Validate a full year of goals and return them normalized, sorted by month."""
    if not isinstance(goals, (list, tuple)) or len(goals) != 12:
        raise ValidationError("Informe as metas dos 12 meses.")

    cleaned = {}
    for entry in goals:
        try:
            month = int(entry["month"])
            value = Decimal(str(entry["target_value"]))
        except (KeyError, TypeError, ValueError, InvalidOperation):
            raise ValidationError("Cada meta precisa de 'month' e 'target_value' numéricos.")
        if not 1 <= month <= 12:
            raise ValidationError(f"Mês inválido: {month}.")
        if month in cleaned:
            raise ValidationError(f"Mês repetido: {month}.")
        if value < 0:
            raise ValidationError("A meta mensal não pode ser negativa.")
        cleaned[month] = {
            "month": month,
            "month_name": month_name(month),
            "target_value": _json_number(value),
        }
    return [cleaned[month] for month in range(1, 13)]


def update_monthly_goals(year: int, goals) -> list[dict]:
    """Save all 12 goals of ``year`` and broadcast ``monthly_goals_updated``."""
    goals = clean_monthly_goals(goals)
    set_config(monthly_goals_key(year), goals)
    monthly_goals_updated.send(sender=None, year=year, goals=goals)
    logger.info("Monthly goals updated for %s (annual=%s)", year, sum(g["target_value"] for g in goals))
    return goals


def goal_targets(year: int) -> dict[int, Decimal]:
    return {
        int(goal["month"]): Decimal(str(goal.get("target_value") or 0))
        for goal in get_monthly_goals(year)
    }


def month_goal(year: int, month: int) -> Decimal:
    return goal_targets(year).get(month, Decimal("0"))


def annual_goal(year: int) -> Decimal:
    return sum(goal_targets(year).values(), Decimal("0"))


def commercial_goal_report(year: int, as_of: date) -> dict:
    """Reconciliation and allocation breakdown of ``year`` as of ``as_of``."""
    from commercial.models import Proposal

    targets = goal_targets(year)
    contracts = list(
        Proposal.objects.filter(
            status=Proposal.Status.WON,
            closing_date__year=year,
        ).order_by("closing_date")
    )
    reconciliation = reconcile_year(contracts, targets, year, as_of)
    allocations = allocate_contracts(contracts, targets, year)

    report = reconciliation.as_dict()
    report["allocations"] = [vars(allocation).copy() for allocation in allocations]
    return report
