"""Weekly performance: points, upsert, week calendar and employee of the month."""
from __future__ import annotations

import logging
from datetime import date, timedelta

from django.db import transaction

from core.dates import as_date, last_friday, month_name
from performance.models import WeeklyPerformance
from performance.ranking import MonthlyRanking

logger = logging.getLogger(__name__)

COUNTER_FIELDS = (
    "education_points",
    "proposals_presented",
    "contracts_signed",
    "mql",
    "visits_scheduled",
)

CLOSER_METRICS = [
    {"id": "education_points", "name": "Pontos de educação", "points": 1},
    {"id": "proposals_presented", "name": "Propostas apresentadas", "points": 1},
    {"id": "contracts_signed", "name": "Contrato assinado", "points": 1},
]

SDR_METRICS = [
    {"id": "education_points", "name": "Pontos de educação", "points": 1},
    {"id": "mql", "name": "MQL", "points": 1},
    {"id": "visits_scheduled", "name": "Visitas agendadas", "points": 1},
]


def _metric_applies(metric: dict, role: str) -> bool:
    metric_role = str(metric.get("role", "BOTH")).upper()
    return metric_role in ("BOTH", role)


def metric_weights(role: str, metrics=None) -> dict:
    """Points per unit of each counter for ``role``.

    Closers score education, proposals and contracts; everyone else scores
    education, MQL and visits. Configured ``weekly_metrics`` entries
    override the default weight of 1.
    """
    role = str(role).upper()
    defaults = CLOSER_METRICS if role == "CLOSER" else SDR_METRICS
    weights = {metric["id"]: metric["points"] for metric in defaults}

    for metric in metrics or []:
        metric_id = metric.get("id")
        if metric_id not in COUNTER_FIELDS or not _metric_applies(metric, role):
            continue
        weights[metric_id] = metric.get("points", 1)
    return weights


def compute_total_points(counters: dict, role: str, metrics=None) -> int:
    weights = metric_weights(role, metrics)
    total = 0
    for metric_id, points in weights.items():
        total += int(counters.get(metric_id) or 0) * points
    return int(total)


@transaction.atomic
def upsert_weekly_performance(employee, week_ending_date, counters: dict, metrics=None) -> WeeklyPerformance:
    """Create or overwrite the record keyed by (employee, week_ending_date)."""
    if metrics is None:
        from configuration.services import get_weekly_metrics

        metrics = get_weekly_metrics()

    values = {field: int(counters.get(field) or 0) for field in COUNTER_FIELDS}
    values["total_points"] = compute_total_points(values, employee.role, metrics)

    record, created = WeeklyPerformance.objects.update_or_create(
        employee=employee,
        week_ending_date=as_date(week_ending_date),
        defaults=values,
    )
    logger.info(
        "Weekly performance %s for employee=%s week=%s total_points=%s",
        "created" if created else "updated",
        employee.pk,
        record.week_ending_date,
        record.total_points,
    )
    return record


# ---------------------------------------------------------------------------
# Week calendar
# ---------------------------------------------------------------------------

def base_fridays(as_of: date, count: int = 12) -> list[date]:
    """The ``count`` most recent Fridays up to ``as_of``, newest first."""
    friday = last_friday(as_of)
    return [friday - timedelta(weeks=offset) for offset in range(count)]


def week_columns(records, year: int, as_of: date) -> list[date]:
    """Recent Fridays merged with the recorded week dates of ``year``, oldest first."""
    dates = set(base_fridays(as_of))
    for record in records:
        week = as_date(record.week_ending_date)
        if week and week.year == year:
            dates.add(week)
    return sorted(dates)


# ---------------------------------------------------------------------------
# Employee of the month
# ---------------------------------------------------------------------------

def employee_of_month(year: int, month: int) -> dict:
    """Ranking of ``month``, its winner and the winners of every month of ``year`` with records."""
    from accounts.models import User

    records = WeeklyPerformance.objects.filter(week_ending_date__year=year)
    ranking = MonthlyRanking(User.objects.all(), records)
    entries = ranking.ranking(year, month)
    return {
        "year": year,
        "month": month,
        "month_name": month_name(month),
        "winner": entries[0] if entries else None,
        "ranking": entries,
        "past_winners": ranking.past_winners(year),
    }
