"""Employee of the month: monthly ranking of weekly points."""
from __future__ import annotations

from accounts.employees import CLOSER, SDR, display_name, takes_part
from core.dates import as_date, month_name

# Dashboard categories fed by each role's weekly counters.
BREAKDOWN_FIELDS = {
    CLOSER: {
        "tasks": "education_points",
        "proposals": "proposals_presented",
        "closed_deals": "contracts_signed",
    },
    SDR: {
        "tasks": "education_points",
        "meetings": "mql",
        "proposals": "visits_scheduled",
    },
}


def _empty_points() -> dict:
    return {"tasks": 0, "meetings": 0, "proposals": 0, "closed_deals": 0, "total": 0}


class MonthlyRanking:
    """Rank employees by the weekly points recorded inside a calendar month.

    A weekly record belongs to the month of its week-ending date. Admins
    are left out; everyone else is ranked, with zero points when nothing
    was recorded.
    """

    def __init__(self, employees, weekly_records) -> None:
        self.employees = [e for e in employees if takes_part(e)]
        self.weekly_records = list(weekly_records)

    def scores(self, year: int, month: int) -> dict[str, dict]:
        roles = {str(e.id): str(e.role).upper() for e in self.employees}
        scores = {employee_id: _empty_points() for employee_id in roles}

        for record in self.weekly_records:
            employee_id = str(record.employee_id)
            week = as_date(record.week_ending_date)
            if employee_id not in scores or week is None or (week.year, week.month) != (year, month):
                continue
            points = scores[employee_id]
            for category, field in BREAKDOWN_FIELDS.get(roles[employee_id], {}).items():
                points[category] += int(getattr(record, field, 0) or 0)
            points["total"] += int(record.total_points or 0)
        return scores

    def ranking(self, year: int, month: int) -> list[dict]:
        """Highest total first; ties keep roster order."""
        scores = self.scores(year, month)
        entries = [
            {
                "employee_id": str(employee.id),
                "name": display_name(employee),
                "role": employee.role,
                "points": scores[str(employee.id)],
            }
            for employee in self.employees
        ]
        entries.sort(key=lambda entry: entry["points"]["total"], reverse=True)
        for rank, entry in enumerate(entries, start=1):
            entry["rank"] = rank
        return entries

    def winner(self, year: int, month: int) -> dict | None:
        ranking = self.ranking(year, month)
        return ranking[0] if ranking else None

    def months_with_records(self, year: int) -> list[int]:
        """Months of ``year`` with at least one weekly record, most recent first."""
        months = set()
        for record in self.weekly_records:
            week = as_date(record.week_ending_date)
            if week and week.year == year:
                months.add(week.month)
        return sorted(months, reverse=True)

    def past_winners(self, year: int) -> list[dict]:
        return [
            {
                "year": year,
                "month": month,
                "month_name": month_name(month),
                "winner": self.winner(year, month),
            }
            for month in self.months_with_records(year)
        ]
