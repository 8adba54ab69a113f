"""Challenge progress evaluation.

The evaluator works on snapshots already loaded in memory: the employee
roster, weekly performance records and proposals. It never writes; status
changes are applied by ``challenges.services.evaluate_challenges``.
"""
from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from accounts.employees import display_name, takes_part
from core.dates import as_date

logger = logging.getLogger(__name__)

WON = "WON"
ZERO = Decimal("0")

# target_type -> WeeklyPerformance field summed for it
WEEKLY_FIELDS = {
    "points": "total_points",
    "mql": "mql",
    "visitas_agendadas": "visits_scheduled",
    "contratos_assinados": "contracts_signed",
    "pontos_educacao": "education_points",
}
SALES = "sales"


def _dec(value) -> Decimal:
    if value is None or value == "":
        return ZERO
    return Decimal(str(value))


class ChallengeProgressEvaluator:
    """Compute challenge progress from in-memory snapshots."""

    def __init__(self, employees, weekly_records, proposals) -> None:
        self.employees = list(employees)
        self.weekly_records = list(weekly_records)
        self.proposals = list(proposals)
        self._names = {str(e.id): display_name(e) for e in self.employees}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def resolve_participants(self, challenge, employee_id=None) -> list[str]:
        """Ids whose data counts for ``challenge``, in order, without duplicates.

        A non-empty ``participant_ids`` list is used as is (admins included);
        otherwise every non-admin employee of the roster takes part,
        whether active or not.
        ``employee_id`` narrows the result to that single id.
        """
        explicit = challenge.participant_ids or []
        if explicit:
            candidates = [str(pid) for pid in explicit]
        else:
            candidates = [str(e.id) for e in self.employees if takes_part(e)]

        participants = []
        for pid in candidates:
            if pid not in participants:
                participants.append(pid)

        if employee_id is not None:
            participants = [pid for pid in participants if pid == str(employee_id)]
        return participants

    def compute_progress(self, challenge, employee_id=None) -> Decimal:
        """Sum of the challenge metric over its inclusive window."""
        participants = set(self.resolve_participants(challenge, employee_id))
        start = as_date(challenge.start_date)
        end = as_date(challenge.end_date)

        if challenge.target_type == SALES:
            return self._sales_progress(participants, start, end)

        field = WEEKLY_FIELDS.get(challenge.target_type)
        if field is None:
            logger.warning(
                "Unknown challenge target type %r (challenge=%s); progress counted as 0",
                challenge.target_type,
                getattr(challenge, "id", None),
            )
            return ZERO

        total = ZERO
        for record in self.weekly_records:
            if str(record.employee_id) not in participants:
                continue
            week = as_date(record.week_ending_date)
            if week is None or not start <= week <= end:
                continue
            total += _dec(getattr(record, field, 0))
        return total

    @staticmethod
    def progress_percentage(challenge, progress) -> Decimal:
        target = _dec(challenge.target_value)
        if target <= 0:
            return ZERO
        return min(Decimal("100"), _dec(progress) * 100 / target)

    def individual_contributions(self, challenge) -> list[dict]:
        """Per-participant progress, highest first; ties keep participant order."""
        contributions = [
            {
                "employee_id": pid,
                "name": self._names.get(pid, pid),
                "progress": self.compute_progress(challenge, employee_id=pid),
            }
            for pid in self.resolve_participants(challenge)
        ]
        contributions.sort(key=lambda item: item["progress"], reverse=True)
        return contributions

    @staticmethod
    def days_remaining(challenge, as_of) -> int:
        """Whole days from ``as_of`` to the end date (negative once past)."""
        return (as_date(challenge.end_date) - as_date(as_of)).days

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _sales_progress(self, participants: set, start: date, end: date) -> Decimal:
        total = ZERO
        for proposal in self.proposals:
            if proposal.status != WON:
                continue
            closed_on = as_date(proposal.closing_date) or as_date(proposal.created_at)
            if closed_on is None or not start <= closed_on <= end:
                continue
            owners = {str(proposal.closer_id)}
            if proposal.sdr_id is not None:
                owners.add(str(proposal.sdr_id))
            if owners & participants:
                total += _dec(proposal.total_value)
        return total
