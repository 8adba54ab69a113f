"""Challenge evaluation services (load snapshots, apply status changes)."""
from __future__ import annotations

import logging
from datetime import date, datetime

from django.db import transaction

from challenges.engine import ChallengeProgressEvaluator
from challenges.models import Challenge
from core.dates import as_date

logger = logging.getLogger(__name__)


def _load_evaluator(start: date, end: date) -> ChallengeProgressEvaluator:
    """Roster plus the weekly records and WON proposals that can fall in [start, end]."""
    from accounts.models import User
    from commercial.models import Proposal
    from performance.models import WeeklyPerformance

    employees = list(User.objects.only("id", "role", "first_name", "last_name", "email"))
    weekly_records = list(
        WeeklyPerformance.objects.filter(
            week_ending_date__gte=start,
            week_ending_date__lte=end,
        )
    )
    # closing_date may be empty, in which case created_at is used instead.
    proposals = list(Proposal.objects.filter(status=Proposal.Status.WON))
    return ChallengeProgressEvaluator(employees, weekly_records, proposals)


def evaluator_for(challenges) -> ChallengeProgressEvaluator | None:
    challenges = list(challenges)
    if not challenges:
        return None
    start = min(as_date(c.start_date) for c in challenges)
    end = max(as_date(c.end_date) for c in challenges)
    return _load_evaluator(start, end)


def evaluate_challenges(as_of: datetime) -> dict:
    """Promote active challenges to completed or expired.

    A challenge whose progress reached its target is completed with
    ``completion_date = as_of``; otherwise it expires once ``as_of`` is past
    its end date. Challenges already completed or expired are left alone.
    """
    result = {"completed": 0, "expired": 0}

    active = list(Challenge.objects.filter(status=Challenge.Status.ACTIVE))
    if not active:
        logger.debug("evaluate_challenges: no active challenge")
        return result

    evaluator = evaluator_for(active)
    if not evaluator.employees:
        logger.debug("evaluate_challenges: no employees loaded, skipping")
        return result

    today = as_date(as_of)
    for challenge in active:
        progress = evaluator.compute_progress(challenge)
        with transaction.atomic():
            locked = Challenge.objects.select_for_update().get(pk=challenge.pk)
            if not locked.is_active:
                continue
            if progress >= locked.target_value:
                locked.mark_completed(as_of)
                result["completed"] += 1
                logger.info(
                    "Challenge %s completed (progress=%s target=%s)",
                    locked.pk,
                    progress,
                    locked.target_value,
                )
            elif today > locked.end_date:
                locked.mark_expired()
                result["expired"] += 1
                logger.info("Challenge %s expired (progress=%s)", locked.pk, progress)

    return result


def challenge_progress(challenge: Challenge, as_of: date) -> dict:
    """Progress payload shown on a challenge card."""
    evaluator = evaluator_for([challenge])
    progress = evaluator.compute_progress(challenge)
    payload = {
        "challenge_id": str(challenge.pk),
        "status": challenge.status,
        "target_type": challenge.target_type,
        "target_value": challenge.target_value,
        "progress": progress,
        "percentage": evaluator.progress_percentage(challenge, progress),
        "days_remaining": evaluator.days_remaining(challenge, as_of),
        "participants": evaluator.resolve_participants(challenge),
        "ranking": [],
    }
    if challenge.is_active:
        payload["ranking"] = evaluator.individual_contributions(challenge)
    return payload
