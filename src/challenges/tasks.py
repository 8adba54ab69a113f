"""Celery tasks for the challenges module."""
from __future__ import annotations

import logging

from celery import shared_task
from django.utils import timezone

logger = logging.getLogger(__name__)


@shared_task
def evaluate_active_challenges():
    """
    Scheduled every few minutes (Celery Beat).
    Complete challenges that reached their target and expire overdue ones.
    """
    from challenges.services import evaluate_challenges

    try:
        result = evaluate_challenges(timezone.now())
    except Exception as exc:
        logger.exception("evaluate_active_challenges failed: %s", exc)
        raise

    if result["completed"] or result["expired"]:
        logger.info(
            "Challenges evaluated: %d completed, %d expired",
            result["completed"],
            result["expired"],
        )
    return result
