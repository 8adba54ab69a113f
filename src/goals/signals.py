"""Broadcast channel for monthly goal edits.

``monthly_goals_updated`` is sent with ``year`` and ``goals`` (the 12 saved
entries) each time a year's goals are saved. Subscribers re-derive their
own state from it; nothing is reloaded wholesale.
"""
import logging

from django.core.cache import cache
from django.dispatch import Signal, receiver

logger = logging.getLogger(__name__)

monthly_goals_updated = Signal()


@receiver(monthly_goals_updated)
def invalidate_monthly_goals_cache(sender, year, goals, **kwargs):
    from goals.services import monthly_goals_cache_key

    cache.delete(monthly_goals_cache_key(year))
    logger.debug("Monthly goals cache invalidated for %s", year)
