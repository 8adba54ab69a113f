"""Read/write helpers around ``SystemConfiguration``."""
from __future__ import annotations

import logging

from django.db import transaction

from configuration.models import SystemConfiguration
from configuration.signals import configuration_updated

logger = logging.getLogger(__name__)

COMMISSION_TIERS = "commission_tiers"
WEEKLY_METRICS = "weekly_metrics"
OPERATIONAL_COSTS = "operational_costs_multi_year"

EDITABLE_TYPES = (COMMISSION_TIERS, WEEKLY_METRICS, OPERATIONAL_COSTS)

DEFAULT_COST_CATEGORIES = [
    ("1", "Custo com funcionários"),
    ("2", "Custo com marketing"),
    ("3", "Custo com sistemas"),
    ("4", "Custos extras"),
]


def monthly_goals_key(year: int) -> str:
    return f"monthly_goals_{year}"


def get_config(config_type: str, default=None):
    """Return the stored ``config_data`` for ``config_type``, or ``default``."""
    row = (
        SystemConfiguration.objects.filter(config_type=config_type)
        .only("config_data")
        .first()
    )
    if row is None:
        return default
    return row.config_data


@transaction.atomic
def set_config(config_type: str, data) -> SystemConfiguration:
    """Upsert a configuration blob and notify subscribers."""
    config, created = SystemConfiguration.objects.update_or_create(
        config_type=config_type,
        defaults={"config_data": data},
    )
    logger.info(
        "Configuration %s %s",
        config_type,
        "created" if created else "updated",
    )
    configuration_updated.send(
        sender=SystemConfiguration,
        config_type=config_type,
        config_data=data,
    )
    return config


# ---------------------------------------------------------------------------
# Typed accessors
# ---------------------------------------------------------------------------

def get_commission_tiers() -> list:
    return get_config(COMMISSION_TIERS, default=[]) or []


def get_weekly_metrics() -> list:
    return get_config(WEEKLY_METRICS, default=[]) or []


def default_operational_costs(years) -> list:
    """Four cost categories with every month of each year zeroed."""
    return [
        {
            "id": cost_id,
            "name": name,
            "years": [
                {
                    "year": year,
                    "months": [{"month": month, "value": 0} for month in range(1, 13)],
                }
                for year in years
            ],
        }
        for cost_id, name in DEFAULT_COST_CATEGORIES
    ]


def get_operational_costs(years) -> list:
    stored = get_config(OPERATIONAL_COSTS)
    if stored:
        return stored
    return default_operational_costs(years)
