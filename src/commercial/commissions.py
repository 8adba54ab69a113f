"""Commission tiers and per-employee commission calculations.

Rates are percentages of a contract's total value. The tier table can be
overridden from the ``commission_tiers`` system configuration; every
function here also accepts an explicit ``tiers`` list so callers that
already hold the configuration do not hit the database again.
"""
from __future__ import annotations

from datetime import date
from decimal import Decimal

from core.dates import as_date, period_key

WON = "WON"
OPEN_STATUSES = ("PROPOSAL", "NEGOTIATION")

DEFAULT_TIERS = [
    {"percentage": Decimal("0.4"), "min_value": Decimal("0"), "max_value": Decimal("600000"), "label": "Meta Base"},
    {"percentage": Decimal("0.8"), "min_value": Decimal("600000"), "max_value": Decimal("1200000"), "label": "Supermeta"},
    {"percentage": Decimal("1.2"), "min_value": Decimal("1200000"), "max_value": None, "label": "Megameta"},
]


def _dec(value) -> Decimal:
    if value is None or value == "":
        return Decimal("0")
    return Decimal(str(value))


def normalize_tiers(tiers=None) -> list[dict]:
    """Return tiers as Decimals sorted by ceiling; open-ended tier last."""
    source = tiers or DEFAULT_TIERS
    normalized = []
    for tier in source:
        max_value = tier.get("max_value")
        normalized.append(
            {
                "percentage": _dec(tier.get("percentage")),
                "min_value": _dec(tier.get("min_value")),
                "max_value": None if max_value in (None, "") else _dec(max_value),
                "label": tier.get("label", ""),
            }
        )
    normalized.sort(key=lambda t: (t["max_value"] is None, t["max_value"] or 0))
    return normalized


def load_tiers() -> list[dict]:
    from configuration.services import get_commission_tiers

    return normalize_tiers(get_commission_tiers())


def commission_tier(total_value, tiers=None) -> dict:
    tiers = normalize_tiers(tiers)
    total = _dec(total_value)
    for tier in tiers:
        if tier["max_value"] is None or total <= tier["max_value"]:
            return tier
    return tiers[-1]


def commission_rate(total_value, tiers=None) -> Decimal:
    """Percentage applied to ``total_value`` (0.4 up to 600k, 0.8 up to 1.2M, 1.2 above)."""
    return commission_tier(total_value, tiers)["percentage"]


def contract_commission(contract_value, rate) -> Decimal:
    return _dec(contract_value) * _dec(rate) / Decimal("100")


# ---------------------------------------------------------------------------
# Per-employee aggregations
# ---------------------------------------------------------------------------

def _owned_by(proposal, employee_id, role: str) -> bool:
    role = str(role).lower()
    owner_id = proposal.sdr_id if role == "sdr" else proposal.closer_id
    return owner_id is not None and str(owner_id) == str(employee_id)


def effective_closing_date(proposal) -> date | None:
    """Closing date, falling back to the creation date."""
    return as_date(proposal.closing_date) or as_date(proposal.created_at)


def monthly_commissions(proposals, employee_id, role: str, year: int, tiers=None) -> dict:
    """Contracts, total value and commission per ``YYYY-MM`` of ``year``."""
    tiers = normalize_tiers(tiers)
    months = {
        period_key(year, month): {"contracts": [], "total_value": Decimal("0"), "commission": Decimal("0")}
        for month in range(1, 13)
    }

    for proposal in proposals:
        if proposal.status != WON or not _owned_by(proposal, employee_id, role):
            continue
        closed_on = effective_closing_date(proposal)
        if closed_on is None or closed_on.year != year:
            continue

        value = _dec(proposal.total_value)
        bucket = months[period_key(year, closed_on.month)]
        bucket["contracts"].append(proposal)
        bucket["total_value"] += value
        bucket["commission"] += contract_commission(value, commission_rate(value, tiers))

    return months


def month_total(proposals, employee_id, role: str, as_of: date) -> Decimal:
    """Total value the employee closed in the month of ``as_of``."""
    total = Decimal("0")
    for proposal in proposals:
        if proposal.status != WON or not _owned_by(proposal, employee_id, role):
            continue
        closed_on = effective_closing_date(proposal)
        if closed_on and (closed_on.year, closed_on.month) == (as_of.year, as_of.month):
            total += _dec(proposal.total_value)
    return total


def open_contracts(proposals, employee_id, role: str) -> list:
    return [
        proposal
        for proposal in proposals
        if proposal.status in OPEN_STATUSES and _owned_by(proposal, employee_id, role)
    ]


def progress_info(current_value, tiers=None) -> dict:
    tiers = normalize_tiers(tiers)
    current = _dec(current_value)
    tier = commission_tier(current, tiers)

    if tier["max_value"]:
        progress = min(current / tier["max_value"] * 100, Decimal("100"))
    else:
        progress = Decimal("100")

    next_milestone = None
    remaining = Decimal("0")
    for candidate in tiers:
        if candidate["max_value"] is not None and current < candidate["max_value"]:
            next_milestone = candidate["max_value"]
            remaining = next_milestone - current
            break

    first_ceiling = tiers[0]["max_value"]
    return {
        "current_rate": tier["percentage"],
        "current_tier": tier,
        "progress_percentage": progress,
        "next_milestone": next_milestone,
        "remaining_to_next": remaining,
        "has_achievement": first_ceiling is not None and current >= first_ceiling,
    }


def open_contracts_potential(proposals, employee_id, role: str, tiers=None) -> list[dict]:
    """Commission the open contracts would pay under each tier rate."""
    contracts = open_contracts(proposals, employee_id, role)
    return [
        {
            "label": tier["label"],
            "percentage": tier["percentage"],
            "commission": sum(
                (contract_commission(p.total_value, tier["percentage"]) for p in contracts),
                Decimal("0"),
            ),
        }
        for tier in normalize_tiers(tiers)
    ]
