"""Contract allocation and monthly goal reconciliation.

Pure functions over already-fetched contracts (``Proposal`` instances or any
object exposing ``id``, ``client``, ``monthly_value``, ``status`` and
``closing_date``) and a ``{month: target}`` table. Nothing here touches the
database or reads the clock; callers pass ``as_of`` explicitly.

Headline revenue always counts a contract's full annual value in its
closing month. The greedy allocation is a display breakdown only.
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from datetime import date
from decimal import Decimal

from core.dates import as_date, is_month_past, month_name

logger = logging.getLogger(__name__)

WON = "WON"
MONTHS = range(1, 13)
ZERO = Decimal("0")


@dataclass
class ContractAllocation:
    """Portion of a contract's annual value assigned to one month's deficit."""

    contract_id: str
    client: str
    monthly_value: Decimal
    allocated_value: Decimal
    signed_month: int
    allocated_month: int
    closing_date: date


@dataclass
class MonthReconciliation:
    month: int
    month_name: str
    stated_target: Decimal
    inherited_carry_over: Decimal
    effective_target: Decimal
    actual_revenue: Decimal
    actual_contracts: int
    surplus: Decimal
    deficit: Decimal
    carry_over_to_next: Decimal
    is_past: bool


@dataclass
class YearReconciliation:
    year: int
    months: list[MonthReconciliation]
    total_actual_revenue: Decimal
    total_target: Decimal
    progress_percentage: Decimal
    remaining_revenue: Decimal
    total_contracts: int
    alerts: list[dict] = field(default_factory=list)

    def month(self, month: int) -> MonthReconciliation:
        return self.months[month - 1]

    def as_dict(self) -> dict:
        return asdict(self)


def _dec(value) -> Decimal:
    if value is None or value == "":
        return ZERO
    return Decimal(str(value))


def annual_value(contract) -> Decimal:
    """Monthly value x 12, whatever the contract length."""
    return _dec(contract.monthly_value) * 12


def closed_in_year(contracts, year: int) -> list:
    """WON contracts whose closing date falls in ``year``."""
    result = []
    for contract in contracts:
        if contract.status != WON:
            continue
        closed_on = as_date(contract.closing_date)
        if closed_on is not None and closed_on.year == year:
            result.append(contract)
    return result


def _target(targets, month: int) -> Decimal:
    return _dec((targets or {}).get(month))


def allocate_contracts(contracts, targets, year: int) -> list[ContractAllocation]:
    """Spread each contract's annual value over the outstanding monthly deficits.

    Contracts are taken by closing date; each one fills deficits from its
    closing month up to December. Value left after December is dropped.
    """
    remaining_deficit = {month: _target(targets, month) for month in MONTHS}
    closed = sorted(closed_in_year(contracts, year), key=lambda c: as_date(c.closing_date))

    allocations = []
    for contract in closed:
        closed_on = as_date(contract.closing_date)
        remaining = annual_value(contract)
        month = closed_on.month
        while remaining > 0 and month <= 12:
            deficit = remaining_deficit[month]
            if deficit > 0:
                allocated = min(remaining, deficit)
                allocations.append(
                    ContractAllocation(
                        contract_id=str(contract.id),
                        client=contract.client,
                        monthly_value=_dec(contract.monthly_value),
                        allocated_value=allocated,
                        signed_month=closed_on.month,
                        allocated_month=month,
                        closing_date=closed_on,
                    )
                )
                remaining_deficit[month] -= allocated
                remaining -= allocated
            month += 1
    return allocations


def reconcile_year(contracts, targets, year: int, as_of: date) -> YearReconciliation:
    """Single January to December pass carrying deficit/surplus forward.

    ``targets`` maps month number to its stated goal; a missing month counts
    as 0. A positive carry is an unmet deficit added to the next month, a
    negative one is a surplus taken off it. Months with no stated goal
    neither generate nor propagate carry.
    """
    closed = closed_in_year(contracts, year)
    by_month: dict[int, list] = {month: [] for month in MONTHS}
    for contract in closed:
        by_month[as_date(contract.closing_date).month].append(contract)

    months = []
    carry = ZERO
    for month in MONTHS:
        stated = _target(targets, month)
        month_contracts = by_month[month]
        actual = sum((annual_value(c) for c in month_contracts), ZERO)

        effective = max(ZERO, stated + carry)
        surplus = max(ZERO, actual - effective)
        deficit = max(ZERO, effective - actual)

        carry_out = ZERO
        if stated > 0:
            carry_out = -surplus if surplus > 0 else deficit

        months.append(
            MonthReconciliation(
                month=month,
                month_name=month_name(month),
                stated_target=stated,
                inherited_carry_over=carry,
                effective_target=effective,
                actual_revenue=actual,
                actual_contracts=len(month_contracts),
                surplus=surplus,
                deficit=deficit,
                carry_over_to_next=carry_out,
                is_past=is_month_past(year, month, as_of),
            )
        )
        carry = carry_out

    total_actual = sum((annual_value(c) for c in closed), ZERO)
    total_target = sum((_target(targets, month) for month in MONTHS), ZERO)
    progress = (total_actual / total_target * 100) if total_target > 0 else ZERO

    result = YearReconciliation(
        year=year,
        months=months,
        total_actual_revenue=total_actual,
        total_target=total_target,
        progress_percentage=progress,
        remaining_revenue=total_target - total_actual,
        total_contracts=len(closed),
    )
    result.alerts = build_alerts(result, as_of)
    logger.debug(
        "Reconciled %s: actual=%s target=%s contracts=%s",
        year,
        total_actual,
        total_target,
        len(closed),
    )
    return result


def build_alerts(reconciliation: YearReconciliation, as_of: date) -> list[dict]:
    """Warnings for elapsed months under target, successes for months above it."""
    alerts = []
    for row in reconciliation.months:
        elapsed = (reconciliation.year, row.month) < (as_of.year, as_of.month)
        if elapsed and row.actual_revenue < row.stated_target:
            alerts.append(
                {
                    "type": "warning",
                    "month": row.month,
                    "message": (
                        f"{row.month_name}: {row.actual_contracts} contratos fechados"
                        f" - Déficit de {row.deficit:.2f}"
                    ),
                }
            )
        if row.actual_revenue > row.stated_target:
            alerts.append(
                {
                    "type": "success",
                    "month": row.month,
                    "message": f"{row.month_name}: Meta superada em {row.surplus:.2f}",
                }
            )
    return alerts
