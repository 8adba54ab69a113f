"""Team bonus fund.

Every signed contract pays a fixed amount plus a share of its total value
into the fund. The fund is split among non-admin employees in proportion
to the months each one worked in the current year.
"""
from __future__ import annotations

from datetime import date
from decimal import Decimal

from accounts.employees import display_name, takes_part
from commercial.commissions import effective_closing_date
from core.dates import as_date

WON = "WON"
FIXED_CONTRIBUTION = Decimal("50")
VALUE_SHARE = Decimal("0.001")


def _dec(value) -> Decimal:
    if value is None or value == "":
        return Decimal("0")
    return Decimal(str(value))


def contributions(proposals) -> list[dict]:
    rows = []
    for proposal in proposals:
        if proposal.status != WON:
            continue
        value = _dec(proposal.total_value)
        share = value * VALUE_SHARE
        rows.append(
            {
                "proposal_id": str(proposal.id),
                "client": proposal.client,
                "contract_value": value,
                "fixed_amount": FIXED_CONTRIBUTION,
                "percentage_amount": share,
                "total": FIXED_CONTRIBUTION + share,
                "date": effective_closing_date(proposal),
            }
        )
    return rows


def months_worked(admission_date, as_of: date) -> int:
    """Months worked in the year of ``as_of``, counting the current month.

    Admissions before that year count from January. A month only counts
    once its admission day is reached, but anyone already admitted gets at
    least one month.
    """
    admission = as_date(admission_date)
    start = date(as_of.year, 1, 1)
    if admission is not None and admission.year >= as_of.year:
        start = admission
    if start > as_of:
        return 0

    months = as_of.month - start.month + 1
    if as_of.day < start.day:
        months -= 1
    return max(1, months)


def distribute(employees, total_amount, as_of: date) -> list[dict]:
    shares = [
        {
            "employee_id": str(employee.id),
            "name": display_name(employee),
            "admission_date": as_date(getattr(employee, "admission_date", None)),
            "months_worked": months_worked(getattr(employee, "admission_date", None), as_of),
        }
        for employee in employees
        if takes_part(employee)
    ]
    total_months = sum(share["months_worked"] for share in shares)
    total_amount = _dec(total_amount)
    for share in shares:
        if total_months:
            share["projected_bonus"] = total_amount * share["months_worked"] / total_months
        else:
            share["projected_bonus"] = Decimal("0")
    return shares


def bonus_fund_summary(proposals, employees, as_of: date) -> dict:
    rows = contributions(proposals)
    total = sum((row["total"] for row in rows), Decimal("0"))
    return {
        "total_amount": total,
        "contract_count": len(rows),
        "contributions": rows,
        "employees": distribute(employees, total, as_of),
    }


def current_bonus_fund(as_of: date) -> dict:
    from accounts.models import User
    from commercial.models import Proposal

    proposals = Proposal.objects.filter(status=Proposal.Status.WON).order_by("closing_date")
    return bonus_fund_summary(proposals, User.objects.all(), as_of)
