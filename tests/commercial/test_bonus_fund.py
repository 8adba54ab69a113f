"""Tests for the team bonus fund accrual and its split."""
from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest

from commercial.bonus_fund import bonus_fund_summary, contributions, distribute, months_worked

AS_OF = date(2025, 6, 15)


def _proposal(status, total, closing_date=date(2025, 3, 14)):
    return SimpleNamespace(
        id=f"p-{status}-{total}",
        client="ACME",
        status=status,
        total_value=Decimal(total),
        closing_date=closing_date,
        created_at=None,
    )


class TestMonthsWorked:
    @pytest.mark.parametrize(
        "admission, expected",
        [
            (None, 6),
            (date(2024, 8, 10), 6),
            (date(2025, 3, 10), 4),
            (date(2025, 3, 20), 3),
            (date(2025, 5, 20), 1),
            (date(2025, 6, 15), 1),
            (date(2025, 6, 20), 0),
        ],
    )
    def test_months_in_current_year(self, admission, expected):
        assert months_worked(admission, AS_OF) == expected

    def test_accepts_iso_strings(self):
        assert months_worked("2025-01-15", AS_OF) == 6


class TestContributions:
    def test_only_signed_contracts_contribute(self):
        rows = contributions([_proposal("WON", "120000"), _proposal("LOST", "50000")])

        assert len(rows) == 1
        assert rows[0]["fixed_amount"] == Decimal("50")
        assert rows[0]["percentage_amount"] == Decimal("120")
        assert rows[0]["total"] == Decimal("170")
        assert rows[0]["date"] == date(2025, 3, 14)


class TestDistribute:
    def test_split_in_proportion_to_months_worked(self):
        employees = [
            SimpleNamespace(id="a", role="ADMIN", name="Ana", admission_date=None),
            SimpleNamespace(id="c", role="CLOSER", name="Carla", admission_date=None),
            SimpleNamespace(id="s", role="SDR", name="Sergio", admission_date=date(2025, 3, 20)),
        ]

        shares = distribute(employees, Decimal("90"), AS_OF)

        assert [(s["employee_id"], s["months_worked"], s["projected_bonus"]) for s in shares] == [
            ("c", 6, Decimal("60")),
            ("s", 3, Decimal("30")),
        ]

    def test_nobody_admitted_yet_gets_nothing(self):
        employees = [SimpleNamespace(id="s", role="SDR", name="Sergio", admission_date=date(2025, 7, 1))]

        assert distribute(employees, Decimal("90"), AS_OF)[0]["projected_bonus"] == Decimal("0")

    def test_summary_totals(self):
        employees = [SimpleNamespace(id="c", role="CLOSER", name="Carla", admission_date=None)]
        proposals = [_proposal("WON", "120000"), _proposal("WON", "10000")]

        summary = bonus_fund_summary(proposals, employees, AS_OF)

        assert summary["contract_count"] == 2
        assert summary["total_amount"] == Decimal("230")
        assert summary["employees"][0]["projected_bonus"] == Decimal("230")


@pytest.mark.django_db
class TestBonusFundAPI:
    def test_fund_from_signed_contracts(self, admin_client, won_proposal):
        response = admin_client.get("/api/v1/bonus-fund/")

        assert response.status_code == 200
        body = response.json()
        assert body["contract_count"] == 1
        assert Decimal(str(body["total_amount"])) == Decimal("170")
        assert len(body["employees"]) == 2

    def test_requires_authentication(self, api_client):
        assert api_client.get("/api/v1/bonus-fund/").status_code in (401, 403)
