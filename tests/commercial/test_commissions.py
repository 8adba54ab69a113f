"""Tests for commission tiers and per-employee commission aggregation."""
from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace

import pytest
from django.core.exceptions import ValidationError

from commercial.commissions import (
    commission_rate,
    contract_commission,
    month_total,
    monthly_commissions,
    open_contracts,
    open_contracts_potential,
    progress_info,
)
from commercial.models import Proposal


def _proposal(total_value, status="WON", closing_date=None, closer_id="c1", sdr_id=None, created_at=None):
    return SimpleNamespace(
        total_value=Decimal(str(total_value)),
        status=status,
        closing_date=closing_date,
        created_at=created_at or datetime(2025, 1, 2, 10, 0),
        closer_id=closer_id,
        sdr_id=sdr_id,
    )


class TestTiers:
    @pytest.mark.parametrize(
        "total, expected",
        [
            (Decimal("0"), Decimal("0.4")),
            (Decimal("600000"), Decimal("0.4")),
            (Decimal("600000.01"), Decimal("0.8")),
            (Decimal("1200000"), Decimal("0.8")),
            (Decimal("1500000"), Decimal("1.2")),
        ],
    )
    def test_default_rates(self, total, expected):
        assert commission_rate(total) == expected

    def test_configured_tiers(self):
        tiers = [
            {"percentage": 2, "min_value": 100, "max_value": None, "label": "Topo"},
            {"percentage": 1, "min_value": 0, "max_value": 100, "label": "Base"},
        ]

        assert commission_rate(50, tiers) == Decimal("1")
        assert commission_rate(150, tiers) == Decimal("2")

    def test_contract_commission(self):
        assert contract_commission(Decimal("100000"), Decimal("0.8")) == Decimal("800")


class TestAggregations:
    def test_monthly_commissions_by_closing_month(self):
        proposals = [
            _proposal(100000, closing_date=date(2025, 2, 10)),
            _proposal(700000, closing_date=date(2025, 2, 20)),
            _proposal(50000, closing_date=None, created_at=datetime(2025, 5, 3, 9, 0)),
            _proposal(99999, status="LOST", closing_date=date(2025, 2, 1)),
            _proposal(99999, closing_date=date(2025, 2, 1), closer_id="other"),
            _proposal(99999, closing_date=date(2024, 2, 1)),
        ]

        months = monthly_commissions(proposals, "c1", "closer", 2025)

        assert len(months) == 12
        assert len(months["2025-02"]["contracts"]) == 2
        assert months["2025-02"]["total_value"] == Decimal("800000")
        assert months["2025-02"]["commission"] == Decimal("400") + Decimal("5600")
        assert months["2025-05"]["total_value"] == Decimal("50000")
        assert months["2025-01"]["total_value"] == 0

    def test_sdr_role_matches_originator(self):
        proposals = [_proposal(1000, closing_date=date(2025, 3, 1), closer_id="x", sdr_id="s1")]

        assert monthly_commissions(proposals, "s1", "sdr", 2025)["2025-03"]["total_value"] == Decimal("1000")
        assert monthly_commissions(proposals, "s1", "closer", 2025)["2025-03"]["total_value"] == 0

    def test_month_total_and_open_contracts(self):
        proposals = [
            _proposal(1000, closing_date=date(2025, 3, 1)),
            _proposal(2000, closing_date=date(2025, 3, 28)),
            _proposal(4000, closing_date=date(2025, 4, 1)),
            _proposal(5000, status="NEGOTIATION"),
            _proposal(6000, status="PROPOSAL"),
        ]

        assert month_total(proposals, "c1", "closer", date(2025, 3, 15)) == Decimal("3000")
        assert len(open_contracts(proposals, "c1", "closer")) == 2

    def test_open_contracts_potential_per_tier(self):
        proposals = [
            _proposal(10000, status="NEGOTIATION"),
            _proposal(5000, status="PROPOSAL"),
            _proposal(9000, status="PROPOSAL", closer_id="other"),
            _proposal(7000, closing_date=date(2025, 3, 1)),
        ]

        potential = open_contracts_potential(proposals, "c1", "closer")

        assert [row["label"] for row in potential] == ["Meta Base", "Supermeta", "Megameta"]
        assert [row["commission"] for row in potential] == [Decimal("60"), Decimal("120"), Decimal("180")]

    def test_progress_info(self):
        info = progress_info(Decimal("900000"))

        assert info["current_rate"] == Decimal("0.8")
        assert info["next_milestone"] == Decimal("1200000")
        assert info["remaining_to_next"] == Decimal("300000")
        assert info["progress_percentage"] == Decimal("75")
        assert info["has_achievement"] is True

    def test_progress_info_top_tier(self):
        info = progress_info(Decimal("2000000"))

        assert info["next_milestone"] is None
        assert info["progress_percentage"] == Decimal("100")


@pytest.mark.django_db
class TestProposalModel:
    def test_total_value_defaults_to_monthly_times_months(self, closer_user):
        proposal = Proposal.objects.create(
            client="ACME",
            monthly_value=Decimal("1500"),
            months=6,
            closer=closer_user,
        )

        assert proposal.total_value == Decimal("9000")

    def test_won_requires_closing_date(self, closer_user):
        proposal = Proposal(
            client="ACME",
            monthly_value=Decimal("1500"),
            months=6,
            status=Proposal.Status.WON,
            closer=closer_user,
        )
        with pytest.raises(ValidationError) as excinfo:
            proposal.full_clean()
        assert "closing_date" in excinfo.value.message_dict
