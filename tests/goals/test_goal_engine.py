"""Tests for contract allocation and monthly goal reconciliation."""
from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from goals.engine import allocate_contracts, annual_value, reconcile_year

AS_OF = date(2025, 6, 15)


def _contract(contract_id, monthly_value, closing_date, status="WON", client=None):
    return SimpleNamespace(
        id=contract_id,
        client=client or f"Cliente {contract_id}",
        monthly_value=Decimal(str(monthly_value)),
        status=status,
        closing_date=closing_date,
    )


def _targets(**months):
    return {int(key[1:]): Decimal(str(value)) for key, value in months.items()}


class TestAnnualValue:
    def test_monthly_value_is_multiplied_by_twelve(self):
        assert annual_value(_contract("c1", "2500.50", date(2025, 1, 1))) == Decimal("30006.00")


class TestReconcileYear:
    def test_january_deficit_is_added_to_february(self):
        result = reconcile_year([], _targets(m1=100, m2=200), 2025, AS_OF)

        jan, feb = result.month(1), result.month(2)
        assert jan.deficit == Decimal("100")
        assert jan.carry_over_to_next == Decimal("100")
        assert feb.inherited_carry_over == Decimal("100")
        assert feb.effective_target == Decimal("300")

    def test_january_surplus_is_taken_off_february(self):
        contracts = [_contract("c1", "12.5", date(2025, 1, 10))]

        result = reconcile_year(contracts, _targets(m1=100, m2=200), 2025, AS_OF)

        jan, feb = result.month(1), result.month(2)
        assert jan.actual_revenue == Decimal("150")
        assert jan.surplus == Decimal("50")
        assert jan.carry_over_to_next == Decimal("-50")
        assert feb.effective_target == Decimal("150")

    def test_effective_target_is_floored_at_zero(self):
        contracts = [_contract("c1", "12.5", date(2025, 1, 10))]

        result = reconcile_year(contracts, _targets(m1=100, m2=30), 2025, AS_OF)

        assert result.month(2).effective_target == Decimal("0")

    def test_month_without_goal_does_not_carry(self):
        contracts = [_contract("c1", "10", date(2025, 1, 20))]

        result = reconcile_year(contracts, _targets(m1=0, m2=100), 2025, AS_OF)

        jan = result.month(1)
        assert jan.actual_revenue == Decimal("120")
        assert jan.surplus == Decimal("120")
        assert jan.carry_over_to_next == Decimal("0")
        assert result.month(2).effective_target == Decimal("100")

    def test_effective_target_formula_holds_every_month(self):
        targets = {month: Decimal("1000") for month in range(1, 13)}
        targets[4] = Decimal("0")
        contracts = [
            _contract("c1", "50", date(2025, 2, 3)),
            _contract("c2", "300", date(2025, 5, 9)),
            _contract("c3", "40", date(2025, 9, 30)),
        ]

        result = reconcile_year(contracts, targets, 2025, AS_OF)

        previous_carry = Decimal("0")
        for row in result.months:
            assert row.inherited_carry_over == previous_carry
            assert row.effective_target == max(Decimal("0"), row.stated_target + previous_carry)
            if row.stated_target == 0:
                assert row.carry_over_to_next == 0
            previous_carry = row.carry_over_to_next

    def test_headline_totals_count_each_contract_once(self):
        contracts = [
            _contract("c1", "100", date(2025, 1, 15)),
            _contract("c2", "200", date(2025, 1, 31)),
            _contract("c3", "300", date(2025, 11, 2)),
            _contract("lost", "999", date(2025, 3, 1), status="LOST"),
            _contract("open", "999", None, status="NEGOTIATION"),
            _contract("last-year", "999", date(2024, 12, 31)),
        ]

        result = reconcile_year(contracts, _targets(m1=1000), 2025, AS_OF)

        expected = Decimal("600") * 12
        assert sum(row.actual_revenue for row in result.months) == expected
        assert result.total_actual_revenue == expected
        assert result.total_contracts == 3
        assert result.month(1).actual_contracts == 2

    def test_progress_is_zero_without_targets(self):
        contracts = [_contract("c1", "100", date(2025, 1, 15))]

        result = reconcile_year(contracts, {}, 2025, AS_OF)

        assert result.total_target == Decimal("0")
        assert result.progress_percentage == Decimal("0")

    def test_totals_and_progress(self):
        targets = {month: Decimal("1000") for month in range(1, 13)}
        contracts = [_contract("c1", "250", date(2025, 3, 1))]

        result = reconcile_year(contracts, targets, 2025, AS_OF)

        assert result.total_target == Decimal("12000")
        assert result.total_actual_revenue == Decimal("3000")
        assert result.progress_percentage == Decimal("25")
        assert result.remaining_revenue == Decimal("9000")

    def test_is_past_uses_reference_date(self):
        result = reconcile_year([], {}, 2025, AS_OF)

        assert [row.is_past for row in result.months] == [True] * 6 + [False] * 6

    def test_alerts_for_elapsed_deficits_and_surpluses(self):
        contracts = [_contract("c1", "12.5", date(2025, 3, 5))]
        targets = _targets(m1=100, m3=100, m6=100)

        result = reconcile_year(contracts, targets, 2025, AS_OF)

        warnings = [a["month"] for a in result.alerts if a["type"] == "warning"]
        successes = [a["month"] for a in result.alerts if a["type"] == "success"]
        # June is the current month, so it is not flagged yet.
        assert warnings == [1]
        assert successes == [3]


class TestAllocateContracts:
    def test_contract_fills_deficits_from_its_closing_month(self):
        targets = {month: Decimal("100") for month in range(1, 13)}
        contracts = [
            _contract("b", "10", date(2025, 2, 1)),
            _contract("a", "20", date(2025, 1, 5)),
        ]

        allocations = allocate_contracts(contracts, targets, 2025)

        assert [(a.contract_id, a.allocated_month, a.allocated_value) for a in allocations] == [
            ("a", 1, Decimal("100")),
            ("a", 2, Decimal("100")),
            ("a", 3, Decimal("40")),
            ("b", 3, Decimal("60")),
            ("b", 4, Decimal("60")),
        ]
        assert allocations[3].signed_month == 2
        assert allocations[0].closing_date == date(2025, 1, 5)

    def test_value_beyond_december_is_not_allocated(self):
        targets = {12: Decimal("100")}
        contracts = [_contract("dec", "100", date(2025, 12, 10))]

        allocations = allocate_contracts(contracts, targets, 2025)

        assert len(allocations) == 1
        assert allocations[0].allocated_value == Decimal("100")

    def test_allocation_does_not_change_headline_revenue(self):
        targets = {month: Decimal("100") for month in range(1, 13)}
        contracts = [_contract("a", "20", date(2025, 1, 5))]

        result = reconcile_year(contracts, targets, 2025, AS_OF)
        allocate_contracts(contracts, targets, 2025)

        assert result.month(1).actual_revenue == Decimal("240")
        assert result.month(2).actual_revenue == Decimal("0")
