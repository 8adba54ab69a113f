"""Tests for the block-by-block monthly cost of a staffed position."""
from decimal import Decimal

from budgets.engine import (
    PositionInputs,
    calculate_position,
    salary_addition_amount,
    uniform_monthly_cost,
)

NO_VOUCHERS = {
    "transport_voucher": Decimal("0"),
    "meal_voucher": Decimal("0"),
    "food_voucher": Decimal("0"),
}


def _inputs(**overrides):
    values = {
        "base_salary": Decimal("2200"),
        "people_quantity": 2,
        "working_days": 20,
        "iss_percent": Decimal("5"),
        "social_charge_rates": [Decimal("0.2")],
    }
    values.update(overrides)
    return PositionInputs(**values)


class TestSalaryAdditions:
    def test_minimum_wage_base(self):
        addition = {"calculation_base": "salario_minimo", "percentage": "20"}
        assert salary_addition_amount(addition, Decimal("2200")) == Decimal("282.4")

    def test_base_salary_base(self):
        addition = {"calculation_base": "salario_base", "percentage": "10"}
        assert salary_addition_amount(addition, Decimal("2200")) == Decimal("220")

    def test_fixed_value_ignores_percentage(self):
        addition = {"calculation_base": "valor_fixo", "percentage": "50", "fixed_value": "100"}
        assert salary_addition_amount(addition, Decimal("2200")) == Decimal("100")

    def test_unknown_base_adds_nothing(self):
        assert salary_addition_amount({"calculation_base": "outro"}, Decimal("2200")) == 0


class TestUniformMonthlyCost:
    def test_spread_over_useful_life(self):
        uniform = {"unit_value": "120", "qty_per_employee": 2, "useful_life_months": 12}
        assert uniform_monthly_cost(uniform) == Decimal("20")

    def test_missing_life_defaults_to_a_year(self):
        assert uniform_monthly_cost({"unit_value": "60"}) == Decimal("5")


class TestCalculatePosition:
    def test_day_shift_blocks(self):
        cost = calculate_position(_inputs()).as_dict()

        assert cost["base_salary_total"] == Decimal("4400.00")
        assert cost["night_bonus"] == Decimal("0.00")
        assert cost["salary_block"] == Decimal("4400.00")
        assert cost["social_charges_block"] == Decimal("880.00")
        # (6.80 + 25 + 35) a day, 20 days, 2 people
        assert cost["benefits_block"] == Decimal("2672.00")
        assert cost["subtotal"] == Decimal("7952.00")
        # 15 + 4.25 + 0.65 + 3 + 5 = 27.9%
        assert cost["bdi_block"] == Decimal("2218.61")
        assert cost["total"] == Decimal("10170.61")

    def test_night_shift_adds_bonus_and_reduced_hour(self):
        cost = calculate_position(_inputs(night_shift=True, **NO_VOUCHERS)).as_dict()

        # hourly 10: 20 days * 8h * 10 * 0.2 * 2 people
        assert cost["night_bonus"] == Decimal("640.00")
        # 20 days * 10 * 1.2 * 2 people
        assert cost["night_hour_extra"] == Decimal("480.00")
        assert cost["salary_block"] == Decimal("5520.00")
        assert cost["social_charges_block"] == Decimal("1104.00")

    def test_additions_and_uniforms_count_per_person(self):
        inputs = _inputs(
            salary_additions=[
                {"calculation_base": "salario_minimo", "percentage": "20"},
                {"calculation_base": "valor_fixo", "fixed_value": "100"},
            ],
            uniforms=[{"unit_value": "120", "qty_per_employee": 2, "useful_life_months": 12}],
            materials=[
                {"name": "Rádio", "unit_value": "50", "quantity": 2},
                {"name": "Lanterna", "unit_value": "30"},
            ],
            **NO_VOUCHERS,
        )
        cost = calculate_position(inputs).as_dict()

        assert cost["salary_additions_total"] == Decimal("764.80")
        assert cost["salary_block"] == Decimal("5164.80")
        assert cost["uniforms_block"] == Decimal("40.00")
        # materials are per position, not per person
        assert cost["materials_block"] == Decimal("130.00")

    def test_intrajornada_block(self):
        without = calculate_position(_inputs(**NO_VOUCHERS))
        with_break = calculate_position(_inputs(has_intrajornada=True, **NO_VOUCHERS))

        assert with_break.intrajornada_block == Decimal("30")
        assert with_break.subtotal - without.subtotal == Decimal("30")

    def test_profit_margin_and_iss_drive_bdi(self):
        cost = calculate_position(
            _inputs(profit_margin=Decimal("0"), iss_percent=Decimal("0"), social_charge_rates=[], **NO_VOUCHERS)
        )

        # admin + PIS + COFINS only: 7.9%
        assert cost.subtotal == Decimal("4400")
        assert cost.bdi_block == Decimal("347.6")
        assert cost.total == Decimal("4747.6")

    def test_at_least_one_person(self):
        cost = calculate_position(_inputs(people_quantity=0, **NO_VOUCHERS))
        assert cost.base_salary_total == Decimal("2200")
