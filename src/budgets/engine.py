"""Monthly cost of a staffed position, built up in blocks.

1. salary composition (base salary, night shift, salary additions)
2. social charges over block 1
3. daily benefits (transport, meal and food vouchers)
4. materials
5. uniforms, spread over their useful life
6. intrajornada (paid rest break), when the position has one
7. BDI (indirect costs and taxes) over the subtotal of blocks 1-6
8. total

Everything is computed for the whole position: per-person amounts are
multiplied by the number of people the work scale needs.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from decimal import Decimal

MINIMUM_WAGE = Decimal("1412.00")
MONTHLY_HOURS = Decimal("220")
NIGHT_HOURS_PER_DAY = Decimal("8")
NIGHT_BONUS_RATE = Decimal("0.2")
NIGHT_HOUR_FACTOR = Decimal("1.2")
INTRAJORNADA_FACTOR = Decimal("1.5")

DEFAULT_TRANSPORT_VOUCHER = Decimal("6.80")
DEFAULT_MEAL_VOUCHER = Decimal("25.00")
DEFAULT_FOOD_VOUCHER = Decimal("35.00")

DEFAULT_PROFIT_MARGIN = Decimal("15.0")
ADMIN_MARGIN = Decimal("4.25")
PIS = Decimal("0.65")
COFINS = Decimal("3.00")

MINIMUM_WAGE_BASE = "salario_minimo"
BASE_SALARY_BASE = "salario_base"
FIXED_VALUE_BASE = "valor_fixo"

CENT = Decimal("0.01")


def _dec(value) -> Decimal:
    if value is None or value == "":
        return Decimal("0")
    return Decimal(str(value))


@dataclass
class PositionInputs:
    base_salary: Decimal
    people_quantity: int
    working_days: int
    iss_percent: Decimal
    night_shift: bool = False
    # [{"calculation_base", "percentage", "fixed_value"}]
    salary_additions: list = field(default_factory=list)
    # fractions of the salary block (0.20 = 20%)
    social_charge_rates: list = field(default_factory=list)
    # [{"name", "unit_value", "quantity"}]
    materials: list = field(default_factory=list)
    # [{"name", "unit_value", "qty_per_employee", "useful_life_months"}]
    uniforms: list = field(default_factory=list)
    has_intrajornada: bool = False
    transport_voucher: Decimal = DEFAULT_TRANSPORT_VOUCHER
    meal_voucher: Decimal = DEFAULT_MEAL_VOUCHER
    food_voucher: Decimal = DEFAULT_FOOD_VOUCHER
    profit_margin: Decimal = DEFAULT_PROFIT_MARGIN


@dataclass
class PositionCost:
    base_salary_total: Decimal
    night_bonus: Decimal
    night_hour_extra: Decimal
    salary_additions_total: Decimal
    salary_block: Decimal
    social_charges_block: Decimal
    benefits_block: Decimal
    materials_block: Decimal
    uniforms_block: Decimal
    intrajornada_block: Decimal
    subtotal: Decimal
    bdi_block: Decimal
    total: Decimal

    def as_dict(self) -> dict:
        return {key: value.quantize(CENT) for key, value in asdict(self).items()}


def salary_addition_amount(addition: dict, base_salary: Decimal) -> Decimal:
    """Per-person amount of one salary addition."""
    base = addition.get("calculation_base")
    percentage = _dec(addition.get("percentage"))
    if base == MINIMUM_WAGE_BASE:
        return MINIMUM_WAGE * percentage / 100
    if base == BASE_SALARY_BASE:
        return base_salary * percentage / 100
    if base == FIXED_VALUE_BASE:
        return _dec(addition.get("fixed_value"))
    return Decimal("0")


def uniform_monthly_cost(uniform: dict) -> Decimal:
    useful_life = _dec(uniform.get("useful_life_months")) or Decimal("12")
    quantity = _dec(uniform.get("qty_per_employee")) or Decimal("1")
    return _dec(uniform.get("unit_value")) * quantity / useful_life


def calculate_position(inputs: PositionInputs) -> PositionCost:
    salary = _dec(inputs.base_salary)
    people = Decimal(max(int(inputs.people_quantity or 1), 1))
    days = Decimal(int(inputs.working_days or 0))
    hourly = salary / MONTHLY_HOURS

    # Block 1
    base_salary_total = salary * people
    night_bonus = Decimal("0")
    night_hour_extra = Decimal("0")
    if inputs.night_shift:
        night_bonus = days * NIGHT_HOURS_PER_DAY * hourly * NIGHT_BONUS_RATE * people
        night_hour_extra = days * hourly * NIGHT_HOUR_FACTOR * people
    additions = sum(
        (salary_addition_amount(addition, salary) for addition in inputs.salary_additions),
        Decimal("0"),
    ) * people
    salary_block = base_salary_total + night_bonus + night_hour_extra + additions

    # Block 2
    social_charges_block = sum(
        (salary_block * _dec(rate) for rate in inputs.social_charge_rates), Decimal("0")
    )

    # Block 3
    daily_benefits = (
        _dec(inputs.transport_voucher) + _dec(inputs.meal_voucher) + _dec(inputs.food_voucher)
    )
    benefits_block = daily_benefits * days * people

    # Blocks 4 and 5
    materials_block = sum(
        (_dec(m.get("unit_value")) * _dec(m.get("quantity", 1)) for m in inputs.materials),
        Decimal("0"),
    )
    uniforms_block = sum((uniform_monthly_cost(u) for u in inputs.uniforms), Decimal("0")) * people

    # Block 6
    intrajornada_block = Decimal("0")
    if inputs.has_intrajornada:
        intrajornada_block = people * hourly * INTRAJORNADA_FACTOR

    subtotal = (
        salary_block
        + social_charges_block
        + benefits_block
        + materials_block
        + uniforms_block
        + intrajornada_block
    )

    # Block 7
    bdi_rate = _dec(inputs.profit_margin) + ADMIN_MARGIN + PIS + COFINS + _dec(inputs.iss_percent)
    bdi_block = subtotal * bdi_rate / 100

    return PositionCost(
        base_salary_total=base_salary_total,
        night_bonus=night_bonus,
        night_hour_extra=night_hour_extra,
        salary_additions_total=additions,
        salary_block=salary_block,
        social_charges_block=social_charges_block,
        benefits_block=benefits_block,
        materials_block=materials_block,
        uniforms_block=uniforms_block,
        intrajornada_block=intrajornada_block,
        subtotal=subtotal,
        bdi_block=bdi_block,
        total=subtotal + bdi_block,
    )
