"""Budget services: load parameters, price positions, keep budget totals."""
from __future__ import annotations

import logging
from decimal import Decimal

from django.db import transaction
from django.db.models import Sum

from budgets.engine import PositionCost, PositionInputs, calculate_position
from budgets.models import Budget, BudgetPost, Material, SocialCharge, Uniform

logger = logging.getLogger(__name__)

DEFAULT_MATERIAL_COUNT = 5


def default_materials() -> list[dict]:
    """First active materials, one unit each."""
    return [
        {"name": material.name, "unit_value": material.unit_value, "quantity": 1}
        for material in Material.objects.filter(is_active=True)[:DEFAULT_MATERIAL_COUNT]
    ]


def default_uniforms() -> list[dict]:
    return [
        {
            "name": uniform.item_name,
            "unit_value": uniform.unit_value,
            "qty_per_employee": uniform.qty_per_collaborator,
            "useful_life_months": uniform.life_time_months,
        }
        for uniform in Uniform.objects.filter(is_active=True)
    ]


def salary_addition_lines(additions) -> list[dict]:
    return [
        {
            "id": str(addition.pk),
            "name": addition.name,
            "calculation_base": addition.calculation_base,
            "percentage": addition.percentage,
            "fixed_value": addition.fixed_value,
        }
        for addition in additions
    ]


def position_inputs(
    job_role,
    work_scale,
    city,
    shift=BudgetPost.Shift.DAY,
    salary_additions=(),
    materials=None,
    uniforms=None,
    has_intrajornada=False,
    **overrides,
) -> PositionInputs:
    """Calculation inputs for a position; materials and uniforms default to the parameter tables."""
    values = {
        "base_salary": job_role.base_salary,
        "people_quantity": work_scale.people_quantity,
        "working_days": work_scale.working_days,
        "iss_percent": city.iss_percent,
        "night_shift": shift == BudgetPost.Shift.NIGHT,
        "salary_additions": salary_addition_lines(salary_additions),
        "social_charge_rates": list(
            SocialCharge.objects.filter(is_active=True).values_list("percentage", flat=True)
        ),
        "materials": default_materials() if materials is None else list(materials),
        "uniforms": default_uniforms() if uniforms is None else list(uniforms),
        "has_intrajornada": has_intrajornada,
    }
    values.update({key: value for key, value in overrides.items() if value is not None})
    return PositionInputs(**values)


def price_position(**data) -> tuple[PositionInputs, PositionCost]:
    inputs = position_inputs(**data)
    return inputs, calculate_position(inputs)


def refresh_budget_total(budget: Budget) -> Decimal:
    total = budget.posts.aggregate(total=Sum("total_cost"))["total"] or Decimal("0")
    Budget.objects.filter(pk=budget.pk).update(total_value=total)
    budget.total_value = total
    return total


@transaction.atomic
def add_position(budget: Budget, post_name: str, **data) -> BudgetPost:
    """Price a position, store it with its breakdown and update the budget total."""
    inputs, cost = price_position(**data)
    breakdown = cost.as_dict()
    post = BudgetPost.objects.create(
        budget=budget,
        post_name=post_name,
        job_role=data["job_role"],
        work_scale=data["work_scale"],
        city=data["city"],
        shift=data.get("shift", BudgetPost.Shift.DAY),
        has_intrajornada=inputs.has_intrajornada,
        profit_margin=inputs.profit_margin,
        salary_additions=inputs.salary_additions,
        materials=inputs.materials,
        uniforms=inputs.uniforms,
        breakdown=breakdown,
        total_cost=breakdown["total"],
    )
    refresh_budget_total(budget)
    logger.info(
        "Budget %s: position %r added (total_cost=%s, budget total=%s)",
        budget.budget_number,
        post_name,
        post.total_cost,
        budget.total_value,
    )
    return post


@transaction.atomic
def remove_position(post: BudgetPost) -> Decimal:
    budget = post.budget
    post_id = post.pk
    post.delete()
    total = refresh_budget_total(budget)
    logger.info("Budget %s: position %s removed (budget total=%s)", budget.budget_number, post_id, total)
    return total
