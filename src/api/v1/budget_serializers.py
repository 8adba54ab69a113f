"""Serializers dedicated to the budgets module."""
from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers

from budgets.models import (
    Budget,
    BudgetPost,
    City,
    JobRole,
    Material,
    SalaryAddition,
    SocialCharge,
    Uniform,
    WorkScale,
)

PARAMETER_READ_ONLY = ["id", "created_at", "updated_at"]


class JobRoleSerializer(serializers.ModelSerializer):
    class Meta:
        model = JobRole
        fields = ["id", "role_name", "base_salary", "is_active", "created_at", "updated_at"]
        read_only_fields = PARAMETER_READ_ONLY


class WorkScaleSerializer(serializers.ModelSerializer):
    class Meta:
        model = WorkScale
        fields = ["id", "scale_name", "people_quantity", "working_days", "is_active", "created_at", "updated_at"]
        read_only_fields = PARAMETER_READ_ONLY


class CitySerializer(serializers.ModelSerializer):
    class Meta:
        model = City
        fields = ["id", "name", "iss_percent", "is_active", "created_at", "updated_at"]
        read_only_fields = PARAMETER_READ_ONLY


class UniformSerializer(serializers.ModelSerializer):
    class Meta:
        model = Uniform
        fields = [
            "id", "item_name", "unit_value", "qty_per_collaborator", "life_time_months",
            "is_active", "created_at", "updated_at",
        ]
        read_only_fields = PARAMETER_READ_ONLY


class SocialChargeSerializer(serializers.ModelSerializer):
    class Meta:
        model = SocialCharge
        fields = ["id", "charge_name", "percentage", "is_active", "created_at", "updated_at"]
        read_only_fields = PARAMETER_READ_ONLY


class MaterialSerializer(serializers.ModelSerializer):
    class Meta:
        model = Material
        fields = ["id", "name", "unit_value", "is_active", "created_at", "updated_at"]
        read_only_fields = PARAMETER_READ_ONLY


class SalaryAdditionSerializer(serializers.ModelSerializer):
    class Meta:
        model = SalaryAddition
        fields = [
            "id", "name", "calculation_base", "percentage", "fixed_value",
            "is_active", "created_at", "updated_at",
        ]
        read_only_fields = PARAMETER_READ_ONLY


class BudgetSerializer(serializers.ModelSerializer):
    post_count = serializers.IntegerField(source="posts.count", read_only=True)

    class Meta:
        model = Budget
        fields = [
            "id", "budget_number", "client", "project_name", "status", "total_value",
            "post_count", "created_at", "updated_at",
        ]
        read_only_fields = ["id", "budget_number", "total_value", "post_count", "created_at", "updated_at"]


class BudgetPostSerializer(serializers.ModelSerializer):
    job_role_name = serializers.CharField(source="job_role.role_name", read_only=True)
    work_scale_name = serializers.CharField(source="work_scale.scale_name", read_only=True)
    city_name = serializers.CharField(source="city.name", read_only=True)

    class Meta:
        model = BudgetPost
        fields = [
            "id", "budget", "post_name", "job_role", "job_role_name", "work_scale",
            "work_scale_name", "city", "city_name", "shift", "has_intrajornada",
            "profit_margin", "salary_additions", "materials", "uniforms", "breakdown",
            "total_cost", "created_at",
        ]
        read_only_fields = fields


class MaterialLineSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=120)
    unit_value = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0"))
    quantity = serializers.IntegerField(min_value=0, default=1)


class UniformLineSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=120)
    unit_value = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0"))
    qty_per_employee = serializers.IntegerField(min_value=1, default=1)
    useful_life_months = serializers.IntegerField(min_value=1, default=12)


class PositionCalculationSerializer(serializers.Serializer):
    """Inputs of a position price; materials and uniforms default to the parameter tables."""

    job_role = serializers.PrimaryKeyRelatedField(queryset=JobRole.objects.filter(is_active=True))
    work_scale = serializers.PrimaryKeyRelatedField(queryset=WorkScale.objects.filter(is_active=True))
    city = serializers.PrimaryKeyRelatedField(queryset=City.objects.filter(is_active=True))
    shift = serializers.ChoiceField(choices=BudgetPost.Shift.choices, default=BudgetPost.Shift.DAY)
    salary_additions = serializers.PrimaryKeyRelatedField(
        queryset=SalaryAddition.objects.filter(is_active=True), many=True, required=False,
    )
    materials = MaterialLineSerializer(many=True, required=False)
    uniforms = UniformLineSerializer(many=True, required=False)
    has_intrajornada = serializers.BooleanField(default=False)
    profit_margin = serializers.DecimalField(
        max_digits=5, decimal_places=2, min_value=Decimal("0"), required=False,
    )
    transport_voucher = serializers.DecimalField(
        max_digits=8, decimal_places=2, min_value=Decimal("0"), required=False,
    )
    meal_voucher = serializers.DecimalField(
        max_digits=8, decimal_places=2, min_value=Decimal("0"), required=False,
    )
    food_voucher = serializers.DecimalField(
        max_digits=8, decimal_places=2, min_value=Decimal("0"), required=False,
    )


class BudgetPostCreateSerializer(PositionCalculationSerializer):
    budget = serializers.PrimaryKeyRelatedField(queryset=Budget.objects.all())
    post_name = serializers.CharField(max_length=255)
