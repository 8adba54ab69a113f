from django.contrib import admin

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


@admin.register(JobRole)
class JobRoleAdmin(admin.ModelAdmin):
    list_display = ("role_name", "base_salary", "is_active")
    list_filter = ("is_active",)
    search_fields = ("role_name",)


@admin.register(WorkScale)
class WorkScaleAdmin(admin.ModelAdmin):
    list_display = ("scale_name", "people_quantity", "working_days", "is_active")
    list_filter = ("is_active",)


@admin.register(City)
class CityAdmin(admin.ModelAdmin):
    list_display = ("name", "iss_percent", "is_active")
    list_filter = ("is_active",)
    search_fields = ("name",)


@admin.register(Uniform)
class UniformAdmin(admin.ModelAdmin):
    list_display = ("item_name", "unit_value", "qty_per_collaborator", "life_time_months", "is_active")
    list_filter = ("is_active",)


@admin.register(SocialCharge)
class SocialChargeAdmin(admin.ModelAdmin):
    list_display = ("charge_name", "percentage", "is_active")
    list_filter = ("is_active",)


@admin.register(Material)
class MaterialAdmin(admin.ModelAdmin):
    list_display = ("name", "unit_value", "is_active")
    list_filter = ("is_active",)


@admin.register(SalaryAddition)
class SalaryAdditionAdmin(admin.ModelAdmin):
    list_display = ("name", "calculation_base", "percentage", "fixed_value", "is_active")
    list_filter = ("calculation_base", "is_active")


class BudgetPostInline(admin.TabularInline):
    model = BudgetPost
    extra = 0
    fields = ("post_name", "job_role", "work_scale", "city", "shift", "total_cost")
    readonly_fields = ("total_cost",)


@admin.register(Budget)
class BudgetAdmin(admin.ModelAdmin):
    list_display = ("budget_number", "client", "project_name", "status", "total_value", "created_at")
    list_filter = ("status",)
    search_fields = ("client", "project_name")
    readonly_fields = ("budget_number", "total_value", "created_at", "updated_at")
    inlines = [BudgetPostInline]
