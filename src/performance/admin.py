from django.contrib import admin

from performance.models import WeeklyPerformance


@admin.register(WeeklyPerformance)
class WeeklyPerformanceAdmin(admin.ModelAdmin):
    list_display = (
        "employee",
        "week_ending_date",
        "education_points",
        "proposals_presented",
        "contracts_signed",
        "mql",
        "visits_scheduled",
        "total_points",
    )
    list_filter = ("week_ending_date", "employee__role")
    search_fields = ("employee__first_name", "employee__last_name", "employee__email")
    date_hierarchy = "week_ending_date"
    list_select_related = ("employee",)
