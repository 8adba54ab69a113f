from django.contrib import admin

from challenges.models import Challenge


@admin.register(Challenge)
class ChallengeAdmin(admin.ModelAdmin):
    list_display = (
        "title",
        "target_type",
        "target_value",
        "start_date",
        "end_date",
        "status",
        "completion_date",
    )
    list_filter = ("status", "target_type")
    search_fields = ("title", "description", "prize")
    date_hierarchy = "start_date"
    readonly_fields = ("completion_date", "created_at", "updated_at")
