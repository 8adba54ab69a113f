"""Admin registrations for commercial module."""
from django.contrib import admin

from commercial.models import Proposal


@admin.register(Proposal)
class ProposalAdmin(admin.ModelAdmin):
    list_display = (
        "client",
        "status",
        "monthly_value",
        "months",
        "total_value",
        "closing_date",
        "closer",
        "sdr",
    )
    list_filter = ("status", "closing_date")
    search_fields = ("client", "closer__email", "sdr__email")
    date_hierarchy = "closing_date"
    list_select_related = ("closer", "sdr")
