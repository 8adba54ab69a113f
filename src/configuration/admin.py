from django.contrib import admin

from configuration.models import SystemConfiguration


@admin.register(SystemConfiguration)
class SystemConfigurationAdmin(admin.ModelAdmin):
    list_display = ("config_type", "updated_at")
    search_fields = ("config_type",)
    readonly_fields = ("created_at", "updated_at")
