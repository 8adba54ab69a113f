"""Broadcast channel for configuration changes."""
from django.dispatch import Signal

# Sent with ``config_type`` and ``config_data`` after every upsert.
configuration_updated = Signal()
