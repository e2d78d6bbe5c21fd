"""
Payments app configuration.

This app provides gateway result handling:
- Result code normalization for the storefront
- Order updates from payment details responses
- Recurring vault request building
"""

from django.apps import AppConfig


class PaymentsConfig(AppConfig):
    """Configuration for the payments application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "payments"
    verbose_name = "Payments"
