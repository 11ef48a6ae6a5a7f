from django.apps import AppConfig


class PaymentsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "payments"

    def ready(self):
        """
        Build the gateway registry when the app is ready.
        This ensures every family is registered before the first lookup.
        """
        from .gateways.factory import get_default_registry
        get_default_registry()
