from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class PartsmanConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "partsman"
    verbose_name = _("PC Components Catalog")
