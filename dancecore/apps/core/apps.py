from django.apps import AppConfig


class CoreConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "dancecore.apps.core"
    verbose_name = "Core (errores y utilidades)"
