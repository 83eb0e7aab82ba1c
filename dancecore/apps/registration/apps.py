from django.apps import AppConfig


class RegistrationConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "dancecore.apps.registration"
    verbose_name = "Inscripciones (entries, bailarines, estudios)"
