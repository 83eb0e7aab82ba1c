from django.apps import AppConfig


class EventsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "dancecore.apps.events"
    verbose_name = "Eventos y jueces"
