from .base import *  # noqa: F401,F403

# Base en memoria y correo capturado en django.core.mail.outbox
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"
PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
APP_URL = "http://testserver"
LOG_LEVEL = "WARNING"
LOGGING["root"]["level"] = LOG_LEVEL  # noqa: F405
LOGGING["loggers"]["dancecore"]["level"] = LOG_LEVEL  # noqa: F405
