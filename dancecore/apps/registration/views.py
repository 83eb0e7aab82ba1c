# dancecore/apps/registration/views.py
from __future__ import annotations

from django.http import HttpRequest

from dancecore.apps.core.http import json_api

from .services.entries import approve_entry


@json_api(methods=("POST",))
def approve_entry_view(request: HttpRequest, entry_id: int):
    """Aprueba la inscripción y crea su performance en el acto."""
    entry, performance = approve_entry(entry_id)
    return {
        "message": "Inscripción aprobada.",
        "entry": entry.as_dict(),
        "performance": performance.as_dict(),
    }
