# dancecore/apps/registration/services/entries.py
"""
Fachada del Entry Store: lo único que el núcleo necesita leer de las
inscripciones. Los flujos de alta/pagos/medios viven fuera.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from django.db import transaction
from django.utils import timezone

from dancecore.apps.core.errors import NotFoundError

from ..models import Contestant, Dancer, EventEntry

logger = logging.getLogger(__name__)


def get_entry(entry_id: int) -> EventEntry:
    try:
        return EventEntry.objects.select_related("event").get(pk=entry_id)
    except (EventEntry.DoesNotExist, ValueError, TypeError):
        raise NotFoundError(f"Inscripción {entry_id} no encontrada.", entry_id=entry_id)


def list_approved_entries(event_id: int) -> List[EventEntry]:
    """Inscripciones aprobadas (live y virtual) en orden de envío."""
    return list(
        EventEntry.objects.filter(event_id=event_id, approved=True)
        .select_related("event")
        .order_by("submitted_at", "id")
    )


def get_participant(participant_id: str) -> Optional[Dancer]:
    """Bailarín por id interno o, si no, por id público. None si no existe."""
    from .identity import find_dancer

    return find_dancer(participant_id)


def contestant_exists(contestant_id: str) -> bool:
    if not contestant_id:
        return False
    return Contestant.objects.filter(pk=contestant_id).exists()


def get_contestant(contestant_id: str) -> Optional[Contestant]:
    if not contestant_id:
        return None
    return Contestant.objects.filter(pk=contestant_id).first()


def approve_entry(entry_id: int):
    """
    Aprueba la inscripción y materializa su Performance en el acto.
    Devuelve (entry, performance).
    """
    from dancecore.apps.scheduling.services.reconciler import ensure_performance

    with transaction.atomic():
        entry = EventEntry.objects.select_for_update().filter(pk=entry_id).first()
        if entry is None:
            raise NotFoundError(f"Inscripción {entry_id} no encontrada.", entry_id=entry_id)
        if not entry.approved:
            entry.approved = True
            entry.approved_at = timezone.now()
            entry.save(update_fields=["approved", "approved_at"])
            logger.info("Inscripción %s aprobada", entry.pk)
        # Si no se puede materializar la Performance, la aprobación se revierte
        performance = ensure_performance(entry.pk)
    return entry, performance
