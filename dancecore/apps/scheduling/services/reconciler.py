# dancecore/apps/scheduling/services/reconciler.py
"""
Reconciliación Entry -> Performance.

Garantiza exactamente una Performance por inscripción aprobada y repara
las que quedaron inconsistentes (event_id distinto, item_number viejo).
La unicidad la impone la BD (event_entry es OneToOne): ante una carrera,
el segundo insert falla y se devuelve la fila ya existente.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from django.db import DatabaseError, IntegrityError, transaction

from dancecore.apps.core.errors import (
    CompetitionError,
    ConflictError,
    NoValidContestantError,
    NotApprovedError,
    NotFoundError,
)
from dancecore.apps.events.models import Event
from dancecore.apps.registration.models import EventEntry
from dancecore.apps.registration.services.entries import (
    contestant_exists,
    get_entry,
    list_approved_entries,
)
from dancecore.apps.registration.services.identity import (
    ResolvedParticipant,
    resolve_participants,
)

from ..models import Performance, PerformanceStatus

logger = logging.getLogger(__name__)

CREATED = "created"
REPAIRED = "repaired"
UNCHANGED = "unchanged"


@dataclass
class ReconcileReport:
    event_id: int
    created: int = 0
    fixed: int = 0
    unchanged: int = 0
    failed: int = 0
    errors: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.created + self.fixed + self.unchanged + self.failed

    def as_dict(self) -> Dict[str, Any]:
        return {
            "event_id": self.event_id,
            "created": self.created,
            "fixed": self.fixed,
            "unchanged": self.unchanged,
            "failed": self.failed,
            "total": self.total,
            "errors": self.errors,
        }


# -------------------------------
# Utilidades
# -------------------------------
def _valid_contestant_id(entry: EventEntry, participants: List[ResolvedParticipant]) -> str:
    """
    Dueño nominal si existe; si no, el primer participante resuelto a su
    id canónico de bailarín. Sin ninguno de los dos es un problema de datos.
    """
    if contestant_exists(entry.contestant_id):
        return entry.contestant_id

    logger.warning(
        "Contestant %s de la inscripción %s no existe; probando primer participante",
        entry.contestant_id, entry.pk,
    )
    if participants and participants[0].is_resolved:
        dancer_id = participants[0].dancer_id
        logger.info("Usando bailarín %s como contestant de la inscripción %s", dancer_id, entry.pk)
        return dancer_id

    raise NoValidContestantError(
        f"No hay contestant válido para la inscripción {entry.pk}.",
        entry_id=entry.pk,
        contestant_id=entry.contestant_id,
    )


def _performance_fields(entry: EventEntry) -> Dict[str, Any]:
    participants = resolve_participants(entry.participant_ids)
    return {
        "event_id": entry.event_id,
        "event_entry_id": entry.pk,
        "contestant_id": _valid_contestant_id(entry, participants),
        "title": entry.item_name,
        "participant_names": [p.display_name for p in participants],
        "duration": entry.estimated_duration or 0,
        "choreographer": entry.choreographer,
        "mastery": entry.mastery,
        "item_style": entry.item_style,
        "item_number": entry.item_number,
        "performance_order": None,
        "status": PerformanceStatus.SCHEDULED,
        "entry_type": entry.entry_type or "live",
        "video_external_url": entry.video_external_url,
        "video_external_type": entry.video_external_type,
        "music_file_url": entry.music_file_url,
        "music_file_name": entry.music_file_name,
    }


def _repair(performance: Performance, entry: EventEntry) -> Tuple[Performance, str]:
    changes: Dict[str, Any] = {}
    if performance.event_id != entry.event_id:
        logger.warning(
            "Performance %s con event_id=%s, la inscripción dice %s; corrigiendo",
            performance.pk, performance.event_id, entry.event_id,
        )
        changes["event_id"] = entry.event_id
    if entry.item_number is not None and performance.item_number != entry.item_number:
        logger.info(
            "Performance %s con item_number=%s desactualizado; espejo -> %s",
            performance.pk, performance.item_number, entry.item_number,
        )
        changes["item_number"] = entry.item_number

    if not changes:
        return performance, UNCHANGED

    Performance.objects.filter(pk=performance.pk).update(**changes)
    for name, value in changes.items():
        setattr(performance, name, value)
    return performance, REPAIRED


def _ensure_for_entry(entry: EventEntry) -> Tuple[Performance, str]:
    if not entry.approved:
        raise NotApprovedError(
            f"La inscripción {entry.pk} debe estar aprobada primero.", entry_id=entry.pk
        )

    existing = Performance.objects.filter(event_entry_id=entry.pk).first()
    if existing is not None:
        return _repair(existing, entry)

    fields = _performance_fields(entry)
    try:
        with transaction.atomic():
            performance = Performance.objects.create(**fields)
    except IntegrityError:
        # Otro llamador ganó el insert: devolvemos su fila
        performance = Performance.objects.filter(event_entry_id=entry.pk).first()
        if performance is None:
            raise ConflictError(
                f"No se pudo crear la performance de la inscripción {entry.pk}.", entry_id=entry.pk
            )
        return _repair(performance, entry)

    logger.info(
        "Performance %s creada para la inscripción %s (%s)", performance.pk, entry.pk, entry.item_name
    )
    return performance, CREATED


# ------------------------------
# Entradas públicas de servicio
# ------------------------------
def ensure_performance(entry_id: int) -> Performance:
    """
    Devuelve la única Performance de la inscripción, creándola o
    reparándola si hace falta. Idempotente.
    """
    entry = get_entry(entry_id)
    performance, _outcome = _ensure_for_entry(entry)
    return performance


def reconcile_event(event_id: int) -> ReconcileReport:
    """
    Aplica ensure_performance a cada inscripción aprobada del evento.
    Los fallos individuales se registran y se saltan; el lote no aborta.
    """
    if not Event.objects.filter(pk=event_id).exists():
        raise NotFoundError(f"Evento {event_id} no encontrado.", event_id=event_id)

    report = ReconcileReport(event_id=event_id)
    entries = list_approved_entries(event_id)
    logger.info("Reconciliando %d inscripciones aprobadas del evento %s", len(entries), event_id)

    for entry in entries:
        try:
            _performance, outcome = _ensure_for_entry(entry)
        except (CompetitionError, DatabaseError) as exc:
            message = getattr(exc, "message", None) or str(exc)
            logger.error("Inscripción %s (%s) omitida: %s", entry.pk, entry.item_name, message)
            report.failed += 1
            report.errors.append(
                {"entry_id": entry.pk, "item_name": entry.item_name, "error": message}
            )
            continue

        if outcome == CREATED:
            report.created += 1
        elif outcome == REPAIRED:
            report.fixed += 1
        else:
            report.unchanged += 1

    logger.info(
        "Evento %s: %d creadas, %d reparadas, %d fallidas",
        event_id, report.created, report.fixed, report.failed,
    )
    return report
