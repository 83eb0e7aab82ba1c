# dancecore/apps/scheduling/services/running_order.py
"""
Numeración de ítems y orden del día.

- item_number: lo asigna el admin sobre la inscripción y se espeja en la
  Performance. Es la referencia de los jueces; reordenar no lo toca.
- performance_order: orden de salida del día, libre.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Tuple

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError, transaction

from dancecore.apps.core.errors import ConflictError, NotFoundError, ValidationError
from dancecore.apps.registration.models import EventEntry

from ..models import Performance
from .reconciler import ensure_performance

logger = logging.getLogger(__name__)


def assign_item_number(entry_id: int, item_number: int) -> Dict[str, Any]:
    """
    Reasignación explícita (admin) del número de ítem. Único por evento.
    Sincroniza la Performance; si no existe y la inscripción está
    aprobada, la crea.
    """
    try:
        item_number = int(item_number)
    except (TypeError, ValueError):
        raise ValidationError("Se requiere un número de ítem válido.")
    if item_number < 1:
        raise ValidationError("Se requiere un número de ítem válido.")

    with transaction.atomic():
        entry = EventEntry.objects.select_for_update().filter(pk=entry_id).first()
        if entry is None:
            raise NotFoundError(f"Inscripción {entry_id} no encontrada.", entry_id=entry_id)

        taken = (
            EventEntry.objects.filter(event_id=entry.event_id, item_number=item_number)
            .exclude(pk=entry.pk)
            .exists()
        )
        if taken:
            raise ConflictError(f"El número {item_number} ya está asignado a otra inscripción.")

        entry.item_number = item_number
        try:
            with transaction.atomic():
                entry.save(update_fields=["item_number"])
        except IntegrityError:
            raise ConflictError(f"El número {item_number} ya está asignado a otra inscripción.")

        synced = Performance.objects.filter(event_entry_id=entry.pk).update(item_number=item_number)

    performance = None
    if synced:
        logger.info("Item number %s sincronizado a la performance de la inscripción %s", item_number, entry.pk)
        performance = Performance.objects.get(event_entry_id=entry.pk)
    elif entry.approved:
        logger.info("Inscripción %s sin performance; creándola", entry.pk)
        performance = ensure_performance(entry.pk)

    return {"entry": entry, "performance": performance}


def reorder_performances(event_id: int, orders: Iterable[Tuple[Any, int]]) -> Dict[str, Any]:
    """
    Actualiza SOLO performance_order. item_number queda intacto.
    Pares inválidos o ajenos al evento se saltan y se informan.
    """
    updated = 0
    skipped: List[Dict[str, Any]] = []

    with transaction.atomic():
        for performance_id, order in orders:
            if isinstance(order, bool) or not isinstance(order, int) or order < 1:
                skipped.append({"id": str(performance_id), "reason": "performance_order inválido"})
                continue
            try:
                count = Performance.objects.filter(pk=performance_id, event_id=event_id).update(
                    performance_order=order
                )
            except (ValueError, TypeError, DjangoValidationError):
                # UUID mal formado
                count = 0
            if count:
                updated += count
            else:
                skipped.append({"id": str(performance_id), "reason": "performance no encontrada en el evento"})

    logger.info("Evento %s: %d performances reordenadas, %d omitidas", event_id, updated, len(skipped))
    return {"updated": updated, "skipped": skipped}
