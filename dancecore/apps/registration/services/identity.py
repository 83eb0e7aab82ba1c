# dancecore/apps/registration/services/identity.py
"""
Resolución de participantes.

Los ids de ``EventEntry.participant_ids`` pueden venir de dos espacios
(id interno del bailarín o id público de competidor) y no se distinguen
por su forma. Se prueban los espacios en orden fijo; si ninguno responde
se devuelve un nombre sintético. Nunca falla: el llamador siempre recibe
un texto mostrable.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..models import Dancer

logger = logging.getLogger(__name__)


class IdNamespace(enum.Enum):
    DANCER_ID = "id"          # canónico
    PUBLIC_ID = "eodsa_id"    # id público de competidor

    @property
    def field(self) -> str:
        return self.value


# Orden de búsqueda
LOOKUP_ORDER = (IdNamespace.DANCER_ID, IdNamespace.PUBLIC_ID)


@dataclass(frozen=True)
class ResolvedParticipant:
    raw_id: str
    display_name: str
    dancer_id: Optional[str] = None
    namespace: Optional[IdNamespace] = None
    studio_name: str = ""

    @property
    def is_resolved(self) -> bool:
        return self.dancer_id is not None


def placeholder_name(index: int) -> str:
    return f"Participant {index}"


def _lookup(namespace: IdNamespace, participant_id: str) -> Optional[Dancer]:
    return (
        Dancer.objects.select_related("studio")
        .filter(**{namespace.field: participant_id})
        .first()
    )


def find_dancer(participant_id) -> Optional[Dancer]:
    if participant_id in (None, ""):
        return None
    pid = str(participant_id).strip()
    for namespace in LOOKUP_ORDER:
        dancer = _lookup(namespace, pid)
        if dancer is not None:
            return dancer
    return None


def resolve_participant(participant_id, index: int = 1) -> ResolvedParticipant:
    """
    ``index`` es 1-based y solo se usa para el nombre sintético.
    """
    pid = "" if participant_id is None else str(participant_id).strip()
    if pid:
        for namespace in LOOKUP_ORDER:
            dancer = _lookup(namespace, pid)
            if dancer is None:
                continue
            return ResolvedParticipant(
                raw_id=pid,
                display_name=dancer.name or placeholder_name(index),
                dancer_id=dancer.pk,
                namespace=namespace,
                studio_name=dancer.studio.name if dancer.studio_id else "",
            )
    logger.debug("Participante %r sin resolver; usando nombre sintético", pid)
    return ResolvedParticipant(raw_id=pid, display_name=placeholder_name(index))


def resolve_participants(participant_ids: Iterable) -> List[ResolvedParticipant]:
    return [resolve_participant(pid, i) for i, pid in enumerate(participant_ids or [], start=1)]


def canonical_dancer_id(participant_id) -> Optional[str]:
    dancer = find_dancer(participant_id)
    return dancer.pk if dancer else None
