# dancecore/apps/judging/services/approval.py
"""
Publicación de puntajes: de privados del panel a visibles.
scores_published solo pasa de False a True; publicar dos veces no hace nada.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from django.db import transaction
from django.utils import timezone

from dancecore.apps.core.errors import ValidationError
from dancecore.apps.scheduling.models import Performance

from ..models import ScoreApproval
from .aggregation import ScoringStatus, get_performance, scoring_status

logger = logging.getLogger(__name__)


@dataclass
class PublishResult:
    performance: Performance
    already_published: bool
    scoring: ScoringStatus
    approval: Optional[ScoreApproval] = None


def publish_scores(performance_id, approver_id) -> PublishResult:
    if approver_id in (None, ""):
        raise ValidationError("Se requiere el id de quien aprueba.")

    performance = get_performance(performance_id)
    status = scoring_status(performance.pk)
    if not status.is_fully_scored:
        # No se bloquea: el llamador ve el quórum en el resultado
        logger.warning(
            "Publicando performance %s sin puntaje completo (%d/%d jueces)",
            performance.pk, status.scored_judges, status.total_judges,
        )

    approval = None
    with transaction.atomic():
        flipped = Performance.objects.filter(pk=performance.pk, scores_published=False).update(
            scores_published=True,
            scores_published_at=timezone.now(),
            scores_published_by=str(approver_id),
        ) == 1
        if flipped:
            approval = ScoreApproval.objects.create(
                performance=performance,
                action="publish",
                approved_by=str(approver_id),
                total_judges=status.total_judges,
                scored_judges=status.scored_judges,
                was_fully_scored=status.is_fully_scored,
            )

    performance.refresh_from_db()
    if flipped:
        logger.info("Puntajes de %s publicados por %s", performance.pk, approver_id)
    return PublishResult(
        performance=performance,
        already_published=not flipped,
        scoring=status,
        approval=approval,
    )


def list_score_approvals(performance_id=None) -> List[ScoreApproval]:
    qs = ScoreApproval.objects.select_related("performance")
    if performance_id:
        qs = qs.filter(performance_id=get_performance(performance_id).pk)
    return list(qs.order_by("-approved_at", "-id"))
