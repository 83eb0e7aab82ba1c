# dancecore/apps/judging/services/submission.py
from __future__ import annotations

import logging
from typing import Any, Mapping

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction

from dancecore.apps.core.errors import ConflictError, NotFoundError, ValidationError
from dancecore.apps.events.services.roster import is_judge_assigned

from ..forms import ScoreValuesForm, error_text, form_errors
from ..models import Score
from .aggregation import get_performance

logger = logging.getLogger(__name__)


def submit_score(performance_id, judge_id, values: Mapping[str, Any]) -> Score:
    """
    Primer envío de un juez. Un segundo envío del mismo juez para la misma
    performance es conflicto: los cambios posteriores van por el editor.
    """
    form = ScoreValuesForm(data=dict(values or {}))
    if not form.is_valid():
        raise ValidationError(
            "Todos los puntajes deben estar entre 0 y 20. " + error_text(form),
            fields=form_errors(form),
        )

    performance = get_performance(performance_id)
    User = get_user_model()
    judge = User.objects.filter(pk=judge_id).first() if str(judge_id).isdigit() else None
    if judge is None:
        raise NotFoundError(f"Juez {judge_id} no encontrado.")
    if performance.event_id and not is_judge_assigned(performance.event_id, judge.pk):
        raise ValidationError("El juez no está asignado a este evento.")

    try:
        with transaction.atomic():
            score = Score.objects.create(
                performance=performance,
                judge=judge,
                comments=form.cleaned_data.get("comments") or "",
                **form.values(),
            )
    except IntegrityError:
        raise ConflictError(
            "Este juez ya puntuó esta performance; use la edición de puntajes.",
            performance_id=str(performance.pk),
            judge_id=judge.pk,
        )

    logger.info("Score %s enviado: performance=%s juez=%s total=%s",
                score.pk, performance.pk, judge.pk, score.total_score)
    return score
