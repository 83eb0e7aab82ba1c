# dancecore/apps/judging/services/editor.py
"""
Edición auditada de puntajes ya enviados.

Cada edición exitosa actualiza la fila Score y agrega exactamente un
ScoreAudit en la misma transacción: o se guardan ambos o ninguno.
"""
from __future__ import annotations

import logging
from decimal import Decimal, ROUND_DOWN
from typing import Any, Dict, Mapping

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction

from dancecore.apps.core.errors import NotFoundError, ValidationError

from ..forms import ScoreTotalForm, ScoreValuesForm, error_text, form_errors
from ..models import CRITERIA, Score, ScoreAudit

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


def _snapshot(score: Score) -> Dict[str, str]:
    data = {name: str(getattr(score, name)) for name in CRITERIA}
    data["total_score"] = str(score.compute_total())
    return data


def _locked_score(score_id, performance_id, judge_id) -> Score:
    try:
        score = (
            Score.objects.select_for_update()
            .filter(pk=score_id, performance_id=performance_id, judge_id=judge_id)
            .first()
        )
    except (ValueError, TypeError, DjangoValidationError):
        score = None
    if score is None:
        raise NotFoundError(
            "No existe un score con ese id para esa performance y juez.",
            score_id=str(score_id),
            performance_id=str(performance_id),
            judge_id=str(judge_id),
        )
    return score


def split_total(total: Decimal) -> Dict[str, Decimal]:
    """
    Reparte un total 0..100 entre los cinco criterios. La suma es exacta
    y ningún criterio pasa de 20.
    """
    base = (total / len(CRITERIA)).quantize(CENT, rounding=ROUND_DOWN)
    remainder_cents = int(((total - base * len(CRITERIA)) / CENT).to_integral_value())
    values = {}
    for i, name in enumerate(CRITERIA):
        values[name] = base + (CENT if i < remainder_cents else Decimal("0"))
    return values


def _apply(score: Score, new_values: Mapping[str, Decimal], *, mode: str, editor_id, editor_name: str) -> Score:
    previous = _snapshot(score)
    for name, value in new_values.items():
        setattr(score, name, value)
    score.save()
    ScoreAudit.objects.create(
        score=score,
        performance_id_snapshot=str(score.performance_id),
        judge_id_snapshot=str(score.judge_id),
        edit_mode=mode,
        previous_values=previous,
        new_values=_snapshot(score),
        edited_by=str(editor_id),
        edited_by_name=editor_name or "",
    )
    return score


def edit_score(
    score_id,
    performance_id,
    judge_id,
    values: Mapping[str, Any],
    editor_id,
    editor_name: str = "",
) -> Score:
    """Reemplaza los cinco criterios (0..20 cada uno)."""
    if editor_id in (None, ""):
        raise ValidationError("Se requiere el id del editor.")

    form = ScoreValuesForm(data=dict(values or {}))
    if not form.is_valid():
        raise ValidationError(
            "Todos los puntajes deben estar entre 0 y 20. " + error_text(form),
            fields=form_errors(form),
        )
    new_values = form.values()

    with transaction.atomic():
        score = _locked_score(score_id, performance_id, judge_id)
        if "comments" in (values or {}):
            score.comments = form.cleaned_data.get("comments") or ""
        _apply(score, new_values, mode="criteria", editor_id=editor_id, editor_name=editor_name)

    logger.info("Score %s editado por %s (total=%s)", score.pk, editor_id, score.total_score)
    return score


def edit_score_total(
    score_id,
    performance_id,
    judge_id,
    new_total,
    editor_id,
    editor_name: str = "",
) -> Score:
    """Modo solo-total (0..100): se reparte entre los criterios."""
    if editor_id in (None, ""):
        raise ValidationError("Se requiere el id del editor.")

    form = ScoreTotalForm(data={"total": new_total})
    if not form.is_valid():
        raise ValidationError(
            "El total debe estar entre 0 y 100. " + error_text(form),
            fields=form_errors(form),
        )
    total = form.cleaned_data["total"]

    with transaction.atomic():
        score = _locked_score(score_id, performance_id, judge_id)
        _apply(score, split_total(total), mode="total", editor_id=editor_id, editor_name=editor_name)

    logger.info("Total del score %s editado por %s -> %s", score.pk, editor_id, total)
    return score
