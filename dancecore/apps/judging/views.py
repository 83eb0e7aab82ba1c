# dancecore/apps/judging/views.py
from __future__ import annotations

from django.http import HttpRequest

from dancecore.apps.core.errors import ValidationError
from dancecore.apps.core.http import json_api, read_json, require_fields

from .models import CRITERIA, Score
from .services.aggregation import scoring_status
from .services.approval import list_score_approvals, publish_scores
from .services.editor import edit_score, edit_score_total
from .services.submission import submit_score


def _score_dict(score: Score) -> dict:
    data = {
        "id": score.pk,
        "performance_id": str(score.performance_id),
        "judge_id": score.judge_id,
        "total_score": score.total_score,
        "comments": score.comments,
        "submitted_at": score.submitted_at,
        "updated_at": score.updated_at,
    }
    data.update(score.values())
    return data


def _values_from(data: dict) -> dict:
    # Acepta {"scores": {...}} o los cinco campos al nivel raíz
    values = data.get("scores")
    if values is None:
        values = {k: data[k] for k in (*CRITERIA, "comments") if k in data}
    if not isinstance(values, dict):
        raise ValidationError("'scores' debe ser un objeto.")
    return values


# -------------------------------
# Envío y estado
# -------------------------------
@json_api(methods=("POST",))
def submit_score_view(request: HttpRequest):
    data = read_json(request)
    require_fields(data, "performance_id", "judge_id")
    score = submit_score(data["performance_id"], data["judge_id"], _values_from(data))
    return {"score": _score_dict(score)}, 201


@json_api(methods=("GET",))
def scoring_status_view(request: HttpRequest, performance_id):
    return {"data": scoring_status(performance_id).as_dict()}


# -------------------------------
# Edición auditada
# -------------------------------
@json_api(methods=("PUT",))
def edit_score_view(request: HttpRequest):
    data = read_json(request)
    require_fields(data, "score_id", "performance_id", "judge_id", "editor_id")
    score = edit_score(
        data["score_id"],
        data["performance_id"],
        data["judge_id"],
        _values_from(data),
        editor_id=data["editor_id"],
        editor_name=data.get("editor_name") or "",
    )
    return {"message": "Score actualizado.", "score": _score_dict(score)}


@json_api(methods=("PUT",))
def edit_score_total_view(request: HttpRequest):
    data = read_json(request)
    require_fields(data, "score_id", "performance_id", "judge_id", "total", "editor_id")
    score = edit_score_total(
        data["score_id"],
        data["performance_id"],
        data["judge_id"],
        data["total"],
        editor_id=data["editor_id"],
        editor_name=data.get("editor_name") or "",
    )
    return {"message": "Total actualizado.", "score": _score_dict(score)}


# -------------------------------
# Publicación
# -------------------------------
@json_api(methods=("POST",))
def approve_scores_view(request: HttpRequest):
    data = read_json(request)
    require_fields(data, "performance_id", "approver_id")
    action = data.get("action") or "publish"
    if action != "publish":
        raise ValidationError("Acción inválida. Debe ser 'publish'.", action=action)

    result = publish_scores(data["performance_id"], data["approver_id"])
    return {
        "message": "Puntajes ya publicados." if result.already_published else "Puntajes publicados.",
        "already_published": result.already_published,
        "performance": result.performance.as_dict(),
        "scoring_status": result.scoring.as_dict(),
    }


@json_api(methods=("GET",))
def approvals_view(request: HttpRequest):
    approvals = list_score_approvals(request.GET.get("performance_id") or None)
    return {
        "approvals": [
            {
                "id": a.pk,
                "performance_id": str(a.performance_id),
                "performance_title": a.performance.title,
                "action": a.action,
                "approved_by": a.approved_by,
                "approved_at": a.approved_at,
                "total_judges": a.total_judges,
                "scored_judges": a.scored_judges,
                "was_fully_scored": a.was_fully_scored,
            }
            for a in approvals
        ]
    }
