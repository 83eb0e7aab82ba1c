# dancecore/apps/judging/services/aggregation.py
"""
Agregación de puntajes y quórum de jueces.

- El roster (jueces asignados y activos al evento) define el quórum, no
  el conjunto de jueces que ya puntuaron.
- Una performance está completamente puntuada solo si todos los asignados
  puntuaron y hay al menos MIN_JUDGES_FOR_FULL_SCORING asignados.
- El porcentaje divide por los jueces asignados (no por los que enviaron),
  para que una performance no parezca mejor solo porque faltan jueces.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional

from django.core.exceptions import ValidationError as DjangoValidationError

from dancecore.apps.core.errors import NotFoundError
from dancecore.apps.core.rounding import round_half_up
from dancecore.apps.events.services.roster import count_assigned_judges, list_assigned_judges
from dancecore.apps.scheduling.models import Performance

from ..models import Score

MIN_JUDGES_FOR_FULL_SCORING = 3


@dataclass(frozen=True)
class JudgeTotal:
    judge_id: int
    judge_name: str
    judge_email: str
    total_score: Decimal
    submitted_at: Optional[datetime]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "judge_id": self.judge_id,
            "judge_name": self.judge_name,
            "judge_email": self.judge_email,
            "total_score": self.total_score,
            "submitted_at": self.submitted_at,
        }


@dataclass(frozen=True)
class PendingJudge:
    judge_id: int
    judge_name: str
    judge_email: str

    def as_dict(self) -> Dict[str, Any]:
        return {"judge_id": self.judge_id, "judge_name": self.judge_name, "judge_email": self.judge_email}


@dataclass
class ScoringStatus:
    performance_id: str
    event_id: Optional[int]
    total_judges: int
    scored_judges: int
    is_fully_scored: bool
    is_partially_scored: bool
    scored_judge_ids: List[int] = field(default_factory=list)
    pending_judge_ids: List[int] = field(default_factory=list)
    pending_judges: List[PendingJudge] = field(default_factory=list)
    per_judge_totals: List[JudgeTotal] = field(default_factory=list)
    percentage: Optional[int] = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "performance_id": self.performance_id,
            "event_id": self.event_id,
            "total_judges": self.total_judges,
            "scored_judges": self.scored_judges,
            "is_fully_scored": self.is_fully_scored,
            "is_partially_scored": self.is_partially_scored,
            "scored_judge_ids": self.scored_judge_ids,
            "pending_judge_ids": self.pending_judge_ids,
            "pending_judges": [p.as_dict() for p in self.pending_judges],
            "scores": [t.as_dict() for t in self.per_judge_totals],
            "percentage": self.percentage,
        }


def is_fully_scored(scored_judges: int, total_judges: int) -> bool:
    return scored_judges >= total_judges and total_judges >= MIN_JUDGES_FOR_FULL_SCORING


def compute_percentage(per_judge_totals: Iterable, total_judges: int) -> Optional[int]:
    """
    round(sum(totales) / jueces_efectivos), redondeo x.5 hacia arriba.
    jueces_efectivos = asignados si hay, si no los que puntuaron.
    None si no hay con qué dividir.
    """
    totals = [Decimal(str(t)) for t in per_judge_totals]
    effective = total_judges if total_judges > 0 else len(totals)
    if effective <= 0:
        return None
    return round_half_up(sum(totals, Decimal("0")) / Decimal(effective))


def get_performance(performance_id) -> Performance:
    try:
        performance = Performance.objects.select_related("event").filter(pk=performance_id).first()
    except (ValueError, DjangoValidationError):
        performance = None
    if performance is None:
        raise NotFoundError(f"Performance {performance_id} no encontrada.")
    return performance


def scores_for(performance: Performance) -> List[Score]:
    return list(
        Score.objects.filter(performance=performance).select_related("judge").order_by("submitted_at", "id")
    )


def performance_percentage(performance: Performance, scores: Optional[List[Score]] = None) -> Optional[int]:
    if scores is None:
        scores = scores_for(performance)
    total_judges = count_assigned_judges(performance.event_id) if performance.event_id else 0
    return compute_percentage([s.total_score for s in scores], total_judges)


def scoring_status(performance_id) -> ScoringStatus:
    performance = get_performance(performance_id)
    assigned = list_assigned_judges(performance.event_id) if performance.event_id else []
    scores = scores_for(performance)

    total_judges = len(assigned)
    scored_judges = len(scores)
    scored_ids = [s.judge_id for s in scores]
    pending = [a for a in assigned if a.judge_id not in scored_ids]

    per_judge = []
    for s in scores:
        user = s.judge
        per_judge.append(
            JudgeTotal(
                judge_id=s.judge_id,
                judge_name=user.get_full_name() or user.get_username(),
                judge_email=user.email or "",
                total_score=s.total_score,
                submitted_at=s.submitted_at,
            )
        )

    return ScoringStatus(
        performance_id=str(performance.pk),
        event_id=performance.event_id,
        total_judges=total_judges,
        scored_judges=scored_judges,
        is_fully_scored=is_fully_scored(scored_judges, total_judges),
        is_partially_scored=scored_judges > 0,
        scored_judge_ids=scored_ids,
        pending_judge_ids=[p.judge_id for p in pending],
        pending_judges=[
            PendingJudge(judge_id=p.judge_id, judge_name=p.name or "Unknown Judge", judge_email=p.email)
            for p in pending
        ],
        per_judge_totals=per_judge,
        percentage=compute_percentage([s.total_score for s in scores], total_judges),
    )
