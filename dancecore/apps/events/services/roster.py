# dancecore/apps/events/services/roster.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..models import JudgeEventAssignment


@dataclass(frozen=True)
class AssignedJudge:
    judge_id: int
    name: str
    email: str
    display_order: int


def _active_assignments(event_id: int):
    return (
        JudgeEventAssignment.objects.filter(event_id=event_id, is_active=True)
        .select_related("judge")
        .order_by("display_order", "id")
    )


def list_assigned_judges(event_id: int) -> List[AssignedJudge]:
    """Jueces activos del evento, en el orden de presentación."""
    judges: List[AssignedJudge] = []
    for a in _active_assignments(event_id):
        user = a.judge
        judges.append(
            AssignedJudge(
                judge_id=user.pk,
                name=user.get_full_name() or user.get_username(),
                email=user.email or "",
                display_order=a.display_order,
            )
        )
    return judges


def count_assigned_judges(event_id: int) -> int:
    return JudgeEventAssignment.objects.filter(event_id=event_id, is_active=True).count()


def is_judge_assigned(event_id: int, judge_id: int) -> bool:
    return JudgeEventAssignment.objects.filter(
        event_id=event_id, judge_id=judge_id, is_active=True
    ).exists()
