# Constructores de datos compartidos por los tests de las apps
from __future__ import annotations

import datetime
import itertools
from decimal import Decimal

from django.contrib.auth import get_user_model

from dancecore.apps.events.models import Event, JudgeEventAssignment
from dancecore.apps.judging.models import Score
from dancecore.apps.judging.services.editor import split_total
from dancecore.apps.registration.models import Contestant, Dancer, EventEntry, Studio

User = get_user_model()

_seq = itertools.count(1)


def make_event(name: str = "Gauteng Regional", **kwargs) -> Event:
    n = next(_seq)
    kwargs.setdefault("slug", f"event-{n}")
    kwargs.setdefault("event_date", datetime.date(2025, 10, 11))
    kwargs.setdefault("region", "Gauteng")
    return Event.objects.create(name=name, **kwargs)


def make_judges(event: Event, count: int, active: bool = True):
    judges = []
    for i in range(count):
        n = next(_seq)
        user = User.objects.create_user(
            username=f"judge{n}",
            email=f"judge{n}@example.com",
            password="Pass1234!",
            first_name=f"Judge{n}",
        )
        JudgeEventAssignment.objects.create(event=event, judge=user, display_order=i, is_active=active)
        judges.append(user)
    return judges


def make_contestant(**kwargs) -> Contestant:
    kwargs.setdefault("name", "Lerato Mokoena")
    kwargs.setdefault("email", "lerato@example.com")
    return Contestant.objects.create(**kwargs)


def make_dancer(name: str = "Thandi Nkosi", **kwargs) -> Dancer:
    return Dancer.objects.create(name=name, **kwargs)


def make_studio(name: str = "Avalon Dance") -> Studio:
    return Studio.objects.create(name=name, email="studio@example.com")


def make_entry(event: Event, contestant_id: str, participant_ids, approved: bool = True, **kwargs) -> EventEntry:
    kwargs.setdefault("item_name", "Rise Up")
    kwargs.setdefault("item_style", "Contemporary")
    kwargs.setdefault("mastery", "Advanced")
    kwargs.setdefault("estimated_duration", 3)
    return EventEntry.objects.create(
        event=event,
        contestant_id=contestant_id,
        participant_ids=list(participant_ids),
        approved=approved,
        **kwargs,
    )


def make_score(performance, judge, total) -> Score:
    return Score.objects.create(performance=performance, judge=judge, **split_total(Decimal(str(total))))
