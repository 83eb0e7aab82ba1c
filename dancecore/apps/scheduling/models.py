from __future__ import annotations

import uuid

from django.db import models

from dancecore.apps.events.models import Event
from dancecore.apps.registration.models import EventEntry


class PerformanceStatus(models.TextChoices):
    SCHEDULED = "scheduled", "Scheduled"
    READY = "ready", "Ready"
    HOLD = "hold", "Hold"
    IN_PROGRESS = "in_progress", "In progress"
    COMPLETED = "completed", "Completed"
    CANCELLED = "cancelled", "Cancelled"


class Performance(models.Model):
    """
    Materialización agendable y puntuable de una inscripción aprobada.
    Como máximo una por EventEntry (event_entry es OneToOne).
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(
        Event, null=True, on_delete=models.SET_NULL, related_name="performances"
    )
    event_entry = models.OneToOneField(
        EventEntry, on_delete=models.CASCADE, related_name="performance"
    )
    # Validado al crear: puede ser un bailarín si el dueño nominal no existe
    contestant_id = models.CharField(max_length=64)

    title = models.CharField(max_length=200)
    participant_names = models.JSONField(default=list, blank=True)
    duration = models.PositiveIntegerField(default=0, help_text="Minutos.")
    choreographer = models.CharField(max_length=160, blank=True)
    mastery = models.CharField(max_length=60, blank=True)
    item_style = models.CharField(max_length=80, blank=True)

    # 🔒 item_number: espejo de la inscripción (solo cambia por reasignación admin)
    item_number = models.PositiveIntegerField(null=True, blank=True)
    # Orden del día, libre e independiente de item_number
    performance_order = models.PositiveIntegerField(null=True, blank=True)

    status = models.CharField(
        max_length=16, choices=PerformanceStatus.choices, default=PerformanceStatus.SCHEDULED
    )

    scores_published = models.BooleanField(default=False)
    scores_published_at = models.DateTimeField(null=True, blank=True)
    scores_published_by = models.CharField(max_length=64, blank=True)

    entry_type = models.CharField(max_length=8, choices=EventEntry.ENTRY_TYPE_CHOICES, default="live")
    video_external_url = models.URLField(blank=True)
    video_external_type = models.CharField(max_length=20, blank=True)
    music_file_url = models.URLField(blank=True)
    music_file_name = models.CharField(max_length=200, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("event", "performance_order", "item_number", "created_at")

    def __str__(self) -> str:
        num = f"#{self.item_number} " if self.item_number else ""
        return f"{num}{self.title} ({self.get_status_display()})"

    @property
    def participants_display(self) -> str:
        return ", ".join(self.participant_names or [])

    def as_dict(self) -> dict:
        return {
            "id": str(self.pk),
            "event_id": self.event_id,
            "event_entry_id": self.event_entry_id,
            "contestant_id": self.contestant_id,
            "title": self.title,
            "participant_names": list(self.participant_names or []),
            "duration": self.duration,
            "choreographer": self.choreographer,
            "mastery": self.mastery,
            "item_style": self.item_style,
            "item_number": self.item_number,
            "performance_order": self.performance_order,
            "status": self.status,
            "scores_published": self.scores_published,
            "scores_published_at": self.scores_published_at,
            "entry_type": self.entry_type,
            "video_external_url": self.video_external_url,
            "music_file_url": self.music_file_url,
        }
