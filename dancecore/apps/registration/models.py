from __future__ import annotations

import secrets
import string
import uuid

from django.db import models

from dancecore.apps.events.models import Event, PERFORMANCE_TYPE_CHOICES


def make_record_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:16]}"


def make_public_id(length: int = 6) -> str:
    # Id público de competidor: 'E' + dígitos (ej. E482913)
    return "E" + "".join(secrets.choice(string.digits) for _ in range(length))


def _dancer_id() -> str:
    return make_record_id("dancer")


def _contestant_id() -> str:
    return make_record_id("contestant")


class Studio(models.Model):
    name = models.CharField(max_length=160, unique=True)
    email = models.EmailField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("name",)

    def __str__(self) -> str:
        return self.name


class Contestant(models.Model):
    """Dueño de las inscripciones (cuenta privada o de estudio)."""
    TYPE_CHOICES = (
        ("private", "Private"),
        ("studio", "Studio"),
    )

    id = models.CharField(primary_key=True, max_length=64, default=_contestant_id, editable=False)
    name = models.CharField(max_length=160)
    email = models.EmailField(blank=True)
    type = models.CharField(max_length=8, choices=TYPE_CHOICES, default="private")
    studio_name = models.CharField(max_length=160, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("name",)

    def __str__(self) -> str:
        return self.studio_name or self.name


class Dancer(models.Model):
    """
    Bailarín. Se identifica por dos espacios de ids que no se distinguen
    por formato: ``id`` (interno, canónico) y ``eodsa_id`` (público).
    """
    id = models.CharField(primary_key=True, max_length=64, default=_dancer_id, editable=False)
    eodsa_id = models.CharField("Id público", max_length=16, unique=True, default=make_public_id)
    name = models.CharField(max_length=160)
    email = models.EmailField(blank=True)
    date_of_birth = models.DateField(null=True, blank=True)
    studio = models.ForeignKey(Studio, null=True, blank=True, on_delete=models.SET_NULL, related_name="dancers")
    contestant = models.ForeignKey(
        Contestant, null=True, blank=True, on_delete=models.SET_NULL, related_name="dancers"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("name",)

    def __str__(self) -> str:
        return f"{self.name} ({self.eodsa_id})"


class EventEntry(models.Model):
    """
    Inscripción de un ítem a un evento. La gestionan flujos externos al
    núcleo; desde aquí solo se lee (salvo el espejo de item_number).
    ``contestant_id`` es el dueño nominal y puede no existir como registro.
    """
    ENTRY_TYPE_CHOICES = (
        ("live", "Live"),
        ("virtual", "Virtual"),
    )
    PAYMENT_CHOICES = (
        ("pending", "Pending"),
        ("paid", "Paid"),
        ("failed", "Failed"),
    )

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="entries")
    contestant_id = models.CharField(max_length=64, db_index=True)
    eodsa_id = models.CharField(max_length=16, blank=True)
    participant_ids = models.JSONField(default=list, blank=True)

    item_name = models.CharField(max_length=200)
    choreographer = models.CharField(max_length=160, blank=True)
    mastery = models.CharField(max_length=60, blank=True)
    item_style = models.CharField(max_length=80, blank=True)
    estimated_duration = models.PositiveIntegerField(default=0, help_text="Minutos.")
    performance_type = models.CharField(
        max_length=8, choices=PERFORMANCE_TYPE_CHOICES, blank=True,
        help_text="Si está vacío, usa el del evento.",
    )
    entry_type = models.CharField(max_length=8, choices=ENTRY_TYPE_CHOICES, default="live")

    approved = models.BooleanField(default=False)
    approved_at = models.DateTimeField(null=True, blank=True)
    payment_status = models.CharField(max_length=8, choices=PAYMENT_CHOICES, default="pending")
    item_number = models.PositiveIntegerField(null=True, blank=True)

    video_external_url = models.URLField(blank=True)
    video_external_type = models.CharField(max_length=20, blank=True)
    music_file_url = models.URLField(blank=True)
    music_file_name = models.CharField(max_length=200, blank=True)

    submitted_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            # Un número de ítem no se repite dentro del mismo evento
            models.UniqueConstraint(fields=("event", "item_number"), name="uniq_event_item_number"),
        ]
        ordering = ("-submitted_at",)
        verbose_name_plural = "event entries"

    def __str__(self) -> str:
        num = f"#{self.item_number} " if self.item_number else ""
        return f"{num}{self.item_name} · {self.event}"

    @property
    def effective_performance_type(self) -> str:
        return self.performance_type or self.event.performance_type

    def as_dict(self) -> dict:
        return {
            "id": self.pk,
            "event_id": self.event_id,
            "contestant_id": self.contestant_id,
            "participant_ids": list(self.participant_ids or []),
            "item_name": self.item_name,
            "item_style": self.item_style,
            "mastery": self.mastery,
            "entry_type": self.entry_type,
            "approved": self.approved,
            "approved_at": self.approved_at,
            "item_number": self.item_number,
        }
