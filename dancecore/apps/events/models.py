from __future__ import annotations

from django.conf import settings
from django.db import models
from django.utils.text import slugify
from django.core.exceptions import ValidationError


PERFORMANCE_TYPE_CHOICES = (
    ("Solo", "Solo"),
    ("Duet", "Duet"),
    ("Trio", "Trio"),
    ("Group", "Group"),
    ("All", "All"),
)

# Tipos donde el certificado lleva el nombre del estudio
GROUP_PERFORMANCE_TYPES = ("Duet", "Trio", "Group")


class Event(models.Model):
    STATUS_CHOICES = (
        ("upcoming", "Upcoming"),
        ("registration_open", "Registration open"),
        ("registration_closed", "Registration closed"),
        ("in_progress", "In progress"),
        ("completed", "Completed"),
    )

    name = models.CharField(max_length=160)
    slug = models.SlugField(unique=True)
    region = models.CharField(max_length=80, blank=True)
    venue = models.CharField(max_length=160, blank=True)
    description = models.TextField(blank=True)

    event_date = models.DateField(null=True, blank=True)
    end_date = models.DateField(null=True, blank=True)
    performance_type = models.CharField(
        max_length=8,
        choices=PERFORMANCE_TYPE_CHOICES,
        default="All",
        help_text="Tipo por defecto si la inscripción no define el suyo.",
    )
    status = models.CharField(max_length=24, choices=STATUS_CHOICES, default="upcoming")

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("-event_date", "name")

    def __str__(self) -> str:
        return self.name

    def clean(self):
        if self.event_date and self.end_date and self.end_date < self.event_date:
            raise ValidationError("end_date no puede ser anterior a event_date")

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)


class JudgeEventAssignment(models.Model):
    """
    Roster de jueces del evento. Define el quórum: cuenta a los jueces
    asignados y activos, no a los que casualmente ya puntuaron.
    """
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="judge_assignments")
    judge = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="judge_assignments",
    )
    is_active = models.BooleanField(default=True)
    display_order = models.PositiveIntegerField(default=0)
    assigned_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=("event", "judge"), name="uniq_event_judge"),
        ]
        ordering = ("event", "display_order", "id")

    def __str__(self) -> str:
        who = self.judge.get_full_name() or self.judge.get_username()
        state = "" if self.is_active else " (inactivo)"
        return f"{self.event} · {who}{state}"
