# dancecore/apps/judging/models.py
from __future__ import annotations

from decimal import Decimal

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone

# Cinco criterios, cada uno 0..20 (total 0..100)
CRITERIA = (
    "technical_score",
    "musical_score",
    "performance_score",
    "styling_score",
    "overall_impression_score",
)
CRITERION_MAX = Decimal("20")
TOTAL_MAX = Decimal("100")


def _criterion_field(label: str):
    return models.DecimalField(
        label,
        max_digits=5,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0")), MaxValueValidator(CRITERION_MAX)],
    )


class Score(models.Model):
    """
    Puntaje de un juez para una performance. Se crea una vez (envío del
    juez) y después solo cambia por el editor auditado.
    """
    performance = models.ForeignKey(
        "scheduling.Performance",
        on_delete=models.CASCADE,
        related_name="scores",
    )
    judge = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="scores",
    )

    technical_score = _criterion_field("Técnica")
    musical_score = _criterion_field("Musicalidad")
    performance_score = _criterion_field("Interpretación")
    styling_score = _criterion_field("Estilo")
    overall_impression_score = _criterion_field("Impresión general")

    total_score = models.DecimalField(max_digits=6, decimal_places=2, default=Decimal("0"), editable=False)
    comments = models.TextField(blank=True, default="")

    submitted_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=("performance", "judge"), name="uniq_performance_judge_score"),
        ]
        ordering = ("performance", "submitted_at")

    def __str__(self) -> str:
        return f"{self.performance} · {self.judge} = {self.total_score}"

    def values(self) -> dict:
        return {name: getattr(self, name) for name in CRITERIA}

    def compute_total(self) -> Decimal:
        return sum((Decimal(getattr(self, name) or 0) for name in CRITERIA), Decimal("0"))

    def save(self, *args, **kwargs):
        self.total_score = self.compute_total()
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "total_score" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["total_score"]
        super().save(*args, **kwargs)


class ScoreAudit(models.Model):
    """
    Registro inmutable, uno por cada edición de un Score existente.
    Nunca se borra: si el score desaparece, queda la referencia en nulo.
    """
    MODE_CHOICES = (
        ("criteria", "Criterios"),
        ("total", "Solo total"),
    )

    score = models.ForeignKey(Score, null=True, on_delete=models.SET_NULL, related_name="audits")
    performance_id_snapshot = models.CharField(max_length=36)
    judge_id_snapshot = models.CharField(max_length=64)
    edit_mode = models.CharField(max_length=8, choices=MODE_CHOICES, default="criteria")

    previous_values = models.JSONField()
    new_values = models.JSONField()

    edited_by = models.CharField(max_length=64)
    edited_by_name = models.CharField(max_length=160, blank=True)
    edited_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        ordering = ("-edited_at", "-id")
        default_permissions = ("add", "view")

    def __str__(self) -> str:
        return f"Audit score={self.score_id} por {self.edited_by} @ {self.edited_at:%Y-%m-%d %H:%M}"


class ScoreApproval(models.Model):
    """Aprobación (publicación) de los puntajes de una performance."""
    ACTION_CHOICES = (
        ("publish", "Publish"),
    )

    performance = models.ForeignKey(
        "scheduling.Performance",
        on_delete=models.CASCADE,
        related_name="score_approvals",
    )
    action = models.CharField(max_length=16, choices=ACTION_CHOICES, default="publish")
    approved_by = models.CharField(max_length=64)
    approved_at = models.DateTimeField(default=timezone.now, editable=False)
    total_judges = models.PositiveIntegerField(default=0)
    scored_judges = models.PositiveIntegerField(default=0)
    was_fully_scored = models.BooleanField(default=False)

    class Meta:
        ordering = ("-approved_at",)

    def __str__(self) -> str:
        return f"{self.performance} · {self.action} por {self.approved_by}"
