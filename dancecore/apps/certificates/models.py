from __future__ import annotations

from django.db import models

from dancecore.apps.scheduling.models import Performance


class Certificate(models.Model):
    """
    Certificado de una performance completada y puntuada.
    Los campos de contenido se regeneran; los de entrega (sent_at,
    downloaded_at) solo los escribe el flujo de entrega.
    """
    performance = models.OneToOneField(
        Performance, on_delete=models.CASCADE, related_name="certificate"
    )

    # Contenido derivado (determinista)
    display_name = models.CharField(max_length=400)
    percentage = models.PositiveSmallIntegerField()
    style = models.CharField(max_length=80, blank=True)
    title = models.CharField(max_length=200)
    medallion = models.CharField(max_length=16)
    event_date_text = models.CharField(max_length=40, blank=True)
    certificate_url = models.URLField(max_length=400)
    recipient_email = models.EmailField(blank=True)

    # Entrega
    sent_at = models.DateTimeField(null=True, blank=True)
    sent_by = models.CharField(max_length=64, blank=True)
    downloaded = models.BooleanField(default=False)
    downloaded_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("-created_at",)

    def __str__(self) -> str:
        return f"{self.display_name} · {self.percentage}% {self.medallion}"

    @property
    def is_sent(self) -> bool:
        return self.sent_at is not None
