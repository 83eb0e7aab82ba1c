# dancecore/apps/certificates/services/issuer.py
"""
Emisión de certificados.

La parte pura (medal_tier, format_certificate_date, resolve_display_name,
build_certificate_data) decide el contenido a partir de Performance,
Scores y Event. issue_certificate persiste el registro y, si se pide,
lo entrega por e-mail. Regenerar con los mismos datos da el mismo
contenido y no toca sent_at/downloaded_at.
"""
from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, Optional, Sequence

from django.conf import settings
from django.db import transaction
from django.template.loader import render_to_string
from django.utils.dateparse import parse_date

from dancecore.apps.core.errors import (
    CertificateDeliveryError,
    EventNotFoundError,
    NoScoresError,
    ValidationError,
)
from dancecore.apps.events.models import GROUP_PERFORMANCE_TYPES
from dancecore.apps.events.services.roster import count_assigned_judges
from dancecore.apps.judging.services.aggregation import compute_percentage, get_performance, scores_for
from dancecore.apps.registration.models import Dancer
from dancecore.apps.registration.services.entries import get_contestant
from dancecore.apps.registration.services.identity import resolve_participants
from dancecore.apps.scheduling.models import Performance, PerformanceStatus

from ..models import Certificate

logger = logging.getLogger(__name__)

# (mínimo inclusive, nombre), de mayor a menor
MEDAL_TIERS = (
    (95, "Elite"),
    (90, "Opus"),
    (85, "Legend"),
    (80, "Gold"),
    (75, "Silver+"),
    (70, "Silver"),
)
# Bronze va de 0 a 69 inclusive; entre 69 y 70 no hay tier
BRONZE_MAX = 69

# Fecha en inglés, independiente del locale del proceso
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def medal_tier(percentage) -> str:
    """Nombre del tier; "" para valores negativos o indefinidos."""
    if percentage is None or isinstance(percentage, bool):
        return ""
    try:
        value = Decimal(str(percentage))
    except (InvalidOperation, ValueError):
        return ""
    if not value.is_finite() or value < 0:
        return ""
    for minimum, name in MEDAL_TIERS:
        if value >= minimum:
            return name
    if value <= BRONZE_MAX:
        return "Bronze"
    return ""


def format_certificate_date(value) -> str:
    """date/datetime/ISO -> 'October 11, 2025'. "" si no hay fecha."""
    if not value:
        return ""
    if isinstance(value, str):
        parsed = parse_date(value[:10])
        if parsed is None:
            return ""
        value = parsed
    if isinstance(value, datetime.datetime):
        value = value.date()
    return f"{MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"


def resolve_display_name(
    performance_type: str,
    participant_names: Sequence[str],
    studio_name: str = "",
    *,
    uppercase: bool = False,
) -> str:
    """
    Duet/Trio/Group con estudio conocido -> nombre del estudio.
    Si no, los participantes separados por coma.
    """
    if performance_type in GROUP_PERFORMANCE_TYPES and studio_name:
        return studio_name.upper() if uppercase else studio_name
    return ", ".join(n for n in participant_names if n)


@dataclass(frozen=True)
class CertificateData:
    display_name: str
    percentage: int
    style: str
    title: str
    medallion: str
    event_date_text: str

    def as_dict(self) -> Dict[str, Any]:
        return {
            "display_name": self.display_name,
            "percentage": self.percentage,
            "style": self.style,
            "title": self.title,
            "medallion": self.medallion,
            "event_date_text": self.event_date_text,
        }


def build_certificate_data(
    *,
    totals: Iterable,
    total_judges: int,
    performance_type: str,
    participant_names: Sequence[str],
    studio_name: str,
    style: str,
    title: str,
    event_date,
) -> CertificateData:
    totals = list(totals)
    percentage = compute_percentage(totals, total_judges) if totals else None
    if percentage is None:
        raise NoScoresError("No hay puntajes para esta performance.")
    return CertificateData(
        display_name=resolve_display_name(performance_type, participant_names, studio_name),
        percentage=percentage,
        style=style or "",
        title=title or "",
        medallion=medal_tier(percentage),
        event_date_text=format_certificate_date(event_date),
    )


def certificate_url(performance_id) -> str:
    return f"{settings.APP_URL}/certificates/{performance_id}/"


def render_certificate(certificate: Certificate) -> str:
    """Artefacto HTML del certificado (determinista para el mismo registro)."""
    performance = certificate.performance
    entry = performance.event_entry
    studio = _studio_name(performance)
    return render_to_string(
        "certificates/certificate.html",
        {
            "certificate": certificate,
            "headline": resolve_display_name(
                entry.effective_performance_type,
                performance.participant_names or [],
                studio,
                uppercase=True,
            ),
        },
    )


# -------------------------------
# Lecturas auxiliares
# -------------------------------
def _studio_name(performance: Performance) -> str:
    contestant = get_contestant(performance.contestant_id)
    if contestant is not None and contestant.type == "studio" and contestant.studio_name:
        return contestant.studio_name
    for participant in resolve_participants(performance.event_entry.participant_ids or []):
        if participant.studio_name:
            return participant.studio_name
    return ""


def _recipient_email(performance: Performance) -> str:
    contestant = get_contestant(performance.contestant_id)
    if contestant is not None and contestant.email:
        return contestant.email
    entry = performance.event_entry
    contestant = get_contestant(entry.contestant_id)
    if contestant is not None and contestant.email:
        return contestant.email
    for participant in resolve_participants(entry.participant_ids or []):
        if not participant.is_resolved:
            continue
        dancer = Dancer.objects.select_related("contestant").filter(pk=participant.dancer_id).first()
        if dancer is None:
            continue
        if dancer.contestant_id and dancer.contestant.email:
            return dancer.contestant.email
        if dancer.email:
            return dancer.email
    return ""


# -------------------------------
# Emisión
# -------------------------------
@dataclass
class IssueResult:
    certificate: Certificate
    created: bool
    sent: bool = False
    recipient_email: str = ""
    delivery_error: str = ""

    def as_dict(self) -> Dict[str, Any]:
        cert = self.certificate
        return {
            "certificate_id": cert.pk,
            "performance_id": str(cert.performance_id),
            "display_name": cert.display_name,
            "percentage": cert.percentage,
            "medallion": cert.medallion,
            "certificate_url": cert.certificate_url,
            "created": self.created,
            "email_sent": self.sent,
            "recipient_email": self.recipient_email,
            "delivery_error": self.delivery_error or None,
        }


def issue_certificate(performance_id, deliver: bool = True) -> IssueResult:
    performance = get_performance(performance_id)
    if performance.status != PerformanceStatus.COMPLETED:
        raise ValidationError(
            "La performance debe estar completada para generar el certificado.",
            status=performance.status,
        )
    event = performance.event
    if event is None:
        raise EventNotFoundError(f"La performance {performance.pk} no tiene evento.")

    scores = scores_for(performance)
    if not scores:
        raise NoScoresError(f"No hay puntajes para la performance {performance.pk}.")

    data = build_certificate_data(
        totals=[s.total_score for s in scores],
        total_judges=count_assigned_judges(event.pk),
        performance_type=performance.event_entry.effective_performance_type,
        participant_names=performance.participant_names or [],
        studio_name=_studio_name(performance),
        style=performance.item_style,
        title=performance.title,
        event_date=event.event_date,
    )
    recipient = _recipient_email(performance)

    with transaction.atomic():
        # Solo campos de contenido: la entrega no se pisa al regenerar
        certificate, created = Certificate.objects.update_or_create(
            performance=performance,
            defaults={
                **data.as_dict(),
                "certificate_url": certificate_url(performance.pk),
                "recipient_email": recipient,
            },
        )

    logger.info(
        "Certificado %s %s: %s %s%% %s",
        certificate.pk, "creado" if created else "regenerado",
        certificate.display_name, certificate.percentage, certificate.medallion,
    )

    result = IssueResult(certificate=certificate, created=created, recipient_email=recipient)
    if not deliver:
        return result
    if not recipient:
        result.delivery_error = "No hay e-mail de destinatario para el certificado."
        logger.warning("Certificado %s sin destinatario", certificate.pk)
        return result

    from .delivery import send_certificate

    try:
        result.certificate = send_certificate(certificate.pk, sent_by="system")
        result.sent = True
    except CertificateDeliveryError as exc:
        result.delivery_error = exc.message
    return result


def get_certificate(performance_id) -> Optional[Certificate]:
    performance = get_performance(performance_id)
    return Certificate.objects.select_related("performance").filter(performance=performance).first()
