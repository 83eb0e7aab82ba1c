# dancecore/apps/scheduling/services/status.py
"""
Máquina de estados de la Performance.

scheduled -> ready -> hold -> in_progress -> completed, y cancelled.
Las transiciones son manuales (staff/admin). Solo 'completed' tiene efecto
lateral: emitir el certificado, una sola vez por arista
no-completed -> completed. El cambio de estado se confirma primero; el
certificado se intenta después y su falla se informa sin revertir nada.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.utils import timezone

from dancecore.apps.core.errors import CompetitionError, InvalidStatusError, NotFoundError

from ..models import Performance, PerformanceStatus

logger = logging.getLogger(__name__)

VALID_STATUSES = tuple(PerformanceStatus.values)


@dataclass
class CertificateResult:
    issued: bool = False
    sent: bool = False
    certificate_id: Optional[int] = None
    percentage: Optional[int] = None
    medallion: str = ""
    email: str = ""
    error: str = ""

    def as_dict(self) -> Dict[str, Any]:
        return {
            "issued": self.issued,
            "sent": self.sent,
            "certificate_id": self.certificate_id,
            "percentage": self.percentage,
            "medallion": self.medallion,
            "email": self.email,
            "error": self.error or None,
        }


@dataclass
class StatusChangeResult:
    performance: Performance
    previous_status: str
    certificate: Optional[CertificateResult] = field(default=None)

    @property
    def status(self) -> str:
        return self.performance.status

    @property
    def completed_now(self) -> bool:
        return self.certificate is not None


def _issue_after_completion(performance: Performance, deliver: bool) -> CertificateResult:
    from dancecore.apps.certificates.services.issuer import issue_certificate

    logger.info("Performance %s completada; emitiendo certificado", performance.pk)
    try:
        issued = issue_certificate(performance.pk, deliver=deliver)
    except CompetitionError as exc:
        logger.warning("Certificado de %s no emitido: %s", performance.pk, exc.message)
        return CertificateResult(error=exc.message)
    except Exception as exc:
        logger.exception("Error emitiendo el certificado de %s", performance.pk)
        return CertificateResult(error=str(exc) or exc.__class__.__name__)

    cert = issued.certificate
    return CertificateResult(
        issued=True,
        sent=issued.sent,
        certificate_id=cert.pk,
        percentage=cert.percentage,
        medallion=cert.medallion,
        email=issued.recipient_email,
        error=issued.delivery_error,
    )


def set_performance_status(performance_id, new_status: str, *, deliver: bool = True) -> StatusChangeResult:
    if new_status not in VALID_STATUSES:
        raise InvalidStatusError(
            "Estado inválido. Debe ser uno de: " + ", ".join(VALID_STATUSES),
            status=new_status,
        )

    with transaction.atomic():
        try:
            performance = Performance.objects.select_for_update().filter(pk=performance_id).first()
        except (ValueError, DjangoValidationError):
            performance = None
        if performance is None:
            raise NotFoundError(f"Performance {performance_id} no encontrada.")

        previous_status = performance.status
        now = timezone.now()
        qs = Performance.objects.filter(pk=performance.pk)
        if new_status == PerformanceStatus.COMPLETED:
            # CAS: solo quien mueve la fila desde un estado no completado emite
            completed_now = qs.exclude(status=PerformanceStatus.COMPLETED).update(
                status=new_status, updated_at=now
            ) == 1
        else:
            qs.update(status=new_status, updated_at=now)
            completed_now = False
        performance.refresh_from_db()

    logger.info("Performance %s: %s -> %s", performance.pk, previous_status, new_status)

    certificate = _issue_after_completion(performance, deliver) if completed_now else None
    return StatusChangeResult(
        performance=performance,
        previous_status=previous_status,
        certificate=certificate,
    )
