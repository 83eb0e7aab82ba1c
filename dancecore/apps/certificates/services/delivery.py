# dancecore/apps/certificates/services/delivery.py
from __future__ import annotations

import logging
import smtplib

from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.mail import send_mail
from django.template.loader import render_to_string
from django.utils import timezone

from dancecore.apps.core.errors import CertificateDeliveryError, NotFoundError, ValidationError

from ..models import Certificate

logger = logging.getLogger(__name__)


def _get(certificate_id) -> Certificate:
    try:
        certificate = Certificate.objects.select_related("performance").filter(pk=certificate_id).first()
    except (ValueError, TypeError, DjangoValidationError):
        certificate = None
    if certificate is None:
        raise NotFoundError(f"Certificado {certificate_id} no encontrado.")
    return certificate


def deliver_certificate_email(certificate: Certificate, recipient: str = "") -> None:
    recipient = recipient or certificate.recipient_email
    if not recipient:
        raise ValidationError("El certificado no tiene e-mail de destinatario.")

    context = {"certificate": certificate}
    try:
        send_mail(
            subject=f"Your certificate: {certificate.title}",
            message=render_to_string("certificates/email.txt", context),
            from_email=settings.CERTIFICATE_FROM_EMAIL,
            recipient_list=[recipient],
            html_message=render_to_string("certificates/email.html", context),
            fail_silently=False,
        )
    except (smtplib.SMTPException, OSError) as exc:
        logger.exception("Falló el envío del certificado %s a %s", certificate.pk, recipient)
        raise CertificateDeliveryError(
            "No se pudo enviar el certificado por e-mail.", reason=str(exc)
        ) from exc

    logger.info("Certificado %s enviado a %s", certificate.pk, recipient)


def mark_sent(certificate_id, sent_by: str = "admin") -> Certificate:
    certificate = _get(certificate_id)
    certificate.sent_at = timezone.now()
    certificate.sent_by = sent_by or "admin"
    certificate.save(update_fields=["sent_at", "sent_by", "updated_at"])
    return certificate


def mark_downloaded(certificate_id) -> Certificate:
    certificate = _get(certificate_id)
    certificate.downloaded = True
    certificate.downloaded_at = timezone.now()
    certificate.save(update_fields=["downloaded", "downloaded_at", "updated_at"])
    return certificate


def send_certificate(certificate_id, sent_by: str = "admin", recipient: str = "") -> Certificate:
    """Envía el e-mail y, solo si salió, registra sent_at/sent_by."""
    certificate = _get(certificate_id)
    deliver_certificate_email(certificate, recipient)
    return mark_sent(certificate.pk, sent_by)
