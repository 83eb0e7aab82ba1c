# dancecore/apps/certificates/views.py
from __future__ import annotations

from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404, HttpRequest, HttpResponse

from dancecore.apps.core.errors import NotFoundError, ValidationError
from dancecore.apps.core.http import json_api, read_json, require_fields

from .models import Certificate
from .services.delivery import mark_downloaded, send_certificate
from .services.issuer import get_certificate, issue_certificate, render_certificate


def _certificate_dict(cert: Certificate) -> dict:
    return {
        "id": cert.pk,
        "performance_id": str(cert.performance_id),
        "display_name": cert.display_name,
        "percentage": cert.percentage,
        "style": cert.style,
        "title": cert.title,
        "medallion": cert.medallion,
        "event_date": cert.event_date_text,
        "certificate_url": cert.certificate_url,
        "recipient_email": cert.recipient_email,
        "sent_at": cert.sent_at,
        "sent_by": cert.sent_by,
        "downloaded": cert.downloaded,
        "downloaded_at": cert.downloaded_at,
    }


@json_api(methods=("POST",))
def generate_view(request: HttpRequest):
    data = read_json(request)
    require_fields(data, "performance_id")
    result = issue_certificate(data["performance_id"], deliver=bool(data.get("deliver", True)))
    return {"message": "Certificado generado.", "data": result.as_dict()}


@json_api(methods=("GET",))
def certificate_data_view(request: HttpRequest, performance_id):
    cert = get_certificate(performance_id)
    if cert is None:
        raise NotFoundError("La performance no tiene certificado.")
    return {"certificate": _certificate_dict(cert)}


@json_api(methods=("GET",))
def check_view(request: HttpRequest):
    performance_id = request.GET.get("performance_id")
    entry_id = request.GET.get("entry_id")
    if not performance_id and not entry_id:
        raise ValidationError("Se requiere performance_id o entry_id.")

    qs = Certificate.objects.all()
    if performance_id:
        try:
            cert = qs.filter(performance_id=performance_id).first()
        except (ValueError, TypeError, DjangoValidationError):
            cert = None
    else:
        cert = qs.filter(performance__event_entry_id=entry_id).first() if entry_id.isdigit() else None

    if cert is None or not cert.certificate_url:
        return {"exists": False}
    return {"exists": True, "certificate_url": cert.certificate_url, "certificate_id": cert.pk}


@json_api(methods=("POST",))
def send_view(request: HttpRequest):
    data = read_json(request)
    require_fields(data, "certificate_id")
    cert = send_certificate(
        data["certificate_id"],
        sent_by=data.get("sent_by") or "admin",
        recipient=data.get("email") or "",
    )
    return {"message": f"Certificado enviado a {cert.recipient_email or cert.display_name}."}


@json_api(methods=("POST",))
def mark_downloaded_view(request: HttpRequest):
    data = read_json(request)
    require_fields(data, "certificate_id")
    mark_downloaded(data["certificate_id"])
    return {"message": "Certificado marcado como descargado."}


# -------------------------------
# Artefacto HTML
# -------------------------------
def certificate_html_view(request: HttpRequest, performance_id):
    try:
        cert = get_certificate(performance_id)
    except NotFoundError:
        cert = None
    if cert is None:
        raise Http404("Certificado no encontrado.")
    return HttpResponse(render_certificate(cert))
