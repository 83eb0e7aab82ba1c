# dancecore/apps/core/errors.py
"""
Taxonomía de errores del núcleo de competencia.

Cada error lleva el status HTTP equivalente y si el llamador puede
reintentar. Las vistas JSON los traducen con ``core.http.json_api``.
"""
from __future__ import annotations


class CompetitionError(Exception):
    status_code = 500
    code = "error"
    retryable = False

    def __init__(self, message: str = "", **details):
        super().__init__(message or self.__class__.__name__)
        self.message = message or self.__class__.__name__
        self.details = details

    def as_dict(self) -> dict:
        payload = {"success": False, "error": self.message, "code": self.code}
        if self.retryable:
            payload["retryable"] = True
        if self.details:
            payload["details"] = self.details
        return payload


# -------------------------------
# 4xx: culpa del llamador
# -------------------------------
class ValidationError(CompetitionError):
    status_code = 400
    code = "validation_error"


class NotFoundError(CompetitionError):
    status_code = 404
    code = "not_found"


class ConflictError(CompetitionError):
    status_code = 409
    code = "conflict"


class DataIntegrityError(CompetitionError):
    """Datos aguas arriba inconsistentes (no es un error normal de usuario)."""
    status_code = 422
    code = "data_integrity"


# -------------------------------
# 5xx: dependencias
# -------------------------------
class DependencyError(CompetitionError):
    """Store no disponible o backend de certificados caído. Reintentable."""
    status_code = 503
    code = "dependency_error"
    retryable = True


# -------------------------------
# Errores concretos
# -------------------------------
class NotApprovedError(ValidationError):
    code = "not_approved"


class InvalidStatusError(ValidationError):
    code = "invalid_status"


class NoValidContestantError(DataIntegrityError):
    code = "no_valid_contestant"


class NoScoresError(NotFoundError):
    code = "no_scores"


class EventNotFoundError(NotFoundError):
    code = "event_not_found"


class CertificateDeliveryError(DependencyError):
    code = "certificate_delivery_failed"
