# dancecore/apps/core/http.py
from __future__ import annotations

import json
import logging
from functools import wraps
from typing import Any, Dict, Iterable

from django.db import InterfaceError, OperationalError
from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt

from .errors import CompetitionError, DependencyError, ValidationError

logger = logging.getLogger(__name__)


def read_json(request: HttpRequest) -> Dict[str, Any]:
    """Cuerpo JSON como dict ({} si viene vacío)."""
    if not request.body:
        return {}
    try:
        data = json.loads(request.body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ValidationError("Cuerpo JSON inválido.") from exc
    if not isinstance(data, dict):
        raise ValidationError("Se esperaba un objeto JSON.")
    return data


def require_fields(data: Dict[str, Any], *names: str) -> None:
    missing = [n for n in names if data.get(n) in (None, "")]
    if missing:
        raise ValidationError("Faltan campos requeridos: " + ", ".join(missing), missing=missing)


def json_api(methods: Iterable[str] = ("GET",)):
    """
    Envuelve una vista que devuelve un dict:
    - Restringe métodos (405 si no coincide).
    - Errores de dominio -> JSON con su status.
    - Fallas transitorias del store -> 503 reintentable.
    """
    allowed = {m.upper() for m in methods}

    def decorator(view_func):
        @csrf_exempt
        @wraps(view_func)
        def _wrapped(request: HttpRequest, *args, **kwargs):
            if request.method not in allowed:
                return JsonResponse(
                    {"success": False, "error": f"Método {request.method} no permitido."},
                    status=405,
                )
            try:
                payload = view_func(request, *args, **kwargs)
            except CompetitionError as exc:
                if exc.status_code >= 500:
                    logger.error("%s %s -> %s", request.method, request.path, exc.message)
                return JsonResponse(exc.as_dict(), status=exc.status_code)
            except (OperationalError, InterfaceError) as exc:
                logger.exception("Store no disponible en %s", request.path)
                err = DependencyError("Store no disponible, reintente.", reason=str(exc))
                return JsonResponse(err.as_dict(), status=err.status_code)

            status = 200
            if isinstance(payload, tuple):
                payload, status = payload
            payload.setdefault("success", True)
            return JsonResponse(payload, status=status)

        return _wrapped

    return decorator


# -------- Healthcheck simple --------
def health(request: HttpRequest) -> JsonResponse:
    return JsonResponse({"ok": True})
