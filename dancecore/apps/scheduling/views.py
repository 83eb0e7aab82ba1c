# dancecore/apps/scheduling/views.py
from __future__ import annotations

from django.http import HttpRequest

from dancecore.apps.core.errors import ValidationError
from dancecore.apps.core.http import json_api, read_json, require_fields

from .services.reconciler import ensure_performance, reconcile_event
from .services.running_order import assign_item_number, reorder_performances
from .services.status import set_performance_status


# -------------------------------
# Reconciliación
# -------------------------------
@json_api(methods=("POST",))
def ensure_performance_view(request: HttpRequest, entry_id: int):
    performance = ensure_performance(entry_id)
    return {"performance": performance.as_dict()}


@json_api(methods=("POST",))
def reconcile_event_view(request: HttpRequest, event_id: int):
    report = reconcile_event(event_id)
    return {
        "message": f"{report.created} creadas, {report.fixed} corregidas, {report.failed} con error.",
        "report": report.as_dict(),
    }


# -------------------------------
# Estado
# -------------------------------
@json_api(methods=("PUT", "PATCH"))
def set_status_view(request: HttpRequest, performance_id):
    data = read_json(request)
    require_fields(data, "status")
    deliver = data.get("deliver", True)
    result = set_performance_status(performance_id, str(data["status"]), deliver=bool(deliver))
    payload = {
        "performance": result.performance.as_dict(),
        "previous_status": result.previous_status,
        "certificate": result.certificate.as_dict() if result.certificate else None,
    }
    return payload


# -------------------------------
# Orden y número de ítem
# -------------------------------
@json_api(methods=("PUT",))
def reorder_view(request: HttpRequest, event_id: int):
    data = read_json(request)
    items = data.get("performances")
    if not isinstance(items, list):
        raise ValidationError("Se esperaba 'performances' como lista de {id, performance_order}.")
    orders = []
    for item in items:
        if not isinstance(item, dict):
            raise ValidationError("Cada elemento debe ser un objeto {id, performance_order}.")
        orders.append((item.get("id"), item.get("performance_order")))
    return reorder_performances(event_id, orders)


@json_api(methods=("PUT",))
def assign_item_number_view(request: HttpRequest, entry_id: int):
    data = read_json(request)
    require_fields(data, "item_number")
    result = assign_item_number(entry_id, data["item_number"])
    performance = result["performance"]
    return {
        "message": f"Número de ítem {result['entry'].item_number} asignado.",
        "entry": result["entry"].as_dict(),
        "performance": performance.as_dict() if performance else None,
    }
