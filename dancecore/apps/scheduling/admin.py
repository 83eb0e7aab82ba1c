from __future__ import annotations

from django.contrib import admin, messages
from django.utils.translation import gettext_lazy as _

from .models import Performance, PerformanceStatus
from .services.status import set_performance_status


@admin.register(Performance)
class PerformanceAdmin(admin.ModelAdmin):
    list_display = (
        "item_number",
        "performance_order",
        "title",
        "event",
        "participants",
        "status",
        "scores_published",
    )
    list_filter = ("event", "status", "scores_published", "entry_type")
    search_fields = ("title", "contestant_id")
    ordering = ("event", "performance_order", "item_number")
    raw_id_fields = ("event", "event_entry")
    # item_number solo cambia por reasignación explícita desde la inscripción
    readonly_fields = ("item_number", "scores_published", "scores_published_at", "scores_published_by")
    actions = ["action_mark_completed"]

    def participants(self, obj: Performance) -> str:
        return obj.participants_display
    participants.short_description = "Participantes"

    @admin.action(description=_("Marcar como completadas (emite certificados)"))
    def action_mark_completed(self, request, queryset):
        issued = 0
        for performance in queryset:
            result = set_performance_status(performance.pk, PerformanceStatus.COMPLETED)
            cert = result.certificate
            if cert is None:
                continue
            if cert.issued:
                issued += 1
            if cert.error:
                self.message_user(request, f"{performance}: {cert.error}", level=messages.WARNING)
        self.message_user(request, f"{issued} certificados emitidos.", level=messages.SUCCESS)
