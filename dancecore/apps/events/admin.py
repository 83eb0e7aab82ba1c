from __future__ import annotations

from django.contrib import admin, messages
from django.utils.translation import gettext_lazy as _

from dancecore.apps.core.errors import CompetitionError

from .models import Event, JudgeEventAssignment


# -----------------------------
# Inline para el roster de jueces
# -----------------------------
class JudgeAssignmentInline(admin.TabularInline):
    model = JudgeEventAssignment
    extra = 0
    raw_id_fields = ("judge",)
    fields = ("judge", "display_order", "is_active", "assigned_at")
    readonly_fields = ("assigned_at",)
    ordering = ("display_order",)


# -----------------------------
# Event (con acción de reconciliación)
# -----------------------------
@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ("name", "region", "event_date", "performance_type", "status", "judges_count")
    search_fields = ("name", "slug", "venue")
    list_filter = ("status", "region", "performance_type")
    prepopulated_fields = {"slug": ("name",)}
    inlines = [JudgeAssignmentInline]
    actions = ["action_reconcile"]

    def judges_count(self, obj: Event) -> int:
        return obj.judge_assignments.filter(is_active=True).count()
    judges_count.short_description = "Jueces"

    @admin.action(description=_("Crear/corregir performances de las inscripciones aprobadas"))
    def action_reconcile(self, request, queryset):
        from dancecore.apps.scheduling.services.reconciler import reconcile_event

        for event in queryset:
            try:
                report = reconcile_event(event.pk)
            except CompetitionError as exc:
                self.message_user(request, f"{event}: {exc.message}", level=messages.ERROR)
                continue
            level = messages.WARNING if report.failed else messages.SUCCESS
            self.message_user(
                request,
                f"{event}: {report.created} creadas, {report.fixed} corregidas, {report.failed} con error.",
                level=level,
            )


@admin.register(JudgeEventAssignment)
class JudgeEventAssignmentAdmin(admin.ModelAdmin):
    list_display = ("event", "judge", "display_order", "is_active", "assigned_at")
    list_filter = ("event", "is_active")
    search_fields = ("judge__username", "judge__email", "event__name")
    raw_id_fields = ("event", "judge")
