from __future__ import annotations

from django.contrib import admin, messages
from django.utils.translation import gettext_lazy as _

from dancecore.apps.core.errors import CompetitionError

from .models import Contestant, Dancer, EventEntry, Studio
from .services.entries import approve_entry


@admin.register(Studio)
class StudioAdmin(admin.ModelAdmin):
    list_display = ("name", "email", "created_at")
    search_fields = ("name", "email")


@admin.register(Contestant)
class ContestantAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "type", "studio_name", "email")
    list_filter = ("type",)
    search_fields = ("id", "name", "studio_name", "email")


@admin.register(Dancer)
class DancerAdmin(admin.ModelAdmin):
    list_display = ("name", "eodsa_id", "id", "studio", "contestant")
    search_fields = ("name", "eodsa_id", "id", "email")
    raw_id_fields = ("studio", "contestant")


@admin.register(EventEntry)
class EventEntryAdmin(admin.ModelAdmin):
    list_display = (
        "item_number",
        "item_name",
        "event",
        "contestant_id",
        "entry_type",
        "approved",
        "payment_status",
        "submitted_at",
    )
    list_filter = ("event", "approved", "entry_type", "payment_status")
    search_fields = ("item_name", "contestant_id", "eodsa_id")
    raw_id_fields = ("event",)
    readonly_fields = ("approved_at", "submitted_at")
    actions = ["action_approve"]

    @admin.action(description=_("Aprobar y crear performance"))
    def action_approve(self, request, queryset):
        ok = 0
        for entry in queryset:
            try:
                approve_entry(entry.pk)
                ok += 1
            except CompetitionError as exc:
                self.message_user(request, f"{entry}: {exc.message}", level=messages.ERROR)
        self.message_user(request, f"{ok} inscripciones aprobadas.", level=messages.SUCCESS)
