from __future__ import annotations

from django.contrib import admin, messages
from django.utils.translation import gettext_lazy as _

from dancecore.apps.scheduling.models import Performance

from .models import Score, ScoreApproval, ScoreAudit
from .services.approval import publish_scores


class ScoreAuditInline(admin.TabularInline):
    model = ScoreAudit
    extra = 0
    can_delete = False
    fields = ("edit_mode", "previous_values", "new_values", "edited_by", "edited_at")
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Score)
class ScoreAdmin(admin.ModelAdmin):
    list_display = ("performance", "judge", "total_score", "submitted_at", "updated_at")
    list_filter = ("performance__event",)
    search_fields = ("performance__title", "judge__username")
    raw_id_fields = ("performance", "judge")
    readonly_fields = ("total_score", "submitted_at", "updated_at")
    inlines = [ScoreAuditInline]
    actions = ["action_publish"]

    def has_change_permission(self, request, obj=None):
        # Las ediciones pasan por el editor auditado
        return False

    @admin.action(description=_("Publicar puntajes de las performances seleccionadas"))
    def action_publish(self, request, queryset):
        performance_ids = set(queryset.values_list("performance_id", flat=True))
        published = 0
        for performance in Performance.objects.filter(pk__in=performance_ids):
            result = publish_scores(performance.pk, request.user.pk)
            if not result.already_published:
                published += 1
            if not result.scoring.is_fully_scored:
                self.message_user(
                    request,
                    f"{performance}: publicado con {result.scoring.scored_judges}/{result.scoring.total_judges} jueces.",
                    level=messages.WARNING,
                )
        self.message_user(request, f"{published} performances publicadas.", level=messages.SUCCESS)


@admin.register(ScoreAudit)
class ScoreAuditAdmin(admin.ModelAdmin):
    list_display = ("score", "edit_mode", "edited_by", "edited_by_name", "edited_at")
    list_filter = ("edit_mode",)
    search_fields = ("edited_by", "edited_by_name", "performance_id_snapshot")
    readonly_fields = (
        "score",
        "performance_id_snapshot",
        "judge_id_snapshot",
        "edit_mode",
        "previous_values",
        "new_values",
        "edited_by",
        "edited_by_name",
        "edited_at",
    )

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(ScoreApproval)
class ScoreApprovalAdmin(admin.ModelAdmin):
    list_display = ("performance", "action", "approved_by", "approved_at", "scored_judges", "total_judges", "was_fully_scored")
    list_filter = ("was_fully_scored",)
    readonly_fields = ("approved_at",)
