from __future__ import annotations

from django.contrib import admin

from .models import Certificate


@admin.register(Certificate)
class CertificateAdmin(admin.ModelAdmin):
    list_display = ("display_name", "title", "percentage", "medallion", "recipient_email", "sent_at", "downloaded")
    list_filter = ("medallion", "downloaded")
    search_fields = ("display_name", "title", "recipient_email")
    raw_id_fields = ("performance",)
    readonly_fields = ("created_at", "updated_at", "sent_at", "sent_by", "downloaded_at")
