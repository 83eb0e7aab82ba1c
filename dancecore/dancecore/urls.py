from django.contrib import admin
from django.urls import include, path

from dancecore.apps.certificates.views import certificate_html_view
from dancecore.apps.core.http import health

urlpatterns = [
    path("admin/", admin.site.urls),

    # API healthcheck
    path("api/health/", health, name="api_health"),

    # Núcleo de competencia (JSON)
    path("api/", include("dancecore.apps.registration.urls")),
    path("api/", include("dancecore.apps.scheduling.urls")),
    path("api/", include("dancecore.apps.judging.urls")),
    path("api/certificates/", include("dancecore.apps.certificates.urls")),

    # Certificado renderizado (HTML)
    path("certificates/<uuid:performance_id>/", certificate_html_view, name="certificate_html"),
]
