from django.urls import path

from . import views

app_name = "certificates"

urlpatterns = [
    path("generate/", views.generate_view, name="generate"),
    path("check/", views.check_view, name="check"),
    path("send/", views.send_view, name="send"),
    path("mark-downloaded/", views.mark_downloaded_view, name="mark_downloaded"),
    path("<uuid:performance_id>/", views.certificate_data_view, name="data"),
]
