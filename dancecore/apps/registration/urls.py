from django.urls import path

from . import views

app_name = "registration"

urlpatterns = [
    path("entries/<int:entry_id>/approve/", views.approve_entry_view, name="approve_entry"),
]
