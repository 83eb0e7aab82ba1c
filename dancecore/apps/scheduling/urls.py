from django.urls import path

from . import views

app_name = "scheduling"

urlpatterns = [
    path("entries/<int:entry_id>/performance/", views.ensure_performance_view, name="ensure_performance"),
    path("entries/<int:entry_id>/item-number/", views.assign_item_number_view, name="assign_item_number"),
    path("events/<int:event_id>/reconcile/", views.reconcile_event_view, name="reconcile_event"),
    path("events/<int:event_id>/running-order/", views.reorder_view, name="reorder"),
    path("performances/<uuid:performance_id>/status/", views.set_status_view, name="set_status"),
]
