from django.urls import path

from . import views

app_name = "judging"

urlpatterns = [
    path("scores/", views.submit_score_view, name="submit_score"),
    path("scores/edit/", views.edit_score_view, name="edit_score"),
    path("scores/edit-total/", views.edit_score_total_view, name="edit_score_total"),
    path("scores/approve/", views.approve_scores_view, name="approve_scores"),
    path("scores/approvals/", views.approvals_view, name="approvals"),
    path("performances/<uuid:performance_id>/scoring-status/", views.scoring_status_view, name="scoring_status"),
]
