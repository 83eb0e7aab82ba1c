from django.contrib.auth import get_user_model
from django.test import TestCase

from dancecore.apps.core.errors import ConflictError, NotFoundError, ValidationError
from dancecore.apps.core.tests.helpers import (
    make_contestant,
    make_dancer,
    make_entry,
    make_event,
    make_judges,
    make_score,
)
from dancecore.apps.judging.models import Score, ScoreApproval
from dancecore.apps.judging.services.approval import list_score_approvals, publish_scores
from dancecore.apps.judging.services.submission import submit_score
from dancecore.apps.scheduling.services.reconciler import ensure_performance

VALUES = {
    "technical_score": 18,
    "musical_score": 17,
    "performance_score": 19,
    "styling_score": 16,
    "overall_impression_score": 18,
}


class SubmitScoreTest(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.event = make_event()
        cls.judges = make_judges(cls.event, 3)
        entry = make_entry(cls.event, make_contestant().pk, [make_dancer().pk])
        cls.performance = ensure_performance(entry.pk)

    def test_first_submission(self):
        score = submit_score(self.performance.pk, self.judges[0].pk, VALUES)
        self.assertEqual(score.total_score, 88)

    def test_second_submission_conflicts(self):
        submit_score(self.performance.pk, self.judges[0].pk, VALUES)
        with self.assertRaises(ConflictError):
            submit_score(self.performance.pk, self.judges[0].pk, VALUES)
        self.assertEqual(Score.objects.filter(performance=self.performance).count(), 1)

    def test_different_judges_are_independent(self):
        for judge in self.judges:
            submit_score(self.performance.pk, judge.pk, VALUES)
        self.assertEqual(Score.objects.filter(performance=self.performance).count(), 3)

    def test_unassigned_judge_rejected(self):
        outsider = get_user_model().objects.create_user(username="outsider", password="Pass1234!")
        with self.assertRaises(ValidationError):
            submit_score(self.performance.pk, outsider.pk, VALUES)

    def test_out_of_range_rejected(self):
        with self.assertRaises(ValidationError):
            submit_score(self.performance.pk, self.judges[0].pk, {**VALUES, "musical_score": 25})

    def test_unknown_judge(self):
        with self.assertRaises(NotFoundError):
            submit_score(self.performance.pk, 999999, VALUES)


class PublishScoresTest(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.event = make_event()
        cls.judges = make_judges(cls.event, 3)
        entry = make_entry(cls.event, make_contestant().pk, [make_dancer().pk])
        cls.performance = ensure_performance(entry.pk)

    def test_publish_is_idempotent(self):
        for judge in self.judges:
            make_score(self.performance, judge, 85)

        first = publish_scores(self.performance.pk, "admin-1")
        second = publish_scores(self.performance.pk, "admin-2")

        self.assertFalse(first.already_published)
        self.assertTrue(second.already_published)
        self.assertTrue(second.performance.scores_published)
        self.assertEqual(second.performance.scores_published_by, "admin-1")
        self.assertEqual(ScoreApproval.objects.filter(performance=self.performance).count(), 1)
        self.assertTrue(first.approval.was_fully_scored)

    def test_partial_publish_exposes_quorum(self):
        make_score(self.performance, self.judges[0], 85)
        result = publish_scores(self.performance.pk, "admin-1")

        self.assertTrue(result.performance.scores_published)
        self.assertFalse(result.scoring.is_fully_scored)
        self.assertEqual(result.scoring.scored_judges, 1)
        self.assertEqual(result.scoring.total_judges, 3)

    def test_approver_required(self):
        with self.assertRaises(ValidationError):
            publish_scores(self.performance.pk, "")

    def test_list_approvals(self):
        publish_scores(self.performance.pk, "admin-1")
        self.assertEqual(len(list_score_approvals()), 1)
        self.assertEqual(len(list_score_approvals(self.performance.pk)), 1)
