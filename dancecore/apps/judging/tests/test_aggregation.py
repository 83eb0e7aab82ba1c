from decimal import Decimal

from django.test import SimpleTestCase, TestCase

from dancecore.apps.core.tests.helpers import (
    make_contestant,
    make_dancer,
    make_entry,
    make_event,
    make_judges,
    make_score,
)
from dancecore.apps.judging.services.aggregation import (
    compute_percentage,
    is_fully_scored,
    scoring_status,
)
from dancecore.apps.scheduling.services.reconciler import ensure_performance


class QuorumRulesTest(SimpleTestCase):
    def test_floor_of_three_assigned_judges(self):
        for total in (0, 1, 2):
            for scored in range(0, 5):
                self.assertFalse(is_fully_scored(scored, total), (scored, total))

    def test_all_assigned_must_score(self):
        self.assertFalse(is_fully_scored(2, 3))
        self.assertTrue(is_fully_scored(3, 3))
        self.assertTrue(is_fully_scored(4, 4))

    def test_percentage_divides_by_assigned(self):
        self.assertEqual(compute_percentage([80, 90], 4), 43)

    def test_percentage_without_roster_uses_scored(self):
        self.assertEqual(compute_percentage([Decimal("80"), Decimal("90")], 0), 85)

    def test_percentage_undefined(self):
        self.assertIsNone(compute_percentage([], 0))


def _performance(event):
    contestant = make_contestant()
    dancer = make_dancer()
    entry = make_entry(event, contestant.pk, [dancer.pk])
    return ensure_performance(entry.pk)


class ScoringStatusTest(TestCase):
    def test_four_assigned_two_scored(self):
        event = make_event()
        judges = make_judges(event, 4)
        performance = _performance(event)
        make_score(performance, judges[0], 80)
        make_score(performance, judges[1], 90)

        status = scoring_status(performance.pk)

        self.assertEqual(status.total_judges, 4)
        self.assertEqual(status.scored_judges, 2)
        self.assertFalse(status.is_fully_scored)
        self.assertTrue(status.is_partially_scored)
        self.assertEqual(status.percentage, 43)
        self.assertEqual(status.pending_judge_ids, [judges[2].pk, judges[3].pk])
        self.assertEqual(status.pending_judges[0].judge_email, judges[2].email)
        self.assertEqual(len(status.per_judge_totals), 2)

    def test_two_judges_never_complete(self):
        event = make_event()
        judges = make_judges(event, 2)
        performance = _performance(event)
        for judge in judges:
            make_score(performance, judge, 88)

        status = scoring_status(performance.pk)
        self.assertEqual(status.scored_judges, 2)
        self.assertFalse(status.is_fully_scored)

    def test_inactive_assignments_do_not_count(self):
        event = make_event()
        judges = make_judges(event, 3)
        make_judges(event, 2, active=False)
        performance = _performance(event)
        for judge in judges:
            make_score(performance, judge, 75)

        status = scoring_status(performance.pk)
        self.assertEqual(status.total_judges, 3)
        self.assertTrue(status.is_fully_scored)
        self.assertEqual(status.percentage, 75)

    def test_no_scores(self):
        event = make_event()
        make_judges(event, 3)
        status = scoring_status(_performance(event).pk)
        self.assertFalse(status.is_partially_scored)
        self.assertEqual(status.percentage, 0)
        self.assertEqual(len(status.pending_judges), 3)
