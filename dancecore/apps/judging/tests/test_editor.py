from decimal import Decimal
from unittest import mock

from django.db import IntegrityError
from django.test import SimpleTestCase, TestCase

from dancecore.apps.core.errors import NotFoundError, ValidationError
from dancecore.apps.core.tests.helpers import (
    make_contestant,
    make_dancer,
    make_entry,
    make_event,
    make_judges,
    make_score,
)
from dancecore.apps.judging.models import CRITERIA, Score, ScoreAudit
from dancecore.apps.judging.services.editor import edit_score, edit_score_total, split_total
from dancecore.apps.scheduling.services.reconciler import ensure_performance

NEW_VALUES = {
    "technical_score": "18.5",
    "musical_score": "17",
    "performance_score": "19",
    "styling_score": "16.25",
    "overall_impression_score": "20",
}


class SplitTotalTest(SimpleTestCase):
    def test_sum_is_exact(self):
        for total in ("0", "87.5", "99.99", "100", "12.03"):
            values = split_total(Decimal(total))
            self.assertEqual(sum(values.values()), Decimal(total))
            self.assertTrue(all(Decimal("0") <= v <= Decimal("20") for v in values.values()))


class ScoreEditorTest(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.event = make_event()
        cls.judge, cls.other_judge, _ = make_judges(cls.event, 3)
        entry = make_entry(cls.event, make_contestant().pk, [make_dancer().pk])
        cls.performance = ensure_performance(entry.pk)
        cls.score = make_score(cls.performance, cls.judge, 80)

    def _edit(self, values, **kwargs):
        params = dict(
            score_id=self.score.pk,
            performance_id=self.performance.pk,
            judge_id=self.judge.pk,
            values=values,
            editor_id="admin-1",
            editor_name="Admin",
        )
        params.update(kwargs)
        return edit_score(**params)

    def test_edit_updates_values_and_writes_one_audit(self):
        self._edit(NEW_VALUES)

        score = Score.objects.get(pk=self.score.pk)
        for name in CRITERIA:
            self.assertEqual(getattr(score, name), Decimal(NEW_VALUES[name]))
        self.assertEqual(score.total_score, Decimal("90.75"))

        audits = ScoreAudit.objects.filter(score=score)
        self.assertEqual(audits.count(), 1)
        audit = audits.get()
        self.assertEqual(audit.edit_mode, "criteria")
        self.assertEqual(audit.edited_by, "admin-1")
        self.assertEqual(Decimal(audit.previous_values["total_score"]), Decimal("80"))
        self.assertEqual(Decimal(audit.new_values["total_score"]), Decimal("90.75"))

    def test_each_edit_is_audited(self):
        self._edit(NEW_VALUES)
        self._edit({**NEW_VALUES, "musical_score": "10"})
        self.assertEqual(ScoreAudit.objects.filter(score=self.score).count(), 2)

    def test_failed_audit_rolls_back_score(self):
        with mock.patch(
            "dancecore.apps.judging.services.editor.ScoreAudit.objects.create",
            side_effect=IntegrityError("audit insert failed"),
        ):
            with self.assertRaises(IntegrityError):
                self._edit(NEW_VALUES)

        score = Score.objects.get(pk=self.score.pk)
        self.assertEqual(score.total_score, Decimal("80"))
        self.assertEqual(score.technical_score, self.score.technical_score)
        self.assertFalse(ScoreAudit.objects.filter(score=score).exists())

    def test_out_of_range_is_rejected(self):
        with self.assertRaises(ValidationError):
            self._edit({**NEW_VALUES, "technical_score": "21"})
        with self.assertRaises(ValidationError):
            self._edit({**NEW_VALUES, "styling_score": "-1"})
        with self.assertRaises(ValidationError):
            self._edit({"technical_score": "10"})

        self.assertFalse(ScoreAudit.objects.exists())
        self.assertEqual(Score.objects.get(pk=self.score.pk).total_score, Decimal("80"))

    def test_mismatched_triple_is_not_found(self):
        with self.assertRaises(NotFoundError):
            self._edit(NEW_VALUES, judge_id=self.other_judge.pk)
        with self.assertRaises(NotFoundError):
            self._edit(NEW_VALUES, score_id=999999)
        with self.assertRaises(NotFoundError):
            self._edit(NEW_VALUES, performance_id="not-a-uuid")
        self.assertFalse(ScoreAudit.objects.exists())

    def test_editor_required(self):
        with self.assertRaises(ValidationError):
            self._edit(NEW_VALUES, editor_id="")

    def test_total_only_edit(self):
        edit_score_total(self.score.pk, self.performance.pk, self.judge.pk, "87.5", editor_id="admin-1")

        score = Score.objects.get(pk=self.score.pk)
        self.assertEqual(score.total_score, Decimal("87.5"))
        audit = ScoreAudit.objects.get(score=score)
        self.assertEqual(audit.edit_mode, "total")
        self.assertEqual(Decimal(audit.new_values["total_score"]), Decimal("87.5"))

    def test_total_only_range(self):
        with self.assertRaises(ValidationError):
            edit_score_total(self.score.pk, self.performance.pk, self.judge.pk, "100.5", editor_id="admin-1")
        self.assertFalse(ScoreAudit.objects.exists())
