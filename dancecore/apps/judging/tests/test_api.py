from decimal import Decimal

from django.test import TestCase

from dancecore.apps.core.tests.helpers import (
    make_contestant,
    make_dancer,
    make_entry,
    make_event,
    make_judges,
    make_score,
)
from dancecore.apps.judging.models import ScoreAudit
from dancecore.apps.scheduling.services.reconciler import ensure_performance

SCORES = {
    "technical_score": 18,
    "musical_score": 17,
    "performance_score": 19,
    "styling_score": 16,
    "overall_impression_score": 18,
}


class JudgingApiTest(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.event = make_event()
        cls.judges = make_judges(cls.event, 3)
        entry = make_entry(cls.event, make_contestant().pk, [make_dancer().pk])
        cls.performance = ensure_performance(entry.pk)

    def _json(self, method, url, data):
        return getattr(self.client, method)(url, data=data, content_type="application/json")

    def test_submit_and_duplicate(self):
        payload = {"performance_id": str(self.performance.pk), "judge_id": self.judges[0].pk, **SCORES}
        r = self._json("post", "/api/scores/", payload)
        self.assertEqual(r.status_code, 201)
        self.assertEqual(Decimal(r.json()["score"]["total_score"]), Decimal("88"))

        r = self._json("post", "/api/scores/", payload)
        self.assertEqual(r.status_code, 409)
        self.assertEqual(r.json()["code"], "conflict")

    def test_scoring_status(self):
        make_score(self.performance, self.judges[0], 90)
        r = self.client.get(f"/api/performances/{self.performance.pk}/scoring-status/")
        self.assertEqual(r.status_code, 200)
        data = r.json()["data"]
        self.assertEqual(data["total_judges"], 3)
        self.assertEqual(data["scored_judges"], 1)
        self.assertFalse(data["is_fully_scored"])
        self.assertEqual(len(data["pending_judges"]), 2)

    def test_edit_and_edit_total(self):
        score = make_score(self.performance, self.judges[0], 80)
        base = {
            "score_id": score.pk,
            "performance_id": str(self.performance.pk),
            "judge_id": self.judges[0].pk,
            "editor_id": "admin-1",
        }
        r = self._json("put", "/api/scores/edit/", {**base, "scores": SCORES})
        self.assertEqual(r.status_code, 200)

        r = self._json("put", "/api/scores/edit-total/", {**base, "total": 92})
        self.assertEqual(r.status_code, 200)
        self.assertEqual(Decimal(r.json()["score"]["total_score"]), Decimal("92"))
        self.assertEqual(ScoreAudit.objects.filter(score=score).count(), 2)

        r = self._json("put", "/api/scores/edit/", {**base, "scores": {**SCORES, "technical_score": 30}})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(ScoreAudit.objects.filter(score=score).count(), 2)

    def test_edit_wrong_judge_is_404(self):
        score = make_score(self.performance, self.judges[0], 80)
        r = self._json("put", "/api/scores/edit/", {
            "score_id": score.pk,
            "performance_id": str(self.performance.pk),
            "judge_id": self.judges[1].pk,
            "editor_id": "admin-1",
            "scores": SCORES,
        })
        self.assertEqual(r.status_code, 404)

    def test_approve_and_list(self):
        payload = {"performance_id": str(self.performance.pk), "approver_id": "admin-1", "action": "publish"}
        r = self._json("post", "/api/scores/approve/", payload)
        self.assertEqual(r.status_code, 200)
        self.assertFalse(r.json()["already_published"])

        r = self._json("post", "/api/scores/approve/", payload)
        self.assertTrue(r.json()["already_published"])

        r = self.client.get("/api/scores/approvals/", {"performance_id": str(self.performance.pk)})
        self.assertEqual(len(r.json()["approvals"]), 1)

    def test_approve_rejects_unknown_action(self):
        r = self._json("post", "/api/scores/approve/", {
            "performance_id": str(self.performance.pk), "approver_id": "admin-1", "action": "unpublish",
        })
        self.assertEqual(r.status_code, 400)
