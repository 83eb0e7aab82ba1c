import datetime

from django.test import TestCase

from dancecore.apps.certificates.models import Certificate
from dancecore.apps.core.tests.helpers import (
    make_contestant,
    make_dancer,
    make_entry,
    make_event,
    make_judges,
    make_score,
)
from dancecore.apps.scheduling.models import Performance, PerformanceStatus
from dancecore.apps.scheduling.services.reconciler import ensure_performance


class CertificateApiTest(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.event = make_event(event_date=datetime.date(2025, 3, 1))
        judges = make_judges(cls.event, 3)
        contestant = make_contestant(email="parent@example.com")
        cls.entry = make_entry(cls.event, contestant.pk, [make_dancer("Thandi Nkosi").pk])
        cls.performance = ensure_performance(cls.entry.pk)
        for judge in judges:
            make_score(cls.performance, judge, 81)
        Performance.objects.filter(pk=cls.performance.pk).update(status=PerformanceStatus.COMPLETED)

    def _post(self, url, data):
        return self.client.post(url, data=data, content_type="application/json")

    def _generate(self, deliver=False):
        return self._post(
            "/api/certificates/generate/",
            {"performance_id": str(self.performance.pk), "deliver": deliver},
        )

    def test_generate(self):
        r = self._generate()
        self.assertEqual(r.status_code, 200)
        data = r.json()["data"]
        self.assertEqual(data["percentage"], 81)
        self.assertEqual(data["medallion"], "Gold")
        self.assertFalse(data["email_sent"])

    def test_generate_requires_performance_id(self):
        r = self._post("/api/certificates/generate/", {})
        self.assertEqual(r.status_code, 400)

    def test_check(self):
        r = self.client.get("/api/certificates/check/", {"performance_id": str(self.performance.pk)})
        self.assertFalse(r.json()["exists"])

        self._generate()
        r = self.client.get("/api/certificates/check/", {"entry_id": self.entry.pk})
        body = r.json()
        self.assertTrue(body["exists"])
        self.assertEqual(body["certificate_id"], Certificate.objects.get().pk)

        r = self.client.get("/api/certificates/check/")
        self.assertEqual(r.status_code, 400)

    def test_send_and_mark_downloaded(self):
        self._generate()
        cert = Certificate.objects.get()

        r = self._post("/api/certificates/send/", {"certificate_id": cert.pk, "sent_by": "office"})
        self.assertEqual(r.status_code, 200)
        r = self._post("/api/certificates/mark-downloaded/", {"certificate_id": cert.pk})
        self.assertEqual(r.status_code, 200)

        cert.refresh_from_db()
        self.assertEqual(cert.sent_by, "office")
        self.assertIsNotNone(cert.sent_at)
        self.assertTrue(cert.downloaded)

        r = self._post("/api/certificates/mark-downloaded/", {"certificate_id": 999999})
        self.assertEqual(r.status_code, 404)

    def test_data_and_html(self):
        r = self.client.get(f"/api/certificates/{self.performance.pk}/")
        self.assertEqual(r.status_code, 404)
        r = self.client.get(f"/certificates/{self.performance.pk}/")
        self.assertEqual(r.status_code, 404)

        self._generate()
        r = self.client.get(f"/api/certificates/{self.performance.pk}/")
        self.assertEqual(r.json()["certificate"]["event_date"], "March 1, 2025")

        r = self.client.get(f"/certificates/{self.performance.pk}/")
        self.assertEqual(r.status_code, 200)
        self.assertContains(r, "Thandi Nkosi")
        self.assertContains(r, "81%")
