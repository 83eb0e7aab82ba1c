from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase

from dancecore.apps.core.tests.helpers import make_contestant, make_dancer, make_entry, make_event
from dancecore.apps.scheduling.models import Performance
from dancecore.apps.scheduling.services.reconciler import ensure_performance


class SchedulingApiTest(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.event = make_event()
        contestant = make_contestant()
        make_dancer(eodsa_id="E444444")
        cls.entry = make_entry(cls.event, contestant.pk, ["E444444"], item_number=5)
        cls.pending = make_entry(cls.event, contestant.pk, ["E444444"], approved=False, item_name="Pending")

    def test_ensure_performance_endpoint(self):
        r = self.client.post(f"/api/entries/{self.entry.pk}/performance/")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["performance"]["item_number"], 5)

    def test_ensure_requires_approved_entry(self):
        r = self.client.post(f"/api/entries/{self.pending.pk}/performance/")
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json()["code"], "not_approved")

    def test_reconcile_endpoint(self):
        r = self.client.post(f"/api/events/{self.event.pk}/reconcile/")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["report"]["created"], 1)

    def test_status_endpoint(self):
        performance = ensure_performance(self.entry.pk)
        r = self.client.put(
            f"/api/performances/{performance.pk}/status/",
            data={"status": "ready"},
            content_type="application/json",
        )
        self.assertEqual(r.status_code, 200)
        body = r.json()
        self.assertEqual(body["performance"]["status"], "ready")
        self.assertEqual(body["previous_status"], "scheduled")
        self.assertIsNone(body["certificate"])

    def test_status_endpoint_rejects_unknown_status(self):
        performance = ensure_performance(self.entry.pk)
        r = self.client.put(
            f"/api/performances/{performance.pk}/status/",
            data={"status": "done"},
            content_type="application/json",
        )
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json()["code"], "invalid_status")

    def test_running_order_endpoint(self):
        performance = ensure_performance(self.entry.pk)
        r = self.client.put(
            f"/api/events/{self.event.pk}/running-order/",
            data={"performances": [{"id": str(performance.pk), "performance_order": 4}]},
            content_type="application/json",
        )
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["updated"], 1)
        performance.refresh_from_db()
        self.assertEqual(performance.performance_order, 4)
        self.assertEqual(performance.item_number, 5)

    def test_item_number_endpoint(self):
        ensure_performance(self.entry.pk)
        r = self.client.put(
            f"/api/entries/{self.entry.pk}/item-number/",
            data={"item_number": 9},
            content_type="application/json",
        )
        self.assertEqual(r.status_code, 200)
        self.assertEqual(Performance.objects.get(event_entry=self.entry).item_number, 9)

    def test_reconcile_command(self):
        out = StringIO()
        call_command("reconcile_event", self.event.slug, stdout=out)
        self.assertIn("Creadas: 1", out.getvalue())
        self.assertEqual(Performance.objects.filter(event=self.event).count(), 1)

    def test_reconcile_command_unknown_event(self):
        with self.assertRaises(CommandError):
            call_command("reconcile_event", "no-such-event", stdout=StringIO())
