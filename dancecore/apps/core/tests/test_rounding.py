from decimal import Decimal

from django.test import SimpleTestCase

from dancecore.apps.core.rounding import round_half_up


class RoundHalfUpTest(SimpleTestCase):
    def test_half_goes_up(self):
        self.assertEqual(round_half_up(Decimal("42.5")), 43)
        self.assertEqual(round_half_up(Decimal("84.5")), 85)

    def test_below_half_goes_down(self):
        self.assertEqual(round_half_up(Decimal("42.49")), 42)

    def test_integers_unchanged(self):
        self.assertEqual(round_half_up(85), 85)
