import datetime
from decimal import Decimal

from django.test import SimpleTestCase

from dancecore.apps.certificates.services.issuer import (
    format_certificate_date,
    medal_tier,
    resolve_display_name,
)


class MedalTierTest(SimpleTestCase):
    def test_boundaries(self):
        cases = [
            (100, "Elite"),
            (95, "Elite"),
            (94.9, "Opus"),
            (90, "Opus"),
            (89.99, "Legend"),
            (85, "Legend"),
            (80, "Gold"),
            (79, "Silver+"),
            (75, "Silver+"),
            (70, "Silver"),
            (69, "Bronze"),
            (0, "Bronze"),
            (Decimal("42"), "Bronze"),
        ]
        for percentage, tier in cases:
            self.assertEqual(medal_tier(percentage), tier, percentage)

    def test_no_tier_for_negative_or_undefined(self):
        self.assertEqual(medal_tier(-1), "")
        self.assertEqual(medal_tier(None), "")
        self.assertEqual(medal_tier("n/a"), "")
        self.assertEqual(medal_tier(float("nan")), "")

    def test_gap_between_bronze_and_silver(self):
        self.assertEqual(medal_tier(69.5), "")
        self.assertEqual(medal_tier(Decimal("69.99")), "")
        self.assertEqual(medal_tier(69.0), "Bronze")


class CertificateDateTest(SimpleTestCase):
    def test_formats(self):
        self.assertEqual(format_certificate_date(datetime.date(2025, 10, 11)), "October 11, 2025")
        self.assertEqual(format_certificate_date("2025-01-05"), "January 5, 2025")
        self.assertEqual(format_certificate_date(None), "")


class DisplayNameTest(SimpleTestCase):
    def test_group_types_use_studio(self):
        for kind in ("Duet", "Trio", "Group"):
            self.assertEqual(resolve_display_name(kind, ["A", "B"], "Avalon Dance"), "Avalon Dance")
        self.assertEqual(resolve_display_name("Duet", ["A", "B"], "Avalon Dance", uppercase=True), "AVALON DANCE")

    def test_solo_or_unknown_studio_joins_names(self):
        self.assertEqual(resolve_display_name("Solo", ["Thandi Nkosi"], "Avalon Dance"), "Thandi Nkosi")
        self.assertEqual(resolve_display_name("Trio", ["A", "B", "C"], ""), "A, B, C")
