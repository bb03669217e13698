"""
Tests for Limitation Periods.

Validates:
- Periods selected per domain and description
- Municipal notice detection
- Urgency bands, messages and actions
- Alerts computed from a trigger date
"""

from __future__ import annotations

from datetime import date

from legal_navigator.limitation.periods import (
    ONTARIO_PERIODS,
    LimitationPeriodsEngine,
    PeriodCategory,
    UrgencyLevel,
)
from legal_navigator.matter.schema import Domain


class TestRelevantPeriods:
    def setup_method(self):
        self.engine = LimitationPeriodsEngine()

    def _ids(self, domain, description=""):
        return [p.id for p in self.engine.get_relevant_periods(domain, description)]

    def test_criminal_has_none(self):
        assert self._ids(Domain.CRIMINAL, "I was assaulted on the sidewalk") == []

    def test_general_period_always_first(self):
        assert self._ids(Domain.OTHER) == ["ontario-general-2-year"]

    def test_employment(self):
        assert self._ids(Domain.EMPLOYMENT, "I was fired") == [
            "ontario-general-2-year",
            "ontario-esa-complaint",
            "ontario-wrongful-dismissal",
        ]

    def test_landlord_and_human_rights(self):
        assert "ontario-ltb-application" in self._ids(Domain.LANDLORD_TENANT)
        assert "ontario-human-rights-hrto" in self._ids(Domain.HUMAN_RIGHTS)

    def test_municipal_tree_adds_ten_day_notice(self):
        ids = self._ids(Domain.TREE_DAMAGE, "A city tree fell on my car")
        assert ids == [
            "ontario-general-2-year",
            "ontario-municipal-10-day",
            "ontario-property-damage",
        ]

    def test_civil_negligence_includes_personal_injury(self):
        ids = self._ids(Domain.CIVIL_NEGLIGENCE, "I slipped in a store")
        assert "ontario-personal-injury-general" in ids

    def test_injury_in_description(self):
        ids = self._ids(Domain.EMPLOYMENT, "I was injured at work")
        assert ids[-1] == "ontario-personal-injury-general"


class TestMunicipalNotice:
    def setup_method(self):
        self.engine = LimitationPeriodsEngine()

    def test_keywords_at_word_start(self):
        assert self.engine.detect_municipal_notice("Fell on the sidewalk")
        assert self.engine.detect_municipal_notice("Hit a pothole on the road")
        assert not self.engine.detect_municipal_notice("I got a notice from my employer")

    def test_tags(self):
        assert self.engine.detect_municipal_notice("Something happened", tags=["Snow"])
        assert not self.engine.detect_municipal_notice("Something happened", tags=["work"])


class TestAlerts:
    def setup_method(self):
        self.engine = LimitationPeriodsEngine()

    def test_urgency_bands(self):
        assert self.engine.determine_urgency(-3) == UrgencyLevel.CRITICAL
        assert self.engine.determine_urgency(10) == UrgencyLevel.CRITICAL
        assert self.engine.determine_urgency(11) == UrgencyLevel.WARNING
        assert self.engine.determine_urgency(30) == UrgencyLevel.WARNING
        assert self.engine.determine_urgency(90) == UrgencyLevel.CAUTION
        assert self.engine.determine_urgency(91) == UrgencyLevel.INFO

    def test_unknown_period(self):
        assert self.engine.calculate_alert("nope", 5) is None
        assert self.engine.alert_from_trigger("nope", date(2025, 1, 1)) is None

    def test_critical_municipal_action(self):
        alert = self.engine.calculate_alert("ontario-municipal-10-day", 1)
        assert alert.urgency == UrgencyLevel.CRITICAL
        assert alert.message.startswith("Only 1 day remain")
        assert "municipal clerk" in alert.action_required
        assert alert.encouragement

    def test_overdue_message(self):
        alert = self.engine.calculate_alert("ontario-general-2-year", -1)
        assert "may have passed" in alert.message
        assert alert.message.startswith("The 2 years deadline")

    def test_alert_from_trigger(self):
        alert = self.engine.alert_from_trigger(
            "ontario-human-rights-hrto", date(2025, 1, 1), today=date(2025, 11, 1)
        )
        assert alert.days_remaining == 365 - 304
        assert alert.urgency == UrgencyLevel.CAUTION


class TestPeriodLookup:
    def setup_method(self):
        self.engine = LimitationPeriodsEngine()

    def test_all_periods(self):
        assert len(self.engine.get_periods()) == len(ONTARIO_PERIODS)

    def test_by_category(self):
        municipal = self.engine.get_periods(PeriodCategory.MUNICIPAL)
        assert municipal
        assert all(p.category == PeriodCategory.MUNICIPAL for p in municipal)

    def test_get_period(self):
        assert self.engine.get_period("ontario-ultimate-15-year").period_days == 5475
        assert self.engine.get_period("missing") is None
