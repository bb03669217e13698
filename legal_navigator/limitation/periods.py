"""
Limitation Periods — Ontario filing deadlines and how close a matter is to them.

Periods come from the Limitations Act, 2002 (S.O. 2002, c. 24, Sched. B)
and the statutes that shorten it for particular forums. Each matter gets
the general two-year period plus whatever its domain and description add.
Criminal matters get none: their timelines are set by the Crown and the
court, not by a civil limitation period.

Urgency bands by days remaining:
    overdue or ≤ 10  → critical
    ≤ 30             → warning
    ≤ 90             → caution
    otherwise        → info
"""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass
from datetime import date

from legal_navigator.matter.schema import Domain

logger = logging.getLogger(__name__)


class UrgencyLevel(str, enum.Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    CAUTION = "caution"
    INFO = "info"


class PeriodCategory(str, enum.Enum):
    GENERAL = "general"
    MUNICIPAL = "municipal"
    EMPLOYMENT = "employment"
    PROPERTY = "property"
    PERSONAL_INJURY = "personal-injury"
    CONTRACT = "contract"
    STATUTORY = "statutory"


@dataclass(frozen=True)
class LimitationPeriod:
    id: str
    name: str
    description: str
    period: str
    period_days: int
    category: PeriodCategory
    triggers: tuple[str, ...]
    consequence: str
    exceptions: tuple[str, ...] = ()
    jurisdiction: str = "ontario"
    learn_more_url: str | None = None


@dataclass
class DeadlineAlert:
    urgency: UrgencyLevel
    days_remaining: int
    limitation_period: LimitationPeriod
    message: str
    action_required: str
    encouragement: str = ""


# ════════════════════════════════════════════════════════════════
# Ontario periods
# ════════════════════════════════════════════════════════════════

LIMITATIONS_ACT_URL = "https://www.ontario.ca/laws/statute/02l24"
MUNICIPAL_ACT_URL = "https://www.ontario.ca/laws/statute/01m25"

ONTARIO_PERIODS: list[LimitationPeriod] = [
    LimitationPeriod(
        id="ontario-general-2-year",
        name="General Limitation Period",
        description="Default limitation period for most civil claims in Ontario",
        period="2 years",
        period_days=730,
        category=PeriodCategory.GENERAL,
        triggers=(
            "When you discovered the claim (or ought to have discovered it)",
            "When you knew or ought to have known that harm occurred, that an act or "
            "omission caused it, and that a proceeding would be appropriate",
        ),
        consequence="After 2 years a lawsuit cannot be started; the court will dismiss "
        'the claim as "statute-barred."',
        learn_more_url=LIMITATIONS_ACT_URL,
    ),
    LimitationPeriod(
        id="ontario-municipal-10-day",
        name="Municipal Notice of Claim (Property Damage)",
        description="Written notice required before suing a municipality for property "
        "damage (e.g., tree damage, road defects)",
        period="10 days",
        period_days=10,
        category=PeriodCategory.MUNICIPAL,
        triggers=(
            "Within 10 days after the damage occurred",
            "Notice is in writing and describes the location, date and nature of the damage",
        ),
        exceptions=(
            "A court may extend the deadline where there is a reasonable excuse for the delay",
            "Personal injury claims have their own notice periods under the Municipal Act, 2001",
        ),
        consequence="Missing the 10-day notice may prevent a claim against the municipality "
        "unless a reasonable excuse is shown.",
        learn_more_url=MUNICIPAL_ACT_URL,
    ),
    LimitationPeriod(
        id="ontario-municipal-personal-injury",
        name="Municipal Notice of Claim (Personal Injury)",
        description="Written notice required before suing a municipality for personal injury",
        period="10 days",
        period_days=10,
        category=PeriodCategory.MUNICIPAL,
        triggers=(
            "Within 10 days after the injury occurred",
            "Notice is in writing and describes when, where and how the injury happened",
        ),
        exceptions=("A court may excuse late notice where there is a reasonable excuse",),
        consequence="Late notice may bar the claim against the municipality unless a "
        "reasonable excuse is shown.",
        learn_more_url=MUNICIPAL_ACT_URL,
    ),
    LimitationPeriod(
        id="ontario-esa-complaint",
        name="Employment Standards Complaint",
        description="Time limit to file an Employment Standards Act complaint with the "
        "Ministry of Labour",
        period="2 years",
        period_days=730,
        category=PeriodCategory.EMPLOYMENT,
        triggers=("Within 2 years of when the wages became due or the violation occurred",),
        consequence="After 2 years the Ministry cannot investigate or order payment.",
        learn_more_url=(
            "https://www.ontario.ca/document/your-guide-employment-standards-act-0/filing-claim"
        ),
    ),
    LimitationPeriod(
        id="ontario-wrongful-dismissal",
        name="Wrongful Dismissal Claim",
        description="Time limit to sue for wrongful dismissal at common law",
        period="2 years",
        period_days=730,
        category=PeriodCategory.EMPLOYMENT,
        triggers=("From the date of termination or constructive dismissal",),
        consequence="After 2 years a wrongful dismissal claim cannot be started.",
    ),
    LimitationPeriod(
        id="ontario-ltb-application",
        name="Landlord and Tenant Board Application",
        description="LTB application deadlines vary by application type",
        period="Varies (1 year typical)",
        period_days=365,
        category=PeriodCategory.PROPERTY,
        triggers=(
            "Tenant: usually 1 year from when the issue arose (e.g., maintenance, rent rebate)",
            "Landlord: varies by application type (eviction, arrears, damage)",
        ),
        exceptions=(
            "Some applications have shorter deadlines (e.g., rent increase disputes)",
            "Each LTB form states its own timeline",
        ),
        consequence="Late applications may be dismissed by the LTB.",
        learn_more_url="https://tribunalsontario.ca/ltb/",
    ),
    LimitationPeriod(
        id="ontario-personal-injury-general",
        name="Personal Injury Claim",
        description="Limitation period for personal injury claims (e.g., car accidents, "
        "slip and fall)",
        period="2 years",
        period_days=730,
        category=PeriodCategory.PERSONAL_INJURY,
        triggers=(
            "From when the injury and its cause were discovered",
            "Includes injuries from negligence, assault and occupiers' liability",
        ),
        exceptions=(
            "Minors: the clock usually starts at age 18",
            "Incapacity: the clock may be suspended while capacity is lacking",
        ),
        consequence="After 2 years a claim for the injury cannot be started.",
    ),
    LimitationPeriod(
        id="ontario-breach-of-contract",
        name="Breach of Contract",
        description="Time limit to sue for breach of a written or oral contract",
        period="2 years",
        period_days=730,
        category=PeriodCategory.CONTRACT,
        triggers=("From when the breach occurred or was discovered",),
        consequence="After 2 years a breach of contract claim cannot be started.",
    ),
    LimitationPeriod(
        id="ontario-property-damage",
        name="Property Damage Claim",
        description="Time limit to sue for damage to property",
        period="2 years",
        period_days=730,
        category=PeriodCategory.PROPERTY,
        triggers=("From when the damage occurred or was discovered",),
        consequence="After 2 years a property damage claim cannot be started.",
    ),
    LimitationPeriod(
        id="ontario-human-rights-hrto",
        name="Human Rights Tribunal Application",
        description="Time limit to file a discrimination application at the HRTO",
        period="1 year",
        period_days=365,
        category=PeriodCategory.STATUTORY,
        triggers=("Within 1 year of the last incident of discrimination",),
        exceptions=("The HRTO may extend the deadline where the delay was incurred in good faith",),
        consequence="After 1 year the HRTO may refuse to hear the application.",
        learn_more_url="https://tribunalsontario.ca/hrto/",
    ),
    LimitationPeriod(
        id="ontario-ultimate-15-year",
        name="Ultimate Limitation Period",
        description="Absolute deadline regardless of discovery (limited exceptions)",
        period="15 years",
        period_days=5475,
        category=PeriodCategory.GENERAL,
        triggers=("From the date the act or omission occurred, not when it was discovered",),
        exceptions=(
            "Does not apply to certain sexual assault claims",
            "Does not apply to certain claims against estate trustees",
        ),
        consequence="After 15 years no claim can be brought, even for harm discovered recently.",
        learn_more_url=f"{LIMITATIONS_ACT_URL}#BK4",
    ),
]

MUNICIPAL_KEYWORDS = [
    "municipal", "municipality", "city", "town", "township", "region", "county",
    "road", "sidewalk", "pothole", "snow", "ice", "tree", "branch", "park",
]
_MUNICIPAL_RE = re.compile(r"\b(?:" + "|".join(MUNICIPAL_KEYWORDS) + r")")
_INJURY_RE = re.compile(r"\binjur")

_DOMAIN_PERIODS: dict[Domain, list[str]] = {
    Domain.EMPLOYMENT: ["ontario-esa-complaint", "ontario-wrongful-dismissal"],
    Domain.LANDLORD_TENANT: ["ontario-ltb-application"],
    Domain.HUMAN_RIGHTS: ["ontario-human-rights-hrto"],
    Domain.TREE_DAMAGE: ["ontario-property-damage"],
}


ENCOURAGEMENT: dict[UrgencyLevel, str] = {
    UrgencyLevel.CRITICAL: "Many people file successfully close to the deadline. "
    "Taking the next step now is what counts.",
    UrgencyLevel.WARNING: "Looking into this now puts you in a good position. "
    "Staying organized will get you there in time.",
    UrgencyLevel.CAUTION: "Checking early leaves time to build a strong record.",
    UrgencyLevel.INFO: "There is time to do this carefully, one step at a time.",
}


class LimitationPeriodsEngine:
    """Lookup and deadline alerts over the Ontario limitation periods."""

    def __init__(self, periods: list[LimitationPeriod] | None = None) -> None:
        self._periods: dict[str, LimitationPeriod] = {
            p.id: p for p in (ONTARIO_PERIODS if periods is None else periods)
        }

    def get_periods(self, category: PeriodCategory | None = None) -> list[LimitationPeriod]:
        periods = list(self._periods.values())
        if category is None:
            return periods
        return [p for p in periods if p.category == category]

    def get_period(self, period_id: str) -> LimitationPeriod | None:
        return self._periods.get(period_id)

    def detect_municipal_notice(self, description: str, tags: list[str] | None = None) -> bool:
        """True when the matter mentions something a municipality typically owns."""
        if _MUNICIPAL_RE.search(description.lower()):
            return True
        return any(t.lower() in MUNICIPAL_KEYWORDS for t in tags or [])

    def get_relevant_periods(
        self, domain: Domain, description: str = "", tags: list[str] | None = None
    ) -> list[LimitationPeriod]:
        if domain == Domain.CRIMINAL:
            return []

        ids = ["ontario-general-2-year"]
        if self.detect_municipal_notice(description, tags):
            ids.append("ontario-municipal-10-day")
        ids.extend(_DOMAIN_PERIODS.get(domain, []))
        if domain == Domain.CIVIL_NEGLIGENCE or _INJURY_RE.search(description.lower()):
            ids.append("ontario-personal-injury-general")
        logger.debug("Limitation periods for %s: %s", domain.value, ", ".join(ids))

        return [self._periods[pid] for pid in ids if pid in self._periods]

    def calculate_alert(self, period_id: str, days_remaining: int) -> DeadlineAlert | None:
        """Alert for a period given the days left; None for an unknown period."""
        period = self._periods.get(period_id)
        if period is None:
            return None
        urgency = self.determine_urgency(days_remaining)
        return DeadlineAlert(
            urgency=urgency,
            days_remaining=days_remaining,
            limitation_period=period,
            message=self._message(days_remaining, period, urgency),
            action_required=self._action_required(period, urgency),
            encouragement=ENCOURAGEMENT[urgency],
        )

    def alert_from_trigger(
        self, period_id: str, trigger_date: date, today: date | None = None
    ) -> DeadlineAlert | None:
        """Alert for a period whose clock started on ``trigger_date``."""
        period = self._periods.get(period_id)
        if period is None:
            return None
        elapsed = ((today or date.today()) - trigger_date).days
        return self.calculate_alert(period_id, period.period_days - elapsed)

    @staticmethod
    def determine_urgency(days_remaining: int) -> UrgencyLevel:
        if days_remaining <= 10:
            return UrgencyLevel.CRITICAL
        if days_remaining <= 30:
            return UrgencyLevel.WARNING
        if days_remaining <= 90:
            return UrgencyLevel.CAUTION
        return UrgencyLevel.INFO

    @staticmethod
    def _message(days_remaining: int, period: LimitationPeriod, urgency: UrgencyLevel) -> str:
        deadline = f'the {period.period} deadline for "{period.name}"'
        if days_remaining < 0:
            return (
                f"{deadline[0].upper()}{deadline[1:]} may have passed. A lawyer or legal "
                "clinic can say whether any exception applies."
            )
        if urgency == UrgencyLevel.CRITICAL:
            plural = "" if days_remaining == 1 else "s"
            return f"Only {days_remaining} day{plural} remain before {deadline}. Action is urgent."
        if urgency == UrgencyLevel.WARNING:
            return f"{days_remaining} days remain before {deadline}. The time to act is soon."
        if urgency == UrgencyLevel.CAUTION:
            return f"{days_remaining} days remain before {deadline}. Preparation can start now."
        return f"{days_remaining} days remain before {deadline}. There is time, but not to waste."

    @staticmethod
    def _action_required(period: LimitationPeriod, urgency: UrgencyLevel) -> str:
        if urgency == UrgencyLevel.CRITICAL:
            if period.category == PeriodCategory.MUNICIPAL:
                return (
                    "Send written notice to the municipal clerk now, including the date, "
                    "location, what happened and contact information."
                )
            return "File the claim or application now; legal help can confirm it is done correctly."
        if urgency == UrgencyLevel.WARNING:
            return "Gather evidence, complete the forms and prepare to file soon."
        if urgency == UrgencyLevel.CAUTION:
            return "Start gathering evidence, identify witnesses and review the claim process."
        return "Keep track of dates and evidence and review the limitation period that applies."
