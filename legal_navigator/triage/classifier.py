"""
Matter Classification — Resolve intake hints into a MatterClassification.

Domain resolution walks a fixed, ordered rule table and takes the first
domain whose keywords appear in the hint. Jurisdiction resolution defaults
to Ontario. Nothing here validates beyond presence checks: malformed or
missing hints fall through to defaults and classification never raises.

``classify_with_confidence`` runs the same rule table without stopping at
the first hit, so overlapping domains can be surfaced to the caller as
alternatives and uncertainty factors.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from pydantic import BaseModel, Field

from legal_navigator.matter.schema import (
    FEDERAL,
    ONTARIO,
    Domain,
    MatterClassification,
    MatterStatus,
    MatterTimeline,
    Parties,
    PartyType,
    Urgency,
)

logger = logging.getLogger(__name__)


class ClassificationInput(BaseModel):
    """Intake hints collected from the user."""

    domain_hint: str | None = None
    jurisdiction_hint: str | None = None
    claimant_type: str = PartyType.INDIVIDUAL.value
    respondent_type: str = PartyType.BUSINESS.value
    dispute_amount: float | None = None
    urgency_hint: Urgency | None = None
    key_dates: list[str] = Field(default_factory=list)
    description: str | None = None


# (domain, weight, keywords); order is the resolution priority. Keywords
# match at the start of a word, so "rent" hits "rental" but not "parents".
DOMAIN_RULES: list[tuple[Domain, int, list[str]]] = [
    (
        Domain.CRIMINAL,
        90,
        ["criminal", "assault", "threat", "uttering", "violence", "arrested",
         "charged", "police", "crown"],
    ),
    (
        Domain.TREE_DAMAGE,
        80,
        ["tree", "branch", "arborist"],
    ),
    (
        Domain.CIVIL_NEGLIGENCE,
        75,
        ["negligence", "tort", "damage", "injury", "slip", "fall"],
    ),
    (
        Domain.LANDLORD_TENANT,
        85,
        ["tenant", "ltb", "landlord", "eviction", "rent"],
    ),
    (
        Domain.HUMAN_RIGHTS,
        85,
        ["human rights", "humanrights", "hrto", "discrimination", "harassment"],
    ),
    (
        Domain.EMPLOYMENT,
        80,
        ["employment", "employer", "work", "termination", "severance", "dismissal",
         "fired"],
    ),
    (
        Domain.INSURANCE,
        80,
        ["insurance", "insurer", "adjuster", "policy", "deductible"],
    ),
    (
        Domain.OCPP_FILING,
        80,
        ["ocpp", "consolidat", "interlocutory", "motion record"],
    ),
]

_KEYWORD_RE: dict[str, re.Pattern[str]] = {
    keyword: re.compile(rf"\b{re.escape(keyword)}")
    for _, _, keywords in DOMAIN_RULES
    for keyword in keywords
}


def _keyword_hits(text: str, keywords: list[str]) -> list[str]:
    return [k for k in keywords if _KEYWORD_RE[k].search(text)]


@dataclass
class DomainAlternative:
    domain: Domain
    confidence: int
    reasoning: str


@dataclass
class ConfidenceScore:
    """Confidence breakdown (0-100) for a classification."""

    overall: int
    domain_confidence: int
    jurisdiction_confidence: int
    urgency_confidence: int
    keyword_matches: int
    explicit_hints: bool
    multiple_indicators: bool
    conflicting_signals: bool


@dataclass
class UncertaintyFactor:
    type: str  # ambiguous-domain | insufficient-information | overlapping-domains | jurisdiction-unclear
    description: str
    severity: str  # low | medium | high
    recommendation: str


@dataclass
class ClassificationResult:
    classification: MatterClassification
    confidence: ConfidenceScore
    uncertainties: list[UncertaintyFactor] = field(default_factory=list)
    alternative_domains: list[DomainAlternative] = field(default_factory=list)


@dataclass
class _DomainMatch:
    domain: Domain
    weight: int
    keywords: list[str]

    @property
    def score(self) -> int:
        return min(100, self.weight + len(self.keywords) * 5)


class MatterClassifier:
    """Rule-based matter classifier."""

    def __init__(self, default_jurisdiction: str = ONTARIO) -> None:
        self.default_jurisdiction = default_jurisdiction

    def classify(self, data: ClassificationInput) -> MatterClassification:
        key_dates = list(data.key_dates)
        return MatterClassification(
            domain=self.resolve_domain(data.domain_hint),
            jurisdiction=self.resolve_jurisdiction(data.jurisdiction_hint),
            parties=Parties(
                claimant_type=data.claimant_type or PartyType.INDIVIDUAL.value,
                respondent_type=data.respondent_type or PartyType.BUSINESS.value,
            ),
            timeline=MatterTimeline(
                key_dates=key_dates,
                start=key_dates[0] if key_dates else None,
                end=key_dates[-1] if key_dates else None,
            ),
            urgency=data.urgency_hint or Urgency.MEDIUM,
            dispute_amount=data.dispute_amount,
            status=MatterStatus.CLASSIFIED,
            description=data.description,
        )

    def resolve_domain(self, hint: str | None) -> Domain:
        if not hint:
            return Domain.OTHER
        h = hint.strip().lower()
        for domain in Domain:
            if h == domain.value.lower():
                return domain
        for domain, _, keywords in DOMAIN_RULES:
            if _keyword_hits(h, keywords):
                return domain
        return Domain.OTHER

    def resolve_jurisdiction(self, hint: str | None) -> str:
        if not hint or not hint.strip():
            return self.default_jurisdiction
        h = hint.lower()
        if "federal" in h or "canada" in h:
            return FEDERAL
        if "ontario" in h or re.search(r"\bon\b", h):
            return ONTARIO
        return hint.strip()

    # ── Confidence scoring ────────────────────────────────────

    def classify_with_confidence(self, data: ClassificationInput) -> ClassificationResult:
        classification = self.classify(data)
        matches = self._domain_matches(data.domain_hint)

        # the resolved domain is primary even when another rule scores higher
        primary = next((m for m in matches if m.domain == classification.domain), None)
        if primary is None and matches:
            primary = matches[0]
        if primary is not None:
            matches = [primary] + [m for m in matches if m is not primary]
        domain_conf = primary.score if primary else 30
        jurisdiction_conf = self._jurisdiction_confidence(data.jurisdiction_hint)
        urgency_conf = 100 if data.urgency_hint else 40

        alternatives = [
            DomainAlternative(
                domain=m.domain,
                confidence=m.score,
                reasoning=f"Matched {len(m.keywords)} keyword(s): {', '.join(m.keywords)}",
            )
            for m in matches[1:3]
        ]

        confidence = ConfidenceScore(
            overall=round(domain_conf * 0.5 + jurisdiction_conf * 0.3 + urgency_conf * 0.2),
            domain_confidence=domain_conf,
            jurisdiction_confidence=jurisdiction_conf,
            urgency_confidence=urgency_conf,
            keyword_matches=len(primary.keywords) if primary else 0,
            explicit_hints=bool(data.domain_hint or data.jurisdiction_hint or data.urgency_hint),
            multiple_indicators=bool(primary and len(primary.keywords) >= 2),
            conflicting_signals=len(alternatives) > 1,
        )

        uncertainties = self._uncertainties(data, domain_conf, jurisdiction_conf, alternatives)
        if uncertainties:
            logger.debug(
                "Classification %s carries %d uncertainty factor(s)",
                classification.id,
                len(uncertainties),
            )
        return ClassificationResult(
            classification=classification,
            confidence=confidence,
            uncertainties=uncertainties,
            alternative_domains=alternatives,
        )

    def _domain_matches(self, hint: str | None) -> list[_DomainMatch]:
        if not hint:
            return []
        h = hint.lower()
        matches = []
        for domain, weight, keywords in DOMAIN_RULES:
            found = _keyword_hits(h, keywords)
            if found:
                matches.append(_DomainMatch(domain, weight, found))
        # stable sort keeps rule order between equal scores
        matches.sort(key=lambda m: m.score, reverse=True)
        return matches

    @staticmethod
    def _jurisdiction_confidence(hint: str | None) -> int:
        if not hint:
            return 50
        h = hint.lower()
        if "ontario" in h or re.search(r"\bon\b", h):
            return 95
        if "federal" in h or "canada" in h:
            return 90
        return 70

    @staticmethod
    def _uncertainties(
        data: ClassificationInput,
        domain_conf: int,
        jurisdiction_conf: int,
        alternatives: list[DomainAlternative],
    ) -> list[UncertaintyFactor]:
        factors: list[UncertaintyFactor] = []
        if alternatives:
            factors.append(
                UncertaintyFactor(
                    type="overlapping-domains",
                    description="Multiple domains detected: "
                    + ", ".join(a.domain.value for a in alternatives),
                    severity="high" if len(alternatives) >= 2 else "medium",
                    recommendation="Review alternative domain classifications and ask clarifying questions",
                )
            )
        if not data.domain_hint:
            factors.append(
                UncertaintyFactor(
                    type="insufficient-information",
                    description="No domain hint provided; classification based on defaults",
                    severity="high",
                    recommendation="Collect more details about the legal issue to improve classification accuracy",
                )
            )
        if domain_conf < 50:
            factors.append(
                UncertaintyFactor(
                    type="ambiguous-domain",
                    description=f"Low confidence ({domain_conf}%) in domain classification",
                    severity="high",
                    recommendation="Request additional details or keywords to clarify the legal domain",
                )
            )
        if jurisdiction_conf < 70:
            factors.append(
                UncertaintyFactor(
                    type="jurisdiction-unclear",
                    description="Jurisdiction not clearly specified",
                    severity="medium",
                    recommendation="Confirm the jurisdiction (Ontario, Federal, etc.) with the user",
                )
            )
        return factors
