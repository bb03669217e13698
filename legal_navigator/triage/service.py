"""
Triage Service — One call from a user's description to a routed matter.

Wires the triage components together in the order a matter moves through
them:

    pillar assessment → matter classification → forum routing
        → plain-language explanation → limitation periods → journey progress

``generate_documents`` continues from a TriageResult: it indexes the
supplied evidence, renders the timeline and missing-evidence checklist,
and runs the domain module registered for the matter's domain.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from legal_navigator.access.controller import SourceAccessController, default_policies
from legal_navigator.authority.registry import AuthorityRegistry
from legal_navigator.authority.seed import build_default_registry as build_authorities
from legal_navigator.config import settings
from legal_navigator.domains.registry import DomainModuleRegistry
from legal_navigator.domains.registry import build_default_registry as build_domain_modules
from legal_navigator.evidence.indexer import EvidenceIndexer
from legal_navigator.evidence.timeline import TimelineGenerator
from legal_navigator.limitation.periods import LimitationPeriod, LimitationPeriodsEngine
from legal_navigator.matter.schema import (
    DomainModuleInput,
    DomainModuleOutput,
    ForumMap,
    PillarClassification,
    Urgency,
)
from legal_navigator.triage.classifier import (
    ClassificationInput,
    ClassificationResult,
    MatterClassifier,
)
from legal_navigator.triage.forum_router import ForumRouter, RoutingInput
from legal_navigator.triage.journey import JourneyContext, JourneyProgress, JourneyTracker
from legal_navigator.triage.pillars import PillarClassifier, PillarExplainer, PillarExplanation

logger = logging.getLogger(__name__)


@dataclass
class TriageResult:
    pillar: PillarClassification
    classification: ClassificationResult
    forum_map: ForumMap
    explanation: PillarExplanation
    journey: JourneyProgress
    limitation_periods: list[LimitationPeriod] = field(default_factory=list)


class TriageService:
    """Runs intake triage against in-memory registries built at start-up."""

    def __init__(
        self,
        authorities: AuthorityRegistry | None = None,
        domain_modules: DomainModuleRegistry | None = None,
        access: SourceAccessController | None = None,
    ) -> None:
        self.authorities = authorities or build_authorities()
        self.domain_modules = domain_modules or build_domain_modules()
        self.access = access or SourceAccessController(default_policies())

        self.pillars = PillarClassifier()
        self.classifier = MatterClassifier(default_jurisdiction=settings.default_jurisdiction)
        self.router = ForumRouter(self.authorities)
        self.explainer = PillarExplainer()
        self.journey = JourneyTracker()
        self.timeline = TimelineGenerator()
        self.limitations = LimitationPeriodsEngine()

    def assess(
        self,
        description: str,
        domain_hint: str | None = None,
        jurisdiction_hint: str | None = None,
        dispute_amount: float | None = None,
        is_appeal: bool = False,
        is_judicial_review: bool = False,
        urgency_hint: Urgency | None = None,
        key_dates: list[str] | None = None,
    ) -> TriageResult:
        """
        Triage a matter from its description and any hints.

        With no domain hint, the description itself is used to resolve
        the domain.

        Raises:
            AuthorityNotFoundError: if the authority registry is missing a
                forum the router selects.
        """
        pillar = self.pillars.assess(description)
        result = self.classifier.classify_with_confidence(
            ClassificationInput(
                domain_hint=domain_hint or description,
                jurisdiction_hint=jurisdiction_hint,
                dispute_amount=dispute_amount,
                urgency_hint=urgency_hint,
                key_dates=key_dates or [],
                description=description,
            )
        )
        classification = result.classification
        forum_map = self.router.route(
            RoutingInput(
                domain=classification.domain,
                jurisdiction=classification.jurisdiction,
                dispute_amount=classification.dispute_amount,
                is_appeal=is_appeal,
                is_judicial_review=is_judicial_review,
            )
        )
        explanation = self.explainer.explain(pillar.pillar, classification.domain.value)
        limitation_periods = self.limitations.get_relevant_periods(
            classification.domain, description
        )
        journey = self.journey.build_progress(
            JourneyContext(classification=classification, forum_map=forum_map)
        )

        logger.info(
            "Triaged matter %s: pillar=%s domain=%s forum=%s confidence=%d",
            classification.id,
            pillar.pillar.value,
            classification.domain.value,
            forum_map.primary_forum.id,
            result.confidence.overall,
        )
        return TriageResult(
            pillar=pillar,
            classification=result,
            forum_map=forum_map,
            explanation=explanation,
            journey=journey,
            limitation_periods=limitation_periods,
        )

    def generate_documents(
        self,
        triage: TriageResult,
        indexer: EvidenceIndexer,
        package_name: str | None = None,
    ) -> DomainModuleOutput | None:
        """
        Run the domain module for the triaged matter.

        Returns None when no module is registered for the matter's domain.
        """
        classification = triage.classification.classification
        module = self.domain_modules.get(classification.domain)
        if module is None:
            logger.warning("No domain module registered for %s", classification.domain.value)
            return None

        index = indexer.generate_index()
        entries = self.timeline.generate(index)
        gaps = self.timeline.detect_gaps(entries)
        alerts = self.timeline.flag_missing_evidence(index, entries)

        source_manifest = index.source_manifest.model_copy(
            update={"access_log": self.access.access_log_records()}
        )
        return module.generate(
            DomainModuleInput(
                classification=classification,
                forum_map=triage.forum_map.to_markdown(),
                timeline=self.timeline.render_markdown(entries, gaps),
                missing_evidence=self.timeline.render_missing_evidence(alerts),
                evidence_index=index,
                source_manifest=source_manifest,
                package_name=package_name,
            )
        )

    def progress(
        self, triage: TriageResult, evidence_count: int = 0, documents_generated: bool = False
    ) -> JourneyProgress:
        return self.journey.build_progress(
            JourneyContext(
                classification=triage.classification.classification,
                forum_map=triage.forum_map,
                evidence_count=evidence_count,
                documents_generated=documents_generated,
            )
        )
