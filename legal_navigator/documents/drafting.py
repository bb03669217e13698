"""
Document Drafting — Turn raw sections into a checked DocumentDraft.

Evidence references are hydrated against the evidence index: a matched
reference gets a 1-based attachment number plus the item's date and
summary where the caller gave none; an unmatched reference is kept and
labelled as such. Citations are built from the index's source manifest,
taking the first CanLII entry, else e-Laws, else Justice Laws. Drafts that
appear to carry personal identifiers get a redaction warning.
"""

from __future__ import annotations

import logging

from legal_navigator.documents.guards import CitationEnforcer, DisclaimerService, StyleGuide
from legal_navigator.evidence.redaction import redact_pii
from legal_navigator.matter.schema import (
    Citation,
    DocumentDraft,
    DraftSection,
    EvidenceIndex,
    EvidenceReference,
    SourceEntry,
    SourceService,
)

logger = logging.getLogger(__name__)

SOURCE_PRIORITY = [SourceService.CANLII, SourceService.E_LAWS, SourceService.JUSTICE_LAWS]

# Dates are expected in drafts, so only these identifiers raise a warning.
DRAFT_PII_TYPES = {"email", "phone", "sin", "account"}


class DocumentDraftingEngine:
    def __init__(
        self,
        style_guide: StyleGuide | None = None,
        disclaimer_service: DisclaimerService | None = None,
        citation_enforcer: CitationEnforcer | None = None,
    ) -> None:
        self.style_guide = style_guide or StyleGuide()
        self.disclaimer_service = disclaimer_service or DisclaimerService()
        self.citation_enforcer = citation_enforcer or CitationEnforcer()

    def create_draft(
        self,
        title: str,
        sections: list[DraftSection],
        evidence_index: EvidenceIndex,
        jurisdiction: str | None = None,
        include_disclaimer: bool = True,
        require_confirmations: bool = True,
    ) -> DocumentDraft:
        hydrated = [
            section.model_copy(
                update={
                    "evidence_refs": [
                        self._hydrate_reference(ref, evidence_index)
                        for ref in section.evidence_refs
                    ]
                }
            )
            for section in sections
        ]
        citations = self._build_citations(hydrated, evidence_index)
        text = " ".join(s.content for s in hydrated)

        citation_check = self.citation_enforcer.ensure_citations(text, bool(citations))
        citation_warnings = [*citation_check.errors, *citation_check.warnings]
        for citation in citations:
            retrieval = self.citation_enforcer.verify_retrieval(citation.retrieval_date)
            citation_warnings.extend(f"{citation.label}: {e}" for e in retrieval.errors)

        missing = []
        if require_confirmations:
            missing = [
                f'Section "{s.heading}" lacks user confirmation for factual assertions.'
                for s in hydrated
                if not s.confirmed
            ]

        draft = DocumentDraft(
            title=title,
            sections=hydrated,
            disclaimer=(
                self.disclaimer_service.legal_information_disclaimer(jurisdiction)
                if include_disclaimer
                else None
            ),
            citations=citations,
            style_warnings=self._style_warnings(text),
            citation_warnings=citation_warnings,
            missing_confirmations=missing,
        )
        logger.debug("Drafted %r with %d warning(s)", title, len(draft.warnings))
        return draft

    def _style_warnings(self, text: str) -> list[str]:
        warnings = self.style_guide.check(text).warnings
        pii = redact_pii(text).types() & DRAFT_PII_TYPES
        if pii:
            warnings.append(
                f"Possible personal information ({', '.join(sorted(pii))}); redact before sharing."
            )
        return warnings

    @staticmethod
    def _hydrate_reference(ref: EvidenceReference, index: EvidenceIndex) -> EvidenceReference:
        position = next((i for i, item in enumerate(index.items) if item.id == ref.evidence_id), None)
        if position is None:
            return ref.model_copy(
                update={"description": ref.description or "Unmatched evidence reference"}
            )
        item = index.items[position]
        return ref.model_copy(
            update={
                "attachment_index": position + 1,
                "timestamp": ref.timestamp or item.date,
                "description": ref.description or item.summary,
            }
        )

    def _build_citations(
        self, sections: list[DraftSection], index: EvidenceIndex
    ) -> list[Citation]:
        source = self._pick_source(index.source_manifest.entries)
        if source is None:
            return []
        return [
            Citation(
                label=f"Attachment {ref.attachment_index or ref.evidence_id}",
                url=source.url,
                retrieval_date=source.retrieval_date,
                source=source.service,
                evidence_id=ref.evidence_id,
            )
            for section in sections
            for ref in section.evidence_refs
        ]

    @staticmethod
    def _pick_source(entries: list[SourceEntry]) -> SourceEntry | None:
        for service in SOURCE_PRIORITY:
            for entry in entries:
                if entry.service == service:
                    return entry
        return None
