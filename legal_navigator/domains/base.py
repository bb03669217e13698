"""
Base Domain Module — Shared pipeline for every per-domain document generator.

A domain module only decides WHICH drafts a matter gets. Everything after
that is common and lives here:

    build_drafts → evidence manifest → source manifest → package → warnings

Subclasses set ``domain`` and implement ``build_drafts``. The ``section``
and ``draft`` helpers keep the subclasses down to the guidance text.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from legal_navigator.documents.drafting import DocumentDraftingEngine
from legal_navigator.documents.packager import DocumentPackager
from legal_navigator.matter.schema import (
    Domain,
    DocumentDraft,
    DomainModuleInput,
    DomainModuleOutput,
    DraftSection,
    EvidenceIndex,
    EvidenceManifest,
    EvidenceManifestItem,
    EvidenceReference,
    SourceManifest,
    utcnow,
)

logger = logging.getLogger(__name__)


def section(
    heading: str,
    content: str,
    refs: list[EvidenceReference] | None = None,
    confirmed: bool = False,
) -> DraftSection:
    return DraftSection(
        heading=heading, content=content, evidence_refs=list(refs or []), confirmed=confirmed
    )


class BaseDomainModule(ABC):
    """
    Template for domain modules.

    ``generate`` is the only public entry point and is identical for all
    domains; only ``build_drafts`` varies.
    """

    domain: Domain

    def __init__(
        self,
        drafting: DocumentDraftingEngine | None = None,
        packager: DocumentPackager | None = None,
    ) -> None:
        self.drafting = drafting or DocumentDraftingEngine()
        self.packager = packager or DocumentPackager()

    def generate(self, data: DomainModuleInput) -> DomainModuleOutput:
        drafts = self.build_drafts(data)
        evidence_manifest = data.evidence_manifest or self.build_evidence_manifest(
            data.evidence_index
        )
        source_manifest = self._stamp_source_manifest(data.source_manifest)

        package = self.packager.assemble(
            package_name=data.package_name or f"{self.domain.value}-package",
            forum_map=data.forum_map,
            timeline=data.timeline,
            missing_evidence=data.missing_evidence,
            drafts=drafts,
            source_manifest=source_manifest,
            evidence_manifest=evidence_manifest,
        )
        warnings = [*package.warnings]
        for d in drafts:
            warnings.extend(d.missing_confirmations)

        logger.info(
            "Domain module %s generated %d draft(s), %d warning(s)",
            self.domain.value, len(drafts), len(warnings),
        )
        return DomainModuleOutput(drafts=drafts, package=package, warnings=warnings)

    @abstractmethod
    def build_drafts(self, data: DomainModuleInput) -> list[DocumentDraft]:
        """Return the drafts for this domain, in presentation order."""

    def draft(
        self, data: DomainModuleInput, title: str, sections: list[DraftSection]
    ) -> DocumentDraft:
        return self.drafting.create_draft(
            title=title,
            sections=sections,
            evidence_index=data.evidence_index,
            jurisdiction=data.classification.jurisdiction,
            require_confirmations=True,
        )

    @staticmethod
    def build_evidence_manifest(index: EvidenceIndex) -> EvidenceManifest:
        return EvidenceManifest(
            items=[
                EvidenceManifestItem(
                    id=item.id,
                    filename=item.filename,
                    type=item.type,
                    hash=item.hash,
                    provenance=item.provenance,
                    credibility_score=item.credibility_score,
                    date=item.date,
                )
                for item in index.items
            ]
        )

    @staticmethod
    def _stamp_source_manifest(manifest: SourceManifest) -> SourceManifest:
        if manifest.compiled_at:
            return manifest
        return manifest.model_copy(update={"compiled_at": utcnow().isoformat()})
