"""
Tests for Document Drafting, Guards and Packaging.

Validates:
- Evidence reference hydration (1-based attachments)
- Citation source priority
- Style, citation and confirmation warnings
- Disclaimer service
- Package layout and placeholders
"""

from __future__ import annotations

import json

from legal_navigator.documents.drafting import DocumentDraftingEngine
from legal_navigator.documents.guards import (
    CitationEnforcer,
    DisclaimerService,
    PathwayOption,
    StyleGuide,
)
from legal_navigator.documents.packager import PACKAGE_LAYOUT, DocumentPackager, slugify
from legal_navigator.matter.schema import (
    DraftSection,
    EvidenceIndex,
    EvidenceItem,
    EvidenceManifest,
    EvidenceReference,
    EvidenceType,
    Provenance,
    SourceEntry,
    SourceManifest,
    SourceService,
)


def _index(entries=None) -> EvidenceIndex:
    return EvidenceIndex(
        items=[
            EvidenceItem(
                filename="lease.pdf", type=EvidenceType.PDF, provenance=Provenance.USER_PROVIDED,
                hash="a" * 64, summary="Signed lease",
            ),
            EvidenceItem(
                filename="notice.txt", type=EvidenceType.TXT, provenance=Provenance.USER_PROVIDED,
                hash="b" * 64, date="2025-02-01", summary="Notice of rent increase",
            ),
        ],
        source_manifest=SourceManifest(entries=entries or []),
    )


class TestStyleGuide:
    def setup_method(self):
        self.guide = StyleGuide()

    def test_advisory_language(self):
        result = self.guide.check("You should file immediately.")
        assert not result.ok
        assert any("Advisory" in w for w in result.warnings)

    def test_emotional_tone(self):
        result = self.guide.check("I am furious about this.")
        assert any("Emotional" in w for w in result.warnings)

    def test_missing_punctuation(self):
        result = self.guide.check("rent was paid on time")
        assert any("punctuation" in w for w in result.warnings)

    def test_clean_text(self):
        assert self.guide.check("The rent was paid on 1 March.").ok

    def test_rules_listed(self):
        assert len(self.guide.rules()) == 5


class TestCitationEnforcer:
    def setup_method(self):
        self.enforcer = CitationEnforcer()

    def test_uncited(self):
        result = self.enforcer.ensure_citations("The landlord owes a rebate.", False)
        assert not result.ok
        assert result.errors

    def test_quoted_without_citation(self):
        result = self.enforcer.ensure_citations('The lease says "no pets".', False)
        assert any("Quoted" in w for w in result.warnings)

    def test_cited(self):
        assert self.enforcer.ensure_citations("The landlord owes a rebate.", True).ok

    def test_verify_retrieval(self):
        assert not self.enforcer.verify_retrieval(None).ok
        assert self.enforcer.verify_retrieval("2025-01-01").ok


class TestDisclaimerService:
    def setup_method(self):
        self.service = DisclaimerService()

    def test_disclaimer_mentions_jurisdiction(self):
        text = self.service.legal_information_disclaimer("Ontario")
        assert text.startswith("This tool provides legal information, not legal advice.")
        assert "primarily for Ontario." in text

    def test_disclaimer_default_jurisdiction(self):
        assert "verify for your province" in self.service.legal_information_disclaimer()

    def test_multi_pathway(self):
        text = self.service.multi_pathway_presentation(
            [
                PathwayOption(label="LTB", steps=["File T6", "Serve landlord"]),
                PathwayOption(label="Negotiate", steps=["Send letter"], caveats=["No deadline stops."]),
            ]
        )
        assert text.startswith("1) LTB: 1. File T6 2. Serve landlord.")
        assert "2) Negotiate: 1. Send letter. Caveats: No deadline stops." in text

    def test_multi_pathway_empty(self):
        assert "No pathways available" in self.service.multi_pathway_presentation([])

    def test_redirect_advice_request(self):
        assert self.service.redirect_advice_request("What should I do now?").redirected
        assert not self.service.redirect_advice_request("When is the hearing?").redirected

    def test_boundaries(self):
        text = self.service.boundaries()
        assert "What We CAN Do:" in text
        assert "What We CANNOT Do:" in text


class TestDocumentDraftingEngine:
    def setup_method(self):
        self.engine = DocumentDraftingEngine()

    def test_hydrates_evidence_reference(self):
        index = _index()
        second = index.items[1]
        draft = self.engine.create_draft(
            title="Notice",
            sections=[
                DraftSection(
                    heading="Facts",
                    content="The notice was received.",
                    evidence_refs=[EvidenceReference(evidence_id=second.id)],
                )
            ],
            evidence_index=index,
        )
        ref = draft.sections[0].evidence_refs[0]
        assert ref.attachment_index == 2
        assert ref.timestamp == "2025-02-01"
        assert ref.description == "Notice of rent increase"

    def test_unmatched_reference(self):
        draft = self.engine.create_draft(
            title="Notice",
            sections=[
                DraftSection(
                    heading="Facts",
                    content="Text.",
                    evidence_refs=[EvidenceReference(evidence_id="item-missing")],
                )
            ],
            evidence_index=_index(),
        )
        ref = draft.sections[0].evidence_refs[0]
        assert ref.attachment_index is None
        assert ref.description == "Unmatched evidence reference"

    def test_citation_source_priority(self):
        index = _index(
            [
                SourceEntry(service=SourceService.JUSTICE_LAWS, url="https://laws-lois.justice.gc.ca",
                            retrieval_date="2025-01-01"),
                SourceEntry(service=SourceService.E_LAWS, url="https://www.ontario.ca/laws",
                            retrieval_date="2025-01-02"),
            ]
        )
        draft = self.engine.create_draft(
            title="Letter",
            sections=[
                DraftSection(
                    heading="Facts",
                    content="The lease was signed.",
                    evidence_refs=[EvidenceReference(evidence_id=index.items[0].id)],
                    confirmed=True,
                )
            ],
            evidence_index=index,
        )
        assert len(draft.citations) == 1
        assert draft.citations[0].source == SourceService.E_LAWS
        assert draft.citations[0].label == "Attachment 1"
        assert draft.citation_warnings == []
        assert draft.missing_confirmations == []

    def test_warnings_collected(self):
        draft = self.engine.create_draft(
            title="Letter",
            sections=[
                DraftSection(heading="Facts", content="You must pay now."),
                DraftSection(heading="Close", content="Thank you.", confirmed=True),
            ],
            evidence_index=_index(),
        )
        assert draft.style_warnings
        assert any("Uncited" in w for w in draft.citation_warnings)
        assert draft.missing_confirmations == [
            'Section "Facts" lacks user confirmation for factual assertions.'
        ]
        assert draft.disclaimer is not None

    def test_personal_information_warning(self):
        draft = self.engine.create_draft(
            title="Letter",
            sections=[
                DraftSection(
                    heading="Contact",
                    content="Email jane@example.com or call 416-555-0199.",
                    confirmed=True,
                )
            ],
            evidence_index=_index(),
        )
        assert (
            "Possible personal information (email, phone); redact before sharing."
            in draft.style_warnings
        )

    def test_dates_alone_not_flagged(self):
        draft = self.engine.create_draft(
            title="Letter",
            sections=[DraftSection(heading="Facts", content="Served on 2025-02-01.", confirmed=True)],
            evidence_index=_index(),
        )
        assert not any("personal information" in w for w in draft.style_warnings)

    def test_options_disable_disclaimer_and_confirmations(self):
        draft = self.engine.create_draft(
            title="Letter",
            sections=[DraftSection(heading="Facts", content="Text.")],
            evidence_index=_index(),
            include_disclaimer=False,
            require_confirmations=False,
        )
        assert draft.disclaimer is None
        assert draft.missing_confirmations == []


class TestDocumentPackager:
    def setup_method(self):
        self.packager = DocumentPackager()
        self.engine = DocumentDraftingEngine()

    def _assemble(self, drafts):
        return self.packager.assemble(
            package_name="test-package",
            forum_map="# Forum Map\n",
            timeline="# Timeline\n",
            missing_evidence="# Missing Evidence Checklist\n",
            drafts=drafts,
            source_manifest=SourceManifest(compiled_at="2025-01-01T00:00:00+00:00"),
            evidence_manifest=EvidenceManifest(),
        )

    def test_core_files_and_placeholders(self):
        draft = self.engine.create_draft(
            title="Notice to Resolve Issue",
            sections=[DraftSection(heading="Facts", content="Text.")],
            evidence_index=_index(),
        )
        package = self._assemble([draft])
        paths = [f.path for f in package.files]
        for required in ("manifests/source_manifest.json", "manifests/evidence_manifest.json",
                         "forum_map.md", "timeline.md", "missing_evidence.md",
                         "drafts/notice-to-resolve-issue.md"):
            assert required in paths
        for layout_file in PACKAGE_LAYOUT["files"]:
            assert layout_file in paths
        assert package.get_file("logs/audit.log").content == "# Placeholder\n"
        assert any("placeholder" in w for w in package.warnings)
        assert package.folders == PACKAGE_LAYOUT["folders"]

    def test_manifest_is_json(self):
        package = self._assemble([])
        manifest = json.loads(package.get_file("manifests/source_manifest.json").content)
        assert manifest["compiled_at"] == "2025-01-01T00:00:00+00:00"

    def test_no_drafts_warning(self):
        package = self._assemble([])
        assert "No draft documents provided." in package.warnings

    def test_rendered_draft(self):
        draft = self.engine.create_draft(
            title="Letter",
            sections=[DraftSection(heading="Facts", content="Text.")],
            evidence_index=_index(),
        )
        body = self._assemble([draft]).get_file("drafts/letter.md").content
        assert body.startswith("# Letter")
        assert "## Facts" in body
        assert "**Confirmation required before sending.**" in body
        assert "> This tool provides legal information" in body
        assert "Warnings:" in body

    def test_slugify(self):
        assert slugify("LTB Form T1 - Tenant Rights Application") == "ltb-form-t1-tenant-rights-application"
        assert slugify("  (DC-PD) Claim!  ") == "dc-pd-claim"
