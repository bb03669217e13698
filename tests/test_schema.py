"""
Tests for the Matter Schema — verifies the shared Pydantic models.

Validates:
- Enum vocabularies
- Model defaults and computed fields
- Evidence item immutability and credibility clamping
- Forum map rendering and package lookup
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from legal_navigator.matter.schema import (
    Authority,
    AuthorityRef,
    AuthorityType,
    Domain,
    DocumentDraft,
    DocumentPackage,
    DomainModuleInput,
    EvidenceIndex,
    EvidenceItem,
    EvidenceManifest,
    EvidenceType,
    ForumMap,
    MatterClassification,
    MatterStatus,
    PackagedFile,
    Pillar,
    PillarClassification,
    Provenance,
    SourceManifest,
    Urgency,
)


def _item(**overrides) -> EvidenceItem:
    data = dict(
        filename="notice.txt",
        type=EvidenceType.TXT,
        provenance=Provenance.USER_PROVIDED,
        hash="abc123",
    )
    data.update(overrides)
    return EvidenceItem(**data)


class TestEnums:
    """Verify closed vocabularies carry their wire values."""

    def test_pillar_values(self):
        assert Pillar.QUASI_CRIMINAL.value == "Quasi-Criminal"
        assert {p.value for p in Pillar} == {
            "Criminal", "Civil", "Administrative", "Quasi-Criminal", "Unknown",
        }

    def test_domain_values(self):
        values = [d.value for d in Domain]
        assert "landlordTenant" in values
        assert "tree-damage" in values
        assert "other" in values

    def test_evidence_types(self):
        assert {t.value for t in EvidenceType} == {"PDF", "PNG", "JPG", "EML", "MSG", "TXT"}


class TestMatterClassification:
    def test_defaults(self):
        mc = MatterClassification(domain=Domain.INSURANCE)
        assert mc.jurisdiction == "Ontario"
        assert mc.urgency == Urgency.MEDIUM
        assert mc.status == MatterStatus.UNCLASSIFIED
        assert mc.id.startswith("mc-")

    def test_ids_are_unique(self):
        a = MatterClassification(domain=Domain.OTHER)
        b = MatterClassification(domain=Domain.OTHER)
        assert a.id != b.id


class TestPillarClassification:
    def test_single_pillar_not_ambiguous(self):
        pc = PillarClassification(pillar=Pillar.CIVIL, pillars=[Pillar.CIVIL])
        assert pc.pillar_ambiguous is False

    def test_multiple_pillars_ambiguous(self):
        pc = PillarClassification(
            pillar=Pillar.CRIMINAL, pillars=[Pillar.CRIMINAL, Pillar.QUASI_CRIMINAL]
        )
        assert pc.pillar_ambiguous is True
        assert pc.model_dump()["pillar_ambiguous"] is True


class TestEvidenceItem:
    def test_frozen(self):
        item = _item()
        with pytest.raises(ValidationError):
            item.filename = "other.txt"

    def test_credibility_clamped(self):
        assert _item(credibility_score=1.7).credibility_score == 1.0
        assert _item(credibility_score=-0.2).credibility_score == 0.0


class TestAuthority:
    def test_ref_projection(self):
        a = Authority(
            id="ON-LTB",
            name="Landlord and Tenant Board",
            type=AuthorityType.TRIBUNAL,
            jurisdiction="Ontario",
        )
        ref = a.ref()
        assert isinstance(ref, AuthorityRef)
        assert ref.id == "ON-LTB"
        assert ref.type == AuthorityType.TRIBUNAL


class TestForumMap:
    def test_to_markdown(self):
        ltb = AuthorityRef(
            id="ON-LTB", name="Landlord and Tenant Board",
            type=AuthorityType.TRIBUNAL, jurisdiction="Ontario",
        )
        divct = AuthorityRef(
            id="ON-DivCt", name="Divisional Court (Ontario)",
            type=AuthorityType.COURT, jurisdiction="Ontario",
        )
        fm = ForumMap(
            domain=Domain.LANDLORD_TENANT,
            primary_forum=ltb,
            alternatives=[divct],
            escalation=[divct],
            rationale="Housing matters route to the LTB first.",
        )
        md = fm.to_markdown()
        assert md.startswith("# Forum Map")
        assert "Landlord and Tenant Board (ON-LTB)" in md
        assert "## Escalation" in md
        assert "Housing matters" in md


class TestDocuments:
    def test_draft_warnings_combined(self):
        d = DocumentDraft(
            title="Letter",
            style_warnings=["style"],
            citation_warnings=["cite"],
            missing_confirmations=["confirm"],
        )
        assert d.warnings == ["confirm", "style", "cite"]

    def test_package_get_file(self):
        pkg = DocumentPackage(
            name="p",
            files=[PackagedFile(path="timeline.md", content="# Timeline\n")],
            source_manifest=SourceManifest(),
            evidence_manifest=EvidenceManifest(),
        )
        assert pkg.get_file("timeline.md").content == "# Timeline\n"
        assert pkg.get_file("missing.md") is None


class TestDomainModuleInput:
    def test_primary_evidence_refs_first_item_only(self):
        first, second = _item(), _item(filename="b.txt", hash="def")
        data = DomainModuleInput(
            classification=MatterClassification(domain=Domain.INSURANCE),
            evidence_index=EvidenceIndex(items=[first, second]),
        )
        refs = data.primary_evidence_refs()
        assert [r.evidence_id for r in refs] == [first.id]

    def test_primary_evidence_refs_empty(self):
        data = DomainModuleInput(classification=MatterClassification(domain=Domain.INSURANCE))
        assert data.primary_evidence_refs() == []
