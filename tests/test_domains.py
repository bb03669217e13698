"""
Tests for the Domain Modules.

Validates:
- The shared generate() pipeline (manifests, package, warnings)
- Per-domain draft sets
- Registry lookup
"""

from __future__ import annotations

from legal_navigator.domains.base import BaseDomainModule, section
from legal_navigator.domains.civil_negligence import CivilNegligenceDomainModule
from legal_navigator.domains.criminal import CriminalDomainModule
from legal_navigator.domains.employment import EmploymentLawRouterModule
from legal_navigator.domains.insurance import InsuranceDomainModule
from legal_navigator.domains.landlord_tenant import LandlordTenantDomainModule
from legal_navigator.domains.ocpp import OCPPFilingModule
from legal_navigator.domains.registry import DomainModuleRegistry, build_default_registry
from legal_navigator.domains.tree_damage import TreeDamageClassifierModule
from legal_navigator.matter.schema import (
    Domain,
    DomainModuleInput,
    EvidenceIndex,
    EvidenceItem,
    EvidenceManifest,
    EvidenceType,
    MatterClassification,
    MatterTimeline,
    Provenance,
)


def _input(domain: Domain, description: str | None = None, **classification) -> DomainModuleInput:
    return DomainModuleInput(
        classification=MatterClassification(
            domain=domain, description=description, **classification
        ),
        forum_map="# Forum Map\n",
        timeline="# Timeline\n",
        missing_evidence="# Missing Evidence Checklist\n",
        evidence_index=EvidenceIndex(
            items=[
                EvidenceItem(
                    filename="photo.png", type=EvidenceType.PNG,
                    provenance=Provenance.USER_PROVIDED, hash="c" * 64,
                    credibility_score=0.6,
                )
            ]
        ),
    )


class _SingleDraftModule(BaseDomainModule):
    domain = Domain.OTHER

    def build_drafts(self, data):
        return [self.draft(data, "Only Draft", [section("Facts", "Text.")])]


class TestBaseDomainModule:
    def test_generate_pipeline(self):
        output = _SingleDraftModule().generate(_input(Domain.OTHER))
        assert [d.title for d in output.drafts] == ["Only Draft"]
        assert output.package.name == "other-package"
        assert output.package.source_manifest.compiled_at is not None
        manifest_items = output.package.evidence_manifest.items
        assert len(manifest_items) == 1
        assert manifest_items[0].credibility_score == 0.6
        assert 'Section "Facts" lacks user confirmation for factual assertions.' in output.warnings
        assert any("placeholder" in w for w in output.warnings)

    def test_supplied_manifest_and_name_kept(self):
        data = _input(Domain.OTHER)
        data.evidence_manifest = EvidenceManifest(notes=["supplied"])
        data.package_name = "custom"
        output = _SingleDraftModule().generate(data)
        assert output.package.name == "custom"
        assert output.package.evidence_manifest.notes == ["supplied"]


class TestInsurance:
    def setup_method(self):
        self.module = InsuranceDomainModule()

    def test_default_escalation_ladder(self):
        output = self.module.generate(_input(Domain.INSURANCE, "Claim for water damage denied"))
        assert [d.title for d in output.drafts] == [
            "Internal Complaint Letter",
            "Ombudsman Escalation",
            "General Insurance OmbudService Submission",
            "FSRA Conduct Complaint",
        ]
        facts = output.drafts[0].sections[0]
        assert facts.evidence_refs[0].attachment_index == 1

    def test_motor_vehicle_ontario(self):
        output = self.module.generate(
            _input(Domain.INSURANCE, "A truck hit my parked car")
        )
        titles = [d.title for d in output.drafts]
        assert len(titles) == 5
        assert "Direct Compensation Property Damage (DC-PD) Claim Letter" in titles
        assert "Small Claims Court - Statement of Claim" in titles

    def test_motor_vehicle_from_notes(self):
        data = _input(Domain.INSURANCE, "Claim denied", notes=["rear-end collision on the 401"])
        assert self.module.is_motor_vehicle(data)

    def test_motor_vehicle_outside_ontario(self):
        output = self.module.generate(
            _input(Domain.INSURANCE, "vehicle collision", jurisdiction="Federal")
        )
        titles = [d.title for d in output.drafts]
        assert "Insurance Claim Letter" in titles
        assert not any("DC-PD" in t for t in titles)


class TestLandlordTenant:
    def test_drafts(self):
        output = LandlordTenantDomainModule().generate(_input(Domain.LANDLORD_TENANT))
        titles = [d.title for d in output.drafts]
        assert titles[:3] == ["LTB Intake Checklist", "Notice to Resolve Issue", "Evidence Pack Cover"]
        assert any("T1" in t for t in titles)
        assert any("T2" in t for t in titles)
        assert any("T6" in t for t in titles)
        assert output.package.get_file("drafts/ltb-intake-checklist.md") is not None


class TestEmployment:
    def test_eight_guides(self):
        output = EmploymentLawRouterModule().generate(_input(Domain.EMPLOYMENT))
        assert len(output.drafts) == 8

    def test_dispute_amount_interpolated(self):
        output = EmploymentLawRouterModule().generate(
            _input(Domain.EMPLOYMENT, dispute_amount=80_000)
        )
        litigation = next(d for d in output.drafts if "Court Litigation" in d.title)
        where = next(s for s in litigation.sections if s.heading == "Where to Sue")
        assert "$80,000" in where.content
        assert "Superior Court" in where.content

    def test_court_for_amount(self):
        assert "within the Small Claims" in EmploymentLawRouterModule.court_for_amount(12_000)


class TestOtherModules:
    def test_ocpp(self):
        output = OCPPFilingModule().generate(_input(Domain.OCPP_FILING))
        assert len(output.drafts) == 5
        assert output.package.name == "ocppFiling-package"

    def test_tree_damage(self):
        output = TreeDamageClassifierModule().generate(_input(Domain.TREE_DAMAGE))
        assert len(output.drafts) == 5
        assert output.drafts[0].title.startswith("Identifying Tree Ownership")


class TestCivilNegligence:
    def setup_method(self):
        self.module = CivilNegligenceDomainModule()

    def test_drafts(self):
        output = self.module.generate(_input(Domain.CIVIL_NEGLIGENCE, "Slip and fall"))
        assert [d.title for d in output.drafts] == [
            "Demand for Repair / Compensation",
            "Small Claims Court - Form 7A (Statement of Claim)",
            "Evidence Checklist - Property Damage",
        ]
        assert output.package.name == "civil-negligence-package"

    def test_matter_details_filled_in(self):
        data = _input(
            Domain.CIVIL_NEGLIGENCE,
            "Slip and fall",
            dispute_amount=4200,
            notes=["Fell on an unsalted walkway at 12 King St."],
        )
        data.classification.parties.names.append("Sam Lee")
        data.classification.timeline = MatterTimeline(start="2025-01-15")
        demand = self.module.generate(data).drafts[0]
        text = " ".join(s.content for s in demand.sections)
        assert "From: Sam Lee" in text
        assert "Date of incident: 2025-01-15" in text
        assert "$4,200.00" in text
        assert "unsalted walkway" in text

    def test_placeholders_without_details(self):
        form = self.module.generate(_input(Domain.CIVIL_NEGLIGENCE)).drafts[1]
        assert "Claimant: Claimant" in form.sections[0].content
        assert "[amount]" in form.sections[0].content


class TestCriminal:
    def setup_method(self):
        self.module = CriminalDomainModule()

    def test_information_only_drafts(self):
        output = self.module.generate(_input(Domain.CRIMINAL, "I was assaulted"))
        assert [d.title for d in output.drafts] == [
            "Release Conditions Checklist",
            "Victim Impact Statement (Scaffold)",
            "Police and Crown Process Guide (Information)",
        ]
        guide = output.drafts[2].sections[0].content
        assert "assault allegation in Ontario" in guide

    def test_threats_named_as_uttering_threats(self):
        data = _input(Domain.CRIMINAL, "My neighbour threatened me")
        assert self.module.offence_for(data) == "uttering threats"
        assert self.module.offence_for(_input(Domain.CRIMINAL, "I was assaulted")) == "assault"


class TestDomainModuleRegistry:
    def test_default_registry(self):
        registry = build_default_registry()
        assert {m.domain for m in registry.list()} == {
            Domain.INSURANCE,
            Domain.LANDLORD_TENANT,
            Domain.EMPLOYMENT,
            Domain.OCPP_FILING,
            Domain.TREE_DAMAGE,
            Domain.CIVIL_NEGLIGENCE,
            Domain.CRIMINAL,
        }
        assert isinstance(registry.get(Domain.INSURANCE), InsuranceDomainModule)
        assert registry.get(Domain.HUMAN_RIGHTS) is None

    def test_register_replaces(self):
        registry = DomainModuleRegistry()
        first, second = InsuranceDomainModule(), InsuranceDomainModule()
        registry.register(first)
        registry.register(second)
        assert registry.get(Domain.INSURANCE) is second
        assert len(registry.list()) == 1
