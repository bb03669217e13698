"""
Tests for the Triage Service — end-to-end from description to package.
"""

from __future__ import annotations

import pytest

from legal_navigator.authority.registry import AuthorityNotFoundError, AuthorityRegistry
from legal_navigator.evidence.indexer import EvidenceIndexer
from legal_navigator.matter.schema import Domain, EvidenceType, Pillar, Provenance
from legal_navigator.triage.service import TriageService

EML = (
    b"Date: Mon, 06 Jan 2025 10:00:00 -0500\n"
    b"From: tenant@example.com\n"
    b"To: landlord@example.com\n"
    b"Subject: No heat\n\nStill no heat.\n"
)


class TestAssess:
    def setup_method(self):
        self.service = TriageService()

    def test_housing_matter(self):
        result = self.service.assess("My landlord changed the locks and cut off the heat")
        assert result.pillar.pillar == Pillar.ADMINISTRATIVE
        assert result.classification.classification.domain == Domain.LANDLORD_TENANT
        assert result.forum_map.primary_forum.id == "ON-LTB"
        assert result.journey.current_stage == "Prepare"
        assert result.explanation.next_steps

    def test_domain_hint_overrides_description(self):
        result = self.service.assess(
            "Something happened at my unit", domain_hint="humanRights"
        )
        assert result.forum_map.primary_forum.id == "ON-HRTO"

    def test_amount_routes_superior_court(self):
        result = self.service.assess(
            "Slip and fall negligence at a supermarket causing injury",
            dispute_amount=250_000,
        )
        assert result.pillar.pillars == [Pillar.CIVIL]
        assert result.classification.classification.domain == Domain.CIVIL_NEGLIGENCE
        assert result.forum_map.primary_forum.id == "ON-SC"

    def test_tree_on_car_not_sent_to_ltb(self):
        result = self.service.assess("My neighbour's tree fell on my parents' car")
        assert result.classification.classification.domain == Domain.TREE_DAMAGE
        assert result.forum_map.primary_forum.id == "ON-SMALL"
        assert result.classification.alternative_domains == []

    def test_limitation_periods(self):
        employment = self.service.assess("I was fired without notice by my employer")
        ids = [p.id for p in employment.limitation_periods]
        assert ids[0] == "ontario-general-2-year"
        assert "ontario-esa-complaint" in ids
        assert self.service.assess("I was assaulted").limitation_periods == []

    def test_ambiguous_pillar_flagged(self):
        result = self.service.assess("I was assaulted and also received a parking ticket")
        assert result.pillar.pillar_ambiguous
        assert result.forum_map.primary_forum.id == "ON-OCJ"

    def test_missing_authority_raises(self):
        service = TriageService(authorities=AuthorityRegistry())
        with pytest.raises(AuthorityNotFoundError):
            service.assess("My landlord changed the locks")


class TestGenerateDocuments:
    def setup_method(self):
        self.service = TriageService()

    def test_landlord_package(self):
        triage = self.service.assess("My landlord changed the locks")
        indexer = EvidenceIndexer()
        indexer.add_item("no-heat.eml", EML, EvidenceType.EML, Provenance.USER_PROVIDED)
        output = self.service.generate_documents(triage, indexer, package_name="ltb-matter")

        assert output is not None
        assert output.package.name == "ltb-matter"
        assert "Landlord and Tenant Board" in output.package.get_file("forum_map.md").content
        assert "2025-01-06" in output.package.get_file("timeline.md").content
        assert "screenshot" in output.package.get_file("missing_evidence.md").content
        assert output.package.evidence_manifest.items[0].filename == "no-heat.eml"

        progress = self.service.progress(triage, evidence_count=1, documents_generated=True)
        assert progress.current_stage == "Resolve"

    def test_no_module_for_domain(self):
        triage = self.service.assess("Something happened at my unit", domain_hint="humanRights")
        assert self.service.generate_documents(triage, EvidenceIndexer()) is None

    def test_criminal_information_package(self):
        triage = self.service.assess("My neighbour uttered threats against me")
        output = self.service.generate_documents(triage, EvidenceIndexer())
        assert output is not None
        assert output.drafts[0].title == "Release Conditions Checklist"

    def test_reference_number_in_text_evidence(self):
        triage = self.service.assess("My landlord changed the locks")
        indexer = EvidenceIndexer()
        indexer.add_item(
            "notes.txt", b"Ref 2024-13-45 for the lock change.", EvidenceType.TXT,
            Provenance.USER_PROVIDED,
        )
        output = self.service.generate_documents(triage, indexer)
        assert output is not None
        assert indexer.items[0].date is None
        assert "No dated evidence yet." in output.package.get_file("timeline.md").content
