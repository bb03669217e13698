"""
Landlord & Tenant Domain Module — LTB intake letters and tenant application guides.

Produces three short letters (intake checklist, notice to resolve, evidence
pack cover) and a guide for each of the tenant applications most often
filed at the Landlord and Tenant Board:

    T1 (rebates): illegal rent, fees, withheld services, illegal entry
    T2 (tenant rights): harassment, lockouts, interference
    T6 (maintenance): repairs
"""

from __future__ import annotations

from legal_navigator.domains.base import BaseDomainModule, section
from legal_navigator.matter.schema import (
    Domain,
    DocumentDraft,
    DomainModuleInput,
    DraftSection,
    EvidenceReference,
)

LTB_URL = "https://tribunalsontario.ca/ltb/"

LETTERS = [
    (
        "LTB Intake Checklist",
        "Captures tenancy details, rent amounts, and issues for LTB intake.",
        True,
    ),
    (
        "Notice to Resolve Issue",
        "Outlines the issue and requests resolution before formal LTB filing.",
        False,
    ),
    (
        "Evidence Pack Cover",
        "Summarizes attachments for an LTB hearing or mediation.",
        True,
    ),
]


class LandlordTenantDomainModule(BaseDomainModule):
    domain = Domain.LANDLORD_TENANT

    def build_drafts(self, data: DomainModuleInput) -> list[DocumentDraft]:
        refs = data.primary_evidence_refs()
        drafts = [
            self.draft(
                data,
                title,
                [
                    section(
                        "Facts",
                        f"{summary} See attached timeline for key dates and supporting "
                        "evidence references.",
                        refs,
                        confirmed=confirmed,
                    ),
                    section(
                        "Requests",
                        "Sets out requested actions consistent with LTB processes "
                        "(confirm before filing).",
                    ),
                    section(
                        "Next Steps",
                        "This draft is informational; confirm correctness and file the "
                        "appropriate LTB form or notice.",
                        confirmed=True,
                    ),
                ],
            )
            for title, summary, confirmed in LETTERS
        ]
        drafts.append(self.draft(data, "LTB Form T1 - Tenant Rights Application", self._t1(refs)))
        drafts.append(
            self.draft(
                data,
                "LTB Form T2 - Tenant Rights Application (Eviction-Related)",
                self._t2(refs),
            )
        )
        drafts.append(
            self.draft(
                data,
                "LTB Form T6 - Tenant Rights Application (Maintenance & Repairs)",
                self._t6(refs),
            )
        )
        return drafts

    @staticmethod
    def _t1(refs: list[EvidenceReference]) -> list[DraftSection]:
        return [
            section(
                "When to Use Form T1",
                "T1 covers rent increased above the guideline without proper notice, illegal "
                "fees such as key deposits, services or utilities included in rent but not "
                "provided, illegal entry, and deposits not returned. File within one year of "
                "the incident.",
                confirmed=True,
            ),
            section(
                "Required Information",
                "Rental address and unit, the landlord's legal name and address for service, "
                "tenancy start date and current rent, each issue with dates, and a calculation "
                "of the compensation requested.",
                refs,
            ),
            section(
                "Service Requirements",
                "Serve a copy of the application on the landlord, then file a Certificate of "
                "Service with the LTB. The LTB schedules the hearing.",
                confirmed=True,
            ),
            section(
                "Next Steps",
                f"Download the current T1 form from {LTB_URL}. Complete it from your evidence, "
                "file through the Tribunals Ontario portal, and organize evidence for the "
                "hearing. Tenant duty counsel and community legal clinics offer free help.",
                confirmed=True,
            ),
        ]

    @staticmethod
    def _t2(refs: list[EvidenceReference]) -> list[DraftSection]:
        return [
            section(
                "When to Use Form T2",
                "T2 covers harassment, threats or interference with reasonable enjoyment, "
                "changing locks without a replacement key, withholding vital services, and "
                "eviction attempts without an LTB order.",
                confirmed=True,
            ),
            section(
                "Evidence Checklist",
                "Notices received from the landlord, written communications, photos or video "
                "of incidents with dates, police occurrence numbers, and witness contact "
                "details.",
                refs,
            ),
            section(
                "Urgent Situations",
                "Where the landlord has locked you out or cut off heat or water, a T2 can be "
                "filed immediately with a request for an urgent hearing. Municipal by-law "
                "enforcement can also respond to vital service cut-offs.",
                confirmed=True,
            ),
            section(
                "Next Steps",
                f"Download the current T2 form from {LTB_URL}, file it, serve the landlord, "
                "and file a Certificate of Service.",
                confirmed=True,
            ),
        ]

    @staticmethod
    def _t6(refs: list[EvidenceReference]) -> list[DraftSection]:
        return [
            section(
                "When to Use Form T6",
                "T6 covers repairs the landlord has not made: pests, mould, leaks, broken "
                "appliances, heating failures and building conditions that breach "
                "maintenance standards.",
                confirmed=True,
            ),
            section(
                "Before Filing T6",
                "Notify the landlord in writing and keep a copy. A municipal property "
                "standards inspection report is strong evidence and can be requested before "
                "filing.",
                confirmed=True,
            ),
            section(
                "Evidence Checklist",
                "Dated photos and video of each problem, written repair requests and any "
                "replies, inspection reports, and receipts for costs you paid.",
                refs,
            ),
            section(
                "Remedies Available",
                "The LTB can order repairs, an abatement of rent, compensation for damaged "
                "property, and a prohibition on rent increases until repairs are done.",
                confirmed=True,
            ),
        ]
