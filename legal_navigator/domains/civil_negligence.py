"""
Civil Negligence Domain Module — Demand, Small Claims scaffold and evidence list.

Property damage and personal injury claims against a private party start
with a demand for repair or compensation; if that fails, a Small Claims
Court statement of claim (Form 7A). The claimant's name, incident date,
amount and notes are filled in where the matter carries them.
"""

from __future__ import annotations

from legal_navigator.domains.base import BaseDomainModule, section
from legal_navigator.matter.schema import ONTARIO, Domain, DocumentDraft, DomainModuleInput, utcnow

EVIDENCE_CHECKLIST = [
    "Clear photos of the damage (close-up and context)",
    "Time-stamped photos or video",
    "Repair estimates or receipts",
    "Witness names and contact information",
    "Correspondence with the owner, occupier or municipality",
    "Police reports (if applicable)",
]


class CivilNegligenceDomainModule(BaseDomainModule):
    domain = Domain.CIVIL_NEGLIGENCE

    def build_drafts(self, data: DomainModuleInput) -> list[DocumentDraft]:
        mc = data.classification
        refs = data.primary_evidence_refs()
        claimant = mc.parties.names[0] if mc.parties.names else "Claimant"
        incident_date = (mc.timeline.start if mc.timeline else None) or utcnow().date().isoformat()
        amount = f"${mc.dispute_amount:,.2f}" if mc.dispute_amount is not None else "[amount]"
        particulars = "\n".join(mc.notes) or mc.description or "[describe what happened]"

        return [
            self.draft(
                data,
                "Demand for Repair / Compensation",
                [
                    section(
                        "Parties",
                        f"To: Respondent. From: {claimant}. Date of incident: {incident_date}.",
                    ),
                    section("Summary", particulars, refs),
                    section(
                        "Relief Sought",
                        f"Repair of the damage or compensation in the amount of {amount}.",
                    ),
                    section(
                        "Next Steps",
                        "A response within 10 days is requested to arrange repair or payment. "
                        "Without a response, a Small Claims Court claim may follow. Municipal "
                        "by-laws may set their own notice periods; notice to a municipality "
                        "goes to the municipal clerk.",
                        confirmed=True,
                    ),
                ],
            ),
            self.draft(
                data,
                "Small Claims Court - Form 7A (Statement of Claim)",
                [
                    section(
                        "Form 7A (Scaffold)",
                        f"1) Claimant: {claimant}. 2) Defendant: Respondent. "
                        f"3) Claim amount: {amount}. "
                        f"4) Court location: {mc.jurisdiction or ONTARIO}. "
                        f"5) Date of incident: {incident_date}.",
                    ),
                    section("Particulars of Claim", particulars, refs),
                    section(
                        "Attachments",
                        "Photos, repair estimates and correspondence, numbered to match the "
                        "particulars. Exact dates, names and amounts are filled in before filing.",
                        confirmed=True,
                    ),
                ],
            ),
            self.draft(
                data,
                "Evidence Checklist - Property Damage",
                [
                    section(
                        "Checklist",
                        "\n".join(f"- [ ] {item}" for item in EVIDENCE_CHECKLIST)
                        + "\nLabel files with attachment numbers to match the statement of claim.",
                        confirmed=True,
                    ),
                ],
            ),
        ]
