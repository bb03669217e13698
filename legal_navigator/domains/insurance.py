"""
Insurance Domain Module — Claim escalation letters and motor-vehicle claims.

Default matters get the four-step insurer escalation ladder: internal
complaint, ombudsman, General Insurance OmbudService, FSRA. When the
matter description or notes mention a vehicle collision, the
motor-vehicle set is produced instead.
"""

from __future__ import annotations

import re

from legal_navigator.domains.base import BaseDomainModule, section
from legal_navigator.matter.schema import ONTARIO, Domain, DocumentDraft, DomainModuleInput

MOTOR_VEHICLE_KEYWORDS = re.compile(
    r"\b(accident|collision|vehicle|car|truck|motor|parked|crashed|rear-end|side-swipe)\b",
    re.IGNORECASE,
)

ESCALATION_LADDER = [
    ("Internal Complaint Letter", "Summarizes the claim events and requests internal review."),
    ("Ombudsman Escalation", "Escalates unresolved issues to the insurer ombuds service."),
    (
        "General Insurance OmbudService Submission",
        "Prepares a GIO submission after internal remedies are exhausted.",
    ),
    (
        "FSRA Conduct Complaint",
        "Raises a conduct concern to FSRA regarding claim handling or delays.",
    ),
]


class InsuranceDomainModule(BaseDomainModule):
    domain = Domain.INSURANCE

    def build_drafts(self, data: DomainModuleInput) -> list[DocumentDraft]:
        if self.is_motor_vehicle(data):
            return self._motor_vehicle_drafts(data)

        refs = data.primary_evidence_refs()
        return [
            self.draft(
                data,
                title,
                [
                    section(
                        "Facts",
                        f"{summary} Refer to the attached timeline for key dates and to the "
                        "evidence list for supporting documents.",
                        refs,
                    ),
                    section(
                        "Requests",
                        "Request a written response addressing each issue and providing "
                        "reasons with references to policy wording.",
                    ),
                    section(
                        "Next Steps",
                        "This draft is informational and is to be confirmed before sending. "
                        "Escalation paths depend on the insurer and policy terms.",
                        confirmed=True,
                    ),
                ],
            )
            for title, summary in ESCALATION_LADDER
        ]

    @staticmethod
    def is_motor_vehicle(data: DomainModuleInput) -> bool:
        text = " ".join([data.classification.description or "", *data.classification.notes])
        return bool(MOTOR_VEHICLE_KEYWORDS.search(text))

    def _motor_vehicle_drafts(self, data: DomainModuleInput) -> list[DocumentDraft]:
        refs = data.primary_evidence_refs()
        ontario = data.classification.jurisdiction == ONTARIO
        drafts = [
            self.draft(
                data,
                "Accident Report / Statement of Facts",
                [
                    section(
                        "Incident Details",
                        "Date, time and location of the accident. Weather and road conditions. "
                        "Vehicle descriptions and positions.",
                        refs,
                    ),
                    section(
                        "Parties Involved",
                        "Driver and owner information for each vehicle. Licence and insurance "
                        "details. Witness contact information if available.",
                    ),
                    section(
                        "Description of Accident",
                        "Narrative of how the accident occurred, including direction of travel, "
                        "actions taken and point of impact.",
                        refs,
                    ),
                    section(
                        "Fault Determination",
                        "In Ontario, fault is determined under the Fault Determination Rules, "
                        "R.R.O. 1990, Reg. 668. A legally parked vehicle is typically 0% at fault."
                        if ontario
                        else "Fault determination depends on jurisdiction and circumstances.",
                        confirmed=True,
                    ),
                ],
            )
        ]

        if ontario:
            drafts.append(
                self.draft(
                    data,
                    "Direct Compensation Property Damage (DC-PD) Claim Letter",
                    [
                        section(
                            "Policy Information",
                            "Policy number, vehicle details and coverage information.",
                        ),
                        section(
                            "Damage Claim",
                            "Description of vehicle damage with repair estimates and photos. "
                            "Under DC-PD coverage the claim is made to your own insurer when "
                            "another driver is at fault.",
                            refs,
                        ),
                        section(
                            "No-Fault System",
                            "Ontario property damage claims are paid by your own insurer under "
                            "DC-PD coverage. Where the other driver is identified and fully at "
                            "fault, the deductible is typically $0.",
                            confirmed=True,
                        ),
                        section(
                            "Request",
                            "Request prompt processing of the DC-PD claim and authorization for "
                            "repairs or a total loss settlement.",
                        ),
                    ],
                )
            )
        else:
            drafts.append(
                self.draft(
                    data,
                    "Insurance Claim Letter",
                    [
                        section(
                            "Claim Details",
                            "Policy number, accident date, time and location, description of "
                            "damage, and other party information.",
                            refs,
                        ),
                        section(
                            "Request",
                            "Request claim processing, adjuster assignment and repair authorization.",
                        ),
                    ],
                )
            )

        drafts.append(
            self.draft(
                data,
                "Demand Letter for Out-of-Pocket Expenses",
                [
                    section(
                        "Out-of-Pocket Expenses",
                        "Expenses not covered by insurance: rental costs, deductible paid, "
                        "towing fees, loss of use. Attach receipts.",
                        refs,
                    ),
                    section(
                        "Legal Basis",
                        "Under common law negligence principles the at-fault party is liable "
                        "for the damage caused. Insurance coverage does not remove personal "
                        "liability for uncovered losses.",
                        confirmed=True,
                    ),
                    section(
                        "Demand",
                        "Request payment of a stated amount within 14 days and note that "
                        "unresolved claims may proceed to court.",
                    ),
                ],
            )
        )
        drafts.append(
            self.draft(
                data,
                "Small Claims Court - Statement of Claim",
                [
                    section(
                        "Court Information",
                        "Ontario Small Claims Court, Form 7A (Plaintiff's Claim). The monetary "
                        "limit is $50,000."
                        if ontario
                        else "The small claims court for your jurisdiction and its monetary limit.",
                        confirmed=True,
                    ),
                    section(
                        "Claim Details",
                        "Date and location of the accident, the negligent act, and the "
                        "resulting damage to your property.",
                        refs,
                    ),
                    section(
                        "Damages Claimed",
                        "Repair costs or diminished value, out-of-pocket expenses, loss of use "
                        "and filing fees, with a total claim amount.",
                    ),
                ],
            )
        )
        drafts.append(
            self.draft(
                data,
                "Incident Timeline for Insurance Adjuster",
                [
                    section(
                        "Time of Accident",
                        "Precise time and sequence of events, positions of vehicles and how "
                        "the collision occurred.",
                        refs,
                    ),
                    section(
                        "Immediate Aftermath",
                        "Exchange of information, photos taken, and any police or Collision "
                        "Reporting Centre report.",
                    ),
                    section(
                        "Post-Accident Actions",
                        "Insurance notifications, repair estimates, medical attention and "
                        "follow-up communications.",
                    ),
                ],
            )
        )
        return drafts
