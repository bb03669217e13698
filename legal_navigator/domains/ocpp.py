"""
OCPP Filing Module — Superior Court consolidation and motion guides.

Covers consolidating related actions, amending pleadings and joining
parties in the Ontario Superior Court of Justice, plus the expert
evidence, cross-examination and interlocutory motion steps that follow.
Not applicable to Small Claims Court or tribunals.
"""

from __future__ import annotations

from legal_navigator.domains.base import BaseDomainModule, section
from legal_navigator.matter.schema import Domain, DocumentDraft, DomainModuleInput


class OCPPFilingModule(BaseDomainModule):
    domain = Domain.OCPP_FILING

    def build_drafts(self, data: DomainModuleInput) -> list[DocumentDraft]:
        refs = data.primary_evidence_refs()
        return [
            self.draft(
                data,
                "Ontario Consolidation Procedures (OCPP) - Court Process Guide",
                [
                    section(
                        "What Is OCPP?",
                        "A Superior Court civil procedure for consolidating related lawsuits, "
                        "amending claims without starting a new action, and joining parties or "
                        "claims. It does not apply in Small Claims Court or tribunals.",
                        confirmed=True,
                    ),
                    section(
                        "When It Applies",
                        "Multiple related actions pending in Superior Court, a claim needing "
                        "amendment after the statement of claim, or a new party to be joined.",
                        refs,
                    ),
                    section(
                        "Key Rules",
                        "Rule 6 governs consolidation and hearing together. Rules 26 and 5 govern "
                        "amendment and joinder. Motions are brought under Rule 37.",
                        confirmed=True,
                    ),
                ],
            ),
            self.draft(
                data,
                "OCPP Consolidation/Amendment Motion Scaffold",
                [
                    section(
                        "Motion Record Structure",
                        "Notice of motion (Form 37A), supporting affidavit, copies of the "
                        "pleadings in each action, and a draft order.",
                        refs,
                    ),
                    section(
                        "Grounds for Consolidation",
                        "Common questions of law or fact, relief arising from the same "
                        "transaction, or another reason an order ought to be made.",
                    ),
                    section(
                        "Court File Information",
                        "Court file number, court location, and the full title of each "
                        "proceeding. Filed documents are submitted as text-searchable PDF.",
                        confirmed=True,
                    ),
                ],
            ),
            self.draft(
                data,
                "OCPP Expert Affidavit & Evidence Requirements",
                [
                    section(
                        "When Expert Evidence Is Needed",
                        "Technical causation, standard of care, or valuation questions usually "
                        "need an expert opinion.",
                    ),
                    section(
                        "Rule 53.03 Requirements",
                        "The report states the expert's qualifications, instructions, opinion "
                        "with reasons, and a signed Acknowledgment of Expert's Duty (Form 53).",
                        confirmed=True,
                    ),
                ],
            ),
            self.draft(
                data,
                "OCPP Cross-Examination & Evidence Preparation",
                [
                    section(
                        "Cross-Examination on Affidavits",
                        "A deponent may be cross-examined on an affidavit filed on a motion. "
                        "Answers given are part of the motion record.",
                        confirmed=True,
                    ),
                    section(
                        "Document Management",
                        "Number every exhibit, keep a master index, and match each affidavit "
                        "paragraph to its supporting document.",
                        refs,
                    ),
                ],
            ),
            self.draft(
                data,
                "OCPP Interlocutory Motions - Applications During Action",
                [
                    section(
                        "What Interlocutory Motions Are",
                        "Requests decided before trial: amendments, productions, extensions, "
                        "security for costs, and summary judgment under Rule 20.",
                        confirmed=True,
                    ),
                    section(
                        "Motion Timeline",
                        "Serve the motion record at least seven days before the hearing and "
                        "file it at least seven days before the hearing. Responding materials "
                        "are due four days before.",
                    ),
                    section(
                        "Drafting the Affidavit",
                        "State facts within personal knowledge, identify the source of anything "
                        "on information and belief, and attach documents as exhibits.",
                        refs,
                    ),
                ],
            ),
        ]
