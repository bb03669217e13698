"""
Employment Law Router Module — ESA complaint vs. common-law wrongful dismissal.

Ontario employment disputes split into two routes with different remedies:

- an Employment Standards Act, 2000 complaint to the Ministry of Labour
  (statutory minimums only, no fee, no lawyer needed);
- a common-law wrongful dismissal action in Small Claims or Superior
  Court (reasonable notice, benefits, broader damages).

The module produces eight guides laying both routes side by side. Where
the matter carries a dispute amount, the court-route guides state which
court that amount points to.
"""

from __future__ import annotations

from legal_navigator.config import settings
from legal_navigator.domains.base import BaseDomainModule, section
from legal_navigator.matter.schema import Domain, DocumentDraft, DomainModuleInput

MOL_URL = "https://www.ontario.ca/page/filing-employment-standards-claim"


class EmploymentLawRouterModule(BaseDomainModule):
    domain = Domain.EMPLOYMENT

    def build_drafts(self, data: DomainModuleInput) -> list[DocumentDraft]:
        refs = data.primary_evidence_refs()
        court_note = self.court_for_amount(data.classification.dispute_amount)

        return [
            self.draft(
                data,
                "ESA Complaint vs Common Law Wrongful Dismissal - Which Path?",
                [
                    section(
                        "Quick Decision Tree",
                        "If the claim is for unpaid wages, vacation pay, or minimum termination "
                        "and severance pay, an ESA complaint may be enough. If the claim is for "
                        "reasonable notice beyond the ESA minimums, lost benefits or damages for "
                        "the manner of dismissal, a wrongful dismissal action is the usual route.",
                        refs,
                    ),
                    section(
                        "Key Differences",
                        "An ESA complaint is free and handled by an employment standards officer. "
                        "A court action costs filing fees and takes longer, but common-law notice "
                        "is often several times the ESA minimum. Filing an ESA complaint for "
                        "termination pay generally bars a civil action for the same dismissal.",
                        confirmed=True,
                    ),
                ],
            ),
            self.draft(
                data,
                "Ministry of Labour ESA Complaint - How to File",
                [
                    section(
                        "Eligibility",
                        "Most provincially regulated employees are covered. Federally regulated "
                        "workplaces (banks, airlines, telecoms) fall under the Canada Labour Code "
                        "instead.",
                        confirmed=True,
                    ),
                    section(
                        "What the Ministry Can Award",
                        "Unpaid wages, overtime, vacation and public holiday pay, and ESA "
                        "termination and severance pay.",
                        confirmed=True,
                    ),
                    section(
                        "How to File",
                        f"File online at {MOL_URL} with your employment dates, pay records and "
                        "the amounts claimed.",
                        refs,
                    ),
                ],
            ),
            self.draft(
                data,
                "Common Law Wrongful Dismissal - Court Litigation Guide",
                [
                    section(
                        "What Is Wrongful Dismissal?",
                        "Termination without cause and without reasonable notice or pay in lieu. "
                        "Reasonable notice depends on age, length of service, position and the "
                        "availability of similar work.",
                        confirmed=True,
                    ),
                    section("Where to Sue", court_note, confirmed=True),
                    section(
                        "For-Cause Terminations",
                        "The employer must prove just cause. Isolated or minor misconduct rarely "
                        "meets the standard without prior warnings.",
                        refs,
                    ),
                ],
            ),
            self.draft(
                data,
                "Severance Pay & Termination Pay Requirements (Ontario)",
                [
                    section(
                        "ESA Minimums",
                        "Termination pay is one week per year of service up to eight weeks. "
                        "Severance pay is one week per year of service up to 26 weeks where the "
                        "employee has five or more years and the employer's payroll is at least "
                        "$2.5 million.",
                        confirmed=True,
                    ),
                    section(
                        "Calculating Your Claim",
                        "List regular wages, commissions, benefits and bonuses, then compare the "
                        "ESA minimum against any contract clause and common-law notice.",
                        refs,
                    ),
                ],
            ),
            self.draft(
                data,
                "Notice Requirements - ESA vs Common Law",
                [
                    section(
                        "ESA Minimum Notice",
                        "One week for service under a year, two weeks for one to three years, "
                        "then one additional week per year of service to a maximum of eight.",
                        confirmed=True,
                    ),
                    section(
                        "Mitigation",
                        "A dismissed employee is expected to look for comparable work. Keep a "
                        "record of applications and offers; new earnings can reduce common-law "
                        "damages.",
                        refs,
                    ),
                ],
            ),
            self.draft(
                data,
                "Employment Dispute - Evidence Checklist",
                [
                    section(
                        "Employment Relationship",
                        "Offer letter, employment contract, job description, and performance "
                        "reviews.",
                        refs,
                    ),
                    section(
                        "Termination Documents",
                        "Termination letter, record of employment, final pay stub, and any "
                        "severance offer or release.",
                        refs,
                    ),
                ],
            ),
            self.draft(
                data,
                "Employment Dispute - Limitation Periods & Deadlines",
                [
                    section(
                        "Critical Limitation Periods",
                        "An ESA complaint must be filed within two years of the violation. A "
                        "wrongful dismissal action must be started within two years of the "
                        "termination under the Limitations Act, 2002.",
                        confirmed=True,
                    ),
                    section(
                        "Key Dates",
                        "Record the termination date, last day worked and date of any severance "
                        "offer; these fix the limitation clock.",
                        refs,
                    ),
                ],
            ),
            self.draft(
                data,
                "Quick Actions & Interim Relief for Employment Disputes",
                [
                    section(
                        "First 48 Hours",
                        "Do not sign a release on the spot. Request the offer in writing, copy "
                        "personal records before access is removed, and apply for Employment "
                        "Insurance.",
                        confirmed=True,
                    ),
                    section(
                        "Negotiating Settlement",
                        "A written response to a severance offer can set out the notice period "
                        "and benefits claimed before any filing.",
                    ),
                ],
            ),
        ]

    @staticmethod
    def court_for_amount(amount: float | None) -> str:
        limit = settings.small_claims_limit
        if amount is None:
            return (
                f"Claims up to ${limit:,.0f} go to Small Claims Court; larger claims go to "
                "the Superior Court of Justice."
            )
        if amount <= limit:
            return (
                f"A claim of ${amount:,.0f} is within the Small Claims Court limit of "
                f"${limit:,.0f}."
            )
        return (
            f"A claim of ${amount:,.0f} exceeds the Small Claims Court limit of "
            f"${limit:,.0f} and belongs in the Superior Court of Justice, unless the excess "
            "is waived."
        )
