"""
Criminal Domain Module — Information-only guides for assault and threats matters.

The Crown, not the complainant, prosecutes a criminal charge, so nothing
here is a filing. The module explains release conditions, the victim
impact statement and the police-to-trial process, naming the offence as
"uttering threats" when the matter describes threats and "assault"
otherwise.
"""

from __future__ import annotations

import re

from legal_navigator.domains.base import BaseDomainModule, section
from legal_navigator.matter.schema import ONTARIO, Domain, DocumentDraft, DomainModuleInput

_THREATS_RE = re.compile(r"\b(threat|uttering)", re.IGNORECASE)

RELEASE_CONDITIONS = [
    "Reside at a fixed address (the court is notified of any change)",
    "Report to a bail supervisor or police as directed",
    "No contact with the complainant or witnesses",
    "No possession of weapons",
    "Abstain from alcohol and non-prescription drugs (if ordered)",
    "Surrender passport (for serious charges)",
    "Keep the peace and be of good behaviour",
    "Attend court on every required date",
]

IMPACT_AREAS = [
    ("Physical Effects", "Injuries, treatment, ongoing pain and effects on work or school."),
    ("Emotional Effects", "Fear, anxiety, loss of security and effects on relationships."),
    ("Financial Effects", "Medical costs, lost income, counselling and property repairs."),
    ("Time Impact", "Time spent in treatment, away from work and in the court process."),
]


class CriminalDomainModule(BaseDomainModule):
    domain = Domain.CRIMINAL

    @staticmethod
    def offence_for(data: DomainModuleInput) -> str:
        text = " ".join([data.classification.description or "", *data.classification.notes])
        return "uttering threats" if _THREATS_RE.search(text) else "assault"

    def build_drafts(self, data: DomainModuleInput) -> list[DocumentDraft]:
        offence = self.offence_for(data)
        province = data.classification.jurisdiction or ONTARIO
        refs = data.primary_evidence_refs()

        return [
            self.draft(
                data,
                "Release Conditions Checklist",
                [
                    section(
                        "Common Release Conditions",
                        "\n".join(f"- [ ] {c}" for c in RELEASE_CONDITIONS),
                        confirmed=True,
                    ),
                    section(
                        "Compliance",
                        "Breaching a release condition is a separate criminal offence and can "
                        "lead to arrest. Conditions are written down and kept accessible; "
                        "unclear conditions can be clarified with police or counsel.",
                        confirmed=True,
                    ),
                ],
            ),
            self.draft(
                data,
                "Victim Impact Statement (Scaffold)",
                [
                    section(
                        "Purpose",
                        "A victim impact statement describes how the offence affected the "
                        "victim. It is considered at sentencing.",
                        confirmed=True,
                    ),
                    *(section(heading, text, refs) for heading, text in IMPACT_AREAS),
                    section(
                        "Preparation",
                        "Statements are written in the first person with specific dates, "
                        "injuries and costs. A support person may attend, and the statement "
                        "can be read aloud by someone else.",
                        confirmed=True,
                    ),
                ],
            ),
            self.draft(
                data,
                "Police and Crown Process Guide (Information)",
                [
                    section(
                        "Initial Police Response",
                        f"Police attend, record statements and gather evidence of the {offence} "
                        f"allegation in {province}. The accused may be arrested or released "
                        "with conditions.",
                        confirmed=True,
                    ),
                    section(
                        "Charging and Bail",
                        "Crown counsel reviews the investigation and decides whether to proceed. "
                        "A bail hearing is usually held within 24 to 72 hours of arrest.",
                        confirmed=True,
                    ),
                    section(
                        "Court Process",
                        "First appearance and disclosure, possible resolution discussions, "
                        "then trial and, on conviction, sentencing.",
                        confirmed=True,
                    ),
                    section(
                        "Complainant's Role",
                        "The complainant is a witness, not a party. Victim Services Ontario "
                        "offers support through the process, and a subpoena can compel "
                        "testimony.",
                        confirmed=True,
                    ),
                ],
            ),
        ]
