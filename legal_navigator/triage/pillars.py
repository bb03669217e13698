"""
Pillar Classification — Which branch of the legal system a situation falls in.

Free text is matched against four fixed keyword lists by case-insensitive
substring containment. There is no scoring: a pillar either matches or it
does not. When several pillars match, Criminal wins if it is among them;
any other combination is reported as Unknown with ambiguity flagged, so
the user can be asked a clarifying question.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from legal_navigator.matter.schema import Pillar, PillarClassification

logger = logging.getLogger(__name__)


CRIMINAL_KEYWORDS = [
    "assault", "theft", "robbery", "murder", "homicide", "sexual assault",
    "uttering threats", "possession", "arrested", "police", "911", "charges laid",
]
QUASI_CRIMINAL_KEYWORDS = [
    "by-law", "bylaw", "penalty", "ticket", "parking ticket", "municipal fine",
    "provincial offence", "offence", "speeding", "traffic violation",
]
ADMINISTRATIVE_KEYWORDS = [
    "landlord", "ltb", "hrto", "fsra", "ombudsman", "licensing", "regulator",
    "tribunal", "hearing", "permit", "appeal", "eviction", "rent deposit",
]
CIVIL_KEYWORDS = [
    "negligence", "tort", "property damage", "small claims", "breach of contract",
    "damages", "personal injury", "slip and fall", "defamation", "defamatory",
    "hired", "contractor", "mechanic", "repair", "refund", "not responding",
    "consumer", "paid advance", "took money", "tree fell", "tree damage",
    "gazebo", "fence", "neighbour", "neighbor",
]

# Detection order; also the order pillars are reported in.
PILLAR_KEYWORDS: list[tuple[Pillar, list[str]]] = [
    (Pillar.CRIMINAL, CRIMINAL_KEYWORDS),
    (Pillar.QUASI_CRIMINAL, QUASI_CRIMINAL_KEYWORDS),
    (Pillar.ADMINISTRATIVE, ADMINISTRATIVE_KEYWORDS),
    (Pillar.CIVIL, CIVIL_KEYWORDS),
]


def _match_any(text: str, keywords: list[str]) -> bool:
    return any(k.lower() in text for k in keywords)


class PillarClassifier:
    """Keyword classifier mapping free text to a legal pillar."""

    def __init__(self, keywords: list[tuple[Pillar, list[str]]] | None = None) -> None:
        self.keywords = keywords or PILLAR_KEYWORDS

    def detect_all_pillars(self, text: str | None) -> list[Pillar]:
        """Every pillar whose keyword list matches, in detection order."""
        t = (text or "").lower()
        return [pillar for pillar, words in self.keywords if _match_any(t, words)]

    def classify(self, text: str | None) -> Pillar:
        """
        Collapse the matches to a single pillar.

        One match returns that pillar. Several matches return Criminal if
        it is among them, otherwise Unknown. No match returns Unknown.
        """
        if not (text or "").strip():
            return Pillar.UNKNOWN
        return self._collapse(self.detect_all_pillars(text))

    def assess(self, text: str | None) -> PillarClassification:
        """Single pillar plus every detected pillar, for ambiguity flagging."""
        if not (text or "").strip():
            return PillarClassification(pillar=Pillar.UNKNOWN, pillars=[])
        matches = self.detect_all_pillars(text)
        result = PillarClassification(pillar=self._collapse(matches), pillars=matches)
        if result.pillar_ambiguous:
            logger.info(
                "Ambiguous pillar classification: %s -> %s",
                [p.value for p in matches],
                result.pillar.value,
            )
        return result

    @staticmethod
    def _collapse(matches: list[Pillar]) -> Pillar:
        if len(matches) == 1:
            return matches[0]
        if Pillar.CRIMINAL in matches:
            return Pillar.CRIMINAL
        return Pillar.UNKNOWN


# ════════════════════════════════════════════════════════════════
# Plain-language explanations
# ════════════════════════════════════════════════════════════════


@dataclass
class PillarExplanation:
    pillar: Pillar
    burden_of_proof: str
    overview: str
    next_steps: list[str] = field(default_factory=list)


_EXPLANATIONS: dict[Pillar, tuple[str, str, list[str]]] = {
    Pillar.CRIMINAL: (
        "Beyond a reasonable doubt (criminal standard).",
        "Criminal matters involve allegations of offences against public law brought "
        "by the state. If you are a victim of a crime, contact police; this tool "
        "provides information, not legal advice.",
        [
            "Report to police if an offence occurred",
            "Preserve evidence and get medical attention if needed",
        ],
    ),
    Pillar.CIVIL: (
        "Balance of probabilities (civil standard).",
        "Civil matters involve disputes between private parties, such as negligence "
        "or property damage. Civil claims focus on remedies like damages or specific "
        "performance.",
        [
            "Collect evidence (photos, receipts, witness info)",
            "Consider a demand letter or Small Claims Court for monetary relief",
        ],
    ),
    Pillar.ADMINISTRATIVE: (
        "Varies by tribunal, often a balance of probabilities or specialized statutory tests.",
        "Administrative matters typically go to tribunals or regulatory bodies "
        "(e.g., LTB, HRTO). Procedures and remedies differ from courts.",
        [
            "Check tribunal eligibility and filing deadlines",
            "Gather evidence aligned to tribunal rules",
        ],
    ),
    Pillar.QUASI_CRIMINAL: (
        "Often a lower burden; varies by statute (e.g., provincial offence standards).",
        "Quasi-criminal matters include regulatory offences and by-law violations. "
        "These can carry penalties but follow administrative or enforcement pathways.",
        [
            "Review the by-law or statute for applicable procedures",
            "Consider early resolution options or dispute mechanisms",
        ],
    ),
    Pillar.UNKNOWN: (
        "Varies",
        "The legal pillar could not be determined automatically. Consider providing "
        "more details or seek advice.",
        [
            "Provide more detail",
            "Consult a lawyer or community legal clinic for complex matters",
        ],
    ),
}

_DOMAIN_STEPS: list[tuple[tuple[str, ...], list[str]]] = [
    (
        ("insurance",),
        [
            "Notify your insurer right away and ask for a claim number",
            "Collect policy documents, photos, receipts, and repair estimates",
            "Track deadlines for proofs of loss and appeals set out in the policy",
        ],
    ),
    (
        ("landlord", "ltb", "tenant"),
        [
            "Document every communication with the landlord/tenant (dates, screenshots, letters)",
            "Review Landlord and Tenant Board forms and rules for the remedy you need",
            "Gather evidence of payments, notices given/received, and any safety issues",
        ],
    ),
    (
        ("civil", "small", "negligence"),
        [
            "Calculate damages with receipts, invoices, and income loss proof",
            "Send a concise demand letter with a deadline before issuing a claim",
            "Organize photos, witness info, and timelines to support liability and damages",
        ],
    ),
]


class PillarExplainer:
    """Burden of proof, overview and next steps for a pillar."""

    def explain(self, pillar: Pillar, domain: str | None = None) -> PillarExplanation:
        burden, overview, steps = _EXPLANATIONS.get(pillar, _EXPLANATIONS[Pillar.UNKNOWN])
        return PillarExplanation(
            pillar=pillar if pillar in _EXPLANATIONS else Pillar.UNKNOWN,
            burden_of_proof=burden,
            overview=overview,
            next_steps=[*steps, *self._domain_steps(domain)],
        )

    @staticmethod
    def _domain_steps(domain: str | None) -> list[str]:
        if not domain:
            return []
        d = domain.lower()
        for needles, steps in _DOMAIN_STEPS:
            if any(n in d for n in needles):
                return list(steps)
        return []
