"""
Document Guards — Keep generated text informational, cited and restrained.

Three checks run over every draft before it is packaged:

- StyleGuide: flags advisory wording ("should", "must"), emotional tone,
  and unpunctuated run-on text.
- CitationEnforcer: flags legal statements with no authoritative source
  and cited sources with no retrieval date.
- DisclaimerService: produces the legal-information disclaimer, lays out
  several lawful pathways side by side, and redirects requests for advice.

None of these raise. They return findings; the drafting engine decides
what to do with them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from legal_navigator.matter.schema import ONTARIO

_ADVISORY_WORDS = re.compile(r"(advise|recommend|should|must|guarantee|promise)", re.IGNORECASE)
_EMOTIONAL_TONE = re.compile(r"(outraged|furious|demand|threat)", re.IGNORECASE)
_SENTENCE_PUNCTUATION = re.compile(r"[.?!]")
_ADVISORY_TERMS = re.compile(
    r"(recommend|should|advise you to|we suggest|you must|guarantee)", re.IGNORECASE
)
_ADVICE_REQUEST = re.compile(
    r"(what should I do|can you advise|tell me what to file|should I sue)", re.IGNORECASE
)


@dataclass
class GuardResult:
    ok: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


class StyleGuide:
    RULES = [
        "Use factual, restrained language; avoid advice or directives.",
        "Present multiple lawful pathways instead of a single recommendation.",
        "Cite sources with URLs and retrieval/currency dates.",
        "Redact PII (addresses, phone numbers, SIN, account numbers, DOB).",
        'Prefer neutral verbs ("indicates", "shows") over prescriptive terms ("must", "should").',
    ]

    def rules(self) -> list[str]:
        return list(self.RULES)

    def check(self, text: str) -> GuardResult:
        warnings: list[str] = []
        if _ADVISORY_WORDS.search(text):
            warnings.append("Advisory language detected; rephrase to informational tone.")
        if _EMOTIONAL_TONE.search(text):
            warnings.append("Emotional tone detected; keep restrained and factual.")
        if text and not _SENTENCE_PUNCTUATION.search(text):
            warnings.append("Consider concise sentences with clear punctuation.")
        return GuardResult(ok=not warnings, warnings=warnings)


class CitationEnforcer:
    def ensure_citations(self, text: str, has_citation: bool) -> GuardResult:
        errors: list[str] = []
        warnings: list[str] = []
        if not has_citation:
            errors.append("Uncited legal statement detected: provide authoritative source or omit.")
        if _ADVISORY_TERMS.search(text):
            warnings.append("Language appears advisory; use factual, restrained wording.")
        if '"' in text and not has_citation:
            warnings.append("Quoted material without citation; add source and retrieval date.")
        return GuardResult(ok=not errors, errors=errors, warnings=warnings)

    def verify_retrieval(self, retrieval_date: str | None) -> GuardResult:
        if not retrieval_date:
            return GuardResult(
                ok=False, errors=["Missing retrieval/currency date for cited source."]
            )
        return GuardResult(ok=True)


@dataclass
class PathwayOption:
    label: str
    steps: list[str]
    caveats: list[str] = field(default_factory=list)


@dataclass
class AdviceRedirect:
    redirected: bool
    message: str


class DisclaimerService:
    """Unauthorized-practice boundary: information, never advice."""

    def legal_information_disclaimer(self, jurisdiction: str | None = None) -> str:
        where = jurisdiction or f"{ONTARIO} (verify for your province/territory)"
        return " ".join(
            [
                "This tool provides legal information, not legal advice.",
                f"Applicability: primarily for {where}.",
                "Decisions remain yours; consult a lawyer or licensed paralegal for advice.",
                "Outputs must be verified against current law and your facts.",
                "Sensitive data should be redacted before sharing.",
            ]
        )

    def multi_pathway_presentation(self, options: list[PathwayOption]) -> str:
        if not options:
            return "No pathways available; gather more facts or seek legal advice."
        rendered = []
        for i, option in enumerate(options, start=1):
            steps = " ".join(f"{n}. {step}" for n, step in enumerate(option.steps, start=1))
            caveats = f" Caveats: {' '.join(option.caveats)}" if option.caveats else ""
            rendered.append(f"{i}) {option.label}: {steps}.{caveats}")
        return " ".join(rendered)

    def redirect_advice_request(self, user_text: str) -> AdviceRedirect:
        if _ADVICE_REQUEST.search(user_text):
            return AdviceRedirect(
                redirected=True,
                message=(
                    "I cannot provide legal advice. Here are informational options you may "
                    "consider: internal complaint, tribunal/court intake, ombuds/appeal/judicial "
                    "review. Confirm which applies and seek legal counsel as needed."
                ),
            )
        return AdviceRedirect(redirected=False, message="Proceed with information-only guidance.")

    def boundaries(self, jurisdiction: str | None = None, audience: str = "self-represented") -> str:
        """What the navigator can and cannot do, for display at intake."""
        where = jurisdiction or ONTARIO
        can_do = [
            "Explain general processes (tribunals, courts, complaint steps)",
            "Summarize options with plain language and citations",
            "Help organize evidence and timelines",
            f"Provide information-first guidance tailored to {where}",
        ]
        cannot_do = [
            "Tell you what to file or give legal advice",
            "Draft legal arguments or strategy",
            "Act as your representative or contact the other side for you",
            "Override deadlines or rules",
        ]
        return "\n".join(
            [
                f"For {audience} users:",
                "What We CAN Do:",
                *(f"- {x}" for x in can_do),
                "What We CANNOT Do:",
                *(f"- {x}" for x in cannot_do),
                "If you need advice or representation, contact a lawyer or licensed paralegal.",
            ]
        )
