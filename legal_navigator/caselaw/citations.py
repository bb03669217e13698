"""Citation formatting for cases and statutes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from legal_navigator.caselaw.canlii import CaseMetadata
from legal_navigator.matter.schema import FEDERAL


@dataclass
class StatuteCitation:
    jurisdiction: str  # Ontario | Federal
    title: str
    url: str
    retrieval_date: str
    provision: str | None = None
    bilingual: bool = False


class CitationFormatter:
    def __init__(self, today: date | None = None) -> None:
        self.today = today

    def format_case(self, meta: CaseMetadata) -> str:
        cite = meta.citation or f"{meta.court} ({meta.decision_date})"
        retrieved = (self.today or date.today()).isoformat()
        return f"{meta.title}, {cite} ({meta.url}, retrieved {retrieved})"

    def format_statute(self, citation: StatuteCitation) -> str:
        base = citation.title
        if citation.provision:
            base += f", {citation.provision}"
        federal = citation.jurisdiction == FEDERAL
        portal = "Justice Laws" if federal else "e-Laws"
        bilingual = " (bilingual text available)" if federal or citation.bilingual else ""
        return f"{base} ({portal}, {citation.url}, retrieved {citation.retrieval_date}){bilingual}"
