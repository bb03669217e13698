"""
Readability Scoring — Flesch reading ease adjusted for legal vocabulary.

Generated guidance is aimed at self-represented people, so drafts are
scored and the score is turned into plain suggestions. The legal-term
penalty subtracts up to 50 points in proportion to the share of words
that are common legal terms.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

COMMON_LEGAL_TERMS = frozenset(
    {
        "plaintiff", "defendant", "claimant", "respondent", "damages", "negligence",
        "liability", "breach", "contract", "affidavit", "discovery", "tribunal",
        "statute", "regulation", "jurisdiction", "appeal", "injunction", "remedy",
    }
)

GRADE_DESCRIPTIONS = {
    "very-easy": "Very easy to read. Understood by 11-year-olds.",
    "easy": "Easy to read. Conversational English for consumers.",
    "moderate": "Fairly easy to read. Plain English for general audiences.",
    "difficult": "Difficult to read. Requires post-secondary education.",
    "very-difficult": "Very difficult to read. Best understood by university graduates.",
}

_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_NON_WORD = re.compile(r"[^a-z0-9\s]")
_SILENT_ENDING = re.compile(r"(?:[^laeiouy]es|ed|[^laeiouy]e)$")
_VOWEL_GROUP = re.compile(r"[aeiouy]+")


@dataclass
class ReadabilityMetrics:
    avg_sentence_length: float
    avg_word_length: float
    syllables_per_word: float
    legal_term_count: int
    complex_word_count: int


@dataclass
class ReadabilityScore:
    score: int  # 0-100, higher is easier
    grade: str
    grade_level: int
    suggestions: list[str] = field(default_factory=list)
    metrics: ReadabilityMetrics | None = None


def syllable_count(word: str) -> int:
    word = word.lower()
    if len(word) <= 3:
        return 1
    word = _SILENT_ENDING.sub("", word)
    return max(1, len(_VOWEL_GROUP.findall(word)))


class ReadabilityScorer:
    """Scores plain-language accessibility of text."""

    def __init__(self, legal_terms: frozenset[str] = COMMON_LEGAL_TERMS) -> None:
        self.legal_terms = legal_terms

    def score(self, text: str) -> ReadabilityScore:
        sentences = [s.strip() for s in _SENTENCE_SPLIT.split(text) if s.strip()]
        words = [w for w in _NON_WORD.sub(" ", text.lower()).split() if w]
        word_count = max(len(words), 1)

        syllables = sum(syllable_count(w) for w in words)
        avg_sentence_length = len(words) / max(len(sentences), 1)
        avg_word_length = len("".join(words)) / word_count
        syllables_per_word = syllables / word_count
        legal_terms = sum(1 for w in words if w in self.legal_terms)
        complex_words = sum(1 for w in words if syllable_count(w) >= 3)

        flesch = 206.835 - 1.015 * avg_sentence_length - 84.6 * syllables_per_word
        penalty = legal_terms / word_count * 50
        adjusted = max(0.0, min(100.0, flesch - penalty))

        return ReadabilityScore(
            score=round(adjusted),
            grade=self.grade_for(adjusted),
            grade_level=self.grade_level_for(adjusted),
            suggestions=self._suggestions(
                avg_sentence_length, syllables_per_word, legal_terms, complex_words, word_count
            ),
            metrics=ReadabilityMetrics(
                avg_sentence_length=round(avg_sentence_length, 1),
                avg_word_length=round(avg_word_length, 1),
                syllables_per_word=round(syllables_per_word, 1),
                legal_term_count=legal_terms,
                complex_word_count=complex_words,
            ),
        )

    @staticmethod
    def grade_for(score: float) -> str:
        if score >= 80:
            return "very-easy"
        if score >= 60:
            return "easy"
        if score >= 40:
            return "moderate"
        if score >= 20:
            return "difficult"
        return "very-difficult"

    @staticmethod
    def grade_level_for(score: float) -> int:
        for floor, level in ((90, 5), (80, 6), (70, 7), (60, 8), (50, 10), (40, 12), (30, 13)):
            if score >= floor:
                return level
        return 16

    @staticmethod
    def grade_description(grade: str) -> str:
        return GRADE_DESCRIPTIONS[grade]

    @staticmethod
    def _suggestions(
        avg_sentence_length: float,
        syllables_per_word: float,
        legal_terms: int,
        complex_words: int,
        word_count: int,
    ) -> list[str]:
        suggestions = []
        if avg_sentence_length > 20:
            suggestions.append(
                "Break long sentences into shorter ones (aim for 15-20 words per sentence)"
            )
        if syllables_per_word > 1.7:
            suggestions.append("Use simpler words where possible (fewer syllables)")
        if legal_terms / word_count > 0.05:
            suggestions.append(
                "Consider explaining legal terms in plain language or adding tooltips"
            )
        if complex_words / word_count > 0.15:
            suggestions.append("Replace complex words with simpler alternatives where appropriate")
        if not suggestions:
            suggestions.append("Text is reasonably clear and accessible")
        return suggestions
