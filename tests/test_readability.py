"""Tests for readability scoring."""

from __future__ import annotations

from legal_navigator.language.readability import ReadabilityScorer, syllable_count


class TestReadabilityScorer:
    def setup_method(self):
        self.scorer = ReadabilityScorer()

    def test_plain_text_scores_higher_than_legal_text(self):
        plain = self.scorer.score("The cat sat on the mat. It was warm.")
        legal = self.scorer.score(
            "The plaintiff alleges negligence and breach of contract against the "
            "defendant and respondent in this jurisdiction."
        )
        assert plain.score > legal.score
        assert legal.metrics.legal_term_count == 7

    def test_legal_term_suggestion(self):
        result = self.scorer.score("The plaintiff sued the defendant for damages.")
        assert any("legal terms" in s for s in result.suggestions)

    def test_long_sentence_suggestion(self):
        text = " ".join(["word"] * 30) + "."
        result = self.scorer.score(text)
        assert any("Break long sentences" in s for s in result.suggestions)
        assert result.metrics.avg_sentence_length == 30.0

    def test_clear_text_gets_default_suggestion(self):
        result = self.scorer.score("I paid the rent. He did not fix the sink.")
        assert result.suggestions == ["Text is reasonably clear and accessible"]

    def test_score_clamped(self):
        result = self.scorer.score("")
        assert 0 <= result.score <= 100
        assert result.score == 100
        assert result.grade == "very-easy"

    def test_grade_bands(self):
        assert self.scorer.grade_for(80) == "very-easy"
        assert self.scorer.grade_for(79.9) == "easy"
        assert self.scorer.grade_for(40) == "moderate"
        assert self.scorer.grade_for(20) == "difficult"
        assert self.scorer.grade_for(0) == "very-difficult"

    def test_grade_levels(self):
        assert self.scorer.grade_level_for(95) == 5
        assert self.scorer.grade_level_for(65) == 8
        assert self.scorer.grade_level_for(10) == 16

    def test_grade_description(self):
        assert "university" in ReadabilityScorer.grade_description("very-difficult")


class TestSyllables:
    def test_short_words(self):
        assert syllable_count("cat") == 1
        assert syllable_count("the") == 1

    def test_longer_words(self):
        assert syllable_count("negligence") >= 3
        assert syllable_count("tribunal") == 3
