import pytest

from data_designer_ai_likelihood.entropy import (
    EntropyAnalyzer,
    EntropyBand,
    EntropyResult,
    byte_entropy,
    conditional_entropy,
    normalized_entropy,
    score_entropy,
    shannon_entropy,
    word_entropy,
)


class TestEntropyMeasures:
    def test_character_entropy(self):
        assert shannon_entropy("aaaa") == 0.0
        assert shannon_entropy("abab") == 1.0
        assert shannon_entropy("abcd") == 2.0
        assert shannon_entropy("") == 0.0

    def test_word_entropy_is_case_insensitive(self):
        assert word_entropy("Alpha beta alpha BETA") == 1.0
        assert word_entropy("same same same") == 0.0

    def test_byte_entropy_counts_utf8_bytes(self):
        assert shannon_entropy("é") == 0.0
        assert byte_entropy("é") == 1.0

    def test_normalized_entropy(self):
        assert normalized_entropy("abcd") == 1.0
        assert normalized_entropy("a") == 0.0
        assert normalized_entropy("") == 0.0

    def test_conditional_entropy_of_fixed_pairs_is_zero(self):
        assert conditional_entropy("a b a b a b") == 0.0

    def test_conditional_entropy_scores_two_words_ahead(self):
        # the word two positions on never follows its context directly
        assert conditional_entropy("a b a c a b a c") == 0.0

    def test_conditional_entropy_skips_unseen_followers(self):
        # "a" is followed by a, b and c once each; the last position ("b" -> "c") is skipped
        assert conditional_entropy("a a b a c") == pytest.approx(1.585)

    def test_conditional_entropy_needs_three_tokens(self):
        assert conditional_entropy("a b") == 0.0


class TestEntropyAnalyzer:
    def test_english_prose_is_low_entropy(self):
        result = EntropyAnalyzer().analyze(
            "Municipal water systems rarely make the news until something breaks, "
            "and then everyone suddenly wants to know who was responsible for the pipes."
        )
        assert 3.5 < result.shannon_entropy < 5
        assert result.normalized_shannon < 0.8
        assert result.interpretation is EntropyBand.LOW
        assert score_entropy(result) == 85

    def test_payload(self):
        payload = EntropyAnalyzer().analyze("abcd").to_payload()
        assert payload["normalized_shannon"] == 1.0
        assert payload["interpretation"] == "high-entropy"


class TestScoring:
    @pytest.mark.parametrize(
        ("normalized", "band"),
        [(0.5, EntropyBand.LOW), (0.85, EntropyBand.MODERATE), (0.949, EntropyBand.MODERATE), (0.95, EntropyBand.HIGH)],
    )
    def test_bands(self, normalized, band):
        assert EntropyBand.from_normalized(normalized) is band

    @pytest.mark.parametrize(
        ("normalized", "score"), [(0.2, 85), (0.8, 70), (0.85, 55), (0.9, 40), (0.95, 25), (1.0, 25)]
    )
    def test_score_table(self, normalized, score):
        assert score_entropy(EntropyResult(normalized_shannon=normalized)) == score
