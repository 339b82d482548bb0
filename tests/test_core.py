import pytest

from data_designer_ai_likelihood.core import (
    AIDetectionEngine,
    Confidence,
    ScoringWeights,
    SubScore,
    Verdict,
    _details,
    _recommendations,
    analyze_text,
    get_engine,
)

HUMAN_TEXT = (
    "The cat sat on the mat. It was happy. "
    "The sun was warm and the day was long and pleasant outside today."
)

UNIFORM_TEXT = " ".join(
    ["The old house stood silently against the stormy sky security protocols must be strictly enforced at all levels."]
    * 10
)

MARKER_TEXT = " ".join(
    ["It is important to note that results matter. Furthermore, in conclusion the data speaks."] * 8
)

ESSAY_TEXT = (
    "Municipal water systems rarely make the news until something breaks. "
    "Last spring, a main under Fourth Street burst and flooded three basements. "
    "Crews worked through the night. "
    "By morning the pressure was back, but the city council had questions about the maintenance budget, "
    "which had been cut twice in five years while the pipes kept aging."
)

SHORT_TEXT = "Hello world."


@pytest.fixture(scope="module")
def engine() -> AIDetectionEngine:
    return AIDetectionEngine()


class TestShortText:
    @pytest.mark.parametrize("text", ["", "   \n\t ", SHORT_TEXT, "one two three four five six seven eight nine", None])
    def test_returns_neutral_result(self, engine, text):
        result = engine.analyze(text)
        assert result.ai_probability == 50
        assert result.human_probability == 50
        assert result.confidence is Confidence.LOW
        assert result.verdict is Verdict.UNCERTAIN
        assert all(s.value == 50 for s in result.scores.values())
        assert result.recommendations == ("Text is too short for reliable AI detection",)

    def test_ten_words_is_analyzed(self, engine):
        result = engine.analyze("one two three four five six seven eight nine ten")
        assert result.word_count == 10
        assert result.details.reason != "Insufficient text length for analysis"


class TestInvariants:
    @pytest.mark.parametrize("text", [HUMAN_TEXT, UNIFORM_TEXT, MARKER_TEXT, ESSAY_TEXT])
    def test_probabilities_are_complementary(self, engine, text):
        result = engine.analyze(text)
        assert result.ai_probability + result.human_probability == 100
        assert 0 <= result.ai_probability <= 100

    @pytest.mark.parametrize("text", [HUMAN_TEXT, UNIFORM_TEXT, MARKER_TEXT, ESSAY_TEXT])
    def test_sub_scores_in_range(self, engine, text):
        result = engine.analyze(text)
        assert set(result.scores) == {"predictability", "dispersion", "entropy", "stylometry", "fingerprint"}
        for name, sub in result.scores.items():
            assert sub.name == name
            assert 0 <= sub.value <= 100

    def test_verdict_matches_probability(self, engine):
        for text in (HUMAN_TEXT, UNIFORM_TEXT, MARKER_TEXT, ESSAY_TEXT):
            result = engine.analyze(text)
            assert result.verdict is Verdict.classify(result.ai_probability)

    def test_idempotent(self, engine):
        assert engine.analyze(ESSAY_TEXT).to_payload() == engine.analyze(ESSAY_TEXT).to_payload()

    def test_separate_engines_agree(self):
        assert AIDetectionEngine().analyze(ESSAY_TEXT) == AIDetectionEngine().analyze(ESSAY_TEXT)


class TestVerdict:
    def test_thresholds(self):
        assert Verdict.classify(100) is Verdict.DEFINITELY_AI
        assert Verdict.classify(85) is Verdict.DEFINITELY_AI
        assert Verdict.classify(84.9) is Verdict.LIKELY_AI
        assert Verdict.classify(70) is Verdict.LIKELY_AI
        assert Verdict.classify(55) is Verdict.POSSIBLY_AI
        assert Verdict.classify(45) is Verdict.UNCERTAIN
        assert Verdict.classify(30) is Verdict.POSSIBLY_HUMAN
        assert Verdict.classify(15) is Verdict.LIKELY_HUMAN
        assert Verdict.classify(14.99) is Verdict.DEFINITELY_HUMAN
        assert Verdict.classify(0) is Verdict.DEFINITELY_HUMAN

    def test_exhaustive_and_monotonic(self):
        order = list(Verdict)
        previous = len(order)
        for step in range(0, 1001):
            verdict = Verdict.classify(step / 10)
            assert verdict in order
            index = order.index(verdict)
            assert index <= previous
            previous = index


class TestScenarios:
    def test_mixed_sentence_lengths_lean_human(self, engine):
        result = engine.analyze(HUMAN_TEXT)
        assert result.metrics.dispersion.burstiness_index >= 0.35
        assert result.metrics.predictability.interpretation.value in ("natural", "highly-variable")
        assert result.verdict in (Verdict.POSSIBLY_HUMAN, Verdict.LIKELY_HUMAN, Verdict.DEFINITELY_HUMAN)

    def test_uniform_sentences_lean_ai(self, engine):
        result = engine.analyze(UNIFORM_TEXT)
        assert result.metrics.dispersion.burstiness_index < 0.1
        assert result.scores["dispersion"].value >= 90
        assert result.ai_probability >= 70
        assert result.verdict in (Verdict.LIKELY_AI, Verdict.DEFINITELY_AI)
        assert "Sentence lengths are very uniform - introduce more variation" in result.recommendations

    def test_marker_saturated_text(self, engine):
        result = engine.analyze(MARKER_TEXT)
        fingerprint = result.metrics.fingerprint
        assert fingerprint.density > 5
        assert result.scores["fingerprint"].value >= 90
        assert any("very high marker density" in w.lower() for w in result.details.warnings)
        assert any(i.startswith("Contains ") for i in result.details.key_indicators)

    def test_human_text_scores_below_uniform_text(self, engine):
        assert engine.analyze(HUMAN_TEXT).ai_probability < engine.analyze(UNIFORM_TEXT).ai_probability


class TestWeights:
    def test_defaults(self):
        w = ScoringWeights()
        assert (w.predictability, w.dispersion, w.entropy, w.stylometry, w.fingerprint) == (0.30, 0.25, 0.15, 0.15, 0.15)

    def test_negative_weight_rejected(self):
        with pytest.raises(ValueError):
            ScoringWeights(entropy=-0.1)

    def test_single_weight_selects_sub_score(self):
        engine = AIDetectionEngine(weights=ScoringWeights(1.0, 0.0, 0.0, 0.0, 0.0))
        result = engine.analyze(ESSAY_TEXT)
        assert result.ai_probability == result.scores["predictability"].value

    def test_overweighted_probability_is_clamped(self):
        engine = AIDetectionEngine(weights=ScoringWeights(5.0, 5.0, 5.0, 5.0, 5.0))
        result = engine.analyze(UNIFORM_TEXT)
        assert result.ai_probability == 100
        assert result.human_probability == 0

    def test_none_weights_fall_back_to_defaults(self):
        assert AIDetectionEngine(weights=None).weights == ScoringWeights()

    def test_engines_are_cached_per_weights(self):
        assert get_engine(ScoringWeights()) is get_engine(ScoringWeights())

    def test_default_engine_is_shared(self):
        assert get_engine() is get_engine(None) is get_engine(ScoringWeights())

    def test_verdict_follows_rounded_probability(self, engine):
        # fingerprint saturates at 100, so the raw aggregate is 84.6
        boundary = AIDetectionEngine(weights=ScoringWeights(0.0, 0.0, 0.0, 0.0, 0.846), model=engine.model)
        result = boundary.analyze(MARKER_TEXT)
        assert result.ai_probability == 85
        assert result.verdict is Verdict.DEFINITELY_AI


def _scores(predictability, dispersion, entropy, stylometry, fingerprint):
    values = {
        "predictability": predictability,
        "dispersion": dispersion,
        "entropy": entropy,
        "stylometry": stylometry,
        "fingerprint": fingerprint,
    }
    return {name: SubScore(name, value, "") for name, value in values.items()}


class TestDetails:
    @pytest.mark.parametrize(
        ("scores", "keyword"),
        [
            (_scores(80, 60, 50, 50, 10), "perplexity"),
            (_scores(60, 60, 50, 50, 10), "perplexity"),
            (_scores(40, 90, 50, 50, 10), "burstiness"),
            (_scores(40, 60, 50, 50, 75), "fingerprint"),
        ],
    )
    def test_reason_follows_strongest_signal(self, engine, scores, keyword):
        metrics = engine.analyze(ESSAY_TEXT).metrics
        assert keyword in _details(scores, metrics).reason

    def test_natural_writing_recommendation(self, engine):
        metrics = engine.analyze(ESSAY_TEXT).metrics
        assert _recommendations(_scores(40, 45, 55, 60, 40), metrics) == [
            "Text shows natural human writing patterns"
        ]

    def test_one_recommendation_per_triggered_signal(self, engine):
        metrics = engine.analyze(ESSAY_TEXT).metrics
        recommendations = _recommendations(_scores(61, 61, 29, 61, 41), metrics)
        assert len(recommendations) == 5
        assert "Text shows natural human writing patterns" not in recommendations

    def test_low_vocabulary_warning(self, engine):
        result = engine.analyze(UNIFORM_TEXT)
        assert "Low vocabulary diversity detected" in result.details.warnings


class TestAnalyzeText:
    def test_result_shape(self):
        result = analyze_text(ESSAY_TEXT)
        expected_keys = {
            "ai_probability", "human_probability", "confidence", "verdict", "scores",
            "metrics", "recommendations", "details", "word_count",
        }
        assert expected_keys == set(result.keys())
        assert set(result["scores"]) == {"predictability", "dispersion", "entropy", "stylometry", "fingerprint"}
        assert set(result["metrics"]) == {"predictability", "dispersion", "entropy", "stylometry", "fingerprint"}
        assert set(result["details"]) == {"reason", "key_indicators", "warnings"}
        assert result["confidence"] in ("high", "medium", "low")
        assert result["verdict"] in {v.value for v in Verdict}

    def test_payload_is_plain_data(self):
        result = analyze_text(MARKER_TEXT)
        markers = result["metrics"]["fingerprint"]["detected_markers"]
        assert markers
        for m in markers:
            assert set(m) == {"type", "value", "position", "context"}
            assert m["type"] in ("word", "phrase", "pattern")
        assert isinstance(result["metrics"]["dispersion"]["length_distribution"]["quartiles"], list)

    def test_empty_text(self):
        result = analyze_text("")
        assert result["ai_probability"] == 50
        assert result["verdict"] == "Uncertain"
        assert result["word_count"] == 0

    def test_custom_weights(self):
        result = analyze_text(ESSAY_TEXT, weights=ScoringWeights(0.0, 0.0, 0.0, 0.0, 1.0))
        assert result["ai_probability"] == result["scores"]["fingerprint"]
