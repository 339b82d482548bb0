# AI-likelihood scoring engine.
#
# Runs five independent statistical extractors over a passage (predictability,
# sentence-length dispersion, entropy, stylometry, lexical markers), weights
# their 0-100 sub-scores into one probability, and explains the verdict.

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from enum import Enum
from functools import lru_cache

from data_designer_ai_likelihood.burstiness import (
    BurstinessAnalyzer,
    BurstinessBand,
    BurstinessResult,
    score_burstiness,
)
from data_designer_ai_likelihood.entropy import EntropyAnalyzer, EntropyResult, score_entropy
from data_designer_ai_likelihood.fingerprint import (
    DensityBand,
    FingerprintDetector,
    FingerprintResult,
    score_fingerprint,
)
from data_designer_ai_likelihood.perplexity import (
    PerplexityBand,
    PerplexityCalculator,
    PerplexityResult,
    TrigramModel,
    score_perplexity,
)
from data_designer_ai_likelihood.stylometry import StylometricAnalyzer, StylometricFeatures, score_stylometry
from data_designer_ai_likelihood.text import word_count

logger = logging.getLogger(__name__)

SHORT_TEXT_WORD_COUNT = 10
NEUTRAL_SCORE = 50

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScoringWeights:
    """Weights applied to each sub-score. Designed to sum to 1."""

    predictability: float = 0.30
    dispersion: float = 0.25
    entropy: float = 0.15
    stylometry: float = 0.15
    fingerprint: float = 0.15

    def __post_init__(self) -> None:
        for f in fields(self):
            if getattr(self, f.name) < 0:
                raise ValueError(f"Scoring weight {f.name!r} must be non-negative, got {getattr(self, f.name)}")


DEFAULT_WEIGHTS = ScoringWeights()

# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Verdict(str, Enum):
    DEFINITELY_AI = "Definitely AI"
    LIKELY_AI = "Likely AI"
    POSSIBLY_AI = "Possibly AI"
    UNCERTAIN = "Uncertain"
    POSSIBLY_HUMAN = "Possibly Human"
    LIKELY_HUMAN = "Likely Human"
    DEFINITELY_HUMAN = "Definitely Human"

    @classmethod
    def classify(cls, ai_probability: float) -> Verdict:
        for threshold, verdict in _VERDICT_THRESHOLDS:
            if ai_probability >= threshold:
                return verdict
        return cls.DEFINITELY_HUMAN


# Descending; the first threshold the probability reaches wins.
_VERDICT_THRESHOLDS = (
    (85, Verdict.DEFINITELY_AI),
    (70, Verdict.LIKELY_AI),
    (55, Verdict.POSSIBLY_AI),
    (45, Verdict.UNCERTAIN),
    (30, Verdict.POSSIBLY_HUMAN),
    (15, Verdict.LIKELY_HUMAN),
)


@dataclass(frozen=True)
class SubScore:
    name: str
    value: int
    interpretation: str


@dataclass(frozen=True)
class FeatureBundle:
    predictability: PerplexityResult
    dispersion: BurstinessResult
    entropy: EntropyResult
    stylometry: StylometricFeatures
    fingerprint: FingerprintResult

    def to_payload(self) -> dict[str, object]:
        return {f.name: getattr(self, f.name).to_payload() for f in fields(self)}


@dataclass(frozen=True)
class ResultDetails:
    reason: str
    key_indicators: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    def to_payload(self) -> dict[str, object]:
        return {
            "reason": self.reason,
            "key_indicators": list(self.key_indicators),
            "warnings": list(self.warnings),
        }


@dataclass(frozen=True)
class AIDetectionResult:
    ai_probability: int
    human_probability: int
    confidence: Confidence
    verdict: Verdict
    scores: dict[str, SubScore]
    metrics: FeatureBundle
    recommendations: tuple[str, ...]
    details: ResultDetails
    word_count: int = 0

    def to_payload(self) -> dict[str, object]:
        return {
            "ai_probability": self.ai_probability,
            "human_probability": self.human_probability,
            "confidence": self.confidence.value,
            "verdict": self.verdict.value,
            "scores": {name: s.value for name, s in self.scores.items()},
            "metrics": self.metrics.to_payload(),
            "recommendations": list(self.recommendations),
            "details": self.details.to_payload(),
            "word_count": self.word_count,
        }


# ---------------------------------------------------------------------------
# Decision procedure
# ---------------------------------------------------------------------------


def _confidence(perplexity: PerplexityResult, burstiness: BurstinessResult) -> Confidence:
    perplexity_signal = abs(perplexity.perplexity - 50) / 50
    burstiness_signal = abs(burstiness.burstiness_index - 0.5) / 0.5
    signal = (perplexity_signal + burstiness_signal) / 2
    if signal > 0.5:
        return Confidence.HIGH
    if signal > 0.25:
        return Confidence.MEDIUM
    return Confidence.LOW


def _stylometry_label(features: StylometricFeatures) -> str:
    ttr = features.type_token_ratio
    if ttr < 0.3:
        return "repetitive-vocabulary"
    if ttr < 0.5:
        return "limited-vocabulary"
    if ttr > 0.7:
        return "rich-vocabulary"
    return "typical-vocabulary"


def _recommendations(scores: dict[str, SubScore], metrics: FeatureBundle) -> list[str]:
    out: list[str] = []
    if scores["predictability"].value > 60:
        out.append("Text shows highly predictable patterns - consider varying sentence structures")
    if scores["dispersion"].value > 60:
        out.append("Sentence lengths are very uniform - introduce more variation")
    if scores["fingerprint"].value > 40:
        out.append(
            f"Detected {metrics.fingerprint.marker_word_count} AI-specific words - "
            "replace with more natural alternatives"
        )
    if scores["stylometry"].value > 60:
        out.append("Writing shows AI-typical patterns - add more personal voice and variation")
    if scores["entropy"].value < 30:
        out.append("Text entropy is low - introduce more vocabulary diversity")
    if not out:
        out.append("Text shows natural human writing patterns")
    return out


def _details(scores: dict[str, SubScore], metrics: FeatureBundle) -> ResultDetails:
    key_indicators: list[str] = []
    warnings: list[str] = []

    if scores["predictability"].value > 70:
        key_indicators.append(f"Very predictable text (perplexity: {metrics.predictability.perplexity})")
    if scores["dispersion"].value > 70:
        key_indicators.append(
            f"Extremely uniform sentence lengths (CV: {metrics.dispersion.coefficient_of_variation:.3f})"
        )
    if scores["fingerprint"].value > 50:
        key_indicators.append(f"Contains {metrics.fingerprint.total_markers} AI-specific markers")

    if metrics.stylometry.type_token_ratio < 0.4:
        warnings.append("Low vocabulary diversity detected")
    if metrics.fingerprint.is_high_density:
        prefix = "Very high" if metrics.fingerprint.interpretation is DensityBand.VERY_HIGH else "High"
        warnings.append(
            f"{prefix} marker density: {metrics.fingerprint.density} AI-typical phrases and patterns per 100 words"
        )

    p = scores["predictability"].value
    b = scores["dispersion"].value
    f = scores["fingerprint"].value
    if p >= b and p >= f:
        reason = "Primary indicator is text predictability (perplexity analysis)"
    elif b >= p and b >= f:
        reason = "Primary indicator is uniform sentence structure (burstiness analysis)"
    else:
        reason = "Primary indicator is AI-specific linguistic markers (fingerprint analysis)"

    return ResultDetails(reason=reason, key_indicators=tuple(key_indicators), warnings=tuple(warnings))


def _short_text_result(wc: int) -> AIDetectionResult:
    scores = {
        "predictability": SubScore("predictability", NEUTRAL_SCORE, PerplexityBand.NATURAL.value),
        "dispersion": SubScore("dispersion", NEUTRAL_SCORE, BurstinessBand.INSUFFICIENT.value),
        "entropy": SubScore("entropy", NEUTRAL_SCORE, EntropyResult().interpretation.value),
        "stylometry": SubScore("stylometry", NEUTRAL_SCORE, "insufficient"),
        "fingerprint": SubScore("fingerprint", NEUTRAL_SCORE, DensityBand.INSUFFICIENT.value),
    }
    metrics = FeatureBundle(
        predictability=PerplexityResult(0.0, 0.0, 0, PerplexityBand.NATURAL),
        dispersion=BurstinessResult(),
        entropy=EntropyResult(),
        stylometry=StylometricFeatures(),
        fingerprint=FingerprintResult(),
    )
    return AIDetectionResult(
        ai_probability=NEUTRAL_SCORE,
        human_probability=100 - NEUTRAL_SCORE,
        confidence=Confidence.LOW,
        verdict=Verdict.UNCERTAIN,
        scores=scores,
        metrics=metrics,
        recommendations=("Text is too short for reliable AI detection",),
        details=ResultDetails(
            reason="Insufficient text length for analysis",
            warnings=(f"Analysis may be unreliable for texts under {SHORT_TEXT_WORD_COUNT} words",),
        ),
        word_count=wc,
    )


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


@dataclass
class AIDetectionEngine:
    """Scores passages for AI likelihood.

    Construction trains the trigram model once; :meth:`analyze` is then a pure
    function of its input and is safe to call from several threads.

    Args:
        weights: Sub-score weights. Defaults to :data:`DEFAULT_WEIGHTS`.
        model: A pre-trained model to share between engines. Trained from the
            reference corpus when omitted.
    """

    weights: ScoringWeights | None = DEFAULT_WEIGHTS
    model: TrigramModel = field(default_factory=TrigramModel)

    def __post_init__(self) -> None:
        if self.weights is None:
            self.weights = DEFAULT_WEIGHTS
        self._perplexity = PerplexityCalculator(self.model)
        self._burstiness = BurstinessAnalyzer()
        self._entropy = EntropyAnalyzer()
        self._stylometry = StylometricAnalyzer()
        self._fingerprint = FingerprintDetector()

    def analyze(self, text: str | None) -> AIDetectionResult:
        text = text or ""
        wc = word_count(text)
        if wc < SHORT_TEXT_WORD_COUNT:
            logger.debug(f"Skipping analysis of {wc}-word text (minimum {SHORT_TEXT_WORD_COUNT})")
            return _short_text_result(wc)

        metrics = FeatureBundle(
            predictability=self._perplexity.calculate(text),
            dispersion=self._burstiness.analyze(text),
            entropy=self._entropy.analyze(text),
            stylometry=self._stylometry.extract_features(text),
            fingerprint=self._fingerprint.detect(text),
        )
        scores = {
            "predictability": SubScore(
                "predictability", score_perplexity(metrics.predictability),
                metrics.predictability.interpretation.value,
            ),
            "dispersion": SubScore(
                "dispersion", score_burstiness(metrics.dispersion), metrics.dispersion.interpretation.value
            ),
            "entropy": SubScore("entropy", score_entropy(metrics.entropy), metrics.entropy.interpretation.value),
            "stylometry": SubScore(
                "stylometry", score_stylometry(metrics.stylometry), _stylometry_label(metrics.stylometry)
            ),
            "fingerprint": SubScore(
                "fingerprint", score_fingerprint(metrics.fingerprint), metrics.fingerprint.interpretation.value
            ),
        }

        raw = sum(scores[f.name].value * getattr(self.weights, f.name) for f in fields(self.weights))
        ai_probability = max(0, min(100, round(raw)))

        return AIDetectionResult(
            ai_probability=ai_probability,
            human_probability=100 - ai_probability,
            confidence=_confidence(metrics.predictability, metrics.dispersion),
            verdict=Verdict.classify(ai_probability),
            scores=scores,
            metrics=metrics,
            recommendations=tuple(_recommendations(scores, metrics)),
            details=_details(scores, metrics),
            word_count=wc,
        )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


@lru_cache(maxsize=8)
def _cached_engine(weights: ScoringWeights) -> AIDetectionEngine:
    return AIDetectionEngine(weights=weights)


def get_engine(weights: ScoringWeights | None = None) -> AIDetectionEngine:
    """Return a shared engine for ``weights``, training the model on first use."""
    return _cached_engine(weights or DEFAULT_WEIGHTS)


def analyze_text(text: str | None, weights: ScoringWeights | None = None) -> dict:
    """Score text for AI likelihood.

    Args:
        text: The prose to analyze. ``None`` is treated as empty.
        weights: Optional sub-score weights. Uses the defaults if omitted.

    Returns:
        Dict with keys: ai_probability, human_probability, confidence, verdict,
        scores, metrics, recommendations, details, word_count.
    """
    return get_engine(weights).analyze(text).to_payload()
