# Sentence-length variation ("burstiness"). Human writing mixes short and long
# sentences; generated text tends toward a narrow band of lengths.

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum

from data_designer_ai_likelihood.text import split_paragraphs, split_sentences, word_count

HISTOGRAM_BINS = 10
LOW_BURSTINESS_MAX = 0.35
HUMAN_BURSTINESS_MIN = 0.5


class BurstinessBand(str, Enum):
    VERY_UNIFORM = "very-uniform"
    LOW = "low"
    MODERATE = "moderate"
    GOOD = "good"
    HIGH = "high"
    INSUFFICIENT = "insufficient"

    @classmethod
    def from_index(cls, index: float) -> BurstinessBand:
        if index < 0.25:
            return cls.VERY_UNIFORM
        if index < LOW_BURSTINESS_MAX:
            return cls.LOW
        if index < HUMAN_BURSTINESS_MIN:
            return cls.MODERATE
        if index < 0.7:
            return cls.GOOD
        return cls.HIGH

    @property
    def description(self) -> str:
        return _BAND_DESCRIPTIONS[self]


_BAND_DESCRIPTIONS = {
    BurstinessBand.VERY_UNIFORM: "Very uniform sentence lengths - highly characteristic of AI-generated text",
    BurstinessBand.LOW: "Low burstiness - likely AI-generated or highly edited text",
    BurstinessBand.MODERATE: "Moderate burstiness - possibly human with some editing",
    BurstinessBand.GOOD: "Good burstiness - characteristic of natural human writing",
    BurstinessBand.HIGH: "High burstiness - typical of casual or spontaneous human writing",
    BurstinessBand.INSUFFICIENT: "Text too short for reliable analysis",
}


@dataclass(frozen=True)
class LengthDistribution:
    min: int = 0
    max: int = 0
    median: float = 0.0
    mode: int = 0
    quartiles: tuple[float, float, float] = (0.0, 0.0, 0.0)
    histogram: tuple[int, ...] = ()

    def to_payload(self) -> dict[str, object]:
        return {
            "min": self.min,
            "max": self.max,
            "median": self.median,
            "mode": self.mode,
            "quartiles": list(self.quartiles),
            "histogram": list(self.histogram),
        }


@dataclass(frozen=True)
class BurstinessResult:
    sentence_mean: float = 0.0
    sentence_std_dev: float = 0.0
    coefficient_of_variation: float = 0.0
    burstiness_index: float = 0.0
    length_distribution: LengthDistribution = field(default_factory=LengthDistribution)
    paragraph_mean: float = 0.0
    paragraph_std_dev: float = 0.0
    is_low_burstiness: bool = False
    is_human_burstiness: bool = False
    interpretation: BurstinessBand = BurstinessBand.INSUFFICIENT

    def to_payload(self) -> dict[str, object]:
        return {
            "sentence_mean": self.sentence_mean,
            "sentence_std_dev": self.sentence_std_dev,
            "coefficient_of_variation": self.coefficient_of_variation,
            "burstiness_index": self.burstiness_index,
            "length_distribution": self.length_distribution.to_payload(),
            "paragraph_burstiness": {"mean": self.paragraph_mean, "std_dev": self.paragraph_std_dev},
            "is_low_burstiness": self.is_low_burstiness,
            "is_human_burstiness": self.is_human_burstiness,
            "interpretation": self.interpretation.value,
            "description": self.interpretation.description,
        }


# ---------------------------------------------------------------------------
# Statistics helpers
# ---------------------------------------------------------------------------


def _mean(values: list[int]) -> float:
    return sum(values) / len(values) if values else 0.0


def _std_dev(values: list[int], mean: float) -> float:
    if not values:
        return 0.0
    return math.sqrt(sum((v - mean) ** 2 for v in values) / len(values))


def _median(values: list[int]) -> float:
    if not values:
        return 0.0
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[mid]
    return (ordered[mid - 1] + ordered[mid]) / 2


def _mode(values: list[int]) -> int:
    if not values:
        return 0
    # Counter preserves first-seen order, so ties go to the earliest value.
    return Counter(values).most_common(1)[0][0]


def percentile(ordered: list[int], p: float) -> float:
    """Linear-interpolated percentile of an already sorted list."""
    if not ordered:
        return 0.0
    index = (p / 100) * (len(ordered) - 1)
    lower, upper = math.floor(index), math.ceil(index)
    if lower == upper:
        return ordered[lower]
    weight = index - lower
    return ordered[lower] * (1 - weight) + ordered[upper] * weight


def _histogram(values: list[int]) -> tuple[int, ...]:
    if not values:
        return ()
    bin_size = math.ceil(max(values) / HISTOGRAM_BINS)
    bins = [0] * HISTOGRAM_BINS
    for v in values:
        index = min(v // bin_size, HISTOGRAM_BINS - 1) if bin_size else 0
        bins[index] += 1
    return tuple(bins)


def length_distribution(lengths: list[int]) -> LengthDistribution:
    if not lengths:
        return LengthDistribution()
    ordered = sorted(lengths)
    return LengthDistribution(
        min=ordered[0],
        max=ordered[-1],
        median=_median(lengths),
        mode=_mode(lengths),
        quartiles=(percentile(ordered, 25), percentile(ordered, 50), percentile(ordered, 75)),
        histogram=_histogram(lengths),
    )


# ---------------------------------------------------------------------------
# Analyzer
# ---------------------------------------------------------------------------


class BurstinessAnalyzer:
    def analyze(self, text: str) -> BurstinessResult:
        lengths = [word_count(s) for s in split_sentences(text)]
        mean = _mean(lengths)
        std_dev = _std_dev(lengths, mean)
        cv = std_dev / mean if mean > 0 else 0.0

        paragraph_lengths = [word_count(p) for p in split_paragraphs(text)]
        paragraph_mean = _mean(paragraph_lengths)

        return BurstinessResult(
            sentence_mean=round(mean, 1),
            sentence_std_dev=round(std_dev, 1),
            coefficient_of_variation=round(cv, 3),
            burstiness_index=round(cv, 3),
            length_distribution=length_distribution(lengths),
            paragraph_mean=round(paragraph_mean, 1),
            paragraph_std_dev=round(_std_dev(paragraph_lengths, paragraph_mean), 1),
            is_low_burstiness=cv < LOW_BURSTINESS_MAX,
            is_human_burstiness=cv > HUMAN_BURSTINESS_MIN,
            interpretation=BurstinessBand.from_index(cv),
        )


def score_burstiness(result: BurstinessResult) -> int:
    """Map the coefficient of variation to a sub-score; never increases as CV grows."""
    cv = result.coefficient_of_variation
    if cv < 0.2:
        return 90
    if cv < 0.3:
        return 75
    if cv < 0.4:
        return 60
    if cv < 0.5:
        return 45
    if cv < 0.6:
        return 30
    if cv < 0.75:
        return 20
    return 10
