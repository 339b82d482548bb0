# Trigram language model with absolute-discount smoothing, and the perplexity
# calculator that scores text against it.
#
# The reference corpus is tiny, so absolute perplexities are only meaningful
# relative to the fixed thresholds below.

from __future__ import annotations

import logging
import math
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from data_designer_ai_likelihood.corpus import REFERENCE_CORPUS
from data_designer_ai_likelihood.text import normalized_words, scoring_words

logger = logging.getLogger(__name__)

MIN_TOKENS = 5
NEUTRAL_PERPLEXITY = 100.0


class PerplexityBand(str, Enum):
    HIGHLY_PREDICTABLE = "highly-predictable"
    PREDICTABLE = "predictable"
    NATURAL = "natural"
    HIGHLY_VARIABLE = "highly-variable"

    @classmethod
    def from_perplexity(cls, perplexity: float) -> PerplexityBand:
        if perplexity < 15:
            return cls.HIGHLY_PREDICTABLE
        if perplexity < 30:
            return cls.PREDICTABLE
        if perplexity < 70:
            return cls.NATURAL
        return cls.HIGHLY_VARIABLE


@dataclass(frozen=True)
class PerplexityResult:
    perplexity: float
    log_probability: float
    token_count: int
    interpretation: PerplexityBand

    def to_payload(self) -> dict[str, object]:
        return {
            "perplexity": self.perplexity,
            "log_probability": self.log_probability,
            "token_count": self.token_count,
            "interpretation": self.interpretation.value,
        }


# ---------------------------------------------------------------------------
# Language model
# ---------------------------------------------------------------------------


class TrigramModel:
    """Fixed-order n-gram model trained once from a corpus.

    Probabilities use absolute discounting: ``discount`` is subtracted from
    every observed (context, word) count and the freed mass is redistributed
    in proportion to the word's continuation probability. Unseen contexts
    back off to the next-shorter context and finally to an add-``smoothing``
    unigram estimate.

    The model is never mutated after ``__init__``; share one instance freely.
    """

    def __init__(self, corpus: Iterable[str] = REFERENCE_CORPUS, order: int = 3,
                 discount: float = 0.75, smoothing: float = 0.1) -> None:
        self.order = order
        self.discount = discount
        self.smoothing = smoothing

        followers: dict[tuple[str, ...], Counter[str]] = {}
        context_counts: Counter[tuple[str, ...]] = Counter()
        sentences = 0
        for sentence in corpus:
            sentences += 1
            tokens = normalized_words(sentence)
            for i in range(len(tokens) - order + 1):
                context = tuple(tokens[i : i + order - 1])
                word = tokens[i + order - 1]
                context_counts[context] += 1
                followers.setdefault(context, Counter())[word] += 1

        # Every context is counted once per occurrence, so the total number of
        # observed n-grams doubles as the denominator of both lower-order
        # estimates.
        self._followers = followers
        self._context_counts = context_counts
        self._total = sum(context_counts.values())
        self._unigram_counts: Counter[str] = Counter()
        self._continuation_counts: Counter[str] = Counter()
        for context, words in followers.items():
            self._unigram_counts.update(words)
            for word in words:
                self._continuation_counts[word] += context_counts[context]
        self._denominator = self._total + len(followers) * smoothing

        logger.debug(
            f"Trained {order}-gram model on {sentences} sentences "
            f"({len(followers)} contexts, {self._total} n-grams)"
        )

    @property
    def context_size(self) -> int:
        return self.order - 1

    @property
    def ngram_count(self) -> int:
        return self._total

    def probability(self, word: str, context: tuple[str, ...]) -> float:
        """Smoothed ``P(word | context)``; ``context`` holds at most ``order - 1`` words."""
        if len(context) > self.context_size:
            context = context[len(context) - self.context_size :]
        count = self._context_counts.get(context, 0)
        if count == 0:
            return self._backoff(word, context)
        words = self._followers[context]
        discounted = max(0.0, words.get(word, 0) - self.discount)
        reserved = self.discount * len(words) / count
        return discounted / count + reserved * self.continuation_probability(word)

    def _backoff(self, word: str, context: tuple[str, ...]) -> float:
        # Recursion depth is bounded by len(context) <= order - 1.
        if len(context) <= 1:
            return self.unigram_probability(word)
        return self.probability(word, context[1:])

    def unigram_probability(self, word: str) -> float:
        return (self._unigram_counts.get(word, 0) + self.smoothing) / self._denominator

    def continuation_probability(self, word: str) -> float:
        """Share of observed contexts in which ``word`` has appeared as a continuation."""
        return (self._continuation_counts.get(word, 0) + self.smoothing) / self._denominator


# ---------------------------------------------------------------------------
# Perplexity
# ---------------------------------------------------------------------------


class PerplexityCalculator:
    def __init__(self, model: TrigramModel | None = None) -> None:
        self.model = model if model is not None else TrigramModel()

    def calculate(self, text: str) -> PerplexityResult:
        tokens = scoring_words(text)
        if len(tokens) < MIN_TOKENS:
            return PerplexityResult(0.0, 0.0, len(tokens), PerplexityBand.NATURAL)

        context_size = self.model.context_size
        log_probs: list[float] = []
        for i, word in enumerate(tokens):
            context = tuple(tokens[max(0, i - context_size) : i])
            prob = self.model.probability(word, context)
            if prob > 0:
                log_probs.append(math.log2(prob))

        if not log_probs:
            return PerplexityResult(NEUTRAL_PERPLEXITY, 0.0, len(tokens), PerplexityBand.NATURAL)

        avg_log_prob = sum(log_probs) / len(log_probs)
        perplexity = 2 ** -avg_log_prob
        return PerplexityResult(
            perplexity=round(perplexity, 2),
            log_probability=round(avg_log_prob, 2),
            token_count=len(log_probs),
            interpretation=PerplexityBand.from_perplexity(perplexity),
        )


def score_perplexity(result: PerplexityResult) -> int:
    """Map perplexity to an AI-likelihood sub-score; lower perplexity scores higher."""
    p = result.perplexity
    if p == 0:
        return 50
    if p < 10:
        return 95
    if p < 20:
        return 85
    if p < 30:
        return 70
    if p < 45:
        return 55
    if p < 60:
        return 40
    if p < 80:
        return 25
    return 10
