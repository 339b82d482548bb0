# Information-density measures: character, word, byte, and conditional entropy.

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from data_designer_ai_likelihood.text import lowercase_tokens

MAX_ALPHABET = 256


class EntropyBand(str, Enum):
    LOW = "low-entropy"
    MODERATE = "moderate-entropy"
    HIGH = "high-entropy"

    @classmethod
    def from_normalized(cls, normalized: float) -> EntropyBand:
        if normalized < 0.85:
            return cls.LOW
        if normalized < 0.95:
            return cls.MODERATE
        return cls.HIGH


@dataclass(frozen=True)
class EntropyResult:
    shannon_entropy: float = 0.0
    word_entropy: float = 0.0
    conditional_entropy: float = 0.0
    normalized_shannon: float = 0.0
    byte_entropy: float = 0.0
    interpretation: EntropyBand = EntropyBand.MODERATE

    def to_payload(self) -> dict[str, object]:
        return {
            "shannon_entropy": self.shannon_entropy,
            "word_entropy": self.word_entropy,
            "conditional_entropy": self.conditional_entropy,
            "normalized_shannon": self.normalized_shannon,
            "byte_entropy": self.byte_entropy,
            "interpretation": self.interpretation.value,
        }


def _distribution_entropy(symbols: Iterable[object]) -> float:
    counts = Counter(symbols)
    total = sum(counts.values())
    if total == 0:
        return 0.0
    return -sum((c / total) * math.log2(c / total) for c in counts.values())


def shannon_entropy(text: str) -> float:
    """Character-level Shannon entropy in bits."""
    return round(_distribution_entropy(text), 3)


def word_entropy(text: str) -> float:
    return round(_distribution_entropy(lowercase_tokens(text)), 3)


def byte_entropy(text: str) -> float:
    return round(_distribution_entropy(text.encode("utf-8")), 3)


def conditional_entropy(text: str, ngram_size: int = 2) -> float:
    """Mean surprisal of the word ``ngram_size`` positions after each context.

    The follower distribution of every ``ngram_size - 1`` word context is
    estimated from the text itself. Each position then scores the word
    ``ngram_size`` tokens ahead against its context's followers; positions
    whose word never follows that context are left out of the mean.
    """
    tokens = lowercase_tokens(text)
    width = ngram_size - 1
    if width < 1 or len(tokens) < ngram_size + 1:
        return 0.0

    followers: dict[tuple[str, ...], Counter[str]] = {}
    for i in range(len(tokens) - width):
        context = tuple(tokens[i : i + width])
        followers.setdefault(context, Counter())[tokens[i + width]] += 1

    total = 0.0
    count = 0
    for i in range(len(tokens) - ngram_size):
        words = followers[tuple(tokens[i : i + width])]
        seen = words[tokens[i + ngram_size]]
        if seen == 0:
            continue
        total -= math.log2(seen / sum(words.values()))
        count += 1
    return round(total / count, 3) if count else 0.0


def normalized_entropy(text: str) -> float:
    """Character entropy divided by the maximum possible for the text's length."""
    max_entropy = math.log2(min(len(text), MAX_ALPHABET)) if text else 0.0
    if max_entropy <= 0:
        return 0.0
    return round(shannon_entropy(text) / max_entropy, 3)


class EntropyAnalyzer:
    def analyze(self, text: str) -> EntropyResult:
        normalized = normalized_entropy(text)
        return EntropyResult(
            shannon_entropy=shannon_entropy(text),
            word_entropy=word_entropy(text),
            conditional_entropy=conditional_entropy(text),
            normalized_shannon=normalized,
            byte_entropy=byte_entropy(text),
            interpretation=EntropyBand.from_normalized(normalized),
        )


def score_entropy(result: EntropyResult) -> int:
    norm = result.normalized_shannon
    if norm < 0.8:
        return 85
    if norm < 0.85:
        return 70
    if norm < 0.9:
        return 55
    if norm < 0.95:
        return 40
    return 25
