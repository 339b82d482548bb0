# Vocabulary-richness and syntactic-complexity features plus the rule-based
# stylometry scorer. Part-of-speech ratios are suffix heuristics, not a tagger.

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, fields

from data_designer_ai_likelihood.text import normalized_words, split_sentences, word_count

_STOP_WORDS = frozenset({
    "the", "is", "at", "which", "on", "and", "a", "an", "in", "to",
    "of", "for", "with", "by", "from", "as", "it", "that", "this",
    "be", "are", "was", "were", "has", "have", "had", "been",
    "will", "would", "could", "should", "may", "might", "must",
    "i", "you", "he", "she", "we", "they", "me", "him", "her",
    "my", "your", "his", "its", "our", "their", "what",
    "who", "whom", "where", "when", "why", "how", "all", "each",
    "every", "both", "few", "more", "most", "other", "some", "such",
})

_FUNCTION_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "if", "then", "else",
    "when", "while", "of", "at", "by", "for", "with", "about",
    "against", "between", "into", "through", "during", "before",
    "after", "above", "below", "to", "from", "up", "down", "in",
    "out", "on", "off", "over", "under", "again", "further",
    "once", "i", "you", "he", "she", "it", "we", "they",
    "me", "him", "her", "us", "them", "my", "your", "his", "its",
    "our", "their", "mine", "yours", "hers", "ours", "theirs",
    "this", "that", "these", "those", "is", "are", "was", "were",
    "be", "been", "being", "have", "has", "had", "do", "does", "did",
    "will", "would", "shall", "should", "can", "could", "may", "might",
    "must", "ought", "need", "dare", "let", "please",
})

_VERBS = frozenset({
    "am", "is", "are", "was", "were", "be", "been", "being", "have", "has",
    "had", "do", "does", "did", "will", "would", "shall", "should", "can",
    "could", "may", "might", "must", "need", "dare", "ought", "used",
})

_SUBORDINATOR_RE = re.compile(
    r"\b(that|which|who|whom|whose|where|when|why|how|because|since|although|though"
    r"|while|if|unless|until|before|after|once|than)\b",
    re.IGNORECASE,
)
_CLAUSE_MARK_RE = re.compile(r"[,;]")
_PUNCTUATION_RE = re.compile(r"[.,;:!?()\[\]{}'\"-]")
_NOUN_RE = re.compile(r"\w+(?:ing|tion|ness|ment|ity|ty|er|or|[ae]s)")
_ADJECTIVE_RE = re.compile(r"\w+(?:ful|less|ous|ive|able|ible|ent|ant|ic|al)")

_SYLLABLE_SUFFIX_RE = re.compile(r"(?:[^laeiouy]es|ed|[^laeiouy]e)$")
_LEADING_Y_RE = re.compile(r"^y")
_VOWEL_GROUP_RE = re.compile(r"[aeiouy]{1,2}")
_NON_ALPHA_RE = re.compile(r"[^a-z]")

POLYSYLLABLE_MIN = 3


@dataclass(frozen=True)
class StylometricFeatures:
    # Vocabulary richness
    type_token_ratio: float = 0.0
    hapax_legomena_ratio: float = 0.0
    yules_k: float = 0.0
    simpsons_index: float = 0.0
    # Sentence complexity
    average_sentence_length: float = 0.0
    average_clause_count: float = 0.0
    subordinate_clause_ratio: float = 0.0
    # Word complexity
    average_word_length: float = 0.0
    polysyllable_ratio: float = 0.0
    # Punctuation
    punctuation_variety: int = 0
    comma_to_sentence_ratio: float = 0.0
    # Function words
    function_word_ratio: float = 0.0
    stop_word_frequency: float = 0.0
    # Simplified part-of-speech distribution
    verb_ratio: float = 0.0
    noun_ratio: float = 0.0
    adjective_ratio: float = 0.0

    def to_payload(self) -> dict[str, object]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def count_syllables(word: str) -> int:
    word = _NON_ALPHA_RE.sub("", word.lower())
    if len(word) <= 3:
        return 1
    word = _SYLLABLE_SUFFIX_RE.sub("", word)
    word = _LEADING_Y_RE.sub("", word)
    return len(_VOWEL_GROUP_RE.findall(word)) or 1


def _ratio(part: int | float, whole: int | float, digits: int = 3) -> float:
    return round(part / whole, digits) if whole else 0.0


def _clause_count(sentence: str) -> int:
    return len(_CLAUSE_MARK_RE.findall(sentence)) + 1


def yules_k(frequencies: Counter[str]) -> float:
    """``10000 * (M^2 - sum(n_i^2)) / M^2`` over token frequencies."""
    m = sum(frequencies.values())
    if m == 0:
        return 0.0
    sum_squares = sum(n * n for n in frequencies.values())
    return round(10000 * (m * m - sum_squares) / (m * m), 2)


def simpsons_index(frequencies: Counter[str]) -> float:
    """Simpson's diversity ``1 - sum(n(n-1)) / N(N-1)``; 0 below two tokens."""
    n = sum(frequencies.values())
    if n < 2:
        return 0.0
    d = sum(f * (f - 1) for f in frequencies.values()) / (n * (n - 1))
    return round(1 - d, 3)


class StylometricAnalyzer:
    def extract_features(self, text: str) -> StylometricFeatures:
        words = normalized_words(text)
        sentences = split_sentences(text)
        frequencies = Counter(words)
        total = len(words)

        clauses = sum(_clause_count(s) for s in sentences)
        subordinates = sum(len(_SUBORDINATOR_RE.findall(s)) for s in sentences)

        return StylometricFeatures(
            type_token_ratio=_ratio(len(frequencies), total),
            hapax_legomena_ratio=_ratio(sum(1 for n in frequencies.values() if n == 1), total),
            yules_k=yules_k(frequencies),
            simpsons_index=simpsons_index(frequencies),
            average_sentence_length=_ratio(word_count(text), len(sentences), 1),
            average_clause_count=_ratio(clauses, len(sentences), 1),
            subordinate_clause_ratio=_ratio(subordinates, clauses),
            average_word_length=_ratio(sum(len(w) for w in words), total, 2),
            polysyllable_ratio=_ratio(sum(1 for w in words if count_syllables(w) >= POLYSYLLABLE_MIN), total),
            punctuation_variety=len(set(_PUNCTUATION_RE.findall(text))),
            comma_to_sentence_ratio=_ratio(text.count(","), len(sentences), 2),
            function_word_ratio=_ratio(sum(1 for w in words if w in _FUNCTION_WORDS), total),
            stop_word_frequency=_ratio(sum(1 for w in words if w in _STOP_WORDS), total),
            verb_ratio=_ratio(sum(1 for w in words if w in _VERBS), total),
            noun_ratio=_ratio(sum(1 for w in words if _NOUN_RE.fullmatch(w)), total),
            adjective_ratio=_ratio(sum(1 for w in words if _ADJECTIVE_RE.fullmatch(w)), total),
        )


def score_stylometry(features: StylometricFeatures) -> int:
    score = 50

    ttr = features.type_token_ratio
    if ttr < 0.3:
        score += 20
    elif ttr < 0.5:
        score += 10
    elif ttr > 0.7:
        score -= 15

    if features.function_word_ratio > 0.5:
        score += 15
    if features.function_word_ratio > 0.6:
        score += 10

    if features.polysyllable_ratio < 0.1:
        score += 15
    if features.polysyllable_ratio < 0.15:
        score += 10

    # A narrow 15-25 word band is typical of generated prose.
    if 15 < features.average_sentence_length < 25:
        score += 10

    return max(0, min(100, score))
