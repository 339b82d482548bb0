# Lexical-marker fingerprinting: curated words, phrases, and structural
# patterns that show up disproportionately in formulaic generated prose.

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from data_designer_ai_likelihood.text import context_window, word_count

WORD_CONTEXT_CHARS = 50
PATTERN_CONTEXT_CHARS = 30
HIGH_DENSITY_MIN = 2.0
SCORE_PER_DENSITY_POINT = 25

# ---------------------------------------------------------------------------
# Detection lists
# ---------------------------------------------------------------------------

_MARKER_WORDS = [
    "delve", "tapestry", "landscape", "underscore", "paramount",
    "nuanced", "multifaceted", "testament", "realm", "poised",
    "unwavering", "meticulous", "harnessing", "leveraging",
    "game-changer", "paradigm", "stark", "crucial role", "arguably",
    "notably", "subsequently", "foster", "cultivate", "myriad",
    "intersection", "dichotomy", "juxtapose", "elucidate",
    "disseminate", "ameliorate", "exacerbate", "proliferation",
    "comprehensively", "meticulously", "meticulous", "meticulously",
    "seamlessly", "effortlessly", "intriguingly", "fascinatingly",
    "noteworthily", "significantly", "substantially", "considerably",
    "paradigmatic", "epitomize", "exemplify", "characterize",
    "reverberate", "transcend", "transcending", "transcended",
    "democratize", "revolutionize", "pioneer", "groundbreaking",
]

_MARKER_PHRASES = [
    "it is important to note", "in conclusion", "it is worth noting",
    "on the other hand", "at the end of the day", "all things considered",
    "needless to say", "last but not least", "first and foremost",
    "in a nutshell", "plays a crucial role", "it can be argued",
    "from a theoretical perspective", "it is evident that", "research has shown",
    "studies have demonstrated", "it is clear that", "this suggests that",
    "it is worth mentioning", "it should be noted", "with this in mind",
    "taking this into account", "in light of this", "given these considerations",
    "for the purposes of", "in the realm of", "at its core", "in essence",
    "to sum up", "in summary", "moving forward", "going forward",
    "it is essential to", "it is imperative that", "it is crucial that",
    "there are several factors", "a multitude of", "a plethora of",
    "a wide range of", "time and time again", "over the course of",
    "in the face of", "with regard to", "pertaining to", "in terms of",
    "by and large", "to a large extent", "in a significant way",
    "in meaningful ways", "in profound ways", "in tangible ways",
]

_STRUCTURAL_PATTERNS = [
    r"\b(the|a)\s+\w+\s+(is|are)\s+(characterized by|defined as)",
    r"\b(therefore|thus|hence)\s*,\s+",
    r"\b(moreover|furthermore|additionally)\s*,\s+",
    r"\b(first|second|third|finally)\s*,\s+",
    r"\bin\s+(\w+)\s+(way|manner|fashion)\b",
    r"\bit\s+(is|has|was)\s+\w+\s+(that|which|who)\b",
    r"\bthis\s+\w+\s+(suggests|demonstrates|indicates|reveals)\b",
    r"\bto\s+conclude\b",
    r"\bin\s+closing\b",
    r"\b(to|a)\s+(\w+\s+){1,2}(degree|extent)\b",
]

# Duplicates in the curated lists are collapsed; a repeated entry is not a weight.
_MARKER_WORD_RES = [
    re.compile(r"\b" + re.escape(w) + r"\b", re.IGNORECASE) for w in dict.fromkeys(_MARKER_WORDS)
]
_MARKER_PHRASE_RES = [re.compile(re.escape(p), re.IGNORECASE) for p in dict.fromkeys(_MARKER_PHRASES)]
_STRUCTURAL_RES = [re.compile(p, re.IGNORECASE) for p in _STRUCTURAL_PATTERNS]


class MarkerKind(str, Enum):
    WORD = "word"
    PHRASE = "phrase"
    PATTERN = "pattern"


class DensityBand(str, Enum):
    VERY_FEW = "very-few"
    FEW = "few"
    MODERATE = "moderate"
    MANY = "many"
    VERY_HIGH = "very-high"
    INSUFFICIENT = "insufficient"

    @classmethod
    def from_density(cls, density: float) -> DensityBand:
        if density < 0.5:
            return cls.VERY_FEW
        if density < 1.5:
            return cls.FEW
        if density < 3:
            return cls.MODERATE
        if density < 5:
            return cls.MANY
        return cls.VERY_HIGH

    @property
    def description(self) -> str:
        return _DENSITY_DESCRIPTIONS[self]


_DENSITY_DESCRIPTIONS = {
    DensityBand.VERY_FEW: "Very few AI markers - likely human-written",
    DensityBand.FEW: "Few AI markers detected - possibly edited by human",
    DensityBand.MODERATE: "Moderate AI markers - likely AI-assisted or lightly edited",
    DensityBand.MANY: "Many AI markers - likely AI-generated with minimal editing",
    DensityBand.VERY_HIGH: "Very high AI marker density - strongly characteristic of AI-generated text",
    DensityBand.INSUFFICIENT: "Text too short for reliable analysis",
}


@dataclass(frozen=True)
class DetectedMarker:
    kind: MarkerKind
    value: str
    position: int
    context: str

    def to_payload(self) -> dict[str, object]:
        return {
            "type": self.kind.value,
            "value": self.value,
            "position": self.position,
            "context": self.context,
        }


@dataclass(frozen=True)
class FingerprintResult:
    marker_word_count: int = 0
    marker_phrase_count: int = 0
    pattern_match_count: int = 0
    total_markers: int = 0
    normalized_score: int = 0
    density: float = 0.0
    detected_markers: tuple[DetectedMarker, ...] = field(default_factory=tuple)
    is_high_density: bool = False
    interpretation: DensityBand = DensityBand.INSUFFICIENT

    def to_payload(self) -> dict[str, object]:
        return {
            "marker_word_count": self.marker_word_count,
            "marker_phrase_count": self.marker_phrase_count,
            "pattern_match_count": self.pattern_match_count,
            "total_markers": self.total_markers,
            "normalized_score": self.normalized_score,
            "density": self.density,
            "detected_markers": [m.to_payload() for m in self.detected_markers],
            "is_high_density": self.is_high_density,
            "interpretation": self.interpretation.value,
            "description": self.interpretation.description,
        }


def _scan(text: str, patterns: list[re.Pattern[str]], kind: MarkerKind, width: int) -> list[DetectedMarker]:
    return [
        DetectedMarker(kind, m.group(0), m.start(), context_window(text, m.start(), m.end(), width))
        for pat in patterns
        for m in pat.finditer(text)
    ]


class FingerprintDetector:
    def detect(self, text: str) -> FingerprintResult:
        words = _scan(text, _MARKER_WORD_RES, MarkerKind.WORD, WORD_CONTEXT_CHARS)
        phrases = _scan(text, _MARKER_PHRASE_RES, MarkerKind.PHRASE, WORD_CONTEXT_CHARS)
        patterns = _scan(text, _STRUCTURAL_RES, MarkerKind.PATTERN, PATTERN_CONTEXT_CHARS)

        total = len(words) + len(phrases) + len(patterns)
        wc = word_count(text)
        density = total / wc * 100 if wc else 0.0

        return FingerprintResult(
            marker_word_count=len(words),
            marker_phrase_count=len(phrases),
            pattern_match_count=len(patterns),
            total_markers=total,
            normalized_score=min(100, round(density * SCORE_PER_DENSITY_POINT)),
            density=round(density, 2),
            detected_markers=tuple(words + phrases + patterns),
            is_high_density=density > HIGH_DENSITY_MIN,
            interpretation=DensityBand.from_density(density),
        )


def score_fingerprint(result: FingerprintResult) -> int:
    return result.normalized_score
