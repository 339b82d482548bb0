# Shared text segmentation used by every extractor.

from __future__ import annotations

import re

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_PARAGRAPH_SPLIT_RE = re.compile(r"\n\n+")
_NON_WORD_RE = re.compile(r"[^\w\s]")
_NON_WORD_KEEP_APOSTROPHE_RE = re.compile(r"[^\w\s'-]")
_WHITESPACE_RE = re.compile(r"\s+")


def word_count(text: str) -> int:
    return len(text.split())


def split_sentences(text: str) -> list[str]:
    return [s.strip() for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]


def split_paragraphs(text: str) -> list[str]:
    return [p.strip() for p in _PARAGRAPH_SPLIT_RE.split(text) if p.strip()]


def normalized_words(text: str) -> list[str]:
    """Lowercase words with all punctuation treated as a separator."""
    return _NON_WORD_RE.sub(" ", text.lower()).split()


def scoring_words(text: str) -> list[str]:
    """Lowercase words keeping apostrophes and hyphens (``don't``, ``well-known``)."""
    return _NON_WORD_KEEP_APOSTROPHE_RE.sub(" ", text.lower()).split()


def lowercase_tokens(text: str) -> list[str]:
    return text.lower().split()


def context_window(text: str, start: int, end: int, width: int) -> str:
    s = max(0, start - width)
    e = min(len(text), end + width)
    return _WHITESPACE_RE.sub(" ", text[s:e]).strip()
