"""Shared text helpers for the analyzers."""

import re
from typing import Iterable, List, Pattern

WORD_TOKEN = re.compile(r"[A-Za-z0-9'’]+")
LOWER_WORD = re.compile(r"\b[a-z]+\b")
SENTENCE_TERMINATORS = re.compile(r"[.!?]+")
_SENTENCE_WITH_END = re.compile(r"[^.!?]+[.!?]+")
_WHITESPACE = re.compile(r"\s+")
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


def count_word_tokens(text: str) -> int:
    """Count alphanumeric word runs (apostrophes included)."""
    return len(WORD_TOKEN.findall(text))


def split_whitespace(text: str) -> List[str]:
    """Split on whitespace runs, dropping empty tokens."""
    return [w for w in _WHITESPACE.split(text) if w]


def split_sentences(text: str) -> List[str]:
    """Split on terminal punctuation, keeping non-blank stripped pieces."""
    return [s.strip() for s in SENTENCE_TERMINATORS.split(text) if s.strip()]


def sentences_with_terminators(text: str) -> List[str]:
    """Sentences including their closing punctuation (unterminated tail dropped)."""
    return _SENTENCE_WITH_END.findall(text)


def split_blocks(text: str) -> List[str]:
    """Split on blank lines, keeping non-blank blocks."""
    return [p for p in _PARAGRAPH_BREAK.split(text) if p.strip()]


def count_matches(text: str, patterns: Iterable[Pattern]) -> int:
    return sum(len(p.findall(text)) for p in patterns)


def keyword_pattern(keyword: str) -> Pattern:
    """Case-insensitive whole-word pattern for a literal keyword."""
    return re.compile(r"\b" + re.escape(keyword) + r"\b", re.IGNORECASE)


def count_keyword(text: str, keyword: str) -> int:
    return len(keyword_pattern(keyword).findall(text))


def per_thousand(count: float, words: int) -> float:
    """Occurrences per 1000 words, 0.0 for empty text."""
    if words == 0:
        return 0.0
    return count / words * 1000
