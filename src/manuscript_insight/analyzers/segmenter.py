"""Paragraph segmentation."""

import re
from typing import List, Optional, Tuple

from ..models import Paragraph
from ._text import count_word_tokens
from .base import BaseAnalyzer

_BLANK_LINES = re.compile(r"\n\s*\n+")


def extract_paragraphs(text: str) -> List[Paragraph]:
    """Split text into non-empty paragraphs with character offsets.

    CRLF is normalized to LF first, so offsets refer to the normalized text.
    """
    normalized = text.replace("\r\n", "\n")
    if not normalized.strip():
        return []

    paragraphs: List[Paragraph] = []
    search_index = 0

    for raw in _BLANK_LINES.split(normalized):
        trimmed = raw.strip()
        if not trimmed:
            search_index += len(raw)
            continue

        start = normalized.find(trimmed, search_index)
        if start == -1:
            continue
        end = start + len(trimmed)

        paragraphs.append(
            Paragraph(
                id=str(len(paragraphs)),
                text=trimmed,
                start_index=start,
                end_index=end,
                char_count=len(trimmed),
                word_count=count_word_tokens(trimmed),
            )
        )

        search_index = end
        while search_index < len(normalized) and normalized[search_index].isspace():
            search_index += 1

    return paragraphs


class ParagraphSegmenter(BaseAnalyzer):
    """Segmenter slot: ``segment(text)`` returns the ordered paragraph tuple."""

    name = "segmenter"

    def segment(self, text: str) -> Tuple[Paragraph, ...]:
        return tuple(extract_paragraphs(text))

    def analyze(self, text: str, genre: Optional[str] = None) -> Tuple[Paragraph, ...]:
        return self.segment(text)
