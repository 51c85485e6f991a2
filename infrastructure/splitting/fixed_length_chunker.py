"""Chunker that cuts text into fixed-size character windows."""
from __future__ import annotations

from domain.interfaces import TextChunker


class FixedLengthChunker(TextChunker):
    """Split text every ``max_length`` characters, without overlap.

    Boundaries ignore words and sentences, so a chunk may end mid-word.
    """

    def __init__(self, max_length: int = 400) -> None:
        if max_length <= 0:
            raise ValueError("max_length must be positive")
        self.max_length = max_length

    def chunk(self, text: str) -> list[str]:
        chunks: list[str] = []
        for start in range(0, len(text), self.max_length):
            chunks.append(text[start : start + self.max_length])
        return chunks


__all__ = ["FixedLengthChunker"]
