"""Abstract interfaces for the KeywordSuggest system."""
from __future__ import annotations

from abc import ABC, abstractmethod

from domain.entities import AnnotationSet


class TextSanitizer(ABC):
    """Turns user-authored markup into plain text."""

    @abstractmethod
    def sanitize(self, raw: str) -> str:
        """Return the normalised plain-text form of ``raw``."""


class TextChunker(ABC):
    """Splits sanitized text into segments the upstream service accepts."""

    @abstractmethod
    def chunk(self, text: str) -> list[str]:
        """Return ordered, non-overlapping chunks covering ``text``."""


class AnnotationClient(ABC):
    """Calls a text-annotation service for a single chunk."""

    @abstractmethod
    def annotate(self, chunk: str, api_key: str) -> AnnotationSet:
        """Return the annotations found in ``chunk``."""


class CacheStore(ABC):
    """Expiring key-value storage for computed annotation sets."""

    @abstractmethod
    def get(self, key: str) -> AnnotationSet | None:
        """Return the cached value, or ``None`` when absent or expired."""

    @abstractmethod
    def put(self, key: str, value: AnnotationSet, ttl: float) -> None:
        """Store ``value`` under ``key`` for ``ttl`` seconds, replacing any entry."""


__all__ = [
    "TextSanitizer",
    "TextChunker",
    "AnnotationClient",
    "CacheStore",
]
