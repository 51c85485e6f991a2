"""Domain entities for the KeywordSuggest system."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Annotation:
    """A keyword or entity spotted by the annotation service."""

    keyword: str
    confidence: float = 0.0
    uri: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"keyword": self.keyword, "confidence": self.confidence, "uri": self.uri}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Annotation":
        return cls(
            keyword=str(data.get("keyword", "")),
            confidence=float(data.get("confidence", 0.0)),
            uri=str(data.get("uri", "")),
        )


AnnotationSet = tuple[Annotation, ...]


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """A cached annotation set together with its lifetime."""

    key: str
    value: AnnotationSet
    created_at: float
    ttl: float

    @property
    def expires_at(self) -> float:
        return self.created_at + self.ttl

    def is_expired(self, now: float) -> bool:
        return now > self.expires_at


__all__ = [
    "Annotation",
    "AnnotationSet",
    "CacheEntry",
]
