"""Combines per-chunk annotation results into one keyword list."""
from __future__ import annotations

from typing import Iterable

from domain.entities import Annotation, AnnotationSet


class AnnotationMerger:
    """Concatenate annotation sets in chunk order, keeping the first hit per keyword.

    Keywords are compared as exact, case-sensitive strings. No re-ranking is
    applied, so the confidence and URI of the earliest chunk win.
    """

    def merge(self, annotation_sets: Iterable[AnnotationSet]) -> AnnotationSet:
        seen: set[str] = set()
        merged: list[Annotation] = []
        for annotation_set in annotation_sets:
            for annotation in annotation_set:
                if annotation.keyword in seen:
                    continue
                seen.add(annotation.keyword)
                merged.append(annotation)
        return tuple(merged)


__all__ = ["AnnotationMerger"]
