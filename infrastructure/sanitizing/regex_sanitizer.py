"""Sanitizer that strips entities, acronym noise and markup with regexes."""
from __future__ import annotations

import re

from domain.interfaces import TextSanitizer

_ENTITY_RE = re.compile(r"&#?[a-z0-9]{2,8};", re.IGNORECASE)
_ACRONYM_RE = re.compile(r"\b[A-Z][A-Z]+\b")
_LINE_BREAK_RE = re.compile(r"<br\s*/?>(?!\n)", re.IGNORECASE)
_TAG_RE = re.compile(r"</?.+?>")


class RegexSanitizer(TextSanitizer):
    """Reduce editor content to plain text before it is annotated.

    The passes run in a fixed order: character entities, runs of two or
    more capital letters, ``<br>`` tags (turned into paragraph breaks) and
    finally every remaining tag. The result is stripped of surrounding
    whitespace.
    """

    def sanitize(self, raw: str) -> str:
        if not raw:
            return ""
        text = _ENTITY_RE.sub("", raw)
        text = _ACRONYM_RE.sub("", text)
        text = _LINE_BREAK_RE.sub("\n\n", text)
        text = _TAG_RE.sub("", text)
        return text.strip()


__all__ = ["RegexSanitizer"]
