"""Cache key derivation for keyword requests."""
from __future__ import annotations

import hashlib

CACHE_KEY_PREFIX = "keywords:"


def compute_cache_key(text: str) -> str:
    """Return a namespaced SHA-256 digest of ``text``."""
    digest = hashlib.sha256(text.encode("utf-8")).hexdigest()
    return f"{CACHE_KEY_PREFIX}{digest}"


__all__ = ["CACHE_KEY_PREFIX", "compute_cache_key"]
