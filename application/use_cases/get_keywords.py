"""Use case that turns a piece of content into keyword suggestions."""
from __future__ import annotations

import logging

from application.services.annotation_merger import AnnotationMerger
from application.services.fingerprint import compute_cache_key
from domain.entities import AnnotationSet
from domain.errors import InvalidInputError, MissingCredentialError, NoKeywordsFoundError
from domain.interfaces import AnnotationClient, CacheStore, TextChunker, TextSanitizer

logger = logging.getLogger(__name__)

DEFAULT_CACHE_TTL = 3600.0


class KeywordService:
    """Sanitize, chunk, annotate and merge content, caching non-empty results.

    The cache key is derived from the raw input, before sanitization. A
    failure on any chunk aborts the request and nothing is cached.
    """

    def __init__(
        self,
        *,
        sanitizer: TextSanitizer,
        chunker: TextChunker,
        client: AnnotationClient,
        merger: AnnotationMerger,
        cache: CacheStore,
        api_key: str = "",
        cache_ttl: float = DEFAULT_CACHE_TTL,
    ) -> None:
        self._sanitizer = sanitizer
        self._chunker = chunker
        self._client = client
        self._merger = merger
        self._cache = cache
        self._api_key = api_key
        self._cache_ttl = cache_ttl

    def get_keywords(self, raw_text: str, use_cache: bool = False) -> AnnotationSet:
        if not raw_text:
            raise InvalidInputError()

        sanitized = self._sanitizer.sanitize(raw_text)
        key = compute_cache_key(raw_text)

        if use_cache:
            cached = self._cache.get(key)
            if cached:
                logger.debug("Cache hit for %s.", key)
                return cached
            logger.debug("Cache miss for %s.", key)

        if not self._api_key:
            raise MissingCredentialError()

        chunks = self._chunker.chunk(sanitized)
        logger.debug("Annotating %d chunk(s).", len(chunks))
        results = [self._client.annotate(chunk, self._api_key) for chunk in chunks]

        merged = self._merger.merge(results)
        if not merged:
            raise NoKeywordsFoundError()

        self._cache.put(key, merged, self._cache_ttl)
        return merged


__all__ = ["KeywordService", "DEFAULT_CACHE_TTL"]
