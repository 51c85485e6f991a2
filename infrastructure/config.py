"""Dependency wiring for the KeywordSuggest application."""
from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Literal, Mapping

from application.services.annotation_merger import AnnotationMerger
from application.use_cases.get_keywords import DEFAULT_CACHE_TTL, KeywordService
from domain.interfaces import AnnotationClient, CacheStore, TextChunker, TextSanitizer
from infrastructure.annotation.dandelion_client import (
    DEFAULT_ENDPOINT,
    DandelionClient,
    DandelionClientConfig,
)
from infrastructure.cache.in_memory_cache_store import InMemoryCacheStore
from infrastructure.cache.sqlite_cache_store import SqliteCacheStore
from infrastructure.sanitizing.regex_sanitizer import RegexSanitizer
from infrastructure.splitting.fixed_length_chunker import FixedLengthChunker

logger = logging.getLogger(__name__)

CacheBackendName = Literal["memory", "sqlite"]

ENV_PREFIX = "KEYWORDSUGGEST_"


@dataclass(frozen=True, slots=True)
class ServiceConfig:
    """Settings read once at startup and passed to the container."""

    api_key: str = ""
    cache_ttl: float = DEFAULT_CACHE_TTL
    chunk_size: int = 400
    request_timeout: float = 2.0
    endpoint: str = DEFAULT_ENDPOINT
    language: str = "en"
    cache_backend: CacheBackendName = "memory"
    cache_path: str = "keywordsuggest.db"
    cache_max_entries: int = 0
    log_level: str = "INFO"
    log_file: str = ""

    def __post_init__(self) -> None:
        if not math.isfinite(self.cache_ttl) or self.cache_ttl <= 0:
            raise ValueError("cache_ttl must be a finite positive number")
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        if not math.isfinite(self.request_timeout) or self.request_timeout <= 0:
            raise ValueError("request_timeout must be a finite positive number")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level '{self.log_level}'")
        if self.cache_max_entries < 0:
            raise ValueError("cache_max_entries must not be negative")
        if self.cache_backend not in _CACHE_FACTORIES:
            raise ValueError(f"Unknown cache backend '{self.cache_backend}'")

    @classmethod
    def from_mapping(cls, values: Mapping[str, str], prefix: str = ENV_PREFIX) -> "ServiceConfig":
        """Build a config from string settings such as environment variables."""

        def read(name: str) -> str | None:
            value = values.get(prefix + name)
            if value is None or value.strip() == "":
                return None
            return value.strip()

        defaults = cls()
        try:
            return cls(
                api_key=read("DANDELION_API_KEY") or "",
                cache_ttl=float(read("CACHE_TTL") or defaults.cache_ttl),
                chunk_size=int(read("CHUNK_SIZE") or defaults.chunk_size),
                request_timeout=float(read("REQUEST_TIMEOUT") or defaults.request_timeout),
                endpoint=read("DANDELION_URL") or defaults.endpoint,
                language=read("LANGUAGE") or defaults.language,
                cache_backend=(read("CACHE_BACKEND") or defaults.cache_backend).lower(),  # type: ignore[arg-type]
                cache_path=read("CACHE_PATH") or defaults.cache_path,
                cache_max_entries=int(read("CACHE_MAX_ENTRIES") or defaults.cache_max_entries),
                log_level=(read("LOG_LEVEL") or defaults.log_level).upper(),
                log_file=read("LOG_FILE") or defaults.log_file,
            )
        except ValueError as exc:
            raise ValueError(f"Invalid KeywordSuggest configuration: {exc}") from exc

    @classmethod
    def from_env(cls) -> "ServiceConfig":
        return cls.from_mapping(os.environ)


@dataclass(slots=True)
class Container:
    """Simple container bundling concrete infrastructure implementations."""

    config: ServiceConfig
    sanitizer: TextSanitizer
    chunker: TextChunker
    client: AnnotationClient
    merger: AnnotationMerger
    cache: CacheStore
    keyword_service: KeywordService


def _memory_cache(config: ServiceConfig) -> CacheStore:
    return InMemoryCacheStore(max_entries=config.cache_max_entries or None)


def _sqlite_cache(config: ServiceConfig) -> CacheStore:
    return SqliteCacheStore(db_path=Path(config.cache_path))


_CACHE_FACTORIES: dict[str, Callable[[ServiceConfig], CacheStore]] = {
    "memory": _memory_cache,
    "sqlite": _sqlite_cache,
}


def build_default_container(
    config: ServiceConfig | None = None,
    *,
    client: AnnotationClient | None = None,
    cache: CacheStore | None = None,
) -> Container:
    """Instantiate the default infrastructure stack."""

    cfg = config or ServiceConfig.from_env()
    sanitizer = RegexSanitizer()
    chunker = FixedLengthChunker(max_length=cfg.chunk_size)
    if client is None:
        client = DandelionClient(
            DandelionClientConfig(
                endpoint=cfg.endpoint,
                language=cfg.language,
                timeout=cfg.request_timeout,
            )
        )
    merger = AnnotationMerger()
    if cache is None:
        cache = _CACHE_FACTORIES[cfg.cache_backend](cfg)
    if not cfg.api_key:
        logger.warning("Dandelion API key is not configured; only cached results can be served.")
    logger.info(
        "Keyword service configured with %s cache, ttl=%ss, chunk_size=%d.",
        cfg.cache_backend,
        cfg.cache_ttl,
        cfg.chunk_size,
    )

    keyword_service = KeywordService(
        sanitizer=sanitizer,
        chunker=chunker,
        client=client,
        merger=merger,
        cache=cache,
        api_key=cfg.api_key,
        cache_ttl=cfg.cache_ttl,
    )
    return Container(
        config=cfg,
        sanitizer=sanitizer,
        chunker=chunker,
        client=client,
        merger=merger,
        cache=cache,
        keyword_service=keyword_service,
    )


__all__ = ["Container", "ServiceConfig", "build_default_container"]
