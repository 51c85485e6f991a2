"""Client for the Dandelion entity-extraction API."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import requests

from domain.entities import Annotation, AnnotationSet
from domain.errors import MissingCredentialError, UpstreamUnavailableError
from domain.interfaces import AnnotationClient

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://api.dandelion.eu/datatxt/nex/v1/"


@dataclass(frozen=True, slots=True)
class DandelionClientConfig:
    endpoint: str = DEFAULT_ENDPOINT
    language: str = "en"
    timeout: float = 2.0


class DandelionClient(AnnotationClient):
    """Annotate one chunk of text per call against the Dandelion NEX endpoint.

    ``timeout`` is handed to ``requests`` as is, so it bounds the connect and
    each wait between received bytes rather than the whole exchange. An
    upstream that trickles its body can take longer than ``timeout`` overall.
    """

    def __init__(self, config: DandelionClientConfig | None = None) -> None:
        self._config = config or DandelionClientConfig()

    def annotate(self, chunk: str, api_key: str) -> AnnotationSet:
        if not api_key:
            raise MissingCredentialError()

        try:
            response = requests.get(
                self._config.endpoint,
                params={"text": chunk, "token": api_key, "lang": self._config.language},
                timeout=self._config.timeout,
            )
            response.raise_for_status()
        except requests.Timeout as exc:
            logger.warning("Dandelion request timed out after %.1fs.", self._config.timeout)
            raise UpstreamUnavailableError("Dandelion API request timed out.") from exc
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else "unknown"
            logger.warning("Dandelion request failed with HTTP %s.", status)
            raise UpstreamUnavailableError(f"Dandelion API returned HTTP {status}.") from exc
        except requests.RequestException as exc:
            logger.warning("Dandelion request failed: %s", exc.__class__.__name__)
            raise UpstreamUnavailableError("Dandelion API request failed.") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamUnavailableError("Dandelion API returned an invalid response.") from exc
        if not isinstance(payload, dict):
            raise UpstreamUnavailableError("Dandelion API returned an invalid response.")

        return self._parse_annotations(payload)

    @staticmethod
    def _parse_annotations(payload: dict[str, Any]) -> AnnotationSet:
        raw_annotations = payload.get("annotations") or []
        annotations: list[Annotation] = []
        if not isinstance(raw_annotations, list):
            raise UpstreamUnavailableError("Dandelion API returned an invalid response.")
        for item in raw_annotations:
            if not isinstance(item, dict):
                continue
            try:
                annotation = Annotation(
                    keyword=str(item.get("spot") or ""),
                    confidence=float(item.get("confidence") or 0.0),
                    uri=str(item.get("uri") or ""),
                )
            except (TypeError, ValueError) as exc:
                raise UpstreamUnavailableError("Dandelion API returned an invalid response.") from exc
            annotations.append(annotation)
        return tuple(annotations)


__all__ = ["DandelionClient", "DandelionClientConfig", "DEFAULT_ENDPOINT"]
