"""Error kinds raised by the keyword extraction core."""
from __future__ import annotations


class KeywordServiceError(Exception):
    """Base class for errors that terminate a keyword request."""

    status_code: int = 500
    default_message: str = "Keyword extraction failed."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(KeywordServiceError):
    """Raised when the request carries no text to analyse."""

    status_code = 400
    default_message = "No content provided."


class MissingCredentialError(KeywordServiceError):
    """Raised when an upstream call is needed but no API key is configured."""

    status_code = 500
    default_message = "Dandelion API key is not set."


class UpstreamUnavailableError(KeywordServiceError):
    """Raised when the annotation service cannot be reached or misbehaves."""

    status_code = 500
    default_message = "Annotation service is unavailable."


class NoKeywordsFoundError(KeywordServiceError):
    """Raised when annotating every chunk produced nothing."""

    status_code = 404
    default_message = "No keywords found."


__all__ = [
    "KeywordServiceError",
    "InvalidInputError",
    "MissingCredentialError",
    "UpstreamUnavailableError",
    "NoKeywordsFoundError",
]
