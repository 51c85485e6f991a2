"""Logging setup shared by the API and the command line entry point."""
from __future__ import annotations

import logging
import re
from pathlib import Path

from infrastructure.config import ServiceConfig

_TOKEN_RE = re.compile(r"(token=)[^&\s\"']+")


class TokenRedactingFilter(logging.Filter):
    """Mask the ``token`` query parameter that urllib3 logs with request URLs."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _TOKEN_RE.sub(r"\1***", message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def setup_logging(config: ServiceConfig, logger: logging.Logger | None = None) -> None:
    """Attach console (and, when ``config.log_file`` is set, file) handlers once."""
    target = logger or logging.getLogger()
    if target.handlers:
        return

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    redactor = TokenRedactingFilter()
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(redactor)
        target.addHandler(handler)
    target.setLevel(config.log_level)
