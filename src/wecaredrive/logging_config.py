"""Logging setup with token masking."""

from __future__ import annotations

import logging
import os
import re
import sys
from typing import Any, Optional

DEFAULT_LOGGER_NAME: str = "wecaredrive"


class SensitiveDataFilter(logging.Filter):
    """Mask OAuth tokens and secrets in log records."""

    PATTERNS = [
        (re.compile(r"(bearer\s+)([^\s,}'\"]+)", re.IGNORECASE), r"\1***MASKED***"),
        (
            re.compile(r"((?:access|refresh)?_?token[\"']?\s*[:=]\s*[\"']?)([^\"'}\s,&]+)", re.IGNORECASE),
            r"\1***MASKED***",
        ),
        (re.compile(r"(client_secret[\"']?\s*[:=]\s*[\"']?)([^\"'}\s,&]+)", re.IGNORECASE), r"\1***MASKED***"),
        (re.compile(r"(authorization[\"']?\s*[:=]\s*[\"']?)([^\"'}\s,]+)", re.IGNORECASE), r"\1***MASKED***"),
    ]

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = self._mask(record.msg)

        if record.args:
            if isinstance(record.args, dict):
                record.args = {k: self._mask_value(v) for k, v in record.args.items()}
            elif isinstance(record.args, tuple):
                record.args = tuple(self._mask_value(arg) for arg in record.args)

        return True

    def _mask(self, text: str) -> str:
        for pattern, replacement in self.PATTERNS:
            text = pattern.sub(replacement, text)
        return text

    def _mask_value(self, value: Any) -> Any:
        if isinstance(value, str):
            return self._mask(value)
        return value


def setup_logging(
    name: str = DEFAULT_LOGGER_NAME,
    level: Optional[str] = None,
) -> logging.Logger:
    """
    Attach a stdout handler to the package logger.

    Args:
        name: Logger name; the package root by default so every module logger inherits it.
        level: DEBUG/INFO/WARNING/ERROR. Defaults to WECARE_LOG_LEVEL or INFO.
    """
    if level is None:
        level = os.getenv("WECARE_LOG_LEVEL", "INFO")
    resolved = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(resolved)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(resolved)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    handler.addFilter(SensitiveDataFilter())
    logger.addHandler(handler)
    logger.propagate = False
    return logger
