#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Result Reporter

Emits the connector's observable outcomes as structured log entries. Each
entry carries a message and a context map (form handle, submission id, email
and operation-specific fields such as contact id or status).
"""

import logging
from typing import Any, Dict, Optional

from .utils.logger import get_logger

LOGGER_NAME = "forms_hubspot_connector"


def _render_context(context: Dict[str, Any]) -> str:
    return " ".join(f"{key}={value!r}" for key, value in context.items())


class ResultReporter:
    """
    Thin wrapper around a logger that attaches context to every entry.

    The context is passed both as ``extra={"context": ...}`` for structured
    handlers and rendered into the message for plain-text handlers.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, context: Optional[Dict[str, Any]] = None):
        self.logger = logger or get_logger(LOGGER_NAME)
        self.context: Dict[str, Any] = dict(context or {})

    def bind(self, **context: Any) -> "ResultReporter":
        """Return a reporter whose entries also carry ``context``."""
        merged = dict(self.context)
        merged.update(context)
        return ResultReporter(self.logger, merged)

    def _entry(self, message: str, context: Dict[str, Any]):
        merged = dict(self.context)
        merged.update(context)
        if merged:
            text = f"{message} | {_render_context(merged)}"
        else:
            text = message
        return text, {"context": merged}

    def debug(self, message: str, **context: Any) -> None:
        text, extra = self._entry(message, context)
        self.logger.debug(text, extra=extra)

    def info(self, message: str, **context: Any) -> None:
        text, extra = self._entry(message, context)
        self.logger.info(text, extra=extra)

    def warning(self, message: str, **context: Any) -> None:
        text, extra = self._entry(message, context)
        self.logger.warning(text, extra=extra)

    def error(self, message: str, **context: Any) -> None:
        text, extra = self._entry(message, context)
        self.logger.error(text, extra=extra)
