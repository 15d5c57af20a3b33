"""Process logging setup.

Every record carries a ``request_id`` (set per HTTP request by the app
middleware, ``-`` elsewhere) and a ``classification`` field that the
flashcards pipeline fills through ``extra``.
"""

import contextvars
import logging
import os
from typing import Optional
from uuid import uuid4


DEFAULT_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
DEFAULT_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | %(request_id)s | %(classification)s | %(message)s"
)

_request_id: contextvars.ContextVar[str] = contextvars.ContextVar(
    "request_id", default="-"
)


def new_request_id(value: Optional[str] = None) -> str:
    """Bind a request id to the current context and return it."""
    rid = value or uuid4().hex[:12]
    _request_id.set(rid)
    return rid


def current_request_id() -> str:
    return _request_id.get()


class RequestContextFilter(logging.Filter):
    """Stamps request context onto records so formatters never hit KeyError."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        if not hasattr(record, "request_id"):
            record.request_id = _request_id.get()
        if not hasattr(record, "classification"):
            record.classification = "-"
        return True


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Install one formatted stream handler on the root logger."""
    resolved_level = getattr(logging, (level or DEFAULT_LEVEL).upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(resolved_level)

    # Reloads would otherwise stack handlers
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    handler.addFilter(RequestContextFilter())
    root.addHandler(handler)

    # Chatty HTTP clients used by the Gemini provider
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Module logger; initializes the root handler on first use."""
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
