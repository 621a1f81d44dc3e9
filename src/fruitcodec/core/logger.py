import logging
import sys
import contextvars
from typing import Optional

# Context variable naming the document currently being decoded/encoded
_DOCUMENT: contextvars.ContextVar[str] = contextvars.ContextVar("document", default="-")


class _DocumentFilter(logging.Filter):
    """Logging filter that injects the current document name from contextvars into the record."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.document = _DOCUMENT.get()
        return True


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | doc=%(document)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def configure_root_logger(level: str = "INFO") -> None:
    """
    Configure root logger and the fruitcodec-specific logger.

    Root logger stays at INFO to keep third-party libraries quiet.
    Only the fruitcodec namespace follows the requested level.

    Safe to call multiple times; it will not duplicate handlers (idempotent).
    """
    root = logging.getLogger()

    for h in root.handlers:
        if isinstance(h, logging.StreamHandler) and any(isinstance(f, _DocumentFilter) for f in h.filters):
            h.setLevel(min(h.level, _level(level)))
            logging.getLogger("fruitcodec").setLevel(_level(level))
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter())
    handler.addFilter(_DocumentFilter())
    handler.setLevel(min(logging.INFO, _level(level)))
    root.addHandler(handler)
    root.setLevel(logging.INFO)

    logging.getLogger("fruitcodec").setLevel(_level(level))


def get_logger(name: str = "fruitcodec") -> logging.Logger:
    """Get a module-specific logger; handlers live on the root logger."""
    return logging.getLogger(name)


def push_document(name: Optional[str]) -> Optional[contextvars.Token]:
    """Set the current document name in context and return a token for later reset."""
    if not name:
        return None
    return _DOCUMENT.set(name)


def reset_document(token: Optional[contextvars.Token]) -> None:
    """Reset the document context using the provided token (if any)."""
    if token is None:
        return
    _DOCUMENT.reset(token)


def current_document() -> str:
    return _DOCUMENT.get()
