import logging
import sys
import contextvars
from typing import Optional

# Context variable to carry the current query id across the call chain
_QUERY_ID: contextvars.ContextVar[str] = contextvars.ContextVar("query_id", default="-")


class _QueryFilter(logging.Filter):
    """Logging filter that injects the query_id from contextvars into the record."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.query_id = _QUERY_ID.get()
        return True


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | query=%(query_id)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _has_parambricks_handler(logger: logging.Logger) -> bool:
    return any(
        isinstance(h, logging.StreamHandler) and any(isinstance(f, _QueryFilter) for f in h.filters)
        for h in logger.handlers
    )


def configure_root_logger(level: str = "INFO") -> None:
    """
    Configure the parambricks logger namespace.

    A single stdout handler is attached to the root logger; only the
    ``parambricks`` namespace is set to the requested level so that host
    applications keep control of their own loggers.

    Args:
        level: Log level for parambricks logs (DEBUG, INFO, WARNING, ERROR).

    Safe to call multiple times; it will not duplicate handlers (idempotent).
    """
    root = logging.getLogger()
    parambricks_logger = logging.getLogger("parambricks")
    parambricks_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if _has_parambricks_handler(root):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter())
    handler.addFilter(_QueryFilter())
    handler.setLevel(logging.DEBUG)
    root.addHandler(handler)


def get_logger(name: str = "parambricks", level: Optional[str] = None) -> logging.Logger:
    """
    Get a module-specific logger under the parambricks namespace.

    The codec modules call this at import time without a level, so importing
    parambricks never reconfigures logging; pass ``level`` to opt in.
    """
    if level is not None:
        configure_root_logger(level)
    if name != "parambricks" and not name.startswith("parambricks."):
        name = f"parambricks.{name}"
    return logging.getLogger(name)


def push_query_id(query_id: Optional[str]) -> Optional[contextvars.Token]:
    """Set the current query id in context and return a token for later reset."""
    if not query_id:
        return None
    return _QUERY_ID.set(query_id)


def reset_query_id(token: Optional[contextvars.Token]) -> None:
    """Reset the query id context using the provided token (if any)."""
    if token is None:
        return
    _QUERY_ID.reset(token)