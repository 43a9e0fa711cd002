"""
Structured JSON logging: timestamp, l1_tx_hash, event_type.

structlog with ISO timestamps, log level, and consistent keys for aggregation.
All service modules should use get_logger() and pass event_type as the first
argument (plus l1_tx_hash / chain_id where relevant).

Uses only Python stdlib logging and structlog; no facet_txhash imports to avoid circular imports.
"""

from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Iterator

import structlog

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL_VALUE = getattr(logging, LOG_LEVEL, logging.INFO)

# JSON output for production (LOG_FORMAT=json); human-readable for local
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").strip().lower()


class _LogStream:
    """File-like log target resolved on every write (sys.stdout unless redirected)."""

    def __init__(self) -> None:
        self.target = "stdout"

    def write(self, message: str) -> int:
        return getattr(sys, self.target).write(message)

    def flush(self) -> None:
        getattr(sys, self.target).flush()


_LOG_STREAM = _LogStream()


@contextmanager
def logs_to_stderr() -> Iterator[None]:
    """Send log lines to stderr for the duration of the block (CLI tools own stdout)."""
    previous = _LOG_STREAM.target
    _LOG_STREAM.target = "stderr"
    try:
        yield
    finally:
        _LOG_STREAM.target = previous


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Ensure timestamp is always present (ISO 8601)."""
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _normalize_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Rename structlog 'event' to event_type; keep message if present."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    if "message" not in event_dict and "event_type" in event_dict:
        event_dict["message"] = str(event_dict["event_type"])
    return event_dict


def configure_structlog() -> None:
    """Configure structlog once at import: JSON, timestamp, level, event_type."""
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_timestamp,
        _normalize_event,
    ]
    if LOG_FORMAT == "json":
        shared_processors.append(structlog.processors.JSONRenderer())
    else:
        shared_processors.append(
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
        )
    structlog.configure(
        processors=shared_processors,
        wrapper_class=structlog.make_filtering_bound_logger(LOG_LEVEL_VALUE),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=_LOG_STREAM),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Return a structured logger for the given module name.

        logger = get_logger(__name__)
        logger.info("facet_hash_derived", l1_tx_hash=tx_hash, chain_id=1)

    Output (JSON): {"event_type": "facet_hash_derived", "l1_tx_hash": "0x...",
    "chain_id": 1, "timestamp": "...", "level": "info", "logger": "module.name"}
    """
    return structlog.get_logger(name).bind(logger=name)


def bind_transaction(l1_tx_hash: str, chain_id: int) -> structlog.BoundLogger:
    """Return a logger with the L1 transaction hash and chain id bound to every call."""
    return get_logger("facet_txhash").bind(l1_tx_hash=l1_tx_hash, chain_id=chain_id)
