from __future__ import annotations

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import IO, Any

# Context variable for the id of the current CLI run
run_id_var: ContextVar[str | None] = ContextVar("run_id", default=None)

# Attributes every LogRecord carries; anything else came in through ``extra=``
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime", "taskName"}


class StructuredFormatter(logging.Formatter):
    """JSON formatter emitting one object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat()
            .replace("+00:00", "Z"),
            "severity": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        run_id = run_id_var.get()
        if run_id:
            log_obj["run_id"] = run_id

        # Add extra fields
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                log_obj[key] = value

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_obj, default=str)


def setup_logging(
    *,
    environment: str = "dev",
    verbose: bool = False,
    stream: IO[str] | None = None,
) -> None:
    """Configure logging for the application.

    Args:
        environment: Environment name (dev, prod)
        verbose: Force DEBUG level regardless of environment
        stream: Destination of log records, stderr by default
    """
    log_level = logging.DEBUG if verbose or environment == "dev" else logging.INFO

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(StructuredFormatter())

    logging.basicConfig(
        level=log_level,
        handlers=[handler],
        force=True,
    )


def set_run_id(run_id: str) -> None:
    """Set the run ID for the current context."""
    run_id_var.set(run_id)


def get_run_id() -> str | None:
    """Get the run ID from the current context."""
    return run_id_var.get()


__all__ = ["StructuredFormatter", "get_run_id", "set_run_id", "setup_logging"]
