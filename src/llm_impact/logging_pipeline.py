"""JSON log output for the ``llm-impact`` command.

Records are rendered one per line. Every line carries the request being
estimated (provider, model or label, zone, token count and latency) so a
batch of CLI invocations can be joined back to its inputs.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import IO, override
from uuid import uuid4

# Attributes every LogRecord has; anything else came in through ``extra``.
_RECORD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", None, None))
) | {"message", "asctime", "estimate", "trace_id"}


class EstimateContextFilter(logging.Filter):
    """Stamp the request under estimation on each record."""

    def __init__(self, context: Mapping[str, object]) -> None:
        super().__init__()
        self.context = {key: value for key, value in context.items() if value is not None}

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "estimate"):
            record.estimate = dict(self.context)
        return True


class JsonFormatter(logging.Formatter):
    """Render a record as a single JSON object.

    ``extra`` fields land under ``fields``; the request context added by
    :class:`EstimateContextFilter` lands under ``estimate``.
    """

    def __init__(self, *, default_trace_id: str | None = None) -> None:
        super().__init__()
        self._default_trace_id = default_trace_id

    @override
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "trace_id": getattr(record, "trace_id", None) or self._default_trace_id,
            "estimate": getattr(record, "estimate", {}),
            "fields": {
                key: value
                for key, value in vars(record).items()
                if key not in _RECORD_ATTRIBUTES
            },
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


@contextmanager
def structured_logging(
    logger: logging.Logger,
    *,
    level: int = logging.INFO,
    context: Mapping[str, object] | None = None,
    trace_id: str | None = None,
    stream: IO[str] | None = None,
) -> Iterator[logging.Handler]:
    """Route ``logger`` to JSON lines on ``stream`` for the duration of the block.

    The logger's level and propagation are restored on exit, and the handler
    is detached, so the caller's logging setup is left as it was found.

    Args:
        logger: Target logger, usually the ``llm_impact`` package logger.
        level: Level applied to the logger inside the block.
        context: Request fields stamped on every record.
        trace_id: Identifier for records without their own ``trace_id``.
            A random UUID is used when omitted.
        stream: Output stream; ``sys.stderr`` when omitted.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter(default_trace_id=trace_id or str(uuid4())))
    handler.addFilter(EstimateContextFilter(context or {}))

    previous_level = logger.level
    previous_propagate = logger.propagate
    logger.setLevel(level)
    logger.propagate = False
    logger.addHandler(handler)
    try:
        yield handler
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous_level)
        logger.propagate = previous_propagate
        handler.close()
