from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Passed through `extra=` by the measurement service.
MEASUREMENT_LOG_FIELDS = ("context", "measurement_id", "event")

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_MARK = "_measurestore_handler"


class JSONFormatter(logging.Formatter):
    """One JSON object per log line.

    Notes:
    - `timestamp` is the time the record was created (UTC), not the time it was formatted.
    - Measurement fields are only emitted when the call site set them.
    """

    def format(self, record: logging.LogRecord) -> str:
        out: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        out.update(
            {key: record.__dict__[key] for key in MEASUREMENT_LOG_FIELDS if record.__dict__.get(key) is not None}
        )
        if record.exc_info:
            out["exception"] = self.formatException(record.exc_info)
        return json.dumps(out, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "text") -> logging.Handler:
    """Route log output to stderr as text or JSON.

    Calling this again replaces the handler installed by the previous call instead of
    stacking a second one. Returns the new handler so callers can remove it.
    """

    for existing in list(logging.root.handlers):
        if getattr(existing, _HANDLER_MARK, False):
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT))
    setattr(handler, _HANDLER_MARK, True)

    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    return handler
