"""Structured Logging — one JSON object per line for the `organizer` logger tree.

Invariants:
    - Every line carries timestamp (record creation time, UTC), level, logger, message
    - Store context extras (entity, entity_id, uid, operation, error_code)
      appear only when set on the record
    - setup_logging replaces its own handler on repeat calls and leaves
      handlers installed by the host application alone

Design Decisions:
    - Formatter built on stdlib logging: the host decides where records go
"""

import json
import logging
from datetime import datetime, timezone

_CONTEXT_KEYS = ("entity", "entity_id", "uid", "operation", "error_code")
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


class JSONFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, record.__dict__[key])
            for key in _CONTEXT_KEYS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Attach a single stream handler to the `organizer` logger."""
    logger = logging.getLogger("organizer")
    for handler in [h for h in logger.handlers if getattr(h, "_organizer_handler", False)]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler._organizer_handler = True
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
