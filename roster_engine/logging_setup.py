"""Process logging setup.

Notes
-----
Engine modules log through ``logging.getLogger(__name__)`` and never configure
handlers themselves. The launcher calls ``setup_logging`` exactly once.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Final

LOG_FORMATS: Final[tuple[str, ...]] = ("text", "json")

_HANDLER_NAME: Final[str] = "orgroster"

_TEXT_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Extra record attributes copied into JSON output when present.
_EXTRA_KEYS: Final[tuple[str, ...]] = ("organization_id", "member_id", "record_type", "db_path")


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                payload[key] = val
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "text") -> logging.Handler:
    """
    Configure root logging for the process.

    Calling it again replaces the handler installed by an earlier call.

    Parameters
    ----------
    level:
        Level name such as "DEBUG" or "INFO". Unknown names fall back to INFO.
    fmt:
        "text" for human-readable lines, "json" for structured lines.

    Returns
    -------
    logging.Handler
        The installed handler (useful for removal in tests).

    Raises
    ------
    ValueError
        If fmt is not a known format.
    """
    if fmt not in LOG_FORMATS:
        raise ValueError(f"Unknown log format: {fmt!r}")

    for old in [h for h in logging.root.handlers if h.get_name() == _HANDLER_NAME]:
        logging.root.removeHandler(old)
        old.close()

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))

    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
