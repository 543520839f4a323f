"""JSON log formatting for videofix.

One JSON object per line, so log files can be fed to jq or a log shipper.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Attributes every LogRecord carries, plus the ones added while formatting
# and by FileContextFilter. Anything else came from ``extra=``.
_RECORD_ATTRS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", (), None))
) | {"message", "asctime", "taskName", "file_path", "file_tag"}


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    Keys:
    - time: ISO-8601 UTC timestamp
    - level: level name
    - logger: logger name (omitted for the root logger)
    - file: media file being processed, when inside file_context()
    - message: formatted message
    - extra: attributes passed with ``extra=``
    - exception: formatted traceback, when exc_info is set
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, Any] = {
            "time": created.isoformat(),
            "level": record.levelname,
        }
        if record.name != "root":
            entry["logger"] = record.name

        file_path = getattr(record, "file_path", None)
        if file_path:
            entry["file"] = file_path

        entry["message"] = record.getMessage()

        extra = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        if extra:
            entry["extra"] = extra

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str, ensure_ascii=False)
