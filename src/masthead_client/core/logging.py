import logging
from datetime import datetime, timezone
from typing import Any

LOG_EXTRA_FIELDS = (
    "resource",
    "method",
    "path",
    "status",
    "duration_ms",
    "page",
    "pages",
    "items",
    "total",
)


class LogfmtFormatter(logging.Formatter):
    """
    key=value output: ts, level, logger, event, then whichever of
    LOG_EXTRA_FIELDS the record carries, then exception type and text.
    """

    def __init__(self, *, with_timestamp: bool = False):
        super().__init__()
        self.with_timestamp = with_timestamp

    def format(self, record: logging.LogRecord) -> str:
        pairs: list[tuple[str, Any]] = []
        if self.with_timestamp:
            ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
            pairs.append(("ts", ts.isoformat(timespec="milliseconds")))
        pairs.append(("level", record.levelname.lower()))
        pairs.append(("logger", record.name))

        msg = record.getMessage()
        if msg:
            pairs.append(("event", msg))

        pairs.extend(
            (key, getattr(record, key))
            for key in LOG_EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )

        if record.exc_info and record.exc_info[1] is not None:
            exc = record.exc_info[1]
            pairs.append(("exc_type", type(exc).__name__))
            pairs.append(("error", str(exc)))

        return " ".join(f"{key}={self._quote(val)}" for key, val in pairs)

    @staticmethod
    def _quote(val: Any) -> str:
        if isinstance(val, (bool, int, float)):
            return str(val)
        text = str(val)
        if not text or any(ch in text for ch in ' ="'):
            return '"' + text.replace('"', '\\"') + '"'
        return text


def setup_logging(
    level: str = "INFO",
    *,
    logger_name: str = "masthead_client",
    with_timestamp: bool = True,
) -> logging.Logger:
    """Attach a single logfmt handler to the package logger; safe to call twice."""
    log = logging.getLogger(logger_name)
    for handler in list(log.handlers):
        log.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(LogfmtFormatter(with_timestamp=with_timestamp))
    log.addHandler(handler)
    log.setLevel(getattr(logging, level.upper(), logging.INFO))
    return log


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS"]
