import logging
from typing import IO, Any, Optional

# Extras set by the client, the token manager and log_event, in output order.
LOG_EXTRA_FIELDS = (
    "method",
    "url",
    "status",
    "code",
    "duration_ms",
    "attempt",
    "error_type",
)

# httpx logs one INFO line per request; api_call already covers it.
NOISY_LOGGERS = ("httpx", "httpcore")


class LogfmtFormatter(logging.Formatter):
    """Render client records as one logfmt line: level, logger, event, extras."""

    def format(self, record: logging.LogRecord) -> str:
        pairs = [
            ("level", record.levelname.lower()),
            ("logger", record.name),
            ("event", record.getMessage()),
        ]
        pairs.extend(
            (key, getattr(record, key))
            for key in LOG_EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )
        if record.exc_info and record.exc_info[0] is not None:
            pairs.append(("exc_type", record.exc_info[0].__name__))

        return " ".join(f"{k}={self._quote(v)}" for k, v in pairs if v != "")

    @staticmethod
    def _quote(val: Any) -> str:
        if isinstance(val, (bool, int, float)):
            return str(val)
        s = str(val)
        if any(c in s for c in ' ="'):
            s = '"' + s.replace('"', '\\"') + '"'
        return s


def setup_logging(level: str = "INFO", stream: Optional[IO[str]] = None) -> None:
    """
    Send log records to ``stream`` (stderr by default) as logfmt.

    Replaces existing root handlers so repeated calls do not duplicate
    output. Unknown level names fall back to INFO.
    """
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(LogfmtFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS"]
