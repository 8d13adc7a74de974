import logging
from typing import Any, Optional, TextIO

LOG_EXTRA_FIELDS = (
    "method",
    "path",
    "status",
    "duration_ms",
    "resource",
    "auth_mode",
    "error_kind",
)

# httpx/httpcore log every request at INFO/DEBUG; the client already emits
# one redmine.request record per call.
TRANSPORT_LOGGERS = ("httpx", "httpcore")


class LogfmtFormatter(logging.Formatter):
    """logfmt line per record: level, logger, event, then known extras."""

    def format(self, record: logging.LogRecord) -> str:
        kv: list[str] = [
            f"level={record.levelname.lower()}",
            f"logger={record.name}",
        ]

        msg = record.getMessage()
        if msg:
            kv.append(f"event={self._fmt_val(msg)}")

        kv.extend(
            f"{key}={self._fmt_val(getattr(record, key))}"
            for key in LOG_EXTRA_FIELDS
            if getattr(record, key, None) is not None
        )

        if record.exc_info and record.exc_info[0] is not None:
            kv.append(f"exc_type={record.exc_info[0].__name__}")

        return " ".join(kv)

    @staticmethod
    def _fmt_val(val: Any) -> str:
        if isinstance(val, (int, float, bool)):
            return str(val)
        s = str(val)
        if " " in s or "=" in s:
            s = '"' + s.replace('"', '\\"') + '"'
        return s


def setup_logging(
    level: str = "INFO",
    *,
    stream: Optional[TextIO] = None,
    transport_level: str = "WARNING",
) -> None:
    """
    Route root logging through LogfmtFormatter.

    transport_level caps the httpx/httpcore loggers so their per-request
    lines don't duplicate redmine.request records.
    """
    root = logging.getLogger()
    # Avoid duplicate handlers if called twice
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(LogfmtFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(
            getattr(logging, transport_level.upper(), logging.WARNING)
        )


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS"]
