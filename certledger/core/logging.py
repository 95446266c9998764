"""Logging configuration for the certification ledger.

The ledger logs two kinds of events: accepted mutations (INFO) and
rejections (WARNING).  Both carry structured context through ``extra=``:

  operation   which entry point ran (issue_certification, ...)
  cert_id     the record involved, when there is one
  guide       the certified party, for issuance
  caller      the identity that invoked the operation
  error_code  numeric LedgerError code, rejections only
  reason      snake_case LedgerError kind, rejections only

Console output renders that context as ``key=value`` pairs after the
message.  JSON output (LOG_JSON=true) puts it at the top level of each
line.  When a record carries a LedgerError as exc_info, its code and
reason are filled in from the exception and no traceback is written:
a rejection is an expected outcome, not a crash.
"""

from __future__ import annotations

import json
import logging
import sys

from certledger.core.errors import LedgerError

_CONTEXT_FIELDS = ("operation", "cert_id", "guide", "caller", "error_code", "reason")


def _ledger_context(record: logging.LogRecord) -> dict[str, object]:
    context = {
        key: getattr(record, key)
        for key in _CONTEXT_FIELDS
        if getattr(record, key, None) is not None
    }
    exc = record.exc_info[1] if record.exc_info else None
    if isinstance(exc, LedgerError):
        context.setdefault("error_code", int(exc.code))
        context.setdefault("reason", exc.reason)
    return context


def _is_ledger_rejection(record: logging.LogRecord) -> bool:
    return bool(record.exc_info) and isinstance(record.exc_info[1], LedgerError)


class _ConsoleFormatter(logging.Formatter):
    """``<time> <LEVEL> <logger>  <message>  key=value ...``"""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)-8s %(name)s  %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        context = _ledger_context(record)
        if _is_ledger_rejection(record):
            record = logging.makeLogRecord(
                {**record.__dict__, "exc_info": None, "exc_text": None}
            )
        line = super().format(record)
        if not context:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        head, sep, rest = line.partition("\n")
        return f"{head}  {pairs}{sep}{rest}"


class _JsonFormatter(logging.Formatter):
    """One JSON object per line with ledger context at the top level."""

    def __init__(self) -> None:
        super().__init__(datefmt="%Y-%m-%dT%H:%M:%S%z")

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, object] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_ledger_context(record),
        }
        if record.exc_info and not _is_ledger_rejection(record):
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


def setup_logging(level_name: str, *, json_format: bool = False) -> None:
    """Route all logging to stdout at ``level_name`` (unknown names fall back to INFO)."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_JsonFormatter() if json_format else _ConsoleFormatter())

    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)
