"""Logging for xml-suite runs.

Only the ``xml_suite`` package logger is configured; the root logger and
any collaborator's own handlers are left alone. Every record is stamped
with the run ID and the subcommand of the invocation (``schema``,
``create``, ``validate`` or ``menu``) so that lines from one run can be
picked out of a shared log file.
"""

import json
import logging
import logging.handlers
import sys
import uuid
from pathlib import Path

PACKAGE_LOGGER = "xml_suite"


class RunContextFilter(logging.Filter):
    """Attach ``run_id`` and ``command`` to every record passing through."""

    def __init__(self, run_id: str, command: str):
        super().__init__()
        self.run_id = run_id
        self.command = command

    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = self.run_id
        record.command = self.command
        return True


class JSONFormatter(logging.Formatter):
    """One JSON object per line, keys sorted."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
        }
        for key in ("run_id", "command"):
            value = getattr(record, key, None)
            if value:
                entry[key] = value
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, sort_keys=True)


class HumanFormatter(logging.Formatter):
    """``xml-suite validate: warning xml_suite.validation: ...``"""

    def format(self, record: logging.LogRecord) -> str:
        command = getattr(record, "command", None)
        prefix = f"xml-suite {command}: " if command else ""
        base = f"{prefix}{record.levelname.lower()} {record.name}: {record.getMessage()}"
        if record.exc_info and record.exc_info[1]:
            base += "\n" + self.formatException(record.exc_info)
        return base


def setup_logging(
    *,
    command: str,
    level: int = logging.WARNING,
    log_file: Path | str | None = None,
    json_format: bool = False,
    run_id: str | None = None,
) -> str:
    """Configure the ``xml_suite`` logger for one CLI invocation.

    stderr always gets a handler; *log_file* adds a rotating JSON file.
    Returns the run ID stamped on the records.
    """
    run_id = run_id or uuid.uuid4().hex[:12]
    context = RunContextFilter(run_id, command)

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)
    logger.propagate = False

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(JSONFormatter() if json_format else HumanFormatter())
    stderr_handler.addFilter(context)
    logger.addHandler(stderr_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=5_000_000, backupCount=3, encoding="utf-8",
        )
        file_handler.setFormatter(JSONFormatter())
        file_handler.addFilter(context)
        logger.addHandler(file_handler)

    return run_id
