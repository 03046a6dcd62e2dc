"""
PassLens Logging
=================

:class:`LensLogger` is a :class:`logging.LoggerAdapter` that stamps every
record with the tool name and the operation in progress.  Each logger
(``passlens.<tool>``) gets a Rich handler on stderr and, when a log file
is configured, a size-rotated file handler writing either plain text or
JSON lines.

Password text never reaches the logger; callers log lengths, levels and
scores only.

References:
    - Python Logging Cookbook. https://docs.python.org/3/howto/logging-cookbook.html
    - Rich logging handler. https://rich.readthedocs.io/en/stable/logging.html
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator, MutableMapping, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from shared.config import GlobalConfig

ROOT_LOGGER_NAME = "passlens"

_LOG_THEME = Theme(
    {
        "logging.level.debug": "dim cyan",
        "logging.level.info": "bold bright_blue",
        "logging.level.warning": "bold yellow",
        "logging.level.error": "bold red",
        "logging.level.critical": "bold white on red",
    }
)

_PLAIN_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_PLAIN_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"

# Attributes every LogRecord carries; anything else arrived through ``extra``
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}
_CONTEXT_ATTRS = ("tool_name", "operation")
_LOGGING_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel"})


class JSONLinesFormatter(logging.Formatter):
    """One JSON object per record.

    ``tool_name`` and ``operation`` are top-level fields; any other
    caller-supplied attribute is collected under ``extra``.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for attr in _CONTEXT_ATTRS:
            value = getattr(record, attr, None)
            if value is not None:
                entry[attr] = value

        extra = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and key not in _CONTEXT_ATTRS
        }
        if extra:
            entry["extra"] = extra
        if record.exc_info and record.exc_info[1] is not None:
            entry["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)


def _console_handler(level: int) -> RichHandler:
    handler = RichHandler(
        console=Console(theme=_LOG_THEME, stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setLevel(level)
    return handler


def _file_handler(
    path: Path,
    level: int,
    *,
    json_lines: bool,
    max_bytes: int,
    backup_count: int,
) -> RotatingFileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(
        JSONLinesFormatter()
        if json_lines
        else logging.Formatter(_PLAIN_FORMAT, datefmt=_PLAIN_DATEFMT)
    )
    return handler


class Stopwatch:
    """Elapsed wall-clock time since construction."""

    __slots__ = ("_start",)

    def __init__(self) -> None:
        self._start = time.perf_counter()

    @property
    def elapsed(self) -> float:
        return time.perf_counter() - self._start


class LensLogger(logging.LoggerAdapter):
    """Logger bound to one PassLens tool.

    Re-creating a logger for the same tool replaces its handlers, so
    repeated construction never duplicates output.

    Usage::

        log = LensLogger("meter", log_file="meter.log", json_logs=True)
        with log.operation("generate"):
            log.debug("Generated password of length %d", 18, attempts=1)

    Keyword arguments other than ``exc_info``, ``stack_info``,
    ``stacklevel`` and ``extra`` become record attributes (``extra`` in
    JSON output).

    Args:
        tool_name:      Dotted tool name; the logger is ``passlens.<tool_name>``.
        log_level:      Minimum level name (DEBUG ... CRITICAL).
        log_file:       Rotating log file; ``None`` disables file logging.
        json_logs:      Write JSON lines instead of plain text to the file.
        max_bytes:      Rotation size of the log file.
        backup_count:   Rotated files to keep.
        console_output: Attach the Rich stderr handler.
    """

    def __init__(
        self,
        tool_name: str,
        *,
        log_level: str = "INFO",
        log_file: Optional[str | Path] = None,
        json_logs: bool = False,
        max_bytes: int = 10_485_760,
        backup_count: int = 5,
        console_output: bool = True,
    ) -> None:
        level = getattr(logging, log_level.upper(), logging.INFO)
        logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{tool_name}")
        logger.setLevel(level)
        logger.propagate = False

        for old in list(logger.handlers):
            logger.removeHandler(old)
            old.close()
        if console_output:
            logger.addHandler(_console_handler(level))
        if log_file is not None:
            logger.addHandler(
                _file_handler(
                    Path(log_file),
                    level,
                    json_lines=json_logs,
                    max_bytes=max_bytes,
                    backup_count=backup_count,
                )
            )

        self._context: dict[str, Any] = {"tool_name": tool_name, "operation": None}
        super().__init__(logger, self._context)

    @classmethod
    def from_settings(cls, tool_name: str, settings: GlobalConfig) -> LensLogger:
        """Build a logger from the ``[global]`` configuration section."""
        return cls(
            tool_name,
            log_level=settings.log_level,
            log_file=settings.log_file,
            json_logs=settings.log_json,
        )

    @property
    def tool_name(self) -> str:
        return self._context["tool_name"]

    @property
    def underlying(self) -> logging.Logger:
        return self.logger

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        extra = dict(self._context)
        extra.update(kwargs.pop("extra", None) or {})
        for key in [k for k in kwargs if k not in _LOGGING_KWARGS]:
            extra[key] = kwargs.pop(key)
        kwargs["extra"] = extra
        return msg, kwargs

    @contextmanager
    def operation(self, name: str) -> Iterator[LensLogger]:
        """Tag every record logged inside the block with ``operation=name``."""
        previous = self._context["operation"]
        self._context["operation"] = name
        try:
            yield self
        finally:
            self._context["operation"] = previous

    @contextmanager
    def timed(self, label: str) -> Iterator[Stopwatch]:
        """Log start and elapsed time of the block at DEBUG."""
        watch = Stopwatch()
        self.debug("Started: %s", label)
        try:
            yield watch
        finally:
            self.debug("Completed: %s (%.6f sec)", label, watch.elapsed)
