"""Logging utilities and structured diagnostics for compdoc."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from .models import Diagnostic

_LOGGER_NAME = "compdoc"

_LEVELS = {
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the compdoc hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Configure the compdoc logger with console output and optional file sink."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when configured repeatedly.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter("[compdoc] %(levelname)s %(message)s"))
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


class DiagnosticCollector:
    """Records diagnostics for callers and mirrors each one to a logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or get_logger("diagnostics")
        self._records: List[Diagnostic] = []

    def info(self, file: Path | str, message: str, *args: object) -> None:
        self._record("info", file, message, args)

    def warning(self, file: Path | str, message: str, *args: object) -> None:
        self._record("warning", file, message, args)

    def error(self, file: Path | str, message: str, *args: object, exc: BaseException | None = None) -> None:
        self._record("error", file, message, args, exc=exc)

    @property
    def records(self) -> List[Diagnostic]:
        return list(self._records)

    def for_file(self, file: Path | str) -> List[Diagnostic]:
        target = str(file)
        return [record for record in self._records if record.file == target]

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

    def _record(
        self,
        severity: str,
        file: Path | str,
        message: str,
        args: tuple[object, ...],
        *,
        exc: BaseException | None = None,
    ) -> None:
        text = message % args if args else message
        self._records.append(Diagnostic(file=str(file), severity=severity, message=text))
        level = _LEVELS[severity]
        if exc is not None and self.logger.isEnabledFor(logging.DEBUG):
            self.logger.log(level, "%s: %s", file, text, exc_info=exc)
        else:
            self.logger.log(level, "%s: %s", file, text)


__all__ = ["DiagnosticCollector", "configure_logging", "get_logger"]
