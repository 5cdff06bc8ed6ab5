#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Logging for the MoodMate journal.

Every component logs under the single "moodmate" logger tree, one child
per component:

    moodmate.cli        command failures reported by handle_cli_error
    moodmate.storage    LocalStorage reads and atomic writes
    moodmate.store      journal saves, clears and skipped records
    moodmate.weather    weather and geolocation lookups
    moodmate.export     CSV/JSON exports
    moodmate.theme      theme preference

setup_logger() attaches the handlers once, at the root of the tree:

    <log_dir>/moodmate.log   every record, DEBUG and up
    <log_dir>/errors.log     ERROR records with their tracebacks
    stderr                   warnings (everything with --verbose)

Components take an optional MoodMateLogger and log through
safe_logger(), so a store or client built without one stays silent.

Usage:
    from moodmate.core.logging_manager import setup_logger

    logger = setup_logger(log_dir)
    store = JournalStore(storage, logger=logger.child("store"))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click

ROOT_LOGGER = "moodmate"
LOG_FILE = "moodmate.log"
ERROR_LOG_FILE = "errors.log"

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"


def setup_logger(
    log_dir: Path,
    verbose: bool = False,
    max_bytes: int = 1024 * 1024,
    backup_count: int = 3,
) -> MoodMateLogger:
    """
    Attach MoodMate's log handlers and return the CLI logger.

    Calling it again replaces the handlers, so one process can run
    several CLI invocations (as the tests do) without duplicating lines.

    Args:
        log_dir: Directory for moodmate.log and errors.log
        verbose: Echo every record to stderr instead of warnings only
        max_bytes: Size at which a log file is rotated
        backup_count: Rotated files kept per log

    Returns:
        MoodMateLogger for the "cli" component
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(logging.DEBUG)
    root.propagate = False
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    file_formatter = logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    for filename, level in ((LOG_FILE, logging.DEBUG), (ERROR_LOG_FILE, logging.ERROR)):
        handler = RotatingFileHandler(
            log_dir / filename,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(file_formatter)
        root.addHandler(handler)

    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    # Errors reach the user through handle_cli_error
    console.addFilter(lambda record: record.levelno < logging.ERROR)
    root.addHandler(console)

    return MoodMateLogger("cli")


def format_cli_error(error: Exception, show_traceback: bool = False) -> str:
    """
    One-line error message for the terminal.

    Examples:
        >>> format_cli_error(PersistenceError("disk full"))
        '❌ PersistenceError: disk full'
    """
    message = f"❌ {type(error).__name__}: {error}"
    if show_traceback:
        tb = "".join(traceback.format_exception(type(error), error, error.__traceback__))
        message = f"{message}\n\n{tb}"
    return message


class MoodMateLogger:
    """
    Logger for one MoodMate component.

    Records go to the "moodmate.<component>" logger; the handlers set up
    by setup_logger() decide where they end up.

    Attributes:
        component: Component name, e.g. 'store' or 'weather'
    """

    def __init__(self, component: str = "cli") -> None:
        self.component = component
        self._logger = logging.getLogger(f"{ROOT_LOGGER}.{component}")

    def child(self, component: str) -> MoodMateLogger:
        """Logger for another component of the journal."""
        return MoodMateLogger(component)

    def _emit(self, level: int, message: str, details: Optional[Dict[str, Any]]) -> None:
        if details:
            message = f"{message}: {json.dumps(details, default=str, ensure_ascii=False)}"
        self._logger.log(level, message)

    def log_operation(
        self, operation: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log a completed journal operation (save_entry, export, ...)."""
        self._emit(logging.INFO, f"OPERATION - {operation}", details)

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.DEBUG, message, details)

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.INFO, message, details)

    def log_warning(
        self, message: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        self._emit(logging.WARNING, message, details)

    def log_error(
        self, error: Exception, context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log an error with its context.

        The traceback is attached when the error has been raised, so
        errors.log shows where a failed save or lookup came from.

        Args:
            error: Exception that occurred
            context: Optional context, e.g. {"operation": "save_entry"}
        """
        message = f"{type(error).__name__}: {error}"
        if context:
            message += " (" + ", ".join(f"{k}={v}" for k, v in context.items()) + ")"
        self._logger.error(message, exc_info=error if error.__traceback__ else None)

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log a command failure and format it for the terminal.

        Args:
            error: Exception to log
            context: Optional context information about where error occurred
            show_traceback: If True, include full traceback in CLI output

        Returns:
            Formatted error message suitable for CLI display
        """
        self.log_error(error, context)
        return format_cli_error(error, show_traceback)


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Standardized error handling for all CLI commands.

    Logs the error to errors.log, prints a one-line message on stderr
    and exits with the given code.

    Args:
        ctx: Click context object containing logger and verbose flag
        error: Exception that occurred
        operation: Name of the operation that failed (e.g. 'save_entry')
        additional_context: Optional extra context (format, city, etc.)
        exit_code: Exit code for sys.exit() (default: 1)

    Note:
        This function never returns - it always calls sys.exit()
    """
    obj = ctx.obj or {}
    logger: Optional[MoodMateLogger] = obj.get("logger")
    verbose: bool = obj.get("verbose", False)

    context = {"operation": operation}
    if additional_context:
        context.update(additional_context)

    error_msg = safe_logger(logger).log_cli_error(error, context, show_traceback=verbose)

    click.echo(error_msg, err=True)
    sys.exit(exit_code)


class NullLogger:
    """
    Null Object pattern logger that implements the MoodMateLogger interface
    but performs no operations.
    """

    def child(self, component: str) -> NullLogger:
        return self

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return format_cli_error(error, show_traceback)


_null_logger = NullLogger()


def safe_logger(logger: Optional[MoodMateLogger]) -> MoodMateLogger:
    """
    Return the provided logger or a null logger if None.

    Use:
        safe_logger(self.logger).log_info("message")
    """
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
