"""
Logging setup for the devenv CLI.

Console records go through ``click.echo(err=True)``: they land on
whatever stderr click is writing to at the time and are colored by
level. The installers' own output (apt, scripts, manual instructions)
stays on stdout.

Level precedence:
    --debug  >  --verbose  >  --quiet  >  $DEVENV_LOG_LEVEL  >  WARNING

A second, always-detailed copy can go to $DEVENV_LOG_FILE at
$DEVENV_LOG_FILE_LEVEL.
"""

from __future__ import annotations

import logging
import os

import click

LOG_LEVEL_ENV_VAR = "DEVENV_LOG_LEVEL"
LOG_FILE_ENV_VAR = "DEVENV_LOG_FILE"
LOG_FILE_LEVEL_ENV_VAR = "DEVENV_LOG_FILE_LEVEL"

_CONSOLE_FORMATS = {
    logging.DEBUG: "%(levelname)-5s %(name)s:%(lineno)d %(message)s",
    logging.INFO: "[%(name)s] %(message)s",
}
_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"

_LEVEL_COLORS = {
    logging.DEBUG: "bright_black",
    logging.WARNING: "yellow",
    logging.ERROR: "red",
    logging.CRITICAL: "red",
}


class ClickEchoHandler(logging.Handler):
    """Writes records to click's stderr, colored by level."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            click.echo(click.style(message, fg=_LEVEL_COLORS.get(record.levelno)), err=True)
        except Exception:
            self.handleError(record)


def resolve_level(debug: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    """Pick the console level from CLI flags, then the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(LOG_LEVEL_ENV_VAR) or "WARNING"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Install devenv's handlers on the root logger.

    Safe to call more than once: handlers from an earlier call are
    replaced, anything else on the root logger is left alone.

    Args:
        level: Console level name.
        log_file: Optional log file path.
        log_file_level: Level for the file (default: ``level``).
    """
    numeric_level = _parse_level(level)
    root = logging.getLogger()
    for handler in [h for h in root.handlers if getattr(h, "_devenv", False)]:
        root.removeHandler(handler)
        handler.close()

    console = ClickEchoHandler(numeric_level)
    # WARNING and above: message only
    console.setFormatter(logging.Formatter(_CONSOLE_FORMATS.get(numeric_level, "%(message)s")))
    _add(root, console)

    effective_level = numeric_level
    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else numeric_level
        effective_level = min(effective_level, file_level)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
        _add(root, file_handler)

    root.setLevel(effective_level)


def _add(root: logging.Logger, handler: logging.Handler) -> None:
    handler._devenv = True  # type: ignore[attr-defined]
    root.addHandler(handler)


def _parse_level(level: str | None) -> int:
    """Level name to its numeric value; unknown names mean WARNING."""
    numeric = logging.getLevelName(level.upper()) if level else None
    return numeric if isinstance(numeric, int) else logging.WARNING
