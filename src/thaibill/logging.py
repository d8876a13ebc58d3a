"""Logging helpers used by the THAIBILL CLI.

Library modules only create loggers; handlers are configured here for the
command line. Console output goes through Rich on stderr, and an in-memory
"flight recorder" buffers DEBUG records and writes them to a file when
something goes wrong.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from collections.abc import Mapping
from importlib.metadata import version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "thaibill"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    Records from loggers outside the project get `record.prefix` set to a
    bracketed token such as "[asyncio]"; project records get an empty prefix.
    The filter never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    Args:
        level: Minimum level for console output (forced to DEBUG in debug mode).
        debug_mode: Show timestamps, logger names and source paths.
        color: Enable color output; matches click-extra's --color/--no-color.

    Returns:
        RichHandler: Handler suitable to attach to the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = (
        "%(asctime)s %(name)s: %(message)s" if debug_mode else "%(prefix)s %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Configure an in-memory flight recorder backed by a log file.

    Up to `capacity` records are buffered and written to `path` when a record
    at `flush_level` or above arrives, or on close if `flush_on_close` is set.

    Args:
        path: Destination file for flushed records; parent directories are created.
        capacity: Number of records to buffer in memory.
        flush_level: Level at or above which the buffer is flushed.
        flush_on_close: Flush the buffer when the handler is closed.

    Returns:
        MemoryHandler: A memory handler whose target is a UTF-8 FileHandler.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"  # pylint: disable=line-too-long
        )
    )

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    logger_levels: dict[str, int],
    output_dir: str,
    data_root: Path | None,
    tax_rates: Mapping[str, float],
) -> None:
    """Log a one-line INFO summary of the invoice settings, then diagnostics.

    The summary names the version, the console level, the flight-recorder
    state and the directory PDFs are placed in. DEBUG lines describe where
    input files are read from, the default tax rate per tax type, the
    interpreter and process, and the logging setup.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string to display.
        level: Effective console logging level.
        handlers: Handlers attached to the root logger.
        log_path: Flight-recorder output file, or None.
        flight_recorder: Whether the flight recorder is enabled.
        logger_levels: Per-logger level overrides.
        output_dir: Directory used for derived output paths.
        data_root: Base directory for relative input paths, or None for the CWD.
        tax_rates: Default rate (fraction) keyed by tax type name.
    """
    logger.info(
        "THAIBILL %s: console=%s, flight-recorder=%s, output-dir=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
        output_dir,
    )

    logger.debug(
        "Data root: %s", data_root if data_root is not None else f"{Path.cwd()} (CWD)"
    )
    logger.debug(
        "Default tax rates: %s",
        ", ".join(f"{name}={rate * 100:g}%" for name, rate in tax_rates.items()),
    )
    logger.debug(
        "Runtime: Python %s on %s %s, PID %s, click-extra %s",
        sys.version.split()[0],
        platform.system(),
        platform.release(),
        os.getpid(),
        version("click-extra"),
    )
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug("Flight recorder: path=%s", log_path or "<none>")
    if logger_levels:
        logger.debug(
            "Per-logger overrides: %s",
            {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
        )
