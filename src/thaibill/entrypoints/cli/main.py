"""THAIBILL CLI entry point.

Defines the top-level ``thaibill`` command (via Click-Extra), configures
logging for the run, and registers the invoice sub-commands.

Examples
    $ thaibill --version
    $ thaibill totals invoices/001.json
    $ thaibill output-path invoice 001
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from thaibill import __version__, config
from thaibill.domain.value_objects import TaxType
from thaibill.logging import config_console_handler, config_flight_recorder, log_startup

from .commands import check, output_path, thai_date, totals
from .helpers import parse_log_level, warn

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """THAIBILL command-line interface.

    Inspect Thai invoice input files: compute subtotal, withholding tax or VAT
    and total from the line items, render dates in the Buddhist-era calendar,
    and show where the generated PDF is expected to be written.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Increase the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Decrease the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source paths).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the flight recorder log file.",
    default=Path(user_log_dir("thaibill", appauthor=False)) / "latest.log",
    envvar="THAIBILL_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="THAIBILL_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity (unaffected by -v/-q) "
        "and write them to --log-path when a WARNING/ERROR occurs, or on exit "
        "if --force-flush is set."
    ),
    default=True,
    envvar="THAIBILL_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on program exit.",
    default=False,
    envvar="THAIBILL_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set the minimum level of specific loggers (NAME=LEVEL). Applies to both "
        "console and flight recorder. Repeatable, or a comma/space list in "
        "THAIBILL_LOGGER_LEVELS."
    ),
    default=("asyncio=WARNING",),
    envvar="THAIBILL_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def thaibill(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """THAIBILL command-line interface."""

    # 0) compute effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) console handler, plus the flight recorder when enabled
    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # 2) capture all levels at the root; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    # 3) a bad data root only matters to commands that read files
    try:
        data_root = config.get_data_root()
    except config.DataRootNotFoundError as e:
        warn(str(e))
        data_root = None

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path if flight_recorder else None,
        flight_recorder=flight_recorder,
        logger_levels=logger_levels,
        output_dir=config.get_output_dir(),
        data_root=data_root,
        tax_rates={tax_type.value: tax_type.default_rate for tax_type in TaxType},
    )

    ctx.call_on_close(logging.shutdown)


thaibill.add_command(totals)
thaibill.add_command(output_path)
thaibill.add_command(check)
thaibill.add_command(thai_date)
