"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits log messages at
every level, fixtures to register it, a CliRunner whose flight recorder
writes into the working directory, an isolated filesystem per test, and an
invoice file placed inside it.
"""

import logging
from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from thaibill.entrypoints.cli.main import thaibill

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages for CLI/flight-recorder tests.

    Messages go to the 'thaibill.demo' logger and to a 'some.thirdparty'
    logger to exercise logger-level filtering and flight-recorder behavior.
    """
    logger = logging.getLogger("thaibill.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any click-extra sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command on `thaibill` for the duration of a test."""
    thaibill.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(thaibill, "log-demo")


@pytest.fixture
def runner():
    """Return a CliRunner whose default flight-recorder file is `latest.log`."""
    return CliRunner(env={"THAIBILL_LOG_PATH": "latest.log"})


@pytest.fixture
def fs(runner):
    """Run the test inside `runner.isolated_filesystem()`."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def invoice_file(fs, invoice_json) -> Path:
    """Write the sample invoice to `invoices/001.json` in the isolated filesystem."""
    path = Path("invoices") / "001.json"
    path.parent.mkdir()
    path.write_text(invoice_json, encoding="utf-8")
    return path
