"""THAIBILL invoice commands.

Thin wrappers over the bootstrapped file operations and the domain helpers.
Results are written to stdout; status lines go to stderr.

Failure modes
- Missing input file, malformed JSON or an invalid invoice document →
  ``ClickException`` (exit code 1) with the reason.
- ``THAIBILL_DATA_ROOT`` pointing to a missing directory → ``ClickException``.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

import click

from thaibill import config
from thaibill.bootstrap import AppContainer, bootstrap
from thaibill.domain.errors import DomainError, InvalidDateError
from thaibill.domain.formatting import MAX_DECIMALS, format_date_thai, format_number
from thaibill.domain.totals import calculate_totals
from thaibill.domain.value_objects import TaxType
from thaibill.service_layer.documents import get_output_path

from .helpers import error, success

logger = logging.getLogger(__name__)

TAX_LABELS = {TaxType.WITHHOLDING: "Withholding", TaxType.VAT: "VAT"}


def _container() -> AppContainer:
    try:
        return bootstrap()
    except config.DataRootNotFoundError as e:
        raise click.ClickException(str(e)) from e


@click.command()
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--tax-type",
    type=click.Choice([tax_type.value for tax_type in TaxType], case_sensitive=False),
    default=None,
    help="Override the tax type given in the document.",
)
@click.option(
    "--tax-rate",
    type=click.FloatRange(min=0),
    default=None,
    help="Override the tax rate given in the document (fraction, e.g. 0.07).",
)
@click.option(
    "--decimals",
    type=click.IntRange(0, MAX_DECIMALS),
    default=2,
    show_default=True,
    help="Number of decimal places in the printed amounts.",
)
def totals(
    path: Path, tax_type: str | None, tax_rate: float | None, decimals: int
) -> None:
    """Compute subtotal, tax and total for the invoice file PATH."""
    container = _container()
    try:
        document = asyncio.run(container.load_document(path))
    except FileNotFoundError as e:
        raise click.ClickException(f"{path} does not exist.") from e
    except json.JSONDecodeError as e:
        raise click.ClickException(f"{path} is not valid JSON: {e}") from e
    except DomainError as e:
        raise click.ClickException(str(e)) from e
    logger.info("Loaded %s with %d item(s)", path, len(document.items))

    effective_type = TaxType.parse(tax_type) if tax_type else document.tax_type
    rate = tax_rate if tax_rate is not None else document.tax_rate
    result = calculate_totals(document.items, rate, effective_type)

    rows = [("Document", f"{document.document_type} {document.document_number}")]
    if document.issued_on:
        try:
            rows.append(("Date", format_date_thai(document.issued_on)))
        except InvalidDateError as e:
            raise click.ClickException(str(e)) from e
    rows += [
        ("Subtotal", format_number(result.subtotal, decimals)),
        (
            f"{TAX_LABELS[effective_type]} {rate * 100:g}%",
            format_number(result.tax_amount, decimals),
        ),
        ("Total", format_number(result.total, decimals)),
        (
            "Output",
            get_output_path(
                document.document_type,
                document.document_number,
                document.output,
                output_dir=config.get_output_dir(),
            ),
        ),
    ]
    width = max(len(label) for label, _ in rows)
    for label, value in rows:
        click.echo(f"{label:<{width}}  {value}")


@click.command("output-path")
@click.argument("document_type")
@click.argument("document_number")
@click.option(
    "--output",
    "-o",
    "custom_output",
    default=None,
    help="Explicit output path; printed unchanged when given.",
)
def output_path(
    document_type: str, document_number: str, custom_output: str | None
) -> None:
    """Print the PDF path for DOCUMENT_TYPE and DOCUMENT_NUMBER.

    The default directory is `output`, or THAIBILL_OUTPUT_DIR when set.
    """
    click.echo(
        get_output_path(
            document_type,
            document_number,
            custom_output,
            output_dir=config.get_output_dir(),
        )
    )


@click.command()
@click.argument("path", type=click.Path(path_type=Path))
@click.pass_context
def check(ctx: click.Context, path: Path) -> None:
    """Exit with status 0 if PATH exists, 1 otherwise."""
    container = _container()
    if asyncio.run(container.file_exists(path)):
        success(f"{path} exists.")
        return
    error(f"{path} does not exist.")
    ctx.exit(1)


@click.command("thai-date")
@click.argument("value", metavar="DATE")
def thai_date(value: str) -> None:
    """Print the ISO-8601 DATE in Thai with its Buddhist-era year."""
    try:
        click.echo(format_date_thai(value))
    except InvalidDateError as e:
        raise click.BadParameter(str(e), param_hint="DATE") from e
