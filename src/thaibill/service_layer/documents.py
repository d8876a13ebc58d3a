"""Invoice document use-cases: loading input data and naming the output."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from thaibill.domain.value_objects import InvoiceDocument

from .files import read_json

if TYPE_CHECKING:
    from thaibill.interfaces.file_access import FileAccess, PathLike

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = "output"


def get_output_path(
    document_type: str,
    document_number: str,
    custom_output: str | None = None,
    output_dir: str = DEFAULT_OUTPUT_DIR,
) -> str:
    """Return the path the rendered PDF should be written to.

    A non-empty `custom_output` is returned unchanged. Otherwise the path is
    `<output_dir>/<document_type>-<document_number>.pdf`. The path is not
    sanitized and no directory is created.

    Example:
        >>> get_output_path("invoice", "001")
        'output/invoice-001.pdf'
    """
    if custom_output:
        return custom_output
    return f"{output_dir}/{document_type}-{document_number}.pdf"


async def load_document(path: PathLike, files: FileAccess) -> InvoiceDocument:
    """Read an invoice JSON file and convert it into an `InvoiceDocument`.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the contents are not valid JSON.
        InvalidDocumentError: If the JSON does not describe an invoice.
    """
    data = await read_json(path, files)
    document = InvoiceDocument.from_mapping(data, source=os.fspath(path))
    logger.debug(
        "Loaded %s %s with %d item(s)",
        document.document_type,
        document.document_number,
        len(document.items),
    )
    return document
