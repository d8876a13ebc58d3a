"""Terminal message helpers for the THAIBILL CLI.

Render user-visible status lines with emoji glyphs, falling back to ASCII
when stderr cannot encode them. Messages go to stderr so stdout stays
machine-readable.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate
FAILURE = ("❌", "[X]")  # pragma: no mutate


def _glyph(choices: tuple[str, str]) -> str:
    """Return the emoji in `choices` if stderr can encode it, else the fallback."""
    emoji, fallback = choices
    encoding = getattr(click.get_text_stream("stderr"), "encoding", None) or "ascii"
    try:
        emoji.encode(encoding)
    except UnicodeEncodeError:
        return fallback
    return emoji


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**."""
    click.secho(f"{_glyph(CAUTION)}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  invoices/001.json exists.``
    """
    click.secho(f"{_glyph(SUCCESS)}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**."""
    click.secho(f"{_glyph(FAILURE)}  {msg}", fg="red", bold=True, err=True)
