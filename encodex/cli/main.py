"""encodex CLI - Base64 / Base64url en- and decoding."""
import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from encodex import __description__, __version__, setup_logging
from encodex.core import (
    Base,
    EncodeMode,
    InputReadError,
    InputSource,
    Settings,
    TranslationError,
    TranslationUnit,
)
from encodex.core.input import STDIN_NAME
from encodex.core.logging import get_logger

logger = get_logger('cli')

app = typer.Typer(
    name="encodex",
    help="Encode input as Base64/Base64url, or decode it with --decode.",
    add_completion=False
)
err_console = Console(stderr=True)

LICENSE_NOTICE = """\
Copyright (C) 2022  Fabian Moos

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU Lesser General Public License as
published by the Free Software Foundation, either version 3 of the
License, or (at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU Lesser General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program.  If not, see <https://www.gnu.org/licenses/>."""


def version_callback(value: bool):
    """Print version and license information and exit."""
    if value:
        typer.echo(f"encodex {__version__}  {__description__}\n")
        typer.echo(LICENSE_NOTICE)
        raise typer.Exit()


def collect_input(
    source: InputSource,
    files: List[str],
    texts: List[str],
) -> bool:
    """
    Fill the input source from files and literals.

    Standard input is read when neither files nor texts are given.

    Returns:
        True if every file could be read
    """
    ok = True
    for name in files:
        try:
            source.add_file(name)
        except InputReadError as e:
            err_console.print(str(e), style="red", markup=False, soft_wrap=True)
            ok = False

    for text in texts:
        source.add_literal(text)

    if not files and not texts:
        source.add_file(STDIN_NAME)

    return ok


def write_output(unit: TranslationUnit):
    """Write a translated unit to stdout."""
    if unit.encode_mode is EncodeMode.ENCODE:
        typer.echo(unit.output.decode('ascii'))
    else:
        # Decoded data is arbitrary bytes
        typer.echo(unit.output)


@app.command()
def translate(
    files: Optional[List[str]] = typer.Argument(
        None, help="Files to translate ('-' reads stdin)", show_default=False
    ),
    base: Base = typer.Option(
        Base.BASE64, "--base", "-b",
        help="Base encoding", case_sensitive=False, envvar="ENCODEX_BASE"
    ),
    decode: bool = typer.Option(False, "--decode", "-d", help="Decode input"),
    text: Optional[List[str]] = typer.Option(
        None, "--text", "-t", help="Literal input string (repeatable)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True,
        help="Print version and license information and exit"
    ),
):
    """Encode or decode files and strings."""
    if verbose:
        logging.basicConfig(stream=sys.stderr, format='%(levelname)s %(name)s: %(message)s')
        setup_logging(logging.DEBUG)

    settings = Settings.for_decoding(base) if decode else Settings.for_encoding(base)
    source = InputSource(Path.cwd())
    ok = collect_input(source, files or [], text or [])
    logger.debug("Collected %d input(s), %s", len(source), settings)

    for data in source:
        unit = TranslationUnit(data, settings)
        try:
            unit.translate()
        except TranslationError as e:
            err_console.print(str(e), style="red", markup=False, soft_wrap=True)
            ok = False
            continue
        write_output(unit)

    if not ok:
        raise typer.Exit(1)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
