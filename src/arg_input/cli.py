"""
Command-line interface for arg-input.

``argcat`` concatenates its FILE arguments to standard output, reading
standard input when no files are given or where ``-`` appears, and reports
every file that cannot be opened before printing anything.
"""

import logging
import shutil
from pathlib import Path
from typing import Annotated, BinaryIO

import typer
from pydantic import ValidationError
from returns.result import Failure, Success
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from .api import read_all
from .app import config
from .app.options import ReadOptions, format_validation_errors
from .chain import ChainedStream
from .errors import InputError

err_console = Console(stderr=True)

app = typer.Typer(
    name=config.CLI_NAME,
    help="Concatenate files, or standard input, to standard output.",
    add_completion=False,
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        rprint(f"[bold blue]{config.CLI_NAME}[/bold blue] version [green]{config.VERSION}[/green]")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _create_read_options(encoding: str, errors: str, buffer_size: int) -> ReadOptions:
    try:
        return ReadOptions(encoding=encoding, errors=errors, buffer_size=buffer_size)
    except ValidationError as e:
        error_details = format_validation_errors(e)
        raise typer.BadParameter(f"Invalid read options:\n{error_details}") from e


def _report_input_error(error: InputError) -> None:
    noun = "input" if len(error) == 1 else "inputs"
    body = "\n".join(
        f"[bold]{escape(failure.path)}[/bold]: {escape(failure.cause.strerror or str(failure.cause))}"
        for failure in error
    )
    err_console.print(
        Panel(
            body,
            title=f"[bold red]Failed to open {len(error)} {noun}[/bold red]",
            border_style="red",
        )
    )


def _copy_bytes(stream: ChainedStream, out: BinaryIO) -> int:
    try:
        shutil.copyfileobj(stream, out)
    except OSError as e:
        err_console.print(f"[bold red]Read error:[/bold red] {escape(str(e))}")
        return 1
    return 0


def _number_lines(stream: ChainedStream, options: ReadOptions) -> int:
    failures = 0
    for lineno, line in enumerate(stream.lines(options.encoding, options.errors), start=1):
        match line:
            case Success(text):
                typer.echo(f"{lineno:6}\t{text}")
            case Failure(error):
                failures += 1
                err_console.print(f"[bold red]line {lineno}:[/bold red] {escape(str(error))}")
    return 1 if failures else 0


@app.command()
def main(
    files: Annotated[
        list[Path] | None,
        typer.Argument(
            help="Files to concatenate. '-' reads standard input; no files reads only standard input.",
            metavar="FILE",
            show_default=False,
        ),
    ] = None,
    number: Annotated[
        bool,
        typer.Option("--number", "-n", help="Number every output line."),
    ] = False,
    encoding: Annotated[
        str,
        typer.Option("--encoding", help="Text encoding used with --number."),
    ] = config.DEFAULT_ENCODING,
    errors: Annotated[
        str,
        typer.Option("--errors", help="Decoding error handler used with --number."),
    ] = config.DEFAULT_ERRORS,
    buffer_size: Annotated[
        int,
        typer.Option("--buffer-size", help="Read buffer size in bytes."),
    ] = config.DEFAULT_BUFFER_SIZE,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log how inputs are opened and read."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
) -> None:
    """Concatenate FILE(s) to standard output."""
    _configure_logging(verbose)
    options = _create_read_options(encoding, errors, buffer_size)

    result = read_all(files or [], buffer_size=options.buffer_size)
    if isinstance(result, Failure):
        _report_input_error(result.failure())
        raise typer.Exit(code=1)

    with result.unwrap() as stream:
        if number:
            exit_code = _number_lines(stream, options)
        else:
            out = typer.get_binary_stream("stdout")
            exit_code = _copy_bytes(stream, out)
            out.flush()

    if exit_code:
        raise typer.Exit(code=exit_code)


if __name__ == "__main__":
    app()
