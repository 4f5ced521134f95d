"""
Entry points that go from path arguments straight to a stream or lines.

``argf()`` and ``argf_lines()`` pull their arguments from the command line
and assume it holds **only** file arguments. If the command line also
carries options (parsed with typer or argparse, say), parse those first and
pass the remaining paths to ``read_all()`` or ``read_lines()``.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import partial
from typing import BinaryIO

from returns.result import Result

from .app import config
from .chain import ChainedStream, chain
from .errors import InputError
from .lines import Lines, to_lines
from .resolver import ArgumentProvider, process_arguments, resolve, resolve_from_process_arguments
from .types import StrPath


def read_all(
    paths: Sequence[StrPath],
    *,
    buffer_size: int = config.DEFAULT_BUFFER_SIZE,
    stdin: BinaryIO | None = None,
) -> Result[ChainedStream, InputError]:
    """
    Return one stream with every input chained together.

    With no paths the stream reads solely from standard input. Otherwise
    standard input is ignored unless ``-`` is among the paths.

    Returns:
        ``Success`` with the chained stream, or ``Failure`` with an
        ``InputError`` naming every path that could not be opened.
    """
    return resolve(paths, stdin=stdin).map(partial(chain, buffer_size=buffer_size))


def read_lines(
    paths: Sequence[StrPath],
    *,
    encoding: str = config.DEFAULT_ENCODING,
    errors: str = config.DEFAULT_ERRORS,
    buffer_size: int = config.DEFAULT_BUFFER_SIZE,
    stdin: BinaryIO | None = None,
) -> Result[Lines, InputError]:
    """Return the lines of every input, in order. See :func:`read_all`."""
    return read_all(paths, buffer_size=buffer_size, stdin=stdin).map(
        partial(to_lines, encoding=encoding, errors=errors)
    )


def argf(
    *,
    arguments: ArgumentProvider = process_arguments,
    buffer_size: int = config.DEFAULT_BUFFER_SIZE,
    stdin: BinaryIO | None = None,
) -> Result[ChainedStream, InputError]:
    """Act like :func:`read_all`, with paths taken from the command line."""
    return resolve_from_process_arguments(arguments=arguments, stdin=stdin).map(
        partial(chain, buffer_size=buffer_size)
    )


def argf_lines(
    *,
    arguments: ArgumentProvider = process_arguments,
    encoding: str = config.DEFAULT_ENCODING,
    errors: str = config.DEFAULT_ERRORS,
    buffer_size: int = config.DEFAULT_BUFFER_SIZE,
    stdin: BinaryIO | None = None,
) -> Result[Lines, InputError]:
    """Act like :func:`read_lines`, with paths taken from the command line."""
    return argf(arguments=arguments, buffer_size=buffer_size, stdin=stdin).map(
        partial(to_lines, encoding=encoding, errors=errors)
    )


__all__ = ["argf", "argf_lines", "read_all", "read_lines"]
