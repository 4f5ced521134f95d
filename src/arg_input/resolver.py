"""
Turns path arguments into open input handles.

Every argument is resolved before anything is read, so all open failures
are known up front. Resolution is all-or-nothing: either every argument
yields a handle, or the caller gets an ``InputError`` listing each argument
that failed, and the files that did open are closed again.
"""

from __future__ import annotations

import errno
import logging
import os
import sys
from collections.abc import Callable, Sequence
from typing import BinaryIO

from returns.result import Failure, Result, Success

from ._internal.attempt import attempt_map
from .app import config
from .errors import InputError, OpenFailure
from .handles import Handle, OpenFile, StandardInput
from .types import StrPath

logger = logging.getLogger(__name__)

type ArgumentProvider = Callable[[], Sequence[StrPath]]


def process_arguments() -> list[str]:
    """Return the process's command-line arguments without the program name."""
    return sys.argv[1:]


def _standard_input(stdin: BinaryIO | None) -> Result[StandardInput, OpenFailure]:
    # sys.stdin is None under pythonw or when file descriptor 0 is closed.
    if stdin is None:
        stdin = getattr(sys.stdin, "buffer", None)
    if stdin is None:
        cause = OSError(errno.EBADF, "standard input is not available")
        return Failure(OpenFailure(path=config.STDIN_SENTINEL, cause=cause))
    return Success(StandardInput(stdin))


def resolve_one(path: StrPath, *, stdin: BinaryIO | None = None) -> Result[Handle, OpenFailure]:
    """Resolve a single argument to standard input or an open file."""
    name = os.fsdecode(path)
    if name == config.STDIN_SENTINEL:
        return _standard_input(stdin)

    try:
        stream = open(path, "rb")
    except OSError as e:
        return Failure(OpenFailure(path=name, cause=e))
    return Success(OpenFile(path=name, stream=stream))


def resolve(
    paths: Sequence[StrPath], *, stdin: BinaryIO | None = None
) -> Result[list[Handle], InputError]:
    """
    Resolve every path argument into a handle.

    With no arguments at all, standard input is returned without touching
    the filesystem. Otherwise each argument is resolved with
    :func:`resolve_one`; the literal ``-`` stands for standard input and may
    appear any number of times.

    Args:
        paths: Ordered path-like arguments.
        stdin: Binary stream to use as standard input. Defaults to
            ``sys.stdin.buffer``; when the process has no standard input,
            ``-`` and an empty argument list fail with an ``OpenFailure``
            for ``-``.

    Returns:
        ``Success`` with one handle per argument, in order, or ``Failure``
        with an ``InputError`` naming every argument that could not be opened.
    """
    if len(paths) == 0:
        logger.debug("No input arguments given, reading from standard input")
        return (
            _standard_input(stdin)
            .map(lambda handle: [handle])
            .alt(lambda failure: InputError([failure]))
        )

    logger.debug("Resolving %d input arguments", len(paths))
    return attempt_map(
        paths,
        lambda path: resolve_one(path, stdin=stdin),
        discard=lambda handle: handle.release(),
    ).alt(InputError)


def resolve_from_process_arguments(
    *,
    arguments: ArgumentProvider = process_arguments,
    stdin: BinaryIO | None = None,
) -> Result[list[Handle], InputError]:
    """
    Resolve the process's own command-line arguments.

    Assumes ``sys.argv`` is undisturbed and that every argument after the
    program name is a file path or ``-``. Flags are not recognised and will
    fail to open as files; parse them first and call :func:`resolve` with
    what is left.
    """
    return resolve(arguments(), stdin=stdin)


__all__ = [
    "ArgumentProvider",
    "process_arguments",
    "resolve",
    "resolve_from_process_arguments",
    "resolve_one",
]
