"""
Treat files and standard input as one long concatenated stream.

Inspired by Ruby's ``ARGF``: ``argf()`` reads every file named on the
command line as if it were a single file, falling back to standard input
when none are named, and ``argf_lines()`` iterates over its lines.
``read_all()`` and ``read_lines()`` do the same for an explicit list of
paths.
"""

import os

if os.environ.get("ARG_INPUT_BEARTYPE_THIS_PACKAGE", "0") == "1":
    from beartype.claw import beartype_this_package

    beartype_this_package()

from .api import argf, argf_lines, read_all, read_lines  # noqa: E402
from .chain import ChainedStream, chain  # noqa: E402
from .errors import ArgInputError, InputError, OpenFailure  # noqa: E402
from .handles import Handle, OpenFile, StandardInput  # noqa: E402
from .lines import Lines, to_lines  # noqa: E402
from .resolver import (  # noqa: E402
    process_arguments,
    resolve,
    resolve_from_process_arguments,
    resolve_one,
)

__all__ = [
    "ArgInputError",
    "ChainedStream",
    "Handle",
    "InputError",
    "Lines",
    "OpenFailure",
    "OpenFile",
    "StandardInput",
    "argf",
    "argf_lines",
    "chain",
    "process_arguments",
    "read_all",
    "read_lines",
    "resolve",
    "resolve_from_process_arguments",
    "resolve_one",
    "to_lines",
]
