"""
Splits a binary stream into decoded text lines.

Every element is a ``Result``: a line that was read and decoded is a
``Success``, a line whose read or decode failed is a ``Failure``. A failure
does not end the sequence; later lines are still produced.
"""

from __future__ import annotations

import io
from collections.abc import Iterator
from types import TracebackType
from typing import BinaryIO

from returns.result import Failure, Result, safe

from .app import config
from .types import LineFailure


def _strip_terminator(raw: bytes) -> bytes:
    if raw.endswith(config.LINE_TERMINATOR):
        return raw[: -len(config.LINE_TERMINATOR)].removesuffix(config.CARRIAGE_RETURN)
    return raw


@safe(exceptions=(UnicodeDecodeError,))
def _decode(raw: bytes, encoding: str, errors: str) -> str:
    return raw.decode(encoding, errors)


class Lines(Iterator[Result[str, LineFailure]]):
    """Single-pass iterator over the lines of a buffered binary stream.

    Once the stream is exhausted the iterator stays exhausted.
    """

    def __init__(
        self,
        reader: io.BufferedIOBase,
        *,
        encoding: str = config.DEFAULT_ENCODING,
        errors: str = config.DEFAULT_ERRORS,
    ) -> None:
        self._reader = reader
        self._encoding = encoding
        self._errors = errors
        self._exhausted = False

    def __iter__(self) -> Lines:
        return self

    def __next__(self) -> Result[str, LineFailure]:
        if self._exhausted:
            raise StopIteration

        try:
            raw = self._reader.readline()
        except OSError as e:
            return Failure(e)

        if not raw:
            self._exhausted = True
            raise StopIteration
        return _decode(_strip_terminator(raw), self._encoding, self._errors)

    def close(self) -> None:
        self._exhausted = True
        self._reader.close()

    def __enter__(self) -> Lines:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def to_lines(
    stream: BinaryIO | io.BufferedIOBase,
    *,
    encoding: str = config.DEFAULT_ENCODING,
    errors: str = config.DEFAULT_ERRORS,
    buffer_size: int = config.DEFAULT_BUFFER_SIZE,
) -> Lines:
    """
    Iterate over the lines of ``stream``.

    Lines are split on ``\\n`` and returned without the terminator (a ``\\r``
    right before it is dropped too), so the encoding must keep ``\\n`` as a
    single byte, as UTF-8 and Latin-1 do. Streams that are not already
    buffered are wrapped in an ``io.BufferedReader`` of ``buffer_size`` bytes.
    """
    if isinstance(stream, io.BufferedIOBase):
        reader = stream
    else:
        reader = io.BufferedReader(stream, buffer_size=buffer_size)
    return Lines(reader, encoding=encoding, errors=errors)


__all__ = ["Lines", "to_lines"]
