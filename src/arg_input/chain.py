"""
Concatenates resolved handles into one readable byte stream.

Usage:
    with chain(handles) as stream:
        data = stream.read()

Reads drain the current handle before moving to the next. An exhausted file
is closed as soon as the chain moves past it; files not reached yet are
closed when the chained stream itself is closed. Standard input is never
closed.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Sequence

from .app import config
from .handles import Handle
from .lines import Lines, to_lines

logger = logging.getLogger(__name__)


class _HandleChain(io.RawIOBase):
    """Flat, index-based concatenation of handles."""

    def __init__(self, handles: Sequence[Handle]) -> None:
        super().__init__()
        self._handles = list(handles)
        self._index = 0
        self._deferred: OSError | None = None

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        view = memoryview(buffer).cast("B")
        if self._deferred is not None:
            error, self._deferred = self._deferred, None
            raise error
        if not view:
            return 0

        while self._index < len(self._handles):
            handle = self._handles[self._index]
            try:
                chunk = handle.read(len(view))
            except OSError:
                # The next read continues with the following handle.
                self._advance()
                raise
            if chunk:
                view[: len(chunk)] = chunk
                return len(chunk)
            self._advance()

        return 0

    def defer(self, error: OSError) -> None:
        """Raise ``error`` from the next read instead of the current one."""
        self._deferred = error

    def _advance(self) -> None:
        handle = self._handles[self._index]
        logger.debug("Finished reading %s", handle.name)
        handle.release()
        self._index += 1

    def close(self) -> None:
        if not self.closed:
            pending = self._handles[self._index :]
            self._index = len(self._handles)
            for handle in pending:
                handle.release()
        super().close()


class ChainedStream(io.BufferedReader):
    """A buffered, read-only view over a sequence of handles."""

    def __init__(
        self, handles: Sequence[Handle], buffer_size: int = config.DEFAULT_BUFFER_SIZE
    ) -> None:
        super().__init__(_HandleChain(handles), buffer_size=buffer_size)

    def read(self, size: int | None = -1) -> bytes:
        """
        Read up to ``size`` bytes, or everything left when ``size`` is negative.

        If a handle fails after some bytes were already read, those bytes are
        returned and the ``OSError`` is raised by the next read.
        """
        limit = None if size is None or size < 0 else size
        chunks: list[bytes] = []
        total = 0
        while limit is None or total < limit:
            try:
                chunk = self.read1(-1 if limit is None else limit - total)
            except OSError as e:
                if not chunks:
                    raise
                self.raw.defer(e)
                break
            if not chunk:
                break
            chunks.append(chunk)
            total += len(chunk)
        return b"".join(chunks)

    def read_text(
        self, encoding: str = config.DEFAULT_ENCODING, errors: str = config.DEFAULT_ERRORS
    ) -> str:
        """Read every remaining byte and decode it."""
        return self.read().decode(encoding, errors)

    def lines(
        self, encoding: str = config.DEFAULT_ENCODING, errors: str = config.DEFAULT_ERRORS
    ) -> Lines:
        return to_lines(self, encoding=encoding, errors=errors)


def chain(
    handles: Sequence[Handle], *, buffer_size: int = config.DEFAULT_BUFFER_SIZE
) -> ChainedStream:
    """Compose handles into one stream. Nothing is read until the stream is."""
    return ChainedStream(handles, buffer_size=buffer_size)


__all__ = ["ChainedStream", "chain"]
