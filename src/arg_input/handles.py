"""
Resolved input handles.

A handle is either standard input or a file opened from a path argument.
Both wrap a binary readable stream; only ``OpenFile`` owns its stream and
closes it on release, standard input is left open for the process.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from .app import config


def _read_chunk(stream: BinaryIO, size: int) -> bytes:
    # read1 returns what is available instead of blocking for a full chunk.
    read1 = getattr(stream, "read1", None)
    if read1 is not None:
        return read1(size)
    return stream.read(size)


@dataclass(frozen=True, slots=True)
class StandardInput:
    """Standard input, either the process's own or an injected binary stream."""

    stream: BinaryIO

    @property
    def name(self) -> str:
        return config.STDIN_SENTINEL

    def read(self, size: int) -> bytes:
        return _read_chunk(self.stream, size)

    def release(self) -> None:
        """Standard input is never closed."""


@dataclass(frozen=True, slots=True)
class OpenFile:
    """A file opened read-only from a path argument."""

    path: str
    stream: BinaryIO

    @property
    def name(self) -> str:
        return self.path

    def read(self, size: int) -> bytes:
        return _read_chunk(self.stream, size)

    def release(self) -> None:
        self.stream.close()


type Handle = StandardInput | OpenFile

__all__ = ["Handle", "OpenFile", "StandardInput"]
