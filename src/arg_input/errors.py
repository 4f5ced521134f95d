"""
Error types produced while resolving input arguments.

Resolution reports every argument that could not be opened, not just the
first one, so a caller naming five missing files sees five failures.

Hierarchy
---------
ArgInputError
└── InputError
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class OpenFailure:
    """A single argument that could not be opened."""

    path: str
    cause: OSError

    def __str__(self) -> str:
        reason = self.cause.strerror or str(self.cause)
        return f"{self.path}: {reason}"


class ArgInputError(Exception):
    """Base exception for all arg-input errors."""


class InputError(ArgInputError):
    """Every open failure collected during one resolution, in argument order.

    ``failures`` is the authoritative view. ``first`` is only a shortcut for
    callers that want to show a single message.
    """

    def __init__(self, failures: Iterable[OpenFailure]) -> None:
        collected = tuple(failures)
        if not collected:
            raise ValueError("InputError requires at least one OpenFailure")
        super().__init__(*collected)
        self._failures = collected

    @property
    def failures(self) -> tuple[OpenFailure, ...]:
        return self._failures

    @property
    def first(self) -> OpenFailure:
        return self._failures[0]

    @property
    def paths(self) -> list[str]:
        return [failure.path for failure in self._failures]

    def __len__(self) -> int:
        return len(self._failures)

    def __iter__(self) -> Iterator[OpenFailure]:
        return iter(self._failures)

    def __str__(self) -> str:
        noun = "input" if len(self._failures) == 1 else "inputs"
        lines = [f"failed to open {len(self._failures)} {noun}:"]
        lines.extend(f"  {failure}" for failure in self._failures)
        return "\n".join(lines)


__all__ = ["ArgInputError", "InputError", "OpenFailure"]
