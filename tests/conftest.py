import io
import sys
from pathlib import Path

import pytest

INPUTS = ["A", "B", "C", "D", "E"]
NONEXISTENT = ["Z", "Y", "X"]


@pytest.fixture
def input_dir(tmp_path: Path) -> Path:
    """A directory holding one file per name in INPUTS, each containing its own name."""
    for name in INPUTS:
        (tmp_path / name).write_text(f"{name}\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def input_paths(input_dir: Path) -> list[Path]:
    return [input_dir / name for name in INPUTS]


@pytest.fixture
def missing_paths(tmp_path: Path) -> list[Path]:
    return [tmp_path / name for name in NONEXISTENT]


@pytest.fixture
def fake_stdin(monkeypatch: pytest.MonkeyPatch) -> io.BytesIO:
    """Replace the process's standard input with an in-memory stream."""
    buffer = io.BytesIO(b"from stdin\n")
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(buffer, encoding="utf-8"))
    return buffer


@pytest.fixture
def input_names() -> list[str]:
    return list(INPUTS)
