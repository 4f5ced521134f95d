import io
import sys
from pathlib import Path

from returns.result import Failure

from arg_input import argf, argf_lines


def test_argf_reads_files_named_on_the_command_line(monkeypatch, input_paths: list[Path]) -> None:
    monkeypatch.setattr(sys, "argv", ["prog", *map(str, input_paths)])

    with argf().unwrap() as stream:
        assert stream.read_text() == "A\nB\nC\nD\nE\n"


def test_argf_without_arguments_reads_stdin(monkeypatch, fake_stdin: io.BytesIO) -> None:
    monkeypatch.setattr(sys, "argv", ["prog"])

    with argf().unwrap() as stream:
        assert stream.read() == b"from stdin\n"


def test_argf_uses_injected_argument_provider(input_paths: list[Path]) -> None:
    with argf(arguments=lambda: input_paths[3:]).unwrap() as stream:
        assert stream.read() == b"D\nE\n"


def test_argf_lines(monkeypatch, input_paths: list[Path], input_names: list[str]) -> None:
    monkeypatch.setattr(sys, "argv", ["prog", *map(str, input_paths)])

    lines = argf_lines().unwrap()

    assert [line.unwrap() for line in lines] == input_names


def test_argf_lines_reports_missing_files(missing_paths: list[Path]) -> None:
    res = argf_lines(arguments=lambda: missing_paths)

    assert isinstance(res, Failure)
    assert res.failure().paths == [str(p) for p in missing_paths]
