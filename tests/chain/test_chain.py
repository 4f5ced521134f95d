import io
from pathlib import Path

import pytest

from arg_input.chain import ChainedStream, chain
from arg_input.handles import OpenFile, StandardInput


class FailingStream(io.RawIOBase):
    """A readable stream whose every read fails."""

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        raise OSError("device went away")


def _open(path: Path) -> OpenFile:
    return OpenFile(path=str(path), stream=path.open("rb"))


def test_chain_concatenates_across_boundaries(tmp_path: Path) -> None:
    contents = [b"ab", b"", b"cde", b"\n", b"fghij"]
    paths = []
    for i, data in enumerate(contents):
        path = tmp_path / f"part{i}"
        path.write_bytes(data)
        paths.append(path)

    with chain([_open(p) for p in paths], buffer_size=2) as stream:
        assert stream.read() == b"".join(contents)


def test_chain_small_reads_never_skip_bytes(tmp_path: Path) -> None:
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.write_bytes(b"123")
    second.write_bytes(b"456")

    with chain([_open(first), _open(second)], buffer_size=1) as stream:
        pieces = []
        while chunk := stream.read(2):
            pieces.append(chunk)

    assert b"".join(pieces) == b"123456"


def test_chain_of_nothing_is_empty() -> None:
    stream = chain([])
    assert isinstance(stream, ChainedStream)
    assert stream.read() == b""
    assert stream.read_text() == ""


def test_exhausted_chain_stays_exhausted(tmp_path: Path) -> None:
    path = tmp_path / "only"
    path.write_bytes(b"data")
    handle = _open(path)

    stream = chain([handle])
    assert stream.read() == b"data"
    assert handle.stream.closed

    assert stream.read() == b""
    assert stream.read(10) == b""
    assert stream.readline() == b""
    stream.close()


def test_close_releases_unread_files_but_not_stdin(tmp_path: Path) -> None:
    path = tmp_path / "unread"
    path.write_bytes(b"never read")
    stdin = io.BytesIO(b"in")
    handles = [StandardInput(stdin), _open(path)]

    stream = chain(handles)
    stream.close()

    assert handles[1].stream.closed
    assert not stdin.closed


def test_stdin_is_not_closed_after_exhaustion() -> None:
    stdin = io.BytesIO(b"x")
    with chain([StandardInput(stdin), StandardInput(stdin)]) as stream:
        assert stream.read() == b"x"
    assert not stdin.closed


def test_read_error_surfaces_then_moves_to_next_handle() -> None:
    bad = OpenFile(path="bad", stream=FailingStream())
    good = StandardInput(io.BytesIO(b"next"))

    stream = chain([bad, good])
    with pytest.raises(OSError, match="device went away"):
        stream.read()

    assert bad.stream.closed
    assert stream.read() == b"next"


def _good_bad_good():
    return chain(
        [
            StandardInput(io.BytesIO(b"first\n")),
            OpenFile(path="bad", stream=FailingStream()),
            StandardInput(io.BytesIO(b"last\n")),
        ]
    )


def test_read_error_after_data_returns_earlier_bytes_first() -> None:
    stream = _good_bad_good()

    assert stream.read() == b"first\n"
    with pytest.raises(OSError, match="device went away"):
        stream.read()
    assert stream.read() == b"last\n"
    assert stream.read() == b""


def test_sized_read_keeps_bytes_read_before_an_error() -> None:
    stream = _good_bad_good()

    assert stream.read(100) == b"first\n"
    with pytest.raises(OSError):
        stream.read(100)
    assert stream.read(100) == b"last\n"


def test_partial_reads_keep_every_byte_before_an_error() -> None:
    stream = _good_bad_good()

    assert stream.read(2) == b"fi"
    assert stream.read() == b"rst\n"
    with pytest.raises(OSError):
        stream.read()
    assert stream.read() == b"last\n"


def test_read_text_keeps_text_read_before_an_error() -> None:
    stream = _good_bad_good()

    assert stream.read_text() == "first\n"
    with pytest.raises(OSError):
        stream.read_text()
    assert stream.read_text() == "last\n"


def test_read_text_decodes_everything(tmp_path: Path) -> None:
    path = tmp_path / "text"
    path.write_bytes("héllo\n".encode("utf-8"))

    with chain([_open(path), StandardInput(io.BytesIO(b"world\n"))]) as stream:
        assert stream.read_text() == "héllo\nworld\n"


def test_chained_stream_is_read_only() -> None:
    with chain([StandardInput(io.BytesIO(b""))]) as stream:
        assert stream.readable()
        assert not stream.seekable()
        assert not stream.writable()
