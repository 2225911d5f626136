import io
from pathlib import Path

import pytest

from grab.exceptions import FileAccessError, FileNotFoundError, LineDecodingError, ValidationError
from grab.search.source import LineSource


@pytest.mark.unit
def test_reads_lines_without_endings(tmp_path: Path) -> None:
    path = tmp_path / "mixed.txt"
    path.write_bytes(b"unix\nwindows\r\nlast line")

    assert LineSource(path).read_all() == ["unix", "windows", "last line"]


@pytest.mark.unit
def test_lone_carriage_return_is_kept(tmp_path: Path) -> None:
    path = tmp_path / "cr.txt"
    path.write_bytes(b"ends with cr\r")

    assert LineSource(path).read_all() == ["ends with cr\r"]


@pytest.mark.unit
def test_lines_are_indexed_from_zero(sample_file: Path) -> None:
    lines = list(LineSource(str(sample_file)))

    assert [line.index for line in lines] == [0, 1, 2, 3, 4]
    assert lines[1].number == 2
    assert lines[1].text == "error: disk full"


@pytest.mark.unit
def test_empty_file_has_no_lines(tmp_path: Path) -> None:
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")

    assert LineSource(path).read_all() == []


@pytest.mark.unit
def test_dash_reads_injected_stream() -> None:
    source = LineSource("-", stream=io.BytesIO(b"one\ntwo\n"))

    assert source.is_stdin
    assert source.name == "<stdin>"
    assert source.read_all() == ["one", "two"]


@pytest.mark.unit
def test_text_stream_is_accepted() -> None:
    assert LineSource(stream=io.StringIO("alpha\nbeta\n")).read_all() == ["alpha", "beta"]


@pytest.mark.unit
def test_stdin_is_default(monkeypatch: pytest.MonkeyPatch) -> None:
    fake_stdin = io.TextIOWrapper(io.BytesIO(b"from stdin\n"), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", fake_stdin)

    assert LineSource().read_all() == ["from stdin"]


@pytest.mark.unit
def test_missing_file_raises_file_not_found(tmp_path: Path) -> None:
    missing = tmp_path / "missing.txt"

    with pytest.raises(FileNotFoundError) as exc_info:
        LineSource(missing).read_all()

    assert exc_info.value.file_path == str(missing)
    assert "File not found" in str(exc_info.value)


@pytest.mark.unit
def test_directory_raises_file_access_error(tmp_path: Path) -> None:
    with pytest.raises(FileAccessError):
        LineSource(tmp_path).read_all()


@pytest.mark.unit
def test_invalid_bytes_are_replaced_by_default(tmp_path: Path) -> None:
    path = tmp_path / "binary.txt"
    path.write_bytes(b"ok\nbad \xff byte\n")

    assert LineSource(path).read_all() == ["ok", "bad � byte"]


@pytest.mark.unit
def test_strict_decoding_raises_for_invalid_line(tmp_path: Path) -> None:
    path = tmp_path / "binary.txt"
    path.write_bytes(b"ok\nbad \xff byte\n")

    with pytest.raises(LineDecodingError) as exc_info:
        LineSource(path, strict_decoding=True).read_all()

    assert exc_info.value.line_index == 1
    assert "Line 2" in str(exc_info.value)


@pytest.mark.unit
def test_alternative_encoding(tmp_path: Path) -> None:
    path = tmp_path / "latin1.txt"
    path.write_bytes("café\n".encode("latin-1"))

    assert LineSource(path, encoding="latin-1").read_all() == ["café"]


@pytest.mark.unit
def test_unknown_encoding_is_rejected() -> None:
    with pytest.raises(ValidationError) as exc_info:
        LineSource("-", encoding="no-such-codec")

    assert exc_info.value.parameter_name == "encoding"


@pytest.mark.unit
@pytest.mark.parametrize("encoding", ["utf-16", "utf-16-le", "utf-32"])
def test_wide_encodings_split_after_decoding(tmp_path: Path, encoding: str) -> None:
    path = tmp_path / "wide.txt"
    path.write_bytes("one\ntwo\r\nthree".encode(encoding))

    assert LineSource(path, encoding=encoding).read_all() == ["one", "two", "three"]


@pytest.mark.unit
def test_wide_encoding_line_indices(tmp_path: Path) -> None:
    path = tmp_path / "wide.txt"
    path.write_bytes("alpha\nbeta\n".encode("utf-16"))

    lines = list(LineSource(path, encoding="utf-16"))

    assert [(line.index, line.text) for line in lines] == [(0, "alpha"), (1, "beta")]


@pytest.mark.unit
def test_wide_encoding_from_stdin_stream() -> None:
    source = LineSource("-", encoding="utf-16", stream=io.BytesIO("x\ny\n".encode("utf-16")))

    assert source.read_all() == ["x", "y"]


@pytest.mark.unit
def test_truncated_wide_encoding_is_replaced_or_fatal(tmp_path: Path) -> None:
    path = tmp_path / "truncated.txt"
    path.write_bytes("ok\n".encode("utf-16-le") + b"\x41")

    assert LineSource(path, encoding="utf-16-le").read_all() == ["ok", "�"]

    with pytest.raises(LineDecodingError):
        LineSource(path, encoding="utf-16-le", strict_decoding=True).read_all()


@pytest.mark.unit
def test_non_text_codec_is_rejected() -> None:
    with pytest.raises(ValidationError):
        LineSource("-", encoding="rot13")
