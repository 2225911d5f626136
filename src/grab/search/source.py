"""Line sources: files and standard input.

Lines are read as bytes and decoded one at a time, so a single undecodable
line does not abort the run unless strict decoding is requested. Encodings
in which a newline is not the byte ``\\n`` (UTF-16, UTF-32) are decoded
incrementally and split after decoding.
"""

from __future__ import annotations

import builtins
import codecs
import io
import logging
import sys
from pathlib import Path
from typing import IO, Iterator

from grab.constants import DEFAULT_ENCODING, STDIN_DESIGNATOR
from grab.exceptions import FileAccessError, FileNotFoundError, LineDecodingError, ValidationError
from grab.search.types import Line

logger = logging.getLogger(__name__)

_READ_CHUNK_SIZE = 64 * 1024


def _strip_line_ending(raw: bytes | str) -> bytes | str:
    """Remove a trailing ``\\n`` or ``\\r\\n``; a lone trailing ``\\r`` is kept."""
    newline = b"\n" if isinstance(raw, bytes) else "\n"
    carriage = b"\r" if isinstance(raw, bytes) else "\r"
    if raw.endswith(newline):
        raw = raw[:-1]
        if raw.endswith(carriage):
            raw = raw[:-1]
    return raw


class LineSource:
    """Ordered, 0-indexed lines from a file or standard input.

    Parameters
    ----------
    path : str or Path, optional
        File to read. ``None`` or ``"-"`` reads standard input
    encoding : str, default "utf-8"
        Encoding used to decode each line
    strict_decoding : bool, default False
        Raise :class:`LineDecodingError` for undecodable lines instead of
        substituting replacement characters
    stream : IO, optional
        Explicit stream to read instead of standard input (binary or text)

    """

    def __init__(
        self,
        path: str | Path | None = None,
        *,
        encoding: str = DEFAULT_ENCODING,
        strict_decoding: bool = False,
        stream: IO | None = None,
    ) -> None:
        """Validate the encoding and remember where to read from."""
        try:
            encoded_newline = "\r\n".encode(encoding)
        except LookupError as exc:
            raise ValidationError(
                f"Unknown encoding: {encoding}", parameter_name="encoding", parameter_value=encoding, original_error=exc
            ) from exc
        self.path = None if path is None or str(path) == STDIN_DESIGNATOR else Path(path)
        self.encoding = encoding
        self.strict_decoding = strict_decoding
        self._stream = stream
        self._newline_is_byte = encoded_newline == b"\r\n"

    @property
    def name(self) -> str:
        """Display name of the source."""
        return str(self.path) if self.path is not None else "<stdin>"

    @property
    def is_stdin(self) -> bool:
        """Return True when reading standard input (or an injected stream)."""
        return self.path is None

    def __iter__(self) -> Iterator[Line]:
        return self.iter_lines()

    def iter_lines(self) -> Iterator[Line]:
        """Yield lines in order, without their line endings."""
        if self.path is None:
            stream = self._stream if self._stream is not None else getattr(sys.stdin, "buffer", sys.stdin)
            yield from self._read(stream)
            return

        handle = self._open()
        with handle:
            yield from self._read(handle)

    def read_all(self) -> list[str]:
        """Materialize the whole source as a list of line texts."""
        return [line.text for line in self.iter_lines()]

    def _open(self) -> IO[bytes]:
        assert self.path is not None
        try:
            return open(self.path, "rb")
        except builtins.FileNotFoundError as exc:
            raise FileNotFoundError(str(self.path), original_error=exc) from exc
        except IsADirectoryError as exc:
            raise FileAccessError(str(self.path), message=f"Is a directory: {self.path}", original_error=exc) from exc
        except PermissionError as exc:
            raise FileAccessError(
                str(self.path), message=f"Permission denied: {self.path}", original_error=exc
            ) from exc
        except OSError as exc:
            raise FileAccessError(str(self.path), original_error=exc) from exc

    def _read(self, stream: IO) -> Iterator[Line]:
        if self._newline_is_byte or isinstance(stream, io.TextIOBase):
            lines = self._split_raw_lines(stream)
        else:
            lines = self._decode_incrementally(stream)
        count = 0
        try:
            for line in lines:
                yield line
                count += 1
        except OSError as exc:
            raise FileAccessError(
                self.name, message=f"Error reading {self.name}: {exc}", original_error=exc
            ) from exc
        logger.debug("Read %d lines from %s", count, self.name)

    def _split_raw_lines(self, stream: IO) -> Iterator[Line]:
        for index, raw in enumerate(stream):
            yield Line(index, self._decode(_strip_line_ending(raw), index))

    def _decode_incrementally(self, stream: IO[bytes]) -> Iterator[Line]:
        """Decode the whole stream, then split the text on ``\\n``.

        Needed for encodings such as UTF-16, where a newline is not the single
        byte ``\\n`` and splitting the raw bytes would cut characters in half.
        """
        decoder = codecs.getincrementaldecoder(self.encoding)(errors="strict" if self.strict_decoding else "replace")
        index = 0
        pending = ""
        while True:
            chunk = stream.read(_READ_CHUNK_SIZE)
            final = not chunk
            try:
                pending += decoder.decode(chunk, final)
            except UnicodeDecodeError as exc:
                # Reported against the first line not yet completed when the bad chunk arrived
                raise LineDecodingError(index, self.encoding, self.name, original_error=exc) from exc
            *complete, pending = pending.split("\n")
            for text in complete:
                yield self._decoded_line(index, text[:-1] if text.endswith("\r") else text)
                index += 1
            if final:
                break
        if pending:
            yield self._decoded_line(index, pending)

    def _decoded_line(self, index: int, text: str) -> Line:
        if "\ufffd" in text and not self.strict_decoding:
            logger.debug("Line %d of %s may contain replaced %s bytes", index + 1, self.name, self.encoding)
        return Line(index, text)

    def _decode(self, raw: bytes | str, index: int) -> str:
        if isinstance(raw, str):
            return raw
        try:
            return raw.decode(self.encoding)
        except UnicodeDecodeError as exc:
            if self.strict_decoding:
                raise LineDecodingError(index, self.encoding, self.name, original_error=exc) from exc
            logger.debug("Line %d of %s is not valid %s; replacing bad bytes", index + 1, self.name, self.encoding)
            return raw.decode(self.encoding, errors="replace")
