"""Destinations for highlighted lines."""

from __future__ import annotations

import secrets
import sys
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from types import TracebackType
from typing import TextIO

from tailspin.theme import Color, Style

_YELLOW = Style(fg=Color.YELLOW)


class LineWriter(ABC):
    """Something that accepts highlighted lines."""

    @abstractmethod
    async def write_line(self, line: str) -> None:
        """Write one line; the writer adds the newline."""


class NullWriter(LineWriter):
    """Discards every line."""

    async def write_line(self, line: str) -> None:
        return None


class StdoutWriter(LineWriter):
    """Writes lines to a text stream, standard output by default."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    async def write_line(self, line: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"{line}\n")
        stream.flush()


class TempFileWriter(LineWriter):
    """Writes lines to a file in a private temporary directory."""

    def __init__(self, directory: tempfile.TemporaryDirectory[str], path: Path, handle: TextIO) -> None:
        self._directory = directory
        self.path = path
        self._handle = handle

    @classmethod
    def create(cls) -> TempFileWriter:
        """Create the temporary directory and the file inside it."""
        directory = tempfile.TemporaryDirectory()
        path = Path(directory.name) / f"tailspin.temp.{secrets.randbits(32)}"
        handle = path.open("w", encoding="utf-8", errors="replace", newline="")
        return cls(directory, path, handle)

    async def write_line(self, line: str) -> None:
        try:
            self._handle.write(f"{line}\n")
        except OSError as err:
            print(f"Error writing to temp file: {_YELLOW.paint(str(err))}")

        try:
            self._handle.flush()
        except OSError as err:
            print(f"Error flushing temp file: {_YELLOW.paint(str(err))}")

    def close(self) -> None:
        """Close the file and remove the temporary directory."""
        self._handle.close()
        self._directory.cleanup()

    def __enter__(self) -> TempFileWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()