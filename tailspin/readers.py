"""Asynchronous sources of lines: standard input, a shell command, or tailed files."""

from __future__ import annotations

import asyncio
import os
import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import BinaryIO

from tailspin.theme import Color, Style

_MAX_BUCKET_SIZE = 10_000
_POLL_INTERVAL = 0.1
_STREAM_LIMIT = 16 * 1024 * 1024

_BOLD = Style(bold=True)
_GREEN = Style(fg=Color.GREEN)
_DIMMED = Style(dimmed=True)


class LineReader(ABC):
    """A source that yields batches of lines, or None when it is exhausted."""

    @abstractmethod
    async def next_line(self) -> list[str] | None:
        """Return the next batch of lines, or None at the end of input."""


def _signal(event: asyncio.Event | None) -> None:
    if event is not None:
        event.set()


def _decode_line(data: bytes) -> str:
    if data.endswith(b"\n"):
        data = data[:-1]
    return data.decode("utf-8", errors="replace")


class StdinReader(LineReader):
    """Reads lines from a binary stream, standard input by default."""

    def __init__(self, stream: BinaryIO | None = None, reached_eof: asyncio.Event | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin.buffer
        self._reached_eof = reached_eof

    async def next_line(self) -> list[str] | None:
        data = await asyncio.to_thread(self._stream.readline)
        if not data:
            _signal(self._reached_eof)
            self._reached_eof = None
            return None
        return [_decode_line(data)]


class CommandReader(LineReader):
    """Reads the standard output of a shell command that ignores interrupts."""

    def __init__(self, process: asyncio.subprocess.Process) -> None:
        self._process = process

    @classmethod
    async def start(cls, command: str, reached_eof: asyncio.Event | None = None) -> CommandReader:
        """Signal that output may be shown at once, then start the command."""
        _signal(reached_eof)
        process = await asyncio.create_subprocess_exec(
            "sh",
            "-c",
            f"trap '' INT; {command}",
            stdout=asyncio.subprocess.PIPE,
            limit=_STREAM_LIMIT,
        )
        return cls(process)

    async def next_line(self) -> list[str] | None:
        stdout = self._process.stdout
        if stdout is None:
            return None
        data = await stdout.readline()
        if not data:
            await self._process.wait()
            return None
        return [_decode_line(data)]


class _TailedFile:
    """An open file read line by line, following growth and truncation."""

    def __init__(self, path: str, from_start: bool) -> None:
        self._handle = open(path, "rb")
        if not from_start:
            self._handle.seek(0, os.SEEK_END)

    def read_line(self) -> str | None:
        try:
            size = os.fstat(self._handle.fileno()).st_size
        except OSError:
            return None
        if size < self._handle.tell():
            self._handle.seek(0)
        data = self._handle.readline()
        if not data:
            return None
        text = data.decode("utf-8", errors="replace")
        if text.endswith("\n"):
            text = text[:-1]
            if text.endswith("\r"):
                text = text[:-1]
        return text


def _terminal_width() -> int | None:
    try:
        return os.get_terminal_size(sys.stdout.fileno()).columns
    except (AttributeError, OSError, ValueError):
        return None


def folder_banner(folder_name: str, file_paths: Sequence[str], width: int | None) -> str:
    """The message shown before the lines of a followed folder."""
    names = [Path(path).name or path for path in file_paths]
    last = len(names) - 1
    listing = "\n".join(
        f"         {'└─' if index == last else '├─'} {_BOLD.paint(name)}"
        for index, name in enumerate(names)
    )
    separator = "▁" * width if width else ""
    return f"Watching {_GREEN.paint(folder_name)} \n{listing}\n{_DIMMED.paint(separator)}\n"


class FileTailReader(LineReader):
    """Follows one or more files, reading existing content in batches first."""

    def __init__(
        self,
        files: list[_TailedFile],
        *,
        number_of_lines: int,
        bucket_size: int,
        following: bool,
        reached_eof: asyncio.Event | None,
        startup_message: str | None = None,
    ) -> None:
        self._files = files
        self._number_of_lines = number_of_lines
        self._bucket_size = bucket_size
        self._following = following
        self._reached_eof = reached_eof
        self._startup_message = startup_message
        self._current_line = 0

    @classmethod
    def single(
        cls,
        file_path: str,
        number_of_lines: int,
        start_at_end: bool,
        reached_eof: asyncio.Event | None = None,
    ) -> FileTailReader:
        """Follow one file, from its start or from its end."""
        tailed = _TailedFile(file_path, from_start=not start_at_end)
        following = start_at_end or number_of_lines == 0
        if following:
            _signal(reached_eof)
            reached_eof = None
        return cls(
            [tailed],
            number_of_lines=number_of_lines,
            bucket_size=max(1, min(number_of_lines - 1, _MAX_BUCKET_SIZE)),
            following=following,
            reached_eof=reached_eof,
        )

    @classmethod
    def multiple(
        cls,
        folder_name: str,
        file_paths: Sequence[str],
        reached_eof: asyncio.Event | None = None,
    ) -> FileTailReader:
        """Follow new lines of every file in a folder, after a banner listing them."""
        _signal(reached_eof)
        message = folder_banner(folder_name, file_paths, _terminal_width())
        files = [_TailedFile(path, from_start=False) for path in file_paths]
        return cls(
            files,
            number_of_lines=0,
            bucket_size=1,
            following=True,
            reached_eof=None,
            startup_message=message,
        )

    async def next_line(self) -> list[str] | None:
        if self._startup_message is not None:
            message, self._startup_message = self._startup_message, None
            return [message]

        if self._following:
            return [await self._wait_for_line()]

        bucket: list[str] = []
        while len(bucket) < self._bucket_size:
            bucket.append(await self._wait_for_line())
            self._current_line += 1
            if self._current_line >= self._number_of_lines:
                self._reach_eof()
                self._bucket_size = 1
        return bucket

    def _reach_eof(self) -> None:
        if self._reached_eof is not None:
            self._following = True
            _signal(self._reached_eof)
            self._reached_eof = None

    async def _wait_for_line(self) -> str:
        while True:
            for tailed in self._files:
                line = tailed.read_line()
                if line is not None:
                    return line
            await asyncio.sleep(_POLL_INTERVAL)