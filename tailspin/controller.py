"""Choosing the reader, writer and presenter that fit a configuration."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from types import TracebackType

from tailspin.presenters import LessPresenter, NoPresenter, Presenter
from tailspin.readers import CommandReader, FileTailReader, LineReader, StdinReader
from tailspin.types import CommandInput, Config, FileInput, FolderInput, Input, Output, StdinInput
from tailspin.writers import LineWriter, NullWriter, StdoutWriter, TempFileWriter


@dataclass
class Io:
    """A reader and a writer used together; closes the writer's resources on exit."""

    reader: LineReader
    writer: LineWriter

    async def next_line(self) -> list[str] | None:
        """Read the next batch of lines, or None at the end of input."""
        return await self.reader.next_line()

    async def write_line(self, line: str) -> None:
        """Write one highlighted line."""
        await self.writer.write_line(line)

    async def __aenter__(self) -> Io:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        if isinstance(self.writer, TempFileWriter):
            self.writer.close()


async def open_reader(
    input: Input, start_at_end: bool, reached_eof: asyncio.Event | None = None
) -> LineReader:
    """Create the reader for the configured input."""
    match input:
        case FileInput(path=path, line_count=line_count):
            return FileTailReader.single(path, line_count, start_at_end, reached_eof)
        case FolderInput(folder_name=folder_name, file_paths=file_paths):
            return FileTailReader.multiple(folder_name, file_paths, reached_eof)
        case StdinInput():
            return StdinReader(reached_eof=reached_eof)
        case CommandInput(command=command):
            return await CommandReader.start(command, reached_eof)
    raise TypeError(f"Unsupported input: {input!r}")


def open_writer_and_presenter(output: Output, follow: bool) -> tuple[LineWriter, Presenter]:
    """Create the writer for the configured output and the presenter that goes with it."""
    match output:
        case Output.TEMP_FILE:
            writer = TempFileWriter.create()
            return writer, LessPresenter(str(writer.path), follow)
        case Output.STDOUT:
            return StdoutWriter(), NoPresenter()
        case Output.SUPPRESS:
            return NullWriter(), NoPresenter()
    raise TypeError(f"Unsupported output: {output!r}")


async def get_io_and_presenter(
    config: Config, reached_eof: asyncio.Event | None = None
) -> tuple[Io, Presenter]:
    """Build the reader, writer and presenter described by a configuration."""
    reader = await open_reader(config.input, config.start_at_end, reached_eof)
    writer, presenter = open_writer_and_presenter(config.output, config.follow)
    return Io(reader=reader, writer=writer), presenter