import asyncio
import io
import sys
from pathlib import Path

import pytest

from tailspin.controller import Io, get_io_and_presenter, open_reader, open_writer_and_presenter
from tailspin.presenters import LessPresenter, NoPresenter
from tailspin.readers import StdinReader
from tailspin.types import CommandInput, Config, FileInput, FolderInput, Output, StdinInput
from tailspin.writers import NullWriter, StdoutWriter, TempFileWriter


def _fake_stdin(data: bytes) -> io.TextIOWrapper:
    return io.TextIOWrapper(io.BytesIO(data))


@pytest.mark.asyncio
async def test_stdout_output_writes_to_stdout(capsys):
    writer, presenter = open_writer_and_presenter(Output.STDOUT, False)
    await writer.write_line("hello")
    assert capsys.readouterr().out == "hello\n"
    assert isinstance(writer, StdoutWriter)
    assert isinstance(presenter, NoPresenter)


@pytest.mark.asyncio
async def test_suppressed_output_writes_nothing(capsys):
    writer, presenter = open_writer_and_presenter(Output.SUPPRESS, True)
    await writer.write_line("hello")
    assert capsys.readouterr().out == ""
    assert isinstance(writer, NullWriter)
    assert isinstance(presenter, NoPresenter)


@pytest.mark.asyncio
async def test_temp_file_output_is_presented_with_less():
    writer, presenter = open_writer_and_presenter(Output.TEMP_FILE, True)
    try:
        assert isinstance(writer, TempFileWriter)
        assert isinstance(presenter, LessPresenter)
        assert presenter.file_path == str(writer.path)
        assert presenter.follow is True
        await writer.write_line("hello")
        assert Path(presenter.file_path).read_text() == "hello\n"
    finally:
        writer.close()


@pytest.mark.asyncio
async def test_io_context_removes_temp_file():
    writer, _ = open_writer_and_presenter(Output.TEMP_FILE, False)
    path = writer.path
    async with Io(reader=StdinReader(io.BytesIO(b"")), writer=writer) as pair:
        await pair.write_line("line")
        assert path.read_text() == "line\n"
    assert not path.exists()


@pytest.mark.asyncio
async def test_stdin_reader_from_input(monkeypatch):
    monkeypatch.setattr(sys, "stdin", _fake_stdin(b"a\nb"))
    event = asyncio.Event()
    reader = await open_reader(StdinInput(), False, event)

    assert await reader.next_line() == ["a"]
    assert await reader.next_line() == ["b"]
    assert not event.is_set()
    assert await reader.next_line() is None
    assert event.is_set()


@pytest.mark.asyncio
async def test_file_reader_reads_in_buckets(tmp_path):
    log = tmp_path / "app.log"
    log.write_text("one\ntwo\nthree\n")
    event = asyncio.Event()
    reader = await open_reader(FileInput(path=str(log), line_count=3), False, event)

    assert await reader.next_line() == ["one", "two"]
    assert not event.is_set()
    assert await reader.next_line() == ["three"]
    assert event.is_set()


@pytest.mark.asyncio
async def test_command_reader_signals_at_once():
    event = asyncio.Event()
    reader = await open_reader(CommandInput("printf 'hi\\nthere\\n'"), False, event)

    assert event.is_set()
    assert await reader.next_line() == ["hi"]
    assert await reader.next_line() == ["there"]
    assert await reader.next_line() is None


@pytest.mark.asyncio
async def test_folder_reader_starts_with_banner(tmp_path):
    first = tmp_path / "a.log"
    second = tmp_path / "b.log"
    first.write_text("")
    second.write_text("")
    event = asyncio.Event()
    reader = await open_reader(
        FolderInput(folder_name=str(tmp_path), file_paths=[str(first), str(second)]), False, event
    )

    banner = await reader.next_line()
    assert event.is_set()
    assert len(banner) == 1
    assert banner[0].startswith("Watching ")
    assert "a.log" in banner[0] and "b.log" in banner[0]


@pytest.mark.asyncio
async def test_get_io_and_presenter_reads_and_writes(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", _fake_stdin(b"first\n"))
    event = asyncio.Event()
    config = Config(input=StdinInput(), output=Output.STDOUT, follow=False, start_at_end=False)

    pair, presenter = await get_io_and_presenter(config, event)
    lines = await pair.next_line()
    await pair.write_line(lines[0])

    assert lines == ["first"]
    assert capsys.readouterr().out == "first\n"
    assert isinstance(presenter, NoPresenter)
    assert await pair.next_line() is None
    assert event.is_set()