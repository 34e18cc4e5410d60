import io

import pytest

from tailspin.writers import NullWriter, StdoutWriter, TempFileWriter


@pytest.mark.asyncio
async def test_null_writer_writes_nothing(capsys):
    writer = NullWriter()
    await writer.write_line("hello")
    assert capsys.readouterr().out == ""


@pytest.mark.asyncio
async def test_stdout_writer_appends_newlines_to_stream():
    stream = io.StringIO()
    writer = StdoutWriter(stream)
    await writer.write_line("first")
    await writer.write_line("second")
    assert stream.getvalue() == "first\nsecond\n"


@pytest.mark.asyncio
async def test_stdout_writer_defaults_to_standard_output(capsys):
    writer = StdoutWriter()
    await writer.write_line("\x1b[31mred\x1b[0m")
    assert capsys.readouterr().out == "\x1b[31mred\x1b[0m\n"


@pytest.mark.asyncio
async def test_temp_file_writer_writes_lines_and_cleans_up():
    writer = TempFileWriter.create()
    path = writer.path
    assert path.name.startswith("tailspin.temp.")

    await writer.write_line("x")
    await writer.write_line("y")
    assert path.read_text(encoding="utf-8") == "x\ny\n"

    writer.close()
    assert not path.parent.exists()


@pytest.mark.asyncio
async def test_temp_file_writer_as_context_manager():
    with TempFileWriter.create() as writer:
        await writer.write_line("line")
        assert writer.path.read_text(encoding="utf-8") == "line\n"
        directory = writer.path.parent
    assert not directory.exists()


def test_temp_file_writers_use_separate_directories():
    first = TempFileWriter.create()
    second = TempFileWriter.create()
    try:
        assert first.path.parent != second.path.parent
    finally:
        first.close()
        second.close()