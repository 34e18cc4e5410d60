import os

import pytest

from tailspin.cli import Cli
from tailspin.config import (
    count_lines,
    create_config,
    determine_input,
    get_output,
    list_files_in_directory,
    should_follow,
    validate_input,
)
from tailspin.types import (
    CommandInput,
    ConfigError,
    ExitCode,
    FileInput,
    FolderInput,
    Output,
    StdinInput,
)


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def test_validate_input_without_any_source_reports_missing_filename():
    with pytest.raises(ConfigError) as info:
        validate_input(False, False, False)
    assert info.value.exit_code == ExitCode.OK
    assert "Missing filename" in info.value.message
    assert "tspin --help" in info.value.message


def test_validate_input_rejects_file_together_with_command():
    with pytest.raises(ConfigError) as info:
        validate_input(False, True, True)
    assert info.value.exit_code == ExitCode.MISUSE_SHELL_BUILTIN
    assert "--listen-command" in info.value.message


@pytest.mark.parametrize(
    "stdin, print_flag, suppress, expected",
    [
        (False, False, False, Output.TEMP_FILE),
        (True, False, False, Output.STDOUT),
        (False, True, False, Output.STDOUT),
        (True, True, True, Output.SUPPRESS),
        (False, False, True, Output.SUPPRESS),
    ],
)
def test_get_output(stdin, print_flag, suppress, expected):
    assert get_output(stdin, print_flag, suppress) is expected


def test_should_follow_command_always():
    assert should_follow(False, True, CommandInput("ls")) is True


def test_should_follow_folder_always():
    assert should_follow(False, False, FolderInput("logs", [])) is True


@pytest.mark.parametrize("follow", [True, False])
def test_should_follow_file_uses_flag(follow):
    assert should_follow(follow, False, FileInput("a.log", 1)) is follow


def test_list_files_skips_hidden_files_and_directories(tmp_path):
    _write(tmp_path / "b.log", "b")
    _write(tmp_path / "a.log", "a")
    _write(tmp_path / ".hidden", "h")
    (tmp_path / "sub").mkdir()
    _write(tmp_path / "sub" / "c.log", "c")

    result = list_files_in_directory(tmp_path)

    assert sorted(result) == sorted([str(tmp_path / "a.log"), str(tmp_path / "b.log")])


def test_list_files_requires_directory(tmp_path):
    file_path = _write(tmp_path / "a.log", "a")
    with pytest.raises(ConfigError) as info:
        list_files_in_directory(file_path)
    assert info.value.message == "Path is not a directory"


@pytest.mark.parametrize("lines", [[], ["one"], ["one", "two", "three"]])
def test_count_lines_without_trailing_newline(tmp_path, lines):
    path = _write(tmp_path / "f.log", "\n".join(lines))
    assert count_lines(path) == len(lines)


@pytest.mark.parametrize("lines", [["one"], ["one", "two", "three"]])
def test_count_lines_with_trailing_newline(tmp_path, lines):
    path = _write(tmp_path / "f.log", "".join(f"{line}\n" for line in lines))
    assert count_lines(path) == len(lines)


def test_determine_input_for_file(tmp_path):
    lines = ["x", "y", "z"]
    path = _write(tmp_path / "f.log", "\n".join(lines))
    assert determine_input(str(path)) == FileInput(path=str(path), line_count=len(lines))


def test_determine_input_for_folder_sorts_paths(tmp_path):
    _write(tmp_path / "b.log", "b")
    _write(tmp_path / "a.log", "a")
    result = determine_input(str(tmp_path))
    assert isinstance(result, FolderInput)
    assert result.folder_name == str(tmp_path)
    assert result.file_paths == [str(tmp_path / "a.log"), str(tmp_path / "b.log")]


def test_determine_input_for_missing_path(tmp_path):
    with pytest.raises(ConfigError) as info:
        determine_input(str(tmp_path / "missing.log"))
    assert info.value.exit_code == ExitCode.GENERAL_ERROR
    assert "No such file or directory" in info.value.message


def test_create_config_reads_stdin_when_not_a_terminal():
    config = create_config(Cli(start_at_end=True), stdin_is_terminal=False)
    assert config.input == StdinInput()
    assert config.output is Output.STDOUT
    assert config.follow is False
    assert config.start_at_end is True


def test_create_config_for_file(tmp_path):
    path = _write(tmp_path / "f.log", "a\nb\n")
    config = create_config(Cli(file_or_folder_path=str(path), follow=True), stdin_is_terminal=True)
    assert config.input == FileInput(path=str(path), line_count=count_lines(path))
    assert config.output is Output.TEMP_FILE
    assert config.follow is True


def test_create_config_for_folder_follows(tmp_path):
    _write(tmp_path / "a.log", "a")
    config = create_config(Cli(file_or_folder_path=str(tmp_path), to_stdout=True), stdin_is_terminal=True)
    assert isinstance(config.input, FolderInput)
    assert config.output is Output.STDOUT
    assert config.follow is True


def test_create_config_for_command():
    config = create_config(Cli(listen_command="echo hi", suppress_output=True), stdin_is_terminal=True)
    assert config.input == CommandInput("echo hi")
    assert config.output is Output.SUPPRESS
    assert config.follow is True


def test_create_config_without_input_raises():
    with pytest.raises(ConfigError) as info:
        create_config(Cli(), stdin_is_terminal=True)
    assert info.value.exit_code == ExitCode.OK


def test_create_config_with_missing_file(tmp_path):
    missing = os.path.join(tmp_path, "nope.log")
    with pytest.raises(ConfigError) as info:
        create_config(Cli(file_or_folder_path=missing), stdin_is_terminal=True)
    assert info.value.exit_code == ExitCode.GENERAL_ERROR