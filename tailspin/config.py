"""Turning command line options into a run configuration."""

from __future__ import annotations

import os
import stat
import sys
from pathlib import Path

from tailspin.cli import Cli
from tailspin.theme import Color, Style
from tailspin.types import (
    CommandInput,
    Config,
    ConfigError,
    ExitCode,
    FileInput,
    FolderInput,
    Input,
    Output,
    StdinInput,
)

_MAGENTA = Style(fg=Color.MAGENTA)
_RED = Style(fg=Color.RED)


def validate_input(
    has_data_from_stdin: bool,
    has_file_or_folder_input: bool,
    has_follow_command_input: bool,
) -> None:
    """Raise ConfigError when there is no input at all, or conflicting inputs."""
    if not has_data_from_stdin and not has_file_or_folder_input and not has_follow_command_input:
        raise ConfigError(
            f"Missing filename ({_MAGENTA.paint('tspin --help')} for help)",
            ExitCode.OK,
        )

    if has_file_or_folder_input and has_follow_command_input:
        raise ConfigError(
            f"Cannot read from both file and {_MAGENTA.paint('--listen-command')}",
            ExitCode.MISUSE_SHELL_BUILTIN,
        )


def get_output(has_data_from_stdin: bool, is_print_flag: bool, suppress_output: bool) -> Output:
    """Choose where highlighted lines are written."""
    if suppress_output:
        return Output.SUPPRESS
    if has_data_from_stdin or is_print_flag:
        return Output.STDOUT
    return Output.TEMP_FILE


def should_follow(follow: bool, has_follow_command: bool, input: Input) -> bool:
    """Commands and folders are always followed; files only when asked."""
    if has_follow_command:
        return True
    if isinstance(input, FolderInput):
        return True
    return follow


def _is_normal_file(entry: os.DirEntry[str]) -> bool:
    try:
        is_file = entry.is_file()
    except OSError:
        return False
    return is_file and not entry.name.startswith(".")


def _checked_utf8(path: str) -> str:
    try:
        path.encode("utf-8")
    except UnicodeEncodeError as err:
        raise ConfigError("Non-UTF8 filename") from err
    return path


def list_files_in_directory(path: str | os.PathLike[str]) -> list[str]:
    """Return the paths of the visible regular files directly inside a directory."""
    directory = os.fspath(path)
    if not os.path.isdir(directory):
        raise ConfigError("Path is not a directory")

    try:
        with os.scandir(directory) as entries:
            files = [entry.path for entry in entries if _is_normal_file(entry)]
    except OSError as err:
        raise ConfigError("Unable to read directory") from err

    return [_checked_utf8(file_path) for file_path in files]


def count_lines(path: str | os.PathLike[str]) -> int:
    """Count the lines of a file, including a final line without a newline."""
    with open(path, "rb") as handle:
        return sum(1 for _ in handle)


def _path_mode(path: str) -> int:
    try:
        return os.stat(path).st_mode
    except OSError as err:
        raise ConfigError(f"{_RED.paint(path)}: No such file or directory") from err


def determine_input(path: str | os.PathLike[str]) -> FileInput | FolderInput:
    """Describe a path as a file with its line count or a folder with its files."""
    path = os.fspath(path)
    mode = _path_mode(path)

    if stat.S_ISREG(mode):
        return FileInput(path=path, line_count=count_lines(path))
    if stat.S_ISDIR(mode):
        return FolderInput(folder_name=path, file_paths=sorted(list_files_in_directory(path)))
    raise ConfigError("Path is neither a file nor a directory")


def _stdin_is_terminal() -> bool:
    if sys.stdin is None:
        return True
    try:
        return sys.stdin.isatty()
    except (OSError, ValueError):
        return True


def create_config(cli: Cli, stdin_is_terminal: bool | None = None) -> Config:
    """Build the run configuration from parsed options and the state of stdin."""
    if stdin_is_terminal is None:
        stdin_is_terminal = _stdin_is_terminal()
    has_data_from_stdin = not stdin_is_terminal
    has_command = cli.listen_command is not None

    validate_input(has_data_from_stdin, cli.file_or_folder_path is not None, has_command)

    input: Input
    if has_data_from_stdin:
        input = StdinInput()
    elif cli.listen_command is not None:
        input = CommandInput(cli.listen_command)
    elif cli.file_or_folder_path is not None:
        input = determine_input(cli.file_or_folder_path)
    else:
        raise ConfigError("Could not determine input type")

    return Config(
        input=input,
        output=get_output(has_data_from_stdin, cli.to_stdout, cli.suppress_output),
        follow=should_follow(cli.follow, has_command, input),
        start_at_end=cli.start_at_end,
    )