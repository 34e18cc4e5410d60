"""Core types shared across the highlighter: exit codes, errors, inputs, outputs."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import ClassVar, TypeAlias

from tailspin.line_info import LineInfo


class ExitCode(enum.IntEnum):
    """Process exit codes used by the command line tool."""

    OK = 0
    GENERAL_ERROR = 1
    MISUSE_SHELL_BUILTIN = 2


class ConfigError(Exception):
    """Raised when the run configuration cannot be built."""

    def __init__(self, message: str, exit_code: ExitCode = ExitCode.GENERAL_ERROR) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class Highlighter(ABC):
    """A transformation that adds ANSI colouring to a piece of text."""

    # Minimum character counts (by LineInfo field name) a line needs before
    # this highlighter can possibly match; empty means it always runs.
    required_counts: ClassVar[Mapping[str, int]] = {}

    def should_short_circuit(self, line_info: LineInfo) -> bool:
        """Return True when the line cannot contain anything this highlighter matches."""
        return any(
            getattr(line_info, name) < minimum
            for name, minimum in self.required_counts.items()
        )

    def only_apply_to_segments_not_already_highlighted(self) -> bool:
        """Return True when already coloured segments must be left untouched."""
        return True

    @abstractmethod
    def apply(self, text: str) -> str:
        """Return the text with highlighting applied."""


@dataclass(frozen=True)
class FileInput:
    """A single file to read, with its line count at start-up."""

    path: str
    line_count: int


@dataclass(frozen=True)
class FolderInput:
    """A folder whose files are all followed."""

    folder_name: str
    file_paths: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class CommandInput:
    """A shell command whose standard output is read."""

    command: str


@dataclass(frozen=True)
class StdinInput:
    """Lines arriving on standard input."""


Input: TypeAlias = FileInput | FolderInput | CommandInput | StdinInput


class Output(enum.Enum):
    """Where highlighted lines go."""

    TEMP_FILE = "temp_file"
    STDOUT = "stdout"
    SUPPRESS = "suppress"


@dataclass(frozen=True)
class Config:
    """Everything needed to run the input/output side of the tool."""

    input: Input
    output: Output
    follow: bool
    start_at_end: bool