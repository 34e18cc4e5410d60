"""Command line options of the tspin tool and shell completion scripts."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass, field

PROG = "tspin"

_WORD_COLORS = ("red", "green", "yellow", "blue", "magenta", "cyan")


@dataclass
class Cli:
    """Parsed command line arguments."""

    file_or_folder_path: str | None = None
    follow: bool = False
    start_at_end: bool = False
    to_stdout: bool = False
    config_path: str | None = None
    listen_command: str | None = None
    words_red: list[str] = field(default_factory=list)
    words_green: list[str] = field(default_factory=list)
    words_yellow: list[str] = field(default_factory=list)
    words_blue: list[str] = field(default_factory=list)
    words_magenta: list[str] = field(default_factory=list)
    words_cyan: list[str] = field(default_factory=list)
    disable_keyword_builtins: bool = False
    disable_booleans: bool = False
    disable_severity: bool = False
    disable_rest: bool = False
    suppress_output: bool = False
    generate_shell_completions: str | None = None


@dataclass(frozen=True)
class _Option:
    long: str
    dest: str
    help: str
    kind: str = "flag"  # "flag", "value" or "words"
    short: str | None = None
    hidden: bool = False
    exclusive: bool = False

    @property
    def takes_value(self) -> bool:
        return self.kind != "flag"


_OPTIONS: tuple[_Option, ...] = (
    _Option("--follow", "follow", "Follow the contents of a file", short="-f", exclusive=True),
    _Option("--start-at-end", "start_at_end", "Start at the end of the file", short="-e"),
    _Option("--print", "to_stdout", "Print the output to stdout", short="-p"),
    _Option(
        "--config-path",
        "config_path",
        "Provide a custom path to a configuration file",
        kind="value",
    ),
    _Option(
        "--listen-command",
        "listen_command",
        "Continuously listen to stdout from the provided command and prevent interrupt "
        "events (Ctrl + C) from reaching the command",
        kind="value",
        short="-c",
        exclusive=True,
    ),
    *(
        _Option(
            f"--words-{color}",
            f"words_{color}",
            f"Highlight the provided words in {color}",
            kind="words",
        )
        for color in _WORD_COLORS
    ),
    _Option(
        "--disable-builtin-keywords",
        "disable_keyword_builtins",
        "Disable the highlighting of all builtin keyword groups (booleans, severity and REST)",
    ),
    _Option("--disable-booleans", "disable_booleans", "Disable the highlighting of booleans and nulls"),
    _Option("--disable-severity", "disable_severity", "Disable the highlighting of severity levels"),
    _Option("--disable-rest", "disable_rest", "Disable the highlighting of REST verbs"),
    _Option(
        "--suppress-output",
        "suppress_output",
        "Suppress all output (for debugging and benchmarking)",
        hidden=True,
    ),
    _Option(
        "--z-generate-shell-completions",
        "generate_shell_completions",
        "Print completions to stdout",
        kind="value",
        hidden=True,
    ),
)

_FILE_HELP = "Path to file or folder"


def _split_values(value: str) -> list[str]:
    return value.split(",")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the tool."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="A log file highlighter",
    )
    parser.add_argument("file_or_folder_path", metavar="FILE", nargs="?", help=_FILE_HELP)
    exclusive = parser.add_mutually_exclusive_group()

    for option in _OPTIONS:
        target = exclusive if option.exclusive else parser
        names = [name for name in (option.short, option.long) if name]
        help_text = argparse.SUPPRESS if option.hidden else option.help
        if option.kind == "flag":
            target.add_argument(*names, dest=option.dest, action="store_true", help=help_text)
        elif option.kind == "value":
            target.add_argument(*names, dest=option.dest, metavar=option.dest.upper(), help=help_text)
        else:
            target.add_argument(
                *names,
                dest=option.dest,
                action="extend",
                type=_split_values,
                default=None,
                metavar="WORDS",
                help=help_text,
            )

    return parser


def parse_args(argv: Sequence[str] | None = None) -> Cli:
    """Parse arguments into a Cli; argparse exits with status 2 on misuse."""
    namespace = vars(build_parser().parse_args(argv))
    for color in _WORD_COLORS:
        key = f"words_{color}"
        namespace[key] = namespace[key] or []
    return Cli(**namespace)


def _visible_options() -> list[_Option]:
    help_option = _Option("--help", "help", "Print help", short="-h")
    return [option for option in _OPTIONS if not option.hidden] + [help_option]


def _bash_script() -> str:
    words = " ".join(
        name
        for option in _visible_options()
        for name in (option.short, option.long)
        if name
    )
    return (
        f"_{PROG}() {{\n"
        '    local cur="${COMP_WORDS[COMP_CWORD]}"\n'
        '    if [[ "$cur" == -* ]]; then\n'
        f'        COMPREPLY=( $(compgen -W "{words}" -- "$cur") )\n'
        "    else\n"
        '        COMPREPLY=( $(compgen -f -- "$cur") )\n'
        "    fi\n"
        "}\n"
        f"complete -F _{PROG} -o bashdefault -o default {PROG}\n"
    )


def _zsh_escape(text: str) -> str:
    for char in "[]:":
        text = text.replace(char, "\\" + char)
    return text.replace("'", "'\\''")


def _zsh_script() -> str:
    specs: list[str] = []
    for option in _visible_options():
        description = _zsh_escape(option.help)
        for name in (option.short, option.long):
            if not name:
                continue
            if option.takes_value:
                specs.append(f"'{name}=[{description}]:{option.dest.upper()}: '")
            else:
                specs.append(f"'{name}[{description}]'")
    specs.append(f"'::FILE -- {_zsh_escape(_FILE_HELP)}:_files'")
    body = " \\\n".join(f"        {spec}" for spec in specs)
    return (
        f"#compdef {PROG}\n\n"
        f"_{PROG}() {{\n"
        "    _arguments -s \\\n"
        f"{body}\n"
        "}\n\n"
        f'_{PROG} "$@"\n'
    )


def _fish_script() -> str:
    lines: list[str] = []
    for option in _visible_options():
        parts = ["complete", "-c", PROG]
        if option.short:
            parts += ["-s", option.short.lstrip("-")]
        parts += ["-l", option.long.lstrip("-")]
        if option.takes_value:
            parts.append("-r")
        description = option.help.replace("\\", "\\\\").replace("'", "\\'")
        parts += ["-d", f"'{description}'"]
        lines.append(" ".join(parts))
    return "\n".join(lines) + "\n"


_GENERATORS = {"bash": _bash_script, "zsh": _zsh_script, "fish": _fish_script}


def completion_script(shell: str) -> str | None:
    """Return a completion script for bash, zsh or fish; None for other shells."""
    generator = _GENERATORS.get(shell)
    return generator() if generator is not None else None