# tailspin

`tspin` is a log file highlighter. Pipe logs into it, point it at a file or a
whole folder, or let it run a command, and it colours the interesting parts of
every line: dates, times, numbers, URLs, IPv4 and IPv6 addresses, file paths,
UUIDs, pointers, process names with ids, `key=value` pairs, quoted strings,
severity levels, REST verbs, booleans and any keywords or regular expressions
you choose.

It needs nothing beyond the Python standard library (Python 3.11 or later).
Commands run with `--listen-command` are started through `sh`, and paging
uses `less`; both must be on your `PATH`.

## Installation

```
pip install .
```

This installs the `tspin` command.

## Usage

Open a file in `less` with highlighting:

```
tspin application.log
```

Follow a file as it grows (`less` is started in `+F` mode), optionally
starting at its end:

```
tspin --follow application.log
tspin --follow --start-at-end application.log
```

Watch every visible (not dot-prefixed) regular file in a folder at once. A
folder is always followed; only lines added after start-up are shown, after a
short banner listing the files:

```
tspin /var/log/myapp
```

Highlight data from a pipe; output goes to stdout:

```
cat application.log | tspin
```

Print to stdout instead of opening `less`:

```
tspin --print application.log
```

Run a command and highlight its output. The command is run as
`sh -c "trap '' INT; <command>"`, so Ctrl + C does not reach it, and its
output is always followed:

```
tspin --listen-command 'kubectl logs -f my-pod'
```

Running `tspin` with no file, no command and nothing on standard input prints
`Missing filename (tspin --help for help)` and exits with status 0. Giving
both a file and `--listen-command` is an error (exit status 2).

### Options

| Option | Meaning |
| --- | --- |
| `FILE` | Path to a file or folder |
| `-f`, `--follow` | Follow the contents of a file |
| `-e`, `--start-at-end` | Start at the end of the file |
| `-p`, `--print` | Print the output to stdout |
| `--config-path CONFIG_PATH` | Use a custom configuration file |
| `-c`, `--listen-command LISTEN_COMMAND` | Listen to the output of a command (cannot be combined with `--follow`) |
| `--words-red`, `--words-green`, `--words-yellow`, `--words-blue`, `--words-magenta`, `--words-cyan` | Comma separated words to highlight in that colour; may be repeated |
| `--disable-builtin-keywords` | Turn off booleans, severity levels and REST verbs |
| `--disable-booleans` | Turn off `null`, `true`, `false` |
| `--disable-severity` | Turn off `ERROR`, `WARN`, `WARNING`, `INFO`, `DEBUG`, `SUCCESS`, `TRACE` |
| `--disable-rest` | Turn off `GET`, `HEAD`, `POST`, `PUT`, `PATCH`, `DELETE` |

Example:

```
tspin --words-red=timeout,refused --words-green=connected service.log
```

Two hidden options exist: `--suppress-output` discards all output (for
debugging and benchmarking), and `--z-generate-shell-completions SHELL`
prints a completion script for `bash`, `zsh` or `fish`:

```
tspin --z-generate-shell-completions bash > ~/.local/share/bash-completion/completions/tspin
```

## Configuration

Styles are read from `config.toml` in `$XDG_CONFIG_HOME/tailspin/`, or
`~/.config/tailspin/` when `XDG_CONFIG_HOME` is not set. Pass
`--config-path` to use another file. Every setting is optional; anything left
out keeps its default. A file that cannot be read or parsed, or an unknown
colour name, is reported on stderr and `tspin` exits with status 1.

A style takes `fg`, `bg` (`red`, `green`, `yellow`, `blue`, `magenta`,
`purple`, `cyan`, `white`, `black`, case-insensitive) and the flags `bold`,
`faint`, `italic`, `underline`. Each section can be turned off with
`disabled = true`.

```toml
[date]
number = { fg = "magenta" }
separator = { faint = true }

[time]
time = { fg = "blue" }
zone = { fg = "red" }

[url]
disabled = true

[quotes]
style = { fg = "yellow" }
token = "'"

[pointer]
separator_token = "•"

[[keywords]]
words = ["panic", "fatal"]
style = { fg = "red", bold = true }

[[keywords]]
words = ["GET"]
style = { fg = "black", bg = "green" }
border = true

[[regexps]]
regular_expression = 'user=(\w+)'
style = { fg = "cyan" }
```

The sections are `date`, `date_word`, `time`, `number`, `url`, `path`,
`process`, `ip`, `key_value`, `uuid`, `quotes`, `pointer`, plus the lists
`keywords` and `regexps`.

- `date_word` only sets the styles of dates such as `Mon Jan 5`; those are
  switched on and off together with `date`, and `date_word.disabled` has no
  effect.
- A keyword with `border = true` is painted with one space of padding on each
  side.
- Keyword groups with the same style and border are merged, including the
  built-in groups and the words given on the command line.
- For a regular expression with exactly one capture group only that group is
  coloured; otherwise the whole match is. An invalid expression is reported as
  `Invalid regex pattern` and `tspin` exits with status 1.

## Using it from Python

The highlighting itself can be used without the command:

```python
from tailspin.cli import Cli
from tailspin.pipeline import HighlightProcessor, build_highlighters
from tailspin.theme import Theme

processor = HighlightProcessor(build_highlighters(Theme(), Cli()))
processor.highlight_line("Hello null")   # 'Hello \x1b[3;31mnull\x1b[0m'
processor.apply(["first line", "second line"])  # lines joined with "\n"
```

`tailspin.theme_loader.load_theme()` loads the configuration file described
above and returns a `Theme`; `tailspin.cli.parse_args()` returns a `Cli`.

## Limitations

- Followed files are polled every 0.1 seconds rather than watched through
  operating-system notifications.
- Paging always goes through `less`; there is no built-in viewer.

## Development

```
pip install -e '.[test]'
pytest
```