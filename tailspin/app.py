"""Entry point of the tspin command: read, highlight, write and present lines."""

from __future__ import annotations

import asyncio
import re
import signal
import sys
import threading
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from tailspin.cli import Cli, completion_script, parse_args
from tailspin.config import create_config
from tailspin.controller import Io, get_io_and_presenter
from tailspin.pipeline import HighlightProcessor, build_highlighters
from tailspin.theme import Theme
from tailspin.theme_loader import ThemeError, load_theme
from tailspin.types import Config, ConfigError, ExitCode


async def process_lines(io: Io, processor: HighlightProcessor) -> None:
    """Highlight every batch of lines from the reader and hand it to the writer."""
    while True:
        try:
            lines = await io.next_line()
        except OSError:
            break
        if lines is None:
            break
        await io.write_line(processor.apply(lines))


def _ignore(signum: int, frame: object) -> None:
    return None


@contextmanager
def _interrupts_passed_to_child() -> Iterator[None]:
    if threading.current_thread() is not threading.main_thread():
        yield
        return
    previous = signal.getsignal(signal.SIGINT)
    signal.signal(signal.SIGINT, _ignore)
    try:
        yield
    finally:
        if previous is not None:
            signal.signal(signal.SIGINT, previous)


async def run(theme: Theme, config: Config, cli: Cli) -> None:
    """Process lines in the background and present them once the input reaches its end."""
    processor = HighlightProcessor(build_highlighters(theme, cli))
    reached_eof = asyncio.Event()
    io, presenter = await get_io_and_presenter(config, reached_eof)

    async with io:
        worker = asyncio.create_task(process_lines(io, processor))
        eof = asyncio.create_task(reached_eof.wait())
        try:
            await asyncio.wait({worker, eof}, return_when=asyncio.FIRST_COMPLETED)
            if not reached_eof.is_set():
                worker.result()
            with _interrupts_passed_to_child():
                await asyncio.to_thread(presenter.present)
        finally:
            worker.cancel()
            eof.cancel()
            await asyncio.gather(worker, eof, return_exceptions=True)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    cli = parse_args(argv)

    if cli.generate_shell_completions is not None:
        script = completion_script(cli.generate_shell_completions)
        if script is not None:
            sys.stdout.write(script)
        return ExitCode.OK

    try:
        theme = load_theme(cli.config_path)
    except ThemeError as err:
        print(err, file=sys.stderr)
        return ExitCode.GENERAL_ERROR

    try:
        config = create_config(cli)
    except ConfigError as err:
        stream = sys.stdout if err.exit_code == ExitCode.OK else sys.stderr
        print(err.message, file=stream)
        return err.exit_code

    try:
        asyncio.run(run(theme, config, cli))
    except re.error as err:
        print(f"Invalid regex pattern: {err}", file=sys.stderr)
        return ExitCode.GENERAL_ERROR
    except KeyboardInterrupt:
        return 130

    return ExitCode.OK


if __name__ == "__main__":
    sys.exit(main())