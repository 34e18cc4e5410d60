"""Ways of showing the highlighted output once it is ready."""

from __future__ import annotations

import os
import signal
import subprocess
import sys
import threading
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager


class Presenter(ABC):
    """Shows highlighted output to the user."""

    @abstractmethod
    def present(self) -> None:
        """Show the output, returning when the user is done with it."""


class NoPresenter(Presenter):
    """Used when lines already went straight to their destination."""

    def present(self) -> None:
        return None


def less_args(follow: bool) -> list[str]:
    """Options passed to less before the file name."""
    args = ["--ignore-case", "--RAW-CONTROL-CHARS", "--"]
    if follow:
        args.insert(0, "+F")
    return args


def _ignore(signum: int, frame: object) -> None:
    return None


@contextmanager
def _interrupts_passed_to_child() -> Iterator[None]:
    """Keep Ctrl + C from stopping this process so that it reaches less instead."""
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


class LessPresenter(Presenter):
    """Opens the output file in less, optionally following it."""

    def __init__(self, file_path: str, follow: bool) -> None:
        self.file_path = file_path
        self.follow = follow

    def present(self) -> None:
        env = {**os.environ, "LESSSECURE": "1"}
        command = ["less", *less_args(self.follow), self.file_path]
        with _interrupts_passed_to_child():
            try:
                subprocess.run(command, env=env, check=False)
            except FileNotFoundError:
                print(
                    "'less' command not found. Please ensure it is installed and on your PATH.",
                    file=sys.stderr,
                )
                raise SystemExit(1) from None
            except OSError as err:
                print(f"Failed to run less: {err}", file=sys.stderr)
                raise SystemExit(1) from err