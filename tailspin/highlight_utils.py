"""Helpers to apply highlighting only to text that is not coloured yet."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

_RESET = "\x1b[0m"
_ESCAPE = "\x1b["


@dataclass(frozen=True)
class Chunk:
    """A piece of a line, either already highlighted or still plain."""

    text: str
    highlighted: bool


def split_into_chunks(text: str) -> list[Chunk]:
    """Split text into plain segments and segments wrapped in ANSI escapes."""
    chunks: list[Chunk] = []
    start = 0
    inside_escape = False

    while True:
        token = _RESET if inside_escape else _ESCAPE
        index = text.find(token, start)
        if index < 0:
            break
        if inside_escape:
            end = index + len(_RESET)
            chunks.append(Chunk(text[start:end], highlighted=True))
            start = end
        else:
            if index != start:
                chunks.append(Chunk(text[start:index], highlighted=False))
            start = index
        inside_escape = not inside_escape

    if start != len(text):
        chunks.append(Chunk(text[start:], highlighted=inside_escape))

    return chunks


def apply_without_overwriting_existing_highlighting(
    text: str, process_chunk: Callable[[str], str]
) -> str:
    """Run process_chunk on every plain segment, keeping coloured segments as they are."""
    return "".join(
        chunk.text if chunk.highlighted else process_chunk(chunk.text)
        for chunk in split_into_chunks(text)
    )