"""Building and merging keyword groups."""

from __future__ import annotations

from collections.abc import Iterable

from tailspin.theme import Color, Keyword, Style


def consolidate_keywords(keywords: Iterable[Keyword]) -> list[Keyword]:
    """Merge keywords that share style and border, dropping groups without words."""
    consolidated: list[Keyword] = []

    for keyword in keywords:
        match = next(
            (c for c in consolidated if c.style == keyword.style and c.border == keyword.border),
            None,
        )
        if match is None:
            consolidated.append(Keyword(style=keyword.style, words=list(keyword.words), border=keyword.border))
        else:
            match.words = list(dict.fromkeys([*match.words, *keyword.words]))

    return [keyword for keyword in consolidated if keyword.words]


def extract_keywords(words: Iterable[str], color: Color) -> list[Keyword]:
    """Make one keyword group per word, coloured with the given foreground."""
    return [Keyword(style=Style(fg=color), words=[word]) for word in words]


def extract_all_keywords(
    words_red: Iterable[str],
    words_green: Iterable[str],
    words_yellow: Iterable[str],
    words_blue: Iterable[str],
    words_magenta: Iterable[str],
    words_cyan: Iterable[str],
) -> list[Keyword]:
    """Turn the per-colour word lists given on the command line into keywords."""
    groups = (
        (words_red, Color.RED),
        (words_green, Color.GREEN),
        (words_yellow, Color.YELLOW),
        (words_blue, Color.BLUE),
        (words_magenta, Color.MAGENTA),
        (words_cyan, Color.CYAN),
    )
    return [keyword for words, color in groups for keyword in extract_keywords(words, color)]