"""Reading the TOML configuration file and turning it into a processed theme."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import fields, replace
from pathlib import Path
from typing import Any

from tailspin.theme import (
    Color,
    DateTheme,
    DateWordTheme,
    IpTheme,
    Keyword,
    KeyValueTheme,
    NumberTheme,
    PathTheme,
    PointerTheme,
    ProcessTheme,
    QuotesTheme,
    Regexp,
    Style,
    Theme,
    TimeTheme,
    UrlTheme,
    UuidTheme,
)

_COLORS = {
    "red": Color.RED,
    "green": Color.GREEN,
    "yellow": Color.YELLOW,
    "blue": Color.BLUE,
    "magenta": Color.MAGENTA,
    "purple": Color.MAGENTA,
    "cyan": Color.CYAN,
    "white": Color.WHITE,
    "black": Color.BLACK,
    "": Color.DEFAULT,
}

_SECTIONS: dict[str, type] = {
    "date": DateTheme,
    "date_word": DateWordTheme,
    "time": TimeTheme,
    "number": NumberTheme,
    "quotes": QuotesTheme,
    "uuid": UuidTheme,
    "pointer": PointerTheme,
    "url": UrlTheme,
    "ip": IpTheme,
    "key_value": KeyValueTheme,
    "path": PathTheme,
    "process": ProcessTheme,
}


class ThemeError(Exception):
    """Raised when the configuration file cannot be read or understood."""


def _table(value: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ThemeError(f"Could not deserialize file: {where} must be a table")
    return value


def _boolean(value: Any, where: str) -> bool:
    if not isinstance(value, bool):
        raise ThemeError(f"Could not deserialize file: {where} must be a boolean")
    return value


def _string(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise ThemeError(f"Could not deserialize file: {where} must be a string")
    return value


def _char(value: Any, where: str) -> str:
    text = _string(value, where)
    if len(text) != 1:
        raise ThemeError(f"Could not deserialize file: {where} must be a single character")
    return text


def _list(value: Any, where: str) -> list[Any]:
    if not isinstance(value, list):
        raise ThemeError(f"Could not deserialize file: {where} must be an array")
    return value


def parse_color(name: str) -> Color:
    """Map a colour name from the configuration to a Color; empty means default."""
    color = _COLORS.get(name.lower())
    if color is None:
        raise ThemeError(f"Could not parse config.toml: {name} is not a valid color")
    return color


def to_style(raw: Mapping[str, Any]) -> Style:
    """Turn a style table (fg, bg, bold, faint, italic, underline) into a Style."""
    raw = _table(raw, "style")
    return Style(
        fg=parse_color(_string(raw.get("fg", ""), "fg")),
        bg=parse_color(_string(raw.get("bg", ""), "bg")),
        bold=_boolean(raw.get("bold", False), "bold"),
        dimmed=_boolean(raw.get("faint", False), "faint"),
        italic=_boolean(raw.get("italic", False), "italic"),
        underline=_boolean(raw.get("underline", False), "underline"),
    )


def _map_section(name: str, cls: type, raw: Any) -> Any:
    table = _table(raw, name)
    defaults = cls()
    values: dict[str, Any] = {}
    for item in fields(cls):
        if item.name not in table:
            continue
        value = table[item.name]
        where = f"{name}.{item.name}"
        default = getattr(defaults, item.name)
        if isinstance(default, Style):
            values[item.name] = to_style(_table(value, where))
        elif isinstance(default, bool):
            values[item.name] = _boolean(value, where)
        else:
            values[item.name] = _char(value, where)
    return replace(defaults, **values)


def _map_keyword(raw: Any, where: str) -> Keyword:
    table = _table(raw, where)
    words = [_string(word, f"{where}.words") for word in _list(table.get("words", []), f"{where}.words")]
    return Keyword(
        style=to_style(_table(table.get("style", {}), f"{where}.style")),
        words=words,
        border=_boolean(table.get("border", False), f"{where}.border"),
    )


def _map_regexp(raw: Any, where: str) -> Regexp:
    table = _table(raw, where)
    return Regexp(
        regular_expression=_string(table.get("regular_expression", ""), f"{where}.regular_expression"),
        style=to_style(_table(table.get("style", {}), f"{where}.style")),
        border=_boolean(table.get("border", False), f"{where}.border"),
    )


def map_theme(raw: Mapping[str, Any]) -> Theme:
    """Build a processed Theme from parsed configuration, filling in defaults."""
    raw = _table(raw, "configuration")
    sections = {
        name: _map_section(name, cls, raw.get(name, {})) for name, cls in _SECTIONS.items()
    }
    keywords = [
        _map_keyword(item, "keywords")
        for item in _list(raw.get("keywords", []), "keywords")
    ]
    regexps = [
        _map_regexp(item, "regexps")
        for item in _list(raw.get("regexps", []), "regexps")
    ]
    return Theme(**sections, keywords=keywords, regexps=regexps)


def _home(environ: Mapping[str, str]) -> str | None:
    return environ.get("HOME") or environ.get("USERPROFILE")


def _expand_tilde(value: str, environ: Mapping[str, str]) -> str:
    if value != "~" and not value.startswith("~/"):
        return value
    home = _home(environ) or os.path.expanduser("~")
    return home + value[1:]


def default_config_path(environ: Mapping[str, str] | None = None) -> Path:
    """Return the location of config.toml under the user's configuration folder."""
    environ = os.environ if environ is None else environ
    xdg = environ.get("XDG_CONFIG_HOME")
    if xdg is not None:
        config_dir = Path(_expand_tilde(xdg, environ))
    else:
        home = _home(environ)
        if home is None:
            raise ThemeError("HOME directory not set")
        config_dir = Path(home) / ".config"
    return config_dir / "tailspin" / "config.toml"


def load_theme(path: str | os.PathLike[str] | None = None, environ: Mapping[str, str] | None = None) -> Theme:
    """Load and process the theme from path, the default location, or built-in defaults."""
    if path is None:
        candidate = default_config_path(environ)
        if candidate.exists():
            path = candidate
    if path is None:
        return map_theme({})

    try:
        contents = Path(path).read_text(encoding="utf-8")
    except OSError as err:
        raise ThemeError(f"Could not read file: {err}") from err

    try:
        raw = tomllib.loads(contents)
    except tomllib.TOMLDecodeError as err:
        raise ThemeError(f"Could not deserialize file:\n\n{err}") from err

    return map_theme(raw)