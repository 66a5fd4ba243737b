"""Helpers shared by the template engine: whitespace scanning and HTML escaping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

_HTML_ESCAPES = {
    "&": "&amp;",
    "'": "&#39;",
    '"': "&quot;",
    "<": "&lt;",
    ">": "&gt;",
    "/": "&#x2F;",
}


@dataclass
class _EscapeConfig:
    escape: Optional[Callable[[str], str]] = None


_config = _EscapeConfig()


def first_not_ws(text: str, start: int, end: int) -> int:
    """Return the index of the first non-space character in ``text[start:end]``, or ``end``."""
    return next((i for i in range(start, end) if text[i] != " "), end)


def last_not_ws(text: str, start: int, end: int) -> int:
    """Return the index of the last non-space character in ``text[start:end]``.

    If the range holds only spaces, ``start - 1`` is returned.
    """
    return next((i for i in range(end - 1, start - 1, -1) if text[i] != " "), start - 1)


def set_escape(func: Optional[Callable[[str], str]]) -> None:
    """Install a replacement for the default HTML escaping; ``None`` restores the default."""
    if func is not None and not callable(func):
        raise TypeError("escape function must be callable or None")
    _config.escape = func


def html_escape(text: str) -> str:
    """Escape HTML-significant characters, or apply the installed escape function."""
    if _config.escape is not None:
        return _config.escape(text)
    return "".join(_HTML_ESCAPES.get(ch, ch) for ch in text)