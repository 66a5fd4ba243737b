"""Error-message formatting, coloured output and chunked stream writing."""

from __future__ import annotations

import enum
import os
import sys
from typing import IO, AnyStr

INLINE_BUFFER_SIZE = 500
RESET_COLOR = "\x1b[0m"

_SEP = ": "
_ERROR_STR = "error "


class Color(enum.IntEnum):
    """Terminal foreground colours, in ANSI order."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


class FormatError(ValueError):
    """Raised when a format specification cannot be honoured."""


def format_error_code(error_code: int, message: str) -> str:
    """Describe an error by its numeric code, keeping the result within the inline size.

    The message is included only if the whole text still fits.
    """
    error_code_size = len(_SEP) + len(_ERROR_STR) + len(str(abs(error_code)))
    if error_code < 0:
        error_code_size += 1
    prefix = ""
    if len(message.encode("utf-8")) <= INLINE_BUFFER_SIZE - error_code_size:
        prefix = f"{message}{_SEP}"
    return f"{prefix}{_ERROR_STR}{error_code}"


def format_system_error(error_code: int, message: str) -> str:
    """Return ``message`` followed by the system's description of ``error_code``."""
    try:
        system_message = os.strerror(error_code)
    except (ValueError, OverflowError):
        return format_error_code(error_code, message)
    return f"{message}{_SEP}{system_message}"


class FormattedSystemError(RuntimeError):
    """A runtime error whose text carries the system's description of an error code."""

    def __init__(self, error_code: int, message: str) -> None:
        self.error_code = error_code
        super().__init__(format_system_error(error_code, message))


def report_system_error(error_code: int, message: str, stream: IO[str] | None = None) -> None:
    """Write a system error description and a newline to ``stream`` (stderr by default)."""
    out = stream if stream is not None else sys.stderr
    out.write(format_system_error(error_code, message))
    out.write("\n")


def report_unknown_type(code: str, type_name: str) -> None:
    """Raise FormatError for a format code that does not apply to ``type_name``."""
    if len(code) != 1:
        raise ValueError(f"code must be a single character, got {code!r}")
    value = ord(code)
    if 0x20 <= value <= 0x7E:
        raise FormatError(f"unknown format code '{code}' for {type_name}")
    raise FormatError(f"unknown format code '\\x{value & 0xFF:02x}' for {type_name}")


def print_colored(color: Color, text: str, stream: IO[str] | None = None) -> None:
    """Write ``text`` in ``color``, resetting the colour afterwards."""
    out = stream if stream is not None else sys.stdout
    out.write(f"\x1b[3{int(Color(color))}m")
    out.write(text)
    out.write(RESET_COLOR)


def write_chunks(stream: IO[AnyStr], data: AnyStr, max_size: int = sys.maxsize) -> int:
    """Write ``data`` in pieces of at most ``max_size``; return the number of writes made.

    At least one write is always made, even for empty data.
    """
    if max_size <= 0:
        raise ValueError("max_size must be positive")
    writes = 0
    offset = 0
    while True:
        chunk = data[offset:offset + max_size]
        stream.write(chunk)
        writes += 1
        offset += len(chunk)
        if offset >= len(data):
            return writes