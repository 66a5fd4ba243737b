"""Minimal delimited-text reader and writer with escaping of embedded delimiters."""

from __future__ import annotations

import io
from typing import IO, Any

NEWLINE = "\n"


def replace(src: str, to_find: str, to_replace: str) -> str:
    """Replace every occurrence of ``to_find`` in ``src`` with ``to_replace``."""
    if not to_find:
        raise ValueError("the text to find must not be empty")
    return src.replace(to_find, to_replace)


def trim_right(text: str, trim_chars: str) -> str:
    """Strip trailing ``trim_chars``; a string made only of them is returned unchanged."""
    stripped = text.rstrip(trim_chars)
    return stripped if stripped else text


def trim_left(text: str, trim_chars: str) -> str:
    """Strip leading ``trim_chars``; a string made only of them is returned unchanged."""
    stripped = text.lstrip(trim_chars)
    return stripped if stripped else text


def trim(text: str, trim_chars: str) -> str:
    """Strip ``trim_chars`` from both ends."""
    return trim_left(trim_right(text, trim_chars), trim_chars)


def _check_char(value: str, what: str) -> str:
    if len(value) != 1:
        raise ValueError(f"{what} must be a single character, got {value!r}")
    return value


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


class CsvReader:
    """Reads delimited fields line by line from a text stream."""

    def __init__(self, stream: IO[str]) -> None:
        self._stream = stream
        self.line = ""
        self._pos = 0
        self.delimiter = ","
        self.unescape_str = "##"
        self.trim_quote_on_str = False
        self.trim_quote = '"'
        self.terminate_on_blank_line = True

    @classmethod
    def from_string(cls, text: str) -> "CsvReader":
        return cls(io.StringIO(text))

    @classmethod
    def open(cls, path) -> "CsvReader":
        return cls(open(path, "r", newline=""))

    def close(self) -> None:
        self._stream.close()

    def __enter__(self) -> "CsvReader":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def enable_trim_quote(self, enable: bool, quote: str) -> None:
        self.trim_quote_on_str = enable
        self.trim_quote = _check_char(quote, "quote")

    def set_delimiter(self, delimiter: str, unescape_str: str) -> None:
        self.delimiter = _check_char(delimiter, "delimiter")
        self.unescape_str = unescape_str

    def enable_terminate_on_blank_line(self, enable: bool) -> None:
        self.terminate_on_blank_line = enable

    def _next_raw_line(self) -> str | None:
        raw = self._stream.readline()
        if raw == "":
            return None
        return raw[:-1] if raw.endswith(NEWLINE) else raw

    def skip_line(self) -> None:
        """Discard the next line of input."""
        raw = self._next_raw_line()
        self.line = "" if raw is None else raw
        self._pos = 0

    def read_line(self) -> bool:
        """Load the next line; return False at end of input or at a terminating blank line."""
        self.line = ""
        while True:
            raw = self._next_raw_line()
            self._pos = 0
            if raw is None:
                self.line = ""
                return False
            self.line = raw
            if not raw:
                if self.terminate_on_blank_line:
                    return False
                continue
            return True

    def read_field(self) -> str:
        """Return the next field of the current line, unescaped."""
        delim = self.delimiter[0] if self.delimiter else ""
        field: list[str] = []
        within_quote = False
        while True:
            if self._pos >= len(self.line):
                self.line = ""
                return self.unescape("".join(field))
            ch = self.line[self._pos]
            if self.trim_quote_on_str:
                if (
                    not within_quote
                    and ch == self.trim_quote
                    and (self._pos == 0 or self.line[self._pos - 1] == delim)
                ):
                    within_quote = True
                elif within_quote and ch == self.trim_quote:
                    within_quote = False
            self._pos += 1
            if ch == delim and not within_quote:
                break
            if ch in "\r\n":
                break
            field.append(ch)
        return self.unescape("".join(field))

    def unescape(self, text: str) -> str:
        if self.unescape_str:
            text = replace(text, self.unescape_str, self.delimiter)
        return trim(text, self.trim_quote) if self.trim_quote_on_str else text

    def num_of_delimiter(self) -> int:
        if not self.delimiter:
            return 0
        return self.line.count(self.delimiter[0])

    def rest_of_line(self) -> str:
        return self.line[self._pos:]


class CsvWriter:
    """Writes delimited fields to a text stream, escaping embedded delimiters."""

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream if stream is not None else io.StringIO()
        self.after_newline = True
        self.delimiter = ","
        self.escape_str = "##"
        self.surround_quote_on_str = False
        self.surround_quote = '"'

    @classmethod
    def open(cls, path) -> "CsvWriter":
        return cls(open(path, "w", newline=""))

    def close(self) -> None:
        self._stream.close()

    def flush(self) -> None:
        self._stream.flush()

    def __enter__(self) -> "CsvWriter":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def enable_surround_quote(self, enable: bool, quote: str) -> None:
        self.surround_quote_on_str = enable
        self.surround_quote = _check_char(quote, "quote")

    def set_delimiter(self, delimiter: str, escape_str: str) -> None:
        self.delimiter = _check_char(delimiter, "delimiter")
        self.escape_str = escape_str

    def write(self, value: Any) -> "CsvWriter":
        """Write one field, preceded by a delimiter unless it starts a line."""
        if not self.after_newline:
            self._stream.write(self.delimiter)
        if isinstance(value, str):
            self.escape_str_and_output(value)
        else:
            self.escape_and_output(_to_text(value))
        self.after_newline = False
        return self

    def write_char(self, char: str) -> "CsvWriter":
        """Write a single character; a newline ends the current line."""
        _check_char(char, "char")
        if char == NEWLINE:
            self._stream.write(NEWLINE)
            self.after_newline = True
        else:
            self.escape_and_output(char)
        return self

    def end_line(self) -> "CsvWriter":
        return self.write_char(NEWLINE)

    def _escape(self, text: str) -> str:
        return replace(text, self.delimiter, self.escape_str) if self.escape_str else text

    def escape_and_output(self, text: str) -> None:
        self._stream.write(self._escape(text))

    def escape_str_and_output(self, text: str) -> None:
        text = self._escape(text)
        if self.surround_quote_on_str:
            text = f"{self.surround_quote}{text}{self.surround_quote}"
        self._stream.write(text)

    def getvalue(self) -> str:
        """Return everything written so far when writing to an in-memory stream."""
        getter = getattr(self._stream, "getvalue", None)
        if getter is None:
            raise TypeError("the underlying stream does not hold its contents in memory")
        return getter()