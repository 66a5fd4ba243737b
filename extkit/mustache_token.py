"""Template tokens: literal text and tag tokens with their kind and name."""

from __future__ import annotations

import enum

from extkit.mustache_utils import first_not_ws, last_not_ws


class TokenType(enum.Enum):
    TEXT = "text"
    VARIABLE = "variable"
    SECTION_OPEN = "section_open"
    SECTION_CLOSE = "section_close"
    INVERTED_SECTION_OPEN = "inverted_section_open"
    UNESCAPED_VARIABLE = "unescaped_variable"
    COMMENT = "comment"
    PARTIAL = "partial"
    DELIMITER_CHANGE = "delimiter_change"


_TAG_KINDS = {
    ">": TokenType.PARTIAL,
    "^": TokenType.INVERTED_SECTION_OPEN,
    "/": TokenType.SECTION_CLOSE,
    "&": TokenType.UNESCAPED_VARIABLE,
    "#": TokenType.SECTION_OPEN,
    "!": TokenType.COMMENT,
}


class Token:
    """One piece of a template.

    ``left`` and ``right`` are the lengths of the opening and closing
    delimiters; when either is zero the token is literal text.
    """

    def __init__(self, text: str, left: int = 0, right: int = 0) -> None:
        self.raw = text
        self.name = ""
        self.partial_prefix = ""
        self.delims: tuple[str, str] = ("", "")
        self.eol = False
        self.ws_only = False

        if left and right:
            size = len(text)
            inner_end = size - right
            if text[left] == "=" and text[inner_end - 1] == "=":
                self.type = TokenType.DELIMITER_CHANGE
            elif text[left] == "{" and text[inner_end - 1] == "}":
                self.type = TokenType.UNESCAPED_VARIABLE
                begin = first_not_ws(text, left + 1, inner_end)
                end = last_not_ws(text, left, inner_end - 1) + 1
                self.name = text[begin:end]
            else:
                c = first_not_ws(text, left, inner_end)
                self.type = _TAG_KINDS.get(text[c], TokenType.VARIABLE)
                if self.type is not TokenType.VARIABLE:
                    c = first_not_ws(text, c + 1, inner_end)
                end = last_not_ws(text, left, inner_end) + 1
                self.name = text[c:end]
                self.delims = (text[:left], text[inner_end:])
        else:
            self.type = TokenType.TEXT
            self.eol = text.endswith("\n")
            self.ws_only = all(ch in " \r\n\t" for ch in text)

    def __repr__(self) -> str:
        return f"Token({self.type.name}, raw={self.raw!r}, name={self.name!r})"