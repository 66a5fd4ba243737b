import pytest

from extkit.mustache_token import Token, TokenType


def test_plain_text_token():
    tok = Token("hello")
    assert tok.type is TokenType.TEXT
    assert tok.raw == "hello"
    assert tok.eol is False
    assert tok.ws_only is False


def test_text_token_with_newline_is_eol():
    tok = Token("line\n")
    assert tok.eol is True


def test_whitespace_only_text():
    tok = Token(" \t\r\n")
    assert tok.ws_only is True
    assert tok.eol is True


def test_empty_text_is_whitespace_only():
    assert Token("").ws_only is True


def test_variable_tag():
    tok = Token("{{ name }}", 2, 2)
    assert tok.type is TokenType.VARIABLE
    assert tok.name == "name"
    assert tok.delims == ("{{", "}}")
    assert tok.raw == "{{ name }}"


@pytest.mark.parametrize(
    "text, kind",
    [
        ("{{#items}}", TokenType.SECTION_OPEN),
        ("{{/items}}", TokenType.SECTION_CLOSE),
        ("{{^items}}", TokenType.INVERTED_SECTION_OPEN),
        ("{{&items}}", TokenType.UNESCAPED_VARIABLE),
        ("{{!items}}", TokenType.COMMENT),
        ("{{>items}}", TokenType.PARTIAL),
    ],
)
def test_tag_kinds(text, kind):
    tok = Token(text, 2, 2)
    assert tok.type is kind
    assert tok.name == "items"


def test_tag_kind_with_spaces_around_name():
    tok = Token("{{# items }}", 2, 2)
    assert tok.type is TokenType.SECTION_OPEN
    assert tok.name == "items"


def test_triple_brace_unescaped():
    tok = Token("{{{ name }}}", 2, 2)
    assert tok.type is TokenType.UNESCAPED_VARIABLE
    assert tok.name == "name"


def test_delimiter_change():
    tok = Token("{{=<% %>=}}", 2, 2)
    assert tok.type is TokenType.DELIMITER_CHANGE
    assert tok.name == ""


def test_custom_delimiters_recorded():
    tok = Token("<%value%>", 2, 2)
    assert tok.type is TokenType.VARIABLE
    assert tok.name == "value"
    assert tok.delims == ("<%", "%>")


def test_mutable_fields():
    tok = Token("{{>part}}", 2, 2)
    tok.partial_prefix = "  "
    tok.eol = True
    assert tok.partial_prefix == "  "
    assert tok.eol is True