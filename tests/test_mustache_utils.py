import pytest

from extkit.mustache_utils import first_not_ws, html_escape, last_not_ws, set_escape


@pytest.fixture
def restore_escape():
    yield
    set_escape(None)


def test_first_not_ws_skips_leading_spaces():
    text = "   abc"
    assert first_not_ws(text, 0, len(text)) == 3


def test_first_not_ws_all_spaces_returns_end():
    text = "     "
    assert first_not_ws(text, 1, 4) == 4


def test_first_not_ws_respects_start():
    text = "a  b"
    assert first_not_ws(text, 1, len(text)) == 3


def test_last_not_ws_skips_trailing_spaces():
    text = "abc   "
    assert last_not_ws(text, 0, len(text)) == 2


def test_last_not_ws_all_spaces_returns_before_start():
    text = "x    y"
    assert last_not_ws(text, 1, 5) == 0


def test_first_and_last_bracket_the_content():
    text = "  name  "
    begin = first_not_ws(text, 0, len(text))
    end = last_not_ws(text, 0, len(text)) + 1
    assert text[begin:end] == "name"


def test_html_escape_all_special_characters():
    assert html_escape("&'\"<>/") == "&amp;&#39;&quot;&lt;&gt;&#x2F;"


def test_html_escape_leaves_plain_text():
    assert html_escape("plain text 123") == "plain text 123"


def test_html_escape_mixed():
    assert html_escape("a<b>c") == "a&lt;b&gt;c"


def test_set_escape_overrides_and_restores(restore_escape):
    set_escape(str.upper)
    assert html_escape("<x>") == "<X>"
    set_escape(None)
    assert html_escape("<x>") == "&lt;x&gt;"