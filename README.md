# extkit

A small collection of text utilities with no third-party dependencies:

- **`extkit.csvstream`**: lightweight delimited-field readers and writers
  (`CsvReader`, `CsvWriter`). Fields are separated by a single-character
  delimiter. A delimiter inside a value is written as an escape sequence (by
  default `##`) and turned back into the delimiter on reading. Quoting is
  optional. The helpers `replace`, `trim`, `trim_left` and `trim_right` are
  available too.
- **`extkit.fmtutil`**: helpers for error messages built from error codes and
  messages (`format_error_code`, `format_system_error`, `report_system_error`,
  `FormattedSystemError`), a `FormatError` exception and `report_unknown_type`,
  coloured terminal output (`print_colored`, `Color`) and chunked stream
  writing (`write_chunks`).
- **`extkit.mustache_utils`**, **`extkit.mustache_token`** and
  **`extkit.mustache_nodes`**: building blocks for a mustache template engine.
  They cover HTML escaping (`html_escape`, `set_escape`), whitespace scanning
  (`first_not_ws`, `last_not_ws`), tag tokenisation (`Token`, `TokenType`),
  and lookup over context nodes (`MustacheObject`, `Lambda`, `has_token`,
  `get_token`, `is_node_empty`).

## Installation

```
pip install .
```

Requires Python 3.10 or newer.

## Reading and writing delimited data

```python
from extkit.csvstream import CsvReader, CsvWriter
import io

buf = io.StringIO()
writer = CsvWriter(buf)
writer.write("name")
writer.write("a,b")      # the comma is written as "##"
writer.write(42)
writer.end_line()
print(writer.getvalue())  # name,a##b,42

reader = CsvReader.from_string(writer.getvalue())
while reader.read_line():
    print(reader.read_field(), reader.read_field(), int(reader.read_field()))
```

`CsvReader.open(path)` and `CsvWriter.open(path)` work on files. Both classes
can be used as context managers. To change the reader's or writer's settings:

- `set_delimiter` changes the delimiter and the escape string.
- `enable_trim_quote` and `enable_surround_quote` handle quoted text.
- `enable_terminate_on_blank_line(False)` reads past blank lines.

## Error messages

```python
from extkit.fmtutil import format_error_code, format_system_error

format_error_code(42, "cannot open")    # 'cannot open: error 42'
format_system_error(2, "cannot open")   # 'cannot open: ' + os.strerror(2)
```

`report_system_error` writes the same text and a newline to a stream, which is
stderr by default. `report_unknown_type("q", "int")` raises `FormatError`.

## Mustache helpers

```python
from extkit.mustache_utils import html_escape
from extkit.mustache_token import Token, TokenType
from extkit.mustache_nodes import has_token, get_token, is_node_empty

html_escape("<a href='/'>")      # '&lt;a href=&#39;&#x2F;&#39;&gt;'
Token("{{#items}}", 2, 2).type   # TokenType.SECTION_OPEN
get_token({"name": "x"}, "name") # 'x'
is_node_empty([])                # True
```

## What it does not do

The mustache modules only provide the pieces described above. The package has
no function that renders a whole template. It does not split template text
into tokens, does not render sections and does not handle partials: `Token`
classifies a single tag or text piece that it is given. The package provides
no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```