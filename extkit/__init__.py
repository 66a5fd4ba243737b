"""Text utilities: delimited-field streams, error formatting and mustache building blocks."""

__version__ = "0.1.0"
__all__ = [
    "csvstream",
    "fmtutil",
    "mustache_utils",
    "mustache_token",
    "mustache_nodes",
]