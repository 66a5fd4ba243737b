"""Template data nodes: objects with named methods, lambdas and node lookups.

A node is ``None``, ``str``, ``int``, ``float``, ``bool``, a ``Lambda``,
a ``MustacheObject``, a ``dict`` mapping names to nodes, or a ``list`` of nodes.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

Renderer = Callable[[Any], str]


class MustacheObject:
    """A node whose members are produced by calling registered methods."""

    def __init__(self) -> None:
        self._methods: dict[str, Callable[[], Any]] = {}
        self._cache: dict[str, Any] = {}

    def register_methods(self, methods: Mapping[str, Callable[[], Any]]) -> None:
        """Register zero-argument callables by name; existing names are kept."""
        for name, method in methods.items():
            self._methods.setdefault(name, method)

    def at(self, name: str) -> Any:
        """Call the method registered as ``name`` and return its value.

        Raises KeyError if no such method is registered.
        """
        self._cache[name] = self._methods[name]()
        return self._cache[name]

    def has(self, name: str) -> bool:
        return name in self._methods


def _required_positional(func: Callable[..., Any]) -> int:
    bound = getattr(func, "__self__", None) is not None and hasattr(func, "__func__")
    target = func.__func__ if bound else func
    code = getattr(target, "__code__", None)
    if code is None:
        call = getattr(type(func), "__call__", None)
        code = getattr(call, "__code__", None)
        if code is None:
            raise TypeError(f"cannot determine the arguments of {func!r}")
        target = call
        bound = True
    defaults = getattr(target, "__defaults__", None) or ()
    count = code.co_argcount - len(defaults)
    return count - 1 if bound else count


class Lambda:
    """A callable node, taking either no arguments or the section's raw text."""

    def __init__(self, func: Callable[..., Any]) -> None:
        count = _required_positional(func)
        if count not in (0, 1):
            raise TypeError("a lambda must take no arguments or a single text argument")
        self._func = func
        self.takes_text = count == 1

    def __call__(self, renderer: Renderer, text: str = "") -> str:
        value = self._func(text) if self.takes_text else self._func()
        return renderer(value)


def has_token(node: Any, token: str) -> bool:
    """Tell whether ``token`` can be looked up in ``node``."""
    if isinstance(node, dict):
        return token in node
    if isinstance(node, MustacheObject):
        return node.has(token)
    return token == "."


def get_token(node: Any, token: str) -> Any:
    """Look up ``token`` in ``node``; nodes without members return themselves."""
    if isinstance(node, dict):
        return node[token]
    if isinstance(node, MustacheObject):
        return node.at(token)
    return node


def is_node_empty(node: Any) -> bool:
    """Tell whether a node counts as false in a section."""
    if node is None:
        return True
    if isinstance(node, bool):
        return not node
    if isinstance(node, (int, float)):
        return node == 0
    if isinstance(node, str):
        return node == ""
    if isinstance(node, list):
        return len(node) == 0
    return False