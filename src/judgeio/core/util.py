from __future__ import annotations
from typing import Any

_INDENT = "  "


def display(x: Any) -> str:
    """Printable form of a value inside a diagnostic message."""
    if isinstance(x, (str, bytes)):
        if isinstance(x, bytes):
            x = x.decode("latin-1")
        return f'"{x}"'
    if isinstance(x, (tuple, list)):
        inner = ", ".join(display(v) for v in x)
        return f"({inner})" if isinstance(x, tuple) else f"[{inner}]"
    if hasattr(x, "__iter__"):
        return "[iterable]"
    return str(x)


def indent(message: str) -> str:
    """Indent every line of ``message`` by one level."""
    return _INDENT + message.replace("\n", "\n" + _INDENT)


def interval_message(var: str, low: Any, high: Any) -> str:
    return f"Expected {display(low)} <= {var} <= {display(high)}"
