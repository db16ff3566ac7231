"""Writer: formats values into a byte or text sink."""

from __future__ import annotations
import io
import math
import warnings
from pathlib import Path
from typing import Any, BinaryIO, Iterable, TextIO, Union

from .core.errors import JudgeError


class Writer:
    """Formats integers, floats, strings and nested iterables.

    A path destination is opened (and closed) by the writer; streams passed in
    are borrowed and only flushed.
    """

    def __init__(self, dest: Union[Path, str, BinaryIO, TextIO]):
        self.decimal_separator = "."
        self._should_close = False
        if hasattr(dest, "write"):
            self._dest = dest
        else:
            try:
                self._dest = open(dest, "wb")
            except OSError as e:
                raise JudgeError.open_failure(dest) from e
            self._should_close = True
        self._text = isinstance(self._dest, io.TextIOBase)

    def with_comma_as_decimal_separator(self) -> "Writer":
        self.decimal_separator = ","
        return self

    def with_dot_as_decimal_separator(self) -> "Writer":
        self.decimal_separator = "."
        return self

    def _put(self, s: str) -> None:
        self._dest.write(s if self._text else s.encode("latin-1"))

    def write_space(self) -> None:
        self._put(" ")

    def write_newline(self, with_cr: bool = False) -> None:
        self._put("\r\n" if with_cr else "\n")

    def write_char(self, c: str) -> None:
        if len(c) != 1:
            raise JudgeError.invalid_argument(f"Expected a single character, got {c!r}")
        self._put(c)

    def write_string(self, s: str) -> None:
        self._put(s)

    def write_integer(self, x: int) -> None:
        self._put(str(int(x)))

    def write_floating_point(self, x: float, fixed_decimals: int | None = None) -> None:
        """Write ``x`` in general notation, or with exactly ``fixed_decimals`` decimals."""
        if fixed_decimals is not None:
            if not math.isfinite(x):
                warnings.warn(f"Writing non-finite value {x} in fixed notation")
            text = f"{x:.{fixed_decimals}f}"
        else:
            text = f"{x:g}"
        if self.decimal_separator != ".":
            text = text.replace(".", self.decimal_separator)
        self._put(text)

    def write_iter(self, values: Iterable[Any], separator: str = " ") -> None:
        for i, v in enumerate(values):
            if i:
                self._put(separator)
            self.write(v)

    def write_matrix(self, rows: Iterable[Iterable[Any]]) -> None:
        for i, row in enumerate(rows):
            if i:
                self._put("\n")
            self.write_iter(row)

    def write(self, x: Any) -> None:
        """Write ``x`` with the formatter matching its type."""
        if isinstance(x, str):
            self.write_string(x)
        elif isinstance(x, bool):
            self.write_integer(int(x))
        elif isinstance(x, int):
            self.write_integer(x)
        elif isinstance(x, float):
            self.write_floating_point(x)
        elif hasattr(x, "__iter__"):
            items = list(x)
            if items and all(hasattr(r, "__iter__") and not isinstance(r, str) for r in items):
                self.write_matrix(items)
            else:
                self.write_iter(items)
        else:
            self.write_string(str(x))

    def flush(self) -> None:
        self._dest.flush()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        """Close the destination if we opened it, otherwise just flush it."""
        if self._dest is None:
            return
        if self._should_close:
            self._dest.close()
        else:
            self._dest.flush()
        self._dest = None


def open_writer(dest: Union[Path, str, BinaryIO, TextIO]) -> Writer:
    """Create a writer for ``dest``."""
    return Writer(dest)
