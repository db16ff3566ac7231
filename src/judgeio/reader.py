"""Structured reader: a grammar-checking tokenizer for whitespace-delimited text.

In *strict* mode nothing is skipped implicitly: every separator has to be
consumed with :meth:`Reader.must_be_space` / :meth:`Reader.must_be_newline`,
which lets a validator prove the exact byte layout of a file. In *lenient*
mode whitespace (before strings) or any non-numeric noise (before numbers) is
skipped automatically.
"""

from __future__ import annotations
from typing import Any, Callable, Iterable, TypeVar

from .core.errors import JudgeError
from .core.limits import IntKind, INT32, INT64, UINT32, UINT64
from .io import ByteCursor, LocalByteCursor, open_cursor

T = TypeVar("T")

_SPACES = frozenset(b" \t\r\n")
_SPACE = ord(" ")
_CR = ord("\r")
_LF = ord("\n")
_MINUS = ord("-")
_ZERO = ord("0")
_DOT = ord(".")


def _is_space(c: int) -> bool:
    return c in _SPACES


def _is_digit(c: int) -> bool:
    return 48 <= c <= 57


def _accept_any(i: int, c: str) -> bool:
    return True


class Reader:
    """Reads tokens from a byte source under a configurable grammar policy.

    ``source`` may be a path, an ``http(s)://`` URL, a bytes-like buffer, a
    binary stream or a :class:`ByteCursor`. Sources opened by the reader are
    released by :meth:`close`; streams and cursors passed in stay open.
    """

    def __init__(self, source: Any = None, *, strict: bool = False):
        self.strict = strict
        self.allow_leading_zeros = False
        self.decimal_separator = "."
        self._cursor: ByteCursor | None = None
        self._owns_cursor = False
        if source is not None:
            self._bind(source)

    def _bind(self, source: Any) -> None:
        if isinstance(source, ByteCursor):
            cursor, owned = source, False
        else:
            cursor, owned = open_cursor(source), True
        self._release()
        self._cursor = cursor
        self._owns_cursor = owned

    def _release(self) -> None:
        if self._owns_cursor and self._cursor is not None:
            self._cursor.close()
        self._cursor = None
        self._owns_cursor = False

    @property
    def cursor(self) -> ByteCursor:
        if self._cursor is None:
            raise JudgeError.invalid_argument("Reader is not bound to a source")
        return self._cursor

    @property
    def position(self) -> int:
        """Absolute offset of the next unread byte."""
        return self.cursor.bytes_consumed

    def close(self) -> None:
        self._release()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    # ------------------------------------------------------------------ #
    # configuration, all chainable
    def with_buffer(self, data: bytes | str) -> "Reader":
        """Rebind the reader to an in-memory buffer."""
        if isinstance(data, str):
            data = data.encode("latin-1")
        self._bind(LocalByteCursor(data))
        self._owns_cursor = True
        return self

    def make_strict(self) -> "Reader":
        self.strict = True
        return self

    def make_non_strict(self) -> "Reader":
        self.strict = False
        return self

    def with_leading_zeros(self) -> "Reader":
        self.allow_leading_zeros = True
        return self

    def without_leading_zeros(self) -> "Reader":
        self.allow_leading_zeros = False
        return self

    def with_decimal_separator(self, separator: str) -> "Reader":
        if len(separator) != 1 or separator in "-0123456789" or _is_space(ord(separator)):
            raise JudgeError.invalid_argument(f"Invalid decimal separator {separator!r}")
        self.decimal_separator = separator
        return self

    def with_comma_as_decimal_separator(self) -> "Reader":
        return self.with_decimal_separator(",")

    def with_dot_as_decimal_separator(self) -> "Reader":
        return self.with_decimal_separator(".")

    # ------------------------------------------------------------------ #
    # separators
    def read_char(self) -> str:
        """Consume exactly one byte."""
        return chr(self.cursor.next_byte())

    def must_be_space(self) -> None:
        c = self.cursor.next_byte()
        if c != _SPACE:
            raise JudgeError.unexpected(expected="space", found=chr(c))

    def must_be_newline(self) -> None:
        """Consume ``\\n`` or ``\\r\\n``."""
        c = self.cursor.next_byte()
        if c == _CR:
            c = self.cursor.next_byte()
        if c != _LF:
            raise JudgeError.unexpected(expected="newline", found=chr(c))

    def must_be_eof(self) -> None:
        if not self.cursor.peek_is_eof():
            raise JudgeError.unexpected(expected="EOF")

    def skip_spaces(self) -> None:
        self._skip_while(_is_space)

    def skip_non_numeric(self) -> None:
        self._skip_while(lambda c: not _is_digit(c) and c != _MINUS)

    def _skip_while(self, predicate: Callable[[int], bool]) -> None:
        cursor = self.cursor
        while not cursor.peek_is_eof():
            c = cursor.next_byte()
            if not predicate(c):
                cursor.push_back(c)
                return

    # ------------------------------------------------------------------ #
    # integers
    def _read_digits(self, limit: int) -> int:
        """Read a non-empty digit run whose value must not exceed ``limit``."""
        cursor = self.cursor
        n = 0
        start = True
        while not cursor.peek_is_eof():
            c = cursor.next_byte()
            if not _is_digit(c):
                if start:
                    raise JudgeError.unexpected(found=chr(c))
                cursor.push_back(c)
                return n
            if n == 0 and not start and not self.allow_leading_zeros:
                raise JudgeError.unexpected(found="0")
            start = False
            digit = c - _ZERO
            if n > (limit - digit) // 10:
                raise JudgeError.overflow(limit)
            n = 10 * n + digit
        if start:
            raise JudgeError.eof()
        return n

    def _read_integer_token(self, kind: IntKind) -> int:
        negative = False
        limit = kind.max
        if kind.signed:
            c = self.cursor.next_byte()
            if c == _MINUS:
                negative = True
                # magnitude of the two's-complement minimum
                limit = -kind.min
            elif _is_digit(c):
                self.cursor.push_back(c)
            else:
                raise JudgeError.unexpected(found=chr(c))
        n = self._read_digits(limit)
        return -n if negative else n

    @staticmethod
    def _check_interval(x, low, high, var: str):
        if (low is not None and x < low) or (high is not None and high < x):
            raise JudgeError.interval_constraint(
                var,
                low if low is not None else float("-inf"),
                high if high is not None else float("inf"),
            )
        return x

    def read_integer(self, kind: IntKind = INT64, low: int | None = None, high: int | None = None) -> int:
        """Read an integer of the given fixed-width kind, optionally bounded to [low, high]."""
        if not self.strict:
            self.skip_non_numeric()
        n = self._read_integer_token(kind)
        return self._check_interval(n, low, high, "n")

    def read_i32(self, low: int | None = None, high: int | None = None) -> int:
        return self.read_integer(INT32, low, high)

    def read_i64(self, low: int | None = None, high: int | None = None) -> int:
        return self.read_integer(INT64, low, high)

    def read_u32(self, low: int | None = None, high: int | None = None) -> int:
        return self.read_integer(UINT32, low, high)

    def read_u64(self, low: int | None = None, high: int | None = None) -> int:
        return self.read_integer(UINT64, low, high)

    # ------------------------------------------------------------------ #
    # floating point
    def _read_floating_point_token(self, convert: Callable[[str], T]) -> T:
        cursor = self.cursor
        separator = ord(self.decimal_separator)
        text = bytearray()
        is_zero = True
        after_separator = False
        while True:
            if cursor.peek_is_eof():
                if not text or not _is_digit(text[-1]):
                    raise JudgeError.eof()
                break
            c = cursor.next_byte()
            if not _is_digit(c) and c != _MINUS and c != separator:
                if not text:
                    raise JudgeError.unexpected(found=chr(c))
                if not _is_digit(text[-1]):
                    # lone sign or dangling separator
                    found = self.decimal_separator if text[-1] == _DOT else "-"
                    raise JudgeError.unexpected(found=found)
                cursor.push_back(c)
                break
            if c == _MINUS:
                if text:
                    raise JudgeError.unexpected(found="-")
                text.append(c)
                continue
            if c == separator:
                if not text or text == b"-" or after_separator:
                    raise JudgeError.unexpected(found=self.decimal_separator)
                after_separator = True
                text.append(_DOT)
                continue
            if is_zero and not self.allow_leading_zeros and not after_separator and text and text != b"-":
                raise JudgeError.unexpected(found="0")
            if c != _ZERO:
                is_zero = False
            text.append(c)
        return convert(text.decode("ascii"))

    def read_floating_point(self, convert: Callable[[str], T] = float) -> T:
        """Read a decimal number; ``convert`` turns the normalised text into a value."""
        if not self.strict:
            self.skip_non_numeric()
        return self._read_floating_point_token(convert)

    def read_f64(self) -> float:
        return self.read_floating_point(float)

    # ------------------------------------------------------------------ #
    # strings
    def _read_string_token(
        self,
        check: Callable[[int, str], bool],
        min_length: int = 0,
        max_length: int | None = None,
    ) -> str:
        cursor = self.cursor
        chars: list[str] = []
        while not cursor.peek_is_eof():
            i = len(chars)
            c = cursor.next_byte()
            if _is_space(c):
                if i == 0:
                    raise JudgeError.unexpected(expected="non-space character", found=chr(c))
                cursor.push_back(c)
                break
            if max_length is not None and i >= max_length:
                raise JudgeError.interval_constraint("len(string)", min_length, max_length)
            ch = chr(c)
            if not check(i, ch):
                raise JudgeError.failed_validation(f"Invalid character '{ch}' at position {i}")
            chars.append(ch)
        if not chars:
            raise JudgeError.eof()
        if len(chars) < min_length:
            upper = max_length if max_length is not None else float("inf")
            raise JudgeError.interval_constraint("len(string)", min_length, upper)
        return "".join(chars)

    def read_checked_string(
        self,
        check: Callable[[int, str], bool],
        min_length: int = 0,
        max_length: int | None = None,
    ) -> str:
        """Read a non-space token whose i-th character satisfies ``check(i, ch)``."""
        if not self.strict:
            self.skip_spaces()
        return self._read_string_token(check, min_length, max_length)

    def read_string(
        self,
        exact_length: int = 0,
        *,
        min_length: int = 0,
        max_length: int | None = None,
        allowed: Iterable[str] | None = None,
    ) -> str:
        """Read a non-space token.

        ``exact_length`` (when positive) overrides ``min_length``/``max_length``;
        ``allowed`` restricts the token to a character set.
        """
        if exact_length > 0:
            min_length = max_length = exact_length
        if allowed is None:
            check = _accept_any
        else:
            allowed_set = frozenset(allowed)
            check = lambda i, c: c in allowed_set  # noqa: E731
        return self.read_checked_string(check, min_length, max_length)

    def read_bounded_string(self, min_length: int, max_length: int) -> str:
        """Read a token of any characters with ``min_length <= len <= max_length``."""
        return self.read_string(min_length=min_length, max_length=max_length)

    def read_string_of(
        self,
        allowed: Iterable[str],
        exact_length: int = 0,
        *,
        min_length: int = 0,
        max_length: int | None = None,
    ) -> str:
        """Read a token made only of ``allowed`` characters."""
        return self.read_string(exact_length, min_length=min_length, max_length=max_length, allowed=allowed)

    def read_constant(self, token: str) -> str:
        """Read exactly ``token``, byte for byte."""
        if not token:
            raise JudgeError.invalid_argument("Argument 'token' must not be the empty string")
        data = bytearray()
        for _ in range(len(token)):
            data.append(self.cursor.next_byte())
        s = data.decode("latin-1")
        if s != token:
            raise JudgeError.unexpected(expected=f"'{token}'", found=s)
        return s

    def read_any_of(self, candidates: Iterable[str]) -> str:
        """Read a token that must be one of ``candidates``."""
        candidates = list(candidates)
        if not candidates:
            raise JudgeError.invalid_argument("Argument 'candidates' must not be empty")
        lengths = [len(c) for c in candidates]
        if min(lengths) == 0:
            raise JudgeError.invalid_argument("Elements of 'candidates' must not be the empty string")
        s = self.read_string(min_length=min(lengths), max_length=max(lengths))
        if s not in candidates:
            options = ", ".join(f"'{c}'" for c in candidates)
            raise JudgeError.unexpected(expected=f"one of {options}", found=s)
        return s

    # ------------------------------------------------------------------ #
    # sequences
    def _read_separator(self, separator: str) -> None:
        if separator == "\n":
            self.must_be_newline()
        else:
            self.read_constant(separator)

    def read_sequence(self, read_one: Callable[[], T], n: int, separator: str = "") -> list[T]:
        """Call ``read_one`` n times, consuming ``separator`` between elements."""
        if n <= 0:
            raise JudgeError.invalid_argument("n must be strictly positive")
        if not self.strict:
            self.skip_spaces()
        values = []
        for i in range(n):
            values.append(read_one())
            if separator and i + 1 < n:
                self._read_separator(separator)
        return values

    def _default_separator(self, separator: str | None) -> str:
        if separator is None:
            return " " if self.strict else ""
        return separator

    def read_integers(
        self,
        n: int,
        kind: IntKind = INT64,
        low: int | None = None,
        high: int | None = None,
        separator: str | None = None,
    ) -> list[int]:
        """Read n integers; single-space separated in strict mode unless told otherwise."""
        separator = self._default_separator(separator)
        if separator:
            def read_one():
                return self._check_interval(self._read_integer_token(kind), low, high, "x")
        else:
            def read_one():
                return self.read_integer(kind, low, high)
        return self.read_sequence(read_one, n, separator)

    def read_floats(self, n: int, separator: str | None = None, convert: Callable[[str], T] = float) -> list[T]:
        separator = self._default_separator(separator)
        if separator:
            read_one = lambda: self._read_floating_point_token(convert)  # noqa: E731
        else:
            read_one = lambda: self.read_floating_point(convert)  # noqa: E731
        return self.read_sequence(read_one, n, separator)

    def read_strings(self, n: int, exact_length: int = 0, separator: str | None = None) -> list[str]:
        separator = self._default_separator(separator)
        if separator:
            bound = exact_length if exact_length > 0 else None
            read_one = lambda: self._read_string_token(_accept_any, bound or 0, bound)  # noqa: E731
        else:
            read_one = lambda: self.read_string(exact_length)  # noqa: E731
        return self.read_sequence(read_one, n, separator)

    def read_integer_matrix(
        self,
        rows: int,
        cols: int,
        kind: IntKind = INT64,
        low: int | None = None,
        high: int | None = None,
    ) -> list[list[int]]:
        """Read a rows x cols grid; rows are newline-separated in strict mode."""
        if rows <= 0 or cols <= 0:
            raise JudgeError.invalid_argument("Both dimensions of the matrix must have positive size")
        return self.read_sequence(
            lambda: self.read_integers(cols, kind, low, high),
            rows,
            "\n" if self.strict else "",
        )

    def __repr__(self) -> str:
        mode = "strict" if self.strict else "lenient"
        return f"<Reader {mode} at {self.position if self._cursor is not None else None}>"


def open_reader(source: Any, *, strict: bool = False) -> Reader:
    """Create a reader bound to ``source``."""
    return Reader(source, strict=strict)


__all__ = ["Reader", "open_reader"]
