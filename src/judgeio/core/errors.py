from __future__ import annotations
from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Closed set of failure kinds raised by the reader and the validators."""

    OPEN_FAILURE = "open_failure"
    EOF = "eof"
    UNEXPECTED_TOKEN = "unexpected_token"
    INTEGER_OVERFLOW = "integer_overflow"
    INVALID_ARGUMENT = "invalid_argument"
    FAILED_VALIDATION = "failed_validation"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    ErrorKind.OPEN_FAILURE: "I/O ERROR",
    ErrorKind.EOF: "I/O ERROR",
    ErrorKind.UNEXPECTED_TOKEN: "UNEXPECTED READ",
    ErrorKind.INTEGER_OVERFLOW: "INTEGER OVERFLOW",
    ErrorKind.INVALID_ARGUMENT: "INVALID ARGUMENT",
    ErrorKind.FAILED_VALIDATION: "FAILED VALIDATION",
}


class JudgeError(RuntimeError):
    """Raised on any read or validation failure.

    The failure kind lives in ``kind``; the remaining attributes are the
    payload of that kind and are ``None`` when they do not apply.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        found: str | None = None,
        expected: str | None = None,
        limit: int | None = None,
        reason: str | None = None,
        location: str | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.found = found
        self.expected = expected
        self.limit = limit
        self.reason = reason
        self.location = location

    # --- constructors, one per kind ---
    @classmethod
    def open_failure(cls, name: Any) -> "JudgeError":
        return cls(ErrorKind.OPEN_FAILURE, f"Couldn't open {name}")

    @classmethod
    def eof(cls) -> "JudgeError":
        return cls(ErrorKind.EOF, "Reached EOF")

    @classmethod
    def unexpected(cls, *, found: str | None = None, expected: str | None = None) -> "JudgeError":
        if expected is not None:
            message = f"Expected {expected}"
            if found is not None:
                message += f", found {found!r}"
        else:
            message = f"Encountered character {found!r}"
        return cls(ErrorKind.UNEXPECTED_TOKEN, message, found=found, expected=expected)

    @classmethod
    def overflow(cls, limit: int) -> "JudgeError":
        return cls(ErrorKind.INTEGER_OVERFLOW, f"Exceeded limit {limit}", limit=limit)

    @classmethod
    def invalid_argument(cls, reason: str) -> "JudgeError":
        return cls(ErrorKind.INVALID_ARGUMENT, reason, reason=reason)

    @classmethod
    def failed_validation(cls, message: str, *, location: str | None = None) -> "JudgeError":
        return cls(ErrorKind.FAILED_VALIDATION, message, location=location)

    @classmethod
    def interval_constraint(cls, var: str, low: Any, high: Any) -> "JudgeError":
        from .util import interval_message
        return cls.failed_validation(interval_message(var, low, high))

    # --- rendering ---
    def describe(self) -> str:
        """Return the message prefixed with the kind label."""
        if self.kind is ErrorKind.FAILED_VALIDATION and self.location:
            return f"FAILED VALIDATION AT {self.location}\n---\n{self.message}\n---"
        return f"{self.kind.label}: {self.message}"

    def __repr__(self) -> str:
        return f"JudgeError({self.kind.name}, {self.message!r})"


class UnknownProblemError(RuntimeError):
    """Raised when no validator is registered under a given problem name."""
    pass
