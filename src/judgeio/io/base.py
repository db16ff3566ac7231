"""Base protocol for the byte sources the reader consumes."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ByteCursor(Protocol):
    """Protocol for forward-only, single-byte input cursors."""

    bytes_consumed: int  # absolute offset of the next byte

    def next_byte(self) -> int:
        """Consume and return one byte.
        At end of input → raise JudgeError of kind EOF.
        """
        ...

    def peek_is_eof(self) -> bool:
        """Return True if no byte is left. Never consumes."""
        ...

    def push_back(self, byte: int) -> None:
        """Undo the last ``next_byte`` call. Only one byte may be pushed back."""
        ...

    def close(self) -> None:
        ...
