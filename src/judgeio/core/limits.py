from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class IntKind:
    """A fixed-width two's-complement integer type that values are parsed into."""

    name: str
    bits: int
    signed: bool

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def __str__(self) -> str:
        return self.name


INT8 = IntKind("int8", 8, True)
INT16 = IntKind("int16", 16, True)
INT32 = IntKind("int32", 32, True)
INT64 = IntKind("int64", 64, True)
UINT8 = IntKind("uint8", 8, False)
UINT16 = IntKind("uint16", 16, False)
UINT32 = IntKind("uint32", 32, False)
UINT64 = IntKind("uint64", 64, False)