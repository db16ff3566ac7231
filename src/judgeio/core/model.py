from __future__ import annotations
from dataclasses import dataclass


@dataclass(slots=True)
class Result:
    success: bool
    problem: str
    error: str | None
    kind: str | None           # ErrorKind name of the failure, if any
    bytes_consumed: int        # offset reached when validation stopped
