"""OII 2023 "bastioni": a length N followed by a string over ``=#<>``."""

from __future__ import annotations
from typing import ClassVar

from ..core.limits import INT32
from ..core.validator_base import ProblemValidator

MINN, MAXN = 1, 300_000
ALPHABET = "=#<>"


class BastioniValidator(ProblemValidator):
    problem: ClassVar[str] = "oii2023_bastioni"
    description: ClassVar[str] = "N, then a string of exactly N characters from '=#<>'"

    @classmethod
    def validate(cls, reader) -> None:
        n = reader.read_integer(INT32, MINN, MAXN)
        reader.must_be_newline()

        reader.read_string(n, allowed=ALPHABET)
        reader.must_be_newline()

        reader.must_be_eof()
