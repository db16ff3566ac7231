"""OIS 2020 "islands": an R x C grid of 0/1 cells."""

from __future__ import annotations
from typing import ClassVar

from ..core.limits import INT32, UINT16
from ..core.validator_base import ProblemValidator
from ..validation import all_between, check, for_all

MINRC, MAXRC = 1, 1000


class IslandsValidator(ProblemValidator):
    problem: ClassVar[str] = "ois2020_islands"
    description: ClassVar[str] = "R C, then R rows of C space-separated 0/1 cells"

    @classmethod
    def validate(cls, reader) -> None:
        rows = reader.read_integer(INT32, MINRC, MAXRC)
        reader.must_be_space()
        cols = reader.read_integer(INT32, MINRC, MAXRC)
        reader.must_be_newline()

        grid = reader.read_integer_matrix(rows, cols, UINT16)
        check(for_all(grid, lambda row: all_between(row, 0, 1)))

        reader.must_be_newline()
        reader.must_be_eof()
