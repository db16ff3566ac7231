"""OII 2022 "bus": N stops, L bus lines, each line a list of K stops.

    N L
    K F_1 ... F_K        (L lines)
"""

from __future__ import annotations
from typing import ClassVar

from ..core.limits import INT32
from ..core.validator_base import ProblemValidator
from ..validation import all_between, between, check, for_all, lte, neq

MINN, MAXN = 2, 100_000
MINL, MAXL = 1, 100_000
MINK = 2
MAX_SUMK = 300_000


class BusValidator(ProblemValidator):
    problem: ClassVar[str] = "oii2022_bus"
    description: ClassVar[str] = "Bus lines over N stops, consecutive stops distinct"

    @classmethod
    def validate(cls, reader) -> None:
        n = reader.read_i32()
        check(between(n, MINN, MAXN))
        reader.must_be_space()

        lines = reader.read_i32()
        check(between(lines, MINL, MAXL))
        reader.must_be_newline()

        sum_k = 0
        for _ in range(lines):
            # K >= MINK is checked at read time
            k = reader.read_integer(INT32, MINK, INT32.max)
            sum_k += k
            reader.must_be_space()

            stops = reader.read_integers(k, INT32)
            check(all_between(stops, 0, n - 1))
            check(for_all(zip(stops, stops[1:]), lambda pair: neq(*pair)))
            reader.must_be_newline()

        check(lte(sum_k, MAX_SUMK))
        reader.must_be_eof()
