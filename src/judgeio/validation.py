"""Composable checks producing printable success/failure explanations.

Every predicate returns a :class:`ValidationResult`. Results combine with
``&``, ``|`` and ``~`` (or :func:`and_`, :func:`or_`, :func:`not_`); the
combined message keeps both operands' explanations, indented, so a failing
conjunction still shows which half held. :func:`check` turns a failed result
into a :class:`~judgeio.core.errors.JudgeError`.
"""

from __future__ import annotations
import inspect
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Sequence

from .core.errors import JudgeError
from .core.util import display, indent


@dataclass(frozen=True, slots=True)
class ValidationResult:
    success: bool
    message: str

    @classmethod
    def ok(cls, message: str) -> "ValidationResult":
        return cls(True, message)

    @classmethod
    def fail(cls, message: str) -> "ValidationResult":
        return cls(False, message)

    @property
    def failed(self) -> bool:
        return not self.success

    def __bool__(self) -> bool:
        return self.success

    def __and__(self, other: "ValidationResult") -> "ValidationResult":
        message = f"{indent(self.message)}\nAND\n{indent(other.message)}"
        return ValidationResult(self.success and other.success, message)

    def __or__(self, other: "ValidationResult") -> "ValidationResult":
        message = f"{indent(self.message)}\nOR\n{indent(other.message)}"
        return ValidationResult(self.success or other.success, message)

    def __invert__(self) -> "ValidationResult":
        return ValidationResult(not self.success, f"NOT\n{indent(self.message)}")

    def to_error(self, location: str | None = None) -> JudgeError:
        return JudgeError.failed_validation(self.message, location=location)


def and_(a: ValidationResult, b: ValidationResult) -> ValidationResult:
    return a & b


def or_(a: ValidationResult, b: ValidationResult) -> ValidationResult:
    return a | b


def not_(a: ValidationResult) -> ValidationResult:
    return ~a


def check(result: ValidationResult, location: str | None = None) -> ValidationResult:
    """Raise a FAILED_VALIDATION error if ``result`` failed, else return it.

    The error is tagged with the caller's ``file::line`` unless ``location``
    is given.
    """
    if result.success:
        return result
    if location is None:
        frame = inspect.currentframe().f_back
        location = f"{frame.f_code.co_filename}::{frame.f_lineno}"
    raise result.to_error(location)


# --- comparisons ---

def eq(a: Any, b: Any) -> ValidationResult:
    if a == b:
        return ValidationResult.ok("Elements are equal")
    return ValidationResult.fail(f"Elements are not equal: {display(a)} != {display(b)}")


def neq(a: Any, b: Any) -> ValidationResult:
    if not a == b:
        return ValidationResult.ok("Elements are unequal")
    return ValidationResult.fail(f"Elements are not unequal: {display(a)} == {display(b)}")


def lt(a: Any, b: Any) -> ValidationResult:
    if a < b:
        return ValidationResult.ok("Comparison satisfied")
    return ValidationResult.fail(f"Comparison failed: {display(a)} >= {display(b)}")


def lte(a: Any, b: Any) -> ValidationResult:
    if not b < a:
        return ValidationResult.ok("Comparison satisfied")
    return ValidationResult.fail(f"Comparison failed: {display(a)} > {display(b)}")


def gt(a: Any, b: Any) -> ValidationResult:
    if b < a:
        return ValidationResult.ok("Comparison satisfied")
    return ValidationResult.fail(f"Comparison failed: {display(a)} <= {display(b)}")


def gte(a: Any, b: Any) -> ValidationResult:
    if not a < b:
        return ValidationResult.ok("Comparison satisfied")
    return ValidationResult.fail(f"Comparison failed: {display(a)} < {display(b)}")


def between(x: Any, low: Any, high: Any) -> ValidationResult:
    interval = f"[{display(low)}, {display(high)}]"
    if x < low:
        return ValidationResult.fail(f"Value does not lie in {interval}: {display(x)} < {display(low)}")
    if high < x:
        return ValidationResult.fail(f"Value does not lie in {interval}: {display(x)} > {display(high)}")
    return ValidationResult.ok(f"Value (x = {display(x)}) lies in {interval}")


# --- sequences ---

def for_all(values: Iterable[Any], predicate: Callable[[Any], ValidationResult]) -> ValidationResult:
    """Check ``predicate`` on every element, stopping at the first failure."""
    for i, x in enumerate(values):
        res = predicate(x)
        if res.failed:
            return ValidationResult.fail(f"Failed check for element {i}: {res.message}")
    return ValidationResult.ok("Property satisfied by all elements")


def all_between(values: Iterable[Any], low: Any, high: Any) -> ValidationResult:
    return for_all(values, lambda x: between(x, low, high))


def _first_duplicate(values: list) -> tuple[bool, Any]:
    try:
        seen = set()
        for x in values:
            if x in seen:
                return True, x
            seen.add(x)
    except TypeError:
        # unhashable elements
        for i, x in enumerate(values):
            if x in values[:i]:
                return True, x
    return False, None


def distinct(values: Iterable[Any]) -> ValidationResult:
    found, x = _first_duplicate(list(values))
    if found:
        return ValidationResult.fail(f"Elements are not distinct: Multiple occurrences of {display(x)}")
    return ValidationResult.ok("Elements are distinct")


def _order(strict: bool, decreasing: bool) -> Callable[[Any, Any], bool]:
    def compare(a, b):
        if decreasing:
            a, b = b, a
        return a < b if strict else not b < a
    return compare


def is_sorted(
    values: Sequence[Any],
    strict: bool = True,
    decreasing: bool = False,
    *,
    compare: Callable[[Any, Any], bool] | None = None,
) -> ValidationResult:
    """Check that every adjacent pair satisfies ``compare`` (default: increasing order)."""
    if compare is None:
        compare = _order(strict, decreasing)
    values = list(values)
    for i in range(len(values) - 1):
        if not compare(values[i], values[i + 1]):
            return ValidationResult.fail(
                f"Array is not sorted: Wrong order at positions {i} and {i + 1}"
            )
    return ValidationResult.ok("Array is sorted")


__all__ = [
    "ValidationResult", "check", "and_", "or_", "not_",
    "eq", "neq", "lt", "lte", "gt", "gte", "between",
    "for_all", "all_between", "distinct", "is_sorted",
]
