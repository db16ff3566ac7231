"""judgeio - strict grammar-checking reader and validation engine for judge files."""

from .core.errors import ErrorKind, JudgeError, UnknownProblemError    # re-export
from .core.limits import IntKind, INT8, INT16, INT32, INT64, UINT8, UINT16, UINT32, UINT64
from .core.model import Result
from .core.registry import _REGISTRY                                   # singleton
from .reader import Reader, open_reader
from .writer import Writer, open_writer
from .validation import ValidationResult, check

# Import validators to trigger registration
from .validators import bastioni, bus, islands  # noqa: F401


def validate_source(problem: str, source) -> Result:
    """Run the validator registered for ``problem`` on ``source`` with a strict reader."""
    validator_cls = _REGISTRY.get(problem)
    try:
        reader = Reader(source, strict=True)
    except JudgeError as e:
        return Result(False, problem, e.describe(), e.kind.name, 0)
    with reader:
        try:
            validator_cls.validate(reader)
        except JudgeError as e:
            return Result(False, problem, e.describe(), e.kind.name, reader.position)
        return Result(True, problem, None, None, reader.position)


__all__ = [
    "validate_source",
    "Reader", "open_reader", "Writer", "open_writer",
    "ValidationResult", "check",
    "ErrorKind", "JudgeError", "UnknownProblemError", "Result",
    "IntKind", "INT8", "INT16", "INT32", "INT64", "UINT8", "UINT16", "UINT32", "UINT64",
]
