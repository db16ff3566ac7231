from __future__ import annotations
import warnings
from typing import Dict, List, Type

from .validator_base import ProblemValidator
from .errors import UnknownProblemError


class ValidatorRegistry:
    def __init__(self) -> None:
        self._by_problem: Dict[str, Type[ProblemValidator]] = {}

    # called from ProblemValidator.__init_subclass__
    def register(self, validator_cls: Type[ProblemValidator]) -> None:
        name = getattr(validator_cls, "problem", None)
        if not name:
            # abstract intermediate classes carry no problem name
            return
        previous = self._by_problem.get(name)
        if previous is not None and previous is not validator_cls:
            warnings.warn(f"Validator for {name!r} re-registered: {previous.__name__} -> {validator_cls.__name__}")
        self._by_problem[name] = validator_cls

    def get(self, problem: str) -> Type[ProblemValidator]:
        try:
            return self._by_problem[problem]
        except KeyError:
            raise UnknownProblemError(f"No validator for {problem!r}") from None

    def names(self) -> List[str]:
        return sorted(self._by_problem)

    def __contains__(self, problem: str) -> bool:
        return problem in self._by_problem


# singleton used project-wide
_REGISTRY = ValidatorRegistry()
