from abc import ABC, abstractmethod
from typing import ClassVar


class ProblemValidator(ABC):
    # --- required by subclasses ---
    problem: ClassVar[str]                   # registry key
    description: ClassVar[str] = ""

    @classmethod
    @abstractmethod
    def validate(cls, reader) -> None:
        """Check the whole input behind a strict Reader, raising JudgeError on the first violation."""
        ...

    # --- registry hook ---
    def __init_subclass__(cls, **kw):
        super().__init_subclass__(**kw)
        from .registry import _REGISTRY
        _REGISTRY.register(cls)           # noqa: E402
