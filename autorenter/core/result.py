"""Result Envelope — the tagged outcome every service operation returns.

Invariants:
    - code SUCCESS may carry a value; every other code carries none
    - errors (validation messages) only accompany BAD_REQUEST
    - Immutable: created once per operation call, consumed once by the caller

Design Decisions:
    - Frozen dataclass over a class hierarchy: the tag is the ResultCode enum,
      so the mapper can match on it exhaustively
    - Invalid combinations raise ValueError at construction, so a partially
      populated Result never reaches a controller
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from autorenter.core.domain_types import ResultCode

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a service operation: a ResultCode plus optional payload."""
    code: ResultCode
    value: T | None = None
    errors: tuple[str, ...] = ()

    def __post_init__(self):
        if self.code is not ResultCode.SUCCESS and self.value is not None:
            raise ValueError(f"{self.code.value} result cannot carry a value")
        if self.errors and self.code is not ResultCode.BAD_REQUEST:
            raise ValueError("only bad_request results carry validation errors")

    @property
    def is_success(self) -> bool:
        return self.code is ResultCode.SUCCESS

    @classmethod
    def bad_request(cls, errors: list[str] | tuple[str, ...] = ()) -> "Result[T]":
        return cls(ResultCode.BAD_REQUEST, errors=tuple(errors))
