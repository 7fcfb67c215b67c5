"""
Result values for expected failure paths.

Operations that can fail for business reasons return a Result instead of
raising. A Result is either a Success (optionally carrying a payload) or a
Failure carrying exactly one Error. Both variants are frozen values.

Misusing a Result (reading the payload of a Failure, or building a Failure
without an Error) is a programming error and raises ResultStateError.
No framework imports allowed.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

T = TypeVar("T")


class ResultStateError(RuntimeError):
    """Raised when a Result is built or read in a state it cannot hold."""


@dataclass(frozen=True)
class Error:
    """A machine-readable code paired with a human-readable description.

    Attributes:
        code: Short dotted identifier, e.g. "Poll.NotFound".
        description: Message suitable for API clients.
    """

    code: str
    description: str

    NONE: ClassVar["Error"]


Error.NONE = Error(code="", description="")


class Result(ABC, Generic[T]):
    """Base of the Success | Failure union."""

    __slots__ = ()

    @property
    @abstractmethod
    def is_success(self) -> bool:
        raise NotImplementedError

    @property
    def is_failure(self) -> bool:
        return not self.is_success


@dataclass(frozen=True)
class Success(Result[T]):
    """Completed operation, with an optional payload."""

    value: T = None  # type: ignore[assignment]

    @property
    def is_success(self) -> bool:
        return True

    @property
    def error(self) -> Error:
        return Error.NONE


@dataclass(frozen=True)
class Failure(Result[T]):
    """Operation that failed with a single domain Error."""

    error: Error

    def __post_init__(self) -> None:
        if not isinstance(self.error, Error):
            raise ResultStateError(
                f"Failure requires an Error, got {type(self.error).__name__}"
            )
        if self.error == Error.NONE:
            raise ResultStateError("Failure cannot be built with Error.NONE")

    @property
    def is_success(self) -> bool:
        return False

    @property
    def value(self) -> Any:
        raise ResultStateError(
            f"Cannot read the value of a failed result ({self.error.code})"
        )
