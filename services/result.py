"""
Result type for service method return values.

Services report expected failures (bad selections, invalid form input) as a
Result instead of raising, so callers can show the message and branch on the
error code without parsing text.

Usage:
    result = service.generate_teams(selected_ids)
    if result:
        matchup = result.value
    else:
        print(f"{result.error} ({result.error_code})")
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Success flag plus either a value or an error message and code.
    """

    success: bool
    value: T | None = None
    error: str | None = None
    error_code: str | None = None

    @classmethod
    def ok(cls, value: T | None = None) -> "Result[T]":
        """Create a successful result."""
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: str, code: str | None = None) -> "Result[T]":
        """Create a failed result."""
        return cls(success=False, error=error, error_code=code)

    def __bool__(self) -> bool:
        return self.success

    def unwrap(self) -> T:
        """
        Get the value of a successful result.

        Raises:
            ValueError: If the result is a failure
        """
        if not self.success:
            raise ValueError(f"Cannot unwrap failed result: {self.error}")
        return self.value  # type: ignore

    def unwrap_or(self, default: T) -> T:
        return self.value if self.success else default  # type: ignore

    def map(self, fn: "Callable[[T], Result]") -> "Result":
        """Apply fn to the value of a success; pass failures through unchanged."""
        if not self.success:
            return self
        return fn(self.value)
