"""Accumulating validation results.

A ``Validation`` holds either a value or a non-empty tuple of error messages.
Failures from independent checks are merged rather than short-circuited.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, TypeVar

from order_ingest.errors import OrderValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class Validation(Generic[T]):
    value: T | None = None
    errors: tuple[str, ...] = ()

    @classmethod
    def valid(cls, value: T) -> "Validation[T]":
        return cls(value=value)

    @classmethod
    def invalid(cls, *errors: str) -> "Validation[T]":
        if not errors:
            raise ValueError("An invalid result needs at least one error message")
        return cls(errors=tuple(errors))

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def unwrap(self) -> T:
        """Return the value, raising ``OrderValidationError`` on the error branch."""
        if self.errors:
            raise OrderValidationError(self.errors)
        return self.value  # type: ignore[return-value]

    def map_errors(self, fn: Callable[[str], str]) -> "Validation[T]":
        if not self.errors:
            return self
        return Validation(errors=tuple(fn(error) for error in self.errors))


def collect(results: Iterable[Validation[T]]) -> Validation[list[T]]:
    """Combine results into one, keeping every error from every failure."""
    values: list[T] = []
    errors: list[str] = []
    for result in results:
        if result.errors:
            errors.extend(result.errors)
        else:
            values.append(result.value)  # type: ignore[arg-type]
    if errors:
        return Validation.invalid(*errors)
    return Validation.valid(values)
