"""Instrument identifiers."""
from __future__ import annotations

import re
from dataclasses import dataclass

from .results import Validation

ISIN_PATTERN = re.compile(r"[A-Z]{2}[A-Z0-9]{9}[0-9]")
INVALID_ISIN = "ISIN code has to be 12 characters: 2 letter country code, 9 alphanumerics and a digit: found {value!r}"


def isin_problem(raw: str) -> str | None:
    # Check digit is not verified; feeds carry internal test identifiers.
    if not isinstance(raw, str) or not ISIN_PATTERN.fullmatch(raw):
        return INVALID_ISIN.format(value=raw)
    return None


@dataclass(frozen=True)
class ISINCode:
    value: str

    def __post_init__(self) -> None:
        problem = isin_problem(self.value)
        if problem:
            raise ValueError(problem)

    def __str__(self) -> str:
        return self.value


def validate_isin_code(raw: str) -> Validation[ISINCode]:
    problem = isin_problem(raw)
    if problem:
        return Validation.invalid(problem)
    return Validation.valid(ISINCode(raw))
