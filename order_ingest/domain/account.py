"""Account identifiers."""
from __future__ import annotations

import re
from dataclasses import dataclass

from .results import Validation

ACCOUNT_NO_PATTERN = re.compile(r"[A-Za-z0-9_-]{1,12}")
INVALID_ACCOUNT_NO = "Account No has to be 1 to 12 letters, digits, '-' or '_': found {value!r}"


def account_no_problem(raw: str) -> str | None:
    if not isinstance(raw, str) or not ACCOUNT_NO_PATTERN.fullmatch(raw):
        return INVALID_ACCOUNT_NO.format(value=raw)
    return None


@dataclass(frozen=True)
class AccountNo:
    value: str

    def __post_init__(self) -> None:
        problem = account_no_problem(self.value)
        if problem:
            raise ValueError(problem)

    def __str__(self) -> str:
        return self.value


def validate_account_no(raw: str) -> Validation[AccountNo]:
    problem = account_no_problem(raw)
    if problem:
        return Validation.invalid(problem)
    return Validation.valid(AccountNo(raw))
