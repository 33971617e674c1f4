"""Shared parsing utilities for front-office ingestion."""
from __future__ import annotations

import re
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import IO

from order_ingest.config import get_settings
from order_ingest.errors import InputReadError

PLAIN_DECIMAL = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)")


def parse_decimal(value: str) -> Decimal:
    """Parse a plain decimal literal such as ``-12.50``.

    Raises:
        ValueError: For exponents, separators, ``NaN`` or anything else.
    """
    s = value.strip()
    if not PLAIN_DECIMAL.fullmatch(s):
        raise ValueError(f"not a plain decimal number: {value!r}")
    try:
        return Decimal(s, context=get_settings().decimal_context)
    except InvalidOperation as exc:
        raise ValueError(f"not a plain decimal number: {value!r}") from exc


def parse_instant(value: str) -> datetime:
    """Parse an ISO-8601 instant and normalize it to UTC.

    Raises:
        ValueError: If the text is not ISO-8601 or carries no UTC offset.
    """
    s = value.strip()
    if s.endswith(("Z", "z")):
        s = s[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(s)
    except ValueError as exc:
        raise ValueError(f"not an ISO-8601 instant: {value!r}") from exc
    if parsed.tzinfo is None:
        raise ValueError(f"instant has no UTC offset: {value!r}")
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError as exc:
        raise ValueError(f"instant out of range: {value!r}") from exc


def format_instant(value: datetime) -> str:
    utc = value.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def read_text(stream: IO[bytes] | IO[str], encoding: str | None = None) -> str:
    """Drain ``stream`` and close it, whatever happens.

    Raises:
        InputReadError: If reading fails or the bytes do not decode.
    """
    encoding = encoding or get_settings().encoding
    with stream:
        try:
            data = stream.read()
        except OSError as exc:
            raise InputReadError(f"Failed to read front-office input: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise InputReadError(f"Front-office input is not valid text: {exc}") from exc
    if isinstance(data, bytes):
        try:
            return data.decode(encoding)
        except UnicodeDecodeError as exc:
            raise InputReadError(f"Front-office input is not valid {encoding}: {exc}") from exc
    return data


def open_source(path: Path | str) -> IO[bytes]:
    try:
        return Path(path).open("rb")
    except OSError as exc:
        raise InputReadError(f"Failed to open front-office input {path}: {exc}") from exc
