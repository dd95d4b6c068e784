"""Fixed-width field helpers shared by every NACHA record type.

NACHA records are 94 ASCII characters. Alphanumeric fields are left-justified
and space-padded, numeric fields right-justified and zero-padded. Values that
are too long are truncated to the field width.
"""

from __future__ import annotations

import re

from .errors import FieldError

RECORD_LENGTH = 94
BLOCKING_FACTOR = 10
FILLER_RECORD = "9" * RECORD_LENGTH

# Printable ASCII, the character set NACHA allows in alphanumeric fields.
_ALPHANUMERIC = re.compile(r"^[\x20-\x7e]*$")
_NUMERIC = re.compile(r"^[0-9]*$")

# ABA check-digit weights, applied to the first eight routing digits.
_ABA_WEIGHTS = (3, 7, 1, 3, 7, 1, 3, 7)


def alpha(value: str | None, width: int) -> str:
    s = "" if value is None else str(value)
    return s[:width].ljust(width, " ")


def numeric(value: int | str | None, width: int) -> str:
    s = "" if value is None else str(value)
    if len(s) > width:
        # Keep the low-order digits, the NACHA rule for hash totals.
        s = s[-width:]
    return s.rjust(width, "0")


def blank(width: int) -> str:
    return " " * width


def parse_int(raw: str, *, record: str, field: str) -> int:
    s = raw.strip()
    if not s:
        return 0
    if not _NUMERIC.match(s):
        raise FieldError(record, field, raw, "expected numeric value")
    return int(s)


def is_alphanumeric(value: str) -> bool:
    return bool(_ALPHANUMERIC.match(value))


def is_numeric(value: str) -> bool:
    return bool(value) and bool(_NUMERIC.match(value))


def check_alphanumeric(record: str, field: str, value: str) -> None:
    if not is_alphanumeric(value):
        raise FieldError(record, field, value, "has non-alphanumeric characters")


def check_numeric(record: str, field: str, value: str) -> None:
    if not is_numeric(value):
        raise FieldError(record, field, value, "must be numeric")


def check_required(record: str, field: str, value: str | int | None) -> None:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise FieldError(record, field, value, "is a mandatory field")


def check_max(record: str, field: str, value: int, width: int) -> None:
    if value < 0:
        raise FieldError(record, field, value, "must not be negative")
    if len(str(value)) > width:
        raise FieldError(record, field, value, f"exceeds {width} digits")


def calculate_check_digit(routing: str) -> int:
    """Return the ABA check digit for the first eight digits of ``routing``."""

    if len(routing) < 8 or not routing[:8].isdigit():
        raise ValueError(f"routing number needs 8 leading digits: {routing!r}")
    total = sum(int(d) * w for d, w in zip(routing[:8], _ABA_WEIGHTS, strict=True))
    return (10 - total % 10) % 10


def valid_routing_number(routing: str) -> bool:
    if len(routing) != 9 or not routing.isdigit():
        return False
    return calculate_check_digit(routing) == int(routing[8])


__all__ = [
    "BLOCKING_FACTOR",
    "FILLER_RECORD",
    "RECORD_LENGTH",
    "alpha",
    "blank",
    "calculate_check_digit",
    "check_alphanumeric",
    "check_max",
    "check_numeric",
    "check_required",
    "is_alphanumeric",
    "is_numeric",
    "numeric",
    "parse_int",
    "valid_routing_number",
]
