"""Exception hierarchy for the NACHA codec."""

from __future__ import annotations


class AchError(Exception):
    """Base class for every error raised by :mod:`ach_transactions.nacha`."""


class FieldError(AchError):
    """A single record field failed validation."""

    def __init__(self, record: str, field: str, value: object, msg: str) -> None:
        self.record = record
        self.field = field
        self.value = value
        self.msg = msg
        super().__init__(f"{record}.{field} {value!r}: {msg}")


class BatchError(AchError):
    """A batch is inconsistent (entries, controls or header)."""

    def __init__(self, batch_number: int | None, msg: str) -> None:
        self.batch_number = batch_number
        self.msg = msg
        super().__init__(f"batch #{batch_number}: {msg}")


class FileError(AchError):
    """File-level inconsistency (header, control, batch list)."""


class ParseError(AchError):
    """Input text could not be parsed into records."""

    def __init__(self, line_number: int, msg: str) -> None:
        self.line_number = line_number
        self.msg = msg
        super().__init__(f"line {line_number}: {msg}")


__all__ = ["AchError", "BatchError", "FieldError", "FileError", "ParseError"]
