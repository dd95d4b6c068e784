"""The in-memory ACH file: header, batches and file control."""

from __future__ import annotations

from ..logging_setup import get_logger
from .batch import Batch
from .errors import AchError, FileError
from .fields import BLOCKING_FACTOR
from .records import FileControl, FileHeader

_log = get_logger("ach_transactions.nacha.file")

_HASH_MODULUS = 10**10


class File:
    """An ACH file assembled from batches.

    Typical use::

        f = File()
        f.set_header(header)
        f.add_batch(batch)   # batch.create() already called
        f.create()           # computes the file control and validates
    """

    def __init__(self, header: FileHeader | None = None) -> None:
        self.header = header if header is not None else FileHeader()
        self.batches: list[Batch] = []
        self.control = FileControl()

    def __repr__(self) -> str:
        return (
            f"File(destination={self.header.immediate_destination!r}, "
            f"origin={self.header.immediate_origin!r}, batches={len(self.batches)})"
        )

    def set_header(self, header: FileHeader) -> None:
        self.header = header

    def add_batch(self, batch: Batch) -> None:
        self.batches.append(batch)

    # ---- derived values ------------------------------------------------------

    def record_count(self) -> int:
        """Header + control + two records per batch + every entry and addenda."""

        return 2 + sum(2 + b.entry_addenda_count() for b in self.batches)

    def block_count(self) -> int:
        return -(-self.record_count() // BLOCKING_FACTOR)

    def entry_addenda_count(self) -> int:
        return sum(b.control.entry_addenda_count for b in self.batches)

    def entry_hash(self) -> int:
        return sum(b.control.entry_hash for b in self.batches) % _HASH_MODULUS

    def total_debit(self) -> int:
        return sum(b.control.total_debit_entry_dollar_amount for b in self.batches)

    def total_credit(self) -> int:
        return sum(b.control.total_credit_entry_dollar_amount for b in self.batches)

    # ---- create / validate ---------------------------------------------------

    def create(self) -> None:
        """Compute the file control from the batches and validate the result."""

        try:
            self.header.validate()
        except AchError as e:
            raise FileError(f"invalid file header: {e}") from e
        if not self.batches:
            raise FileError("file must have at least one batch")

        self.control = FileControl(
            batch_count=len(self.batches),
            block_count=self.block_count(),
            entry_addenda_count=self.entry_addenda_count(),
            entry_hash=self.entry_hash(),
            total_debit_entry_dollar_amount_in_file=self.total_debit(),
            total_credit_entry_dollar_amount_in_file=self.total_credit(),
        )
        _log.debug(
            "created file: %d batches, %d records, %d blocks",
            self.control.batch_count,
            self.record_count(),
            self.control.block_count,
        )
        self.validate()

    def validate(self) -> None:
        """Validate header, every batch and the file control totals."""

        try:
            self.header.validate()
            self.control.validate()
        except AchError as e:
            raise FileError(str(e)) from e
        if not self.batches:
            raise FileError("file must have at least one batch")

        seen: set[int] = set()
        for batch in self.batches:
            batch.validate()
            number = batch.header.batch_number
            if number in seen:
                raise FileError(f"duplicate batch number {number}")
            seen.add(number)

        c = self.control
        checks = (
            ("batch count", c.batch_count, len(self.batches)),
            ("block count", c.block_count, self.block_count()),
            ("entry/addenda count", c.entry_addenda_count, self.entry_addenda_count()),
            ("entry hash", c.entry_hash, self.entry_hash()),
            ("total debit amount", c.total_debit_entry_dollar_amount_in_file, self.total_debit()),
            ("total credit amount", c.total_credit_entry_dollar_amount_in_file, self.total_credit()),
        )
        for label, recorded, computed in checks:
            if recorded != computed:
                raise FileError(f"file control {label} {recorded} does not match computed {computed}")


__all__ = ["File"]
