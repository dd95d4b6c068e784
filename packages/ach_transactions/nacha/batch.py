"""Batches: a header, its entries and a computed control record.

``create()`` fills in everything derived from the entries (trace numbers where
missing, addenda indicators, the batch control) and then runs ``validate()``.
``validate()`` never mutates; it is what the reader runs on parsed input.
"""

from __future__ import annotations

from ..logging_setup import get_logger
from .errors import AchError, BatchError
from .records import (
    CATEGORY_RETURN,
    CCD,
    CREDITS_ONLY,
    DEBITS_ONLY,
    PPD,
    BatchControl,
    BatchHeader,
    EntryDetail,
)

_log = get_logger("ach_transactions.nacha.batch")

_HASH_MODULUS = 10**10


class Batch:
    """A batch of entries sharing one header.

    Subclasses pin ``sec_code`` to restrict the header's Standard Entry Class.
    """

    sec_code: str | None = None

    def __init__(self, header: BatchHeader) -> None:
        self.header = header
        self.entries: list[EntryDetail] = []
        self.control = BatchControl()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(sec={self.header.standard_entry_class_code!r}, "
            f"batch_number={self.header.batch_number}, entries={len(self.entries)})"
        )

    def _error(self, msg: str) -> BatchError:
        return BatchError(self.header.batch_number, msg)

    def add_entry(self, entry: EntryDetail) -> None:
        self.entries.append(entry)

    # ---- derived values ------------------------------------------------------

    def entry_hash(self) -> int:
        return sum(int(e.rdfi_identification or 0) for e in self.entries) % _HASH_MODULUS

    def entry_addenda_count(self) -> int:
        return sum(1 + e.addenda_count() for e in self.entries)

    def total_debit(self) -> int:
        return sum(e.amount for e in self.entries if e.is_debit)

    def total_credit(self) -> int:
        return sum(e.amount for e in self.entries if e.is_credit)

    def category(self) -> str | None:
        return self.entries[0].category if self.entries else None

    # ---- create / validate ---------------------------------------------------

    def create(self) -> None:
        """Populate trace numbers, addenda links and the batch control, then validate."""

        try:
            self.header.validate()
        except AchError as e:
            raise self._error(f"invalid header: {e}") from e
        if not self.entries:
            raise self._error("must have at least one entry")

        odfi = self.header.odfi_identification[:8]
        for seq, entry in enumerate(self.entries, start=1):
            # Entries that already carry this ODFI's trace prefix keep their
            # number; returns must preserve the trace they were built with.
            if entry.trace_number[:8] != odfi:
                entry.set_trace_number(self.header.odfi_identification, seq)
            # Derived values below parse the RDFI and trace as integers.
            try:
                entry.validate()
            except AchError as e:
                raise self._error(str(e)) from e
            if entry.addenda99 is not None:
                entry.addenda99.trace_number = entry.trace_number
            for n, addenda in enumerate(entry.addenda05, start=1):
                addenda.sequence_number = n
                addenda.entry_detail_sequence_number = int(entry.trace_number[-7:])
            entry.addenda_record_indicator = 1 if entry.addenda_count() else 0

        self.control = BatchControl(
            service_class_code=self.header.service_class_code,
            entry_addenda_count=self.entry_addenda_count(),
            entry_hash=self.entry_hash(),
            total_debit_entry_dollar_amount=self.total_debit(),
            total_credit_entry_dollar_amount=self.total_credit(),
            company_identification=self.header.company_identification,
            odfi_identification=self.header.odfi_identification[:8],
            batch_number=self.header.batch_number,
        )
        _log.debug(
            "created batch #%s: %d entries, debit=%d credit=%d",
            self.header.batch_number,
            len(self.entries),
            self.control.total_debit_entry_dollar_amount,
            self.control.total_credit_entry_dollar_amount,
        )
        self.validate()

    def validate(self) -> None:
        """Check records and the consistency between entries and control."""

        try:
            self.header.validate()
            for entry in self.entries:
                entry.validate()
            self.control.validate()
        except BatchError:
            raise
        except AchError as e:
            raise self._error(str(e)) from e

        if not self.entries:
            raise self._error("must have at least one entry")
        if self.sec_code is not None and self.header.standard_entry_class_code != self.sec_code:
            raise self._error(
                f"SEC code {self.header.standard_entry_class_code!r} does not match {self.sec_code}"
            )

        self._validate_control()
        self._validate_entries()

    def _validate_control(self) -> None:
        h, c = self.header, self.control
        if c.service_class_code != h.service_class_code:
            raise self._error("control service class code does not match header")
        if c.batch_number != h.batch_number:
            raise self._error("control batch number does not match header")
        if c.odfi_identification != h.odfi_identification[:8]:
            raise self._error("control ODFI identification does not match header")
        if c.company_identification != h.company_identification:
            raise self._error("control company identification does not match header")
        checks = (
            ("entry/addenda count", c.entry_addenda_count, self.entry_addenda_count()),
            ("entry hash", c.entry_hash, self.entry_hash()),
            ("total debit amount", c.total_debit_entry_dollar_amount, self.total_debit()),
            ("total credit amount", c.total_credit_entry_dollar_amount, self.total_credit()),
        )
        for label, recorded, computed in checks:
            if recorded != computed:
                raise self._error(f"control {label} {recorded} does not match computed {computed}")

    def _validate_entries(self) -> None:
        odfi = self.header.odfi_identification[:8]
        category = self.category()
        last_trace = -1
        for entry in self.entries:
            if entry.category != category:
                raise self._error(f"mixed entry categories {category!r} and {entry.category!r}")
            if entry.trace_number[:8] != odfi:
                raise self._error(f"trace number {entry.trace_number} does not start with ODFI {odfi}")
            trace = int(entry.trace_number)
            if trace <= last_trace:
                raise self._error(f"trace number {entry.trace_number} is not ascending")
            last_trace = trace
            expected_indicator = 1 if entry.addenda_count() else 0
            if entry.addenda_record_indicator != expected_indicator:
                raise self._error(
                    f"entry {entry.trace_number} addenda indicator {entry.addenda_record_indicator} "
                    f"with {entry.addenda_count()} addenda records"
                )
            if entry.category == CATEGORY_RETURN:
                if entry.addenda99 is None:
                    raise self._error(f"return entry {entry.trace_number} requires an Addenda99")
                if entry.addenda99.trace_number != entry.trace_number:
                    raise self._error(f"Addenda99 trace number does not match entry {entry.trace_number}")
            elif entry.addenda99 is not None:
                raise self._error(f"Addenda99 on non-return entry {entry.trace_number}")
            if self.header.service_class_code == CREDITS_ONLY and entry.is_debit:
                raise self._error(f"debit entry {entry.trace_number} in a credits-only batch")
            if self.header.service_class_code == DEBITS_ONLY and entry.is_credit:
                raise self._error(f"credit entry {entry.trace_number} in a debits-only batch")


class PPDBatch(Batch):
    """Prearranged Payment and Deposit batch."""

    sec_code = PPD


class CCDBatch(Batch):
    """Corporate Credit or Debit batch."""

    sec_code = CCD


_BATCH_TYPES: dict[str, type[Batch]] = {PPD: PPDBatch, CCD: CCDBatch}


def new_batch(header: BatchHeader, *, strict: bool = True) -> Batch:
    """Return a batch of the class matching the header's SEC code.

    With ``strict=False`` unknown SEC codes fall back to a plain :class:`Batch`
    (the reader uses this so any well-formed file can be inspected).
    """

    sec = header.standard_entry_class_code
    cls = _BATCH_TYPES.get(sec)
    if cls is None:
        if strict:
            raise BatchError(header.batch_number, f"unsupported SEC code {sec!r}")
        cls = Batch
    return cls(header)


__all__ = ["Batch", "CCDBatch", "PPDBatch", "new_batch"]
