"""Assemble an ACH file from transaction models.

:func:`build_ach` maps :class:`~.models.ACHData`, :class:`~.models.Originator`
and a sequence of transactions onto the :mod:`~.nacha` builder objects and
returns the serialized NACHA text. The mapping is fixed:

- file header: destination/origin routing and names, reference code, creation
  date/time taken from ``now()``;
- one mixed debits/credits batch whose company identification is the file's
  immediate origin and whose entry description is the company name;
- each entry's RDFI is the file destination; trace numbers are the ODFI
  prefix followed by the transaction's position.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from .logging_setup import get_logger
from .models import ACHData, Originator, Transactions
from .nacha import (
    MIXED_DEBITS_AND_CREDITS,
    AchError,
    BatchHeader,
    File,
    FileHeader,
    dumps,
    new_batch,
)

_log = get_logger("ach_transactions.builder")


class AchBuildError(AchError):
    """Building or serializing an ACH file failed; wraps the codec error."""


def build_ach(
    meta: ACHData,
    originator: Originator,
    transactions: Transactions,
    *,
    now: Callable[[], datetime] = datetime.now,
) -> str:
    """Return NACHA text for a single-batch file holding ``transactions``.

    Parameters
    ----------
    meta:
        File and batch metadata.
    originator:
        Company name and ODFI identification for the batch header.
    transactions:
        Entries in trace-number order.
    now:
        Clock used for the file creation date and time.

    Raises
    ------
    AchBuildError
        When the batch or file fails to build, or the writer rejects it.
    """

    ts = now()

    fh = FileHeader(
        immediate_destination=meta.destination,
        immediate_origin=meta.origin,
        file_creation_date=ts.strftime("%y%m%d"),
        file_creation_time=ts.strftime("%H%M"),
        immediate_destination_name=meta.destination_name,
        immediate_origin_name=meta.origin_name,
        reference_code=meta.reference_code,
    )

    bh = BatchHeader(
        service_class_code=MIXED_DEBITS_AND_CREDITS,
        company_name=originator.company_name,
        company_identification=fh.immediate_origin,
        standard_entry_class_code=meta.standard_entry_class_code,
        company_entry_description=originator.company_name,
        company_descriptive_date=meta.transactions_date,
        effective_entry_date=meta.transactions_date,
        odfi_identification=originator.identification,
        batch_number=meta.batch_number,
    )

    try:
        batch = new_batch(bh)
        for i, t in enumerate(transactions):
            entry = t.build_ach_entry()
            entry.set_rdfi(meta.destination)
            entry.set_trace_number(bh.odfi_identification, i)
            batch.add_entry(entry)
        batch.create()
    except AchError as e:
        raise AchBuildError(f"unexpected error building batch: {e}") from e

    ach_file = File()
    ach_file.set_header(fh)
    ach_file.add_batch(batch)

    try:
        ach_file.create()
    except AchError as e:
        raise AchBuildError(f"unexpected error building file: {e}") from e

    try:
        text = dumps(ach_file)
    except AchError as e:
        raise AchBuildError(f"could not write ach: {e}") from e

    _log.debug(
        "built ACH file: %d entries, credit=%d debit=%d",
        len(batch.entries),
        ach_file.control.total_credit_entry_dollar_amount_in_file,
        ach_file.control.total_debit_entry_dollar_amount_in_file,
    )
    return text


__all__ = ["AchBuildError", "build_ach"]
