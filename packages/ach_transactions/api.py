"""Driver procedures: build the sample files, dump them and read them back.

These are the functions the CLI calls. Each one prints its human-readable
output to stdout and propagates failures to the caller; nothing is retried
and no partial output is cleaned up.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from os import PathLike
from pathlib import Path
from typing import TypeAlias

from .builder import build_ach
from .logging_setup import get_logger
from .models import ACHData, FileSummary, Originator, Transactions
from .nacha import AchError, Reader
from .samples import (
    sample_chargebacks,
    sample_meta,
    sample_originator,
    sample_transactions,
)

_log = get_logger("ach_transactions.api")

TRANSACTIONS_FILE = "transactions.ach"
CHARGEBACKS_FILE = "chargebacks.ach"

StrPath: TypeAlias = str | PathLike[str]


class AchReadError(AchError):
    """An existing ACH file could not be parsed or failed validation."""


def dump_ach(ach: str, path: StrPath) -> None:
    """Write ``ach`` to ``path``, replacing any existing file.

    Failures are logged with the offending path and re-raised.
    """

    p = Path(path)
    try:
        f = p.open("w", encoding="ascii", newline="")
    except OSError:
        _log.error("Could not write file %s", p)
        raise
    with f:
        try:
            f.write(ach)
        except (OSError, UnicodeEncodeError):
            _log.error("Error at writing file %s", p)
            raise
    _log.info("wrote %s (%d bytes)", p, len(ach))


def _build_and_dump(
    title: str,
    meta: ACHData,
    originator: Originator,
    transactions: Transactions,
    path: Path,
    now: Callable[[], datetime],
) -> Path:
    print(f"{title}:")
    for t in transactions:
        print(t)
    ach = build_ach(meta, originator, transactions, now=now)
    print(ach)
    dump_ach(ach, path)
    return path


def send_transactions(
    output_dir: StrPath = ".",
    *,
    now: Callable[[], datetime] = datetime.now,
) -> Path:
    """Build the sample credit/debit file and write ``transactions.ach``."""

    return _build_and_dump(
        "Transactions",
        sample_meta(),
        sample_originator(),
        sample_transactions(),
        Path(output_dir) / TRANSACTIONS_FILE,
        now,
    )


def charge_back_transactions(
    output_dir: StrPath = ".",
    *,
    now: Callable[[], datetime] = datetime.now,
) -> Path:
    """Build the sample return file and write ``chargebacks.ach``."""

    return _build_and_dump(
        "Chargebacks",
        sample_meta(),
        sample_originator(),
        sample_chargebacks(),
        Path(output_dir) / CHARGEBACKS_FILE,
        now,
    )


def read_ach(path: StrPath = TRANSACTIONS_FILE, *, echo: bool = True) -> FileSummary:
    """Parse and validate an ACH file and summarize it.

    When ``echo`` is true the file name, the total credit amount and each
    batch's SEC code are printed.

    Raises
    ------
    OSError
        The file cannot be opened.
    AchReadError
        The content is malformed or its control totals do not reconcile.
    """

    p = Path(path)
    with p.open(encoding="ascii", errors="strict", newline="") as f:
        try:
            ach_file = Reader(f).read()
        except (AchError, UnicodeDecodeError) as e:
            raise AchReadError(f"reading file: {e}") from e

    try:
        ach_file.validate()
    except AchError as e:
        raise AchReadError(f"validating file: {e}") from e

    summary = FileSummary.from_file(str(p), ach_file)
    if echo:
        print(f"File Name: {summary.file_name}\n")
        print(f"Total Credit Amount: {summary.total_credit}")
        for b in summary.batches:
            print(f"SEC Code: {b.sec_code}\n")
    _log.info("read %s: %d batches", p, summary.batch_count)
    return summary


def run_demo(
    output_dir: StrPath = ".",
    *,
    now: Callable[[], datetime] = datetime.now,
) -> list[FileSummary]:
    """Write both sample files, then read each one back."""

    paths = [
        send_transactions(output_dir, now=now),
        charge_back_transactions(output_dir, now=now),
    ]
    return [read_ach(p) for p in paths]


__all__ = [
    "CHARGEBACKS_FILE",
    "TRANSACTIONS_FILE",
    "AchReadError",
    "charge_back_transactions",
    "dump_ach",
    "read_ach",
    "run_demo",
    "send_transactions",
]
