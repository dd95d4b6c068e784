"""Parse NACHA text back into a :class:`~.file.File`.

The reader rebuilds the object graph exactly as written, including batch and
file control records, without recomputing anything. Call
:meth:`File.validate` afterwards to check the totals.
"""

from __future__ import annotations

import io
from typing import IO

from ..logging_setup import get_logger
from .batch import Batch, new_batch
from .errors import AchError, ParseError
from .fields import FILLER_RECORD
from .file import File
from .records import (
    CATEGORY_RETURN,
    Addenda05,
    Addenda99,
    BatchControl,
    BatchHeader,
    EntryDetail,
    FileControl,
    FileHeader,
)

_log = get_logger("ach_transactions.nacha.reader")


class Reader:
    """Read one ACH file from a text stream."""

    def __init__(self, stream: IO[str]) -> None:
        self.stream = stream
        self._file: File | None = None
        self._batch: Batch | None = None
        self._entry: EntryDetail | None = None
        self._control_seen = False
        self._line_number = 0

    def read(self) -> File:
        for number, raw in enumerate(self.stream, start=1):
            self._line_number = number
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue
            if line == FILLER_RECORD:
                continue
            try:
                self._dispatch(line)
            except ParseError:
                raise
            except AchError as e:
                raise ParseError(self._line_number, str(e)) from e

        if self._file is None:
            raise ParseError(self._line_number, "missing file header record")
        if self._batch is not None:
            raise ParseError(self._line_number, "missing batch control record")
        if not self._control_seen:
            raise ParseError(self._line_number, "missing file control record")
        _log.debug("read file with %d batches", len(self._file.batches))
        return self._file

    def _fail(self, msg: str) -> ParseError:
        return ParseError(self._line_number, msg)

    def _dispatch(self, line: str) -> None:
        if self._control_seen:
            raise self._fail("record after file control")
        record_type = line[0]
        if record_type == "1":
            self._read_file_header(line)
        elif self._file is None:
            raise self._fail("record before file header")
        elif record_type == "5":
            self._read_batch_header(line)
        elif record_type == "6":
            self._read_entry(line)
        elif record_type == "7":
            self._read_addenda(line)
        elif record_type == "8":
            self._read_batch_control(line)
        elif record_type == "9":
            self._read_file_control(line)
        else:
            raise self._fail(f"unknown record type {record_type!r}")

    def _read_file_header(self, line: str) -> None:
        if self._file is not None:
            raise self._fail("duplicate file header record")
        self._file = File(FileHeader.parse(line))

    def _read_batch_header(self, line: str) -> None:
        if self._batch is not None:
            raise self._fail("batch header before previous batch control")
        self._batch = new_batch(BatchHeader.parse(line), strict=False)
        self._entry = None

    def _read_entry(self, line: str) -> None:
        if self._batch is None:
            raise self._fail("entry detail outside of a batch")
        self._entry = EntryDetail.parse(line)
        self._batch.add_entry(self._entry)

    def _read_addenda(self, line: str) -> None:
        entry = self._entry
        if entry is None:
            raise self._fail("addenda record without an entry detail")
        if entry.addenda_record_indicator != 1:
            raise self._fail("addenda record for an entry without addenda indicator")
        type_code = line[1:3]
        if type_code == "05":
            entry.addenda05.append(Addenda05.parse(line))
        elif type_code == "99":
            if entry.addenda99 is not None:
                raise self._fail("entry already has an Addenda99 record")
            entry.addenda99 = Addenda99.parse(line)
            entry.category = CATEGORY_RETURN
        else:
            raise self._fail(f"unsupported addenda type code {type_code!r}")

    def _read_batch_control(self, line: str) -> None:
        if self._batch is None or self._file is None:
            raise self._fail("batch control without a batch header")
        self._batch.control = BatchControl.parse(line)
        self._file.add_batch(self._batch)
        self._batch = None
        self._entry = None

    def _read_file_control(self, line: str) -> None:
        if self._file is None:
            raise self._fail("file control before file header")
        if self._batch is not None:
            raise self._fail("file control before batch control")
        self._file.control = FileControl.parse(line)
        self._control_seen = True


def loads(text: str) -> File:
    """Parse NACHA ``text`` into a :class:`File`."""

    return Reader(io.StringIO(text)).read()


__all__ = ["Reader", "loads"]
