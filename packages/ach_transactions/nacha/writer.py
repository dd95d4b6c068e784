"""Serialize a :class:`~.file.File` to NACHA fixed-width text."""

from __future__ import annotations

import io
from typing import IO

from .fields import BLOCKING_FACTOR, FILLER_RECORD
from .file import File


class Writer:
    """Write files to a text stream, one 94-character record per line.

    The file is validated before anything is written. Output is padded with
    ``9`` filler records so the line count is a multiple of the blocking
    factor.
    """

    def __init__(self, stream: IO[str], *, line_ending: str = "\n") -> None:
        self.stream = stream
        self.line_ending = line_ending

    def write(self, ach_file: File) -> None:
        ach_file.validate()

        lines = [ach_file.header.format()]
        for batch in ach_file.batches:
            lines.append(batch.header.format())
            for entry in batch.entries:
                lines.append(entry.format())
                lines.extend(a.format() for a in entry.addenda05)
                if entry.addenda99 is not None:
                    lines.append(entry.addenda99.format())
            lines.append(batch.control.format())
        lines.append(ach_file.control.format())

        remainder = len(lines) % BLOCKING_FACTOR
        if remainder:
            lines.extend([FILLER_RECORD] * (BLOCKING_FACTOR - remainder))

        for line in lines:
            self.stream.write(line)
            self.stream.write(self.line_ending)
        self.stream.flush()


def dumps(ach_file: File) -> str:
    """Return the NACHA text for ``ach_file``."""

    buf = io.StringIO()
    Writer(buf).write(ach_file)
    return buf.getvalue()


__all__ = ["Writer", "dumps"]
