"""NACHA fixed-width codec: records, batches, files, reader and writer.

Build a file bottom-up, call ``create()`` on each batch and then on the file
to populate control records, and serialize with :class:`Writer`. Parsing goes
the other way through :class:`Reader`; ``validate()`` checks a parsed file.
"""

from .batch import Batch, CCDBatch, PPDBatch, new_batch
from .errors import AchError, BatchError, FieldError, FileError, ParseError
from .file import File
from .reader import Reader, loads
from .records import (
    CATEGORY_FORWARD,
    CATEGORY_NOC,
    CATEGORY_RETURN,
    CCD,
    CHECKING_CREDIT,
    CHECKING_DEBIT,
    CREDITS_ONLY,
    DEBITS_ONLY,
    GL_CREDIT,
    GL_DEBIT,
    MIXED_DEBITS_AND_CREDITS,
    PPD,
    RETURN_CODES,
    SAVINGS_CREDIT,
    SAVINGS_DEBIT,
    SEC_CODES,
    TRANSACTION_CODES,
    Addenda05,
    Addenda99,
    BatchControl,
    BatchHeader,
    EntryDetail,
    FileControl,
    FileHeader,
)
from .writer import Writer, dumps

__all__ = [
    # Objects
    "File",
    "Batch",
    "PPDBatch",
    "CCDBatch",
    "new_batch",
    "FileHeader",
    "FileControl",
    "BatchHeader",
    "BatchControl",
    "EntryDetail",
    "Addenda05",
    "Addenda99",
    # I/O
    "Reader",
    "Writer",
    "loads",
    "dumps",
    # Errors
    "AchError",
    "BatchError",
    "FieldError",
    "FileError",
    "ParseError",
    # Codes
    "CATEGORY_FORWARD",
    "CATEGORY_NOC",
    "CATEGORY_RETURN",
    "CCD",
    "PPD",
    "SEC_CODES",
    "RETURN_CODES",
    "TRANSACTION_CODES",
    "MIXED_DEBITS_AND_CREDITS",
    "CREDITS_ONLY",
    "DEBITS_ONLY",
    "CHECKING_CREDIT",
    "CHECKING_DEBIT",
    "SAVINGS_CREDIT",
    "SAVINGS_DEBIT",
    "GL_CREDIT",
    "GL_DEBIT",
]
