"""Data models for ``ach_transactions``.

Transactions are plain frozen dataclasses with one polymorphic method,
``build_ach_entry()``, producing a NACHA entry detail record. Nothing is
validated here; the codec validates when batches and files are created.

The read side is described by pydantic models (:class:`FileSummary`,
:class:`BatchSummary`) so summaries can be emitted as JSON.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, TypeAlias, runtime_checkable

from pydantic import BaseModel, ConfigDict

from .nacha import (
    CATEGORY_RETURN,
    CHECKING_CREDIT,
    CHECKING_DEBIT,
    GL_CREDIT,
    Addenda99,
    EntryDetail,
    File,
)

# ---------------------------------------------------------------------------
# File and batch metadata
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ACHData:
    """File header and batch header values shared by one generated file.

    Attributes
    ----------
    transactions_date:
        ``YYMMDD`` used for both the company descriptive date and the
        effective entry date.
    destination, origin:
        9-digit routing numbers for the immediate destination/origin.
    standard_entry_class_code:
        SEC code of the single batch (e.g. ``"PPD"``).
    """

    transactions_date: str
    reference_code: str
    destination: str
    destination_name: str
    origin: str
    origin_name: str
    standard_entry_class_code: str
    batch_number: int


@dataclass(frozen=True, slots=True)
class Originator:
    company_name: str
    company_description: str
    identification: str
    batch_number: int = 0


# ---------------------------------------------------------------------------
# Transactions
# ---------------------------------------------------------------------------


@runtime_checkable
class Transaction(Protocol):
    def build_ach_entry(self) -> EntryDetail: ...


@dataclass(frozen=True, slots=True)
class BaseTransaction:
    """Fields common to every transaction; ``amount`` is in cents."""

    depository_account_number: str
    receiving_company: str
    original_trace_number: str
    amount: int

    def build_ach_entry(self) -> EntryDetail:
        entry = EntryDetail()
        entry.dfi_account_number = self.depository_account_number
        entry.amount = self.amount
        entry.set_original_trace_number(self.original_trace_number)
        entry.set_receiving_company(self.receiving_company)
        return entry

    def _describe_base(self) -> str:
        return (
            f"Depository AccountNumber: {self.depository_account_number}\n"
            f"Receiving Company: {self.receiving_company}\n"
            f"Original Trace Number: {self.original_trace_number}\n"
            f"Amount: {self.amount}\n"
        )

    def __str__(self) -> str:
        return self._describe_base()


@dataclass(frozen=True, slots=True)
class CreditTransaction(BaseTransaction):
    def build_ach_entry(self) -> EntryDetail:
        entry = BaseTransaction.build_ach_entry(self)
        entry.transaction_code = CHECKING_CREDIT
        return entry

    def __str__(self) -> str:
        return "Type: CREDIT\n" + self._describe_base()


@dataclass(frozen=True, slots=True)
class DebitTransaction(BaseTransaction):
    def build_ach_entry(self) -> EntryDetail:
        entry = BaseTransaction.build_ach_entry(self)
        entry.transaction_code = CHECKING_DEBIT
        return entry

    def __str__(self) -> str:
        return "Type: DEBIT\n" + self._describe_base()


@dataclass(frozen=True, slots=True)
class ChargebackTransaction(BaseTransaction):
    """A returned entry: GL credit with an Addenda99 carrying the return reason."""

    return_code: str
    original_trace: str
    addenda_information: str
    original_depository_institution: str

    def build_ach_entry(self) -> EntryDetail:
        entry = BaseTransaction.build_ach_entry(self)
        entry.category = CATEGORY_RETURN
        entry.transaction_code = GL_CREDIT
        entry.addenda_record_indicator = 1
        entry.addenda99 = Addenda99(
            return_code=self.return_code,
            original_trace=self.original_trace,
            addenda_information=self.addenda_information,
            original_dfi=self.original_depository_institution,
        )
        return entry

    def __str__(self) -> str:
        return (
            "Type: CHARGEBACK\n"
            + self._describe_base()
            + f"Return Code: {self.return_code}\n"
            + f"Original Trace: {self.original_trace}\n"
            + f"Addenda Information: {self.addenda_information}\n"
            + f"Original Depository Institution: {self.original_depository_institution}\n"
        )


Transactions: TypeAlias = Sequence[Transaction]
"""An ordered collection of transactions; order determines trace sequence."""


# ---------------------------------------------------------------------------
# Read-side summaries
# ---------------------------------------------------------------------------


class BatchSummary(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    batch_number: int
    sec_code: str
    company_name: str
    service_class_code: int
    entry_count: int
    total_debit: int
    total_credit: int


class FileSummary(BaseModel):
    """What ``read`` reports about an ACH file. Amounts are in cents."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    file_name: str
    creation_date: str
    creation_time: str
    batch_count: int
    entry_addenda_count: int
    total_debit: int
    total_credit: int
    batches: list[BatchSummary]

    @classmethod
    def from_file(cls, file_name: str, ach_file: File) -> FileSummary:
        return cls(
            file_name=file_name,
            creation_date=ach_file.header.file_creation_date,
            creation_time=ach_file.header.file_creation_time,
            batch_count=ach_file.control.batch_count,
            entry_addenda_count=ach_file.control.entry_addenda_count,
            total_debit=ach_file.control.total_debit_entry_dollar_amount_in_file,
            total_credit=ach_file.control.total_credit_entry_dollar_amount_in_file,
            batches=[
                BatchSummary(
                    batch_number=b.header.batch_number,
                    sec_code=b.header.standard_entry_class_code,
                    company_name=b.header.company_name,
                    service_class_code=b.header.service_class_code,
                    entry_count=len(b.entries),
                    total_debit=b.control.total_debit_entry_dollar_amount,
                    total_credit=b.control.total_credit_entry_dollar_amount,
                )
                for b in ach_file.batches
            ],
        )


__all__ = [
    "ACHData",
    "BaseTransaction",
    "BatchSummary",
    "ChargebackTransaction",
    "CreditTransaction",
    "DebitTransaction",
    "FileSummary",
    "Originator",
    "Transaction",
    "Transactions",
]
