"""NACHA record types and their fixed-width layouts.

Every record renders to exactly :data:`~.fields.RECORD_LENGTH` characters via
``format()`` and can be rebuilt from a line with ``parse()``. ``validate()``
raises :class:`~.errors.FieldError` on the first invalid field.

Layouts (1-based positions)
---------------------------
- File header (1): priority 2-3, destination 4-13, origin 14-23, creation date
  24-29, time 30-33, id modifier 34, record size 35-37, blocking factor 38-39,
  format code 40, destination name 41-63, origin name 64-86, reference 87-94.
- Batch header (5): service class 2-4, company name 5-20, discretionary data
  21-40, company id 41-50, SEC 51-53, entry description 54-63, descriptive date
  64-69, effective date 70-75, settlement date 76-78, originator status 79,
  ODFI 80-87, batch number 88-94.
- Entry detail (6): transaction code 2-3, RDFI 4-11, check digit 12, account
  13-29, amount 30-39, identification 40-54, name 55-76, discretionary 77-78,
  addenda indicator 79, trace 80-94.
- Addenda 05 (7): type 2-3, payment info 4-83, sequence 84-87, entry sequence
  88-94.
- Addenda 99 (7): type 2-3, return code 4-6, original trace 7-21, date of death
  22-27, original DFI 28-35, information 36-79, trace 80-94.
- Batch control (8): service class 2-4, entry/addenda count 5-10, hash 11-20,
  debits 21-32, credits 33-44, company id 45-54, MAC 55-73, reserved 74-79,
  ODFI 80-87, batch number 88-94.
- File control (9): batch count 2-7, block count 8-13, entry/addenda count
  14-21, hash 22-31, debits 32-43, credits 44-55, reserved 56-94.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .errors import FieldError
from .fields import (
    RECORD_LENGTH,
    alpha,
    blank,
    calculate_check_digit,
    check_alphanumeric,
    check_max,
    check_numeric,
    check_required,
    numeric,
    parse_int,
    valid_routing_number,
)

# ---- Codes -------------------------------------------------------------------

MIXED_DEBITS_AND_CREDITS = 200
CREDITS_ONLY = 220
DEBITS_ONLY = 225
AUTOMATED_ACCOUNTING_ADVICES = 280

SERVICE_CLASS_CODES: dict[int, str] = {
    MIXED_DEBITS_AND_CREDITS: "Mixed Debits and Credits",
    CREDITS_ONLY: "Credits Only",
    DEBITS_ONLY: "Debits Only",
    AUTOMATED_ACCOUNTING_ADVICES: "Automated Accounting Advices",
}

PPD = "PPD"
CCD = "CCD"
WEB = "WEB"
TEL = "TEL"
CTX = "CTX"

SEC_CODES: dict[str, str] = {
    PPD: "Prearranged Payment and Deposit",
    CCD: "Corporate Credit or Debit",
    WEB: "Internet-Initiated Entry",
    TEL: "Telephone-Initiated Entry",
    CTX: "Corporate Trade Exchange",
}

CHECKING_RETURN_NOC_CREDIT = 21
CHECKING_CREDIT = 22
CHECKING_PRENOTE_CREDIT = 23
CHECKING_ZERO_DOLLAR_CREDIT = 24
CHECKING_RETURN_NOC_DEBIT = 26
CHECKING_DEBIT = 27
CHECKING_PRENOTE_DEBIT = 28
CHECKING_ZERO_DOLLAR_DEBIT = 29
SAVINGS_RETURN_NOC_CREDIT = 31
SAVINGS_CREDIT = 32
SAVINGS_PRENOTE_CREDIT = 33
SAVINGS_ZERO_DOLLAR_CREDIT = 34
SAVINGS_RETURN_NOC_DEBIT = 36
SAVINGS_DEBIT = 37
SAVINGS_PRENOTE_DEBIT = 38
SAVINGS_ZERO_DOLLAR_DEBIT = 39
GL_RETURN_NOC_CREDIT = 41
GL_CREDIT = 42
GL_PRENOTE_CREDIT = 43
GL_ZERO_DOLLAR_CREDIT = 44
GL_RETURN_NOC_DEBIT = 46
GL_DEBIT = 47
GL_PRENOTE_DEBIT = 48
GL_ZERO_DOLLAR_DEBIT = 49
LOAN_RETURN_NOC_CREDIT = 51
LOAN_CREDIT = 52
LOAN_PRENOTE_CREDIT = 53
LOAN_ZERO_DOLLAR_CREDIT = 54
LOAN_DEBIT = 55
LOAN_RETURN_NOC_DEBIT = 56

TRANSACTION_CODES: dict[int, str] = {
    CHECKING_RETURN_NOC_CREDIT: "Checking Credit - Return or NOC",
    CHECKING_CREDIT: "Checking Credit",
    CHECKING_PRENOTE_CREDIT: "Checking Credit - Prenote",
    CHECKING_ZERO_DOLLAR_CREDIT: "Checking Credit - Zero Dollar",
    CHECKING_RETURN_NOC_DEBIT: "Checking Debit - Return or NOC",
    CHECKING_DEBIT: "Checking Debit",
    CHECKING_PRENOTE_DEBIT: "Checking Debit - Prenote",
    CHECKING_ZERO_DOLLAR_DEBIT: "Checking Debit - Zero Dollar",
    SAVINGS_RETURN_NOC_CREDIT: "Savings Credit - Return or NOC",
    SAVINGS_CREDIT: "Savings Credit",
    SAVINGS_PRENOTE_CREDIT: "Savings Credit - Prenote",
    SAVINGS_ZERO_DOLLAR_CREDIT: "Savings Credit - Zero Dollar",
    SAVINGS_RETURN_NOC_DEBIT: "Savings Debit - Return or NOC",
    SAVINGS_DEBIT: "Savings Debit",
    SAVINGS_PRENOTE_DEBIT: "Savings Debit - Prenote",
    SAVINGS_ZERO_DOLLAR_DEBIT: "Savings Debit - Zero Dollar",
    GL_RETURN_NOC_CREDIT: "GL Credit - Return or NOC",
    GL_CREDIT: "GL Credit",
    GL_PRENOTE_CREDIT: "GL Credit - Prenote",
    GL_ZERO_DOLLAR_CREDIT: "GL Credit - Zero Dollar",
    GL_RETURN_NOC_DEBIT: "GL Debit - Return or NOC",
    GL_DEBIT: "GL Debit",
    GL_PRENOTE_DEBIT: "GL Debit - Prenote",
    GL_ZERO_DOLLAR_DEBIT: "GL Debit - Zero Dollar",
    LOAN_RETURN_NOC_CREDIT: "Loan Credit - Return or NOC",
    LOAN_CREDIT: "Loan Credit",
    LOAN_PRENOTE_CREDIT: "Loan Credit - Prenote",
    LOAN_ZERO_DOLLAR_CREDIT: "Loan Credit - Zero Dollar",
    LOAN_DEBIT: "Loan Debit - Reversal",
    LOAN_RETURN_NOC_DEBIT: "Loan Debit - Return or NOC",
}

PRENOTE_CODES = frozenset(
    {
        CHECKING_PRENOTE_CREDIT,
        CHECKING_PRENOTE_DEBIT,
        SAVINGS_PRENOTE_CREDIT,
        SAVINGS_PRENOTE_DEBIT,
        GL_PRENOTE_CREDIT,
        GL_PRENOTE_DEBIT,
        LOAN_PRENOTE_CREDIT,
    }
)

CATEGORY_FORWARD = "Forward"
CATEGORY_RETURN = "Return"
CATEGORY_NOC = "NOC"
CATEGORIES = frozenset({CATEGORY_FORWARD, CATEGORY_RETURN, CATEGORY_NOC})

RETURN_CODES: dict[str, str] = {
    "R01": "Insufficient Funds",
    "R02": "Account Closed",
    "R03": "No Account/Unable to Locate Account",
    "R04": "Invalid Account Number Structure",
    "R05": "Unauthorized Debit to Consumer Account",
    "R06": "Returned per ODFI's Request",
    "R07": "Authorization Revoked by Customer",
    "R08": "Payment Stopped",
    "R09": "Uncollected Funds",
    "R10": "Customer Advises Not Authorized",
    "R11": "Customer Advises Entry Not in Accordance with the Terms of the Authorization",
    "R12": "Account Sold to Another DFI",
    "R13": "Invalid ACH Routing Number",
    "R14": "Representative Payee Deceased",
    "R15": "Beneficiary or Account Holder Deceased",
    "R16": "Account Frozen/Entry Returned per OFAC Instruction",
    "R17": "File Record Edit Criteria",
    "R20": "Non-Transaction Account",
    "R21": "Invalid Company Identification",
    "R22": "Invalid Individual ID Number",
    "R23": "Credit Entry Refused by Receiver",
    "R24": "Duplicate Entry",
    "R29": "Corporate Customer Advises Not Authorized",
    "R31": "Permissible Return Entry",
    "R33": "Return of XCK Entry",
}


def is_credit(transaction_code: int) -> bool:
    return transaction_code in TRANSACTION_CODES and transaction_code % 10 in (1, 2, 3, 4)


def is_debit(transaction_code: int) -> bool:
    return transaction_code in TRANSACTION_CODES and transaction_code % 10 in (5, 6, 7, 8, 9)


# ---- Layout helpers ----------------------------------------------------------


def _routing10(value: str) -> str:
    """Immediate destination/origin: ten characters, usually a blank + 9 digits."""

    if len(value) == 10:
        return value
    return " " + value[:9].rjust(9, "0")


def _dfi8(value: str) -> str:
    """A DFI identification is the routing number without its check digit."""

    return value[:8].rjust(8, "0")


def _expect_line(line: str, record_type: str, record: str) -> None:
    if len(line) != RECORD_LENGTH:
        raise FieldError(record, "line", line, f"must be {RECORD_LENGTH} characters, got {len(line)}")
    if line[0] != record_type:
        raise FieldError(record, "recordType", line[0], f"expected {record_type!r}")


def _check_yymmdd(record: str, name: str, value: str) -> None:
    check_numeric(record, name, value)
    try:
        datetime.strptime(value, "%y%m%d")
    except ValueError as e:
        raise FieldError(record, name, value, "is not a valid YYMMDD date") from e


# ---- Records -----------------------------------------------------------------


@dataclass(slots=True)
class FileHeader:
    immediate_destination: str = ""
    immediate_origin: str = ""
    file_creation_date: str = ""
    file_creation_time: str = ""
    immediate_destination_name: str = ""
    immediate_origin_name: str = ""
    reference_code: str = ""
    file_id_modifier: str = "A"
    priority_code: str = "01"
    record_size: str = "094"
    blocking_factor: str = "10"
    format_code: str = "1"

    record_name = "FileHeader"

    def format(self) -> str:
        return "".join(
            (
                "1",
                numeric(self.priority_code, 2),
                _routing10(self.immediate_destination),
                _routing10(self.immediate_origin),
                alpha(self.file_creation_date, 6),
                alpha(self.file_creation_time, 4),
                alpha(self.file_id_modifier, 1),
                numeric(self.record_size, 3),
                numeric(self.blocking_factor, 2),
                alpha(self.format_code, 1),
                alpha(self.immediate_destination_name, 23),
                alpha(self.immediate_origin_name, 23),
                alpha(self.reference_code, 8),
            )
        )

    @classmethod
    def parse(cls, line: str) -> FileHeader:
        _expect_line(line, "1", cls.record_name)
        return cls(
            priority_code=line[1:3],
            immediate_destination=line[3:13].strip(),
            immediate_origin=line[13:23].strip(),
            file_creation_date=line[23:29].strip(),
            file_creation_time=line[29:33].strip(),
            file_id_modifier=line[33:34],
            record_size=line[34:37],
            blocking_factor=line[37:39],
            format_code=line[39:40],
            immediate_destination_name=line[40:63].rstrip(),
            immediate_origin_name=line[63:86].rstrip(),
            reference_code=line[86:94].rstrip(),
        )

    def validate(self) -> None:
        name = self.record_name
        if self.record_size != "094":
            raise FieldError(name, "RecordSize", self.record_size, "must be 094")
        if self.blocking_factor != "10":
            raise FieldError(name, "BlockingFactor", self.blocking_factor, "must be 10")
        if self.format_code != "1":
            raise FieldError(name, "FormatCode", self.format_code, "must be 1")
        check_required(name, "ImmediateDestination", self.immediate_destination)
        if not valid_routing_number(self.immediate_destination):
            raise FieldError(
                name, "ImmediateDestination", self.immediate_destination, "invalid routing number"
            )
        check_required(name, "ImmediateOrigin", self.immediate_origin)
        check_numeric(name, "ImmediateOrigin", self.immediate_origin)
        if set(self.immediate_origin) == {"0"}:
            raise FieldError(name, "ImmediateOrigin", self.immediate_origin, "must not be zero")
        _check_yymmdd(name, "FileCreationDate", self.file_creation_date)
        if self.file_creation_time:
            check_numeric(name, "FileCreationTime", self.file_creation_time)
            try:
                datetime.strptime(self.file_creation_time, "%H%M")
            except ValueError as e:
                raise FieldError(
                    name, "FileCreationTime", self.file_creation_time, "is not a valid HHMM time"
                ) from e
        modifier = self.file_id_modifier
        if len(modifier) != 1 or not (modifier.isdigit() or "A" <= modifier <= "Z"):
            raise FieldError(name, "FileIDModifier", modifier, "must be A-Z or 0-9")
        check_alphanumeric(name, "ImmediateDestinationName", self.immediate_destination_name)
        check_alphanumeric(name, "ImmediateOriginName", self.immediate_origin_name)
        check_alphanumeric(name, "ReferenceCode", self.reference_code)


@dataclass(slots=True)
class BatchHeader:
    service_class_code: int = MIXED_DEBITS_AND_CREDITS
    company_name: str = ""
    company_discretionary_data: str = ""
    company_identification: str = ""
    standard_entry_class_code: str = ""
    company_entry_description: str = ""
    company_descriptive_date: str = ""
    effective_entry_date: str = ""
    settlement_date: str = ""
    originator_status_code: int = 1
    odfi_identification: str = ""
    batch_number: int = 1

    record_name = "BatchHeader"

    def format(self) -> str:
        return "".join(
            (
                "5",
                numeric(self.service_class_code, 3),
                alpha(self.company_name, 16),
                alpha(self.company_discretionary_data, 20),
                alpha(self.company_identification, 10),
                alpha(self.standard_entry_class_code, 3),
                alpha(self.company_entry_description, 10),
                alpha(self.company_descriptive_date, 6),
                alpha(self.effective_entry_date, 6),
                alpha(self.settlement_date, 3),
                numeric(self.originator_status_code, 1),
                _dfi8(self.odfi_identification),
                numeric(self.batch_number, 7),
            )
        )

    @classmethod
    def parse(cls, line: str) -> BatchHeader:
        name = cls.record_name
        _expect_line(line, "5", name)
        return cls(
            service_class_code=parse_int(line[1:4], record=name, field="ServiceClassCode"),
            company_name=line[4:20].rstrip(),
            company_discretionary_data=line[20:40].rstrip(),
            company_identification=line[40:50].rstrip(),
            standard_entry_class_code=line[50:53],
            company_entry_description=line[53:63].rstrip(),
            company_descriptive_date=line[63:69].rstrip(),
            effective_entry_date=line[69:75].strip(),
            settlement_date=line[75:78].strip(),
            originator_status_code=parse_int(line[78:79], record=name, field="OriginatorStatusCode"),
            odfi_identification=line[79:87],
            batch_number=parse_int(line[87:94], record=name, field="BatchNumber"),
        )

    def validate(self) -> None:
        name = self.record_name
        if self.service_class_code not in SERVICE_CLASS_CODES:
            raise FieldError(name, "ServiceClassCode", self.service_class_code, "invalid service class code")
        check_required(name, "CompanyName", self.company_name)
        check_alphanumeric(name, "CompanyName", self.company_name)
        check_alphanumeric(name, "CompanyDiscretionaryData", self.company_discretionary_data)
        check_required(name, "CompanyIdentification", self.company_identification)
        check_alphanumeric(name, "CompanyIdentification", self.company_identification)
        if self.standard_entry_class_code not in SEC_CODES:
            raise FieldError(
                name, "StandardEntryClassCode", self.standard_entry_class_code, "invalid SEC code"
            )
        check_required(name, "CompanyEntryDescription", self.company_entry_description)
        check_alphanumeric(name, "CompanyEntryDescription", self.company_entry_description)
        check_alphanumeric(name, "CompanyDescriptiveDate", self.company_descriptive_date)
        _check_yymmdd(name, "EffectiveEntryDate", self.effective_entry_date)
        if self.originator_status_code not in (0, 1, 2):
            raise FieldError(name, "OriginatorStatusCode", self.originator_status_code, "must be 0, 1 or 2")
        check_required(name, "ODFIIdentification", self.odfi_identification)
        check_numeric(name, "ODFIIdentification", self.odfi_identification)
        if self.batch_number <= 0:
            raise FieldError(name, "BatchNumber", self.batch_number, "must be positive")
        check_max(name, "BatchNumber", self.batch_number, 7)


@dataclass(slots=True)
class Addenda05:
    payment_related_information: str = ""
    sequence_number: int = 1
    entry_detail_sequence_number: int = 0
    type_code: str = "05"

    record_name = "Addenda05"

    def format(self) -> str:
        return "".join(
            (
                "7",
                self.type_code,
                alpha(self.payment_related_information, 80),
                numeric(self.sequence_number, 4),
                numeric(self.entry_detail_sequence_number, 7),
            )
        )

    @classmethod
    def parse(cls, line: str) -> Addenda05:
        name = cls.record_name
        _expect_line(line, "7", name)
        return cls(
            type_code=line[1:3],
            payment_related_information=line[3:83].rstrip(),
            sequence_number=parse_int(line[83:87], record=name, field="SequenceNumber"),
            entry_detail_sequence_number=parse_int(
                line[87:94], record=name, field="EntryDetailSequenceNumber"
            ),
        )

    def validate(self) -> None:
        name = self.record_name
        if self.type_code != "05":
            raise FieldError(name, "TypeCode", self.type_code, "must be 05")
        check_alphanumeric(name, "PaymentRelatedInformation", self.payment_related_information)
        if self.sequence_number <= 0:
            raise FieldError(name, "SequenceNumber", self.sequence_number, "must be positive")
        check_max(name, "SequenceNumber", self.sequence_number, 4)
        check_max(name, "EntryDetailSequenceNumber", self.entry_detail_sequence_number, 7)


@dataclass(slots=True)
class Addenda99:
    return_code: str = ""
    original_trace: str = ""
    date_of_death: str = ""
    original_dfi: str = ""
    addenda_information: str = ""
    trace_number: str = ""
    type_code: str = "99"

    record_name = "Addenda99"

    def format(self) -> str:
        return "".join(
            (
                "7",
                self.type_code,
                alpha(self.return_code, 3),
                numeric(self.original_trace, 15),
                alpha(self.date_of_death, 6),
                _dfi8(self.original_dfi),
                alpha(self.addenda_information, 44),
                numeric(self.trace_number, 15),
            )
        )

    @classmethod
    def parse(cls, line: str) -> Addenda99:
        _expect_line(line, "7", cls.record_name)
        return cls(
            type_code=line[1:3],
            return_code=line[3:6],
            original_trace=line[6:21],
            date_of_death=line[21:27].strip(),
            original_dfi=line[27:35],
            addenda_information=line[35:79].rstrip(),
            trace_number=line[79:94],
        )

    def return_code_description(self) -> str | None:
        return RETURN_CODES.get(self.return_code)

    def validate(self) -> None:
        name = self.record_name
        if self.type_code != "99":
            raise FieldError(name, "TypeCode", self.type_code, "must be 99")
        if self.return_code not in RETURN_CODES:
            raise FieldError(name, "ReturnCode", self.return_code, "invalid return code")
        check_required(name, "OriginalTrace", self.original_trace)
        check_numeric(name, "OriginalTrace", self.original_trace)
        if self.date_of_death:
            _check_yymmdd(name, "DateOfDeath", self.date_of_death)
        check_required(name, "OriginalDFI", self.original_dfi)
        check_numeric(name, "OriginalDFI", self.original_dfi)
        check_alphanumeric(name, "AddendaInformation", self.addenda_information)


@dataclass(slots=True)
class EntryDetail:
    transaction_code: int = 0
    rdfi_identification: str = ""
    check_digit: str = ""
    dfi_account_number: str = ""
    amount: int = 0
    identification_number: str = ""
    individual_name: str = ""
    discretionary_data: str = ""
    addenda_record_indicator: int = 0
    trace_number: str = ""
    category: str = CATEGORY_FORWARD
    addenda05: list[Addenda05] = field(default_factory=list)
    addenda99: Addenda99 | None = None

    record_name = "EntryDetail"

    # -- setters mirroring the NACHA field semantics

    def set_rdfi(self, routing: str) -> None:
        """Split a 9-digit routing number into RDFI identification and check digit."""

        self.rdfi_identification = routing[:8]
        self.check_digit = routing[8:9]

    def set_trace_number(self, odfi_identification: str, seq: int) -> None:
        self.trace_number = _dfi8(odfi_identification) + numeric(seq, 7)

    def set_original_trace_number(self, value: str) -> None:
        self.identification_number = value

    def set_receiving_company(self, value: str) -> None:
        self.individual_name = value

    @property
    def is_credit(self) -> bool:
        return is_credit(self.transaction_code)

    @property
    def is_debit(self) -> bool:
        return is_debit(self.transaction_code)

    def addenda_count(self) -> int:
        return len(self.addenda05) + (1 if self.addenda99 is not None else 0)

    def format(self) -> str:
        return "".join(
            (
                "6",
                numeric(self.transaction_code, 2),
                numeric(self.rdfi_identification, 8),
                alpha(self.check_digit, 1),
                alpha(self.dfi_account_number, 17),
                numeric(self.amount, 10),
                alpha(self.identification_number, 15),
                alpha(self.individual_name, 22),
                alpha(self.discretionary_data, 2),
                numeric(self.addenda_record_indicator, 1),
                numeric(self.trace_number, 15),
            )
        )

    @classmethod
    def parse(cls, line: str) -> EntryDetail:
        name = cls.record_name
        _expect_line(line, "6", name)
        return cls(
            transaction_code=parse_int(line[1:3], record=name, field="TransactionCode"),
            rdfi_identification=line[3:11],
            check_digit=line[11:12],
            dfi_account_number=line[12:29].rstrip(),
            amount=parse_int(line[29:39], record=name, field="Amount"),
            identification_number=line[39:54].rstrip(),
            individual_name=line[54:76].rstrip(),
            discretionary_data=line[76:78].rstrip(),
            addenda_record_indicator=parse_int(line[78:79], record=name, field="AddendaRecordIndicator"),
            trace_number=line[79:94],
        )

    def validate(self) -> None:
        name = self.record_name
        if self.transaction_code not in TRANSACTION_CODES:
            raise FieldError(name, "TransactionCode", self.transaction_code, "invalid transaction code")
        check_required(name, "RDFIIdentification", self.rdfi_identification)
        check_numeric(name, "RDFIIdentification", self.rdfi_identification)
        if len(self.rdfi_identification) != 8:
            raise FieldError(name, "RDFIIdentification", self.rdfi_identification, "must be 8 digits")
        expected = str(calculate_check_digit(self.rdfi_identification))
        if self.check_digit != expected:
            raise FieldError(name, "CheckDigit", self.check_digit, f"expected {expected}")
        check_required(name, "DFIAccountNumber", self.dfi_account_number)
        check_alphanumeric(name, "DFIAccountNumber", self.dfi_account_number)
        check_max(name, "Amount", self.amount, 10)
        if self.transaction_code in PRENOTE_CODES and self.amount != 0:
            raise FieldError(name, "Amount", self.amount, "prenote entries must be zero dollar")
        check_alphanumeric(name, "IdentificationNumber", self.identification_number)
        check_required(name, "IndividualName", self.individual_name)
        check_alphanumeric(name, "IndividualName", self.individual_name)
        check_alphanumeric(name, "DiscretionaryData", self.discretionary_data)
        if self.addenda_record_indicator not in (0, 1):
            raise FieldError(name, "AddendaRecordIndicator", self.addenda_record_indicator, "must be 0 or 1")
        check_required(name, "TraceNumber", self.trace_number)
        check_numeric(name, "TraceNumber", self.trace_number)
        check_max(name, "TraceNumber", int(self.trace_number), 15)
        if self.category not in CATEGORIES:
            raise FieldError(name, "Category", self.category, "unknown entry category")
        for addenda in self.addenda05:
            addenda.validate()
        if self.addenda99 is not None:
            self.addenda99.validate()


@dataclass(slots=True)
class BatchControl:
    service_class_code: int = MIXED_DEBITS_AND_CREDITS
    entry_addenda_count: int = 0
    entry_hash: int = 0
    total_debit_entry_dollar_amount: int = 0
    total_credit_entry_dollar_amount: int = 0
    company_identification: str = ""
    message_authentication_code: str = ""
    odfi_identification: str = ""
    batch_number: int = 1

    record_name = "BatchControl"

    def format(self) -> str:
        return "".join(
            (
                "8",
                numeric(self.service_class_code, 3),
                numeric(self.entry_addenda_count, 6),
                numeric(self.entry_hash, 10),
                numeric(self.total_debit_entry_dollar_amount, 12),
                numeric(self.total_credit_entry_dollar_amount, 12),
                alpha(self.company_identification, 10),
                alpha(self.message_authentication_code, 19),
                blank(6),
                _dfi8(self.odfi_identification),
                numeric(self.batch_number, 7),
            )
        )

    @classmethod
    def parse(cls, line: str) -> BatchControl:
        name = cls.record_name
        _expect_line(line, "8", name)
        return cls(
            service_class_code=parse_int(line[1:4], record=name, field="ServiceClassCode"),
            entry_addenda_count=parse_int(line[4:10], record=name, field="EntryAddendaCount"),
            entry_hash=parse_int(line[10:20], record=name, field="EntryHash"),
            total_debit_entry_dollar_amount=parse_int(line[20:32], record=name, field="TotalDebit"),
            total_credit_entry_dollar_amount=parse_int(line[32:44], record=name, field="TotalCredit"),
            company_identification=line[44:54].rstrip(),
            message_authentication_code=line[54:73].rstrip(),
            odfi_identification=line[79:87],
            batch_number=parse_int(line[87:94], record=name, field="BatchNumber"),
        )

    def validate(self) -> None:
        name = self.record_name
        if self.service_class_code not in SERVICE_CLASS_CODES:
            raise FieldError(name, "ServiceClassCode", self.service_class_code, "invalid service class code")
        check_max(name, "EntryAddendaCount", self.entry_addenda_count, 6)
        check_max(name, "EntryHash", self.entry_hash, 10)
        check_max(name, "TotalDebit", self.total_debit_entry_dollar_amount, 12)
        check_max(name, "TotalCredit", self.total_credit_entry_dollar_amount, 12)
        check_alphanumeric(name, "CompanyIdentification", self.company_identification)
        check_alphanumeric(name, "MessageAuthenticationCode", self.message_authentication_code)
        check_numeric(name, "ODFIIdentification", self.odfi_identification)
        check_max(name, "BatchNumber", self.batch_number, 7)


@dataclass(slots=True)
class FileControl:
    batch_count: int = 0
    block_count: int = 0
    entry_addenda_count: int = 0
    entry_hash: int = 0
    total_debit_entry_dollar_amount_in_file: int = 0
    total_credit_entry_dollar_amount_in_file: int = 0

    record_name = "FileControl"

    def format(self) -> str:
        return "".join(
            (
                "9",
                numeric(self.batch_count, 6),
                numeric(self.block_count, 6),
                numeric(self.entry_addenda_count, 8),
                numeric(self.entry_hash, 10),
                numeric(self.total_debit_entry_dollar_amount_in_file, 12),
                numeric(self.total_credit_entry_dollar_amount_in_file, 12),
                blank(39),
            )
        )

    @classmethod
    def parse(cls, line: str) -> FileControl:
        name = cls.record_name
        _expect_line(line, "9", name)
        return cls(
            batch_count=parse_int(line[1:7], record=name, field="BatchCount"),
            block_count=parse_int(line[7:13], record=name, field="BlockCount"),
            entry_addenda_count=parse_int(line[13:21], record=name, field="EntryAddendaCount"),
            entry_hash=parse_int(line[21:31], record=name, field="EntryHash"),
            total_debit_entry_dollar_amount_in_file=parse_int(
                line[31:43], record=name, field="TotalDebit"
            ),
            total_credit_entry_dollar_amount_in_file=parse_int(
                line[43:55], record=name, field="TotalCredit"
            ),
        )

    def validate(self) -> None:
        name = self.record_name
        check_max(name, "BatchCount", self.batch_count, 6)
        check_max(name, "BlockCount", self.block_count, 6)
        check_max(name, "EntryAddendaCount", self.entry_addenda_count, 8)
        check_max(name, "EntryHash", self.entry_hash, 10)
        check_max(name, "TotalDebit", self.total_debit_entry_dollar_amount_in_file, 12)
        check_max(name, "TotalCredit", self.total_credit_entry_dollar_amount_in_file, 12)


__all__ = [
    "CATEGORIES",
    "CATEGORY_FORWARD",
    "CATEGORY_NOC",
    "CATEGORY_RETURN",
    "CCD",
    "CHECKING_CREDIT",
    "CHECKING_DEBIT",
    "CREDITS_ONLY",
    "CTX",
    "DEBITS_ONLY",
    "GL_CREDIT",
    "GL_DEBIT",
    "LOAN_CREDIT",
    "MIXED_DEBITS_AND_CREDITS",
    "PPD",
    "PRENOTE_CODES",
    "RETURN_CODES",
    "SAVINGS_CREDIT",
    "SAVINGS_DEBIT",
    "SEC_CODES",
    "SERVICE_CLASS_CODES",
    "TEL",
    "TRANSACTION_CODES",
    "WEB",
    "Addenda05",
    "Addenda99",
    "BatchControl",
    "BatchHeader",
    "EntryDetail",
    "FileControl",
    "FileHeader",
    "is_credit",
    "is_debit",
]
