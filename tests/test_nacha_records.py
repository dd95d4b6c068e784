import pytest

from ach_transactions.nacha import (
    CHECKING_CREDIT,
    CHECKING_DEBIT,
    GL_CREDIT,
    Addenda05,
    Addenda99,
    BatchControl,
    BatchHeader,
    EntryDetail,
    FieldError,
    FileControl,
    FileHeader,
)
from ach_transactions.nacha.records import CHECKING_PRENOTE_CREDIT, is_credit, is_debit


def _file_header() -> FileHeader:
    return FileHeader(
        immediate_destination="123456780",
        immediate_origin="123456789",
        file_creation_date="240102",
        file_creation_time="1504",
        immediate_destination_name="DEST BANK",
        immediate_origin_name="ORIG BANK",
        reference_code="1",
    )


def _entry(**overrides) -> EntryDetail:
    entry = EntryDetail(
        transaction_code=CHECKING_CREDIT,
        dfi_account_number="1111111111",
        amount=234430,
        identification_number="8058467",
        individual_name="CompOne",
    )
    entry.set_rdfi("123456780")
    entry.set_trace_number("123456780", 1)
    for k, v in overrides.items():
        setattr(entry, k, v)
    return entry


# ---- File header -------------------------------------------------------------


def test_file_header_layout():
    line = _file_header().format()
    assert len(line) == 94
    assert line[0] == "1"
    assert line[1:3] == "01"
    assert line[3:13] == " 123456780"
    assert line[13:23] == " 123456789"
    assert line[23:29] == "240102"
    assert line[29:33] == "1504"
    assert line[33] == "A"
    assert line[34:40] == "094101"
    assert line[40:63] == "DEST BANK".ljust(23)
    assert line[63:86] == "ORIG BANK".ljust(23)
    assert line[86:94] == "1       "


def test_file_header_parse_restores_fields():
    header = _file_header()
    assert FileHeader.parse(header.format()) == header


def test_file_header_rejects_bad_destination_check_digit():
    header = _file_header()
    header.immediate_destination = "123456789"
    with pytest.raises(FieldError) as excinfo:
        header.validate()
    assert excinfo.value.field == "ImmediateDestination"


def test_file_header_rejects_bad_creation_date():
    header = _file_header()
    header.file_creation_date = "241399"
    with pytest.raises(FieldError, match="FileCreationDate"):
        header.validate()


def test_file_header_rejects_lowercase_modifier():
    header = _file_header()
    header.file_id_modifier = "a"
    with pytest.raises(FieldError, match="FileIDModifier"):
        header.validate()


def test_parse_rejects_wrong_length_and_type():
    with pytest.raises(FieldError, match="94 characters"):
        FileHeader.parse("1" * 93)
    with pytest.raises(FieldError, match="recordType"):
        FileHeader.parse("5" * 94)


# ---- Batch header ------------------------------------------------------------


def test_batch_header_layout_truncates_odfi_to_eight_digits():
    bh = BatchHeader(
        company_name="COMPANYONE",
        company_identification="123456789",
        standard_entry_class_code="PPD",
        company_entry_description="COMPANYONE",
        company_descriptive_date="231229",
        effective_entry_date="231229",
        odfi_identification="123456780",
        batch_number=4964830,
    )
    line = bh.format()
    assert len(line) == 94
    assert line[0:4] == "5200"
    assert line[4:20] == "COMPANYONE      "
    assert line[20:40] == " " * 20
    assert line[40:50] == "123456789 "
    assert line[50:53] == "PPD"
    assert line[53:63] == "COMPANYONE"
    assert line[63:75] == "231229231229"
    assert line[75:78] == "   "
    assert line[78] == "1"
    assert line[79:87] == "12345678"
    assert line[87:94] == "4964830"
    bh.validate()


def test_batch_header_requires_known_sec_code():
    bh = BatchHeader(
        company_name="X",
        company_identification="1",
        standard_entry_class_code="XYZ",
        company_entry_description="D",
        effective_entry_date="231229",
        odfi_identification="12345678",
    )
    with pytest.raises(FieldError, match="StandardEntryClassCode"):
        bh.validate()


# ---- Entry detail ------------------------------------------------------------


def test_entry_setters():
    entry = EntryDetail()
    entry.set_rdfi("123456780")
    entry.set_trace_number("123456780", 5)
    entry.set_original_trace_number("8058467")
    entry.set_receiving_company("CompOne")
    assert entry.rdfi_identification == "12345678"
    assert entry.check_digit == "0"
    assert entry.trace_number == "123456780000005"
    assert entry.identification_number == "8058467"
    assert entry.individual_name == "CompOne"


def test_entry_layout():
    line = _entry().format()
    assert len(line) == 94
    assert line[0:3] == "622"
    assert line[3:11] == "12345678"
    assert line[11] == "0"
    assert line[12:29] == "1111111111       "
    assert line[29:39] == "0000234430"
    assert line[39:54] == "8058467        "
    assert line[54:76] == "CompOne".ljust(22)
    assert line[76:78] == "  "
    assert line[78] == "0"
    assert line[79:94] == "123456780000001"


def test_entry_parse_restores_fields():
    entry = _entry()
    parsed = EntryDetail.parse(entry.format())
    assert parsed == entry


def test_entry_validate_checks_check_digit():
    with pytest.raises(FieldError, match="CheckDigit"):
        _entry(check_digit="9").validate()


def test_entry_validate_requires_name_and_account():
    with pytest.raises(FieldError, match="IndividualName"):
        _entry(individual_name="").validate()
    with pytest.raises(FieldError, match="DFIAccountNumber"):
        _entry(dfi_account_number="").validate()


def test_entry_validate_rejects_unknown_code_and_big_amount():
    with pytest.raises(FieldError, match="TransactionCode"):
        _entry(transaction_code=99).validate()
    with pytest.raises(FieldError, match="Amount"):
        _entry(amount=10**10).validate()


def test_prenote_must_be_zero_dollar():
    _entry(transaction_code=CHECKING_PRENOTE_CREDIT, amount=0).validate()
    with pytest.raises(FieldError, match="prenote"):
        _entry(transaction_code=CHECKING_PRENOTE_CREDIT, amount=1).validate()


def test_entry_rejects_non_ascii_name():
    with pytest.raises(FieldError, match="non-alphanumeric"):
        _entry(individual_name="Café").validate()


def test_credit_debit_classification():
    assert is_credit(CHECKING_CREDIT) and not is_debit(CHECKING_CREDIT)
    assert is_debit(CHECKING_DEBIT) and not is_credit(CHECKING_DEBIT)
    assert is_credit(GL_CREDIT)
    assert not is_credit(99) and not is_debit(99)
    assert _entry(transaction_code=CHECKING_DEBIT).is_debit


# ---- Addenda -----------------------------------------------------------------


def test_addenda99_layout():
    addenda = Addenda99(
        return_code="R10",
        original_trace="1111111111",
        original_dfi="123456780",
        addenda_information="Authorization Revoked",
        trace_number="123456780000000",
    )
    line = addenda.format()
    assert len(line) == 94
    assert line[0:3] == "799"
    assert line[3:6] == "R10"
    assert line[6:21] == "000001111111111"
    assert line[21:27] == " " * 6
    assert line[27:35] == "12345678"
    assert line[35:79] == "Authorization Revoked".ljust(44)
    assert line[79:94] == "123456780000000"
    addenda.validate()
    assert addenda.return_code_description() == "Customer Advises Not Authorized"


def test_addenda99_rejects_unknown_return_code():
    addenda = Addenda99(return_code="R99", original_trace="1", original_dfi="12345678")
    with pytest.raises(FieldError, match="ReturnCode"):
        addenda.validate()


def test_addenda05_layout_and_parse():
    addenda = Addenda05(
        payment_related_information="INVOICE 1234",
        sequence_number=1,
        entry_detail_sequence_number=7,
    )
    line = addenda.format()
    assert len(line) == 94
    assert line[0:3] == "705"
    assert line[3:83] == "INVOICE 1234".ljust(80)
    assert line[83:87] == "0001"
    assert line[87:94] == "0000007"
    assert Addenda05.parse(line) == addenda


# ---- Controls ----------------------------------------------------------------


def test_batch_control_layout():
    control = BatchControl(
        entry_addenda_count=7,
        entry_hash=86419746,
        total_debit_entry_dollar_amount=207000,
        total_credit_entry_dollar_amount=1837830,
        company_identification="123456789",
        odfi_identification="12345678",
        batch_number=4964830,
    )
    line = control.format()
    assert len(line) == 94
    assert line[0:4] == "8200"
    assert line[4:10] == "000007"
    assert line[10:20] == "0086419746"
    assert line[20:32] == "000000207000"
    assert line[32:44] == "000001837830"
    assert line[44:54] == "123456789 "
    assert line[54:79] == " " * 25
    assert line[79:87] == "12345678"
    assert line[87:94] == "4964830"
    assert BatchControl.parse(line) == control


def test_file_control_layout():
    control = FileControl(
        batch_count=1,
        block_count=2,
        entry_addenda_count=7,
        entry_hash=86419746,
        total_debit_entry_dollar_amount_in_file=207000,
        total_credit_entry_dollar_amount_in_file=1837830,
    )
    line = control.format()
    assert len(line) == 94
    assert line[:55] == "9000001000002000000070086419746000000207000000001837830"
    assert line[55:] == " " * 39
    assert FileControl.parse(line) == control
