import io

import pytest

from ach_transactions.nacha import (
    CATEGORY_RETURN,
    CHECKING_CREDIT,
    CHECKING_DEBIT,
    GL_CREDIT,
    Addenda99,
    BatchHeader,
    EntryDetail,
    File,
    FileError,
    FileHeader,
    ParseError,
    Reader,
    Writer,
    dumps,
    loads,
    new_batch,
)
from ach_transactions.nacha.fields import FILLER_RECORD


def _make_file(*, with_return: bool = False) -> File:
    fh = FileHeader(
        immediate_destination="123456780",
        immediate_origin="123456789",
        file_creation_date="240102",
        file_creation_time="1504",
        immediate_destination_name="DEST BANK",
        immediate_origin_name="ORIG BANK",
        reference_code="1",
    )
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
    batch = new_batch(bh)
    if with_return:
        entry = EntryDetail(
            transaction_code=GL_CREDIT,
            dfi_account_number="1111111117",
            amount=103400,
            individual_name="CompEight",
            category=CATEGORY_RETURN,
            addenda99=Addenda99(
                return_code="R10",
                original_trace="1111111111",
                original_dfi="123456780",
                addenda_information="Authorization Revoked",
            ),
        )
        entry.set_rdfi("123456780")
        entry.set_trace_number("123456780", 0)
        batch.add_entry(entry)
    else:
        for seq, (code, amount) in enumerate([(CHECKING_CREDIT, 500), (CHECKING_DEBIT, 200)]):
            entry = EntryDetail(
                transaction_code=code,
                dfi_account_number=f"11111111{seq}",
                amount=amount,
                individual_name=f"Comp{seq}",
            )
            entry.set_rdfi("123456780")
            entry.set_trace_number("123456780", seq)
            batch.add_entry(entry)
    batch.create()
    f = File(fh)
    f.add_batch(batch)
    f.create()
    return f


def test_writer_pads_to_blocking_factor():
    text = dumps(_make_file())
    lines = text.split("\n")
    assert lines[-1] == ""  # trailing newline
    lines = lines[:-1]
    assert len(lines) == 10
    assert all(len(line) == 94 for line in lines)
    assert [line[0] for line in lines[:6]] == ["1", "5", "6", "6", "8", "9"]
    assert lines[6:] == [FILLER_RECORD] * 4


def test_writer_honours_line_ending():
    buf = io.StringIO()
    Writer(buf, line_ending="\r\n").write(_make_file())
    assert buf.getvalue().count("\r\n") == 10


def test_writer_refuses_invalid_file():
    f = _make_file()
    f.control.total_credit_entry_dollar_amount_in_file = 1
    with pytest.raises(FileError):
        dumps(f)


def test_reader_rebuilds_file_and_controls():
    original = _make_file()
    parsed = loads(dumps(original))
    parsed.validate()

    assert parsed.header == original.header
    assert parsed.control == original.control
    assert len(parsed.batches) == 1
    batch = parsed.batches[0]
    # The header keeps only the 8-digit ODFI, so compare rendered records.
    assert batch.header.format() == original.batches[0].header.format()
    assert batch.header.odfi_identification == "12345678"
    assert batch.control == original.batches[0].control
    assert [e.amount for e in batch.entries] == [500, 200]
    assert type(batch).__name__ == "PPDBatch"


def test_reader_attaches_addenda99_and_marks_return():
    parsed = loads(dumps(_make_file(with_return=True)))
    parsed.validate()
    entry = parsed.batches[0].entries[0]
    assert entry.category == CATEGORY_RETURN
    assert entry.addenda99 is not None
    assert entry.addenda99.return_code == "R10"
    assert entry.addenda99.original_trace == "000001111111111"
    assert entry.addenda99.addenda_information == "Authorization Revoked"
    assert entry.addenda99.trace_number == entry.trace_number


def test_reader_accepts_crlf_and_missing_filler():
    text = dumps(_make_file())
    lines = [line for line in text.split("\n") if line and line != FILLER_RECORD]
    parsed = Reader(io.StringIO("\r\n".join(lines) + "\r\n")).read()
    parsed.validate()


def test_reader_reports_line_number_of_short_record():
    lines = dumps(_make_file()).split("\n")
    lines[2] = lines[2][:50]
    with pytest.raises(ParseError) as excinfo:
        loads("\n".join(lines))
    assert excinfo.value.line_number == 3


def test_reader_rejects_unknown_record_type():
    lines = dumps(_make_file()).split("\n")
    lines[2] = "4" + lines[2][1:]
    with pytest.raises(ParseError, match="unknown record type"):
        loads("\n".join(lines))


def test_reader_requires_file_header_first():
    lines = dumps(_make_file()).split("\n")
    with pytest.raises(ParseError, match="before file header"):
        loads("\n".join(lines[1:]))


def test_reader_requires_batch_control():
    lines = dumps(_make_file()).split("\n")
    del lines[4]  # batch control
    with pytest.raises(ParseError, match="file control before batch control"):
        loads("\n".join(lines))


def test_reader_requires_file_control():
    lines = dumps(_make_file()).split("\n")[:5]
    with pytest.raises(ParseError, match="missing file control"):
        loads("\n".join(lines))


def test_reader_rejects_empty_input():
    with pytest.raises(ParseError, match="missing file header"):
        loads("")


def test_reader_rejects_addenda_without_indicator():
    lines = dumps(_make_file(with_return=True)).split("\n")
    entry = lines[2]
    lines[2] = entry[:78] + "0" + entry[79:]
    with pytest.raises(ParseError, match="without addenda indicator"):
        loads("\n".join(lines))


def test_reader_rejects_records_after_file_control():
    lines = [line for line in dumps(_make_file()).split("\n") if line and line != FILLER_RECORD]
    lines.append(lines[2])
    with pytest.raises(ParseError, match="after file control"):
        loads("\n".join(lines))


def test_parsed_file_with_bad_totals_fails_validation():
    lines = dumps(_make_file()).split("\n")
    control = lines[5]
    lines[5] = control[:43] + "000000000001" + control[55:]
    parsed = loads("\n".join(lines))
    with pytest.raises(FileError, match="total credit amount"):
        parsed.validate()


def test_reader_rejects_file_control_without_file_header():
    reader = Reader(io.StringIO(""))
    with pytest.raises(ParseError, match="file control before file header"):
        reader._read_file_control("9" + "0" * 93)
