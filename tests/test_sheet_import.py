import pytest

from errors import ParseError
from models import EmptyCell, NumberCell, TextCell
from sheet_import import (
    MASTER_EMPTY_MESSAGE,
    TRANSACTION_EMPTY_MESSAGE,
    cell_amount,
    cell_text,
    import_master_sheet,
    import_transaction_sheet,
    read_sheet_rows,
    to_cell,
    validate_master_rows,
    validate_transaction_rows,
)


def test_to_cell_tags_values():
    assert to_cell(None) == EmptyCell()
    assert to_cell("   ") == EmptyCell()
    assert to_cell(3) == NumberCell(3.0)
    assert to_cell(2.5) == NumberCell(2.5)
    assert to_cell("x") == TextCell("x")
    assert to_cell(True) == TextCell("True")


def test_cell_text_renders_whole_numbers_without_fraction():
    assert cell_text(NumberCell(123.0)) == "123"
    assert cell_text(NumberCell(1.5)) == "1.5"
    assert cell_text(TextCell("  Acme ")) == "Acme"
    assert cell_text(EmptyCell()) == ""


def test_cell_amount():
    assert cell_amount(NumberCell(10.0)) == 10.0
    assert cell_amount(NumberCell(-1.0)) is None
    assert cell_amount(TextCell("1,234.50")) == 1234.50
    assert cell_amount(TextCell("twelve")) is None
    assert cell_amount(TextCell("-3")) is None
    assert cell_amount(EmptyCell()) is None


def test_transaction_sheet_with_header(write_xlsx):
    path = write_xlsx([
        ["Party Name", "Amount"],
        ["Acme", 100],
        ["Beta", "1,234.50"],
        ["Gamma", "abc"],
        ["Delta", -5],
        [None, 10],
        ["Solo"],
        ["Zero", 0],
    ])
    txns = import_transaction_sheet(path)

    assert [(t.party_name, t.amount) for t in txns] == [("Acme", 100.0), ("Beta", 1234.50), ("Zero", 0.0)]
    assert len({t.id for t in txns}) == 3


def test_transaction_sheet_without_header_keeps_first_row(write_xlsx):
    path = write_xlsx([["Acme", 5], ["Beta", 7]])
    assert [t.party_name for t in import_transaction_sheet(path)] == ["Acme", "Beta"]


def test_header_detection_is_case_insensitive():
    rows = [[TextCell("CUSTOMER PARTY"), TextCell("Amount")], [TextCell("Acme"), NumberCell(1.0)]]
    assert [t.party_name for t in validate_transaction_rows(rows, "2025-01-01")] == ["Acme"]


def test_transaction_rows_use_given_date():
    rows = [[TextCell("Acme"), NumberCell(1.0)]]
    assert validate_transaction_rows(rows, "2024-12-31")[0].date == "2024-12-31"


def test_transaction_sheet_without_valid_rows_fails(write_xlsx):
    path = write_xlsx([["Party", "Amount"], ["Acme", "n/a"]])
    with pytest.raises(ParseError) as exc:
        import_transaction_sheet(path)
    assert str(exc.value) == TRANSACTION_EMPTY_MESSAGE


def test_master_sheet(write_xlsx):
    path = write_xlsx([
        ["Party Name", "Salesman"],
        [" Acme ", " Bob "],
        ["Beta", None],
        [1001, "Carol"],
    ])
    parties = import_master_sheet(path)
    assert [(p.name, p.salesman) for p in parties] == [("Acme", "Bob"), ("1001", "Carol")]


def test_master_sheet_keeps_duplicates_in_order(caplog):
    rows = [[TextCell("Acme"), TextCell("Bob")], [TextCell("ACME"), TextCell("Carol")]]
    parties = validate_master_rows(rows)
    assert [p.salesman for p in parties] == ["Bob", "Carol"]
    assert any("Duplicate party" in r.getMessage() for r in caplog.records)


def test_master_sheet_empty_fails():
    with pytest.raises(ParseError) as exc:
        validate_master_rows([[TextCell("Party Name"), TextCell("Salesman")]])
    assert str(exc.value) == MASTER_EMPTY_MESSAGE


def test_empty_rows_fail():
    with pytest.raises(ParseError):
        validate_master_rows([])
    with pytest.raises(ParseError):
        validate_transaction_rows([])


def test_csv_transaction_sheet(write_csv):
    path = write_csv('Party,Amount\nAcme,"1,234.50"\nBeta,12\n,5\n')
    txns = import_transaction_sheet(path)
    assert [(t.party_name, t.amount) for t in txns] == [("Acme", 1234.50), ("Beta", 12.0)]


def test_csv_with_bom(tmp_path):
    path = tmp_path / "master.csv"
    path.write_bytes("Party Name,Salesman\nAcme,Bob\n".encode("utf-8-sig"))
    assert [(p.name, p.salesman) for p in import_master_sheet(str(path))] == [("Acme", "Bob")]


def test_unsupported_extension(tmp_path):
    path = tmp_path / "legacy.xls"
    path.write_bytes(b"\xd0\xcf\x11\xe0")
    with pytest.raises(ParseError, match="Unsupported file type"):
        read_sheet_rows(str(path))


def test_corrupt_workbook(tmp_path):
    path = tmp_path / "broken.xlsx"
    path.write_text("not a zip file")
    with pytest.raises(ParseError, match="Failed to read workbook"):
        read_sheet_rows(str(path))
