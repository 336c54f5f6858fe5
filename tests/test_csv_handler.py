import csv

from csv_handler import export_transactions_to_csv, read_csv_rows
from models import EmptyCell, TextCell
from sheet_import import import_transaction_sheet

from conftest import make_txn


def test_read_csv_rows_tags_blank_cells(write_csv):
    path = write_csv("Acme, \n,7\n")
    assert read_csv_rows(path) == [
        [TextCell("Acme"), EmptyCell()],
        [EmptyCell(), TextCell("7")],
    ]


def test_read_csv_rows_falls_back_to_legacy_encoding(tmp_path):
    path = tmp_path / "cp.csv"
    path.write_bytes("Caf\xe9,10\n".encode("cp1252"))
    assert read_csv_rows(str(path)) == [[TextCell("Caf\xe9"), TextCell("10")]]


def test_exported_csv_can_be_imported_again(tmp_path):
    path = tmp_path / "out.csv"
    export_transactions_to_csv([make_txn("Acme", 10.5), make_txn("Beta", 3)], str(path))

    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["Party Name", "Amount", "Date"]
    assert rows[1] == ["Acme", "10.5", "2025-01-31"]

    again = import_transaction_sheet(str(path))
    assert [(t.party_name, t.amount) for t in again] == [("Acme", 10.5), ("Beta", 3.0)]
