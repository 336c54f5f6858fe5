from openpyxl import load_workbook

from computations import UNKNOWN_SALESMAN, aggregate, build_lookup
from excel_export import export_report

from conftest import make_party, make_txn


def _rows(ws):
    return [list(r) for r in ws.iter_rows(values_only=True)]


def test_export_report(tmp_path):
    lookup = build_lookup([make_party("Acme", "Bob")])
    txns = [make_txn("acme", 100, "1"), make_txn("Other", 50, "2"), make_txn("Acme", 25, "3")]
    result = aggregate(txns, lookup)
    path = tmp_path / "report.xlsx"

    export_report(result, txns, lookup, str(path))

    wb = load_workbook(path)
    assert wb.sheetnames == ["Salesman Totals", "Party Totals", "Transactions"]

    rows = _rows(wb["Salesman Totals"])
    assert rows[0] == ["Salesman", "Total Amount", "Parties"]
    assert rows[1] == ["Bob", 125, 2]
    assert rows[2] == [UNKNOWN_SALESMAN, 50, 1]
    assert rows[3][:2] == ["TOTAL", "=SUM(B2:B3)"]
    assert len(rows) == 4
    assert result.grand_total == 175

    rows = _rows(wb["Party Totals"])
    assert rows[1:4] == [["acme", 100, 1], ["Other", 50, 1], ["Acme", 25, 1]]

    rows = _rows(wb["Transactions"])
    assert rows[0] == ["Date", "Party Name", "Salesman", "Amount"]
    assert rows[1] == ["2025-01-31", "acme", "Bob", 100]
    assert rows[2] == ["2025-01-31", "Other", UNKNOWN_SALESMAN, 50]
    assert rows[4][0] == "TOTAL"
    assert rows[4][3] == "=SUM(D2:D4)"
