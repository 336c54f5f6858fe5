"""
Excel export functionality for SalesTracker
"""
from __future__ import annotations
from typing import Dict, List

from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side
from openpyxl.utils import get_column_letter

from computations import resolve_salesman
from logging_setup import get_logger
from models import AggregationResult, Transaction

logger = get_logger("excel_export")

AMOUNT_FORMAT = "#,##0.00"


def _style_header(ws, row=1):
    """Apply header styling to worksheet row"""
    header_font = Font(bold=True, color="FFFFFF")
    fill = PatternFill("solid", fgColor="4F81BD")
    align = Alignment(horizontal="center", vertical="center")
    thin = Side(style="thin", color="A0A0A0")
    border = Border(left=thin, right=thin, top=thin, bottom=thin)
    for cell in ws[row]:
        cell.font = header_font
        cell.fill = fill
        cell.alignment = align
        cell.border = border


def _autosize_columns(ws, min_width=10, max_width=45):
    """Auto-size columns based on content"""
    for col in range(1, ws.max_column + 1):
        letter = get_column_letter(col)
        max_len = 0
        for cell in ws[letter]:
            v = cell.value
            if v is None:
                continue
            max_len = max(max_len, len(str(v)))
        ws.column_dimensions[letter].width = max(min_width, min(max_width, max_len + 2))


def _total_row(ws, amount_col: int):
    """Append a bold TOTAL row summing the amount column"""
    last_data_row = ws.max_row
    ws.append(["TOTAL"])
    trow = ws.max_row
    letter = get_column_letter(amount_col)
    ws.cell(trow, 1).font = Font(bold=True)
    cell = ws.cell(trow, amount_col)
    cell.value = f"=SUM({letter}2:{letter}{last_data_row})" if last_data_row >= 2 else 0
    cell.font = Font(bold=True)
    cell.number_format = AMOUNT_FORMAT


def export_report(
    result: AggregationResult,
    transactions: List[Transaction],
    lookup: Dict[str, str],
    filepath: str,
) -> None:
    """
    Export calculated totals to an Excel file with sheets:
    - Salesman Totals (TOTAL row is the grand total)
    - Party Totals
    - Transactions (with the salesman each one was attributed to)
    """
    wb = Workbook()
    wb.remove(wb.active)

    ws = wb.create_sheet("Salesman Totals")
    ws.append(["Salesman", "Total Amount", "Parties"])
    _style_header(ws, 1)
    ws.freeze_panes = "A2"
    for s in result.salesman_totals:
        ws.append([s.salesman, s.total_amount, s.party_count])
    _total_row(ws, 2)
    for r in range(2, ws.max_row + 1):
        ws.cell(r, 2).number_format = AMOUNT_FORMAT
    _autosize_columns(ws)

    ws = wb.create_sheet("Party Totals")
    ws.append(["Party Name", "Total Amount", "Transactions"])
    _style_header(ws, 1)
    ws.freeze_panes = "A2"
    for p in result.party_totals:
        ws.append([p.party_name, p.total_amount, p.transaction_count])
    _total_row(ws, 2)
    for r in range(2, ws.max_row + 1):
        ws.cell(r, 2).number_format = AMOUNT_FORMAT
    _autosize_columns(ws)

    ws = wb.create_sheet("Transactions")
    ws.append(["Date", "Party Name", "Salesman", "Amount"])
    _style_header(ws, 1)
    ws.freeze_panes = "A2"
    for t in transactions:
        ws.append([t.date, t.party_name, resolve_salesman(t.party_name, lookup), t.amount])
    _total_row(ws, 4)
    for r in range(2, ws.max_row + 1):
        ws.cell(r, 4).number_format = AMOUNT_FORMAT
    _autosize_columns(ws)

    wb.save(filepath)
    logger.info("Exported report to %s", filepath)
