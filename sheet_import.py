"""
Spreadsheet import for SalesTracker

Both sheet kinds are two-column tables read from the first worksheet:
  master sheet:      Party Name | Salesman
  transaction sheet: Party Name | Amount
A header row is skipped when its first cell mentions "party".
Invalid rows are skipped; a sheet with no valid rows is rejected.
"""
from __future__ import annotations
import math
import os
from datetime import date, datetime
from typing import List, Optional
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from csv_handler import read_csv_rows
from errors import ParseError, ValidationError
from logging_setup import get_logger
from models import Cell, EmptyCell, NumberCell, Party, TextCell, Transaction
from utils import new_id, parse_amount, today_str

logger = get_logger("sheet_import")

EXCEL_EXTENSIONS = (".xlsx", ".xlsm")
CSV_EXTENSIONS = (".csv",)

MASTER_EMPTY_MESSAGE = (
    "No valid party-salesman data found. "
    "Ensure the file has party names in column 1 and salesman names in column 2."
)
TRANSACTION_EMPTY_MESSAGE = (
    "No valid transaction data found. "
    "Ensure the file has party names in column 1 and amounts in column 2."
)


def to_cell(value) -> Cell:
    """Tag a raw openpyxl cell value"""
    if value is None:
        return EmptyCell()
    if isinstance(value, bool):
        return TextCell(str(value))
    if isinstance(value, (int, float)):
        return NumberCell(float(value))
    if isinstance(value, (datetime, date)):
        return TextCell(value.isoformat())
    text = str(value)
    return TextCell(text) if text.strip() else EmptyCell()


def cell_text(cell: Cell) -> str:
    """Cell rendered as a stripped name"""
    if isinstance(cell, NumberCell):
        v = cell.value
        return str(int(v)) if v.is_integer() else str(v)
    if isinstance(cell, TextCell):
        return cell.value.strip()
    return ""


def cell_amount(cell: Cell) -> Optional[float]:
    """Amount held by a cell, or None if it is missing, unparseable or negative"""
    if isinstance(cell, NumberCell):
        v = cell.value
        return v if math.isfinite(v) and v >= 0 else None
    if isinstance(cell, TextCell):
        try:
            return parse_amount(cell.value)
        except ValidationError:
            return None
    return None


def _read_excel_rows(filepath: str) -> List[List[Cell]]:
    try:
        wb = load_workbook(filepath, read_only=True, data_only=True)
    except (InvalidFileException, BadZipFile, KeyError, OSError) as ex:
        raise ParseError(f"Failed to read workbook {os.path.basename(filepath)}: {ex}") from ex
    try:
        if not wb.worksheets:
            return []
        ws = wb.worksheets[0]
        return [[to_cell(v) for v in row] for row in ws.iter_rows(values_only=True)]
    finally:
        wb.close()


def read_sheet_rows(filepath: str) -> List[List[Cell]]:
    """Read the first sheet of an Excel workbook or a CSV file into rows of cells"""
    ext = os.path.splitext(filepath)[1].lower()
    if ext in EXCEL_EXTENSIONS:
        rows = _read_excel_rows(filepath)
    elif ext in CSV_EXTENSIONS:
        rows = read_csv_rows(filepath)
    else:
        raise ParseError(
            f"Unsupported file type '{ext or os.path.basename(filepath)}'. "
            "Please select an Excel (.xlsx, .xlsm) or CSV file."
        )
    logger.debug("Read %d rows from %s", len(rows), filepath)
    return rows


def _has_header(rows: List[List[Cell]]) -> bool:
    if not rows or not rows[0]:
        return False
    first = rows[0][0]
    return isinstance(first, TextCell) and "party" in first.value.lower()


def _data_rows(rows: List[List[Cell]]) -> List[List[Cell]]:
    start = 1 if _has_header(rows) else 0
    out = []
    for row in rows[start:]:
        if len(row) < 2 or isinstance(row[0], EmptyCell) or isinstance(row[1], EmptyCell):
            continue
        out.append(row)
    return out


def validate_master_rows(rows: List[List[Cell]]) -> List[Party]:
    """Parties from master sheet rows; raises ParseError if none are valid"""
    parties: List[Party] = []
    seen = set()
    for row in _data_rows(rows):
        name = cell_text(row[0])
        salesman = cell_text(row[1])
        if not name or not salesman:
            continue
        if name.lower() in seen:
            logger.warning("Duplicate party %r in master sheet; the later row wins", name)
        seen.add(name.lower())
        parties.append(Party(id=new_id(), name=name, salesman=salesman))

    if not parties:
        raise ParseError(MASTER_EMPTY_MESSAGE)
    return parties


def validate_transaction_rows(rows: List[List[Cell]], on_date: Optional[str] = None) -> List[Transaction]:
    """Transactions from transaction sheet rows; raises ParseError if none are valid"""
    on_date = on_date or today_str()
    transactions: List[Transaction] = []
    skipped = 0
    for row in _data_rows(rows):
        name = cell_text(row[0])
        amount = cell_amount(row[1])
        if not name or amount is None:
            skipped += 1
            continue
        transactions.append(Transaction(id=new_id(), party_name=name, amount=amount, date=on_date))

    if skipped:
        logger.warning("Skipped %d transaction row(s) with a missing name or invalid amount", skipped)
    if not transactions:
        raise ParseError(TRANSACTION_EMPTY_MESSAGE)
    return transactions


def import_master_sheet(filepath: str) -> List[Party]:
    parties = validate_master_rows(read_sheet_rows(filepath))
    logger.info("Master sheet %s: %d parties", os.path.basename(filepath), len(parties))
    return parties


def import_transaction_sheet(filepath: str) -> List[Transaction]:
    transactions = validate_transaction_rows(read_sheet_rows(filepath))
    logger.info("Transaction sheet %s: %d transactions", os.path.basename(filepath), len(transactions))
    return transactions
