"""
CSV import and export functionality for SalesTracker
"""
from __future__ import annotations
import csv
from typing import List

from errors import ParseError
from logging_setup import get_logger
from models import Cell, EmptyCell, TextCell, Transaction

logger = get_logger("csv_handler")

# Excel often saves CSV with a BOM or in a legacy code page
ENCODINGS = ["utf-8-sig", "cp1252", "latin-1"]


def _to_cell(value: str) -> Cell:
    return TextCell(value) if value.strip() else EmptyCell()


def read_csv_rows(filepath: str) -> List[List[Cell]]:
    """
    Read a CSV file into rows of cells.
    CSV has no typed cells, so every non-blank value is text.
    """
    for enc in ENCODINGS:
        try:
            with open(filepath, "r", newline="", encoding=enc) as f:
                rows = [[_to_cell(v) for v in row] for row in csv.reader(f)]
            logger.debug("Read %d CSV rows from %s (%s)", len(rows), filepath, enc)
            return rows
        except UnicodeDecodeError:
            continue
        except csv.Error as ex:
            raise ParseError(f"Malformed CSV file: {ex}") from ex
    raise ParseError(f"Could not decode {filepath} with any supported encoding")


def export_transactions_to_csv(transactions: List[Transaction], filepath: str) -> None:
    """
    Export transactions list to CSV file
    CSV columns: Party Name, Amount, Date
    The header starts with "Party" so the file can be imported again.
    """
    with open(filepath, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["Party Name", "Amount", "Date"])
        for t in transactions:
            writer.writerow([t.party_name, t.amount, t.date])
    logger.info("Exported %d transactions to %s", len(transactions), filepath)
