"""Shared fixtures for SalesTracker tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List

import pytest
from openpyxl import Workbook

from models import Party, Transaction


def make_party(name: str, salesman: str) -> Party:
    return Party(id=f"p-{name}-{salesman}", name=name, salesman=salesman)


def make_txn(party_name: str, amount: float, txn_id: str = "") -> Transaction:
    return Transaction(id=txn_id or f"t-{party_name}-{amount}", party_name=party_name, amount=amount, date="2025-01-31")


@pytest.fixture
def write_xlsx(tmp_path: Path) -> Callable[[List[list], str], str]:
    """Write rows to the first sheet of a new workbook and return its path."""

    def _write(rows: List[list], name: str = "sheet.xlsx") -> str:
        wb = Workbook()
        ws = wb.active
        for row in rows:
            ws.append(row)
        # a second sheet must never be read
        wb.create_sheet("Ignored").append(["Party Name", "Amount"])
        path = tmp_path / name
        wb.save(path)
        return str(path)

    return _write


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[str, str], str]:
    def _write(text: str, name: str = "sheet.csv") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write
