"""
Data models for SalesTracker application
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Union


@dataclass(frozen=True)
class Party:
    """Customer party owned by exactly one salesman"""
    id: str
    name: str  # matched case-insensitively
    salesman: str


@dataclass
class Transaction:
    """Single receipt attributed to a party by name"""
    id: str
    party_name: str  # free text as typed
    amount: float  # always >= 0
    date: str  # YYYY-MM-DD


@dataclass
class SalesmanTotal:
    """Totals attributed to one salesman"""
    salesman: str
    total_amount: float
    party_count: int


@dataclass
class PartyTotal:
    """Totals for one exact party name"""
    party_name: str
    total_amount: float
    transaction_count: int


@dataclass
class AggregationResult:
    """Output of one calculation run"""
    salesman_totals: List[SalesmanTotal] = field(default_factory=list)
    party_totals: List[PartyTotal] = field(default_factory=list)
    grand_total: float = 0.0


# Spreadsheet cells as seen at the ingestion boundary

@dataclass(frozen=True)
class NumberCell:
    value: float


@dataclass(frozen=True)
class TextCell:
    value: str


@dataclass(frozen=True)
class EmptyCell:
    pass


Cell = Union[NumberCell, TextCell, EmptyCell]
