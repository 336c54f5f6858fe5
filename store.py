"""
Owning store for parties and transactions.

SalesStore is the single owner of both collections. Every mutation is
validated before it touches state and drops any previously calculated
totals; totals come back only through an explicit calculate().
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from computations import aggregate, build_lookup
from errors import DuplicatePartyError, TransactionNotFoundError, ValidationError
from logging_setup import get_logger
from models import AggregationResult, Party, Transaction
from utils import new_id, parse_amount, today_str

logger = get_logger("store")


@dataclass
class StoreStatus:
    """Counts and load state shown in the status panel"""
    party_count: int
    transaction_count: int
    master_file: Optional[str]
    transaction_file: Optional[str]

    @property
    def master_loaded(self) -> bool:
        return self.master_file is not None

    @property
    def transactions_loaded(self) -> bool:
        return self.transaction_file is not None


def _require_text(value: Optional[str], field_name: str) -> str:
    text = (value or "").strip()
    if not text:
        raise ValidationError(f"{field_name} is required")
    return text


class SalesStore:
    """In-memory parties, transactions and the last calculated totals"""

    def __init__(self):
        self.parties: List[Party] = []
        self.transactions: List[Transaction] = []
        self.master_file: Optional[str] = None
        self.transaction_file: Optional[str] = None
        self._totals: Optional[AggregationResult] = None

    # ---------- Totals ----------
    @property
    def totals(self) -> Optional[AggregationResult]:
        """Last calculated totals, or None if stale or never calculated"""
        return self._totals

    @property
    def is_calculated(self) -> bool:
        return self._totals is not None

    def _invalidate(self):
        self._totals = None

    def calculate(self) -> AggregationResult:
        """Aggregate the current transactions; raises EmptyInputWarning if there are none"""
        result = aggregate(self.transactions, build_lookup(self.parties))
        self._totals = result
        return result

    # ---------- Parties ----------
    def add_party(self, name: str, salesman: str) -> Party:
        name = _require_text(name, "Party name")
        salesman = _require_text(salesman, "Salesman")
        key = name.lower()
        if any(p.name.lower() == key for p in self.parties):
            logger.warning("Rejected duplicate party %r", name)
            raise DuplicatePartyError(name)
        party = Party(id=new_id(), name=name, salesman=salesman)
        self.parties.append(party)
        self._invalidate()
        logger.debug("Added party %r -> %r", name, salesman)
        return party

    def replace_parties(self, parties: List[Party], source: Optional[str] = None):
        """Install an imported master sheet in place of the current parties"""
        self.parties = list(parties)
        self.master_file = source
        self._invalidate()
        logger.info("Loaded %d parties%s", len(self.parties), f" from {source}" if source else "")

    # ---------- Transactions ----------
    def find_transaction(self, txn_id: str) -> Optional[Transaction]:
        return next((t for t in self.transactions if t.id == txn_id), None)

    def add_transaction(
        self,
        party_name: str,
        amount: Union[str, float],
        date: Optional[str] = None,
    ) -> Transaction:
        party_name = _require_text(party_name, "Party name")
        value = parse_amount(amount)
        txn = Transaction(id=new_id(), party_name=party_name, amount=value, date=date or today_str())
        self.transactions.append(txn)
        self._invalidate()
        logger.debug("Added transaction %s: %r %.2f", txn.id, party_name, value)
        return txn

    def edit_transaction(
        self,
        txn_id: str,
        party_name: Optional[str] = None,
        amount: Union[str, float, None] = None,
    ) -> Transaction:
        """
        Replace party name and/or amount of an existing transaction.
        Fields left as None are kept. Raises TransactionNotFoundError for an
        unknown id; on any error the transaction is unchanged.
        """
        txn = self.find_transaction(txn_id)
        if txn is None:
            raise TransactionNotFoundError(txn_id)
        new_name = txn.party_name if party_name is None else _require_text(party_name, "Party name")
        new_amount = txn.amount if amount is None else parse_amount(amount)
        txn.party_name = new_name
        txn.amount = new_amount
        self._invalidate()
        logger.debug("Edited transaction %s: %r %.2f", txn_id, new_name, new_amount)
        return txn

    def delete_transaction(self, txn_id: str) -> bool:
        """Remove a transaction; returns False (and changes nothing) if the id is absent"""
        remaining = [t for t in self.transactions if t.id != txn_id]
        if len(remaining) == len(self.transactions):
            logger.debug("Delete ignored, no transaction %s", txn_id)
            return False
        self.transactions = remaining
        self._invalidate()
        logger.debug("Deleted transaction %s", txn_id)
        return True

    def replace_transactions(self, transactions: List[Transaction], source: Optional[str] = None):
        """Install an imported transaction sheet in place of the current transactions"""
        self.transactions = list(transactions)
        self.transaction_file = source
        self._invalidate()
        logger.info("Loaded %d transactions%s", len(self.transactions), f" from {source}" if source else "")

    def reset_transactions(self):
        """Clear all transactions and totals; safe to call repeatedly"""
        self.transactions = []
        self.transaction_file = None
        self._invalidate()
        logger.info("Transaction data reset")

    # ---------- Status ----------
    def status(self) -> StoreStatus:
        return StoreStatus(
            party_count=len(self.parties),
            transaction_count=len(self.transactions),
            master_file=self.master_file,
            transaction_file=self.transaction_file,
        )

    def salesman_by_party(self) -> Dict[str, str]:
        """Current case-insensitive party lookup"""
        return build_lookup(self.parties)
