"""
Business logic and computations for SalesTracker
"""
from __future__ import annotations
from typing import Dict, Iterable, List, Set

from errors import EmptyInputWarning
from logging_setup import get_logger
from models import AggregationResult, Party, PartyTotal, SalesmanTotal, Transaction

logger = get_logger("computations")

UNKNOWN_SALESMAN = "Unknown Salesman"


def build_lookup(parties: Iterable[Party]) -> Dict[str, str]:
    """
    Build mapping of lower-cased party name to salesman.
    When two parties share a name, the later one wins.
    """
    return {p.name.lower(): p.salesman for p in parties}


def resolve_salesman(party_name: str, lookup: Dict[str, str]) -> str:
    """Salesman for a transaction's party name, or the unknown bucket"""
    return lookup.get(party_name.lower(), UNKNOWN_SALESMAN)


def aggregate(transactions: List[Transaction], lookup: Dict[str, str]) -> AggregationResult:
    """
    Compute per-salesman totals, per-party totals and the grand total.
    Both lists are sorted by total descending; ties keep first-seen order.
    Raises EmptyInputWarning when there is nothing to calculate.
    """
    if not transactions:
        raise EmptyInputWarning()

    salesman_sum: Dict[str, float] = {}
    salesman_parties: Dict[str, Set[str]] = {}
    party_sum: Dict[str, float] = {}
    party_count: Dict[str, int] = {}
    grand_total = 0.0
    unmatched = 0

    for t in transactions:
        if t.party_name.lower() not in lookup:
            unmatched += 1
        salesman = resolve_salesman(t.party_name, lookup)
        salesman_sum[salesman] = salesman_sum.get(salesman, 0.0) + t.amount
        salesman_parties.setdefault(salesman, set()).add(t.party_name)

        # party totals are keyed by the exact name as typed
        party_sum[t.party_name] = party_sum.get(t.party_name, 0.0) + t.amount
        party_count[t.party_name] = party_count.get(t.party_name, 0) + 1

        grand_total += t.amount

    salesman_totals = [
        SalesmanTotal(salesman=s, total_amount=amt, party_count=len(salesman_parties[s]))
        for s, amt in salesman_sum.items()
    ]
    party_totals = [
        PartyTotal(party_name=p, total_amount=amt, transaction_count=party_count[p])
        for p, amt in party_sum.items()
    ]
    # sort is stable, also with reverse=True
    salesman_totals.sort(key=lambda x: x.total_amount, reverse=True)
    party_totals.sort(key=lambda x: x.total_amount, reverse=True)

    if unmatched:
        logger.warning("%d transaction(s) matched no party, attributed to %s", unmatched, UNKNOWN_SALESMAN)
    logger.info(
        "Aggregated %d transactions: %d salesmen, %d parties, grand total %.2f",
        len(transactions), len(salesman_totals), len(party_totals), grand_total,
    )
    return AggregationResult(
        salesman_totals=salesman_totals,
        party_totals=party_totals,
        grand_total=grand_total,
    )
