"""Pairwise debt graph used by direct settlement.

The graph maps ``debtor -> creditor -> amount``. Every transformation
returns a fresh graph; inputs are never modified.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Iterable, List, Sequence

from splitsettle.models import (
    DEFAULT_THRESHOLD,
    ZERO,
    ExpenseRecord,
    Member,
    PaymentRecord,
    Settlement,
    member_ids,
    round_amount,
)
from splitsettle.services.balances import known_expenses, known_payments, split_shares

DebtGraph = Dict[str, Dict[str, Decimal]]


def copy_graph(graph: DebtGraph) -> DebtGraph:
    return {debtor: dict(row) for debtor, row in graph.items()}


def build_debt_graph(members: Sequence[Member], expenses: Iterable[ExpenseRecord]) -> DebtGraph:
    ids = member_ids(members)
    graph: DebtGraph = {member_id: {} for member_id in ids}

    for expense in known_expenses(expenses, ids):
        for participant_id, share in split_shares(expense, ids).items():
            if participant_id == expense.payer_id:
                continue
            row = graph[participant_id]
            row[expense.payer_id] = row.get(expense.payer_id, ZERO) + share

    return graph


def apply_payments(graph: DebtGraph, payments: Iterable[PaymentRecord]) -> DebtGraph:
    """Reduce debts by recorded payments.

    A payment larger than what the payer owes flips the excess into the
    payee owing the payer.
    """
    result = copy_graph(graph)
    ids = dict.fromkeys(result)
    for row in graph.values():
        ids.update(dict.fromkeys(row))

    for payment in known_payments(payments, list(ids)):
        owed = result.setdefault(payment.from_id, {}).get(payment.to_id, ZERO)
        if owed >= payment.amount:
            result[payment.from_id][payment.to_id] = owed - payment.amount
        else:
            result[payment.from_id][payment.to_id] = ZERO
            reverse_row = result.setdefault(payment.to_id, {})
            reverse_row[payment.from_id] = reverse_row.get(payment.from_id, ZERO) + (payment.amount - owed)
    return result


def net_graph(graph: DebtGraph, members: Sequence[Member]) -> DebtGraph:
    result = copy_graph(graph)
    ids = sorted(member_id for member_id in member_ids(members) if member_id in result)

    for index, a in enumerate(ids):
        for b in ids[index + 1:]:
            a_owes = result[a].get(b, ZERO)
            b_owes = result[b].get(a, ZERO)
            if a_owes == ZERO and b_owes == ZERO:
                continue
            if a_owes > b_owes:
                result[a][b] = a_owes - b_owes
                result[b][a] = ZERO
            elif b_owes > a_owes:
                result[b][a] = b_owes - a_owes
                result[a][b] = ZERO
            else:
                result[a][b] = ZERO
                result[b][a] = ZERO

    return result


def to_settlements(graph: DebtGraph, threshold: Decimal = DEFAULT_THRESHOLD) -> List[Settlement]:
    settlements: list[Settlement] = []
    for debtor, row in graph.items():
        for creditor, amount in row.items():
            if debtor == creditor or amount <= threshold:
                continue
            rounded = round_amount(amount)
            if rounded < 1:
                continue
            settlements.append(Settlement(from_id=debtor, to_id=creditor, amount=rounded))
    return settlements


def direct_settlements(
    members: Sequence[Member],
    expenses: Iterable[ExpenseRecord],
    payments: Iterable[PaymentRecord],
    threshold: Decimal = DEFAULT_THRESHOLD,
) -> List[Settlement]:
    graph = build_debt_graph(members, expenses)
    graph = apply_payments(graph, payments)
    graph = net_graph(graph, members)
    return to_settlements(graph, threshold)
