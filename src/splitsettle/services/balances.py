from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Sequence

from splitsettle.logging import get_logger
from splitsettle.models import (
    DEFAULT_THRESHOLD,
    Balance,
    ExpenseRecord,
    Member,
    PaymentRecord,
    member_ids,
)

log = get_logger(__name__)


def resolve_split_set(expense: ExpenseRecord, ids: Sequence[str]) -> list[str]:
    """Members the expense is divided among, in member order.

    An empty participant set means everyone. Participants that are not
    members are dropped; if none are left the expense falls back to everyone.
    The payer is never added implicitly.
    """
    if not expense.participant_ids:
        return list(ids)
    split_set = [member_id for member_id in ids if member_id in expense.participant_ids]
    return split_set or list(ids)


def split_shares(expense: ExpenseRecord, ids: Sequence[str]) -> dict[str, Decimal]:
    split_set = resolve_split_set(expense, ids)
    if not split_set:
        return {}
    share = expense.amount / Decimal(len(split_set))
    return {member_id: share for member_id in split_set}


def known_expenses(expenses: Iterable[ExpenseRecord], ids: Sequence[str]) -> list[ExpenseRecord]:
    known = set(ids)
    result: list[ExpenseRecord] = []
    for expense in expenses:
        if expense.payer_id not in known:
            log.debug("record.dropped", kind="expense", payer_id=expense.payer_id)
            continue
        result.append(expense)
    return result


def known_payments(payments: Iterable[PaymentRecord], ids: Sequence[str]) -> list[PaymentRecord]:
    known = set(ids)
    result: list[PaymentRecord] = []
    for payment in payments:
        if payment.from_id not in known or payment.to_id not in known:
            log.debug(
                "record.dropped",
                kind="payment",
                from_id=payment.from_id,
                to_id=payment.to_id,
            )
            continue
        if payment.from_id == payment.to_id:
            continue
        result.append(payment)
    return result


def compute_balances(
    members: Sequence[Member],
    expenses: Iterable[ExpenseRecord],
    payments: Iterable[PaymentRecord] = (),
) -> list[Balance]:
    ids = member_ids(members)
    if not ids:
        return []

    balances = {member_id: Balance(member_id=member_id) for member_id in ids}

    for expense in known_expenses(expenses, ids):
        balances[expense.payer_id].paid += expense.amount
        for member_id, share in split_shares(expense, ids).items():
            balances[member_id].share += share

    for payment in known_payments(payments, ids):
        balances[payment.from_id].adjustment += payment.amount
        balances[payment.to_id].adjustment -= payment.amount

    return [balances[member_id] for member_id in ids]


def sorted_balances(balances: Iterable[Balance]) -> list[Balance]:
    return sorted(balances, key=lambda b: b.net, reverse=True)


def debtors(balances: Iterable[Balance], threshold: Decimal = DEFAULT_THRESHOLD) -> list[Balance]:
    return sorted((b for b in balances if b.net < -threshold), key=lambda b: b.net)


def creditors(balances: Iterable[Balance], threshold: Decimal = DEFAULT_THRESHOLD) -> list[Balance]:
    return sorted((b for b in balances if b.net > threshold), key=lambda b: b.net, reverse=True)
