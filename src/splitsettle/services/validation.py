"""Snapshot inspection.

:func:`validate_snapshot` reports records the engine will normalize or
drop. Issues are human-readable strings; an empty list means the snapshot
is clean. Nothing here raises: the engine computes a result either way.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from splitsettle.models import ExpenseRecord, Member, PaymentRecord


def validate_snapshot(
    members: Sequence[Member],
    expenses: Iterable[ExpenseRecord],
    payments: Iterable[PaymentRecord],
) -> list[str]:
    issues: list[str] = []
    known: set[str] = set()

    for member in members:
        if member.id in known:
            issues.append(f"Duplicate member id {member.id!r}.")
        known.add(member.id)

    expenses = list(expenses)
    if expenses and not known:
        issues.append(f"{len(expenses)} expense(s) recorded for a group with no members.")

    for index, expense in enumerate(expenses):
        label = expense.expense_id or f"#{index}"
        if expense.amount <= 0:
            issues.append(f"Expense {label} has non-positive amount {expense.amount}.")
        if known and expense.payer_id not in known:
            issues.append(f"Expense {label} payer {expense.payer_id!r} is not a member; expense ignored.")
        unknown = sorted(expense.participant_ids - known)
        if known and unknown:
            issues.append(f"Expense {label} names non-members {', '.join(unknown)}; they are left out of the split.")
            if not expense.participant_ids & known:
                issues.append(f"Expense {label} has no member participants; split among everyone.")

    for index, payment in enumerate(payments):
        label = payment.payment_id or f"#{index}"
        if payment.amount <= 0:
            issues.append(f"Payment {label} has non-positive amount {payment.amount}.")
        if payment.from_id == payment.to_id:
            issues.append(f"Payment {label} is from {payment.from_id!r} to themselves; ignored.")
        for member_id in dict.fromkeys((payment.from_id, payment.to_id)):
            if member_id not in known:
                issues.append(f"Payment {label} references non-member {member_id!r}; payment ignored.")

    return issues
