"""Build engine records from document-store rows."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable, Mapping

from splitsettle.models import ExpenseRecord, Member, PaymentRecord, to_decimal


class RecordError(ValueError):
    pass


def _pick(row: Mapping[str, Any], *keys: str, required: bool = True) -> Any:
    for key in keys:
        value = row.get(key)
        if value is not None:
            return value
    if required:
        raise RecordError(f"Missing field {' / '.join(keys)} in {dict(row)!r}")
    return None


def _amount(row: Mapping[str, Any]) -> Decimal:
    value = _pick(row, "amount")
    try:
        return to_decimal(value)
    except (TypeError, ValueError) as exc:
        raise RecordError(f"Invalid amount {value!r}") from exc


def members_from_rows(rows: Iterable[Mapping[str, Any]]) -> list[Member]:
    members: list[Member] = []
    for row in rows:
        members.append(
            Member(
                id=str(_pick(row, "id")),
                display_name=_pick(row, "name", "display_name", required=False) or "",
            )
        )
    return members


def expenses_from_rows(rows: Iterable[Mapping[str, Any]]) -> list[ExpenseRecord]:
    expenses: list[ExpenseRecord] = []
    for row in rows:
        participants = _pick(row, "splitAmong", "participant_ids", required=False) or ()
        expense_id = _pick(row, "id", required=False)
        expenses.append(
            ExpenseRecord(
                payer_id=str(_pick(row, "userId", "payer_id")),
                amount=_amount(row),
                participant_ids=frozenset(str(p) for p in participants),
                expense_id=str(expense_id) if expense_id is not None else None,
                description=row.get("description"),
            )
        )
    return expenses


def payments_from_rows(rows: Iterable[Mapping[str, Any]]) -> list[PaymentRecord]:
    payments: list[PaymentRecord] = []
    for row in rows:
        payment_id = _pick(row, "id", required=False)
        payments.append(
            PaymentRecord(
                from_id=str(_pick(row, "fromUserId", "from_id")),
                to_id=str(_pick(row, "toUserId", "to_id")),
                amount=_amount(row),
                payment_id=str(payment_id) if payment_id is not None else None,
            )
        )
    return payments
