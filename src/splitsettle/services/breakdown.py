from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from splitsettle.models import ZERO, ExpenseRecord, Member, PaymentRecord, member_ids
from splitsettle.services.balances import known_expenses, known_payments, split_shares


@dataclass(slots=True)
class BreakdownLine:
    expense_id: Optional[str]
    description: Optional[str]
    amount: Decimal


@dataclass(slots=True)
class PairBreakdown:
    debtor_id: str
    creditor_id: str
    charges: list[BreakdownLine] = field(default_factory=list)
    credits: list[BreakdownLine] = field(default_factory=list)
    payments_made: list[PaymentRecord] = field(default_factory=list)
    payments_received: list[PaymentRecord] = field(default_factory=list)

    @property
    def total_charged(self) -> Decimal:
        return sum((line.amount for line in self.charges), ZERO)

    @property
    def total_credited(self) -> Decimal:
        return sum((line.amount for line in self.credits), ZERO)

    @property
    def already_paid(self) -> Decimal:
        return sum((payment.amount for payment in self.payments_made), ZERO)

    @property
    def received(self) -> Decimal:
        return sum((payment.amount for payment in self.payments_received), ZERO)

    @property
    def pending(self) -> Decimal:
        """What the debtor still owes the creditor; negative means the reverse."""
        return self.total_charged - self.total_credited - self.already_paid + self.received


def settlement_breakdown(
    members: Sequence[Member],
    expenses: Iterable[ExpenseRecord],
    payments: Iterable[PaymentRecord],
    debtor_id: str,
    creditor_id: str,
) -> PairBreakdown:
    """Explain the direct debt between two members.

    Lists the expenses that created it, the expenses that offset it and
    the payments already made in either direction.
    """
    ids = member_ids(members)
    breakdown = PairBreakdown(debtor_id=debtor_id, creditor_id=creditor_id)
    if debtor_id == creditor_id:
        return breakdown

    for expense in known_expenses(expenses, ids):
        if expense.payer_id == creditor_id:
            share = split_shares(expense, ids).get(debtor_id)
            if share is not None:
                breakdown.charges.append(BreakdownLine(expense.expense_id, expense.description, share))
        elif expense.payer_id == debtor_id:
            share = split_shares(expense, ids).get(creditor_id)
            if share is not None:
                breakdown.credits.append(BreakdownLine(expense.expense_id, expense.description, share))

    for payment in known_payments(payments, ids):
        if payment.from_id == debtor_id and payment.to_id == creditor_id:
            breakdown.payments_made.append(payment)
        elif payment.from_id == creditor_id and payment.to_id == debtor_id:
            breakdown.payments_received.append(payment)

    return breakdown
