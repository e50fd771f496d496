"""Balances and settlement plans for shared group expenses."""

from splitsettle.models import (
    Balance,
    ExpenseRecord,
    Member,
    PaymentRecord,
    Settlement,
    SettlementMode,
)
from splitsettle.services.breakdown import PairBreakdown, settlement_breakdown
from splitsettle.services.engine import compute_balances, compute_settlements, resolve_mode

__all__ = [
    "Balance",
    "ExpenseRecord",
    "Member",
    "PairBreakdown",
    "PaymentRecord",
    "Settlement",
    "SettlementMode",
    "compute_balances",
    "compute_settlements",
    "resolve_mode",
    "settlement_breakdown",
]
