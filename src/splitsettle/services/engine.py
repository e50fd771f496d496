"""Settlement engine entry points.

:func:`compute_balances` and :func:`compute_settlements` are pure
functions of a (members, expenses, payments) snapshot. Defaults for mode
and threshold come from :func:`splitsettle.config.get_settings`.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Union

from splitsettle.config import get_settings
from splitsettle.logging import get_logger
from splitsettle.models import (
    Balance,
    ExpenseRecord,
    Member,
    Money,
    PaymentRecord,
    Settlement,
    SettlementMode,
    to_decimal,
)
from splitsettle.services import balances as balance_service
from splitsettle.services.debt_graph import direct_settlements
from splitsettle.services.settlement import match_settlements
from splitsettle.services.validation import validate_snapshot

log = get_logger(__name__)


def resolve_mode(simplify_settlements: Optional[bool]) -> SettlementMode:
    """Map a group's "simplify settlements" flag to a mode."""
    if simplify_settlements is None:
        return get_settings().settlement_mode
    return SettlementMode.SIMPLIFIED if simplify_settlements else SettlementMode.DIRECT


def compute_balances(
    members: Sequence[Member],
    expenses: Iterable[ExpenseRecord],
    payments: Iterable[PaymentRecord] = (),
) -> List[Balance]:
    return balance_service.compute_balances(members, expenses, payments)


def compute_settlements(
    members: Sequence[Member],
    expenses: Iterable[ExpenseRecord],
    payments: Iterable[PaymentRecord] = (),
    mode: Union[SettlementMode, str, None] = None,
    threshold: Optional[Money] = None,
) -> List[Settlement]:
    settings = get_settings()
    mode = SettlementMode(mode) if mode is not None else settings.settlement_mode
    threshold = to_decimal(threshold) if threshold is not None else settings.settlement_threshold
    if threshold < 0:
        raise ValueError(f"threshold must be non-negative, got {threshold}")

    members = list(members)
    expenses = list(expenses)
    payments = list(payments)

    for issue in validate_snapshot(members, expenses, payments):
        log.warning("snapshot.issue", issue=issue)

    if not members:
        if expenses or payments:
            log.warning("settlement.no_members", expenses=len(expenses), payments=len(payments))
        return []

    if mode is SettlementMode.DIRECT:
        settlements = direct_settlements(members, expenses, payments, threshold)
    else:
        computed = balance_service.compute_balances(members, expenses, payments)
        settlements = match_settlements(computed, threshold)

    settlements.sort(key=lambda s: (-s.amount, s.from_id, s.to_id))
    log.debug(
        "settlement.computed",
        mode=mode.value,
        members=len(members),
        expenses=len(expenses),
        payments=len(payments),
        settlements=len(settlements),
    )
    return settlements
