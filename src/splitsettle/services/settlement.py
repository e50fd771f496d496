from __future__ import annotations

from decimal import Decimal
from typing import Iterable, List

from splitsettle.models import DEFAULT_THRESHOLD, Balance, Settlement, round_amount


def match_settlements(balances: Iterable[Balance], threshold: Decimal = DEFAULT_THRESHOLD) -> List[Settlement]:
    """Greedily pair the largest debtor with the largest creditor.

    Not guaranteed to find the minimum number of transfers.
    """
    if threshold < 0:
        raise ValueError(f"threshold must be non-negative, got {threshold}")

    creditors: list[tuple[str, Decimal]] = []
    debtors: list[tuple[str, Decimal]] = []

    for balance in balances:
        net = balance.net
        if net > threshold:
            creditors.append((balance.member_id, net))
        elif net < -threshold:
            debtors.append((balance.member_id, -net))

    creditors.sort(key=lambda x: x[1], reverse=True)
    debtors.sort(key=lambda x: x[1], reverse=True)

    settlements: list[Settlement] = []
    i, j = 0, 0

    while i < len(debtors) and j < len(creditors):
        debt_id, debt_amount = debtors[i]
        cred_id, cred_amount = creditors[j]

        amount = min(debt_amount, cred_amount)
        if amount > threshold:
            rounded = round_amount(amount)
            if rounded >= 1:
                settlements.append(Settlement(from_id=debt_id, to_id=cred_id, amount=rounded))

        debt_amount -= amount
        cred_amount -= amount

        if debt_amount <= threshold:
            i += 1
        else:
            debtors[i] = (debt_id, debt_amount)

        if cred_amount <= threshold:
            j += 1
        else:
            creditors[j] = (cred_id, cred_amount)

    return settlements
