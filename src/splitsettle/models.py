from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Iterable, Optional, Union

Money = Union[Decimal, int, float, str]

DEFAULT_THRESHOLD = Decimal("0.01")
ZERO = Decimal("0")


class SettlementMode(str, Enum):
    DIRECT = "direct"
    SIMPLIFIED = "simplified"


def to_decimal(value: Money) -> Decimal:
    """Coerce a money value to a finite Decimal.

    Floats go through ``str`` so that ``0.1`` stays ``Decimal("0.1")``.
    """
    if isinstance(value, bool):
        raise TypeError("amount must be a number, not bool")
    if isinstance(value, float):
        value = str(value)
    try:
        amount = value if isinstance(value, Decimal) else Decimal(value)
    except (InvalidOperation, TypeError) as exc:
        raise ValueError(f"invalid amount: {value!r}") from exc
    if not amount.is_finite():
        raise ValueError(f"amount must be finite: {value!r}")
    return amount



@dataclass(slots=True, frozen=True)
class Member:
    id: str
    display_name: str = ""


@dataclass(slots=True, frozen=True)
class ExpenseRecord:
    payer_id: str
    amount: Decimal
    participant_ids: frozenset[str] = field(default_factory=frozenset)
    expense_id: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_decimal(self.amount))
        object.__setattr__(self, "participant_ids", frozenset(self.participant_ids))


@dataclass(slots=True, frozen=True)
class PaymentRecord:
    from_id: str
    to_id: str
    amount: Decimal
    payment_id: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_decimal(self.amount))


@dataclass(slots=True)
class Balance:
    member_id: str
    paid: Decimal = ZERO
    share: Decimal = ZERO
    adjustment: Decimal = ZERO

    @property
    def net(self) -> Decimal:
        return self.paid - self.share + self.adjustment


@dataclass(slots=True, frozen=True)
class Settlement:
    from_id: str
    to_id: str
    amount: int


def round_amount(amount: Decimal) -> int:
    return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def member_ids(members: Iterable[Member]) -> list[str]:
    """Member ids in input order, first occurrence wins."""
    seen: dict[str, None] = {}
    for member in members:
        seen.setdefault(member.id, None)
    return list(seen)
