"""Account balance ("total") entity."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from bilancio.domain.ledger.value_objects import AccountRef


@dataclass(frozen=True)
class Total:
    """A named balance bucket such as "Checking" or "Cash".

    Unlike transaction amounts a balance may be negative (overdraft).
    """

    id: int
    amount: Decimal
    description: str
    can_delete: bool = True

    def as_ref(self) -> AccountRef:
        return AccountRef(id=self.id, name=self.description)
