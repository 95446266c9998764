"""Fee transfer collaborator.

Issuance charges a fee that moves from the issuing authority to the bound
registry identity.  The transfer is all-or-nothing: it either happens in
full and returns True, or nothing moves and it returns False.  The ledger
checks the result before writing anything.

InMemoryFeeTransfer records every successful transfer in order.  Balances
are optional: without them every transfer succeeds, with them a sender
that cannot cover the amount is refused.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FeeTransferRecord:
    amount: int
    sender: str
    recipient: str


@runtime_checkable
class FeeTransfer(Protocol):
    def transfer(self, amount: int, sender: str, recipient: str) -> bool: ...


class InMemoryFeeTransfer:
    def __init__(self, balances: Mapping[str, int] | None = None) -> None:
        self.transfers: list[FeeTransferRecord] = []
        self._balances: dict[str, int] | None = (
            dict(balances) if balances is not None else None
        )

    def balance_of(self, identity: str) -> int | None:
        if self._balances is None:
            return None
        return self._balances.get(identity, 0)

    def transfer(self, amount: int, sender: str, recipient: str) -> bool:
        if amount < 0:
            logger.warning("Refused negative transfer amount=%d", amount)
            return False

        if self._balances is not None:
            available = self._balances.get(sender, 0)
            if available < amount:
                logger.warning(
                    "Refused transfer sender=%s amount=%d available=%d",
                    sender,
                    amount,
                    available,
                )
                return False
            self._balances[sender] = available - amount
            self._balances[recipient] = self._balances.get(recipient, 0) + amount

        self.transfers.append(
            FeeTransferRecord(amount=amount, sender=sender, recipient=recipient)
        )
        return True
