"""Authority registry collaborator.

The ledger does not decide who may issue certifications.  It asks a
registry: "is this identity a registered authority?"  In production that
registry is a separate contract or service; the ledger only sees this
Protocol.  InMemoryAuthorityRegistry backs tests and local wiring.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class AuthorityRegistry(Protocol):
    def is_registered_authority(self, identity: str) -> bool: ...


class InMemoryAuthorityRegistry:
    def __init__(self, authorities: Iterable[str] = ()) -> None:
        self._authorities: set[str] = set(authorities)

    def is_registered_authority(self, identity: str) -> bool:
        return identity in self._authorities

    def register(self, identity: str) -> None:
        if not identity:
            raise ValueError("authority identity must be non-empty")
        self._authorities.add(identity)
        logger.info("Registered authority=%s", identity)

    def unregister(self, identity: str) -> bool:
        if identity not in self._authorities:
            return False
        self._authorities.discard(identity)
        logger.info("Unregistered authority=%s", identity)
        return True
