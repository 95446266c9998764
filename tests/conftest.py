from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Ensure repo root is on sys.path so `import certledger` works under pytest.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from certledger.services.authority_registry import InMemoryAuthorityRegistry  # noqa: E402
from certledger.services.clock import ManualClock  # noqa: E402
from certledger.services.fee_transfer import InMemoryFeeTransfer  # noqa: E402
from certledger.services.ledger import CertificationLedger  # noqa: E402

AUTHORITY = "ST1TEST"
REGISTRY = "ST2TEST"
GUIDE = "ST3GUIDE"
OUTSIDER = "ST4FAKE"
DOC_HASH = bytes(32)


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def registry() -> InMemoryAuthorityRegistry:
    return InMemoryAuthorityRegistry([AUTHORITY])


@pytest.fixture
def fees() -> InMemoryFeeTransfer:
    return InMemoryFeeTransfer()


@pytest.fixture
def ledger(
    registry: InMemoryAuthorityRegistry,
    fees: InMemoryFeeTransfer,
    clock: ManualClock,
) -> CertificationLedger:
    """Fresh ledger with default configuration and no registry bound."""
    return CertificationLedger(
        authority_registry=registry,
        fee_transfer=fees,
        clock=clock,
    )


@pytest.fixture
def bound_ledger(ledger: CertificationLedger) -> CertificationLedger:
    """Ledger whose authority registry is bound to REGISTRY."""
    ledger.bind_authority_registry(REGISTRY)
    return ledger


def valid_issue_args(**overrides: object) -> dict[str, object]:
    args: dict[str, object] = {
        "caller": AUTHORITY,
        "guide": GUIDE,
        "details": "Certified History Guide",
        "doc_hash": DOC_HASH,
        "expiration": 1000,
        "skills": ["history", "archaeology"],
        "languages": ["english", "french"],
        "level": "expert",
        "region": "Europe",
        "category": "history",
        "renewal_period": 180,
    }
    args.update(overrides)
    return args


@pytest.fixture
def issue(bound_ledger: CertificationLedger) -> Callable[..., int]:
    """Issue on the bound ledger with valid defaults; keyword args override."""

    def _issue(**overrides: object) -> int:
        return bound_ledger.issue_certification(**valid_issue_args(**overrides))  # type: ignore[arg-type]

    return _issue
