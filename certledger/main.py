from __future__ import annotations

import logging

from certledger.core.config import SETTINGS, Settings
from certledger.core.logging import setup_logging
from certledger.models.ledger_config import LedgerConfig
from certledger.services.authority_registry import (
    AuthorityRegistry,
    InMemoryAuthorityRegistry,
)
from certledger.services.clock import Clock, ManualClock
from certledger.services.fee_transfer import FeeTransfer, InMemoryFeeTransfer
from certledger.services.ledger import CertificationLedger

logger = logging.getLogger(__name__)


def build_ledger(
    *,
    settings: Settings = SETTINGS,
    authority_registry: AuthorityRegistry | None = None,
    fee_transfer: FeeTransfer | None = None,
    clock: Clock | None = None,
) -> CertificationLedger:
    """Configure logging and assemble a ledger.

    Collaborators left as None get their in-memory implementation, which
    is what local runs and tests want.  The ledger's configuration starts
    from the defaults in settings.
    """
    setup_logging(settings.log_level, json_format=settings.log_json)

    ledger = CertificationLedger(
        authority_registry=(
            authority_registry
            if authority_registry is not None
            else InMemoryAuthorityRegistry()
        ),
        fee_transfer=fee_transfer if fee_transfer is not None else InMemoryFeeTransfer(),
        clock=clock if clock is not None else ManualClock(),
        config=LedgerConfig.from_settings(settings),
    )

    logger.info(
        "certledger ready  env=%s log_level=%s max_certs_per_guide=%d issuance_fee=%d",
        settings.app_env,
        settings.log_level,
        settings.max_certs_per_guide,
        settings.issuance_fee,
    )
    return ledger
