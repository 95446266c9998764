from __future__ import annotations

from dataclasses import dataclass

from certledger.core.config import Settings

DEFAULT_MAX_CERTS_PER_GUIDE = 5
DEFAULT_ISSUANCE_FEE = 500


@dataclass(frozen=True, slots=True)
class LedgerConfig:
    """Mutable system parameters of one ledger, replaced wholesale on change.

    next_cert_id doubles as the total-issued count.
    authority_registry_contract is write-once: None until bound.
    """

    next_cert_id: int = 0
    max_certs_per_guide: int = DEFAULT_MAX_CERTS_PER_GUIDE
    issuance_fee: int = DEFAULT_ISSUANCE_FEE
    authority_registry_contract: str | None = None

    @property
    def is_bound(self) -> bool:
        return self.authority_registry_contract is not None

    @staticmethod
    def from_settings(settings: Settings) -> LedgerConfig:
        return LedgerConfig(
            max_certs_per_guide=settings.max_certs_per_guide,
            issuance_fee=settings.issuance_fee,
        )
