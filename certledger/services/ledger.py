"""Certification ledger: configuration, issuance, amendment and lookup.

HOW AN OPERATION RUNS
-----------------------
Every mutating entry point follows the same shape:

  1. VALIDATE.  A fixed chain of checks, evaluated in order, stopping at
     the first failure.  The order is part of the contract: when an input
     breaks two rules, the caller always sees the same error.
  2. APPLY.  Only after every check passes does the ledger touch state:
     fee transfer first, then record write, index append, counter bump.

A failure in step 1 raises a LedgerError and nothing has changed.  The
one collaborator that can fail in step 2 (the fee transfer) runs before
any write, so a refused transfer also leaves the ledger untouched.

Operations are synchronous and run to completion.  The ledger is the only
writer of its repo and its LedgerConfig.

WHO MAY DO WHAT
-----------------
  issue:   any identity the authority registry recognizes, once a
           registry identity is bound.  A caller cannot certify itself.
  update:  only the original issuer of the record, while status is True.
  setters: anyone, once a registry identity is bound.  No further check.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace
from typing import NoReturn

from certledger.core import metrics
from certledger.core.errors import (
    AlreadyBound,
    CertNotFound,
    FeeTransferFailed,
    InvalidCategory,
    InvalidDetails,
    InvalidDocHash,
    InvalidExpiration,
    InvalidFee,
    InvalidGuidePrincipal,
    InvalidLanguages,
    InvalidLevel,
    InvalidParameter,
    InvalidRegion,
    InvalidRenewalPeriod,
    InvalidSkills,
    InvalidStatus,
    LedgerError,
    MaxCertsExceeded,
    NotAuthorized,
    RegistryNotBound,
)
from certledger.models.certification import (
    CertCategory,
    Certification,
    CertificationUpdate,
    CertLevel,
)
from certledger.models.ledger_config import LedgerConfig
from certledger.repos.certification_repo import (
    CertificationRepo,
    InMemoryCertificationRepo,
)
from certledger.services.authority_registry import AuthorityRegistry
from certledger.services.clock import Clock
from certledger.services.fee_transfer import FeeTransfer

logger = logging.getLogger(__name__)

DOC_HASH_LENGTH = 32
MAX_DETAILS_LENGTH = 200
MAX_REGION_LENGTH = 100
MAX_SKILLS = 10
MAX_LANGUAGES = 5
MIN_RENEWAL_PERIOD = 30
MAX_RENEWAL_PERIOD = 365

_LEVELS = tuple(level.value for level in CertLevel)
_CATEGORIES = tuple(category.value for category in CertCategory)


def _valid_details(details: str) -> bool:
    return bool(details) and len(details) <= MAX_DETAILS_LENGTH


def _valid_doc_hash(doc_hash: bytes) -> bool:
    return (
        isinstance(doc_hash, (bytes, bytearray, memoryview))
        and len(doc_hash) == DOC_HASH_LENGTH
    )


class CertificationLedger:
    def __init__(
        self,
        *,
        authority_registry: AuthorityRegistry,
        fee_transfer: FeeTransfer,
        clock: Clock,
        config: LedgerConfig | None = None,
        repo: CertificationRepo | None = None,
    ) -> None:
        self._registry = authority_registry
        self._fees = fee_transfer
        self._clock = clock
        self._config = config if config is not None else LedgerConfig()
        self._repo: CertificationRepo = (
            repo if repo is not None else InMemoryCertificationRepo()
        )

    @property
    def config(self) -> LedgerConfig:
        return self._config

    def _reject(
        self,
        operation: str,
        error: type[LedgerError],
        **context: object,
    ) -> NoReturn:
        exc = error()
        metrics.REJECTIONS.labels(operation=operation, reason=exc.reason).inc()
        logger.warning(
            "Rejected %s reason=%s",
            operation,
            exc.reason,
            extra={
                "operation": operation,
                "error_code": int(exc.code),
                "reason": exc.reason,
                **context,
            },
        )
        raise exc

    # ------------------------------------------------------------------
    # Configuration store
    # ------------------------------------------------------------------

    def bind_authority_registry(self, identity: str) -> bool:
        if self._config.is_bound:
            self._reject("bind_authority_registry", AlreadyBound)
        if not identity:
            self._reject("bind_authority_registry", InvalidParameter)

        self._config = replace(self._config, authority_registry_contract=identity)
        metrics.CONFIG_CHANGES.labels(setting="authority_registry").inc()
        logger.info("Bound authority registry=%s", identity)
        return True

    def set_max_certs_per_guide(self, new_max: int) -> bool:
        if new_max <= 0:
            self._reject("set_max_certs_per_guide", InvalidParameter)
        if not self._config.is_bound:
            self._reject("set_max_certs_per_guide", RegistryNotBound)

        self._config = replace(self._config, max_certs_per_guide=new_max)
        metrics.CONFIG_CHANGES.labels(setting="max_certs_per_guide").inc()
        logger.info("Set max_certs_per_guide=%d", new_max)
        return True

    def set_issuance_fee(self, new_fee: int) -> bool:
        if new_fee < 0:
            self._reject("set_issuance_fee", InvalidFee)
        if not self._config.is_bound:
            self._reject("set_issuance_fee", RegistryNotBound)

        self._config = replace(self._config, issuance_fee=new_fee)
        metrics.CONFIG_CHANGES.labels(setting="issuance_fee").inc()
        logger.info("Set issuance_fee=%d", new_fee)
        return True

    # ------------------------------------------------------------------
    # Issuance engine
    # ------------------------------------------------------------------

    def issue_certification(
        self,
        caller: str,
        guide: str,
        details: str,
        doc_hash: bytes,
        expiration: int,
        skills: Sequence[str],
        languages: Sequence[str],
        level: str,
        region: str,
        category: str,
        renewal_period: int,
    ) -> int:
        """Validate, charge the issuance fee and record a new certification.

        Returns the new certification id.  Raises the LedgerError of the
        first failing check; see the module docstring for the ordering
        guarantee.
        """
        op = "issue_certification"
        ctx = {"caller": caller, "guide": guide}
        now = self._clock.current_time()
        config = self._config

        if len(self._repo.ids_for_guide(guide)) >= config.max_certs_per_guide:
            self._reject(op, MaxCertsExceeded, **ctx)
        if guide == caller:
            self._reject(op, InvalidGuidePrincipal, **ctx)
        if not _valid_details(details):
            self._reject(op, InvalidDetails, **ctx)
        if not _valid_doc_hash(doc_hash):
            self._reject(op, InvalidDocHash, **ctx)
        if expiration <= now:
            self._reject(op, InvalidExpiration, **ctx)
        if len(skills) > MAX_SKILLS:
            self._reject(op, InvalidSkills, **ctx)
        if len(languages) > MAX_LANGUAGES:
            self._reject(op, InvalidLanguages, **ctx)
        if level not in _LEVELS:
            self._reject(op, InvalidLevel, **ctx)
        if not region or len(region) > MAX_REGION_LENGTH:
            self._reject(op, InvalidRegion, **ctx)
        if category not in _CATEGORIES:
            self._reject(op, InvalidCategory, **ctx)
        if not MIN_RENEWAL_PERIOD <= renewal_period <= MAX_RENEWAL_PERIOD:
            self._reject(op, InvalidRenewalPeriod, **ctx)
        if not self._registry.is_registered_authority(caller):
            self._reject(op, NotAuthorized, **ctx)
        if config.authority_registry_contract is None:
            self._reject(op, RegistryNotBound, **ctx)

        # The record is complete before any fee moves.
        cert_id = config.next_cert_id
        cert = Certification.new(
            id=cert_id,
            guide=guide,
            details=details,
            doc_hash=bytes(doc_hash),
            issued_at=now,
            expiration=expiration,
            issuer=caller,
            skills=tuple(skills),
            languages=tuple(languages),
            level=CertLevel(level),
            region=region,
            category=CertCategory(category),
            renewal_period=renewal_period,
        )

        recipient = config.authority_registry_contract
        if not self._fees.transfer(config.issuance_fee, caller, recipient):
            self._reject(op, FeeTransferFailed, **ctx)
        metrics.FEES_COLLECTED.inc(config.issuance_fee)

        self._repo.add(cert)
        self._config = replace(config, next_cert_id=cert_id + 1)

        metrics.CERTS_ISSUED.inc()
        logger.info(
            "Issued certification id=%d guide=%s issuer=%s fee=%d",
            cert_id,
            guide,
            caller,
            config.issuance_fee,
            extra={"operation": op, "cert_id": cert_id, **ctx},
        )
        return cert_id

    # ------------------------------------------------------------------
    # Amendment engine
    # ------------------------------------------------------------------

    def update_certification(
        self,
        caller: str,
        cert_id: int,
        new_details: str,
        new_expiration: int,
    ) -> bool:
        op = "update_certification"
        ctx = {"caller": caller, "cert_id": cert_id}
        now = self._clock.current_time()

        cert = self._repo.get(cert_id)
        if cert is None:
            self._reject(op, CertNotFound, **ctx)
        if cert.issuer != caller:
            self._reject(op, NotAuthorized, **ctx)
        if not cert.status:
            self._reject(op, InvalidStatus, **ctx)
        if not _valid_details(new_details):
            self._reject(op, InvalidDetails, **ctx)
        if new_expiration <= now:
            self._reject(op, InvalidExpiration, **ctx)

        self._repo.replace(
            replace(cert, details=new_details, expiration_date=new_expiration)
        )
        self._repo.set_update(
            cert_id,
            CertificationUpdate(
                update_details=new_details,
                update_expiration=new_expiration,
                update_timestamp=now,
                updater=caller,
            ),
        )

        metrics.CERT_UPDATES.inc()
        logger.info(
            "Updated certification id=%d expiration=%d",
            cert_id,
            new_expiration,
            extra={"operation": op, **ctx},
        )
        return True

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_certification(self, cert_id: int) -> Certification | None:
        return self._repo.get(cert_id)

    def get_cert_update(self, cert_id: int) -> CertificationUpdate | None:
        return self._repo.get_update(cert_id)

    def get_certs_by_guide(self, guide: str) -> list[int]:
        return self._repo.ids_for_guide(guide)

    def get_cert_count(self) -> int:
        return self._config.next_cert_id

    def current_time(self) -> int:
        return self._clock.current_time()
