"""Ledger error taxonomy.

One exception class per validation failure.  Each carries only its kind:
a stable numeric ``code`` and a snake_case ``reason`` used as a metric
label.  Every error is raised before the ledger mutates anything, so
catching one leaves the ledger exactly as it was.
"""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    NOT_AUTHORIZED = 100
    INVALID_GUIDE_PRINCIPAL = 101
    INVALID_DETAILS = 102
    INVALID_DOC_HASH = 103
    INVALID_EXPIRATION = 104
    CERT_NOT_FOUND = 107
    REGISTRY_NOT_BOUND = 108
    INVALID_SKILLS = 109
    INVALID_LANGUAGES = 110
    INVALID_LEVEL = 111
    INVALID_REGION = 112
    INVALID_CATEGORY = 113
    INVALID_STATUS = 114
    MAX_CERTS_EXCEEDED = 115
    INVALID_PARAMETER = 116
    INVALID_FEE = 118
    INVALID_RENEWAL_PERIOD = 119
    ALREADY_BOUND = 120
    FEE_TRANSFER_FAILED = 121


class LedgerError(Exception):
    code: ErrorCode

    @property
    def reason(self) -> str:
        return self.code.name.lower()


class NotAuthorized(LedgerError):
    code = ErrorCode.NOT_AUTHORIZED


class InvalidGuidePrincipal(LedgerError):
    code = ErrorCode.INVALID_GUIDE_PRINCIPAL


class InvalidDetails(LedgerError):
    code = ErrorCode.INVALID_DETAILS


class InvalidDocHash(LedgerError):
    code = ErrorCode.INVALID_DOC_HASH


class InvalidExpiration(LedgerError):
    code = ErrorCode.INVALID_EXPIRATION


class CertNotFound(LedgerError):
    code = ErrorCode.CERT_NOT_FOUND


class RegistryNotBound(LedgerError):
    code = ErrorCode.REGISTRY_NOT_BOUND


class InvalidSkills(LedgerError):
    code = ErrorCode.INVALID_SKILLS


class InvalidLanguages(LedgerError):
    code = ErrorCode.INVALID_LANGUAGES


class InvalidLevel(LedgerError):
    code = ErrorCode.INVALID_LEVEL


class InvalidRegion(LedgerError):
    code = ErrorCode.INVALID_REGION


class InvalidCategory(LedgerError):
    code = ErrorCode.INVALID_CATEGORY


class InvalidStatus(LedgerError):
    code = ErrorCode.INVALID_STATUS


class MaxCertsExceeded(LedgerError):
    code = ErrorCode.MAX_CERTS_EXCEEDED


class InvalidParameter(LedgerError):
    code = ErrorCode.INVALID_PARAMETER


class InvalidFee(LedgerError):
    code = ErrorCode.INVALID_FEE


class InvalidRenewalPeriod(LedgerError):
    code = ErrorCode.INVALID_RENEWAL_PERIOD


class AlreadyBound(LedgerError):
    code = ErrorCode.ALREADY_BOUND


class FeeTransferFailed(LedgerError):
    code = ErrorCode.FEE_TRANSFER_FAILED
