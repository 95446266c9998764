from __future__ import annotations

import pytest

from certledger.core import errors
from certledger.core.errors import ErrorCode, LedgerError


def _error_classes() -> list[type[LedgerError]]:
    return [
        obj
        for obj in vars(errors).values()
        if isinstance(obj, type) and issubclass(obj, LedgerError) and obj is not LedgerError
    ]


def test_every_error_code_has_exactly_one_class() -> None:
    codes = [cls.code for cls in _error_classes()]
    assert sorted(codes) == sorted(ErrorCode)


def test_codes_match_published_values() -> None:
    assert errors.NotAuthorized.code == 100
    assert errors.InvalidDocHash.code == 103
    assert errors.CertNotFound.code == 107
    assert errors.RegistryNotBound.code == 108
    assert errors.MaxCertsExceeded.code == 115
    assert errors.InvalidRenewalPeriod.code == 119
    assert errors.AlreadyBound.code == 120


def test_reason_is_snake_case_kind() -> None:
    assert errors.MaxCertsExceeded().reason == "max_certs_exceeded"
    assert errors.InvalidDocHash().reason == "invalid_doc_hash"


def test_errors_are_catchable_as_ledger_error() -> None:
    with pytest.raises(LedgerError) as exc_info:
        raise errors.InvalidLevel()
    assert exc_info.value.code is ErrorCode.INVALID_LEVEL
