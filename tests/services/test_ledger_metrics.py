"""Ledger metrics are recorded at the point of action.

Prometheus counters live in the global registry and only go up, so each
test reads the value before acting and asserts on the difference.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest
from prometheus_client import REGISTRY

from certledger.core.errors import InvalidDocHash, RegistryNotBound
from certledger.services.ledger import CertificationLedger
from tests.conftest import AUTHORITY

Issue = Callable[..., int]


def _get_sample(name: str, labels: dict | None = None) -> float:
    value = REGISTRY.get_sample_value(name, labels=labels or {})
    return value if value is not None else 0.0


def test_issuance_increments_issued_and_fees(issue: Issue) -> None:
    issued_before = _get_sample("certledger_certifications_issued_total")
    fees_before = _get_sample("certledger_fees_collected_total")
    issue()
    assert _get_sample("certledger_certifications_issued_total") - issued_before == 1
    assert _get_sample("certledger_fees_collected_total") - fees_before == 500


def test_rejection_labeled_by_operation_and_reason(issue: Issue) -> None:
    labels = {"operation": "issue_certification", "reason": "invalid_doc_hash"}
    before = _get_sample("certledger_rejections_total", labels)
    with pytest.raises(InvalidDocHash):
        issue(doc_hash=b"")
    assert _get_sample("certledger_rejections_total", labels) - before == 1


def test_rejected_issuance_does_not_count_as_issued(issue: Issue) -> None:
    before = _get_sample("certledger_certifications_issued_total")
    with pytest.raises(InvalidDocHash):
        issue(doc_hash=b"")
    assert _get_sample("certledger_certifications_issued_total") == before


def test_update_increments_counter(issue: Issue, bound_ledger: CertificationLedger) -> None:
    issue()
    before = _get_sample("certledger_certification_updates_total")
    bound_ledger.update_certification(AUTHORITY, 0, "Amended", 2000)
    assert _get_sample("certledger_certification_updates_total") - before == 1


def test_config_changes_counted(ledger: CertificationLedger) -> None:
    labels = {"setting": "issuance_fee"}
    before = _get_sample("certledger_config_changes_total", labels)
    with pytest.raises(RegistryNotBound):
        ledger.set_issuance_fee(10)
    ledger.bind_authority_registry("ST2TEST")
    ledger.set_issuance_fee(10)
    assert _get_sample("certledger_config_changes_total", labels) - before == 1


def test_rejection_logged_with_context(
    issue: Issue, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level("WARNING", logger="certledger.services.ledger"):
        with pytest.raises(InvalidDocHash):
            issue(doc_hash=b"")
    record = next(r for r in caplog.records if "Rejected" in r.getMessage())
    assert record.operation == "issue_certification"  # type: ignore[attr-defined]
    assert record.error_code == 103  # type: ignore[attr-defined]
    assert record.reason == "invalid_doc_hash"  # type: ignore[attr-defined]
    assert record.caller == AUTHORITY  # type: ignore[attr-defined]
