"""Ledger metrics using the Prometheus client library.

Every metric the ledger records is defined here, in one inventory.  The
ledger service imports them and increments at the point of action.

  COUNTERS only go up.  Issued certifications, amendments, rejections and
  collected fees are all cumulative, so dashboards read them as rates:
    rate(certledger_rejections_total{reason="max_certs_exceeded"}[1h])

  Rejections are labeled by operation and by error kind so a spike in
  one validation rule is visible without reading logs.

Counters live in the global default registry and cannot be reset, so
tests assert on deltas (value after minus value before).
"""

from __future__ import annotations

from prometheus_client import Counter

CERTS_ISSUED = Counter(
    "certledger_certifications_issued_total",
    "Certifications successfully issued",
)

CERT_UPDATES = Counter(
    "certledger_certification_updates_total",
    "Certification amendments successfully applied",
)

REJECTIONS = Counter(
    "certledger_rejections_total",
    "Ledger operations rejected by validation, by operation and error kind",
    ["operation", "reason"],
)

FEES_COLLECTED = Counter(
    "certledger_fees_collected_total",
    "Issuance fees transferred to the bound authority registry",
)

CONFIG_CHANGES = Counter(
    "certledger_config_changes_total",
    "Successful configuration mutations",
    ["setting"],  # authority_registry | max_certs_per_guide | issuance_fee
)
