"""Public verification of a single certification.

A third party holding a certification id (and, optionally, the document
it was issued against) asks: "is this certification valid right now?"

  valid = status is active
          AND the expiration is still ahead of the current time reference
          AND, when a document fingerprint is presented, it matches the one
              recorded at issuance

The answer is a read-only pydantic model so it can be serialized as-is
for whoever consumes it.  Unknown ids return None; verification is a
lookup, not a validated operation.
"""

from __future__ import annotations

import hmac

from pydantic import BaseModel

from certledger.services.ledger import CertificationLedger


class CertificationVerifyOut(BaseModel):
    id: int
    guide: str
    issuer: str
    details: str
    doc_hash: str
    level: str
    category: str
    region: str
    issuance_date: int
    expiration_date: int
    status: bool
    document_matches: bool | None = None
    valid: bool


def verify_certification(
    ledger: CertificationLedger,
    cert_id: int,
    doc_hash: bytes | None = None,
) -> CertificationVerifyOut | None:
    cert = ledger.get_certification(cert_id)
    if cert is None:
        return None

    valid = cert.is_active_at(ledger.current_time())
    document_matches: bool | None = None
    if doc_hash is not None:
        document_matches = hmac.compare_digest(bytes(doc_hash), cert.doc_hash)
        valid = valid and document_matches

    return CertificationVerifyOut(
        id=cert.id,
        guide=cert.guide,
        issuer=cert.issuer,
        details=cert.details,
        doc_hash=cert.doc_hash.hex(),
        level=cert.level.value,
        category=cert.category.value,
        region=cert.region,
        issuance_date=cert.issuance_date,
        expiration_date=cert.expiration_date,
        status=cert.status,
        document_matches=document_matches,
        valid=valid,
    )
