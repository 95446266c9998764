from __future__ import annotations

from typing import Protocol

from certledger.models.certification import Certification, CertificationUpdate


class CertificationRepo(Protocol):
    def get(self, cert_id: int) -> Certification | None: ...
    def add(self, cert: Certification) -> None: ...
    def replace(self, cert: Certification) -> None: ...
    def ids_for_guide(self, guide: str) -> list[int]: ...
    def get_update(self, cert_id: int) -> CertificationUpdate | None: ...
    def set_update(self, cert_id: int, update: CertificationUpdate) -> None: ...


class InMemoryCertificationRepo:
    """Certifications, the guide index and the audit slots, kept in step.

    The guide index is derived data: every id in it belongs to a stored
    certification for that guide, in issuance order.
    """

    def __init__(self) -> None:
        self._by_id: dict[int, Certification] = {}
        self._by_guide: dict[str, list[int]] = {}
        self._updates: dict[int, CertificationUpdate] = {}

    def get(self, cert_id: int) -> Certification | None:
        return self._by_id.get(cert_id)

    def add(self, cert: Certification) -> None:
        if cert.id in self._by_id:
            raise ValueError("certification id already exists")
        self._by_id[cert.id] = cert
        self._by_guide.setdefault(cert.guide, []).append(cert.id)

    def replace(self, cert: Certification) -> None:
        existing = self._by_id.get(cert.id)
        if existing is None:
            raise KeyError("certification not found")
        if existing.guide != cert.guide:
            raise ValueError("guide of a certification cannot change")
        self._by_id[cert.id] = cert

    def ids_for_guide(self, guide: str) -> list[int]:
        return list(self._by_guide.get(guide, []))

    def get_update(self, cert_id: int) -> CertificationUpdate | None:
        return self._updates.get(cert_id)

    def set_update(self, cert_id: int, update: CertificationUpdate) -> None:
        if cert_id not in self._by_id:
            raise KeyError("certification not found")
        # Single slot: the previous amendment is dropped.
        self._updates[cert_id] = update
