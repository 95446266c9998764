from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CertLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"


class CertCategory(str, Enum):
    HISTORY = "history"
    ART = "art"
    NATURE = "nature"
    FOOD = "food"


@dataclass(frozen=True, slots=True)
class Certification:
    """A tour-guide certification recorded by a registered authority.

    id, guide, doc_hash, issuance_date and issuer are fixed at issuance.
    Only details and expiration_date change, through an amendment by the
    original issuer.  status=False blocks amendment.
    """

    id: int
    guide: str
    details: str
    doc_hash: bytes
    issuance_date: int
    expiration_date: int
    issuer: str
    skills: tuple[str, ...]
    languages: tuple[str, ...]
    level: CertLevel
    region: str
    category: CertCategory
    renewal_period: int
    status: bool = True

    @staticmethod
    def new(
        *,
        id: int,
        guide: str,
        details: str,
        doc_hash: bytes,
        issued_at: int,
        expiration: int,
        issuer: str,
        skills: tuple[str, ...],
        languages: tuple[str, ...],
        level: CertLevel,
        region: str,
        category: CertCategory,
        renewal_period: int,
    ) -> Certification:
        return Certification(
            id=id,
            guide=guide,
            details=details,
            doc_hash=doc_hash,
            issuance_date=issued_at,
            expiration_date=expiration,
            issuer=issuer,
            skills=skills,
            languages=languages,
            level=level,
            region=region,
            category=category,
            renewal_period=renewal_period,
            status=True,
        )

    def is_active_at(self, now: int) -> bool:
        return self.status and self.expiration_date > now


@dataclass(frozen=True, slots=True)
class CertificationUpdate:
    """Latest amendment of a certification.  One slot per id, overwritten."""

    update_details: str
    update_expiration: int
    update_timestamp: int
    updater: str
