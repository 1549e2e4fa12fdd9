"""
KYC client record schemas.

A client record holds identity, PEP, tax/FATCA and risk flag data.
The final PEP flag is always resolved from the estimated flag and
the operator override, never taken from input.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from kyclens.fincrime.pep import PepOverride
from kyclens.fincrime.risk_scoring import FatcaStatus, RiskLevel, SanctionsStatus

TIN_PATTERN = re.compile(r"^[A-Za-z0-9\- ]{5,30}$")


class KycStatus(str, Enum):
    """Review status of a KYC record."""

    PENDING = "pending"
    APPROVED = "approved"
    REQUIRES_UPDATE = "requires_update"
    REJECTED = "rejected"


def _check_tin(v: Optional[str]) -> Optional[str]:
    if v is None or v == "":
        return v
    if not TIN_PATTERN.match(v):
        raise ValueError("Invalid TIN format")
    return v


class KycClientBase(BaseModel):
    """Fields shared by client input and stored records."""

    # Identity
    full_name: str = Field(..., min_length=2)
    date_of_birth: str = Field(..., min_length=4)
    place_of_birth: str = ""
    nationality: str = Field(..., min_length=2)
    residency_country: str = Field(..., min_length=2)

    # PEP
    pep_original: bool = False
    pep_override: PepOverride = PepOverride.NONE
    pep_risk_score: int = Field(default=0, ge=0, le=100)
    pep_role: str = ""
    pep_country: str = ""

    # Tax/FATCA
    tin: Optional[str] = None
    tin_country: str = ""
    fatca_status: FatcaStatus = FatcaStatus.NON_US_PERSON
    giin: str = ""
    has_us_indicia: bool = False

    # Risk flags
    red_flags: list[str] = Field(default_factory=list)
    red_flags_notes: str = ""
    sanctions_status: SanctionsStatus = SanctionsStatus.NONE

    # Review
    kyc_status: KycStatus = KycStatus.PENDING
    last_reviewed_at: str = ""
    next_review_due_at: str = ""

    @field_validator("tin")
    @classmethod
    def validate_tin(cls, v: Optional[str]) -> Optional[str]:
        return _check_tin(v)


class KycClientCreate(KycClientBase):
    """Schema for creating a client record."""


class KycClientUpdate(BaseModel):
    """Schema for a partial update; only fields sent are applied."""

    full_name: Optional[str] = Field(None, min_length=2)
    date_of_birth: Optional[str] = Field(None, min_length=4)
    place_of_birth: Optional[str] = None
    nationality: Optional[str] = Field(None, min_length=2)
    residency_country: Optional[str] = Field(None, min_length=2)

    pep_original: Optional[bool] = None
    pep_override: Optional[PepOverride] = None
    pep_risk_score: Optional[int] = Field(None, ge=0, le=100)
    pep_role: Optional[str] = None
    pep_country: Optional[str] = None

    tin: Optional[str] = None
    tin_country: Optional[str] = None
    fatca_status: Optional[FatcaStatus] = None
    giin: Optional[str] = None
    has_us_indicia: Optional[bool] = None

    red_flags: Optional[list[str]] = None
    red_flags_notes: Optional[str] = None
    sanctions_status: Optional[SanctionsStatus] = None

    kyc_status: Optional[KycStatus] = None
    last_reviewed_at: Optional[str] = None
    next_review_due_at: Optional[str] = None

    @field_validator("tin")
    @classmethod
    def validate_tin(cls, v: Optional[str]) -> Optional[str]:
        return _check_tin(v)


class KycClient(KycClientBase):
    """Stored client record."""

    id: UUID
    is_pep: bool = False
    created_at: datetime
    updated_at: datetime


class KycClientResponse(KycClient):
    """Client record with its risk assessment, derived on read."""

    risk_score: int
    risk_level: RiskLevel
    edd_recommended: bool = False  # Enhanced Due Diligence, High risk only
