"""
Demo client records loaded into an empty store.
"""

from kyclens.fincrime.pep import PepOverride
from kyclens.fincrime.risk_scoring import FatcaStatus, SanctionsStatus
from kyclens.schemas.client import KycClientCreate, KycStatus

DEMO_CLIENTS = [
    KycClientCreate(
        full_name="Alice Johnson",
        date_of_birth="1985-04-12",
        place_of_birth="United States",
        nationality="United States",
        residency_country="United Kingdom",
        pep_original=False,
        pep_override=PepOverride.NONE,
        tin="123-45-6789",
        tin_country="United States",
        fatca_status=FatcaStatus.US_PERSON,
        has_us_indicia=True,
        red_flags=["Complex ownership structure"],
        sanctions_status=SanctionsStatus.CLEARED,
        kyc_status=KycStatus.APPROVED,
        last_reviewed_at="2025-06-15",
        next_review_due_at="2026-06-15",
    ),
    KycClientCreate(
        full_name="Mohammed Al Rahman",
        date_of_birth="1979-11-03",
        place_of_birth="Qatar",
        nationality="Qatar",
        residency_country="Qatar",
        pep_original=True,
        pep_override=PepOverride.NONE,
        pep_risk_score=35,
        pep_role="Senior government advisor",
        pep_country="Qatar",
        tin="QA-778899",
        tin_country="Qatar",
        fatca_status=FatcaStatus.NON_US_PERSON,
        red_flags=["Adverse media", "High-risk jurisdiction"],
        red_flags_notes="Negative media needs review and independent verification.",
        sanctions_status=SanctionsStatus.NONE,
        kyc_status=KycStatus.PENDING,
        last_reviewed_at="2025-07-01",
        next_review_due_at="2025-12-01",
    ),
    KycClientCreate(
        full_name="Chen Wei",
        date_of_birth="1990-02-28",
        place_of_birth="Singapore",
        nationality="Singapore",
        residency_country="Singapore",
        tin="SG-TIN-5566",
        tin_country="Singapore",
        fatca_status=FatcaStatus.EXEMPT,
        giin="A1B2C3.00000.LE.702",
        sanctions_status=SanctionsStatus.CLEARED,
        kyc_status=KycStatus.APPROVED,
        last_reviewed_at="2025-04-10",
        next_review_due_at="2026-04-10",
    ),
]
