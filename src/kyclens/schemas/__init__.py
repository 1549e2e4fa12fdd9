"""
Pydantic schemas for KYC client records.
"""

from kyclens.schemas.client import (
    KycClient,
    KycClientBase,
    KycClientCreate,
    KycClientResponse,
    KycClientUpdate,
    KycStatus,
)

__all__ = [
    "KycClient",
    "KycClientBase",
    "KycClientCreate",
    "KycClientResponse",
    "KycClientUpdate",
    "KycStatus",
]
