"""
KYC client API routes.

Provides CRUD operations for client records plus the PEP
"Calculate" action and the per-client risk breakdown.
"""

from typing import Any, Optional
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from kyclens.api.deps import Clients
from kyclens.fincrime.risk_scoring import RiskLevel
from kyclens.schemas.client import (
    KycClientCreate,
    KycClientResponse,
    KycClientUpdate,
    KycStatus,
)

router = APIRouter()


class PaginatedClientsResponse(BaseModel):
    """Paginated clients response."""

    items: list[KycClientResponse]
    total: int
    page: int
    limit: int


class PepEstimateResponse(BaseModel):
    """Client record after a PEP estimate, with the estimate itself."""

    client: KycClientResponse
    score: int
    original_pep: bool
    factors: list[str]


def _not_found() -> HTTPException:
    return HTTPException(status_code=404, detail="Client not found")


@router.get("", response_model=PaginatedClientsResponse)
async def list_clients(
    clients: Clients,
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(20, ge=1, le=200, description="Items per page"),
    q: Optional[str] = Query(None, description="Search name, ID, TIN, nationality, residency"),
    status: Optional[KycStatus] = Query(None, description="Filter by KYC status"),
    risk_level: Optional[RiskLevel] = Query(None, description="Filter by risk level"),
):
    """List clients with pagination and filters, most recently updated first."""
    results = clients.list_clients(query=q, kyc_status=status, risk_level=risk_level)

    start = (page - 1) * limit
    items = [clients.to_response(c) for c in results[start:start + limit]]

    return PaginatedClientsResponse(
        items=items,
        total=len(results),
        page=page,
        limit=limit,
    )


@router.post("", response_model=KycClientResponse, status_code=201)
async def create_client(data: KycClientCreate, clients: Clients):
    """Create a client record."""
    client = clients.create_client(data)
    return clients.to_response(client)


@router.get("/stats")
async def client_statistics(clients: Clients) -> dict[str, Any]:
    """Counts by KYC status and risk level."""
    return clients.get_statistics()


@router.get("/{client_id}", response_model=KycClientResponse)
async def get_client(client_id: UUID, clients: Clients):
    """Get client by ID."""
    client = clients.get_client(client_id)
    if not client:
        raise _not_found()
    return clients.to_response(client)


@router.put("/{client_id}", response_model=KycClientResponse)
async def update_client(client_id: UUID, data: KycClientUpdate, clients: Clients):
    """
    Update a client record.

    Only fields present in the body are changed. The final PEP flag
    is re-resolved after every update.
    """
    client = clients.update_client(client_id, data)
    if not client:
        raise _not_found()
    return clients.to_response(client)


@router.delete("/{client_id}")
async def delete_client(client_id: UUID, clients: Clients) -> dict[str, bool]:
    """Delete a client record."""
    if not clients.delete_client(client_id):
        raise _not_found()
    return {"ok": True}


@router.post("/{client_id}/pep-estimate", response_model=PepEstimateResponse)
async def estimate_client_pep(client_id: UUID, clients: Clients):
    """
    Run PEP exposure estimation for a client.

    Stores the estimated flag and score on the record and resolves
    the final PEP flag against the client's override.
    """
    outcome = clients.calculate_pep(client_id)
    if not outcome:
        raise _not_found()

    client, estimate = outcome
    return PepEstimateResponse(
        client=clients.to_response(client),
        score=estimate.score,
        original_pep=estimate.original_pep,
        factors=estimate.factors,
    )


@router.get("/{client_id}/risk")
async def get_client_risk(client_id: UUID, clients: Clients) -> dict[str, Any]:
    """Risk score breakdown for a client."""
    client = clients.get_client(client_id)
    if not client:
        raise _not_found()
    return clients.assess_risk(client).to_dict()
