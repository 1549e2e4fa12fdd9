"""
Client record management.

Stores KYC client records and runs the scoring pipeline on them:
- PEP resolution on every write of the estimated flag or override
- PEP exposure estimation on demand
- Risk assessment derived on every read
"""

import logging
import threading
from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from kyclens.fincrime.pep import (
    PepEstimateInput,
    PepEstimateResult,
    PepExposureEstimator,
    resolve_final_pep,
)
from kyclens.fincrime.risk_scoring import (
    OverallRiskScorer,
    RiskLevel,
    RiskResult,
    ScoringInput,
)
from kyclens.schemas.client import (
    KycClient,
    KycClientCreate,
    KycClientResponse,
    KycClientUpdate,
    KycStatus,
)

logger = logging.getLogger(__name__)

# Fields that may be cleared with an explicit null on update
NULLABLE_FIELDS = {"tin"}


def scoring_input_for(client: KycClient) -> ScoringInput:
    """Build risk scorer input from a client record."""
    return ScoringInput(
        is_pep=client.is_pep,
        fatca_status=client.fatca_status,
        has_us_indicia=client.has_us_indicia,
        red_flag_count=len(client.red_flags),
        sanctions_status=client.sanctions_status,
        tin_present=bool(client.tin),
    )


class ClientManager:
    """
    Manages KYC client records.

    In production, this would integrate with a database.
    This implementation keeps records in memory.
    """

    def __init__(
        self,
        risk_scorer: Optional[OverallRiskScorer] = None,
        pep_estimator: Optional[PepExposureEstimator] = None,
    ):
        self.risk_scorer = risk_scorer or OverallRiskScorer()
        self.pep_estimator = pep_estimator or PepExposureEstimator()

        self._clients: dict[UUID, KycClient] = {}
        self._lock = threading.Lock()
        self._seed_lock = threading.Lock()
        self._seeded = False

    def seed_demo_clients(self) -> int:
        """Load demo records once. Returns count loaded."""
        from kyclens.clients.seed import DEMO_CLIENTS

        # Separate lock: create_client takes self._lock
        with self._seed_lock:
            if self._seeded:
                return 0
            for data in DEMO_CLIENTS:
                self.create_client(data)
            self._seeded = True
        return len(DEMO_CLIENTS)

    def create_client(self, data: KycClientCreate) -> KycClient:
        """
        Create a client record.

        The final PEP flag is resolved from the estimated flag and override.

        Args:
            data: Validated client input

        Returns:
            Stored client record
        """
        now = datetime.utcnow()
        client = KycClient(
            **data.model_dump(),
            id=uuid4(),
            is_pep=resolve_final_pep(data.pep_original, data.pep_override),
            created_at=now,
            updated_at=now,
        )

        with self._lock:
            self._clients[client.id] = client

        logger.info(f"Created client {client.id}: {client.full_name}")

        return client

    def get_client(self, client_id: UUID) -> Optional[KycClient]:
        """Get client by ID."""
        return self._clients.get(client_id)

    def update_client(
        self,
        client_id: UUID,
        data: KycClientUpdate,
    ) -> Optional[KycClient]:
        """
        Apply a partial update to a client record.

        Args:
            client_id: Client to update
            data: Fields to change; unset fields are kept

        Returns:
            Updated record, or None if the client does not exist
        """
        changes = {
            key: value
            for key, value in data.model_dump(exclude_unset=True).items()
            if value is not None or key in NULLABLE_FIELDS
        }

        with self._lock:
            existing = self._clients.get(client_id)
            if existing is None:
                return None

            merged = existing.model_dump()
            merged.update(changes)
            merged["is_pep"] = resolve_final_pep(
                merged["pep_original"], merged["pep_override"]
            )
            merged["updated_at"] = datetime.utcnow()

            client = KycClient.model_validate(merged)
            self._clients[client_id] = client

        logger.info(f"Updated client {client_id}: {sorted(changes)}")

        return client

    def delete_client(self, client_id: UUID) -> bool:
        """Delete a client record. Returns True if it existed."""
        with self._lock:
            removed = self._clients.pop(client_id, None)

        if removed is not None:
            logger.info(f"Deleted client {client_id}")
        return removed is not None

    def calculate_pep(
        self,
        client_id: UUID,
    ) -> Optional[tuple[KycClient, PepEstimateResult]]:
        """
        Estimate PEP exposure from the stored jurisdictions.

        Writes the estimated flag and score to the record and resolves
        the final PEP flag against the current override.

        Returns:
            (updated record, estimate), or None if the client does not exist
        """
        with self._lock:
            existing = self._clients.get(client_id)
            if existing is None:
                return None

            estimate = self.pep_estimator.estimate(PepEstimateInput(
                place_of_birth=existing.place_of_birth,
                residency_country=existing.residency_country,
            ))

            client = existing.model_copy(update={
                "pep_original": estimate.original_pep,
                "pep_risk_score": min(estimate.score, 100),
                "is_pep": resolve_final_pep(estimate.original_pep, existing.pep_override),
                "updated_at": datetime.utcnow(),
            })
            self._clients[client_id] = client

        logger.info(
            f"PEP estimate for client {client_id}: score={estimate.score} "
            f"original_pep={estimate.original_pep} is_pep={client.is_pep}"
        )

        return client, estimate

    def assess_risk(self, client: KycClient) -> RiskResult:
        """Score a client record from its current fields."""
        return self.risk_scorer.score(scoring_input_for(client))

    def to_response(self, client: KycClient) -> KycClientResponse:
        """Attach the derived risk assessment to a record."""
        risk = self.assess_risk(client)
        return KycClientResponse(
            **client.model_dump(),
            risk_score=risk.score,
            risk_level=risk.level,
            edd_recommended=risk.level == RiskLevel.HIGH,
        )

    def list_clients(
        self,
        query: Optional[str] = None,
        kyc_status: Optional[KycStatus] = None,
        risk_level: Optional[RiskLevel] = None,
    ) -> list[KycClient]:
        """
        List clients with filters, most recently updated first.

        Args:
            query: Case-insensitive text matched against name, ID, TIN,
                nationality and residency
            kyc_status: Only clients with this review status
            risk_level: Only clients currently at this risk level
        """
        needle = (query or "").strip().lower()
        results = []

        for client in list(self._clients.values()):
            if kyc_status and client.kyc_status != kyc_status:
                continue
            if risk_level and self.assess_risk(client).level != risk_level:
                continue
            if needle:
                haystack = [
                    client.full_name,
                    str(client.id),
                    client.tin or "",
                    client.nationality,
                    client.residency_country,
                ]
                if not any(needle in value.lower() for value in haystack):
                    continue

            results.append(client)

        results.sort(key=lambda c: c.updated_at, reverse=True)

        return results

    def get_statistics(self) -> dict[str, Any]:
        """Get client statistics."""
        clients = list(self._clients.values())

        by_status = {}
        by_risk_level = {}

        for client in clients:
            by_status[client.kyc_status.value] = by_status.get(client.kyc_status.value, 0) + 1
            level = self.assess_risk(client).level.value
            by_risk_level[level] = by_risk_level.get(level, 0) + 1

        return {
            "total": len(clients),
            "pep": sum(1 for c in clients if c.is_pep),
            "by_status": by_status,
            "by_risk_level": by_risk_level,
        }
