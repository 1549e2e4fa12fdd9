"""
FastAPI dependencies for the API.

Provides the client manager and scoring components created at startup.
"""

from typing import Annotated

from fastapi import Depends, Request

from kyclens.clients.manager import ClientManager
from kyclens.fincrime.pep import PepExposureEstimator
from kyclens.fincrime.risk_scoring import OverallRiskScorer


def get_client_manager(request: Request) -> ClientManager:
    """Get the client manager stored during app startup."""
    return request.app.state.client_manager


def get_risk_scorer(request: Request) -> OverallRiskScorer:
    return request.app.state.client_manager.risk_scorer


def get_pep_estimator(request: Request) -> PepExposureEstimator:
    return request.app.state.client_manager.pep_estimator


# Type aliases for dependency injection
Clients = Annotated[ClientManager, Depends(get_client_manager)]
RiskScorer = Annotated[OverallRiskScorer, Depends(get_risk_scorer)]
PepEstimator = Annotated[PepExposureEstimator, Depends(get_pep_estimator)]
