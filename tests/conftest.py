"""
Pytest configuration and shared fixtures for KYC Lens tests.
"""

import pytest
from fastapi.testclient import TestClient

from kyclens.clients.manager import ClientManager
from kyclens.config import Settings
from kyclens.fincrime.pep import PepExposureEstimator
from kyclens.fincrime.risk_scoring import (
    FatcaStatus,
    OverallRiskScorer,
    SanctionsStatus,
)
from kyclens.main import create_app
from kyclens.schemas.client import KycClientCreate


@pytest.fixture
def risk_scorer() -> OverallRiskScorer:
    """Create an overall risk scorer for testing."""
    return OverallRiskScorer()


@pytest.fixture
def pep_estimator() -> PepExposureEstimator:
    """Create a PEP estimator with the demo exposure list."""
    return PepExposureEstimator()


@pytest.fixture
def client_manager() -> ClientManager:
    """Create an empty client manager."""
    return ClientManager()


@pytest.fixture
def seeded_manager() -> ClientManager:
    """Create a client manager holding the demo records."""
    manager = ClientManager()
    manager.seed_demo_clients()
    return manager


@pytest.fixture
def sample_client_data() -> KycClientCreate:
    """Create a low-risk client input."""
    return KycClientCreate(
        full_name="Anna Andersson",
        date_of_birth="1980-01-01",
        place_of_birth="Germany",
        nationality="Germany",
        residency_country="Germany",
        tin="DE-123456789",
        tin_country="Germany",
        fatca_status=FatcaStatus.NON_US_PERSON,
        sanctions_status=SanctionsStatus.CLEARED,
    )


@pytest.fixture
def api_settings() -> Settings:
    """Settings for API tests."""
    return Settings(
        environment="development",
        seed_demo_data=True,
        rate_limit_enabled=False,
        pep_exposure_countries=[],
        pep_exposure_file=None,
    )


@pytest.fixture
def api_client(api_settings):
    """Test client over a freshly built app."""
    app = create_app(api_settings)
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
