"""
API route modules.
"""

from kyclens.api.routes.clients import router as clients_router
from kyclens.api.routes.scoring import router as scoring_router

__all__ = [
    "clients_router",
    "scoring_router",
]
