"""
KYC client record management.
"""

from kyclens.clients.manager import ClientManager, scoring_input_for

__all__ = [
    "ClientManager",
    "scoring_input_for",
]
