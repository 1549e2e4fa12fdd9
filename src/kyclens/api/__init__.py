"""
API module for KYC Lens.

Provides REST API routes for:
- KYC client record maintenance
- Risk and PEP scoring
"""
