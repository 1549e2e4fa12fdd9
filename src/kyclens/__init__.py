"""
KYC Lens - KYC client maintenance service

Maintains Know-Your-Customer client records and scores them:
- Overall client risk from PEP, FATCA, red flag, sanctions and TIN signals
- PEP exposure from place of birth and residency jurisdictions
- Operator overrides of the PEP decision
"""

__version__ = "0.1.0"
