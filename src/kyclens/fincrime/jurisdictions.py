"""
Jurisdiction lists used for PEP exposure estimation.

The built-in list is a demo sample only. Deployments should supply
their own policy or FATF-derived list through configuration.
"""

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kyclens.config import Settings

logger = logging.getLogger(__name__)


DEFAULT_PEP_EXPOSURE_COUNTRIES = (
    "Russia",
    "Venezuela",
    "Nigeria",
    "Saudi Arabia",
    "Qatar",
    "China",
    "Iran",
    "North Korea",
    "Syria",
    "Myanmar",
)


class ExposureListError(ValueError):
    """Raised when an exposure list file cannot be used."""


def load_exposure_countries(path: Path) -> list[str]:
    """
    Load exposure countries from a file.

    Supports:
    - JSON files holding an array of strings
    - Plain text files with one country per line (# comments allowed)

    Args:
        path: Path to the list file

    Returns:
        Stripped, non-empty country names in file order

    Raises:
        ExposureListError: If the file is missing, malformed or empty
    """
    path = Path(path)
    if not path.is_file():
        raise ExposureListError(f"Exposure list not found: {path}")

    text = path.read_text(encoding="utf-8")

    if path.suffix.lower() == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ExposureListError(f"Invalid JSON in exposure list {path}: {e}") from e
        if not isinstance(data, list) or not all(isinstance(c, str) for c in data):
            raise ExposureListError(f"Exposure list {path} must be a JSON array of strings")
        raw = data
    else:
        raw = [line for line in text.splitlines() if not line.strip().startswith("#")]

    countries = [c.strip() for c in raw if c.strip()]
    if not countries:
        raise ExposureListError(f"Exposure list {path} has no entries")

    logger.info(f"Loaded {len(countries)} exposure countries from {path}")
    return countries


def exposure_countries_from_settings(settings: "Settings") -> list[str]:
    """Resolve the exposure list a deployment is configured with."""
    if settings.pep_exposure_file:
        return load_exposure_countries(settings.pep_exposure_file)
    countries = [c.strip() for c in settings.pep_exposure_countries if c.strip()]
    if countries:
        return countries
    if settings.pep_exposure_countries:
        logger.warning("Configured exposure countries are all blank, using demo list")
    return list(DEFAULT_PEP_EXPOSURE_COUNTRIES)
