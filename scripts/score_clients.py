#!/usr/bin/env python3
"""
Score a batch of KYC client records from a JSON file.

For each record:
- Validates it against the client schema
- Optionally re-estimates PEP exposure from birth and residency
- Resolves the final PEP flag from the estimate and override
- Computes the overall risk score and level

Prints a summary by risk level and writes per-client results.
"""

import argparse
import json
import sys
from collections import Counter
from pathlib import Path

from pydantic import ValidationError

from kyclens.clients.manager import ClientManager
from kyclens.fincrime.jurisdictions import (
    DEFAULT_PEP_EXPOSURE_COUNTRIES,
    ExposureListError,
    load_exposure_countries,
)
from kyclens.fincrime.pep import PepExposureEstimator
from kyclens.schemas.client import KycClientCreate

DEFAULT_OUTPUT_PATH = Path("data/client_risk_scores.json")


def score_records(
    records: list[dict],
    manager: ClientManager,
    estimate_pep: bool = False,
) -> tuple[list[dict], list[str]]:
    """Score records, returning results and error messages for skipped ones."""
    results = []
    errors = []

    for i, record in enumerate(records):
        try:
            data = KycClientCreate.model_validate(record)
        except ValidationError as e:
            errors.append(f"Record {i}: {e.error_count()} validation error(s)")
            continue

        client = manager.create_client(data)
        if estimate_pep:
            client, _ = manager.calculate_pep(client.id)
        risk = manager.assess_risk(client)

        results.append({
            "full_name": client.full_name,
            "is_pep": client.is_pep,
            "risk_score": risk.score,
            "risk_level": risk.level.value,
            "factors": [f.name for f in risk.factors],
        })

    return results, errors


def main():
    parser = argparse.ArgumentParser(description="Score KYC client records")
    parser.add_argument("input", type=Path, help="JSON file with an array of client records")
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT_PATH, help="Where to write results")
    parser.add_argument("--exposure-file", type=Path, help="PEP exposure jurisdiction list (JSON or text)")
    parser.add_argument(
        "--estimate-pep",
        action="store_true",
        help="Re-estimate the original PEP flag from birth and residency before scoring",
    )
    args = parser.parse_args()

    if not args.input.exists():
        print(f"Error: Input not found at {args.input}")
        return 1

    try:
        countries = (
            load_exposure_countries(args.exposure_file)
            if args.exposure_file
            else DEFAULT_PEP_EXPOSURE_COUNTRIES
        )
    except ExposureListError as e:
        print(f"Error: {e}")
        return 1

    try:
        with open(args.input) as f:
            records = json.load(f)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input}: {e}")
        return 1

    if not isinstance(records, list):
        print(f"Error: {args.input} must contain a JSON array of client records")
        return 1

    manager = ClientManager(pep_estimator=PepExposureEstimator(countries))
    results, errors = score_records(records, manager, estimate_pep=args.estimate_pep)

    print("=" * 60)
    print("CLIENT RISK SCORING")
    print("=" * 60)
    print(f"Scored: {len(results)}  Skipped: {len(errors)}")

    level_counts = Counter(r["risk_level"] for r in results)
    for level in ("High", "Medium", "Low"):
        print(f"  {level:<8} {level_counts.get(level, 0)}")

    for message in errors:
        print(f"  ! {message}")

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with open(args.output, "w") as f:
        json.dump(results, f, indent=2, ensure_ascii=False)
    print(f"\nResults written to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
