"""
CLI to validate marketing copy against the governance policies.

- Reads content from STDIN.
- Optionally loads a governance profile config (and campaign config) from JSON files.
- Prints JSON with fields: {"violations": [...], "score": {...}}.

Usage examples:
  cat post.txt | python -m northnode.tools.run_validation
  cat post.txt | python -m northnode.tools.run_validation --profile profile.json --campaign campaign.json
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from typing import Any, List, Optional

# Ensure the 'backend' directory is on sys.path so northnode imports resolve
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, "..", ".."))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from northnode.services.governance_engine import (  # noqa: E402
    normalize_campaign_config,
    normalize_profile_config,
    validate_content_with_config,
)
from northnode.services.scoring import calculate_compliance_score  # noqa: E402


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Validate content from STDIN against governance policies and print JSON."
    )
    parser.add_argument("--profile", help="Path to a governance profile config JSON file.")
    parser.add_argument("--campaign", help="Path to a campaign config JSON file.")
    return parser.parse_args(argv)


def _load_json(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entrypoint for the CLI.

    Returns:
        Process exit code (0 for success, non-zero for error).
    """
    args = _parse_args(argv)
    try:
        profile = normalize_profile_config(_load_json(args.profile) if args.profile else None)
        campaign = normalize_campaign_config(_load_json(args.campaign)) if args.campaign else None
        content = sys.stdin.read()

        violations = validate_content_with_config(content, profile, campaign)
        score = calculate_compliance_score(violations)

        result = {
            "violations": [v.model_dump() for v in violations],
            "score": score.model_dump(exclude={"violations"}),
        }
        print(json.dumps(result, ensure_ascii=False))
        return 0
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
