"""
CLI to run the strategy intake engine.

- Reads the primary intake text from STDIN.
- Prints the intake analysis as JSON; with --brief also the campaign brief and
  drafting prompts.

Usage examples:
  echo "We are launching a new IOP program" | python -m northnode.tools.run_intake
  cat intake.txt | python -m northnode.tools.run_intake --ideas "LinkedIn series" --brief
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from typing import List, Optional

CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, "..", ".."))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from northnode.core.config import get_settings  # noqa: E402
from northnode.schemas.brief import BriefGenerationInput  # noqa: E402
from northnode.schemas.strategy import IntakeParams  # noqa: E402
from northnode.services.brief_generator import generate_campaign_brief  # noqa: E402
from northnode.services.drafting_prompts import (  # noqa: E402
    ProhibitedLanguageError,
    generate_drafting_prompts,
)
from northnode.services.intake_engine import analyze_intake  # noqa: E402


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Analyze campaign intake text from STDIN and print JSON.")
    parser.add_argument("--ideas", default="", help="Rough ideas / additional context.")
    parser.add_argument("--industry", default="", help="Organization type.")
    parser.add_argument("--audience", default="", help="Primary audience.")
    parser.add_argument("--goals", default="", help="Campaign goals.")
    parser.add_argument("--channel", action="append", default=[], help="Channel for the brief (repeatable).")
    parser.add_argument("--asset", action="append", default=[], help="Required asset for the brief (repeatable).")
    parser.add_argument("--brief", action="store_true", help="Also generate the brief and drafting prompts.")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    params = IntakeParams(
        intake_text=sys.stdin.read(),
        ideas_text=args.ideas,
        industry=args.industry,
        audience=args.audience,
        goals=args.goals,
    )
    analysis = analyze_intake(params)
    result = {"analysis": analysis.model_dump()}

    if args.brief:
        brief = generate_campaign_brief(
            BriefGenerationInput(
                analysis=analysis,
                channels=args.channel,
                assets=args.asset,
                engine_version=get_settings().brief_engine_version,
            )
        )
        try:
            prompts = generate_drafting_prompts(brief, analysis.primary_archetype, analysis.secondary_archetype)
        except ProhibitedLanguageError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 2
        result["brief"] = brief.model_dump()
        result["prompts"] = prompts.model_dump()

    print(json.dumps(result, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
