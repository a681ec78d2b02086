"""
Offline chain check from the command line.

Resolves every name through the Wikipedia lookup, then runs the chain
analysis between the first and last name with everything in between as
the placed figures.

Usage:
    python3 connect.py "Alexander the Great" "Julius Caesar"
    python3 connect.py Socrates Cicero Augustus "Marcus Aurelius"
    python3 connect.py Plato Newton --json
"""
from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

BACKEND = Path(__file__).parent
sys.path.insert(0, str(BACKEND))

from analytics.chain import analyze_chain          # noqa: E402
from analytics.scoring import format_year_range, summarize_round  # noqa: E402
from models import ChainAnalysis, HistoricalFigure  # noqa: E402
from queries.biography import WikipediaLookup       # noqa: E402


async def resolve_all(names: list[str]) -> list[Optional[HistoricalFigure]]:
    async with WikipediaLookup() as lookup:
        return list(await asyncio.gather(*(lookup.get_person(n) for n in names)))


def print_analysis(analysis: ChainAnalysis, figures: list[HistoricalFigure]) -> None:
    for f in figures:
        print(f"  {f.name:<32} {format_year_range(f.birth_year, f.death_year)}")
    print()
    if not analysis.is_complete:
        print(f"No chain yet between {analysis.target_a.name} and {analysis.target_b.name}.")
        return
    print(" → ".join(f.name for f in analysis.shortest_path))
    summary = summarize_round(analysis, len(figures) - 2)
    print(f"Score {summary['score']} ({summary['rating']}), {summary['unused_figures']} unused")


# ── CLI ───────────────────────────────────────────────────────────────────────

def main() -> int:
    parser = argparse.ArgumentParser(description="Check a chain of contemporaries.")
    parser.add_argument("names", nargs="+", help="Target A, optional intermediates, target B")
    parser.add_argument("--json", action="store_true", help="Print the analysis as JSON")
    args = parser.parse_args()

    if len(args.names) < 2:
        parser.error("need at least two names")

    resolved = asyncio.run(resolve_all(args.names))
    missing = [n for n, f in zip(args.names, resolved) if f is None]
    if missing:
        print(f"Not found: {', '.join(missing)}", file=sys.stderr)
        return 1

    figures = [f for f in resolved if f is not None]
    analysis = analyze_chain(figures[0], figures[-1], figures)

    if args.json:
        print(json.dumps(analysis.model_dump(mode="json"), indent=2))
    else:
        print_analysis(analysis, figures)
    return 0


if __name__ == "__main__":
    sys.exit(main())
