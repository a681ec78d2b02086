"""
Shared helpers for the contemporaries test suite.

Everything here is synthetic: figures are built in memory and the biography
lookup is replaced by a dict-backed fake, so no network is required.
"""
import sys
from pathlib import Path
from typing import Callable, Optional

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

from analytics.targets import ANCIENT_FIGURES, MEDIEVAL_FIGURES, MODERN_FIGURES, RENAISSANCE_FIGURES  # noqa: E402
from models import HistoricalFigure  # noqa: E402


def make_figure(name: str, birth: int, death: int, **extra) -> HistoricalFigure:
    return HistoricalFigure.from_name(name, birth, death, **extra)


class FakeLookup:
    """Stands in for WikipediaLookup; records every name asked for."""

    def __init__(self, figures: Optional[dict[str, HistoricalFigure]] = None,
                 fallback: Optional[Callable[[str], Optional[HistoricalFigure]]] = None):
        self.figures  = dict(figures or {})
        self.fallback = fallback
        self.calls: list[str] = []

    def add(self, *figures: HistoricalFigure) -> "FakeLookup":
        for f in figures:
            self.figures[f.name] = f
        return self

    async def get_person(self, name: str) -> Optional[HistoricalFigure]:
        self.calls.append(name)
        if name in self.figures:
            return self.figures[name]
        return self.fallback(name) if self.fallback else None

    async def search(self, query: str, limit: int = 10) -> list[dict]:
        hits = [n for n in self.figures if query.lower() in n.lower()]
        return [{"pageid": i, "title": n, "snippet": "", "thumbnail": None} for i, n in enumerate(hits[:limit])]


# Era -> (birth, death) used for every name in that pool.
ERA_YEARS = [
    (ANCIENT_FIGURES,     (-300, -240)),
    (MEDIEVAL_FIGURES,    (1000, 1060)),
    (RENAISSANCE_FIGURES, (1500, 1560)),
    (MODERN_FIGURES,      (1850, 1910)),
]


def era_figure(name: str) -> Optional[HistoricalFigure]:
    for pool, (birth, death) in ERA_YEARS:
        if name in pool:
            return make_figure(name, birth, death)
    return None


@pytest.fixture
def era_lookup() -> FakeLookup:
    """Resolves every curated target name to its era's placeholder years."""
    return FakeLookup(fallback=era_figure)
