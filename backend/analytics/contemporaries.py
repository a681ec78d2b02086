"""
Contemporary relation — pure functions only.

Two figures are contemporaries when their closed [birth, death] ranges
overlap. Inverted ranges are compared as-is and never raise.
"""
from __future__ import annotations

from typing import Iterable

from models import HistoricalFigure


def are_contemporaries(a: HistoricalFigure, b: HistoricalFigure) -> bool:
    return a.birth_year <= b.death_year and b.birth_year <= a.death_year


def year_gap(a: HistoricalFigure, b: HistoricalFigure) -> int:
    """Years between the end of the earlier life and the start of the later one (0 if they overlap)."""
    if a.death_year < b.birth_year:
        return b.birth_year - a.death_year
    if b.death_year < a.birth_year:
        return a.birth_year - b.death_year
    return 0


def is_connected_to_chain(candidate: HistoricalFigure, chain: Iterable[HistoricalFigure]) -> bool:
    return any(are_contemporaries(candidate, f) for f in chain)
