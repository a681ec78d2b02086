"""
Round scoring and display helpers — pure functions only.

Scoring is golf-style: the score is the number of intermediate figures on
the shortest chain, lower is better.
"""
from __future__ import annotations

from analytics.contemporaries import year_gap
from models import ChainAnalysis, Difficulty, HistoricalFigure

# (upper bound inclusive, label)
_RATINGS = [
    (3,  "excellent"),
    (6,  "good"),
    (10, "fair"),
]


def format_year(year: int) -> str:
    if year < 0:
        return f"{abs(year)} BCE"
    return f"{year} CE"


def format_year_range(birth_year: int, death_year: int) -> str:
    return f"{format_year(birth_year)} – {format_year(death_year)}"


def calculate_difficulty(a: HistoricalFigure, b: HistoricalFigure) -> Difficulty:
    gap = abs(b.birth_year - a.birth_year)
    if gap < 500:
        return "easy"
    if gap < 1000:
        return "medium"
    return "hard"


def score_rating(score: int) -> str:
    for bound, label in _RATINGS:
        if score <= bound:
            return label
    return "poor"


def summarize_round(analysis: ChainAnalysis, figures_added: int) -> dict:
    """
    Compact round summary for the UI.

    figures_added — figures the player placed, targets excluded
    """
    score = analysis.chain_length if analysis.is_complete else None
    return {
        "is_complete":      analysis.is_complete,
        "score":            score,
        "rating":           score_rating(score) if score is not None else None,
        "path":             [f.name for f in analysis.shortest_path],
        "figures_added":    figures_added,
        "unused_figures":   len(analysis.unconnected_figures),
        "difficulty":       calculate_difficulty(analysis.target_a, analysis.target_b),
        "target_gap_years": year_gap(analysis.target_a, analysis.target_b),
    }
