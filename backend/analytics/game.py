"""
Game session state — pure, in-memory, no I/O.

A session owns the figure set for the current round. The two targets are
always members; everything else is appended by the player and never
mutated. A new round resets the set to just the new targets.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from analytics.chain import analyze_chain, would_improve_chain
from analytics.scoring import summarize_round
from models import ChainAnalysis, Difficulty, HistoricalFigure


@dataclass
class GameSession:
    id:         str
    target_a:   HistoricalFigure
    target_b:   HistoricalFigure
    difficulty: Difficulty = "medium"
    figures:    list[HistoricalFigure] = field(default_factory=list)
    round:      int = 1

    def __post_init__(self):
        if not self.figures:
            self.figures = self._initial_figures(self.target_a, self.target_b)

    @staticmethod
    def _initial_figures(a: HistoricalFigure, b: HistoricalFigure) -> list[HistoricalFigure]:
        return [a] if a.id == b.id else [a, b]

    def has_figure(self, figure_id: str) -> bool:
        return any(f.id == figure_id for f in self.figures)

    def add_figure(self, figure: HistoricalFigure) -> bool:
        """Append `figure` unless its id is already placed. Returns whether it was added."""
        if self.has_figure(figure.id):
            return False
        self.figures.append(figure)
        return True

    def new_round(self, target_a: HistoricalFigure, target_b: HistoricalFigure) -> None:
        self.target_a = target_a
        self.target_b = target_b
        self.figures  = self._initial_figures(target_a, target_b)
        self.round   += 1

    @property
    def figures_added(self) -> int:
        targets = {self.target_a.id, self.target_b.id}
        return sum(1 for f in self.figures if f.id not in targets)

    def analysis(self) -> ChainAnalysis:
        return analyze_chain(self.target_a, self.target_b, list(self.figures))

    def would_improve(self, candidate: HistoricalFigure) -> bool:
        """False for a figure already placed, otherwise the chain improvement check."""
        if self.has_figure(candidate.id):
            return False
        return would_improve_chain(candidate, self.target_a, self.target_b, list(self.figures))

    def state(self) -> dict:
        analysis = self.analysis()
        return {
            "id":         self.id,
            "round":      self.round,
            "difficulty": self.difficulty,
            "target_a":   self.target_a,
            "target_b":   self.target_b,
            "figures":    list(self.figures),
            "analysis":   analysis,
            "summary":    summarize_round(analysis, self.figures_added),
        }
