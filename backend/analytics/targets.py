"""
Target pair selection rules — pure functions only.

Targets are drawn from curated era pools of well-documented figures. The
difficulty decides which pair of eras, then the actual birth-year gap is
checked once both figures have been resolved.
"""
from __future__ import annotations

import random
from typing import Optional

from models import Difficulty, HistoricalFigure

ANCIENT_FIGURES = [
    "Alexander the Great", "Julius Caesar", "Cleopatra", "Aristotle", "Plato",
    "Socrates", "Augustus", "Hannibal", "Confucius", "Ramesses II",
    "Hammurabi", "Pericles", "Archimedes", "Herodotus", "Marcus Aurelius",
]

MEDIEVAL_FIGURES = [
    "Charlemagne", "Genghis Khan", "Saladin", "William the Conqueror",
    "Richard I of England", "Joan of Arc", "Marco Polo", "Dante Alighieri",
    "Thomas Aquinas", "Kublai Khan", "Eleanor of Aquitaine",
    "Frederick Barbarossa", "Akbar", "Suleiman the Magnificent",
]

RENAISSANCE_FIGURES = [
    "Leonardo da Vinci", "Michelangelo", "William Shakespeare",
    "Christopher Columbus", "Martin Luther", "Galileo Galilei",
    "Johannes Gutenberg", "Elizabeth I", "Isaac Newton", "René Descartes",
    "Nicolaus Copernicus", "Raphael", "Erasmus", "Niccolò Machiavelli",
]

MODERN_FIGURES = [
    "Napoleon", "George Washington", "Abraham Lincoln", "Queen Victoria",
    "Charles Darwin", "Karl Marx", "Thomas Edison", "Vincent van Gogh",
    "Marie Curie", "Albert Einstein", "Winston Churchill", "Mahatma Gandhi",
    "Franklin D. Roosevelt", "Pablo Picasso", "Nelson Mandela",
]

ERAS = [ANCIENT_FIGURES, MEDIEVAL_FIGURES, RENAISSANCE_FIGURES, MODERN_FIGURES]

DEFAULT_TARGETS = ("Alexander the Great", "Julius Caesar")

# Inclusive birth-year gap bounds; None means unbounded.
GAP_BOUNDS: dict[str, tuple[int, Optional[int]]] = {
    "easy":   (200, 700),
    "medium": (600, 1400),
    "hard":   (1200, None),
}


def eras_for_difficulty(difficulty: Difficulty, rng: random.Random) -> tuple[list[str], list[str]]:
    if difficulty == "easy":
        i = rng.randrange(len(ERAS) - 1)
        return ERAS[i], ERAS[i + 1]
    if difficulty == "medium":
        i = rng.randrange(len(ERAS) - 2)
        return ERAS[i], ERAS[i + 2]
    return ANCIENT_FIGURES, MODERN_FIGURES


def pick_names(difficulty: Difficulty, rng: random.Random) -> tuple[str, str]:
    era_a, era_b = eras_for_difficulty(difficulty, rng)
    return rng.choice(era_a), rng.choice(era_b)


def meets_difficulty(year_gap: int, difficulty: Difficulty) -> bool:
    low, high = GAP_BOUNDS.get(difficulty, (0, None))
    return year_gap >= low and (high is None or year_gap <= high)


def order_targets(a: HistoricalFigure, b: HistoricalFigure) -> tuple[HistoricalFigure, HistoricalFigure]:
    """Earliest-born first."""
    return (a, b) if a.birth_year < b.birth_year else (b, a)
