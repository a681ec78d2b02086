"""
Data records shared by analytics, queries and routers.
No logic lives here beyond id derivation.
"""
from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Difficulty = Literal["easy", "medium", "hard"]

_WHITESPACE = re.compile(r"\s+")


def figure_id(name: str) -> str:
    """Stable id for a person, e.g. 'Julius Caesar' -> 'julius_caesar'."""
    return _WHITESPACE.sub("_", name.strip().lower())


class HistoricalFigure(BaseModel):
    """
    One person placed on the timeline.

    Years are signed: negative is BCE. `contemporaries` is a display hint
    only, overlap is always recomputed from the year range.
    """
    model_config = ConfigDict(frozen=True)

    id:                str
    name:              str
    birth_year:        int
    death_year:        int
    short_description: str       = ""
    image_url:         str       = ""
    contemporaries:    list[str] = Field(default_factory=list)

    @classmethod
    def from_name(cls, name: str, birth_year: int, death_year: int, **extra) -> "HistoricalFigure":
        return cls(id=figure_id(name), name=name, birth_year=birth_year, death_year=death_year, **extra)


class ChainAnalysis(BaseModel):
    target_a:            HistoricalFigure
    target_b:            HistoricalFigure
    connected_figures:   set[str]
    unconnected_figures: set[str]
    is_complete:         bool
    chain_length:        int
    shortest_path:       list[HistoricalFigure]
