"""
Target pair resolution — network I/O through the biography lookup.
"""
from __future__ import annotations

import asyncio
import logging
import random
from typing import Optional, Protocol

from analytics.targets import DEFAULT_TARGETS, meets_difficulty, order_targets, pick_names
from models import Difficulty, HistoricalFigure

logger = logging.getLogger(__name__)

TargetPair = tuple[HistoricalFigure, HistoricalFigure]


class BiographyLookup(Protocol):
    async def get_person(self, name: str) -> Optional[HistoricalFigure]: ...


async def _resolve_pair(lookup: BiographyLookup, name_a: str, name_b: str) -> Optional[TargetPair]:
    fig_a, fig_b = await asyncio.gather(lookup.get_person(name_a), lookup.get_person(name_b))
    if fig_a is None or fig_b is None:
        return None
    return fig_a, fig_b


async def select_random_targets(
    lookup: BiographyLookup,
    difficulty: Difficulty = "medium",
    rng: Optional[random.Random] = None,
    max_attempts: int = 10,
) -> Optional[TargetPair]:
    """
    Two distinct, resolvable figures whose birth-year gap fits `difficulty`,
    earliest first. None after `max_attempts` misses.
    """
    rng = rng or random.Random()
    for attempt in range(1, max_attempts + 1):
        name_a, name_b = pick_names(difficulty, rng)
        logger.debug("Target attempt %d/%d: %s / %s", attempt, max_attempts, name_a, name_b)

        pair = await _resolve_pair(lookup, name_a, name_b)
        if pair is None:
            logger.info("Could not resolve %s or %s, retrying", name_a, name_b)
            continue

        fig_a, fig_b = pair
        gap = abs(fig_a.birth_year - fig_b.birth_year)
        if fig_a.id != fig_b.id and meets_difficulty(gap, difficulty):
            target_a, target_b = order_targets(fig_a, fig_b)
            logger.info("Selected targets %s and %s (gap %d, %s)", target_a.name, target_b.name, gap, difficulty)
            return target_a, target_b
        logger.debug("Gap %d does not fit %s, retrying", gap, difficulty)

    logger.error("No suitable targets after %d attempts", max_attempts)
    return None


async def select_default_targets(lookup: BiographyLookup) -> Optional[TargetPair]:
    pair = await _resolve_pair(lookup, *DEFAULT_TARGETS)
    if pair is None:
        logger.error("Default targets %s could not be resolved", DEFAULT_TARGETS)
    return pair
